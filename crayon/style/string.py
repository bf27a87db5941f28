# style/string.py

from dataclasses import dataclass, field
from io import StringIO
from rich.text import Text
from prompt_toolkit.formatted_text import FormattedText
from .engine import Style, Writer


@dataclass(frozen=True)
class StyledString:
    """
    A string coupled with a Style in order to display it in a terminal.

    `str()` gives the escape codes around the text. Without an explicit
    style the text passes through unchanged.
    """
    text: str
    style: Style = field(default_factory=Style)

    @classmethod
    def from_text(cls, text: str) -> 'StyledString':
        return cls(text)

    def write_to(self, out: Writer) -> None:
        """Write prefix, text and suffix to `out`. Write errors propagate."""
        self.style.write_prefix(out)
        out.write(self.text)
        self.style.write_suffix(out)

    def __str__(self) -> str:
        buf = StringIO()
        self.write_to(buf)
        return buf.getvalue()

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)

    def __len__(self) -> int:
        """Visible length, excluding escape codes."""
        return len(self.text)

    def __rich__(self) -> Text:
        return Text(self.text, style=self.style.to_rich())

    def __pt_formatted_text__(self):
        return FormattedText([(self.style.to_prompt_toolkit(), self.text)])
