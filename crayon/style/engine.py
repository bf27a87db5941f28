# style/engine.py

from dataclasses import dataclass, replace
from typing import List, Optional, Protocol
from rich.style import Style as RichStyle
from .color import Color
from .definitions import ATTRIBUTES, FMT, RESET


class Writer(Protocol):
    """Anything text can be written into (a stream, StringIO, ...)."""
    def write(self, text: str) -> object: ...


@dataclass(frozen=True)
class Style:
    """
    A set of colors and attributes applied to a string.

    Every builder method returns a new Style with one field changed; the
    receiver is never modified. Attributes can only be switched on, so to
    drop one start again from `Style.new()`.
    """
    fg: Optional[Color] = None
    bg: Optional[Color] = None
    is_bold: bool = False
    is_dimmed: bool = False
    is_italic: bool = False
    is_underline: bool = False
    is_blink: bool = False
    is_reverse: bool = False
    is_hidden: bool = False

    def __post_init__(self):
        for color in (self.fg, self.bg):
            if color is not None:
                _require_color(color)

    @classmethod
    def new(cls) -> 'Style':
        """Create a Style without any formatting."""
        return cls()

    def paint(self, text: str):
        """Apply the style to `text`, yielding a StyledString."""
        from .string import StyledString
        return StyledString(text, self)

    def foreground(self, color: Color) -> 'Style':
        return replace(self, fg=color)

    def background(self, color: Color) -> 'Style':
        return replace(self, bg=color)

    def bold(self) -> 'Style': return replace(self, is_bold=True)
    def dimmed(self) -> 'Style': return replace(self, is_dimmed=True)
    def italic(self) -> 'Style': return replace(self, is_italic=True)
    def underline(self) -> 'Style': return replace(self, is_underline=True)
    def blink(self) -> 'Style': return replace(self, is_blink=True)
    def reverse(self) -> 'Style': return replace(self, is_reverse=True)
    def hidden(self) -> 'Style': return replace(self, is_hidden=True)

    def is_plain(self) -> bool:
        """Return True if no colors or attributes are set."""
        return self == _PLAIN

    def codes(self) -> List[str]:
        """
        Return the SGR codes for this style in emission order.

        Attributes come first (1-7), then the foreground, then the background.
        """
        codes = [code for name, code in ATTRIBUTES if getattr(self, f'is_{name}')]
        if self.fg is not None:
            codes.append(self.fg.foreground_code())
        if self.bg is not None:
            codes.append(self.bg.background_code())
        return codes

    def prefix(self) -> str:
        """Escape codes that go before the text; empty for a plain style."""
        if self.is_plain():
            return ''
        return FMT(';'.join(self.codes()))

    def suffix(self) -> str:
        """The reset code that goes after the text; empty for a plain style."""
        return '' if self.is_plain() else RESET

    def write_prefix(self, out: Writer) -> None:
        prefix = self.prefix()
        if prefix:
            out.write(prefix)

    def write_suffix(self, out: Writer) -> None:
        suffix = self.suffix()
        if suffix:
            out.write(suffix)

    def to_rich(self) -> RichStyle:
        """Return the equivalent Rich style."""
        return RichStyle(
            color=self.fg.to_rich() if self.fg else None,
            bgcolor=self.bg.to_rich() if self.bg else None,
            bold=self.is_bold or None,
            dim=self.is_dimmed or None,
            italic=self.is_italic or None,
            underline=self.is_underline or None,
            blink=self.is_blink or None,
            reverse=self.is_reverse or None,
            conceal=self.is_hidden or None,
        )

    def to_prompt_toolkit(self) -> str:
        """
        Return the equivalent prompt_toolkit style string, e.g.
        'bold fg:ansired bg:#1e1e1e'. prompt_toolkit has no dim attribute,
        so dimmed is not carried over.
        """
        parts = [name for name, _ in ATTRIBUTES
                 if name != 'dimmed' and getattr(self, f'is_{name}')]
        if self.fg is not None:
            parts.append(f'fg:{self.fg.to_prompt_toolkit()}')
        if self.bg is not None:
            parts.append(f'bg:{self.bg.to_prompt_toolkit()}')
        return ' '.join(parts)


_PLAIN = Style()


def _require_color(color) -> Color:
    if not isinstance(color, Color):
        raise TypeError(f"Expected a Color, got {type(color).__name__}")
    return color
