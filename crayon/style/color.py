# style/color.py

from abc import ABC, abstractmethod
from dataclasses import dataclass
from rich.color import Color as RichColor
from .definitions import (
    NAMED_HUES, FOREGROUND_BASE, BACKGROUND_BASE, FOREGROUND_EXTENDED,
    BACKGROUND_EXTENDED, PALETTE_SELECTOR, TRUECOLOR_SELECTOR, PT_NAMES
)


def _check_byte(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= 255:
        raise ValueError(f"{name} must be between 0 and 255, got {value}")
    return value


@dataclass(frozen=True)
class Color(ABC):
    """
    A terminal color usable as either foreground or background.

    The variants are closed: `Named` for the eight base hues, `Fixed` for the
    256-color palette and `Rgb` for true-color. Each variant renders its own
    SGR codes; everything else is shared here.
    """

    def _style(self, **flags):
        from .engine import Style
        return Style(fg=self, **flags)

    def paint(self, text: str):
        """Return `text` paired with a style that only sets this foreground."""
        from .string import StyledString
        return StyledString(text, self.normal())

    def normal(self):
        """Return a Style with the foreground set to this color."""
        return self._style()

    def on(self, background: 'Color'):
        """The same as `normal()`, but also sets the background color."""
        if not isinstance(background, Color):
            raise TypeError(f"background must be a Color, got {type(background).__name__}")
        return self._style(bg=background)

    def bold(self): return self._style(is_bold=True)
    def dimmed(self): return self._style(is_dimmed=True)
    def italic(self): return self._style(is_italic=True)
    def underline(self): return self._style(is_underline=True)
    def blink(self): return self._style(is_blink=True)
    def reverse(self): return self._style(is_reverse=True)
    def hidden(self): return self._style(is_hidden=True)

    @abstractmethod
    def foreground_code(self) -> str: ...

    @abstractmethod
    def background_code(self) -> str: ...

    @abstractmethod
    def to_rich(self) -> RichColor: ...

    def to_prompt_toolkit(self) -> str:
        """Return the color as a prompt_toolkit color name or hex value."""
        return self.to_rich().get_truecolor().hex


@dataclass(frozen=True)
class Named(Color):
    """One of the eight base hues; foreground 30-37, background 40-47."""
    hue: str

    def __post_init__(self):
        if self.hue not in NAMED_HUES:
            raise ValueError(f"Unknown hue '{self.hue}', expected one of {', '.join(NAMED_HUES)}")

    @property
    def number(self) -> int:
        return NAMED_HUES.index(self.hue)

    def foreground_code(self) -> str:
        return str(FOREGROUND_BASE + self.number)

    def background_code(self) -> str:
        return str(BACKGROUND_BASE + self.number)

    def to_rich(self) -> RichColor:
        return RichColor.from_ansi(self.number)

    def to_prompt_toolkit(self) -> str:
        return PT_NAMES[self.hue]


@dataclass(frozen=True)
class Fixed(Color):
    """
    A 256-color palette entry.

    0-7 mirror the named hues, 8-15 are their bright versions, 16-231 form a
    6x6x6 color cube and 232-255 are a grayscale ramp.
    """
    index: int

    def __post_init__(self):
        _check_byte('index', self.index)

    def foreground_code(self) -> str:
        return f"{FOREGROUND_EXTENDED};{PALETTE_SELECTOR};{self.index}"

    def background_code(self) -> str:
        return f"{BACKGROUND_EXTENDED};{PALETTE_SELECTOR};{self.index}"

    def to_rich(self) -> RichColor:
        return RichColor.from_ansi(self.index)


@dataclass(frozen=True)
class Rgb(Color):
    """A true-color value, each channel 0-255."""
    r: int
    g: int
    b: int

    def __post_init__(self):
        for name in ('r', 'g', 'b'):
            _check_byte(name, getattr(self, name))

    def foreground_code(self) -> str:
        return f"{FOREGROUND_EXTENDED};{TRUECOLOR_SELECTOR};{self.r};{self.g};{self.b}"

    def background_code(self) -> str:
        return f"{BACKGROUND_EXTENDED};{TRUECOLOR_SELECTOR};{self.r};{self.g};{self.b}"

    def to_rich(self) -> RichColor:
        return RichColor.from_rgb(self.r, self.g, self.b)

    def to_prompt_toolkit(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


Indexed = Fixed

BLACK = Named('BLACK')
RED = Named('RED')
GREEN = Named('GREEN')
YELLOW = Named('YELLOW')
BLUE = Named('BLUE')
PURPLE = Named('PURPLE')
CYAN = Named('CYAN')
WHITE = Named('WHITE')
MAGENTA = PURPLE

NAMED_COLORS = (BLACK, RED, GREEN, YELLOW, BLUE, PURPLE, CYAN, WHITE)
