# style/__init__.py

from .color import (
    Color, Named, Fixed, Indexed, Rgb,
    BLACK, RED, GREEN, YELLOW, BLUE, PURPLE, MAGENTA, CYAN, WHITE, NAMED_COLORS
)
from .engine import Style
from .string import StyledString

__all__ = [
    'Color', 'Named', 'Fixed', 'Indexed', 'Rgb', 'Style', 'StyledString',
    'BLACK', 'RED', 'GREEN', 'YELLOW', 'BLUE', 'PURPLE', 'MAGENTA', 'CYAN', 'WHITE',
    'NAMED_COLORS',
]
