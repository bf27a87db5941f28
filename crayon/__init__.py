# __init__.py

from .logger import Logger
from .style import (
    Color, Named, Fixed, Indexed, Rgb, Style, StyledString,
    BLACK, RED, GREEN, YELLOW, BLUE, PURPLE, MAGENTA, CYAN, WHITE, NAMED_COLORS
)
from .screen import TerminalSize, query_screen_size

__all__ = [
    "Color", "Named", "Fixed", "Indexed", "Rgb", "Style", "StyledString",
    "BLACK", "RED", "GREEN", "YELLOW", "BLUE", "PURPLE", "MAGENTA", "CYAN", "WHITE",
    "NAMED_COLORS", "TerminalSize", "query_screen_size", "Logger",
]
