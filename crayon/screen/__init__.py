# screen/__init__.py

import os
import sys
from dataclasses import dataclass
from typing import Optional

from ..logger import Logger

logger = Logger(__name__)


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions."""

    columns: int
    lines: int

    def __iter__(self):
        return iter((self.columns, self.lines))

    def __str__(self) -> str:
        return f"{self.columns}x{self.lines}"


def query_screen_size(fd: Optional[int] = None) -> Optional[TerminalSize]:
    """
    Ask the OS for the size of the terminal behind `fd` (stdout by default).

    Returns None when the stream is not a terminal, the query fails or the
    terminal reports a zero dimension.
    """
    try:
        if fd is None:
            fd = sys.stdout.fileno()
        if not os.isatty(fd):
            logger.debug(f"File descriptor {fd} is not a terminal")
            return None
        size = os.get_terminal_size(fd)
    except (OSError, ValueError, AttributeError) as e:
        logger.debug(f"Screen size query failed: {e}")
        return None

    if size.columns <= 0 or size.lines <= 0:
        logger.debug(f"Terminal reported an empty size {size.columns}x{size.lines}")
        return None
    return TerminalSize(columns=size.columns, lines=size.lines)


def width(fd: Optional[int] = None) -> Optional[int]:
    """Return the terminal width in columns, or None if unknown."""
    size = query_screen_size(fd)
    return size.columns if size else None


def height(fd: Optional[int] = None) -> Optional[int]:
    """Return the terminal height in rows, or None if unknown."""
    size = query_screen_size(fd)
    return size.lines if size else None


__all__ = ['TerminalSize', 'query_screen_size', 'width', 'height']
