# style/definitions.py

from typing import Tuple

ESC = '\x1b'
FMT = lambda x: f'{ESC}[{x}m'  # Core formatting utility
RESET = FMT('0')

# Base hues in SGR order: Black=30/40 ... White=37/47
NAMED_HUES: Tuple[str, ...] = (
    'BLACK', 'RED', 'GREEN', 'YELLOW', 'BLUE', 'PURPLE', 'CYAN', 'WHITE'
)

# Attribute flags in emission order
ATTRIBUTES: Tuple[Tuple[str, str], ...] = (
    ('bold', '1'),
    ('dimmed', '2'),
    ('italic', '3'),
    ('underline', '4'),
    ('blink', '5'),
    ('reverse', '6'),
    ('hidden', '7'),
)

FOREGROUND_BASE = 30
BACKGROUND_BASE = 40
FOREGROUND_EXTENDED = '38'
BACKGROUND_EXTENDED = '48'
PALETTE_SELECTOR = '5'
TRUECOLOR_SELECTOR = '2'

# prompt_toolkit names for the base hues
PT_NAMES = {
    'BLACK': 'ansiblack',
    'RED': 'ansired',
    'GREEN': 'ansigreen',
    'YELLOW': 'ansiyellow',
    'BLUE': 'ansiblue',
    'PURPLE': 'ansimagenta',
    'CYAN': 'ansicyan',
    'WHITE': 'ansigray',
}
