# cli.py

import sys
import argparse
from typing import List, Optional

from rich.console import Console

from .logger import Logger
from .screen import query_screen_size
from .style import Style, Fixed, Rgb, RED, BLACK, BLUE, NAMED_COLORS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='crayon', description='Crayon terminal styling demo')
    parser.add_argument('-t', '--text', default='Hello world!',
        help='Text to paint')
    parser.add_argument('--rich', action='store_true',
        help='Render through a Rich console instead of raw escape codes')
    parser.add_argument('--enable-logging', action='store_true',
        help='Enable debug logging')
    parser.add_argument('--log-file',
        help='Log file path (use "-" for stdout)')
    return parser


def render_demo(text: str) -> List:
    """Return the sample lines shown by the demo."""
    return [
        RED.on(BLACK).blink().paint(text),
        Style.new().foreground(BLUE).italic().paint(text),
        *(color.paint(color.hue.lower()) for color in NAMED_COLORS),
        Fixed(220).on(Fixed(245)).paint('fixed 220 on 245'),
        Rgb(105, 245, 238).bold().paint('rgb(105, 245, 238)'),
    ]


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logger = Logger(__name__, args.enable_logging, args.log_file)

    lines = render_demo(args.text)
    if args.rich:
        console = Console(highlight=False)
        for line in lines:
            console.print(line)
    else:
        for line in lines:
            line.write_to(sys.stdout)
            sys.stdout.write('\n')
        sys.stdout.flush()

    size = query_screen_size()
    if size is None:
        logger.debug("Screen size unavailable")
        print("The screen size could not be determined.")
    else:
        columns, rows = size
        print(f"The screen size is {columns}x{rows}.")
    return 0
