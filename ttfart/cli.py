import logging
import os
import sys
from argparse import ArgumentParser, ArgumentTypeError, RawTextHelpFormatter
from functools import wraps
from os.path import abspath, dirname
from sys import exit

from . import VERSION
from .model import (
    DEFAULT_FILL,
    DEFAULT_FONT,
    DEFAULT_FONT_SIZE,
    DEFAULT_REFERENCE_CHAR,
    FontStyle,
    FontUnavailable,
    RenderRequest,
)
from .ttf import ttf_to_ascii

MAX_FONT_SIZE = 1000
MAX_MARGIN = 1000


def graceful_ctrlc(func):
    """
    Makes the decorated function exit with code 1 on CTRL+C.
    """

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except KeyboardInterrupt:
            exit(1)

    return wrapper


def bounded_int(minimum, maximum):
    def parse(value):
        try:
            number = int(value)
        except ValueError:
            raise ArgumentTypeError("'{}' is not a whole number".format(value))
        if not minimum <= number <= maximum:
            raise ArgumentTypeError(
                "{} is not between {} and {}".format(number, minimum, maximum)
            )
        return number

    return parse


def single_char(value):
    if len(value) != 1:
        raise ArgumentTypeError("'{}' is not a single character".format(value))
    return value


def font_style(value):
    try:
        return FontStyle.parse(value)
    except ValueError as exc:
        raise ArgumentTypeError(str(exc))


parser = ArgumentParser(
    prog="ttfart",
    description="""
    Renders TEXT with a TrueType/OpenType font and prints it as ASCII art.
    Every pixel touched by the font becomes FILL, everything else a space.""",
    epilog="""examples:
    ttfart Hello
    ttfart -f "DejaVu Sans Mono" -s 24 -S Bold -c '#' Hello
    ttfart -k -w M "fixed width"
    ttfart -t 3 -b 4 -l 1 -r 1 cropped
    ttfart -f ./MyFont.ttf -o banner.txt "from a file"
""",
    formatter_class=RawTextHelpFormatter,
)
parser.add_argument(
    "-s",
    "--font-size",
    type=bounded_int(1, MAX_FONT_SIZE),
    default=DEFAULT_FONT_SIZE,
    metavar="N",
    help="Font size in points, 1-{} (defaults to {})".format(
        MAX_FONT_SIZE, DEFAULT_FONT_SIZE
    ),
)
parser.add_argument(
    "-f",
    "--font",
    default=DEFAULT_FONT,
    metavar="FONT",
    help="Installed font family or path to an OTF/TTF file "
    '(defaults to "{}")'.format(DEFAULT_FONT),
)
parser.add_argument(
    "-S",
    "--font-style",
    type=font_style,
    default=FontStyle.Regular,
    metavar="STYLE",
    help="One of {} (defaults to Regular)".format(
        ", ".join(style.name for style in FontStyle)
    ),
)
parser.add_argument(
    "-c",
    "--fill",
    type=single_char,
    default=DEFAULT_FILL,
    metavar="CHAR",
    help="Character to draw ink with (defaults to '{}')".format(DEFAULT_FILL),
)
for short, edge in (("-l", "left"), ("-r", "right"), ("-t", "top"), ("-b", "bottom")):
    parser.add_argument(
        short,
        "--margin-{}".format(edge),
        type=bounded_int(0, MAX_MARGIN),
        default=0,
        metavar="N",
        help="Crop N pixels from the {} edge, 0-{} (defaults to 0)".format(
            edge, MAX_MARGIN
        ),
    )
parser.add_argument(
    "-k",
    "--no-kerning",
    action="store_true",
    help="Draw every character in a cell as wide as --reference-char "
    "instead of letting the font space them",
)
parser.add_argument(
    "-w",
    "--reference-char",
    type=single_char,
    default=DEFAULT_REFERENCE_CHAR,
    metavar="CHAR",
    help="Widest character to expect, sizes the cells with --no-kerning "
    "(defaults to '{}')".format(DEFAULT_REFERENCE_CHAR),
)
parser.add_argument(
    "-o",
    "--outfile",
    metavar="PATH",
    help="Write the result to PATH instead of stdout",
)
parser.add_argument(
    "-v",
    "--verbose",
    action="store_true",
    help="Log font resolution and rendering details to stderr",
)
parser.add_argument("text", help="TEXT to render")
parser.add_argument(
    "--version",
    action="version",
    version=f"%(prog)s {VERSION}",
    help="Show version and exit",
)


def request_from_args(args):
    return RenderRequest(
        args.text,
        font_name=args.font,
        font_size=args.font_size,
        font_style=args.font_style,
        fill=args.fill,
        margin_left=args.margin_left,
        margin_right=args.margin_right,
        margin_top=args.margin_top,
        margin_bottom=args.margin_bottom,
        kerning=not args.no_kerning,
        reference_char=args.reference_char,
    )


@graceful_ctrlc
def main(argv=None):
    args = parser.parse_args(argv)
    if not args.text.strip():
        parser.error("TEXT must not be empty")
    if "\n" in args.text:
        parser.error("TEXT must be a single line")

    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.outfile:
        if os.path.exists(args.outfile):
            sys.stderr.write("Error: File already exists: {}\n".format(args.outfile))
            exit(1)
        if not os.access(dirname(abspath(args.outfile)), os.W_OK):
            sys.stderr.write("Error: Unable to write file: {}\n".format(args.outfile))
            exit(1)

    try:
        art = ttf_to_ascii(request_from_args(args))
    except FontUnavailable as exc:
        sys.stderr.write("Error: {}\n".format(exc))
        exit(1)

    if args.outfile:
        with open(args.outfile, "w") as f:
            f.write(art + "\n")
    else:
        sys.stdout.write(art + "\n")
        sys.stdout.flush()
