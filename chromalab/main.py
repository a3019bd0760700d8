#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/main.py

import argparse
import sys

from chromalab import __version__
from chromalab.logic.color import engine
from chromalab.subcommands.command_registry import SUBCOMMANDS
from chromalab.shared.logger import log, ChromalabArgumentParser
from chromalab.shared.sanitizer import INPUT_HANDLERS
from chromalab.shared.truecolor import ensure_truecolor

# (flags, dest, help) for every section the inspector can print
INFO_FLAGS = (
    (("-rgb", "--red-green-blue"), "rgb", "show RGB values"),
    (("-l", "--luminance"), "luminance", "show relative luminance"),
    (("-hsl", "--hue-saturation-lightness"), "hsl", "show HSL values"),
    (("-hsv", "--hue-saturation-value"), "hsv", "show HSV values"),
    (("-cmyk", "--cyan-magenta-yellow-key"), "cmyk", "show CMYK values"),
    (("--oklab",), "oklab", "show OKLab values"),
    (("--oklch",), "oklch", "show OKLCH values and the sRGB chroma ceiling"),
    (("-wcag", "--contrast"), "contrast", "show WCAG and APCA contrast against white and black"),
    (("--name",), "name", "show the nearest CSS color name"),
)


def get_color_parser() -> argparse.ArgumentParser:
    """Create argument parser for the root color inspector."""
    parser = ChromalabArgumentParser(
        prog="chromalab",
        description=(
            "chromalab: perceptual color inspection, palettes, scales and design tokens\n"
            f"subcommands: {', '.join(SUBCOMMANDS)}"
        ),
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )
    parser.add_argument("-h", "--help", action="help", default=argparse.SUPPRESS,
                        help="show this help message and exit")
    parser.add_argument("-v", "--version", action="version", version=f"chromalab {__version__}",
                        help="show program version and exit")
    parser.add_argument("-hf", "--help-full", action="store_true",
                        help="show this help followed by the help of every subcommand")

    source = parser.add_mutually_exclusive_group()
    source.add_argument("-H", "--hex", dest="hex", type=INPUT_HANDLERS["color"],
                        help="color as hex, rgb(), hsl() or a CSS color name")
    source.add_argument("-r", "--random", action="store_true",
                        help="inspect a random color")
    parser.add_argument("-s", "--seed", type=INPUT_HANDLERS["seed"], default=None,
                        help="seed for -r, for reproducible output")

    sections = parser.add_argument_group("sections")
    sections.add_argument("-all", "--all-tech-infos", action="store_true",
                          help="show every section")
    sections.add_argument("-hb", "--hide-bars", action="store_true",
                          help="print values without the bar charts")
    for flags, dest, text in INFO_FLAGS:
        sections.add_argument(*flags, dest=dest, action="store_true", help=text)

    # Catches a subcommand name given after options
    parser.add_argument("command", nargs="?", help=argparse.SUPPRESS)
    return parser


def print_full_help(parser: argparse.ArgumentParser) -> None:
    parser.print_help()
    for name, module in SUBCOMMANDS.items():
        print("\n")
        getattr(module, f"get_{name}_parser")().print_help()


def handle_color_command(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    if args.help_full:
        print_full_help(parser)
        sys.exit(0)

    if args.command:
        if args.command.lower() in SUBCOMMANDS:
            log("error", f"the '{args.command}' command must be the first argument")
        else:
            log("error", f"unrecognized command or argument: '{args.command}'")
        sys.exit(2)

    engine.run(args, parser)


def main() -> None:
    """Route to a subcommand when argv[1] names one, else run the inspector."""
    cmd = sys.argv[1].lower() if len(sys.argv) > 1 else ""
    if cmd in SUBCOMMANDS:
        sys.argv.pop(1)
        ensure_truecolor()
        SUBCOMMANDS[cmd].main()
        sys.exit(0)

    parser = get_color_parser()
    args = parser.parse_args()
    ensure_truecolor()
    handle_color_command(args, parser)


if __name__ == "__main__":
    main()
