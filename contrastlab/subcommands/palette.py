#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/subcommands/palette.py

import argparse
import sys

from contrastlab.core import config as c
from contrastlab.core.types import PaletteRequest
from contrastlab.logic.palette.engine import generate_palette
from contrastlab.logic.palette.renderer import render_palette
from contrastlab.shared.logger import ContrastlabArgumentParser
from contrastlab.shared.sanitizer import INPUT_HANDLERS


def get_palette_parser() -> argparse.ArgumentParser:
    """Create argument parser for palette command."""
    parser = ContrastlabArgumentParser(
        prog="contrastlab palette",
        description="contrastlab palette: base color with its accessible lighter and darker variants",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-H",
        "--hex",
        required=True,
        type=INPUT_HANDLERS["hex"],
        help="base hex color ('#' optional)",
    )
    parser.add_argument(
        "-l",
        "--level",
        default=c.DEFAULT_LEVEL,
        type=INPUT_HANDLERS["level"],
        help=f"conformance level: AA or AAA (default: {c.DEFAULT_LEVEL})",
    )
    parser.add_argument(
        "-L",
        "--large-text",
        action="store_true",
        help="text is large (>=18pt, or >=14pt bold)",
    )
    parser.add_argument(
        "-x",
        "--explore",
        action="store_true",
        help="also try nearby hues and saturations before the white/black fallback",
    )
    parser.add_argument(
        "-j",
        "--json",
        action="store_true",
        help="print the palette as JSON",
    )
    return parser


def main(argv=None) -> int:
    """Main entry point for palette command."""
    parser = get_palette_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    request = PaletteRequest(args.hex, args.level, args.large_text, args.explore)
    render_palette(generate_palette(request), as_json=args.json)
    return 0


if __name__ == "__main__":
    sys.exit(main())
