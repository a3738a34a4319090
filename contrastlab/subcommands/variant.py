#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/subcommands/variant.py

import argparse
import sys

from contrastlab.core import config as c
from contrastlab.logic.variant.resolver import resolve_variant_input
from contrastlab.shared.logger import ContrastlabArgumentParser
from contrastlab.shared.sanitizer import INPUT_HANDLERS


def get_variant_parser() -> argparse.ArgumentParser:
    """Create argument parser for variant command."""
    parser = ContrastlabArgumentParser(
        prog="contrastlab variant",
        description="contrastlab variant: find the nearest accessible lighter or darker variant",
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
        "-d",
        "--direction",
        default=c.DEFAULT_DIRECTION,
        type=INPUT_HANDLERS["direction"],
        help=f"lighten or darken (default: {c.DEFAULT_DIRECTION})",
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
    return parser


def main(argv=None) -> int:
    """Main entry point for variant command."""
    parser = get_variant_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    return resolve_variant_input(args)


if __name__ == "__main__":
    sys.exit(main())
