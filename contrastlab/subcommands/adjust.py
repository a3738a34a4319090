#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/subcommands/adjust.py

import argparse
import sys

from contrastlab.logic.adjust import engine
from contrastlab.shared.logger import ContrastlabArgumentParser
from contrastlab.shared.sanitizer import INPUT_HANDLERS


def get_adjust_parser() -> argparse.ArgumentParser:
    """Create argument parser for adjust command."""
    parser = ContrastlabArgumentParser(
        prog="contrastlab adjust",
        description="contrastlab adjust: lighten or darken a color in HSL lightness",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-H",
        "--hex",
        required=True,
        type=INPUT_HANDLERS["hex"],
        help="base hex color ('#' optional)",
    )
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument(
        "--lighten",
        type=INPUT_HANDLERS["float_0_1"],
        help="raise lightness by a factor in [0, 1] (0.2 = +20%%)",
    )
    group.add_argument(
        "--darken",
        type=INPUT_HANDLERS["float_0_1"],
        help="lower lightness by a factor in [0, 1]",
    )
    return parser


def main(argv=None) -> int:
    """Main entry point for adjust command."""
    parser = get_adjust_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    engine.run(args)
    return 0


if __name__ == "__main__":
    sys.exit(main())
