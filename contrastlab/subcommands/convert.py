#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/subcommands/convert.py

import argparse
import sys

from contrastlab.core import config as c
from contrastlab.logic.convert import engine
from contrastlab.shared.logger import ContrastlabArgumentParser
from contrastlab.shared.sanitizer import INPUT_HANDLERS


def get_convert_parser() -> argparse.ArgumentParser:
    """Create argument parser for convert command."""
    parser = ContrastlabArgumentParser(
        prog="contrastlab convert",
        description="contrastlab convert: print a hex color as hex, rgb or hsl",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-H",
        "--hex",
        required=True,
        type=INPUT_HANDLERS["hex"],
        help="hex color ('#' optional)",
    )
    parser.add_argument(
        "-t",
        "--to-format",
        default="hsl",
        type=INPUT_HANDLERS["to_format"],
        choices=c.CONVERT_FORMATS,
        help="output format (default: hsl)",
    )
    return parser


def main(argv=None) -> int:
    """Main entry point for convert command."""
    parser = get_convert_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    engine.run(args)
    return 0


if __name__ == "__main__":
    sys.exit(main())
