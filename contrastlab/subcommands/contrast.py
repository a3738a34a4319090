#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/subcommands/contrast.py

import argparse
import sys

from contrastlab.core import config as c
from contrastlab.logic.contrast import engine
from contrastlab.shared.logger import ContrastlabArgumentParser
from contrastlab.shared.sanitizer import INPUT_HANDLERS


def get_contrast_parser() -> argparse.ArgumentParser:
    """Create argument parser for contrast command."""
    parser = ContrastlabArgumentParser(
        prog="contrastlab contrast",
        description="contrastlab contrast: check a foreground/background pair against WCAG",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-f",
        "--foreground",
        required=True,
        type=INPUT_HANDLERS["hex"],
        help="foreground (text) hex color",
    )
    parser.add_argument(
        "-b",
        "--background",
        required=True,
        type=INPUT_HANDLERS["hex"],
        help="background hex color",
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
    return parser


def main(argv=None) -> int:
    """Main entry point for contrast command."""
    parser = get_contrast_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    return engine.run(args)


if __name__ == "__main__":
    sys.exit(main())
