#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/main.py

import argparse
import sys

from contrastlab import __version__
from contrastlab.logic.inspector import engine
from contrastlab.subcommands.command_registry import SUBCOMMANDS
from contrastlab.shared.logger import log, ContrastlabArgumentParser
from contrastlab.shared.sanitizer import INPUT_HANDLERS


def get_color_parser() -> argparse.ArgumentParser:
    """Create argument parser for the main color (inspector) command."""
    parser = ContrastlabArgumentParser(
        prog="contrastlab",
        description="contrastlab: WCAG contrast checks and accessible color variants",
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )

    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"contrastlab {__version__}",
        help="show program version and exit",
    )
    parser.add_argument(
        "-hf",
        "--help-full",
        action="store_true",
        help="show full help message including subcommands",
    )
    parser.add_argument(
        "-H",
        "--hex",
        dest="hex",
        type=INPUT_HANDLERS["hex"],
        help="hex color to inspect ('#' optional)",
    )
    parser.add_argument(
        "-nc",
        "--hide-contrast",
        action="store_true",
        help="hide contrast against white and black",
    )
    parser.add_argument(
        "command",
        nargs="?",
        help=argparse.SUPPRESS,
    )
    return parser


def handle_color_command(args: argparse.Namespace) -> int:
    """Entry point for the core color command."""
    parser = get_color_parser()

    if args.help_full:
        parser.print_help()
        for name, module in SUBCOMMANDS.items():
            print("\n" * 2)
            getter = getattr(module, f"get_{name}_parser", None)
            if getter is None:
                log("info", f"help for '{name}' not available")
                continue
            getter().print_help()
        return 0

    # Routing Validation (if a command was passed in the wrong place)
    if args.command:
        if args.command.lower() in SUBCOMMANDS:
            log("error", f"the '{args.command}' command must be the first argument")
        else:
            log("error", f"unrecognized command or argument: '{args.command}'")
        return 2

    if not args.hex:
        log("error", "the -H/--hex argument is required")
        log("info", f"use 'contrastlab --help' for more information, subcommands: {', '.join(SUBCOMMANDS)}")
        return 2

    engine.run(args)
    return 0


def main(argv=None) -> int:
    """Main entry point for contrastlab CLI"""
    argv = list(sys.argv[1:] if argv is None else argv)

    # Subcommand Routing (Global behavior)
    if argv:
        cmd = argv[0].lower()
        if cmd in SUBCOMMANDS:
            return SUBCOMMANDS[cmd].main(argv[1:])

    parser = get_color_parser()
    args = parser.parse_args(argv)
    return handle_color_command(args)


if __name__ == "__main__":
    sys.exit(main())
