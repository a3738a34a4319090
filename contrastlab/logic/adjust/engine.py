#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/adjust/engine.py

import argparse

from contrastlab.core import config as c
from contrastlab.logic.variant.engine import darken_color, lighten_color
from contrastlab.shared.preview import print_color_block


def run(args: argparse.Namespace) -> None:
    """Apply a single lighten or darken step and show before/after."""
    if args.lighten is not None:
        label, factor = "lighten", args.lighten
        res_hex = lighten_color(args.hex, factor)
    else:
        label, factor = "darken", args.darken
        res_hex = darken_color(args.hex, factor)

    print()
    print_color_block(args.hex, f"{c.BOLD_WHITE}original{c.RESET}")
    print_color_block(res_hex, f"{c.MSG_BOLD_COLORS['info']}{label} {factor * c.PERCENT:.0f}%{c.RESET}")
    print()
