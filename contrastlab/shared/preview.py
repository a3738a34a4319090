#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/shared/preview.py

import re

from contrastlab.core import config as c
from contrastlab.core.conversions import hex_to_rgb, is_valid_hex

_ANSI_ESCAPE = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')


def get_visible_len(s: str) -> int:
    return len(_ANSI_ESCAPE.sub('', s))


def _pad(title: str) -> str:
    return " " * max(0, 18 - get_visible_len(title))


def print_color_block(hex_code: str, title: str = "color", end: str = "\n") -> None:
    """Print a truecolor swatch followed by the hex code."""
    r, g, b = hex_to_rgb(hex_code)
    print(f"{title}{_pad(title)}{c.BOLD_WHITE}:{c.RESET}   \033[48;2;{r};{g};{b}m                {c.RESET}  {c.BOLD_WHITE}{hex_code}{c.RESET}", end=end)


def print_value_or_block(value: str, title: str) -> None:
    """Swatch for a hex value; placeholder text is printed dimmed instead."""
    if is_valid_hex(value):
        print_color_block(value, title)
    else:
        print(f"{title}{_pad(title)}{c.BOLD_WHITE}:{c.RESET}   {c.MSG_BOLD_COLORS['dim']}{value}{c.RESET}")
