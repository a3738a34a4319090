#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/inspector/renderer.py

import argparse
from typing import Any, Dict

from contrastlab.core import config as c
from contrastlab.shared.formatting import format_colorspace
from contrastlab.shared.preview import print_color_block


def _label(name: str) -> str:
    return f"{c.MSG_BOLD_COLORS['info']}{name}{c.RESET}{' ' * max(0, 18 - len(name))}"


def _pass_fail(value: str) -> str:
    color = c.MSG_COLORS['success'] if value == "Pass" else c.MSG_COLORS['error']
    return f"{color}{value}{c.RESET}"


def render_color_info(data: Dict[str, Any], args: argparse.Namespace) -> None:
    """Strictly prints color information. Data must be pre-calculated by the engine."""
    print()
    print_color_block(data["hex"], f"{c.BOLD_WHITE}current{c.RESET}")

    print(f"\n{_label('rgb')}{c.BOLD_WHITE}: {format_colorspace('rgb', *data['rgb'])}{c.RESET}")
    print(f"{_label('hsl')}{c.BOLD_WHITE}: {format_colorspace('hsl', *data['hsl'])}{c.RESET}")
    print(f"{_label('luminance')}{c.BOLD_WHITE}: {data['luminance']:.6f}{c.RESET}")

    if getattr(args, "hide_contrast", False):
        print()
        return

    for against in ("white", "black"):
        entry = data["wcag"][against]
        levels = "  ".join(f"{name} {_pass_fail(v)}" for name, v in entry["levels"].items())
        print(f"{_label('vs ' + against)}{c.BOLD_WHITE}: {entry['ratio']:.2f}:1{c.RESET}  {levels}")
    print()
