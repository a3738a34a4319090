#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/inspector/engine.py

import argparse
from typing import Any, Dict

from contrastlab.core import conversions as conv
from contrastlab.core.contrast import get_wcag_report
from contrastlab.core.luminance import relative_luminance
from .renderer import render_color_info


def get_color_data(hex_code: str) -> Dict[str, Any]:
    """Everything the inspector shows for one color."""
    rgb = conv.hex_to_rgb(hex_code)
    return {
        "hex": hex_code,
        "rgb": rgb,
        "hsl": conv.rgb_to_hsl(*rgb),
        "luminance": relative_luminance(rgb),
        "wcag": get_wcag_report(hex_code),
    }


def run(args: argparse.Namespace) -> None:
    """Main execution engine for the inspector command"""
    render_color_info(get_color_data(args.hex), args)
