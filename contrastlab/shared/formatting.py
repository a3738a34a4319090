#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/shared/formatting.py

from contrastlab.core import config as c


def format_colorspace(fmt: str, *args) -> str:
    if fmt == 'hex':
        return str(args[0])
    elif fmt == 'rgb':
        return f"rgb({args[0]}, {args[1]}, {args[2]})"
    elif fmt == 'hsl':
        h, s, l = args
        return f"hsl({h * c.HUE_DEGREES:.2f}deg, {s * c.PERCENT:.2f}%, {l * c.PERCENT:.2f}%)"

    return ""


def format_ratio(ratio: float) -> str:
    return f"{ratio:.{c.REPORT_DECIMALS}f}:1"
