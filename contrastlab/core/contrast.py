#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/core/contrast.py

from typing import Dict

from . import config as c
from .conversions import hex_to_rgb
from .luminance import get_luminance
from .types import WcagCheck, normalize_level


def get_contrast_ratio_rgb(c1: tuple, c2: tuple) -> float:
    """
    Calculate the WCAG 2.1 contrast ratio between two specific RGB colors.

    Source: https://www.w3.org/TR/WCAG21/#dfn-contrast-ratio
    """
    y1 = get_luminance(*c1)
    y2 = get_luminance(*c2)

    l1, l2 = (y1, y2) if y1 > y2 else (y2, y1)

    return (l1 + c.WCAG_LUMINANCE_OFFSET) / (l2 + c.WCAG_LUMINANCE_OFFSET)


def contrast_ratio(color_a: str, color_b: str) -> float:
    """Contrast ratio of two hex colors, in [1, 21]. Order does not matter."""
    return get_contrast_ratio_rgb(hex_to_rgb(color_a), hex_to_rgb(color_b))


def required_ratio(level: str = c.DEFAULT_LEVEL, is_large_text: bool = c.DEFAULT_LARGE_TEXT) -> float:
    """Minimum ratio for a level; large text needs 3.0 whatever the level."""
    level = normalize_level(level)
    if is_large_text:
        return c.WCAG_LARGE_TEXT
    if level == c.LEVEL_AAA:
        return c.WCAG_AAA_NORMAL
    return c.WCAG_AA_NORMAL


def passes_wcag(check: WcagCheck) -> bool:
    ratio = contrast_ratio(check.foreground, check.background)
    return ratio >= required_ratio(check.level, check.is_large_text)


def get_wcag_report(hex_code: str) -> Dict[str, dict]:
    """
    Contrast of one color against pure white and pure black, with pass/fail
    for every level and text size.
    """
    def get_pass_fail(ratio: float) -> dict:
        return {
            "AA-Large": "Pass" if ratio >= required_ratio(c.LEVEL_AA, True) else "Fail",
            "AA": "Pass" if ratio >= required_ratio(c.LEVEL_AA, False) else "Fail",
            "AAA-Large": "Pass" if ratio >= required_ratio(c.LEVEL_AAA, True) else "Fail",
            "AAA": "Pass" if ratio >= required_ratio(c.LEVEL_AAA, False) else "Fail",
        }

    contrast_white = contrast_ratio(hex_code, c.WHITE)
    contrast_black = contrast_ratio(hex_code, c.BLACK)

    return {
        "white": {
            "ratio": round(contrast_white, c.REPORT_DECIMALS),
            "levels": get_pass_fail(contrast_white),
        },
        "black": {
            "ratio": round(contrast_black, c.REPORT_DECIMALS),
            "levels": get_pass_fail(contrast_black),
        },
    }
