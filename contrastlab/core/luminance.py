#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/core/luminance.py

from . import config as c


def _srgb_to_linear(color_comp: int) -> float:
    """Linearize an 8-bit sRGB component."""
    c_norm = color_comp / c.RGB_MAX
    if c_norm <= c.SRGB_TO_LINEAR_TH:
        return c_norm / c.SRGB_SLOPE
    return ((c_norm + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA


def get_luminance(r: int, g: int, b: int) -> float:
    return (
        c.LUMA_R * _srgb_to_linear(r) +
        c.LUMA_G * _srgb_to_linear(g) +
        c.LUMA_B * _srgb_to_linear(b)
    )


def relative_luminance(rgb) -> float:
    """WCAG relative luminance of an RGB triple, in [0, 1]."""
    return get_luminance(*rgb)
