#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/core/conversions.py

import re

from . import config as c
from .errors import InvalidColorFormat
from .types import HSL, RGB
from contrastlab.shared.clamping import _clamp01, _round_half_up

_HEX_PATTERN = re.compile(c.HEX_REGEX)


def is_valid_hex(value) -> bool:
    return isinstance(value, str) and _HEX_PATTERN.match(value) is not None


def normalize_hex(value: str) -> str:
    """Validate a '#RRGGBB' string and return it in lowercase."""
    if not is_valid_hex(value):
        raise InvalidColorFormat(value)
    return value.lower()


def hex_to_rgb(hex_code: str) -> RGB:
    """Convert hex string to RGB tuple."""
    value = int(normalize_hex(hex_code)[1:], c.HEX_BASE)
    return RGB(
        (value >> c.RED_SHIFT) & c.CHANNEL_MASK,
        (value >> c.GREEN_SHIFT) & c.CHANNEL_MASK,
        value & c.CHANNEL_MASK,
    )


def rgb_to_hex(rgb) -> str:
    """Convert RGB components to a lowercase '#rrggbb' string."""
    channels = tuple(rgb)
    if len(channels) != 3:
        raise InvalidColorFormat(rgb)
    for channel in channels:
        if isinstance(channel, bool) or not isinstance(channel, int) or not 0 <= channel <= c.CHANNEL_MAX:
            raise InvalidColorFormat(rgb)
    r, g, b = channels
    return f"#{r:02x}{g:02x}{b:02x}"


def rgb_to_hsl(r: int, g: int, b: int) -> HSL:
    """Convert RGB to HSL with every component as a fraction."""
    r_f, g_f, b_f = r / c.RGB_MAX, g / c.RGB_MAX, b / c.RGB_MAX
    cmax = max(r_f, g_f, b_f)
    cmin = min(r_f, g_f, b_f)
    L = (cmax + cmin) / c.DIV_2
    if cmax == cmin:
        return HSL(0.0, 0.0, L)

    delta = cmax - cmin
    if L > 0.5:
        s = delta / (c.DIV_2 - cmax - cmin)
    else:
        s = delta / (cmax + cmin)

    if cmax == r_f:
        h = (g_f - b_f) / delta + (c.HSL_HUE_MOD if g_f < b_f else 0.0)
    elif cmax == g_f:
        h = (b_f - r_f) / delta + 2.0
    else:
        h = (r_f - g_f) / delta + 4.0
    return HSL(h / c.HSL_HUE_MOD, s, L)


def hex_to_hsl(hex_code: str) -> HSL:
    return rgb_to_hsl(*hex_to_rgb(hex_code))


def _hue_to_channel(p: float, q: float, t: float) -> float:
    """Interpolate one channel between the two lightness bounds."""
    if t < 0:
        t += c.UNIT
    if t > 1:
        t -= c.UNIT
    if t < c.HUE_SIXTH:
        return p + (q - p) * c.HSL_HUE_MOD * t
    if t < c.HUE_HALF:
        return q
    if t < c.HUE_TWO_THIRDS:
        return p + (q - p) * (c.HUE_TWO_THIRDS - t) * c.HSL_HUE_MOD
    return p


def hsl_to_rgb(hsl) -> RGB:
    """Convert HSL (fractions) to integer RGB."""
    h, s, L = hsl
    h = h % c.UNIT
    s = _clamp01(s)
    L = _clamp01(L)

    if s == 0:
        gray = _round_half_up(L * c.RGB_MAX)
        return RGB(gray, gray, gray)

    q = L * (c.UNIT + s) if L < 0.5 else L + s - L * s
    p = c.DIV_2 * L - q
    r = _hue_to_channel(p, q, h + c.HUE_THIRD)
    g = _hue_to_channel(p, q, h)
    b = _hue_to_channel(p, q, h - c.HUE_THIRD)
    return RGB(
        _round_half_up(_clamp01(r) * c.RGB_MAX),
        _round_half_up(_clamp01(g) * c.RGB_MAX),
        _round_half_up(_clamp01(b) * c.RGB_MAX),
    )


def hsl_to_hex(hsl) -> str:
    return rgb_to_hex(hsl_to_rgb(hsl))
