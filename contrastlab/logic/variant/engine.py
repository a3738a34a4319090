#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/variant/engine.py

from typing import Iterator, Optional

from contrastlab.core import config as c
from contrastlab.core import conversions as conv
from contrastlab.core.contrast import passes_wcag
from contrastlab.core.errors import NoAccessibleVariant
from contrastlab.core.types import HSL, VariantRequest, VariantResult
from contrastlab.shared.clamping import _clamp01


def _check_factor(factor: float) -> float:
    factor = float(factor)
    if not 0.0 <= factor <= c.UNIT:
        raise ValueError(f"adjustment factor must be within [0, 1], got {factor}")
    return factor


def _shift_lightness(hsl: HSL, factor: float, direction: str) -> HSL:
    if direction == c.LIGHTEN:
        return hsl._replace(lightness=min(c.UNIT, hsl.lightness + factor))
    return hsl._replace(lightness=max(0.0, hsl.lightness - factor))


def lighten_color(hex_code: str, factor: float = c.DEFAULT_ADJUST_FACTOR) -> str:
    """Raise HSL lightness by ``factor`` (0.2 = +20 points), clamped at 1."""
    factor = _check_factor(factor)
    return conv.hsl_to_hex(_shift_lightness(conv.hex_to_hsl(hex_code), factor, c.LIGHTEN))


def darken_color(hex_code: str, factor: float = c.DEFAULT_ADJUST_FACTOR) -> str:
    """Lower HSL lightness by ``factor``, clamped at 0."""
    factor = _check_factor(factor)
    return conv.hsl_to_hex(_shift_lightness(conv.hex_to_hsl(hex_code), factor, c.DARKEN))


def iter_lightness_factors() -> Iterator[float]:
    """0.05, 0.10, ... 0.95; multiplied rather than accumulated."""
    for i in range(1, c.VARIANT_LIGHTNESS_STEP_COUNT + 1):
        yield i * c.VARIANT_LIGHTNESS_STEP


def is_accessible(request: VariantRequest, candidate: str) -> bool:
    return passes_wcag(request.check_for(candidate))


def _sweep_lightness(request: VariantRequest, hsl: HSL) -> Optional[str]:
    for factor in iter_lightness_factors():
        candidate = conv.hsl_to_hex(_shift_lightness(hsl, factor, request.direction))
        if is_accessible(request, candidate):
            return candidate
    return None


def _sweep_hue_saturation(request: VariantRequest, base_hsl: HSL) -> Optional[str]:
    for i in range(c.HUE_SHIFT_COUNT):
        hue_shift = c.HUE_SHIFT_MIN + i * c.HUE_SHIFT_STEP
        for j in range(c.SAT_SHIFT_COUNT):
            sat_shift = c.SAT_SHIFT_MIN + j * c.SAT_SHIFT_STEP
            adjusted = HSL(
                (base_hsl.hue + hue_shift + c.UNIT) % c.UNIT,
                _clamp01(base_hsl.saturation + sat_shift),
                base_hsl.lightness,
            )
            candidate = _sweep_lightness(request, adjusted)
            if candidate:
                return candidate
    return None


def search_variant(request: VariantRequest) -> VariantResult:
    """
    Walk lightness away from the base color and return the first candidate
    that passes against the base itself.

    Order: lightness sweep, then the hue/saturation grid when the request
    asks for it, then pure white (lighten) or pure black (darken). The
    result carries ``color=None`` when all of them fail.

    Grid candidates move HSL lightness in the requested direction but also
    shift hue and saturation, so a "lighten" result can have lower relative
    luminance than the base (``#01fbfd`` explores to ``#3078e7``).
    """
    base_hsl = conv.hex_to_hsl(request.base_color)

    candidate = _sweep_lightness(request, base_hsl)
    if candidate is None and request.explore_hue_saturation:
        candidate = _sweep_hue_saturation(request, base_hsl)
    if candidate is None:
        fallback = c.FALLBACK_COLORS[request.direction]
        if is_accessible(request, fallback):
            candidate = fallback

    return VariantResult(request.base_color, request.direction, candidate)


def find_accessible_variant(request: VariantRequest) -> str:
    result = search_variant(request)
    if not result.found:
        raise NoAccessibleVariant(request.base_color, request.direction)
    return result.color
