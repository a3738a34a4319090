#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/palette/engine.py

from contrastlab.core import config as c
from contrastlab.core.conversions import normalize_hex
from contrastlab.core.types import Palette, PaletteRequest
from contrastlab.logic.variant.engine import search_variant
from contrastlab.shared.logger import log


def _resolve_direction(request: PaletteRequest, direction: str) -> str:
    result = search_variant(request.variant_request(direction))
    if result.found:
        return result.color
    log("warning", f"no accessible {direction} variant found for {request.base_color}")
    return c.PLACEHOLDERS[direction]


def generate_palette(request: PaletteRequest) -> Palette:
    """
    Base color plus its nearest accessible lighter and darker neighbours.

    A direction with no accessible variant degrades to its placeholder text,
    so one failing side never hides the other. Only a malformed base color
    raises (InvalidColorFormat).
    """
    normalize_hex(request.base_color)
    return Palette(
        base=request.base_color,
        lighter=_resolve_direction(request, c.LIGHTEN),
        darker=_resolve_direction(request, c.DARKEN),
    )
