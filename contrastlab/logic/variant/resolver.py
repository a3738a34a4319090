#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/variant/resolver.py

import argparse

from contrastlab.core.errors import NoAccessibleVariant
from contrastlab.core.types import VariantRequest
from contrastlab.shared.logger import log
from .engine import find_accessible_variant
from .renderer import render_variant


def resolve_variant_input(args: argparse.Namespace) -> int:
    """Build the request from CLI arguments, search, and render the outcome."""
    request = VariantRequest(
        base_color=args.hex,
        level=args.level,
        is_large_text=args.large_text,
        direction=args.direction,
        explore_hue_saturation=args.explore,
    )
    try:
        variant = find_accessible_variant(request)
    except NoAccessibleVariant as exc:
        log("error", str(exc))
        if not request.explore_hue_saturation:
            log("info", "use --explore to also search nearby hues and saturations")
        return 1

    render_variant(request, variant)
    return 0
