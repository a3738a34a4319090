#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/variant/renderer.py

from contrastlab.core import config as c
from contrastlab.core.contrast import contrast_ratio
from contrastlab.core.types import VariantRequest
from contrastlab.shared.formatting import format_ratio
from contrastlab.shared.preview import print_color_block


def render_variant(request: VariantRequest, variant: str) -> None:
    print()
    print_color_block(request.base_color, f"{c.BOLD_WHITE}base{c.RESET}")
    print_color_block(variant, f"{c.MSG_BOLD_COLORS['info']}{request.direction}ed{c.RESET}")
    print(f"{' ' * 18}{c.BOLD_WHITE}:{c.RESET}   contrast {format_ratio(contrast_ratio(variant, request.base_color))}")
    print()
