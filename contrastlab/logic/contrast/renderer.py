#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/contrast/renderer.py

from contrastlab.core import config as c
from contrastlab.core.types import WcagCheck
from contrastlab.shared.formatting import format_ratio
from contrastlab.shared.logger import log
from contrastlab.shared.preview import print_color_block


def render_contrast(check: WcagCheck, ratio: float, threshold: float, passed: bool) -> None:
    print()
    print_color_block(check.foreground, f"{c.BOLD_WHITE}foreground{c.RESET}")
    print_color_block(check.background, f"{c.BOLD_WHITE}background{c.RESET}")
    print()

    size = "large text" if check.is_large_text else "normal text"
    summary = f"contrast {format_ratio(ratio)} (needs {format_ratio(threshold)} for {check.level}, {size})"
    if passed:
        log("success", f"{summary}: pass")
    else:
        log("error", f"{summary}: fail")
    print()
