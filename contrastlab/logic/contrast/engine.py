#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/contrast/engine.py

import argparse

from contrastlab.core.contrast import contrast_ratio, passes_wcag, required_ratio
from contrastlab.core.types import WcagCheck
from .renderer import render_contrast


def run(args: argparse.Namespace) -> int:
    """Evaluate one foreground/background pair; exit code 1 when it fails."""
    check = WcagCheck(args.foreground, args.background, args.level, args.large_text)
    ratio = contrast_ratio(check.foreground, check.background)
    passed = passes_wcag(check)

    render_contrast(check, ratio, required_ratio(check.level, check.is_large_text), passed)
    return 0 if passed else 1
