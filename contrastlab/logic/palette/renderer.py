#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/palette/renderer.py

import json

from contrastlab.core import config as c
from contrastlab.core.types import Palette
from contrastlab.shared.preview import print_value_or_block


def render_palette(palette: Palette, as_json: bool = False) -> None:
    if as_json:
        print(json.dumps(palette.to_dict(), indent=2))
        return

    print()
    print_value_or_block(palette.lighter, f"{c.MSG_BOLD_COLORS['info']}lighter{c.RESET}")
    print_value_or_block(palette.base, f"{c.BOLD_WHITE}base{c.RESET}")
    print_value_or_block(palette.darker, f"{c.MSG_BOLD_COLORS['info']}darker{c.RESET}")
    print()
