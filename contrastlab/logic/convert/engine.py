#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/convert/engine.py

import argparse

from contrastlab.core import conversions as conv
from contrastlab.shared.formatting import format_colorspace


def convert_hex(hex_code: str, to_fmt: str) -> str:
    if to_fmt == "rgb":
        return format_colorspace("rgb", *conv.hex_to_rgb(hex_code))
    if to_fmt == "hsl":
        return format_colorspace("hsl", *conv.hex_to_hsl(hex_code))
    return format_colorspace("hex", hex_code)


def run(args: argparse.Namespace) -> None:
    print(convert_hex(args.hex, args.to_format))
