#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/subcommands/command_registry.py

from . import (
    adjust,
    contrast,
    convert,
    palette,
    variant
)

SUBCOMMANDS = {
    'contrast': contrast,
    'adjust': adjust,
    'convert': convert,
    'variant': variant,
    'palette': palette
}
