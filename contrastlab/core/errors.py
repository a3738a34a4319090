#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/core/errors.py


class InvalidColorFormat(ValueError):
    """Raised when a string is not a '#RRGGBB' hex color."""

    def __init__(self, value) -> None:
        self.value = value
        super().__init__(f"invalid hex color: '{value}'")


class NoAccessibleVariant(LookupError):
    """Raised when the bounded search, fallback included, finds nothing."""

    def __init__(self, base_color: str, direction: str) -> None:
        self.base_color = base_color
        self.direction = direction
        super().__init__(f"no accessible {direction} variant found for {base_color}")
