#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/shared/sanitizer.py

import argparse
import re

from contrastlab.core import config as c
from contrastlab.core.conversions import normalize_hex
from contrastlab.core.errors import InvalidColorFormat
from contrastlab.core.types import normalize_direction, normalize_level


def _sanitize_for_log(value) -> str:
    """
    Cleans up the input value for safe terminal logging by removing
    excessive whitespace and newlines.
    """
    if value is None:
        return ""
    return " ".join(str(value).split())


def _extract_signed_float(value: str) -> float:
    """
    Extracts a floating-point number from a string, preserving the sign and
    keeping only the first decimal point encountered.
    """
    if value is None:
        return None

    s = str(value)
    is_negative = s.strip().startswith("-")

    raw_chars = re.findall(r"[0-9\.]", s)
    if not raw_chars:
        return None

    clean_str = ""
    dot_seen = False
    for char in raw_chars:
        if char == '.':
            if not dot_seen:
                clean_str += char
                dot_seen = True
        else:
            clean_str += char

    if not clean_str or clean_str == '.':
        return None

    val = float(clean_str)
    return -val if is_negative else val


def _extract_alpha_only(value: str) -> str:
    """Extracts only alphabetical characters from a string, lowercased."""
    if value is None:
        return ""
    s = str(value).replace(" ", "").lower()
    return "".join(re.findall(r"[a-z]", s))


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_hex(v: str) -> str:
    """
    Validator for hex color arguments. The leading '#' is optional on the
    command line; the digits themselves must be exactly six hex characters.
    """
    s = "".join(str(v).split()) if v is not None else ""
    if s and not s.startswith("#"):
        s = "#" + s
    try:
        return normalize_hex(s)
    except InvalidColorFormat:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid hex value: '{raw}'")


def handle_level(v: str) -> str:
    try:
        return normalize_level(_sanitize_for_log(v))
    except ValueError:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid level: '{raw}' (choose from {', '.join(c.LEVELS)})")


def handle_direction(v: str) -> str:
    try:
        return normalize_direction(_extract_alpha_only(v))
    except ValueError:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid direction: '{raw}' (choose from {', '.join(c.DIRECTIONS)})")


def handle_string_clean(v: str) -> str:
    """Validator for pure alphabetical string options (e.g., format names)."""
    cleaned = _extract_alpha_only(v)
    if not cleaned:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid string value: '{raw}'")
    return cleaned


def handle_float_range(min_v: float, max_v: float):
    """
    Factory function returning a validator that ensures a float
    is clamped within a specific [min_v, max_v] range.
    """
    def validator(v: str) -> float:
        val = _extract_signed_float(v)

        if val is None:
            raw = _sanitize_for_log(v)
            raise argparse.ArgumentTypeError(f"invalid float value: '{raw}'")

        if val < min_v:
            val = min_v
        elif val > max_v:
            val = max_v
        return val
    return validator


# ==========================================
# Central Mapping for Argparse types
# ==========================================

INPUT_HANDLERS = {
    "hex": handle_hex,
    "level": handle_level,
    "direction": handle_direction,
    "to_format": handle_string_clean,
    "float_0_1": handle_float_range(0.0, 1.0),
}
