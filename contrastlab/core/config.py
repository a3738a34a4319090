#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/core/config.py

# ==========================================
# Color Science Constants & Coefficients
# ==========================================

# Relative Luminance Coefficients (Source: ITU-R BT.709 / Rec. 709)
LUMA_R = 0.2126                    # Red component contribution to relative luminance
LUMA_G = 0.7152                    # Green component contribution to relative luminance
LUMA_B = 0.0722                    # Blue component contribution to relative luminance

# sRGB Transfer Function Constants (Source: WCAG 2.x relative luminance definition)
SRGB_SLOPE = 12.92                 # Slope of the linear portion of the sRGB curve
SRGB_OFFSET = 0.055                # Constant offset used in the non-linear sRGB segment
SRGB_DIVISOR = 1.055               # Divisor for normalizing the sRGB component
SRGB_GAMMA = 2.4                   # Effective gamma exponent for sRGB transfer
SRGB_TO_LINEAR_TH = 0.03928        # Linear/non-linear switch point as written in WCAG 2.x

# WCAG Contrast Thresholds (Source: https://www.w3.org/TR/WCAG21/#contrast-minimum)
WCAG_LARGE_TEXT = 3.0              # Minimum contrast for large text, any level
WCAG_AA_NORMAL = 4.5               # Minimum contrast for normal text (Level AA)
WCAG_AAA_NORMAL = 7.0              # Enhanced contrast for normal text (Level AAA)
WCAG_LUMINANCE_OFFSET = 0.05       # Standard offset constant in the (L + 0.05) contrast formula

# Standard Scaling & Mathematical Constants
UNIT = 1.0                         # Normalized maximum
DIV_2 = 2.0                        # Standard divisor for averages
RGB_MAX = 255.0                    # 8-bit color depth limit
CHANNEL_MAX = 255                  # Integer channel upper bound
HSL_HUE_MOD = 6.0                  # Hue sector divisor for HSL
HUE_THIRD = 1.0 / 3.0              # Hue offset between the red/green/blue channels
HUE_SIXTH = 1.0 / 6.0              # First interpolation boundary in hue fraction
HUE_HALF = 1.0 / 2.0               # Second interpolation boundary in hue fraction
HUE_TWO_THIRDS = 2.0 / 3.0         # Third interpolation boundary in hue fraction
HUE_DEGREES = 360.0                # Full circle degrees, for display only
PERCENT = 100.0                    # Fraction to percent, for display only

# ==========================================
# Color Format
# ==========================================

HEX_REGEX = r"^#[0-9a-fA-F]{6}$"   # Accepted input: '#' followed by exactly six hex digits
HEX_BASE = 16                      # Radix of hex digits
RED_SHIFT = 16                     # Bit offset of the red channel in a 24-bit color
GREEN_SHIFT = 8                    # Bit offset of the green channel in a 24-bit color
CHANNEL_MASK = 0xFF                # Mask for a single 8-bit channel

WHITE = "#ffffff"
BLACK = "#000000"

# ==========================================
# Conformance & Search Defaults
# ==========================================

LEVEL_AA = "AA"
LEVEL_AAA = "AAA"
LEVELS = (LEVEL_AA, LEVEL_AAA)

LIGHTEN = "lighten"
DARKEN = "darken"
DIRECTIONS = (LIGHTEN, DARKEN)

DEFAULT_LEVEL = LEVEL_AA
DEFAULT_LARGE_TEXT = False
DEFAULT_DIRECTION = LIGHTEN
DEFAULT_ADJUST_FACTOR = 0.2        # Lighten/darken amount when none is given

# Lightness sweep: factors STEP, 2*STEP, ... STEP_COUNT*STEP (0.05 .. 0.95)
VARIANT_LIGHTNESS_STEP = 0.05
VARIANT_LIGHTNESS_STEP_COUNT = 19

# Optional hue/saturation exploration grid (hue and saturation as fractions)
HUE_SHIFT_MIN = -0.1
HUE_SHIFT_STEP = 0.02
HUE_SHIFT_COUNT = 11               # -0.10 .. +0.10
SAT_SHIFT_MIN = -0.2
SAT_SHIFT_STEP = 0.05
SAT_SHIFT_COUNT = 9                # -0.20 .. +0.20

FALLBACK_COLORS = {
    LIGHTEN: WHITE,
    DARKEN: BLACK,
}

PLACEHOLDERS = {
    LIGHTEN: "No accessible lighter variant found",
    DARKEN: "No accessible darker variant found",
}

# ==========================================
# CLI UI
# ==========================================

REPORT_DECIMALS = 2                # Decimal places when displaying contrast ratios

CONVERT_FORMATS = ["hex", "rgb", "hsl"]

BOLD_WHITE = "\033[1;37m"

MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
    "dim": "\033[1;2;37m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

RESET = "\033[0m"
