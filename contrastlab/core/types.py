#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/core/types.py

"""Value types shared by the converter, the evaluator, the search and the palette."""

from dataclasses import asdict, dataclass
from typing import Dict, NamedTuple, Optional

from . import config as c


class RGB(NamedTuple):
    red: int
    green: int
    blue: int


class HSL(NamedTuple):
    hue: float          # fraction of 360 degrees, [0, 1)
    saturation: float   # [0, 1]
    lightness: float    # [0, 1]


def normalize_level(level: str) -> str:
    """Upper-case a conformance level and reject anything but AA / AAA."""
    value = str(level).strip().upper()
    if value not in c.LEVELS:
        raise ValueError(f"invalid conformance level: '{level}' (expected one of {', '.join(c.LEVELS)})")
    return value


def normalize_direction(direction: str) -> str:
    value = str(direction).strip().lower()
    if value not in c.DIRECTIONS:
        raise ValueError(f"invalid direction: '{direction}' (expected one of {', '.join(c.DIRECTIONS)})")
    return value


@dataclass(frozen=True)
class WcagCheck:
    """A foreground/background pair evaluated against one conformance level."""

    foreground: str
    background: str
    level: str = c.DEFAULT_LEVEL
    is_large_text: bool = c.DEFAULT_LARGE_TEXT

    def __post_init__(self) -> None:
        object.__setattr__(self, "level", normalize_level(self.level))
        object.__setattr__(self, "is_large_text", bool(self.is_large_text))


@dataclass(frozen=True)
class VariantRequest:
    """Input of a single-direction accessible variant search."""

    base_color: str
    level: str = c.DEFAULT_LEVEL
    is_large_text: bool = c.DEFAULT_LARGE_TEXT
    direction: str = c.DEFAULT_DIRECTION
    explore_hue_saturation: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "level", normalize_level(self.level))
        object.__setattr__(self, "direction", normalize_direction(self.direction))
        object.__setattr__(self, "is_large_text", bool(self.is_large_text))

    def check_for(self, candidate: str) -> WcagCheck:
        """Candidate as foreground, the original base color as background."""
        return WcagCheck(candidate, self.base_color, self.level, self.is_large_text)


@dataclass(frozen=True)
class PaletteRequest:
    base_color: str
    level: str = c.DEFAULT_LEVEL
    is_large_text: bool = c.DEFAULT_LARGE_TEXT
    explore_hue_saturation: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "level", normalize_level(self.level))
        object.__setattr__(self, "is_large_text", bool(self.is_large_text))

    def variant_request(self, direction: str) -> VariantRequest:
        return VariantRequest(
            base_color=self.base_color,
            level=self.level,
            is_large_text=self.is_large_text,
            direction=direction,
            explore_hue_saturation=self.explore_hue_saturation,
        )


@dataclass(frozen=True)
class VariantResult:
    """Outcome of a search: ``color`` is None when no variant exists."""

    base_color: str
    direction: str
    color: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.color is not None


@dataclass(frozen=True)
class Palette:
    base: str
    lighter: str
    darker: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)
