import math


def _clamp01(v: float) -> float:
    if v != v:
        return 0.0
    return max(0.0, min(1.0, v))


def _round_half_up(v: float) -> int:
    return int(math.floor(v + 0.5))
