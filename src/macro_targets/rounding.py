from __future__ import annotations

import math

from .constants import POINTS_GRANULARITY


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero for either sign.

    Unlike the built-in ``round``, 2.5 becomes 3 and -2.5 becomes -3.
    """
    # value - trunc(value) is exact in binary floating point, unlike value + 0.5.
    whole = math.trunc(value)
    if abs(value - whole) >= 0.5:
        whole += int(math.copysign(1, value))
    return int(whole)


def round_to_nearest_5(value: float) -> int:
    return round_half_away(value / POINTS_GRANULARITY) * POINTS_GRANULARITY


def round_to_tenth(value: float) -> float:
    return round_half_away(value * 10) / 10
