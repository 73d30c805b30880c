"""Half-up rounding shared by every conversion that must sum to 100."""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (12.5 -> 13, -2.5 -> -2).

    Python's built-in round() rounds half to even, which shifts residuals
    onto a different slot than the weight displays expect.
    """
    return math.floor(value + 0.5)
