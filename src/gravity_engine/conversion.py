"""Conversion between puck positions and priority weights.

The forward map (point -> weights) blends angular proximity to each pole
with a uniform baseline, using the normalized distance from the center as
the mix factor. The reverse map (weights -> point) is the weighted centroid
of the pole coordinates and is what the UI uses to draw the puck.
"""

from __future__ import annotations

import numpy as np

from gravity_core.constants import CENTER_FLOOR_DISTANCE, POLE_INTENSITY_EXPONENT
from gravity_core.models.geometry import CIRCLE_CONFIG, POLES, Point
from gravity_core.models.weights import BALANCED_WEIGHTS, DIMENSIONS, MatchWeights
from gravity_engine.geometry import point_to_angle, point_to_distance
from gravity_engine.rounding import round_half_up

_UNIFORM_SHARE = 1.0 / 3.0


def angular_proximity(angle: float, pole_angle: float) -> float:
    """How close ``angle`` is to ``pole_angle``: 1 at the pole, 0 opposite it.

    Falls off quadratically with the shorter angular distance.
    """
    diff = abs(angle - pole_angle)
    normalized_diff = min(diff, 360.0 - diff) / 180.0
    return (1.0 - normalized_diff) ** 2


def polar_to_weights(angle: float, dist: float) -> MatchWeights:
    """Convert an angle (degrees clockwise from up) and distance in [0, 1] to weights."""
    if dist < CENTER_FLOOR_DISTANCE:
        return BALANCED_WEIGHTS

    blended = [
        angular_proximity(angle, POLES[d].angle) * dist + _UNIFORM_SHARE * (1.0 - dist)
        for d in DIMENSIONS
    ]
    total = sum(blended)

    skills = round_half_up(blended[0] / total * 100)
    compensation = round_half_up(blended[1] / total * 100)
    # Culture takes the remainder so the triple sums to exactly 100
    culture = 100 - skills - compensation

    return MatchWeights(skills=skills, compensation=compensation, culture=culture)


def point_to_weights(p: Point) -> MatchWeights:
    """Convert a point in the logical space to weights."""
    return polar_to_weights(point_to_angle(p), point_to_distance(p))


def weights_to_position(weights: MatchWeights) -> Point:
    """Place the puck at the weighted centroid of the three poles."""
    total = weights.total
    if total == 0:
        return CIRCLE_CONFIG.center

    fractions = np.array([weights.get(d) for d in DIMENSIONS], dtype=np.float64) / total
    coords = np.array([[POLES[d].x, POLES[d].y] for d in DIMENSIONS], dtype=np.float64)
    x, y = fractions @ coords
    return Point(x=float(x), y=float(y))


def pole_intensities(
    weights: MatchWeights,
    exponent: float = POLE_INTENSITY_EXPONENT,
) -> dict[str, float]:
    """Shade value per pole: each weight fraction raised to ``exponent``."""
    values = np.array([weights.get(d) for d in DIMENSIONS], dtype=np.float64) / 100.0
    shaded = np.power(np.clip(values, 0.0, 1.0), exponent)
    return {d: float(v) for d, v in zip(DIMENSIONS, shaded, strict=True)}
