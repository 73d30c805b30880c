"""Magnetic behaviour around the center and the poles.

While dragging, ``apply_magnetic_pull`` nudges the puck toward a nearby
target on every move. On release, ``apply_magnetic_snap`` jumps it onto the
target outright. ``resolve_pointer`` runs the full pointer pipeline.
"""

from __future__ import annotations

from gravity_core.constants import (
    CENTER_SNAP_RADIUS,
    DEFAULT_PULL_STRENGTH,
    DRAG_SNAP_FACTOR,
    POLE_SNAP_RADIUS,
    PULL_RADIUS_FACTOR,
)
from gravity_core.models.geometry import CIRCLE_CONFIG, POLES, Point
from gravity_core.models.weights import DIMENSIONS, MatchWeights
from gravity_engine.conversion import point_to_weights
from gravity_engine.geometry import clamp_to_circle, distance


def _snap_targets(center_radius: float, pole_radius: float) -> list[tuple[Point, float]]:
    """Center first, then the poles in dimension order."""
    targets = [(CIRCLE_CONFIG.center, center_radius)]
    targets.extend((POLES[d].point, pole_radius) for d in DIMENSIONS)
    return targets


def apply_magnetic_snap(p: Point, is_dragging: bool) -> Point:
    """Snap ``p`` exactly onto the center or a pole when close enough.

    Radii are halved while a drag is still in progress.
    """
    factor = DRAG_SNAP_FACTOR if is_dragging else 1.0
    for target, radius in _snap_targets(CENTER_SNAP_RADIUS * factor, POLE_SNAP_RADIUS * factor):
        if distance(p, target) < radius:
            return target
    return p


def apply_magnetic_pull(p: Point, strength: float = DEFAULT_PULL_STRENGTH) -> Point:
    """Interpolate ``p`` toward the first target whose attraction radius contains it.

    The pull is ``strength`` scaled by how deep inside the radius the point
    sits. Targets are never combined.
    """
    targets = _snap_targets(
        CENTER_SNAP_RADIUS * PULL_RADIUS_FACTOR,
        POLE_SNAP_RADIUS * PULL_RADIUS_FACTOR,
    )
    for target, radius in targets:
        dist = distance(p, target)
        if 0 < dist < radius:
            pull = strength * (1 - dist / radius)
            return Point(
                x=p.x + (target.x - p.x) * pull,
                y=p.y + (target.y - p.y) * pull,
            )
    return p


def resolve_pointer(
    p: Point,
    is_dragging: bool = False,
    strength: float = DEFAULT_PULL_STRENGTH,
) -> MatchWeights:
    """Turn a raw pointer position into weights.

    Pointer-down and pointer-move use the soft pull; pointer-up uses the
    full-radius hard snap.
    """
    point = clamp_to_circle(p)
    if is_dragging:
        point = apply_magnetic_pull(point, strength)
    else:
        point = apply_magnetic_snap(point, is_dragging=False)
    return point_to_weights(point)
