"""Geometry primitives for the priority circle."""

from __future__ import annotations

import math

from gravity_core.models.geometry import CIRCLE_CONFIG, Point


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(a.x - b.x, a.y - b.y)


def point_to_angle(p: Point) -> float:
    """Angle of ``p`` around the circle center in degrees.

    0 is straight up and the angle grows clockwise, normalized to [0, 360).
    """
    dx = p.x - CIRCLE_CONFIG.center.x
    dy = p.y - CIRCLE_CONFIG.center.y
    # atan2 is zero along +x; swapping the axes puts zero at the top
    angle = math.degrees(math.atan2(dx, -dy))
    if angle < 0:
        angle += 360.0
    return angle % 360.0


def point_to_distance(p: Point) -> float:
    """Distance from the center as a fraction of the radius, capped at 1."""
    return min(1.0, distance(p, CIRCLE_CONFIG.center) / CIRCLE_CONFIG.radius)


def clamp_to_circle(p: Point) -> Point:
    """Keep ``p`` inside the circle, projecting outside points onto the edge."""
    dist = distance(p, CIRCLE_CONFIG.center)
    if dist <= CIRCLE_CONFIG.radius:
        return p

    ratio = CIRCLE_CONFIG.radius / dist
    center = CIRCLE_CONFIG.center
    return Point(
        x=center.x + (p.x - center.x) * ratio,
        y=center.y + (p.y - center.y) * ratio,
    )
