"""Shared constants for match-gravity."""

from __future__ import annotations

# Logical drawing space is a 300x300 square, origin top-left
VIEW_BOX = "0 0 300 300"
CIRCLE_CENTER_X = 150.0
CIRCLE_CENTER_Y = 150.0
CIRCLE_RADIUS = 120.0

# Pole coordinates sit on the circle at 120-degree intervals.
# Angles are measured clockwise from straight up.
POLE_COORDINATES: dict[str, tuple[float, float, float]] = {
    "skills": (150.0, 30.0, 0.0),
    "compensation": (254.0, 210.0, 120.0),
    "culture": (46.0, 210.0, 240.0),
}

POLE_LABELS: dict[str, str] = {
    "skills": "Skills",
    "compensation": "Comp",
    "culture": "Culture",
}

# Below this normalized distance the puck reads as exactly balanced
CENTER_FLOOR_DISTANCE = 0.05

# Magnetic snap radii (logical units)
CENTER_SNAP_RADIUS = 15.0
POLE_SNAP_RADIUS = 20.0
PULL_RADIUS_FACTOR = 2.0
DRAG_SNAP_FACTOR = 0.5
DEFAULT_PULL_STRENGTH = 0.15

# Keyboard adjustment
DEFAULT_KEYBOARD_STEP = 5

# Preset matching tolerance in percentage points
PRESET_TOLERANCE = 2

# Named canonical weight triples (skills, compensation, culture), in display order
PRESET_VALUES: dict[str, tuple[int, int, int]] = {
    "balanced": (33, 33, 34),
    "skills_first": (60, 20, 20),
    "compensation_first": (20, 60, 20),
    "culture_first": (20, 20, 60),
}

PRESET_LABELS: dict[str, str] = {
    "balanced": "Balanced",
    "skills_first": "Skills-First",
    "compensation_first": "Comp-First",
    "culture_first": "Culture-First",
}

# Match scoring category weights
SCORING_WEIGHTS: dict[str, float] = {
    "skills": 0.40,
    "values": 0.20,
    "perks": 0.20,
    "traits": 0.20,
}

# Match score display bands
HIGH_MATCH_THRESHOLD = 70
MEDIUM_MATCH_THRESHOLD = 40

# Exponent applied to a weight fraction when shading a pole
POLE_INTENSITY_EXPONENT = 1.5
