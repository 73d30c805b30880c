"""Domain models for match-gravity."""

from gravity_core.models.geometry import CIRCLE_CONFIG, POLES, CircleConfig, Point, Pole
from gravity_core.models.match import (
    SCORING_DIMENSIONS,
    Attribute,
    AttributeProfile,
    CategoryWeights,
    MatchResult,
    RequirementSet,
    classify_match,
)
from gravity_core.models.weights import (
    BALANCED_WEIGHTS,
    DIMENSIONS,
    PRESETS,
    Dimension,
    MatchWeights,
    Preset,
)

__all__ = [
    "BALANCED_WEIGHTS",
    "CIRCLE_CONFIG",
    "DIMENSIONS",
    "POLES",
    "PRESETS",
    "SCORING_DIMENSIONS",
    "Attribute",
    "AttributeProfile",
    "CategoryWeights",
    "CircleConfig",
    "Dimension",
    "MatchResult",
    "MatchWeights",
    "Point",
    "Pole",
    "Preset",
    "RequirementSet",
    "classify_match",
]
