"""Overlap-based match scoring between a target and a candidate.

Each dimension scores the share of the target's requirements that the
candidate also lists (case-insensitive exact names). An empty requirement
list scores 0 rather than being skipped.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

import structlog

from gravity_core.exceptions import InvalidCategoryWeightsError
from gravity_core.models.match import (
    SCORING_DIMENSIONS,
    AttributeProfile,
    CategoryWeights,
    MatchResult,
    RequirementSet,
    classify_match,
)
from gravity_core.models.weights import MatchWeights
from gravity_engine.rounding import round_half_up

logger = structlog.get_logger()

__all__ = [
    "attribute_name",
    "calculate_match",
    "calculate_overlap",
    "classify_match",
    "rank_by_weighted_score",
    "weighted_score",
]


def attribute_name(item: Any) -> str:
    """Normalize an attribute to its name; anything unusable becomes ''."""
    if isinstance(item, str):
        return item
    if isinstance(item, Mapping):
        name = item.get("name")
    else:
        name = getattr(item, "name", None)
    return name if isinstance(name, str) else ""


def calculate_overlap(required: Sequence[Any], candidate: Sequence[Any]) -> float:
    """Percentage (0-100) of required items present in the candidate list."""
    if not required or not candidate:
        return 0.0

    candidate_names = {attribute_name(item).lower() for item in candidate}
    candidate_names.discard("")
    matches = sum(1 for item in required if attribute_name(item).lower() in candidate_names)
    return matches / len(required) * 100


def _resolve_weights(weights: CategoryWeights | Mapping[str, float] | None) -> CategoryWeights:
    """Accept a CategoryWeights, a partial mapping, or None for the defaults."""
    if isinstance(weights, CategoryWeights):
        return weights
    if weights is not None and not isinstance(weights, Mapping):
        msg = f"category weights must be a mapping, got {type(weights).__name__}"
        raise InvalidCategoryWeightsError(msg)
    return CategoryWeights.from_mapping(dict(weights) if weights else None)


def calculate_match(
    target_requirements: RequirementSet,
    candidate_attributes: AttributeProfile | None,
    weights: CategoryWeights | Mapping[str, float] | None = None,
) -> MatchResult:
    """Score how well a candidate overlaps a target's requirements."""
    category_weights = _resolve_weights(weights)

    if candidate_attributes is None:
        return MatchResult(overall=0, breakdown=dict.fromkeys(SCORING_DIMENSIONS, 0))

    raw_scores = {
        dimension: calculate_overlap(
            target_requirements.items_for(dimension),
            candidate_attributes.items_for(dimension),
        )
        for dimension in SCORING_DIMENSIONS
    }
    overall = round_half_up(
        sum(raw_scores[d] * category_weights.get(d) for d in SCORING_DIMENSIONS)
    )
    # Custom weights may sum past 1.0; keep the score in range
    overall = max(0, min(100, overall))
    breakdown = {d: round_half_up(score) for d, score in raw_scores.items()}

    logger.debug(
        "match_calculated",
        overall=overall,
        band=classify_match(overall),
        breakdown=breakdown,
    )
    return MatchResult(overall=overall, breakdown=breakdown)


def weighted_score(
    dimension_scores: Mapping[str, float] | None,
    weights: MatchWeights,
    fallback: float = 0.0,
) -> float:
    """Re-weight a score breakdown by a skills/compensation/culture priority triple.

    Reads the keys ``skills``, ``compensation`` (or its alias ``salary``),
    ``culture`` and ``traits``. Culture and traits are averaged into the
    culture slot. Missing scores count as 0; with no breakdown at all,
    ``fallback`` is returned.

    This expects a search-result style breakdown, not the overlap breakdown
    from ``calculate_match`` (skills/values/perks/traits), which has no
    compensation or culture score.
    """
    if not dimension_scores:
        return fallback

    skills = float(dimension_scores.get("skills", 0) or 0)
    compensation = float(
        dimension_scores.get("compensation", dimension_scores.get("salary", 0)) or 0
    )
    culture = (
        float(dimension_scores.get("culture", 0) or 0)
        + float(dimension_scores.get("traits", 0) or 0)
    ) / 2

    return (
        skills * weights.skills / 100
        + compensation * weights.compensation / 100
        + culture * weights.culture / 100
    )


def rank_by_weighted_score(
    items: Iterable[tuple[str, Mapping[str, float]]],
    weights: MatchWeights,
) -> list[tuple[str, float]]:
    """Order (id, breakdown) pairs by weighted score, highest first.

    Ties keep their input order.
    """
    scored = [(item_id, weighted_score(scores, weights)) for item_id, scores in items]
    scored.sort(key=lambda x: x[1], reverse=True)
    return scored
