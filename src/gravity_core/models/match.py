"""Requirement, attribute and match result models for overlap scoring."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from gravity_core.constants import (
    HIGH_MATCH_THRESHOLD,
    MEDIUM_MATCH_THRESHOLD,
    SCORING_WEIGHTS,
)
from gravity_core.exceptions import InvalidCategoryWeightsError

SCORING_DIMENSIONS: tuple[str, ...] = ("skills", "values", "perks", "traits")


class Attribute(BaseModel):
    """An attribute carried as an object, e.g. a skill with years of experience."""

    name: str = Field(description="Attribute name compared case-insensitively")
    years: float | None = Field(default=None, description="Years of experience, if known")


class RequirementSet(BaseModel):
    """What a target entity (usually a job) asks for.

    Items may be bare strings or objects carrying a ``name``.
    """

    skills: list[Any] = Field(default_factory=list, description="Required skills")
    values: list[Any] = Field(default_factory=list, description="Company values")
    perks: list[Any] = Field(default_factory=list, description="Offered perks")
    traits: list[Any] = Field(default_factory=list, description="Desired character traits")

    def items_for(self, dimension: str) -> list[Any]:
        """Return the list for a scoring dimension."""
        return list(getattr(self, dimension) or [])


class AttributeProfile(BaseModel):
    """What a candidate entity brings, aligned with RequirementSet."""

    skills: list[Any] = Field(default_factory=list, description="Candidate skills")
    values: list[Any] = Field(default_factory=list, description="Candidate values")
    perks: list[Any] = Field(default_factory=list, description="Desired perks")
    traits: list[Any] = Field(default_factory=list, description="Character traits")

    def items_for(self, dimension: str) -> list[Any]:
        """Return the list for a scoring dimension."""
        return list(getattr(self, dimension) or [])


class CategoryWeights(BaseModel):
    """Per-dimension weights for the overall match score."""

    model_config = ConfigDict(frozen=True)

    skills: float = Field(default=SCORING_WEIGHTS["skills"], description="Skills weight")
    values: float = Field(default=SCORING_WEIGHTS["values"], description="Values weight")
    perks: float = Field(default=SCORING_WEIGHTS["perks"], description="Perks weight")
    traits: float = Field(default=SCORING_WEIGHTS["traits"], description="Traits weight")

    @model_validator(mode="after")
    def validate_non_negative(self) -> CategoryWeights:
        """Reject negative category weights."""
        for dimension in SCORING_DIMENSIONS:
            if getattr(self, dimension) < 0:
                msg = f"category weight for {dimension} cannot be negative"
                raise ValueError(msg)
        return self

    @classmethod
    def from_mapping(cls, weights: dict[str, float] | None) -> CategoryWeights:
        """Build weights from a partial mapping, defaulting the rest."""
        if not weights:
            return cls()
        unknown = set(weights) - set(SCORING_DIMENSIONS)
        if unknown:
            msg = f"Unknown scoring dimension: {sorted(unknown)[0]!r}"
            raise InvalidCategoryWeightsError(msg)
        if any(value < 0 for value in weights.values()):
            msg = "category weights cannot be negative"
            raise InvalidCategoryWeightsError(msg)
        return cls(**weights)

    def get(self, dimension: str) -> float:
        """Return the weight for a scoring dimension."""
        return float(getattr(self, dimension))


def classify_match(score: float) -> str:
    """Map an overall score into a display band: high, medium or low."""
    if score >= HIGH_MATCH_THRESHOLD:
        return "high"
    if score >= MEDIUM_MATCH_THRESHOLD:
        return "medium"
    return "low"


class MatchResult(BaseModel):
    """Outcome of an overlap comparison."""

    model_config = ConfigDict(frozen=True)

    overall: int = Field(ge=0, le=100, description="Weighted overall score")
    breakdown: dict[str, int] = Field(description="Per-dimension overlap percentage 0-100")

    @property
    def band(self) -> str:
        """Display band for the overall score."""
        return classify_match(self.overall)
