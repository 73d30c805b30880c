"""Priority weight triple and named presets."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from gravity_core.constants import PRESET_LABELS, PRESET_VALUES
from gravity_core.exceptions import UnknownDimensionError

Dimension = Literal["skills", "compensation", "culture"]

DIMENSIONS: tuple[Dimension, ...] = ("skills", "compensation", "culture")


class MatchWeights(BaseModel):
    """Three-way priority split between skills, compensation and culture.

    Every triple produced by the engine sums to exactly 100. The model itself
    accepts unnormalized triples so callers can pass stored or partial values.
    """

    model_config = ConfigDict(frozen=True)

    skills: int = Field(ge=0, le=100, description="Skills priority percentage")
    compensation: int = Field(ge=0, le=100, description="Compensation priority percentage")
    culture: int = Field(ge=0, le=100, description="Culture priority percentage")

    @property
    def total(self) -> int:
        """Sum of the three components."""
        return self.skills + self.compensation + self.culture

    def get(self, dimension: str) -> int:
        """Return the value for a dimension name."""
        if dimension not in DIMENSIONS:
            msg = f"Unknown weight dimension: {dimension!r}"
            raise UnknownDimensionError(msg)
        return int(getattr(self, dimension))

    def replace(self, **changes: int) -> MatchWeights:
        """Return a copy with some components replaced."""
        unknown = set(changes) - set(DIMENSIONS)
        if unknown:
            msg = f"Unknown weight dimension: {sorted(unknown)[0]!r}"
            raise UnknownDimensionError(msg)
        return self.model_copy(update=changes)

    def as_dict(self) -> dict[str, int]:
        """Return the triple as a plain dict in dimension order."""
        return {d: self.get(d) for d in DIMENSIONS}


class Preset(BaseModel):
    """A named canonical weight triple."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(description="Stable preset identifier")
    label: str = Field(description="Display label")
    weights: MatchWeights = Field(description="Canonical weights")


BALANCED_WEIGHTS = MatchWeights(
    skills=PRESET_VALUES["balanced"][0],
    compensation=PRESET_VALUES["balanced"][1],
    culture=PRESET_VALUES["balanced"][2],
)

PRESETS: dict[str, Preset] = {
    key: Preset(
        key=key,
        label=PRESET_LABELS[key],
        weights=MatchWeights(skills=s, compensation=c, culture=cu),
    )
    for key, (s, c, cu) in PRESET_VALUES.items()
}
