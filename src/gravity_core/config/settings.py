"""Application settings using pydantic-settings."""

from __future__ import annotations

from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gravity_core.constants import (
    DEFAULT_KEYBOARD_STEP,
    DEFAULT_PULL_STRENGTH,
    SCORING_WEIGHTS,
)
from gravity_core.models.match import CategoryWeights


class Settings(BaseSettings):
    """Central configuration for match-gravity."""

    model_config = SettingsConfigDict(env_prefix="GRAVITY_", env_file=".env")

    # --- Logging ---
    log_level: str = Field(
        default="INFO",
        description="Root log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="Log renderer: 'console' for humans, 'json' for collectors",
    )

    # --- Interaction ---
    keyboard_step: int = Field(
        default=DEFAULT_KEYBOARD_STEP,
        ge=1,
        le=100,
        description="Percentage points moved per arrow key press",
    )
    pull_strength: float = Field(
        default=DEFAULT_PULL_STRENGTH,
        ge=0.0,
        le=1.0,
        description="Soft magnetic pull strength applied while dragging",
    )

    # --- Scoring ---
    skills_weight: float = Field(
        default=SCORING_WEIGHTS["skills"],
        ge=0.0,
        description="Weight of the skills overlap in the overall match score",
    )
    values_weight: float = Field(
        default=SCORING_WEIGHTS["values"],
        ge=0.0,
        description="Weight of the values overlap in the overall match score",
    )
    perks_weight: float = Field(
        default=SCORING_WEIGHTS["perks"],
        ge=0.0,
        description="Weight of the perks overlap in the overall match score",
    )
    traits_weight: float = Field(
        default=SCORING_WEIGHTS["traits"],
        ge=0.0,
        description="Weight of the traits overlap in the overall match score",
    )

    @model_validator(mode="after")
    def validate_scoring_weights(self) -> Settings:
        """Require at least one non-zero scoring weight."""
        total = self.skills_weight + self.values_weight + self.perks_weight + self.traits_weight
        if total <= 0:
            msg = "at least one scoring weight must be positive"
            raise ValueError(msg)
        return self

    def category_weights(self) -> CategoryWeights:
        """Return the scoring weights as a CategoryWeights value."""
        return CategoryWeights(
            skills=self.skills_weight,
            values=self.values_weight,
            perks=self.perks_weight,
            traits=self.traits_weight,
        )
