"""Tests for Settings configuration."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from gravity_core.config.settings import Settings
from gravity_core.models.match import CategoryWeights


@pytest.mark.unit
class TestSettings:
    """Test Settings validation and defaults."""

    def test_default_settings(self) -> None:
        """Settings loads with correct defaults."""
        with patch.dict(os.environ, {}, clear=True):
            s = Settings(_env_file=None)  # type: ignore[call-arg]
        assert s.log_level == "INFO"
        assert s.log_format == "console"
        assert s.keyboard_step == 5
        assert s.pull_strength == 0.15
        assert s.category_weights() == CategoryWeights()

    def test_env_overrides(self) -> None:
        """GRAVITY_-prefixed environment variables override defaults."""
        env = {
            "GRAVITY_KEYBOARD_STEP": "10",
            "GRAVITY_LOG_FORMAT": "json",
            "GRAVITY_SKILLS_WEIGHT": "0.7",
        }
        with patch.dict(os.environ, env, clear=False):
            s = Settings(_env_file=None)  # type: ignore[call-arg]
        assert s.keyboard_step == 10
        assert s.log_format == "json"
        assert s.category_weights().skills == 0.7

    def test_invalid_log_format(self) -> None:
        """Unknown log formats raise error."""
        with patch.dict(os.environ, {"GRAVITY_LOG_FORMAT": "xml"}, clear=False):
            with pytest.raises(ValidationError):
                Settings(_env_file=None)  # type: ignore[call-arg]

    def test_step_out_of_range(self) -> None:
        """A zero keyboard step raises error."""
        with pytest.raises(ValidationError):
            Settings(keyboard_step=0, _env_file=None)  # type: ignore[call-arg]

    def test_all_zero_scoring_weights(self) -> None:
        """At least one scoring weight must be positive."""
        with pytest.raises(ValidationError, match="at least one scoring weight"):
            Settings(  # type: ignore[call-arg]
                skills_weight=0,
                values_weight=0,
                perks_weight=0,
                traits_weight=0,
                _env_file=None,
            )
