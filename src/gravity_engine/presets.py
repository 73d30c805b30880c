"""Tolerance-based preset matching."""

from __future__ import annotations

import structlog

from gravity_core.constants import PRESET_TOLERANCE
from gravity_core.models.weights import DIMENSIONS, PRESETS, MatchWeights, Preset

logger = structlog.get_logger()


def weights_match_preset(
    weights: MatchWeights,
    preset: MatchWeights | Preset,
    tolerance: int = PRESET_TOLERANCE,
) -> bool:
    """True when every component is within ``tolerance`` points of the preset."""
    target = preset.weights if isinstance(preset, Preset) else preset
    return all(abs(weights.get(d) - target.get(d)) <= tolerance for d in DIMENSIONS)


def active_preset(weights: MatchWeights) -> Preset | None:
    """Return the first preset, in display order, that the weights match."""
    for preset in PRESETS.values():
        if weights_match_preset(weights, preset):
            logger.debug("preset_matched", preset=preset.key, weights=weights)
            return preset
    return None
