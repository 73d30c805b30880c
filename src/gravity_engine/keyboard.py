"""Keyboard-driven weight redistribution."""

from __future__ import annotations

from gravity_core.constants import DEFAULT_KEYBOARD_STEP
from gravity_core.exceptions import UnknownDimensionError
from gravity_core.models.weights import DIMENSIONS, PRESETS, MatchWeights
from gravity_engine.rounding import round_half_up

# Arrow keys shift toward a dimension by a signed number of steps
_ARROW_KEYS: dict[str, tuple[str, int]] = {
    "ArrowUp": ("skills", 1),
    "ArrowDown": ("skills", -1),
    "ArrowLeft": ("culture", 1),
    "ArrowRight": ("compensation", 1),
}

# Number keys jump to presets in display order
_PRESET_KEYS: dict[str, str] = {
    str(index): key for index, key in enumerate(PRESETS, start=1)
}


def shift_weight(weights: MatchWeights, dimension: str, amount: int) -> MatchWeights:
    """Move ``dimension`` by ``amount`` points, borrowing from the other two.

    The other dimensions give up (or receive) the difference in proportion to
    their current share. Whatever rounding leaves over always lands on
    culture, regardless of which dimension was shifted.
    """
    if dimension not in DIMENSIONS:
        msg = f"Unknown weight dimension: {dimension!r}"
        raise UnknownDimensionError(msg)

    current = weights.get(dimension)
    new_value = max(0, min(100, current + amount))
    diff = new_value - current

    others = [d for d in DIMENSIONS if d != dimension]
    other_total = sum(weights.get(d) for d in others)

    result = weights.as_dict()
    result[dimension] = new_value

    if other_total != 0:
        for key in others:
            ratio = weights.get(key) / other_total
            result[key] = max(0, round_half_up(weights.get(key) - diff * ratio))

    residual = 100 - sum(result.values())
    if residual:
        result["culture"] += residual

    # Two half-up roundings can overshoot when culture is shifted to 0
    if result["culture"] < 0:
        deficit = -result["culture"]
        result["culture"] = 0
        donor = max(("skills", "compensation"), key=lambda d: result[d])
        result[donor] -= deficit

    return MatchWeights(**result)


def weights_for_key(
    weights: MatchWeights,
    key: str,
    step: int = DEFAULT_KEYBOARD_STEP,
) -> MatchWeights | None:
    """Return the weights a key press produces, or None for unhandled keys."""
    if key in _ARROW_KEYS:
        dimension, direction = _ARROW_KEYS[key]
        return shift_weight(weights, dimension, step * direction)
    if key in _PRESET_KEYS:
        return PRESETS[_PRESET_KEYS[key]].weights
    return None
