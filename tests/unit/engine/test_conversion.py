"""Tests for point <-> weight conversion."""

from __future__ import annotations

import pytest

from gravity_core.models.geometry import CIRCLE_CONFIG, POLES, Point
from gravity_core.models.weights import BALANCED_WEIGHTS, DIMENSIONS, PRESETS, MatchWeights
from gravity_engine.conversion import (
    angular_proximity,
    point_to_weights,
    polar_to_weights,
    pole_intensities,
    weights_to_position,
)
from gravity_engine.geometry import clamp_to_circle
from gravity_engine.rounding import round_half_up


def _dominant(weights: MatchWeights) -> str:
    return max(DIMENSIONS, key=weights.get)


@pytest.mark.unit
class TestRoundHalfUp:
    """Test the shared rounding rule."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(12.5, 13), (22.5, 23), (12.4999, 12), (-2.5, -2), (0.5, 1), (59.99999999, 60)],
    )
    def test_half_goes_up(self, value: float, expected: int) -> None:
        """Halves round up, unlike Python's round()."""
        assert round_half_up(value) == expected


@pytest.mark.unit
class TestAngularProximity:
    """Test quadratic angular falloff."""

    def test_at_pole(self) -> None:
        """Directly at the pole gives 1."""
        assert angular_proximity(120.0, 120.0) == 1.0

    def test_opposite_pole(self) -> None:
        """180 degrees away gives 0."""
        assert angular_proximity(0.0, 180.0) == 0.0

    def test_wraps_around(self) -> None:
        """350 and 10 degrees are 20 degrees apart, not 340."""
        assert angular_proximity(350.0, 10.0) == pytest.approx((1 - 20 / 180) ** 2)


@pytest.mark.unit
class TestPolarToWeights:
    """Test the polar blend."""

    def test_center_floor(self) -> None:
        """Below 5% distance the result is exactly balanced."""
        assert polar_to_weights(90.0, 0.0) == BALANCED_WEIGHTS
        assert polar_to_weights(45.0, 0.049) == MatchWeights(
            skills=33, compensation=33, culture=34
        )

    def test_half_way_toward_skills(self) -> None:
        """Half a radius toward skills lands on the skills-first split."""
        assert polar_to_weights(0.0, 0.5) == PRESETS["skills_first"].weights

    def test_edge_between_skills_and_compensation(self) -> None:
        """At the edge, 90 degrees weights toward compensation then skills."""
        assert polar_to_weights(90.0, 1.0) == MatchWeights(
            skills=26, compensation=71, culture=3
        )


@pytest.mark.unit
class TestPointToWeights:
    """Test the full point -> weights conversion."""

    def test_center_is_balanced(self) -> None:
        """The exact center yields 33/33/34."""
        assert point_to_weights(CIRCLE_CONFIG.center) == MatchWeights(
            skills=33, compensation=33, culture=34
        )

    def test_near_center_is_balanced(self) -> None:
        """A few units from the center still reads as balanced."""
        assert point_to_weights(Point(x=150, y=145)) == BALANCED_WEIGHTS

    @pytest.mark.parametrize(
        ("dimension", "expected"),
        [
            ("skills", MatchWeights(skills=82, compensation=9, culture=9)),
            ("compensation", MatchWeights(skills=9, compensation=82, culture=9)),
            ("culture", MatchWeights(skills=9, compensation=9, culture=82)),
        ],
    )
    def test_pole_dominates(self, dimension: str, expected: MatchWeights) -> None:
        """At a pole its own dimension dominates and the others split evenly."""
        assert point_to_weights(POLES[dimension].point) == expected

    def test_sum_invariant_over_grid(self) -> None:
        """Every clamped point in the logical square sums to exactly 100."""
        for x in range(0, 301, 15):
            for y in range(0, 301, 15):
                w = point_to_weights(clamp_to_circle(Point(x=x, y=y)))
                assert w.total == 100
                assert all(0 <= w.get(d) <= 100 for d in DIMENSIONS)

    def test_unclamped_point_treated_as_edge(self) -> None:
        """A far-away point reads like the edge point at the same angle."""
        far = point_to_weights(Point(x=1000, y=150))
        edge = point_to_weights(Point(x=270, y=150))
        assert far == edge


@pytest.mark.unit
class TestWeightsToPosition:
    """Test the weighted-centroid placement."""

    @pytest.mark.parametrize("dimension", DIMENSIONS)
    def test_full_weight_sits_on_pole(self, dimension: str) -> None:
        """100% on one dimension places the puck on its pole."""
        weights = MatchWeights(skills=0, compensation=0, culture=0).replace(**{dimension: 100})
        p = weights_to_position(weights)
        assert p.x == pytest.approx(POLES[dimension].x)
        assert p.y == pytest.approx(POLES[dimension].y)

    def test_zero_total_returns_center(self) -> None:
        """All-zero weights fall back to the center."""
        assert weights_to_position(MatchWeights(skills=0, compensation=0, culture=0)) == (
            CIRCLE_CONFIG.center
        )

    def test_skills_first_position(self) -> None:
        """60/20/20 sits straight above the center."""
        p = weights_to_position(PRESETS["skills_first"].weights)
        assert p.x == pytest.approx(150.0)
        assert p.y == pytest.approx(102.0)

    def test_balanced_round_trip_is_exact(self) -> None:
        """Balanced weights survive a round trip unchanged."""
        assert point_to_weights(weights_to_position(BALANCED_WEIGHTS)) == BALANCED_WEIGHTS

    @pytest.mark.parametrize(
        "weights",
        [
            MatchWeights(skills=60, compensation=20, culture=20),
            MatchWeights(skills=20, compensation=60, culture=20),
            MatchWeights(skills=20, compensation=20, culture=60),
            MatchWeights(skills=70, compensation=15, culture=15),
            MatchWeights(skills=15, compensation=15, culture=70),
        ],
    )
    def test_round_trip_keeps_dominant_dimension(self, weights: MatchWeights) -> None:
        """A round trip keeps the same leading dimension and the sum."""
        back = point_to_weights(weights_to_position(weights))
        assert back.total == 100
        assert _dominant(back) == _dominant(weights)

    def test_skills_first_round_trip_values(self) -> None:
        """The blend pulls a 60/20/20 puck back toward balanced."""
        back = point_to_weights(weights_to_position(PRESETS["skills_first"].weights))
        assert back == MatchWeights(skills=55, compensation=22, culture=23)


@pytest.mark.unit
class TestPoleIntensities:
    """Test pole shading."""

    def test_full_and_empty(self) -> None:
        """100% shades fully and 0% not at all."""
        shades = pole_intensities(MatchWeights(skills=100, compensation=0, culture=0))
        assert shades == {"skills": 1.0, "compensation": 0.0, "culture": 0.0}

    def test_quarter_weight(self) -> None:
        """25% shades at 0.25 ** 1.5."""
        shades = pole_intensities(MatchWeights(skills=25, compensation=25, culture=50))
        assert shades["skills"] == pytest.approx(0.125)
