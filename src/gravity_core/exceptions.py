"""Custom exception hierarchy for match-gravity."""

from __future__ import annotations


class GravityError(Exception):
    """Base exception for all match-gravity errors."""


class UnknownDimensionError(GravityError):
    """Raised when a weight dimension name is not skills, compensation or culture."""


class InvalidCategoryWeightsError(GravityError):
    """Raised when match-scoring category weights are negative or name an unknown category."""
