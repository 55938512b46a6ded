"""Composite rating engine and phase adjustments."""

from .composite import (
    PACE,
    USAGE,
    CompositeRatings,
    CompositeWeight,
    CompositeWeightTable,
    composite_rating,
)
from .playoffs import apply_playoff_adjustment, playoff_intensity

__all__ = [
    "PACE",
    "USAGE",
    "CompositeRatings",
    "CompositeWeight",
    "CompositeWeightTable",
    "apply_playoff_adjustment",
    "composite_rating",
    "playoff_intensity",
]
