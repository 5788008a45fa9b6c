"""Unit normalization helpers."""

from voicelog.domain.normalization.units import (
    canonical_distance_unit,
    canonical_weight_unit,
    convert_to_ml,
    round_half_up,
    to_minutes,
)

__all__ = [
    "convert_to_ml",
    "round_half_up",
    "to_minutes",
    "canonical_weight_unit",
    "canonical_distance_unit",
]
