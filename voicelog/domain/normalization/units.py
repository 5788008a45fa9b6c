"""
Unit normalization.

Pure conversion helpers mapping the units a user speaks to the canonical
units stored in payloads:

* volume → ml (rounded half-up to an integer)
* duration → minutes
* body weight → "lbs" | "kg"
* distance → "miles" | "km" | "meters"
"""

from __future__ import annotations

import math
from typing import Optional

# ml per spoken unit
ML_PER_OUNCE = 29.5735
ML_PER_CUP = 236.588
ML_PER_LITER = 1000.0

VOLUME_FACTORS: dict[str, float] = {
    "ounces": ML_PER_OUNCE,
    "ounce": ML_PER_OUNCE,
    "oz": ML_PER_OUNCE,
    "cups": ML_PER_CUP,
    "cup": ML_PER_CUP,
    "liters": ML_PER_LITER,
    "liter": ML_PER_LITER,
    "l": ML_PER_LITER,
    "ml": 1.0,
    "milliliters": 1.0,
    "milliliter": 1.0,
}

MINUTES_PER_HOUR = 60


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives.

    Example:
        >>> round_half_up(2.5)
        3
        >>> round_half_up(236.588)
        237
    """
    return int(math.floor(value + 0.5))


def convert_to_ml(amount: float, unit: str) -> int:
    """Convert a spoken volume to whole millilitres.

    Unrecognized units are treated as fluid ounces.

    Args:
        amount: Numeric amount as spoken
        unit: Unit token as spoken (case-insensitive)

    Returns:
        Volume in ml, rounded half-up

    Example:
        >>> convert_to_ml(16, "oz")
        473
        >>> convert_to_ml(2, "cups")
        473
    """
    factor = VOLUME_FACTORS.get(unit.strip().lower(), ML_PER_OUNCE)
    return round_half_up(amount * factor)


def to_minutes(value: int, unit: str) -> int:
    """Convert a duration to minutes; anything mentioning hours is ×60."""
    lowered = unit.lower()
    if lowered.startswith("hour") or lowered.startswith("hr"):
        return value * MINUTES_PER_HOUR
    return value


def canonical_weight_unit(text: str) -> str:
    """Canonical body-weight unit for the matched text.

    Pounds win when both spellings appear; anything unrecognized is lbs.
    """
    lowered = text.lower()
    if "pound" in lowered or "lb" in lowered:
        return "lbs"
    if "kilogram" in lowered or "kg" in lowered:
        return "kg"
    return "lbs"


def canonical_distance_unit(unit: str) -> Optional[str]:
    """Canonical distance unit; full words are checked before abbreviations."""
    lowered = unit.lower()
    if "mile" in lowered:
        return "miles"
    if "kilometer" in lowered or lowered == "km":
        return "km"
    if "meter" in lowered or lowered == "m":
        return "meters"
    return None
