"""Supplement → micronutrient mapping."""

from __future__ import annotations

import re
from typing import Optional

from voicelog.domain.commands.models import MicronutrientType

# Ordered; first substring match wins.
MICRONUTRIENT_TABLE: tuple[tuple[str, MicronutrientType], ...] = (
    ("vitamin d", MicronutrientType.VITAMIN_D),
    ("vitamin c", MicronutrientType.VITAMIN_C),
    ("calcium", MicronutrientType.CALCIUM),
    ("iron", MicronutrientType.IRON),
    ("magnesium", MicronutrientType.MAGNESIUM),
    ("zinc", MicronutrientType.ZINC),
)

_FIRST_NUMBER = re.compile(r"(\d+(?:\.\d+)?)")


def dose_value(quantity: Optional[str], default: float = 1.0) -> float:
    """First number in a dose string ("2000 IU" → 2000.0)."""
    if not quantity:
        return default
    match = _FIRST_NUMBER.search(quantity)
    return float(match.group(1)) if match else default


def map_to_micronutrients(
    text: str, quantity: Optional[str]
) -> dict[MicronutrientType, float]:
    """Map supplement text to a single micronutrient amount.

    Unrecognized supplements yield an empty map, not an error.

    Example:
        >>> map_to_micronutrients("vitamin d 2000 iu", "2000 iu")
        {<MicronutrientType.VITAMIN_D: 'VITAMIN_D'>: 2000.0}
    """
    lowered = text.lower()
    for needle, nutrient in MICRONUTRIENT_TABLE:
        if needle in lowered:
            return {nutrient: dose_value(quantity)}
    return {}
