"""
Water extractor.

No amount in the utterance means one 8 oz glass; this is a default, not
a failure.
"""

from __future__ import annotations

import re

from voicelog.domain.commands.models import ParsedWaterCommand
from voicelog.domain.normalization.units import convert_to_ml

DEFAULT_GLASS = (8.0, "ounces")

_WATER_PATTERN = re.compile(
    r"(\d+(?:\.\d+)?)\s*(ounces?|oz|ml|milliliters?|cups?|liters?|l)\b",
    re.IGNORECASE,
)


def extract_water_amount(command: str) -> tuple[float, str]:
    """Amount and unit as spoken, defaulting to one 8 oz glass."""
    match = _WATER_PATTERN.search(command)
    if match is None:
        return DEFAULT_GLASS
    return float(match.group(1)), match.group(2).lower()


def extract_water(command: str) -> ParsedWaterCommand:
    amount, unit = extract_water_amount(command)
    return ParsedWaterCommand(amount=convert_to_ml(amount, unit), spoken_unit=unit)
