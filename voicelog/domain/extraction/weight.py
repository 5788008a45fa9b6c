"""
Weight extractor.

Unlike water there is no default: an utterance without a number and a
weight unit cannot be logged.
"""

from __future__ import annotations

import re

from voicelog.domain.commands.intents import CommandIntent
from voicelog.domain.commands.models import ParsedWeightCommand
from voicelog.domain.normalization.units import canonical_weight_unit
from voicelog.domain.shared.errors import MissingValueError

_WEIGHT_PATTERN = re.compile(
    r"(\d+(?:\.\d+)?)\s*(?:pounds?|lbs?|kilograms?|kgs?)\b",
    re.IGNORECASE,
)


def extract_weight(command: str) -> ParsedWeightCommand:
    """
    Raises:
        MissingValueError: no "<number> <weight unit>" in the utterance
    """
    match = _WEIGHT_PATTERN.search(command)
    if match is None:
        raise MissingValueError(CommandIntent.WEIGHT.value, "weight", command)

    return ParsedWeightCommand(
        weight=float(match.group(1)),
        unit=canonical_weight_unit(match.group(0)),
    )
