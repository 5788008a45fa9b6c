"""Supplement extractor."""

from __future__ import annotations

import re
from typing import Optional

from voicelog.domain.commands.models import ParsedSupplementCommand
from voicelog.domain.estimation.micronutrients import map_to_micronutrients

SUPPLEMENT_KEYWORDS: tuple[str, ...] = (
    "vitamin",
    "mineral",
    "supplement",
    "pill",
    "capsule",
    "tablet",
)

UNKNOWN_SUPPLEMENT = "Unknown Supplement"

_DOSE_PATTERN = re.compile(
    r"(\d+(?:\.\d+)?)\s*(?:mg|mcg|g|iu|units?|capsules?|tablets?)\b",
    re.IGNORECASE,
)


def extract_supplement_name(command: str) -> str:
    """Words after the first supplement keyword.

    Falls back to the last word longer than two characters when the
    keyword is missing or is the final word.
    """
    words = command.split()
    start = next(
        (
            index
            for index, word in enumerate(words)
            if any(keyword in word.lower() for keyword in SUPPLEMENT_KEYWORDS)
        ),
        -1,
    )
    if 0 <= start < len(words) - 1:
        return " ".join(words[start + 1:])

    meaningful = [word for word in words if len(word) > 2]
    return meaningful[-1] if meaningful else UNKNOWN_SUPPLEMENT


def extract_dose(command: str) -> Optional[str]:
    """Dose as spoken ("2000 IU", "500 mg"), or None."""
    match = _DOSE_PATTERN.search(command)
    return match.group(0) if match else None


def extract_supplement(command: str) -> ParsedSupplementCommand:
    quantity = extract_dose(command)
    return ParsedSupplementCommand(
        supplement_name=extract_supplement_name(command),
        micronutrients=map_to_micronutrients(command, quantity),
        quantity=quantity,
    )
