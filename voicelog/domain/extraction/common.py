"""
Helpers shared by the extractors.

Keyword tables are plain ordered data: ``((keywords...), value)`` rows,
evaluated top-to-bottom with case-insensitive substring containment.
"""

from __future__ import annotations

import re
from typing import Optional, Sequence, TypeVar

from voicelog.domain.normalization.units import to_minutes

T = TypeVar("T")

Bucket = tuple[tuple[str, ...], T]

# "<int> minutes|mins|hours|hrs"; shared by workout and meditation.
DURATION_PATTERN = re.compile(r"(\d+)\s*(minutes?|mins?|hours?|hrs?)\b", re.IGNORECASE)

_WHITESPACE = re.compile(r"\s+")


def match_bucket(text: str, buckets: Sequence[Bucket[T]]) -> Optional[T]:
    """Value of the first row with a keyword contained in ``text``."""
    lowered = text.lower()
    for keywords, value in buckets:
        if any(keyword in lowered for keyword in keywords):
            return value
    return None


def collect_terms(text: str, vocabulary: Sequence[str]) -> tuple[str, ...]:
    """Every vocabulary term contained in ``text``, in vocabulary order."""
    lowered = text.lower()
    return tuple(term for term in vocabulary if term in lowered)


def extract_duration_minutes(command: str) -> Optional[int]:
    """Duration in minutes ("1 hour" → 60, "45 min" → 45), or None."""
    match = DURATION_PATTERN.search(command)
    if match is None:
        return None
    return to_minutes(int(match.group(1)), match.group(2))


def squash(text: str) -> str:
    """Collapse whitespace runs and trim."""
    return _WHITESPACE.sub(" ", text).strip()


def capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:]
