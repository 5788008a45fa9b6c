"""
Mood extractor.

Level resolution: an explicit integer 1-5 wins, then the word buckets,
then neutral (3). The level is always within [1, 5].
"""

from __future__ import annotations

import re
from typing import Optional

from voicelog.domain.commands.models import ParsedMoodCommand
from voicelog.domain.extraction.common import collect_terms, match_bucket

NEUTRAL_MOOD = 3
MIN_MOOD = 1
MAX_MOOD = 5

MOOD_LEVELS: tuple[tuple[tuple[str, ...], int], ...] = (
    (("terrible", "awful", "horrible"), 1),
    (("bad", "sad", "down"), 2),
    (("okay", "ok", "fine", "meh"), 3),
    (("good", "happy", "great"), 4),
    (("excellent", "amazing", "fantastic"), 5),
)

EMOTIONS: tuple[str, ...] = (
    "happy",
    "sad",
    "angry",
    "anxious",
    "stressed",
    "calm",
    "excited",
    "tired",
    "energetic",
    "frustrated",
    "content",
    "worried",
)

# Whole integers only: "7.5" contributes neither 7 nor 5.
_BARE_INTEGER = re.compile(r"(?<!\d)(?<!\d\.)\d+(?!\d)(?!\.\d)")


def explicit_mood_level(command: str) -> Optional[int]:
    for match in _BARE_INTEGER.finditer(command):
        value = int(match.group(0))
        if MIN_MOOD <= value <= MAX_MOOD:
            return value
    return None


def extract_mood_level(command: str) -> int:
    explicit = explicit_mood_level(command)
    if explicit is not None:
        return explicit
    level = match_bucket(command, MOOD_LEVELS)
    return level if level is not None else NEUTRAL_MOOD


def extract_emotions(command: str) -> tuple[str, ...]:
    return collect_terms(command, EMOTIONS)


def extract_mood(command: str) -> ParsedMoodCommand:
    return ParsedMoodCommand(
        level=extract_mood_level(command),
        emotions=extract_emotions(command),
    )
