"""Match a spoken habit name against the user's habit titles."""

from __future__ import annotations

from typing import Iterable, Optional

from voicelog.domain.extraction.habit import UNKNOWN_HABIT

MIN_SHARED_WORD_LENGTH = 4


def match_habit(habit_name: str, titles: Iterable[str]) -> Optional[str]:
    """
    First title that matches the spoken name, case-insensitively.

    A title matches when it contains the name, is contained in it, or
    shares a word of at least four characters with it.

    Example:
        >>> match_habit("Morning stretch", ["Drink water", "Morning yoga"])
        'Morning yoga'
        >>> match_habit("Unknown Habit", ["Habit tracker"]) is None
        True
    """
    spoken = habit_name.lower().strip()
    if not spoken or habit_name == UNKNOWN_HABIT:
        return None

    for title in titles:
        candidate = title.lower().strip()
        if not candidate:
            continue
        if spoken in candidate or candidate in spoken:
            return title
        if any(
            len(word) >= MIN_SHARED_WORD_LENGTH and word in spoken
            for word in candidate.split()
        ):
            return title
    return None
