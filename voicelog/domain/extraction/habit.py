"""
Habit completion extractor.

"complete my morning stretch habit" → habit "Morning stretch".
"""

from __future__ import annotations

import re
from typing import Optional

from voicelog.domain.commands.models import ParsedHabitCommand
from voicelog.domain.extraction.common import capitalize_first, squash

UNKNOWN_HABIT = "Unknown Habit"
MIN_NAME_LENGTH = 3

_COMPLETION_VERBS = re.compile(
    r"\b(?:complete|completed|done|finished|finish|log|logged|mark|marked)\b"
    r"\s*(?:(?:the|a|an|my|our)\b)?\s*",
    re.IGNORECASE,
)
_CATEGORY_NOUNS = re.compile(r"\b(?:habits?|tasks?|activity|activities)\b\s*", re.IGNORECASE)

_AFTER_VERB = re.compile(
    r"(?:complete|done|finished|log)\s+(?:(?:the|a|an|my)\b)?\s*(.+)",
    re.IGNORECASE,
)
_NOTES = re.compile(r"(?:with notes?|note:|because|reason:)\s*(.+)", re.IGNORECASE)


def _strip_category(text: str) -> str:
    return squash(_CATEGORY_NOUNS.sub(" ", text))


def extract_habit_name(command: str) -> str:
    cleaned = _strip_category(_COMPLETION_VERBS.sub(" ", command))
    if len(cleaned) >= MIN_NAME_LENGTH:
        return capitalize_first(cleaned)

    match = _AFTER_VERB.search(command)
    if match:
        retry = _strip_category(match.group(1))
        if len(retry) >= MIN_NAME_LENGTH:
            return capitalize_first(retry)
    return UNKNOWN_HABIT


def extract_notes(command: str) -> Optional[str]:
    match = _NOTES.search(command)
    if match is None:
        return None
    return match.group(1).strip() or None


def extract_habit(command: str) -> ParsedHabitCommand:
    return ParsedHabitCommand(
        habit_name=extract_habit_name(command),
        notes=extract_notes(command),
    )
