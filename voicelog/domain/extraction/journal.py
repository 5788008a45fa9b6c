"""
Journal extractor.

Content keeps the user's casing and is never empty: when stripping the
trigger words leaves too little, the whole utterance is kept.
"""

from __future__ import annotations

import re
from typing import Optional

from voicelog.domain.commands.models import ParsedJournalCommand
from voicelog.domain.extraction.common import match_bucket, squash

MIN_CONTENT_LENGTH = 5

JOURNAL_MOODS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("happy", "great", "excited"), "happy"),
    (("sad", "down", "depressed"), "sad"),
    (("anxious", "worried", "nervous"), "anxious"),
    (("stressed", "overwhelmed"), "stressed"),
    (("calm", "peaceful", "relaxed"), "calm"),
    (("angry", "frustrated", "mad"), "angry"),
)

_TRIGGERS = re.compile(
    r"\b(?:journaling|journal|write|log)\b\s*(?:(?:about|that|this)\b|:)?\s*",
    re.IGNORECASE,
)
_GENERIC_NOUNS = re.compile(r"\b(?:thoughts?|entry)\b:?\s*", re.IGNORECASE)
_AFTER_TRIGGER = re.compile(
    r"(?:journaling|journal|write about|log thought)\s*:?\s*(.+)",
    re.IGNORECASE,
)


def extract_journal_content(command: str) -> str:
    cleaned = squash(_GENERIC_NOUNS.sub(" ", _TRIGGERS.sub(" ", command)))
    if len(cleaned) >= MIN_CONTENT_LENGTH:
        return cleaned

    match = _AFTER_TRIGGER.search(command)
    if match:
        retry = match.group(1).strip()
        if len(retry) >= MIN_CONTENT_LENGTH:
            return retry
    return command


def extract_journal_mood(command: str) -> Optional[str]:
    return match_bucket(command, JOURNAL_MOODS)


def extract_journal(command: str) -> ParsedJournalCommand:
    return ParsedJournalCommand(
        content=extract_journal_content(command),
        mood=extract_journal_mood(command),
    )
