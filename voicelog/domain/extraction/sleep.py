"""Sleep extractor."""

from __future__ import annotations

import re
from typing import Optional

from voicelog.domain.commands.models import ParsedSleepCommand
from voicelog.domain.extraction.common import match_bucket

SLEEP_QUALITY: tuple[tuple[tuple[str, ...], str], ...] = (
    (("poor", "bad", "terrible"), "poor"),
    (("fair", "okay", "ok"), "fair"),
    (("good", "well"), "good"),
    (("excellent", "great", "amazing"), "excellent"),
)

_HOURS_PATTERN = re.compile(r"(\d+(?:\.\d+)?)\s*(?:hours?|hrs?)\b", re.IGNORECASE)


def extract_sleep_hours(command: str) -> Optional[float]:
    match = _HOURS_PATTERN.search(command)
    return float(match.group(1)) if match else None


def extract_sleep_quality(command: str) -> Optional[str]:
    return match_bucket(command, SLEEP_QUALITY)


def extract_sleep(command: str) -> ParsedSleepCommand:
    return ParsedSleepCommand(
        hours=extract_sleep_hours(command),
        quality=extract_sleep_quality(command),
    )
