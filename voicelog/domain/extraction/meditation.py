"""Meditation extractor."""

from __future__ import annotations

from voicelog.domain.commands.models import ParsedMeditationCommand
from voicelog.domain.extraction.common import extract_duration_minutes, match_bucket

DEFAULT_DURATION_MINUTES = 10
DEFAULT_MEDITATION_TYPE = "guided"

MEDITATION_TYPES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("guided",), "guided"),
    (("silent",), "silent"),
    (("walking",), "walking"),
    (("body scan", "bodyscan"), "body_scan"),
    (("loving kindness",), "loving_kindness"),
    (("transcendental",), "transcendental"),
    (("mindfulness",), "mindfulness"),
)


def extract_meditation_type(command: str) -> str:
    return match_bucket(command, MEDITATION_TYPES) or DEFAULT_MEDITATION_TYPE


def extract_meditation(command: str) -> ParsedMeditationCommand:
    duration = extract_duration_minutes(command)
    return ParsedMeditationCommand(
        duration_minutes=DEFAULT_DURATION_MINUTES if duration is None else duration,
        meditation_type=extract_meditation_type(command),
    )
