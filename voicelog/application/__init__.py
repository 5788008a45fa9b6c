"""Application services: parsing entry point and host-facing helpers."""

from voicelog.application.habits import match_habit
from voicelog.application.parsing import VoiceCommandParser, parse_command
from voicelog.application.summaries import (
    describe,
    journal_word_count,
    meal_display_name,
    sleep_quality_score,
    workout_note,
)

__all__ = [
    "parse_command",
    "VoiceCommandParser",
    "match_habit",
    "describe",
    "meal_display_name",
    "workout_note",
    "sleep_quality_score",
    "journal_word_count",
]
