"""Workout extractor."""

from __future__ import annotations

import re
from typing import Optional

from voicelog.domain.commands.models import ParsedWorkoutCommand
from voicelog.domain.extraction.common import extract_duration_minutes, match_bucket
from voicelog.domain.normalization.units import canonical_distance_unit

WORKOUT_TYPES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("run", "running", "jog"), "Running"),
    (("walk", "walking"), "Walking"),
    (("bike", "cycling"), "Cycling"),
    (("swim", "swimming"), "Swimming"),
    (("lift", "weight"), "Weight Training"),
    (("yoga",), "Yoga"),
)

OTHER_WORKOUT = "Other"

_DISTANCE_PATTERN = re.compile(
    r"(\d+(?:\.\d+)?)\s*(miles?|kilometers?|km|meters?|m)\b",
    re.IGNORECASE,
)
_CALORIES_PATTERN = re.compile(r"(\d+)\s*(?:calories|calorie|cal|kcal)\b", re.IGNORECASE)


def extract_workout_type(command: str) -> str:
    return match_bucket(command, WORKOUT_TYPES) or OTHER_WORKOUT


def extract_distance(command: str) -> Optional[tuple[float, str]]:
    """Distance and its canonical unit (miles, km or meters)."""
    match = _DISTANCE_PATTERN.search(command)
    if match is None:
        return None
    unit = canonical_distance_unit(match.group(2))
    if unit is None:
        return None
    return float(match.group(1)), unit


def extract_calories_burned(command: str) -> Optional[int]:
    match = _CALORIES_PATTERN.search(command)
    return int(match.group(1)) if match else None


def extract_workout(command: str) -> ParsedWorkoutCommand:
    distance = extract_distance(command)
    return ParsedWorkoutCommand(
        workout_type=extract_workout_type(command),
        duration_minutes=extract_duration_minutes(command),
        distance=distance[0] if distance else None,
        distance_unit=distance[1] if distance else None,
        calories_burned=extract_calories_burned(command),
    )
