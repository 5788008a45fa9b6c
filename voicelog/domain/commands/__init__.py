"""
Command types.

Intents, payload models and the ``ParseResult`` tagged union.
"""

from voicelog.domain.commands.intents import CommandIntent
from voicelog.domain.commands.models import (
    FoodItem,
    MicronutrientType,
    ParsedHabitCommand,
    ParsedJournalCommand,
    ParsedMealCommand,
    ParsedMeditationCommand,
    ParsedMoodCommand,
    ParsedSleepCommand,
    ParsedSupplementCommand,
    ParsedWaterCommand,
    ParsedWeightCommand,
    ParsedWorkoutCommand,
)
from voicelog.domain.commands.results import (
    RESULT_BY_INTENT,
    HabitResult,
    JournalResult,
    MealResult,
    MeditationResult,
    MoodResult,
    ParseError,
    ParseResult,
    SleepResult,
    SupplementResult,
    Unknown,
    WaterResult,
    WeightResult,
    WorkoutResult,
    parse_result_from_dict,
    parse_result_from_json,
)

__all__ = [
    "CommandIntent",
    "FoodItem",
    "MicronutrientType",
    "ParsedMealCommand",
    "ParsedSupplementCommand",
    "ParsedWorkoutCommand",
    "ParsedWaterCommand",
    "ParsedWeightCommand",
    "ParsedSleepCommand",
    "ParsedMoodCommand",
    "ParsedMeditationCommand",
    "ParsedHabitCommand",
    "ParsedJournalCommand",
    "ParseResult",
    "MealResult",
    "SupplementResult",
    "WorkoutResult",
    "WaterResult",
    "WeightResult",
    "SleepResult",
    "MoodResult",
    "MeditationResult",
    "HabitResult",
    "JournalResult",
    "ParseError",
    "Unknown",
    "RESULT_BY_INTENT",
    "parse_result_from_json",
    "parse_result_from_dict",
]
