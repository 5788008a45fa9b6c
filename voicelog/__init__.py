"""
voicelog - voice command interpretation engine.

Deterministic, rule-based classification and extraction of transcribed
health-logging utterances ("log 2 eggs and coffee for breakfast") into
strongly-typed results.

Example:
    >>> from voicelog import parse_command
    >>> result = parse_command("drank 16 oz of water")
    >>> result.kind, result.payload.amount
    ('water', 473)
"""

from voicelog.application.parsing import VoiceCommandParser, parse_command
from voicelog.domain.classification import classify
from voicelog.domain.commands import (
    CommandIntent,
    FoodItem,
    HabitResult,
    JournalResult,
    MealResult,
    MeditationResult,
    MicronutrientType,
    MoodResult,
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
from voicelog.domain.normalization import convert_to_ml

__version__ = "1.0.0"

__all__ = [
    "parse_command",
    "VoiceCommandParser",
    "classify",
    "convert_to_ml",
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
    "parse_result_from_json",
    "parse_result_from_dict",
]
