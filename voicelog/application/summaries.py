"""
Host-facing summaries of parse results.

Display strings and derived values that every client needs when turning
a ``ParseResult`` into a log entry or a confirmation toast. Pure
functions; persistence and localization stay with the host.
"""

from __future__ import annotations

from typing import Optional

from voicelog.domain.commands.models import (
    FoodItem,
    ParsedJournalCommand,
    ParsedMealCommand,
    ParsedWorkoutCommand,
)
from voicelog.domain.commands.results import (
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
)
from voicelog.domain.extraction.common import capitalize_first

REPHRASE_PROMPT = "Sorry, I didn't catch that. Try something like \"log 16 oz of water\"."

SLEEP_QUALITY_SCORES: dict[str, int] = {
    "poor": 1,
    "fair": 2,
    "good": 3,
    "excellent": 4,
}
DEFAULT_SLEEP_QUALITY_SCORE = 3


def _format_number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def _food_label(food: FoodItem) -> str:
    parts = [food.quantity, food.unit, food.name]
    return " ".join(part for part in parts if part)


def meal_display_name(meal: ParsedMealCommand) -> str:
    """Name for a meal log entry.

    Example:
        >>> meal_display_name(ParsedMealCommand(foods=(FoodItem(name="steak"),)))
        'Steak'
    """
    if len(meal.foods) == 1:
        return capitalize_first(meal.foods[0].name.strip())
    if meal.foods:
        return ", ".join(_food_label(food) for food in meal.foods)
    if meal.meal_type:
        return capitalize_first(meal.meal_type)
    return "Meal"


def workout_note(workout: ParsedWorkoutCommand) -> Optional[str]:
    """"30 minutes, 5 miles, 300 calories", or None when nothing was measured."""
    parts: list[str] = []
    if workout.duration_minutes is not None:
        parts.append(f"{workout.duration_minutes} minutes")
    if workout.distance is not None and workout.distance_unit is not None:
        parts.append(f"{_format_number(workout.distance)} {workout.distance_unit}")
    if workout.calories_burned is not None:
        parts.append(f"{workout.calories_burned} calories")
    return ", ".join(parts) or None


def sleep_quality_score(quality: Optional[str]) -> int:
    """Quality bucket as 1-4; unstated quality counts as good."""
    if quality is None:
        return DEFAULT_SLEEP_QUALITY_SCORE
    return SLEEP_QUALITY_SCORES.get(quality, DEFAULT_SLEEP_QUALITY_SCORE)


def journal_word_count(journal: ParsedJournalCommand) -> int:
    return len(journal.content.split())


def describe(result: ParseResult) -> str:
    """Short confirmation message for a parse result."""
    if isinstance(result, MealResult):
        meal = result.payload
        text = f"Food: {meal_display_name(meal)}"
        if meal.total_calories is not None:
            text += f" ({meal.total_calories} cal)"
        return text
    if isinstance(result, SupplementResult):
        supplement = result.payload
        if supplement.quantity:
            return f"Supplement logged: {supplement.supplement_name} ({supplement.quantity})"
        return f"Supplement logged: {supplement.supplement_name}"
    if isinstance(result, WorkoutResult):
        workout = result.payload
        note = workout_note(workout)
        return f"{workout.workout_type} logged" + (f": {note}" if note else "")
    if isinstance(result, WaterResult):
        return f"Logged {result.payload.amount} ml of water"
    if isinstance(result, WeightResult):
        weight = result.payload
        return f"Weight logged: {_format_number(weight.weight)} {weight.unit}"
    if isinstance(result, SleepResult):
        sleep = result.payload
        hours = f"{_format_number(sleep.hours)} hours" if sleep.hours is not None else "Sleep"
        quality = f" ({sleep.quality})" if sleep.quality else ""
        return f"Sleep logged: {hours}{quality}"
    if isinstance(result, MoodResult):
        mood = result.payload
        emotions = f" ({', '.join(mood.emotions)})" if mood.emotions else ""
        return f"Mood logged: {mood.level}/5{emotions}"
    if isinstance(result, MeditationResult):
        meditation = result.payload
        return (
            f"Meditation logged: {meditation.duration_minutes} minutes "
            f"of {meditation.meditation_type}"
        )
    if isinstance(result, HabitResult):
        return f"Completed habit: {result.payload.habit_name}"
    if isinstance(result, JournalResult):
        return f"Journal entry saved ({journal_word_count(result.payload)} words)"
    if isinstance(result, ParseError):
        return result.error_message
    if isinstance(result, Unknown):
        return REPHRASE_PROMPT
    raise TypeError(f"Unsupported parse result: {type(result).__name__}")
