"""
Parse results.

``ParseResult`` is a closed tagged union keyed by ``kind``: one variant
per intent payload plus ``ParseError`` and ``Unknown``. Every variant is a
frozen pydantic model, so results are immutable values that can be shared
across threads and serialized identically for any host.

Example:
    >>> result = WaterResult(payload=ParsedWaterCommand(amount=237, spoken_unit="ounces"))
    >>> result.intent
    <CommandIntent.WATER: 'water'>
    >>> parse_result_from_json(result.model_dump_json()) == result
    True
"""

from __future__ import annotations

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from voicelog.domain.commands.intents import CommandIntent
from voicelog.domain.commands.models import (
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


class _Result(BaseModel):
    model_config = ConfigDict(frozen=True)

    @property
    def intent(self) -> CommandIntent:
        """Intent this result refers to."""
        return CommandIntent(self.kind)  # type: ignore[attr-defined]

    @property
    def is_error(self) -> bool:
        return False


class MealResult(_Result):
    kind: Literal["meal"] = "meal"
    payload: ParsedMealCommand


class SupplementResult(_Result):
    kind: Literal["supplement"] = "supplement"
    payload: ParsedSupplementCommand


class WorkoutResult(_Result):
    kind: Literal["workout"] = "workout"
    payload: ParsedWorkoutCommand


class WaterResult(_Result):
    kind: Literal["water"] = "water"
    payload: ParsedWaterCommand


class WeightResult(_Result):
    kind: Literal["weight"] = "weight"
    payload: ParsedWeightCommand


class SleepResult(_Result):
    kind: Literal["sleep"] = "sleep"
    payload: ParsedSleepCommand


class MoodResult(_Result):
    kind: Literal["mood"] = "mood"
    payload: ParsedMoodCommand


class MeditationResult(_Result):
    kind: Literal["meditation"] = "meditation"
    payload: ParsedMeditationCommand


class HabitResult(_Result):
    kind: Literal["habit"] = "habit"
    payload: ParsedHabitCommand


class JournalResult(_Result):
    kind: Literal["journal"] = "journal"
    payload: ParsedJournalCommand


class ParseError(_Result):
    """
    An intent was identified but a required value could not be extracted.

    Attributes:
        original_command: Utterance exactly as received
        error_message: Human-readable message suitable for display
        failed_intent: Intent whose extractor failed
    """

    kind: Literal["parse_error"] = "parse_error"
    original_command: str
    error_message: str
    failed_intent: Optional[CommandIntent] = None

    @property
    def intent(self) -> CommandIntent:
        return self.failed_intent or CommandIntent.UNKNOWN

    @property
    def is_error(self) -> bool:
        return True


class Unknown(_Result):
    """No classification rule matched; nothing was committed to."""

    kind: Literal["unknown"] = "unknown"
    command: str


ParseResult = Annotated[
    Union[
        MealResult,
        SupplementResult,
        WorkoutResult,
        WaterResult,
        WeightResult,
        SleepResult,
        MoodResult,
        MeditationResult,
        HabitResult,
        JournalResult,
        ParseError,
        Unknown,
    ],
    Field(discriminator="kind"),
]

_parse_result_adapter: TypeAdapter[ParseResult] = TypeAdapter(ParseResult)

# Payload model → result variant, used by the parsing service to wrap
# extractor output without a type switch.
RESULT_BY_INTENT: dict[CommandIntent, type[_Result]] = {
    CommandIntent.MEAL: MealResult,
    CommandIntent.SUPPLEMENT: SupplementResult,
    CommandIntent.WORKOUT: WorkoutResult,
    CommandIntent.WATER: WaterResult,
    CommandIntent.WEIGHT: WeightResult,
    CommandIntent.SLEEP: SleepResult,
    CommandIntent.MOOD: MoodResult,
    CommandIntent.MEDITATION: MeditationResult,
    CommandIntent.HABIT: HabitResult,
    CommandIntent.JOURNAL: JournalResult,
}


def parse_result_from_json(data: Union[str, bytes]) -> ParseResult:
    """Rebuild a ParseResult from its JSON form (``model_dump_json``)."""
    return _parse_result_adapter.validate_json(data)


def parse_result_from_dict(data: dict) -> ParseResult:
    """Rebuild a ParseResult from its dict form (``model_dump``)."""
    return _parse_result_adapter.validate_python(data)
