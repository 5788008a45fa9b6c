"""
Voice command payload models.

One immutable payload per intent. Optional fields mean "not stated" and
are never filled with a placeholder zero. Quantities that have a
canonical unit (water in ml, durations in minutes, weight in lbs/kg) are
always stored in that unit.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Any, Literal, Mapping, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    FieldSerializationInfo,
    field_serializer,
    field_validator,
)


class MicronutrientType(str, Enum):
    """Micronutrients a supplement utterance can be mapped to."""

    VITAMIN_D = "VITAMIN_D"
    VITAMIN_C = "VITAMIN_C"
    CALCIUM = "CALCIUM"
    IRON = "IRON"
    MAGNESIUM = "MAGNESIUM"
    ZINC = "ZINC"


class FoodItem(BaseModel):
    """
    Food mentioned in a meal utterance.

    Quantity stays free text ("2", "1.5") for display fidelity; it is
    parsed to a number only when estimating calories.

    Example:
        >>> FoodItem(name="rice", quantity="1", unit="cup")
        FoodItem(name='rice', quantity='1', unit='cup')
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Food name as spoken")
    quantity: Optional[str] = Field(None, description="Numeric quantity as text")
    unit: Optional[str] = Field(None, description="Unit token as spoken")

    def quantity_value(self, default: float = 1.0) -> float:
        """Numeric quantity, or ``default`` when absent or unparseable."""
        if self.quantity is None:
            return default
        try:
            return float(self.quantity)
        except ValueError:
            return default


class ParsedMealCommand(BaseModel):
    """Meal log: optional meal type, spoken foods, estimated calories."""

    model_config = ConfigDict(frozen=True)

    meal_type: Optional[Literal["breakfast", "lunch", "dinner", "snack"]] = None
    foods: tuple[FoodItem, ...] = ()
    total_calories: Optional[int] = Field(None, ge=0)


class ParsedSupplementCommand(BaseModel):
    """Supplement log with optional dose and mapped micronutrients."""

    model_config = ConfigDict(frozen=True)

    supplement_name: str = Field(..., min_length=1)
    micronutrients: tuple[tuple[MicronutrientType, float], ...] = Field(
        (), description="(nutrient, amount) pairs; accepts and dumps a mapping"
    )
    quantity: Optional[str] = Field(None, description='Dose as spoken, e.g. "2000 IU"')

    @field_validator("micronutrients", mode="before")
    @classmethod
    def pairs_from_mapping(cls, v: Any) -> Any:
        """Accept {nutrient: amount} as well as pairs."""
        if isinstance(v, Mapping):
            return tuple(v.items())
        return v

    @field_serializer("micronutrients")
    def dump_as_mapping(
        self,
        v: tuple[tuple[MicronutrientType, float], ...],
        info: FieldSerializationInfo,
    ) -> dict[Any, float]:
        if info.mode_is_json():
            return {nutrient.value: amount for nutrient, amount in v}
        return dict(v)

    @property
    def micronutrient_amounts(self) -> Mapping[MicronutrientType, float]:
        """Read-only {nutrient: amount} view."""
        return MappingProxyType(dict(self.micronutrients))


class ParsedWorkoutCommand(BaseModel):
    """Workout log. Every measurement is independently optional."""

    model_config = ConfigDict(frozen=True)

    workout_type: str
    duration_minutes: Optional[int] = Field(None, ge=0)
    distance: Optional[float] = Field(None, ge=0)
    distance_unit: Optional[Literal["miles", "km", "meters"]] = None
    calories_burned: Optional[int] = Field(None, ge=0)


class ParsedWaterCommand(BaseModel):
    """Water intake, always expressed in millilitres."""

    model_config = ConfigDict(frozen=True)

    amount: int = Field(..., ge=0, description="Amount in ml")
    unit: Literal["ml"] = "ml"
    spoken_unit: str = Field(..., description="Unit the user said")


class ParsedWeightCommand(BaseModel):
    """Body weight in lbs or kg."""

    model_config = ConfigDict(frozen=True)

    weight: float = Field(..., ge=0)
    unit: Literal["lbs", "kg"]


class ParsedSleepCommand(BaseModel):
    """Sleep log with optional hours and quality bucket."""

    model_config = ConfigDict(frozen=True)

    hours: Optional[float] = Field(None, ge=0)
    quality: Optional[Literal["poor", "fair", "good", "excellent"]] = None


class ParsedMoodCommand(BaseModel):
    """Mood on a 1-5 scale plus the emotion words that were mentioned."""

    model_config = ConfigDict(frozen=True)

    level: int = Field(..., ge=1, le=5)
    emotions: tuple[str, ...] = ()


class ParsedMeditationCommand(BaseModel):
    """Meditation session."""

    model_config = ConfigDict(frozen=True)

    duration_minutes: int = Field(..., ge=0)
    meditation_type: str = "guided"


class ParsedHabitCommand(BaseModel):
    """Habit completion."""

    model_config = ConfigDict(frozen=True)

    habit_name: str = Field(..., min_length=1)
    notes: Optional[str] = None


class ParsedJournalCommand(BaseModel):
    """Journal entry. Content is never empty."""

    model_config = ConfigDict(frozen=True)

    content: str = Field(..., min_length=1)
    mood: Optional[str] = Field(None, description="Free-text mood word, not the 1-5 scale")
