"""Keyword-based nutrition estimates used when explicit data is absent."""

from voicelog.domain.estimation.calories import (
    CALORIE_TABLE,
    estimate_calories,
    estimate_food_calories,
)
from voicelog.domain.estimation.macros import (
    MACRO_TABLE,
    MacroEstimate,
    estimate_food_macros,
    estimate_macros,
)
from voicelog.domain.estimation.micronutrients import (
    MICRONUTRIENT_TABLE,
    dose_value,
    map_to_micronutrients,
)

__all__ = [
    "CALORIE_TABLE",
    "estimate_calories",
    "estimate_food_calories",
    "MACRO_TABLE",
    "MacroEstimate",
    "estimate_food_macros",
    "estimate_macros",
    "MICRONUTRIENT_TABLE",
    "dose_value",
    "map_to_micronutrients",
]
