"""
Calorie estimation for spoken meals.

Very rough keyword lookup, used only because voice input carries no
nutrition data. A food contributes only if its name contains one of the
table keywords; first matching row wins.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from voicelog.domain.commands.models import FoodItem
from voicelog.domain.normalization.units import round_half_up


@dataclass(frozen=True, slots=True)
class CalorieRow:
    keywords: tuple[str, ...]
    kcal: float
    per_unit: bool = True  # False → flat value regardless of quantity


# Ordered: first row whose keyword is a substring of the food name wins.
CALORIE_TABLE: tuple[CalorieRow, ...] = (
    CalorieRow(("egg",), 70),
    CalorieRow(("toast", "bread"), 80),
    CalorieRow(("coffee",), 5, per_unit=False),
    CalorieRow(("apple",), 95),
    CalorieRow(("banana",), 105),
    CalorieRow(("rice", "pasta"), 130),
    CalorieRow(("chicken", "meat"), 200),
    CalorieRow(("fish",), 150),
)


def lookup_calorie_row(name: str) -> Optional[CalorieRow]:
    lowered = name.lower()
    for row in CALORIE_TABLE:
        if any(keyword in lowered for keyword in row.keywords):
            return row
    return None


def estimate_food_calories(food: FoodItem) -> Optional[float]:
    """Calories for one food, or None when no keyword matches."""
    row = lookup_calorie_row(food.name)
    if row is None:
        return None
    if not row.per_unit:
        return row.kcal
    return food.quantity_value() * row.kcal


def estimate_calories(foods: Iterable[FoodItem]) -> Optional[int]:
    """Total estimated calories, or None if no food was recognized.

    Absence means "no estimate", never zero calories.

    Example:
        >>> estimate_calories([FoodItem(name="eggs", quantity="2"), FoodItem(name="rice", quantity="1")])
        270
        >>> estimate_calories([FoodItem(name="quinoa")]) is None
        True
    """
    total = 0.0
    matched = False
    for food in foods:
        calories = estimate_food_calories(food)
        if calories is None:
            continue
        matched = True
        total += calories
    if not matched:
        return None
    return max(round_half_up(total), 0)
