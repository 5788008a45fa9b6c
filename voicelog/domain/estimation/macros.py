"""
Macro estimation for spoken meals.

Coarser than a nutrition database lookup: used when a host stores a meal
log straight from voice input. Unknown foods get a generic estimate, so
the result is always populated (unlike ``estimate_calories``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from voicelog.domain.commands.models import FoodItem


@dataclass(frozen=True, slots=True)
class MacroRow:
    keywords: tuple[str, ...]
    calories: float
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0


@dataclass(frozen=True, slots=True)
class MacroEstimate:
    calories: int = 0
    protein: int = 0
    carbs: int = 0
    fat: int = 0

    def __add__(self, other: "MacroEstimate") -> "MacroEstimate":
        return MacroEstimate(
            calories=self.calories + other.calories,
            protein=self.protein + other.protein,
            carbs=self.carbs + other.carbs,
            fat=self.fat + other.fat,
        )


MACRO_TABLE: tuple[MacroRow, ...] = (
    MacroRow(("steak", "beef"), 250, protein=25, fat=15),
    MacroRow(("chicken", "poultry"), 200, protein=30, fat=5),
    MacroRow(("fish", "salmon", "tuna"), 180, protein=25, fat=8),
    MacroRow(("egg",), 70, protein=6, fat=5),
    MacroRow(("rice", "pasta"), 130, protein=3, carbs=28),
    MacroRow(("bread", "toast"), 80, protein=3, carbs=15),
    MacroRow(("apple",), 95, carbs=25),
    MacroRow(("banana",), 105, carbs=27),
    MacroRow(("vegetable", "salad", "broccoli", "spinach"), 30, protein=2, carbs=5),
)

GENERIC_FOOD = MacroRow((), 100, protein=5, carbs=15, fat=3)


def lookup_macro_row(name: str) -> MacroRow:
    lowered = name.lower()
    for row in MACRO_TABLE:
        if any(keyword in lowered for keyword in row.keywords):
            return row
    return GENERIC_FOOD


def estimate_food_macros(food: FoodItem) -> MacroEstimate:
    """Per-food estimate; each value is quantity × per-unit, truncated."""
    row = lookup_macro_row(food.name)
    quantity = food.quantity_value()
    return MacroEstimate(
        calories=int(quantity * row.calories),
        protein=int(quantity * row.protein),
        carbs=int(quantity * row.carbs),
        fat=int(quantity * row.fat),
    )


def estimate_macros(foods: Iterable[FoodItem]) -> MacroEstimate:
    """Sum of per-food macro estimates.

    Example:
        >>> estimate_macros([FoodItem(name="steak")])
        MacroEstimate(calories=250, protein=25, carbs=0, fat=15)
    """
    total = MacroEstimate()
    for food in foods:
        total = total + estimate_food_macros(food)
    return total
