"""
Meal extractor.

Turns "log 2 eggs and 1 cup rice for breakfast" into a meal type, a list
of foods and a rough calorie estimate.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

import structlog

from voicelog.domain.commands.models import FoodItem, ParsedMealCommand
from voicelog.domain.estimation.calories import estimate_calories
from voicelog.domain.extraction.common import match_bucket, squash

logger = structlog.wrap_logger(logging.getLogger(__name__))

MEAL_TYPES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("breakfast",), "breakfast"),
    (("lunch",), "lunch"),
    (("dinner",), "dinner"),
    (("snack",), "snack"),
)

# Meal-type words (with a leading "for"/"at"/"during") and filler tokens.
_BOILERPLATE = re.compile(
    r"\b(?:(?:for|at|during)\s+)?(?:breakfast|lunch|dinner|snack)\b"
    r"|\b(?:log|a|an|of|the|meal)\b",
    re.IGNORECASE,
)

_SEPARATORS = re.compile(r",|\band\b|\bwith\b|\bplus\b", re.IGNORECASE)

FOOD_UNITS: tuple[str, ...] = (
    "cups", "cup",
    "ounces", "ounce", "oz",
    "pounds", "pound", "lbs", "lb",
    "grams", "gram", "g",
    "kilograms", "kilogram", "kg",
    "pieces", "piece",
    "slices", "slice",
    "tablespoons", "tablespoon", "tbsp",
    "teaspoons", "teaspoon", "tsp",
)

_FOOD_PATTERN = re.compile(
    r"^(?:(\d+(?:\.\d+)?)(?![\d.]))?\s*(?:(" + "|".join(FOOD_UNITS) + r")\b)?\s*(.+)$",
    re.IGNORECASE,
)


def extract_meal_type(command: str) -> Optional[str]:
    return match_bucket(command, MEAL_TYPES)


def parse_food(segment: str) -> FoodItem:
    """Parse one segment: optional quantity, optional unit, then the name."""
    part = segment.strip()
    match = _FOOD_PATTERN.match(part)
    if match is None:
        return FoodItem(name=part)

    name = match.group(3).strip()
    if not name:
        return FoodItem(name=part)
    return FoodItem(name=name, quantity=match.group(1), unit=match.group(2))


def split_food_segments(command: str) -> list[str]:
    """Strip boilerplate and split the remainder on , and with plus."""
    cleaned = squash(_BOILERPLATE.sub(" ", command))
    return [squash(part) for part in _SEPARATORS.split(cleaned) if part.strip()]


def extract_food_items(command: str) -> list[FoodItem]:
    segments = split_food_segments(command)
    foods = [parse_food(segment) for segment in segments]
    logger.debug("food_items_extracted", segments=segments, count=len(foods))
    return foods


def extract_meal(command: str) -> ParsedMealCommand:
    foods = extract_food_items(command)
    return ParsedMealCommand(
        meal_type=extract_meal_type(command),
        foods=tuple(foods),
        total_calories=estimate_calories(foods),
    )
