"""
Shared fixtures for voicelog tests.

The engine is pure, so fixtures provide parser instances and ready-made
payloads, and undo any logging setup a test performs.
"""

import logging
from typing import Iterator

import pytest
import structlog

from voicelog.application.parsing import VoiceCommandParser
from voicelog.domain.commands import FoodItem, ParsedMealCommand, ParsedWorkoutCommand
from voicelog.infrastructure.logging_config import HANDLER_NAME


@pytest.fixture(autouse=True)
def clean_logging() -> Iterator[None]:
    """Restore structlog defaults and drop the voicelog root handler."""
    root = logging.getLogger()
    level = root.level
    yield
    structlog.reset_defaults()
    for handler in list(root.handlers):
        if handler.get_name() == HANDLER_NAME:
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def parser() -> VoiceCommandParser:
    """Parser over the default rule table."""
    return VoiceCommandParser()


@pytest.fixture
def breakfast() -> ParsedMealCommand:
    return ParsedMealCommand(
        meal_type="breakfast",
        foods=(
            FoodItem(name="eggs", quantity="2"),
            FoodItem(name="rice", quantity="1", unit="cup"),
        ),
        total_calories=270,
    )


@pytest.fixture
def run_workout() -> ParsedWorkoutCommand:
    return ParsedWorkoutCommand(
        workout_type="Running",
        duration_minutes=30,
        distance=5.0,
        distance_unit="km",
        calories_burned=300,
    )
