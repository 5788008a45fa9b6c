"""Command intents."""

from __future__ import annotations

from enum import Enum


class CommandIntent(str, Enum):
    """
    Coarse category assigned to an utterance.

    Exactly one intent is selected per utterance; ``UNKNOWN`` means no
    classification rule matched.
    """

    MEAL = "meal"
    SUPPLEMENT = "supplement"
    WORKOUT = "workout"
    WATER = "water"
    WEIGHT = "weight"
    SLEEP = "sleep"
    MOOD = "mood"
    MEDITATION = "meditation"
    HABIT = "habit"
    JOURNAL = "journal"
    UNKNOWN = "unknown"
