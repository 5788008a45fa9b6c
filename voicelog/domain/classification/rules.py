"""
Classification rules.

The order of ``CLASSIFICATION_RULES`` is the disambiguation policy: intents
overlap lexically, so rules are evaluated top-to-bottom and the first match
wins. All tests are case-insensitive substring containment, not word
matching ("seawater" contains "water").
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from pydantic import BaseModel

from voicelog.domain.commands.intents import CommandIntent
from voicelog.domain.extraction import (
    extract_habit,
    extract_journal,
    extract_meal,
    extract_meditation,
    extract_mood,
    extract_sleep,
    extract_supplement,
    extract_water,
    extract_weight,
    extract_workout,
)

Extractor = Callable[[str], BaseModel]


@dataclass(frozen=True, slots=True)
class Clause:
    """
    One conjunctive test over the lowercased utterance.

    Matches when every ``all_of`` term is present, at least one ``any_of``
    term is present (if any are given) and no ``none_of`` term is present.
    """

    all_of: tuple[str, ...] = ()
    any_of: tuple[str, ...] = ()
    none_of: tuple[str, ...] = ()

    def matches(self, text: str) -> bool:
        if not all(term in text for term in self.all_of):
            return False
        if self.any_of and not any(term in text for term in self.any_of):
            return False
        return not any(term in text for term in self.none_of)


@dataclass(frozen=True, slots=True)
class ClassificationRule:
    """Intent selected when any clause matches, and the extractor it dispatches to."""

    intent: CommandIntent
    clauses: tuple[Clause, ...]
    extractor: Extractor
    error_message: str

    def matches(self, text: str) -> bool:
        return any(clause.matches(text) for clause in self.clauses)


CLASSIFICATION_RULES: tuple[ClassificationRule, ...] = (
    # Before meal: "drink" collides with meal language.
    ClassificationRule(
        CommandIntent.WATER,
        (
            Clause(all_of=("water",)),
            Clause(all_of=("drink",), none_of=("meal", "eat")),
        ),
        extract_water,
        "Could not understand water amount",
    ),
    ClassificationRule(
        CommandIntent.WEIGHT,
        (Clause(any_of=("weight", "weigh")),),
        extract_weight,
        "Could not understand weight measurement",
    ),
    ClassificationRule(
        CommandIntent.SLEEP,
        (
            Clause(any_of=("sleep", "slept")),
            Clause(all_of=("bed", "hours")),
        ),
        extract_sleep,
        "Could not understand sleep details",
    ),
    ClassificationRule(
        CommandIntent.MOOD,
        (
            Clause(any_of=("mood", "feeling")),
            Clause(all_of=("feel",), any_of=("happy", "sad", "angry", "anxious", "stressed")),
        ),
        extract_mood,
        "Could not understand mood",
    ),
    ClassificationRule(
        CommandIntent.MEDITATION,
        (Clause(any_of=("meditation", "meditate", "mindfulness")),),
        extract_meditation,
        "Could not understand meditation details",
    ),
    ClassificationRule(
        CommandIntent.HABIT,
        (Clause(all_of=("complete",), any_of=("habit", "task", "done")),),
        extract_habit,
        "Could not understand habit name",
    ),
    ClassificationRule(
        CommandIntent.JOURNAL,
        (
            Clause(any_of=("journal", "journaling")),
            Clause(all_of=("write", "about")),
            Clause(all_of=("log", "thought")),
        ),
        extract_journal,
        "Could not understand journal entry",
    ),
    ClassificationRule(
        CommandIntent.SUPPLEMENT,
        (
            Clause(any_of=("supplement", "vitamin", "mineral")),
            Clause(all_of=("add",), any_of=("pill", "capsule", "tablet")),
        ),
        extract_supplement,
        "Could not understand supplement details",
    ),
    ClassificationRule(
        CommandIntent.WORKOUT,
        (
            Clause(
                any_of=("workout", "exercise", "run", "walk", "bike", "swim", "lift", "gym"),
            ),
        ),
        extract_workout,
        "Could not understand workout details",
    ),
    # Last and narrowest, so "eat"/"ate" never pre-empt another intent.
    ClassificationRule(
        CommandIntent.MEAL,
        (
            Clause(
                all_of=("log",),
                any_of=("breakfast", "lunch", "dinner", "snack", "meal", "eat", "ate", "food"),
            ),
        ),
        extract_meal,
        "Could not understand meal description",
    ),
)
