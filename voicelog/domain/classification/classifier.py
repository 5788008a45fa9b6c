"""Command classifier: first matching rule wins, otherwise UNKNOWN."""

from __future__ import annotations

from typing import Optional, Sequence

from voicelog.domain.classification.rules import CLASSIFICATION_RULES, ClassificationRule
from voicelog.domain.commands.intents import CommandIntent


def normalize_for_matching(command: str) -> str:
    return command.lower().strip()


def select_rule(
    command: str,
    rules: Sequence[ClassificationRule] = CLASSIFICATION_RULES,
) -> Optional[ClassificationRule]:
    """First rule matching the utterance, or None. Never raises."""
    text = normalize_for_matching(command)
    for rule in rules:
        if rule.matches(text):
            return rule
    return None


def classify(
    command: str,
    rules: Sequence[ClassificationRule] = CLASSIFICATION_RULES,
) -> CommandIntent:
    """
    Select exactly one intent for an utterance.

    Example:
        >>> classify("log water with my meal")
        <CommandIntent.WATER: 'water'>
        >>> classify("hello there")
        <CommandIntent.UNKNOWN: 'unknown'>
    """
    rule = select_rule(command, rules)
    return rule.intent if rule else CommandIntent.UNKNOWN
