"""Ordered intent classification."""

from voicelog.domain.classification.classifier import classify, select_rule
from voicelog.domain.classification.rules import (
    CLASSIFICATION_RULES,
    ClassificationRule,
    Clause,
)

__all__ = [
    "classify",
    "select_rule",
    "CLASSIFICATION_RULES",
    "ClassificationRule",
    "Clause",
]
