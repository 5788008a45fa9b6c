"""
Voice command parsing service.

Public entry point of the engine: utterance → classifier → extractor →
``ParseResult``. Every extractor runs inside a guard, so no exception
ever escapes ``parse_command``.

Example:
    >>> parse_command("log water").payload.amount
    237
    >>> parse_command("log my weight").kind
    'parse_error'
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

import structlog

from voicelog.domain.classification.classifier import select_rule
from voicelog.domain.classification.rules import CLASSIFICATION_RULES, ClassificationRule
from voicelog.domain.commands.results import (
    RESULT_BY_INTENT,
    ParseError,
    ParseResult,
    Unknown,
)
from voicelog.domain.shared.errors import ExtractionError

logger = structlog.wrap_logger(logging.getLogger(__name__))


def _encodable(text: str) -> str:
    """Escape lone surrogates so the text can be logged and serialized."""
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return text.encode("utf-8", "backslashreplace").decode("utf-8")
    return text


class VoiceCommandParser:
    """
    Stateless parser over an ordered rule table.

    Instances hold only the (immutable) rule table and may be shared
    freely between threads.
    """

    def __init__(self, rules: Sequence[ClassificationRule] = CLASSIFICATION_RULES) -> None:
        self._rules = tuple(rules)

    @property
    def rules(self) -> tuple[ClassificationRule, ...]:
        return self._rules

    def parse(self, command: Any) -> ParseResult:
        """Parse one utterance into exactly one ParseResult variant.

        Args:
            command: Transcribed utterance. ``None`` is treated as empty;
                other non-strings are converted with ``str()``. Lone
                surrogates are backslash-escaped.

        Returns:
            Intent payload, ``ParseError`` (intent found, required value
            missing) or ``Unknown`` (no rule matched)
        """
        if command is None:
            text = ""
        elif isinstance(command, str):
            text = command
        else:
            try:
                text = str(command)
            except Exception:
                logger.warning("command_not_stringable", type=type(command).__name__)
                text = ""
        text = _encodable(text)

        rule = select_rule(text, self._rules)
        if rule is None:
            logger.debug("command_unknown", command=text)
            return Unknown(command=text)

        logger.debug("command_classified", intent=rule.intent.value)
        try:
            payload = rule.extractor(text)
            return RESULT_BY_INTENT[rule.intent](payload=payload)
        except ExtractionError as e:
            logger.info(
                "command_extraction_failed",
                intent=rule.intent.value,
                command=text,
                reason=e.message,
            )
        except Exception as e:
            logger.warning(
                "command_extraction_error",
                intent=rule.intent.value,
                command=text,
                error=repr(e),
            )
        return ParseError(
            original_command=text,
            error_message=rule.error_message,
            failed_intent=rule.intent,
        )


_default_parser = VoiceCommandParser()


def parse_command(command: Any) -> ParseResult:
    """Parse an utterance with the default rule table. Never raises."""
    return _default_parser.parse(command)
