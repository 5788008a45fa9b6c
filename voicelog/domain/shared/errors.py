"""
Domain exceptions.

Typed exceptions raised by the extractors. They never leave
``parse_command``: the parsing service converts them into a
``ParseError`` result.
"""

from __future__ import annotations

from typing import Optional


# ═══════════════════════════════════════════════════════════
# BASE EXCEPTION
# ═══════════════════════════════════════════════════════════


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain-specific exceptions inherit from this.
    """

    pass


# ═══════════════════════════════════════════════════════════
# VOICE COMMAND EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class VoiceCommandError(DomainError):
    """Base exception for voice command interpretation."""

    pass


class ExtractionError(VoiceCommandError):
    """
    An intent was identified but its payload could not be built.

    Attributes:
        intent: Intent value the extractor was working on (e.g. "weight")
        message: Human-readable reason

    Example:
        >>> raise ExtractionError("weight", "Could not parse weight from command")
    """

    def __init__(self, intent: str, message: str) -> None:
        super().__init__(message)
        self.intent = intent
        self.message = message

    def __str__(self) -> str:
        return f"[{self.intent}] {self.message}"


class MissingValueError(ExtractionError):
    """
    A required value is absent from the utterance.

    Raised when:
    - A weight command carries no number with a weight unit

    Example:
        >>> raise MissingValueError("weight", "weight value", "log my weight")
    """

    def __init__(self, intent: str, field: str, command: Optional[str] = None) -> None:
        super().__init__(intent, f"Could not parse {field} from command")
        self.field = field
        self.command = command
