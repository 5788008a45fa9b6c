"""Shared domain primitives."""

from voicelog.domain.shared.errors import (
    DomainError,
    ExtractionError,
    MissingValueError,
    VoiceCommandError,
)

__all__ = [
    "DomainError",
    "VoiceCommandError",
    "ExtractionError",
    "MissingValueError",
]
