"""
Intent extractors.

One pure function per intent, ``extract_<intent>(command) -> Parsed...``.
Extractors receive the utterance with its original casing and raise
``ExtractionError`` only when a required value is missing.
"""

from voicelog.domain.extraction.habit import extract_habit
from voicelog.domain.extraction.journal import extract_journal
from voicelog.domain.extraction.meal import extract_meal
from voicelog.domain.extraction.meditation import extract_meditation
from voicelog.domain.extraction.mood import extract_mood
from voicelog.domain.extraction.sleep import extract_sleep
from voicelog.domain.extraction.supplement import extract_supplement
from voicelog.domain.extraction.water import extract_water
from voicelog.domain.extraction.weight import extract_weight
from voicelog.domain.extraction.workout import extract_workout

__all__ = [
    "extract_meal",
    "extract_supplement",
    "extract_workout",
    "extract_water",
    "extract_weight",
    "extract_sleep",
    "extract_mood",
    "extract_meditation",
    "extract_habit",
    "extract_journal",
]
