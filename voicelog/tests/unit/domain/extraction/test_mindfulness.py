"""Unit tests for the meditation, habit and journal extractors."""

import pytest

from voicelog.domain.extraction.habit import UNKNOWN_HABIT, extract_habit, extract_habit_name
from voicelog.domain.extraction.journal import extract_journal, extract_journal_content
from voicelog.domain.extraction.meditation import (
    DEFAULT_DURATION_MINUTES,
    DEFAULT_MEDITATION_TYPE,
    extract_meditation,
)


class TestMeditation:
    """Test meditation extraction."""

    def test_minutes(self) -> None:
        """Test a minute duration with the default type."""
        meditation = extract_meditation("meditated for 20 minutes")

        assert meditation.duration_minutes == 20
        assert meditation.meditation_type == DEFAULT_MEDITATION_TYPE

    def test_hour(self) -> None:
        """Test an hour is converted to 60 minutes."""
        assert extract_meditation("meditate 1 hour").duration_minutes == 60

    def test_default_duration(self) -> None:
        """Test a missing duration defaults to ten minutes."""
        assert extract_meditation("silent meditation").duration_minutes == DEFAULT_DURATION_MINUTES

    @pytest.mark.parametrize(
        "command,meditation_type",
        [
            ("silent meditation", "silent"),
            ("walking meditation", "walking"),
            ("body scan meditation for 15 min", "body_scan"),
            ("loving kindness meditation", "loving_kindness"),
            ("mindfulness session", "mindfulness"),
            ("guided meditation", "guided"),
        ],
    )
    def test_type(self, command: str, meditation_type: str) -> None:
        """Test meditation type buckets."""
        assert extract_meditation(command).meditation_type == meditation_type


class TestHabit:
    """Test habit extraction."""

    def test_name_without_boilerplate(self) -> None:
        """Test verb, article and category noun are stripped."""
        assert extract_habit_name("complete my morning stretch habit") == "Morning stretch"

    def test_casing_preserved_after_first_letter(self) -> None:
        """Test only the first letter is upper-cased."""
        assert extract_habit_name("completed the NYT crossword task") == "NYT crossword"

    def test_only_boilerplate(self) -> None:
        """Test the placeholder name when nothing meaningful is left."""
        assert extract_habit_name("complete habit") == UNKNOWN_HABIT

    def test_notes(self) -> None:
        """Test notes after "because"."""
        habit = extract_habit("complete reading task because it was fun")

        assert habit.notes == "it was fun"

    def test_notes_marker(self) -> None:
        """Test notes after "with notes"."""
        assert extract_habit("complete flossing habit with notes felt easy").notes == "felt easy"

    def test_no_notes(self) -> None:
        """Test notes are absent by default."""
        assert extract_habit("complete my walk task").notes is None


class TestJournal:
    """Test journal extraction."""

    def test_trigger_removed(self) -> None:
        """Test the trigger word is stripped from the content."""
        assert extract_journal_content("journal today was a long day") == "today was a long day"

    def test_write_about(self) -> None:
        """Test "write about" is stripped and casing is kept."""
        assert extract_journal_content("write about my trip to Rome") == "my trip to Rome"

    def test_colon(self) -> None:
        """Test a colon after the trigger is stripped."""
        journal = extract_journal("journal: great day at the beach")

        assert journal.content == "great day at the beach"
        assert journal.mood == "happy"

    def test_generic_nouns_removed(self) -> None:
        """Test "entry" is stripped and the mood word is detected."""
        journal = extract_journal("journal entry: feeling overwhelmed at work")

        assert journal.content == "feeling overwhelmed at work"
        assert journal.mood == "stressed"

    @pytest.mark.parametrize("command", ["journal", "log thought", "write about"])
    def test_content_never_empty(self, command: str) -> None:
        """Test the whole utterance is kept when too little remains."""
        assert extract_journal(command).content == command

    def test_no_mood(self) -> None:
        """Test mood is absent without a mood word."""
        assert extract_journal("journal today was a long day").mood is None
