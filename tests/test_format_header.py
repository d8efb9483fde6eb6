"""Unit tests for the format-header parser."""
import pytest

from wod_syntax_api.parsers.errors import MalformedFormatHeaderError
from wod_syntax_api.parsers.format_header import is_format_header, looks_like_format_header, parse_format_header
from wod_syntax_api.parsers.models import ExerciseEntry, FormatKind


class TestParseFormatHeader:
    """Test cases for the four format headers."""

    def test_amrap(self):
        """Test 'AMRAP 12min:'."""
        header = parse_format_header("AMRAP 12min:", line_number=2)
        assert header.format == FormatKind.AMRAP
        assert header.duration_minutes == 12
        assert header.rounds is None
        assert header.line_number == 2

    @pytest.mark.parametrize("text", ["amrap 20 min:", "AMRAP 20mins:", "Amrap 20 minutes:", "AMRAP 20min :"])
    def test_amrap_variants(self, text):
        """Test case and minute spellings are tolerated."""
        header = parse_format_header(text)
        assert header.format == FormatKind.AMRAP
        assert header.duration_minutes == 20

    def test_emom(self):
        """Test 'EMOM 10min:'."""
        header = parse_format_header("EMOM 10min:")
        assert header.format == FormatKind.EMOM
        assert header.duration_minutes == 10

    def test_for_time_with_ladder(self):
        """Test '21-15-9 For Time:' keeps the ladder and its text."""
        header = parse_format_header("21-15-9 For Time:")
        assert header.format == FormatKind.FOR_TIME
        assert header.rep_ladder == (21, 15, 9)
        assert header.description == "21-15-9"

    def test_for_time_bare(self):
        """Test 'For Time:' without a ladder."""
        header = parse_format_header("for time:")
        assert header.format == FormatKind.FOR_TIME
        assert header.rep_ladder is None
        assert header.description is None

    def test_rounds(self):
        """Test '5 Rounds:'."""
        header = parse_format_header("5 Rounds:")
        assert header.format == FormatKind.ROUNDS
        assert header.rounds == 5

    def test_single_round(self):
        """Test '1 Round:' is accepted."""
        assert parse_format_header("1 Round:").rounds == 1

    @pytest.mark.parametrize("text", [
        "AMRAP:",
        "AMRAP min:",
        "AMRAP twelve min:",
        "AMRAP 0min:",
        "EMOM 10:",
        "EMOM 10min",
        "0 Rounds:",
        "Rounds:",
        "Warm-up:",
        "Tabata:",
        "21-15 For Reps:",
    ])
    def test_malformed(self, text):
        """Test anything else fails closed."""
        with pytest.raises(MalformedFormatHeaderError) as exc_info:
            parse_format_header(text, line_number=9)
        assert exc_info.value.line_number == 9
        assert exc_info.value.content == text

    def test_to_entry_attaches_exercises(self):
        """Test the header becomes a format group once exercises are known."""
        header = parse_format_header("3 Rounds:")
        entry = header.to_entry((ExerciseEntry(name="Burpees", reps=10),))
        assert entry.format == FormatKind.ROUNDS
        assert entry.rounds == 3
        assert entry.exercises[0].name == "Burpees"


class TestLooksLikeFormatHeader:
    """Test cases for keyword detection."""

    @pytest.mark.parametrize("text", ["AMRAP 12min", "emom", "For Time", "21-15-9 For Time", "5 Rounds"])
    def test_keywords(self, text):
        assert looks_like_format_header(text) is True

    @pytest.mark.parametrize("text", ["Bench Press: 3x8", "Amrapper: 5", "5 Push-ups", "Roundhouse Kicks: 10"])
    def test_non_keywords(self, text):
        assert looks_like_format_header(text) is False


class TestIsFormatHeader:
    """Test cases for complete-header detection."""

    @pytest.mark.parametrize("text", ["AMRAP 10min:", "emom 5 minutes:", "For Time:", "21-15-9 For Time:", "1 Round:"])
    def test_complete_headers(self, text):
        assert is_format_header(text) is True

    @pytest.mark.parametrize("text", ["AMRAP 10min", "AMRAP Max Reps: 3x8", "10 Rounds of Fun", "Warm-up:"])
    def test_not_complete_headers(self, text):
        """Test keyword lines that are not full headers."""
        assert is_format_header(text) is False
