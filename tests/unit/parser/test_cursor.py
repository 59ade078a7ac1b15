"""Tests for the backtracking cursor in revise.parser.cursor."""

import pytest

from revise.models.diagnostic import Diagnostic, Span
from revise.parser.cursor import Cursor, utf8_len


@pytest.mark.unit
class TestUtf8Len:
    """Tests for utf8_len."""

    @pytest.mark.parametrize(
        "character,expected",
        [("a", 1), ("\x85", 2), ("\xe9", 2), ("\u20ac", 3), ("\U0001f600", 4)],
    )
    def test_matches_encoded_length(self, character: str, expected: int) -> None:
        """Test byte lengths agree with str.encode."""
        assert utf8_len(character) == expected
        assert len(character.encode("utf-8")) == expected


@pytest.mark.unit
class TestCursor:
    """Tests for Cursor navigation and backtracking."""

    def test_advance_tracks_index_and_byte_offset(self) -> None:
        """Test advancing over multi-byte characters moves offset by bytes."""
        cursor = Cursor("\xe9a")
        assert cursor.advance() == "\xe9"
        assert cursor.index == 1
        assert cursor.offset == 2
        assert cursor.advance() == "a"
        assert cursor.offset == 3
        assert cursor.at_end()

    def test_advance_at_end_returns_none(self) -> None:
        """Test advancing past the end returns None without moving."""
        cursor = Cursor("")
        assert cursor.advance() is None
        assert cursor.peek() is None
        assert cursor.offset == 0

    def test_peek_does_not_consume(self) -> None:
        """Test peek leaves the cursor in place."""
        cursor = Cursor("xy")
        assert cursor.peek() == "x"
        assert cursor.offset == 0
        assert cursor.remaining == "xy"

    def test_attempt_keeps_effects_on_match(self) -> None:
        """Test a matching sub-parser keeps its position and diagnostics."""
        cursor = Cursor("ab")

        def take(cur: Cursor) -> str | None:
            cur.emit(Diagnostic.empty_set())
            return cur.advance()

        assert cursor.attempt(take) == "a"
        assert cursor.offset == 1
        assert cursor.diagnostics == [Diagnostic.empty_set()]

    def test_attempt_rolls_back_on_no_match(self) -> None:
        """Test a failing sub-parser leaves no trace."""
        cursor = Cursor("abc")
        cursor.advance()
        cursor.emit(Diagnostic.empty_option(Span(0, 1)))

        def fail(cur: Cursor) -> str | None:
            cur.advance()
            cur.advance()
            cur.emit(Diagnostic.empty_set())
            return None

        assert cursor.attempt(fail) is None
        assert cursor.offset == 1
        assert cursor.index == 1
        assert cursor.diagnostics == [Diagnostic.empty_option(Span(0, 1))]

    def test_attempt_treats_empty_string_as_match(self) -> None:
        """Test only None means no match."""
        cursor = Cursor("a")

        def empty(cur: Cursor) -> str | None:
            cur.advance()
            return ""

        assert cursor.attempt(empty) == ""
        assert cursor.offset == 1
