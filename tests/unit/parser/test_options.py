"""Tests for option list parsing in revise.parser.options."""

import pytest

from revise.models.diagnostic import Diagnostic, Span
from revise.parser.cursor import Cursor
from revise.parser.options import parse_option, parse_options, parse_quoted


@pytest.mark.unit
class TestParseQuoted:
    """Tests for quoted options."""

    def test_escapes(self) -> None:
        """Test backslash-escaped quotes and backslashes are unescaped."""
        cursor = Cursor('"a\\"b\\\\c"')
        assert parse_quoted(cursor) == 'a"b\\c'
        assert cursor.diagnostics == []
        assert cursor.at_end()

    def test_unknown_escapes_are_dropped(self) -> None:
        """Test unknown escapes are reported and left out of the value."""
        cursor = Cursor("\"\\'\\/\\\\\"")
        assert parse_quoted(cursor) == "\\"
        assert cursor.diagnostics == [
            Diagnostic.unknown_escape("'", Span(2, 3)),
            Diagnostic.unknown_escape("/", Span(4, 5)),
        ]

    def test_unclosed_quote(self) -> None:
        """Test a quote left open at the end of the line keeps its contents."""
        cursor = Cursor('"abc\nnext')
        assert parse_quoted(cursor) == "abc"
        assert cursor.diagnostics == [Diagnostic.unclosed_quote(Span(0, 4))]
        assert cursor.remaining == "\nnext"

    def test_escaped_carriage_return(self) -> None:
        """Test a backslash can swallow a CR, leaving the quote unclosed."""
        cursor = Cursor('"\\\r\n')
        assert parse_quoted(cursor) == ""
        assert cursor.diagnostics == [
            Diagnostic.unknown_escape("\r", Span(2, 3)),
            Diagnostic.unclosed_quote(Span(0, 3)),
        ]

    def test_not_quoted(self) -> None:
        """Test nothing matches without an opening quote."""
        assert parse_quoted(Cursor("abc")) is None


@pytest.mark.unit
class TestParseOption:
    """Tests for single options."""

    def test_multi_word_option(self) -> None:
        """Test words separated by whitespace form one option."""
        cursor = Cursor("a  b  ")
        assert parse_option(cursor) == "a  b"
        assert cursor.remaining == "  "

    def test_trailing_line_separator_not_included(self) -> None:
        """Test whitespace without a following word is left unconsumed."""
        cursor = Cursor("a ")
        assert parse_option(cursor) == "a"
        assert cursor.remaining == " "

    def test_control_whitespace_inside_option(self) -> None:
        """Test control whitespace joins words but is reported."""
        cursor = Cursor("a\x85b")
        assert parse_option(cursor) == "a\x85b"
        assert cursor.diagnostics == [
            Diagnostic.unexpected_control_char("\x85", Span(1, 3))
        ]

    def test_dash_runs_between_words(self) -> None:
        """Test dashes glue words but trailing dashes are left alone."""
        cursor = Cursor("a---b---")
        assert parse_option(cursor) == "a---b"
        assert cursor.remaining == "---"

    def test_spaced_dash_is_not_part_of_option(self) -> None:
        """Test a dash surrounded by spaces ends the option."""
        cursor = Cursor("hund - dog")
        assert parse_option(cursor) == "hund"
        assert cursor.remaining == " - dog"

    def test_characters_after_quote(self) -> None:
        """Test characters after a closing quote join the option."""
        cursor = Cursor('"a"bc')
        assert parse_option(cursor) == "abc"
        assert cursor.diagnostics == [Diagnostic.trailing_option_chars(Span(3, 5))]

    def test_comment_ends_option(self) -> None:
        """Test '#' is not part of a bare option."""
        cursor = Cursor("a#b")
        assert parse_option(cursor) == "a"
        assert cursor.remaining == "#b"


@pytest.mark.unit
class TestParseOptions:
    """Tests for comma-separated option lists."""

    def test_simple_list(self) -> None:
        """Test options are split on commas and trimmed."""
        cursor = Cursor("dog,  hound , big dog")
        assert parse_options(cursor) == frozenset({"dog", "hound", "big dog"})
        assert cursor.diagnostics == []

    def test_empty_option_between_commas(self) -> None:
        """Test two commas in a row report the gap."""
        cursor = Cursor("a  ,  b ,, c")
        assert parse_options(cursor) == frozenset({"a", "b", "c"})
        assert cursor.diagnostics == [Diagnostic.empty_option(Span(8, 10))]

    def test_only_commas(self) -> None:
        """Test a list of nothing but commas reports every empty position."""
        cursor = Cursor(",   , ")
        assert parse_options(cursor) == frozenset()
        assert cursor.diagnostics == [
            Diagnostic.empty_option(Span(0, 1)),
            Diagnostic.empty_option(Span(0, 5)),
            Diagnostic.empty_option(Span(4, 6)),
        ]
        assert cursor.remaining == " "

    def test_empty_quoted_option(self) -> None:
        """Test an empty quoted string is an empty option."""
        cursor = Cursor('""')
        assert parse_options(cursor) == frozenset()
        assert cursor.diagnostics == [Diagnostic.empty_option(Span(0, 2))]

    def test_duplicate_option(self) -> None:
        """Test a repeated option is reported against its first occurrence."""
        cursor = Cursor("a, b, a")
        assert parse_options(cursor) == frozenset({"a", "b"})
        assert cursor.diagnostics == [
            Diagnostic.duplicate_option(Span(0, 1), Span(6, 7))
        ]

    def test_quoted_and_bare_duplicates(self) -> None:
        """Test quoting does not make an option distinct."""
        cursor = Cursor('a, "a"')
        assert parse_options(cursor) == frozenset({"a"})
        assert cursor.diagnostics == [
            Diagnostic.duplicate_option(Span(0, 1), Span(3, 6))
        ]

    def test_no_list(self) -> None:
        """Test nothing matches at a dash."""
        cursor = Cursor("- b")
        assert parse_options(cursor) is None
        assert cursor.offset == 0
