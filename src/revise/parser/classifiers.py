"""Character-level parsers for set documents.

These accept irregular input but flag it: a tab used as a separator, a control
character inside a line, or a bare carriage return are all consumed as the
grammar expects and reported as soft diagnostics.
"""

from __future__ import annotations

import unicodedata

from revise.models.diagnostic import Diagnostic, Span
from revise.parser.cursor import Cursor, utf8_len

# Unicode White_Space property. str.isspace() also accepts U+001C..U+001F,
# which are control characters here, not separators.
WHITESPACE = frozenset(
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)
WHITESPACE_CHARS = "".join(sorted(WHITESPACE))
NEWLINE_CHARS = frozenset("\r\n")


def is_whitespace(character: str) -> bool:
    """Whether ``character`` has the Unicode White_Space property."""
    return character in WHITESPACE


def is_control(character: str) -> bool:
    """Whether ``character`` is in the Unicode Cc (control) category."""
    return unicodedata.category(character) == "Cc"


def strip_whitespace(text: str) -> str:
    """Trim Unicode White_Space from both ends of ``text``."""
    return text.strip(WHITESPACE_CHARS)


def _span_before(cursor: Cursor, character: str) -> Span:
    return Span(cursor.offset - utf8_len(character), cursor.offset)


def _line_whitespace(cursor: Cursor) -> str | None:
    character = cursor.advance()
    if character is None or character in NEWLINE_CHARS:
        return None
    return character if is_whitespace(character) else None


def parse_any(cursor: Cursor) -> str | None:
    """Consume any single character, including line breaks."""
    return cursor.advance()


def parse_exact(cursor: Cursor, expected: str) -> str | None:
    """Consume ``expected`` if it is the next character."""

    def exact(cur: Cursor) -> str | None:
        return expected if cur.advance() == expected else None

    return cursor.attempt(exact)


def parse_character(cursor: Cursor) -> str | None:
    """Consume one character of the current line.

    Anything but CR and LF is accepted. Control characters are still
    consumed, but flagged with ``UnexpectedControlChar``.
    """

    def line_character(cur: Cursor) -> str | None:
        character = cur.advance()
        if character is None or character in NEWLINE_CHARS:
            return None
        return character

    character = cursor.attempt(line_character)
    if character is None:
        return None
    if is_control(character):
        cursor.emit(
            Diagnostic.unexpected_control_char(
                character, _span_before(cursor, character)
            )
        )
    return character


def parse_text_character(cursor: Cursor) -> str | None:
    """Consume one line character that does not start a comment."""

    def text_character(cur: Cursor) -> str | None:
        character = parse_character(cur)
        return None if character is None or character == "#" else character

    return cursor.attempt(text_character)


def parse_ws(cursor: Cursor) -> str | None:
    """Consume one separator whitespace character.

    Any whitespace other than CR and LF separates fields; anything but a
    plain space is flagged with ``ExpectedSpace``.
    """
    character = cursor.attempt(_line_whitespace)
    if character is None:
        return None
    if character != " ":
        cursor.emit(
            Diagnostic.expected_space(character, _span_before(cursor, character))
        )
    return character


def skip_ws(cursor: Cursor) -> bool:
    """Consume a run of separator whitespace; return whether any was found."""
    found = False
    while parse_ws(cursor) is not None:
        found = True
    return found


def parse_option_ws(cursor: Cursor) -> str | None:
    """Consume one whitespace character inside a multi-word option.

    The character becomes part of the option's value, so it is returned.
    Whitespace control characters (tab, U+0085, ...) are flagged.
    """
    character = cursor.attempt(_line_whitespace)
    if character is None:
        return None
    if is_control(character):
        cursor.emit(
            Diagnostic.unexpected_control_char(
                character, _span_before(cursor, character)
            )
        )
    return character


def parse_newline(cursor: Cursor) -> str | None:
    """Consume a line break: LF, CRLF, or a bare CR.

    A bare CR still ends the line but is flagged with ``MissingLineFeed``.

    Returns:
        The line break text, or None if the next character is not CR or LF
    """

    def line_break(cur: Cursor) -> str | None:
        character = cur.advance()
        return character if character in NEWLINE_CHARS else None

    character = cursor.attempt(line_break)
    if character is None:
        return None
    if character == "\r":
        if parse_exact(cursor, "\n") is None:
            cursor.emit(
                Diagnostic.missing_line_feed(Span(cursor.offset - 1, cursor.offset))
            )
            return character
        return "\r\n"
    return character


def parse_comment(cursor: Cursor) -> None:
    """Consume a ``#`` comment running to the end of the line, if present."""
    if parse_exact(cursor, "#") is not None:
        while parse_character(cursor) is not None:
            pass
