"""Grammar for comma-separated option lists.

An option list is the term side or the definition side of a card. Each option
is either a quoted string or a run of plain atoms. Plain options may contain
single words separated by whitespace and dash runs glued between words
(``foo-bar``), but a dash with whitespace around it is left for the card
grammar to use as the separator.
"""

from __future__ import annotations

from revise.models.diagnostic import Diagnostic, Span
from revise.parser.classifiers import (
    is_whitespace,
    parse_any,
    parse_character,
    parse_exact,
    parse_option_ws,
    skip_ws,
)
from revise.parser.cursor import Cursor

ATOM_EXCLUDED = frozenset(",-#")
ESCAPABLE = frozenset('"\\')


def parse_option_atom(cursor: Cursor) -> str | None:
    """Consume one character that can appear unquoted in an option."""

    def atom(cur: Cursor) -> str | None:
        character = parse_character(cur)
        if (
            character is None
            or character in ATOM_EXCLUDED
            or is_whitespace(character)
        ):
            return None
        return character

    return cursor.attempt(atom)


def parse_quoted(cursor: Cursor) -> str | None:
    """Parse a double-quoted option.

    Only ``\\"`` and ``\\\\`` are escapes. Any other escaped character is
    reported with ``UnknownEscape`` and dropped. Reaching the end of the line
    before the closing quote reports ``UnclosedQuote`` and keeps whatever was
    collected.

    Returns:
        The unescaped contents (possibly empty), or None if no quote starts here
    """
    string_start = cursor.offset
    if parse_exact(cursor, '"') is None:
        return None

    value: list[str] = []
    while True:
        character = parse_character(cursor)
        if character is None:
            cursor.emit(Diagnostic.unclosed_quote(Span(string_start, cursor.offset)))
            break
        if character == '"':
            break
        if character != "\\":
            value.append(character)
            continue

        escape_offset = cursor.offset
        escape = parse_any(cursor)
        if escape is None:
            continue
        if escape in ESCAPABLE:
            value.append(escape)
        else:
            cursor.emit(
                Diagnostic.unknown_escape(escape, Span(escape_offset, cursor.offset))
            )

    return "".join(value)


def _option_extension(cursor: Cursor) -> str | None:
    # Either a dash run or a whitespace run, followed by at least one atom.
    parts: list[str] = []
    if cursor.peek() == "-":
        while parse_exact(cursor, "-") is not None:
            parts.append("-")
    else:
        while (ws := parse_option_ws(cursor)) is not None:
            parts.append(ws)

    atom = parse_option_atom(cursor)
    if atom is None:
        return None
    parts.append(atom)
    return "".join(parts)


def parse_option(cursor: Cursor) -> str | None:
    """Parse a single option of an option list.

    Characters that follow a closing quote are still appended to the option,
    but reported with ``TrailingOptionChars``.

    Returns:
        The option's value (empty for ``""``), or None if no option starts here
    """
    quoted = parse_quoted(cursor)
    if quoted is not None:
        value = [quoted]
        after_quote: int | None = cursor.offset
    else:
        atom = parse_option_atom(cursor)
        if atom is None:
            return None
        value = [atom]
        after_quote = None

    trailing = False
    while (extension := cursor.attempt(_option_extension)) is not None:
        value.append(extension)
        trailing = True

    if trailing and after_quote is not None:
        cursor.emit(Diagnostic.trailing_option_chars(Span(after_quote, cursor.offset)))

    return "".join(value)


def parse_options(cursor: Cursor) -> frozenset[str] | None:
    """Parse a comma-separated option list.

    Empty positions (a leading comma, two commas in a row, an empty quoted
    string) are reported with ``EmptyOption``; repeated options are reported
    with ``DuplicateOption`` against their first occurrence and dropped.

    Returns:
        The distinct non-empty options, or None if the list neither starts with
        an option nor with a comma
    """
    options: dict[str, Span] = {}

    def add_option(option: str, span: Span) -> None:
        if not option:
            cursor.emit(Diagnostic.empty_option(span))
        elif option in options:
            cursor.emit(Diagnostic.duplicate_option(options[option], span))
        else:
            options[option] = span

    option_start = cursor.offset
    already_parsed_comma = False

    if parse_exact(cursor, ",") is not None:
        cursor.emit(Diagnostic.empty_option(Span(option_start, cursor.offset)))
        already_parsed_comma = True
    else:
        first = parse_option(cursor)
        if first is None:
            return None
        add_option(first, Span(option_start, cursor.offset))

    def separator(cur: Cursor) -> int | None:
        skip_ws(cur)
        comma_start = cur.offset
        return comma_start if parse_exact(cur, ",") is not None else None

    # Set before the option is tried and kept across a rollback, so that the
    # empty option span can be measured from them.
    real_option_start = cursor.offset
    comma_follows = False

    def next_option(cur: Cursor) -> str | None:
        nonlocal real_option_start, comma_follows
        skip_ws(cur)
        real_option_start = cur.offset
        comma_follows = cur.peek() == ","
        option = parse_option(cur)
        if option is None:
            return None
        add_option(option, Span(real_option_start, cur.offset))
        return option

    while True:
        if not already_parsed_comma:
            comma_start = cursor.attempt(separator)
            if comma_start is None:
                break
            option_start = comma_start
        already_parsed_comma = False

        if cursor.attempt(next_option) is None:
            end = real_option_start + 1 if comma_follows else real_option_start
            cursor.emit(Diagnostic.empty_option(Span(option_start, end)))

    return frozenset(options)
