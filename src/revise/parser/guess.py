"""Parser for answers typed during a study session.

The guess grammar is the forgiving sibling of the option list grammar: it has
no diagnostics and never fails. Unterminated quotes keep what was collected,
unknown escapes are dropped, and empty options are ignored, so malformed input
simply yields fewer options (and therefore does not match the expected answer).
"""

from __future__ import annotations

from revise.parser.classifiers import is_whitespace
from revise.parser.cursor import Cursor

ESCAPABLE = frozenset('"\\')


def _whitespace(cursor: Cursor) -> str | None:
    character = cursor.advance()
    if character is None or not is_whitespace(character):
        return None
    return character


def _skip_whitespace(cursor: Cursor) -> None:
    while cursor.attempt(_whitespace) is not None:
        pass


def _exact(cursor: Cursor, expected: str) -> bool:
    return cursor.attempt(lambda cur: cur.advance() == expected or None) is not None


def _atom(cursor: Cursor) -> str | None:
    character = cursor.advance()
    if character is None or character == "," or is_whitespace(character):
        return None
    return character


def _quoted(cursor: Cursor) -> str | None:
    if not _exact(cursor, '"'):
        return None

    value: list[str] = []
    while (character := cursor.advance()) is not None and character != '"':
        if character != "\\":
            value.append(character)
            continue
        escape = cursor.advance()
        if escape in ESCAPABLE:
            value.append(escape)
    return "".join(value)


def _extension(cursor: Cursor) -> str | None:
    parts: list[str] = []
    while (ws := cursor.attempt(_whitespace)) is not None:
        parts.append(ws)
    atom = cursor.attempt(_atom)
    if atom is None:
        return None
    parts.append(atom)
    return "".join(parts)


def _option(cursor: Cursor) -> str | None:
    quoted = _quoted(cursor)
    if quoted is not None:
        value = [quoted]
    else:
        atom = cursor.attempt(_atom)
        if atom is None:
            return None
        value = [atom]

    # Words after a closing quote join the option, as in set documents.
    while (extension := cursor.attempt(_extension)) is not None:
        value.append(extension)
    return "".join(value)


def parse_guess(text: str) -> frozenset[str]:
    """Parse a typed answer into the set of options it names.

    Args:
        text: The learner's input line

    Returns:
        The distinct non-empty options, possibly none
    """
    cursor = Cursor(text)
    options: set[str] = set()

    while True:
        _skip_whitespace(cursor)
        option = _option(cursor)
        if option is not None:
            if option:
                options.add(option)
            _skip_whitespace(cursor)
        if not _exact(cursor, ","):
            break

    return frozenset(options)
