"""Grammar for a single card line: ``terms - definitions``."""

from __future__ import annotations

from revise.models.card import Card
from revise.models.diagnostic import Diagnostic, Span
from revise.parser.classifiers import (
    parse_comment,
    parse_exact,
    parse_text_character,
    parse_ws,
    skip_ws,
)
from revise.parser.cursor import Cursor
from revise.parser.options import parse_options


def _padded_options(cursor: Cursor) -> frozenset[str] | None:
    skip_ws(cursor)
    return parse_options(cursor)


def parse_card(cursor: Cursor) -> Card | None:
    """Parse one card line.

    The separator is a dash with whitespace on both sides. A separator dash
    missing that whitespace is still honored but reported. A second separator
    starts a third section which is reported and ignored up to the end of the
    line or the start of a comment.

    Returns:
        The card (possibly with empty terms or definitions, which are
        reported), or None when the line holds neither options nor a dash
    """
    card_start = cursor.offset
    space_before_dash = False

    def terms_and_dash(cur: Cursor) -> tuple[frozenset[str], bool] | None:
        nonlocal space_before_dash
        options = cur.attempt(_padded_options)
        while parse_ws(cur) is not None:
            space_before_dash = True
        has_dash = parse_exact(cur, "-") is not None
        if not has_dash and options is None:
            return None
        return (options or frozenset(), has_dash)

    parsed = cursor.attempt(terms_and_dash)
    if parsed is None:
        return None
    terms, has_dash = parsed

    definitions: frozenset[str] = frozenset()
    if has_dash:
        dash = Span(cursor.offset - 1, cursor.offset)
        space_after_dash = skip_ws(cursor)
        if not (space_before_dash and space_after_dash):
            cursor.emit(Diagnostic.missing_whitespace_around_dash(dash))

        parsed_definitions = parse_options(cursor)
        if parsed_definitions is not None:
            definitions = parsed_definitions
            skip_ws(cursor)

        third_part_start = cursor.offset
        if parse_exact(cursor, "-") is not None:
            while parse_text_character(cursor) is not None:
                pass
            cursor.emit(
                Diagnostic.third_part(
                    before=Span(card_start, third_part_start),
                    span=Span(third_part_start, cursor.offset),
                )
            )

    if not terms:
        cursor.emit(Diagnostic.no_terms(Span(card_start, cursor.offset)))
    if not definitions:
        cursor.emit(Diagnostic.no_definitions(Span(card_start, cursor.offset)))

    parse_comment(cursor)

    return Card(terms=terms, definitions=definitions)
