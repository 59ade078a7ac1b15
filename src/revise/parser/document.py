"""Grammar for whole set documents.

A document is a title line followed by card lines. Blank lines and ``#``
comments may appear anywhere; blank lines before the title are skipped.

Example:
    >>> card_set = parse_set("Animals\\n\\nhund - dog\\nkatze - cat\\n")
    >>> card_set.title
    'Animals'
"""

from __future__ import annotations

import logging

from revise.lib.errors import SetParseError, TrailingInputError
from revise.models.card import Card, CardSet
from revise.models.diagnostic import Diagnostic, Span
from revise.parser.card import parse_card
from revise.parser.classifiers import (
    parse_comment,
    parse_newline,
    parse_text_character,
    skip_ws,
    strip_whitespace,
)
from revise.parser.cursor import Cursor

logger = logging.getLogger(__name__)


def parse_blank_line(cursor: Cursor) -> None:
    """Consume whitespace and an optional comment."""
    skip_ws(cursor)
    parse_comment(cursor)


def _leading_blank_line(cursor: Cursor) -> str | None:
    parse_blank_line(cursor)
    return parse_newline(cursor)


def parse_title(cursor: Cursor) -> str:
    """Parse the title line, reporting ``NoTitle`` if it is blank.

    Returns:
        The title with surrounding whitespace trimmed (empty if missing)
    """
    line_start = cursor.offset
    characters: list[str] = []
    while (character := parse_text_character(cursor)) is not None:
        characters.append(character)

    title = strip_whitespace("".join(characters))
    if not title:
        cursor.emit(Diagnostic.no_title(Span(line_start, cursor.offset)))

    parse_comment(cursor)
    return title


def parse_document(cursor: Cursor) -> CardSet:
    """Parse a whole document, collecting diagnostics on the cursor.

    Duplicate cards are reported against their first occurrence and dropped.
    An empty set is reported with ``EmptySet``.

    Returns:
        The best-effort set, even when diagnostics were emitted
    """
    while cursor.attempt(_leading_blank_line) is not None:
        pass

    title = parse_title(cursor)

    cards: dict[Card, Span] = {}
    while parse_newline(cursor) is not None:
        card_start = cursor.offset
        card = parse_card(cursor)
        if card is None:
            parse_blank_line(cursor)
            continue

        span = Span(card_start, cursor.offset)
        original = cards.get(card)
        if original is not None:
            cursor.emit(Diagnostic.duplicate_card(original, span))
        else:
            cards[card] = span

    if not cards:
        cursor.emit(Diagnostic.empty_set())

    return CardSet(title=title, cards=frozenset(cards))


def parse_set(text: str) -> CardSet:
    """Parse a ``.set`` document.

    The whole document is always parsed so that every problem is found in
    one pass.

    Args:
        text: Full document source

    Returns:
        The parsed set

    Raises:
        SetParseError: If any diagnostic was produced. The exception carries
            every diagnostic and the best-effort set.
    """
    cursor = Cursor(text)
    card_set = parse_document(cursor)

    if not cursor.at_end():
        raise TrailingInputError(cursor.remaining)

    logger.debug(
        f"Parsed set {card_set.title!r}: {len(card_set.cards)} cards, "
        f"{len(cursor.diagnostics)} diagnostics"
    )

    if cursor.diagnostics:
        raise SetParseError(cursor.diagnostics, card_set)
    return card_set
