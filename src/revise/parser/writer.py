"""Render cards and sets back into ``.set`` text.

Output is canonical: options and cards are sorted, options are written bare
whenever they would parse back unchanged and quoted otherwise. Any set returned
by ``parse_set`` survives a round trip through ``format_set`` unchanged.
"""

from __future__ import annotations

import re

from revise.models.card import Card, CardSet
from revise.parser.classifiers import NEWLINE_CHARS, is_control, strip_whitespace

# Words of unquoted characters joined by single-space runs or dash runs.
PLAIN_OPTION_RE = re.compile(r'[^\s,#"\-]+(?:(?: +|-+)[^\s,#"\-]+)*')


def _check_line_text(text: str, what: str) -> None:
    if any(character in NEWLINE_CHARS for character in text):
        raise ValueError(f"{what} cannot contain line breaks: {text!r}")
    if any(is_control(character) for character in text):
        raise ValueError(f"{what} cannot contain control characters: {text!r}")


def format_option(option: str) -> str:
    """Render one option, quoting it when it would not parse back bare.

    Args:
        option: The option value

    Returns:
        The option as it should appear in a card line

    Raises:
        ValueError: If the option is empty or cannot be written on one line
    """
    if not option:
        raise ValueError("Options cannot be empty")
    _check_line_text(option, "Options")

    if PLAIN_OPTION_RE.fullmatch(option):
        return option
    escaped = option.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def format_card(card: Card) -> str:
    """Render a card as a ``term, term - definition, definition`` line.

    Raises:
        ValueError: If the card has no terms or no definitions
    """
    if not card.terms:
        raise ValueError("Cards need at least one term")
    if not card.definitions:
        raise ValueError("Cards need at least one definition")

    terms = ", ".join(format_option(term) for term in sorted(card.terms))
    definitions = ", ".join(
        format_option(definition) for definition in sorted(card.definitions)
    )
    return f"{terms} - {definitions}"


def format_set(card_set: CardSet) -> str:
    """Render a set as a complete ``.set`` document.

    Args:
        card_set: The set to render

    Returns:
        Title line, a blank line, then one line per card, newline terminated

    Raises:
        ValueError: If the title or any card cannot be represented
    """
    title = card_set.title
    if not title:
        raise ValueError("Sets need a title")
    if strip_whitespace(title) != title:
        raise ValueError(f"Titles cannot start or end with whitespace: {title!r}")
    if "#" in title:
        raise ValueError(f"Titles cannot contain '#': {title!r}")
    _check_line_text(title, "Titles")
    if not card_set.cards:
        raise ValueError("Sets need at least one card")

    lines = [title, ""]
    lines.extend(format_card(card) for card in card_set.sorted_cards())
    return "\n".join(lines) + "\n"
