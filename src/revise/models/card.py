"""Card and card set models.

A card holds no position information: two cards are equal, and hash equally,
exactly when their term sets and definition sets are equal. Source spans only
ever live in diagnostics.
"""

from __future__ import annotations

import hashlib
import json
from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field


class Card(BaseModel):
    """One flashcard: a set of equivalent terms and a set of definitions.

    Example:
        >>> card = Card(terms={"hund", "dog"}, definitions={"dog"})
        >>> card == Card(terms={"dog", "hund"}, definitions={"dog"})
        True
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    terms: frozenset[str] = Field(default_factory=frozenset)
    definitions: frozenset[str] = Field(default_factory=frozenset)

    def key(self) -> str:
        """Return a stable content-derived identity for this card.

        The key is a pure function of the two sets, independent of iteration
        order and of the process, so it can be used to look up per-card state
        in an external store.

        Returns:
            Hex SHA-256 digest of the sorted terms and definitions
        """
        payload = json.dumps(
            [sorted(self.terms), sorted(self.definitions)],
            ensure_ascii=False,
            separators=(",", ":"),
        )
        return hashlib.sha256(payload.encode("utf-8")).hexdigest()

    def inverted(self) -> Card:
        """Return the card with terms and definitions swapped."""
        return Card(terms=self.definitions, definitions=self.terms)

    def matches(self, guess: Iterable[str]) -> bool:
        """Check whether a parsed guess names exactly this card's definitions."""
        return frozenset(guess) == self.definitions

    def check_guess(self, text: str) -> bool:
        """Parse a typed answer and check it against the definitions.

        Args:
            text: The line the learner typed

        Returns:
            True if the answer's options equal the card's definitions
        """
        from revise.parser.guess import parse_guess

        return self.matches(parse_guess(text))

    def __str__(self) -> str:
        """Return the card as a ``terms - definitions`` line."""
        terms = ", ".join(sorted(self.terms))
        definitions = ", ".join(sorted(self.definitions))
        return f"{terms} - {definitions}"


class CardSet(BaseModel):
    """A parsed set document: a title and the distinct cards it declares."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    title: str
    cards: frozenset[Card] = Field(default_factory=frozenset)

    def inverted(self) -> CardSet:
        """Return the set with every card inverted."""
        return CardSet(
            title=self.title, cards=frozenset(card.inverted() for card in self.cards)
        )

    def merge(self, other: CardSet) -> CardSet:
        """Combine two sets for studying together (used by `revise guess`).

        Titles are joined with ``" + "`` and cards are unioned; a card present
        in both sets appears once.
        """
        return CardSet(
            title=f"{self.title} + {other.title}", cards=self.cards | other.cards
        )

    def sorted_cards(self) -> list[Card]:
        """Return the cards in a deterministic order."""
        return sorted(
            self.cards, key=lambda card: (sorted(card.terms), sorted(card.definitions))
        )
