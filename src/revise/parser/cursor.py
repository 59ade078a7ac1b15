"""Cursor and backtracking engine shared by the set and guess grammars.

Sub-parsers are plain functions taking a ``Cursor`` and returning either a
value or ``None`` for "no match". ``Cursor.attempt`` runs such a function and
rolls the cursor and the diagnostic list back when it does not match, which is
the only way the grammars express alternatives.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from revise.models.diagnostic import Diagnostic

T = TypeVar("T")


def utf8_len(character: str) -> int:
    """Return the number of bytes ``character`` occupies in UTF-8."""
    code_point = ord(character)
    if code_point < 0x80:
        return 1
    if code_point < 0x800:
        return 2
    if code_point < 0x10000:
        return 3
    return 4


class Cursor:
    """A position in an immutable source text plus the diagnostics so far.

    The cursor tracks two positions in lockstep: ``index`` (in code points,
    used to read the string) and ``offset`` (in UTF-8 bytes, used for spans).

    Attributes:
        source: The full text being parsed
        diagnostics: Diagnostics emitted so far, in order
    """

    def __init__(self, source: str) -> None:
        """Create a cursor at the start of ``source``."""
        self.source = source
        self.diagnostics: list[Diagnostic] = []
        self._index = 0
        self._offset = 0

    @property
    def offset(self) -> int:
        """Current byte offset from the start of the source."""
        return self._offset

    @property
    def index(self) -> int:
        """Current code point index into the source."""
        return self._index

    @property
    def remaining(self) -> str:
        """The unconsumed part of the source."""
        return self.source[self._index :]

    def at_end(self) -> bool:
        """Whether the whole source has been consumed."""
        return self._index >= len(self.source)

    def peek(self) -> str | None:
        """Return the next character without consuming it."""
        if self.at_end():
            return None
        return self.source[self._index]

    def advance(self) -> str | None:
        """Consume and return the next character, or None at end of input."""
        if self.at_end():
            return None
        character = self.source[self._index]
        self._index += 1
        self._offset += utf8_len(character)
        return character

    def emit(self, diagnostic: Diagnostic) -> None:
        """Record a diagnostic without affecting the parse."""
        self.diagnostics.append(diagnostic)

    def attempt(self, parse: Callable[[Cursor], T | None]) -> T | None:
        """Run a sub-parser, undoing all of its effects if it does not match.

        Args:
            parse: Sub-parser returning a value, or None for no match

        Returns:
            The sub-parser's result. When it is None the cursor position and
            the diagnostic list are exactly as they were before the call.
        """
        index, offset = self._index, self._offset
        diagnostic_count = len(self.diagnostics)
        result = parse(self)
        if result is None:
            self._index, self._offset = index, offset
            del self.diagnostics[diagnostic_count:]
        return result
