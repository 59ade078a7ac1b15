"""Diagnostic models produced by the set parser.

A diagnostic names what went wrong (its kind) and where (one or more half-open
UTF-8 byte spans into the source text). Diagnostics never abort a parse; they
are collected so that one pass over a document reports every problem.
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field


class Span(NamedTuple):
    """Half-open range of UTF-8 byte offsets into the source text."""

    start: int
    end: int

    @property
    def is_empty(self) -> bool:
        """Whether the span covers no bytes."""
        return self.start >= self.end


class Severity(str, Enum):
    """How a diagnostic affects the parse.

    Errors are structural problems. Warnings are advisory: the parser
    recovered a value but the document should still be fixed.
    """

    ERROR = "error"
    WARNING = "warning"


class DiagnosticKind(str, Enum):
    """Kind of problem found while parsing a set document."""

    NO_TITLE = "no_title"
    EMPTY_SET = "empty_set"
    DUPLICATE_CARD = "duplicate_card"
    THIRD_PART = "third_part"
    MISSING_WHITESPACE_AROUND_DASH = "missing_whitespace_around_dash"
    NO_TERMS = "no_terms"
    NO_DEFINITIONS = "no_definitions"
    DUPLICATE_OPTION = "duplicate_option"
    EMPTY_OPTION = "empty_option"
    TRAILING_OPTION_CHARS = "trailing_option_chars"
    UNKNOWN_ESCAPE = "unknown_escape"
    UNCLOSED_QUOTE = "unclosed_quote"
    UNEXPECTED_CONTROL_CHAR = "unexpected_control_char"
    EXPECTED_SPACE = "expected_space"
    MISSING_LINE_FEED = "missing_line_feed"

    @property
    def severity(self) -> Severity:
        """Severity class of this kind."""
        if self in _ADVISORY_KINDS:
            return Severity.WARNING
        return Severity.ERROR


_ADVISORY_KINDS = frozenset(
    {
        DiagnosticKind.MISSING_WHITESPACE_AROUND_DASH,
        DiagnosticKind.THIRD_PART,
        DiagnosticKind.TRAILING_OPTION_CHARS,
        DiagnosticKind.UNKNOWN_ESCAPE,
        DiagnosticKind.UNEXPECTED_CONTROL_CHAR,
        DiagnosticKind.EXPECTED_SPACE,
        DiagnosticKind.MISSING_LINE_FEED,
    }
)


class Diagnostic(BaseModel):
    """One problem found in a set document.

    Spans are stored in the order they are reported. Use the classmethod
    constructors rather than building instances by hand; they document which
    span is which for every kind.

    Attributes:
        kind: What went wrong
        spans: Where it went wrong (may be empty for whole-document problems)
        character: The offending character, for character-level kinds
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: DiagnosticKind
    spans: tuple[Span, ...] = Field(default=())
    character: str | None = Field(
        default=None, description="Offending character, if any"
    )

    @property
    def severity(self) -> Severity:
        """Severity of this diagnostic."""
        return self.kind.severity

    def __str__(self) -> str:
        """Return a compact one-line description."""
        spans = ", ".join(f"{span.start}..{span.end}" for span in self.spans)
        if self.character is not None:
            return f"{self.kind.value}({self.character!r}) at [{spans}]"
        return f"{self.kind.value} at [{spans}]"

    @classmethod
    def no_title(cls, line: Span) -> Diagnostic:
        """The line that should hold the title was blank."""
        return cls(kind=DiagnosticKind.NO_TITLE, spans=(line,))

    @classmethod
    def empty_set(cls) -> Diagnostic:
        """The document contained no cards."""
        return cls(kind=DiagnosticKind.EMPTY_SET)

    @classmethod
    def duplicate_card(cls, original: Span, duplicate: Span) -> Diagnostic:
        """A card with the same terms and definitions appeared twice."""
        return cls(kind=DiagnosticKind.DUPLICATE_CARD, spans=(original, duplicate))

    @classmethod
    def third_part(cls, before: Span, span: Span) -> Diagnostic:
        """A second separator dash started a third section on a card line."""
        return cls(kind=DiagnosticKind.THIRD_PART, spans=(before, span))

    @classmethod
    def missing_whitespace_around_dash(cls, dash: Span) -> Diagnostic:
        """The separator dash lacked whitespace on at least one side."""
        return cls(kind=DiagnosticKind.MISSING_WHITESPACE_AROUND_DASH, spans=(dash,))

    @classmethod
    def no_terms(cls, card: Span) -> Diagnostic:
        """A card line had no terms."""
        return cls(kind=DiagnosticKind.NO_TERMS, spans=(card,))

    @classmethod
    def no_definitions(cls, card: Span) -> Diagnostic:
        """A card line had no definitions."""
        return cls(kind=DiagnosticKind.NO_DEFINITIONS, spans=(card,))

    @classmethod
    def duplicate_option(cls, original: Span, duplicate: Span) -> Diagnostic:
        """An option was repeated within one list."""
        return cls(kind=DiagnosticKind.DUPLICATE_OPTION, spans=(original, duplicate))

    @classmethod
    def empty_option(cls, span: Span) -> Diagnostic:
        """An option position held no characters."""
        return cls(kind=DiagnosticKind.EMPTY_OPTION, spans=(span,))

    @classmethod
    def trailing_option_chars(cls, span: Span) -> Diagnostic:
        """Characters followed the closing quote of an option."""
        return cls(kind=DiagnosticKind.TRAILING_OPTION_CHARS, spans=(span,))

    @classmethod
    def unknown_escape(cls, escape: str, span: Span) -> Diagnostic:
        """A backslash escaped something other than a quote or backslash."""
        return cls(kind=DiagnosticKind.UNKNOWN_ESCAPE, spans=(span,), character=escape)

    @classmethod
    def unclosed_quote(cls, span: Span) -> Diagnostic:
        """A quoted option ran to the end of the line without closing."""
        return cls(kind=DiagnosticKind.UNCLOSED_QUOTE, spans=(span,))

    @classmethod
    def unexpected_control_char(cls, character: str, span: Span) -> Diagnostic:
        """A control character appeared inside a line."""
        return cls(
            kind=DiagnosticKind.UNEXPECTED_CONTROL_CHAR,
            spans=(span,),
            character=character,
        )

    @classmethod
    def expected_space(cls, character: str, span: Span) -> Diagnostic:
        """Whitespace other than U+0020 separated fields."""
        return cls(
            kind=DiagnosticKind.EXPECTED_SPACE, spans=(span,), character=character
        )

    @classmethod
    def missing_line_feed(cls, cr_span: Span) -> Diagnostic:
        """A carriage return was not followed by a line feed."""
        return cls(kind=DiagnosticKind.MISSING_LINE_FEED, spans=(cr_span,))
