"""revise - plain-text flashcard sets.

revise reads flashcard sets written in a small line-based text format and
checks answers typed while studying them.

Main features:
- A recursive-descent parser for ``.set`` documents that reports every
  problem in a document at once, with exact byte spans
- A forgiving parser for typed answers
- Human-readable diagnostic reports and a ``revise`` command line tool
"""

from revise.lib.errors import ConfigError, ReviseError, SetParseError
from revise.models.card import Card, CardSet
from revise.models.diagnostic import Diagnostic, DiagnosticKind, Span
from revise.parser import format_set, parse_guess, parse_set

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Card",
    "CardSet",
    "ConfigError",
    "Diagnostic",
    "DiagnosticKind",
    "ReviseError",
    "SetParseError",
    "Span",
    "format_set",
    "parse_guess",
    "parse_set",
]
