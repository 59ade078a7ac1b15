"""Parsers for set documents and typed answers.

Main entry points:
- parse_set: Parse a ``.set`` document into a CardSet, raising SetParseError
  with every diagnostic if the document has problems
- parse_guess: Parse a typed answer into a set of options (never fails)
- format_set: Render a CardSet back into ``.set`` text
"""

from revise.parser.document import parse_set
from revise.parser.guess import parse_guess
from revise.parser.writer import format_card, format_option, format_set

__all__ = [
    "format_card",
    "format_option",
    "format_set",
    "parse_guess",
    "parse_set",
]
