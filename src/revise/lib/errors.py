"""Custom exception hierarchy for revise set parsing and tooling."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from revise.models.card import CardSet
    from revise.models.diagnostic import Diagnostic


class ReviseError(Exception):
    """Base exception for all revise errors.

    All revise-specific exceptions inherit from this class, enabling
    centralized exception handling in the CLI.
    """

    pass


class ConfigError(ReviseError):
    """Exception raised for configuration errors.

    Raised when a configuration file cannot be parsed or a configured value
    fails validation.

    Attributes:
        field: The configuration field that caused the error
        message: Human-readable error message describing the issue
    """

    def __init__(self, field: str, message: str) -> None:
        """Initialize ConfigError with field and message.

        Args:
            field: Configuration field name where error occurred
            message: Descriptive error message
        """
        self.field = field
        self.message = message
        super().__init__(f"Configuration error in '{field}': {message}")


class FileNotFoundError(ReviseError):
    """Exception raised when a set or configuration file cannot be read.

    Attributes:
        path: Path to the file that was not found
        message: Human-readable error message
    """

    def __init__(self, path: str, message: str) -> None:
        """Initialize FileNotFoundError with path and message.

        Args:
            path: Path to the file that was not found
            message: Descriptive error message, optionally with suggestions
        """
        self.path = path
        self.message = message
        super().__init__(f"File not found: {path}\n{message}")


class SetParseError(ReviseError):
    """Exception raised when a set document produced one or more diagnostics.

    Parsing never stops at the first problem, so the exception carries every
    diagnostic found in the document along with the best-effort result.

    Attributes:
        diagnostics: Every diagnostic, in the order it was found
        card_set: The partially parsed set (title and the cards that parsed)
    """

    def __init__(self, diagnostics: list[Diagnostic], card_set: CardSet) -> None:
        """Initialize SetParseError with the collected diagnostics.

        Args:
            diagnostics: Ordered list of diagnostics (never empty)
            card_set: Best-effort set recovered from the document
        """
        self.diagnostics = diagnostics
        self.card_set = card_set
        count = len(diagnostics)
        plural = "" if count == 1 else "s"
        super().__init__(f"Set failed to parse with {count} diagnostic{plural}")


class TrailingInputError(ReviseError):
    """Exception raised when the document grammar leaves input unconsumed.

    The set grammar accepts every input, so this indicates a parser bug rather
    than a problem with the document.
    """

    def __init__(self, remaining: str) -> None:
        """Create a trailing input error for the unconsumed text."""
        self.remaining = remaining
        super().__init__(f"Trailing characters after parse: {remaining!r}")
