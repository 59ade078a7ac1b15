"""Tests for custom exception hierarchy in revise.lib.errors."""

from revise.lib.errors import (
    ConfigError,
    FileNotFoundError,
    ReviseError,
    SetParseError,
    TrailingInputError,
)
from revise.models.card import CardSet
from revise.models.diagnostic import Diagnostic, Span


class TestReviseError:
    """Tests for base ReviseError exception."""

    def test_revise_error_creates_with_message(self) -> None:
        """Test that ReviseError can be created with a message."""
        error = ReviseError("Test error message")
        assert str(error) == "Test error message"

    def test_revise_error_is_exception(self) -> None:
        """Test that ReviseError is an Exception subclass."""
        assert isinstance(ReviseError("Test"), Exception)


class TestConfigError:
    """Tests for ConfigError exception."""

    def test_config_error_formats_message_with_field(self) -> None:
        """Test that ConfigError formats messages with field information."""
        error = ConfigError("max_reports", "Field 'max_reports' must be positive")
        assert "max_reports" in str(error)
        assert error.field == "max_reports"
        assert error.message == "Field 'max_reports' must be positive"

    def test_config_error_is_revise_error(self) -> None:
        """Test that ConfigError is a ReviseError subclass."""
        assert isinstance(ConfigError("test_field", "Test message"), ReviseError)


class TestFileNotFoundError:
    """Tests for FileNotFoundError exception."""

    def test_file_not_found_error_includes_path(self) -> None:
        """Test that FileNotFoundError includes the file path."""
        error = FileNotFoundError("decks/animals.set", "Couldn't read it")
        assert "decks/animals.set" in str(error)
        assert error.path == "decks/animals.set"

    def test_file_not_found_error_is_not_builtin(self) -> None:
        """Test that FileNotFoundError belongs to the revise hierarchy."""
        error = FileNotFoundError("x.set", "missing")
        assert isinstance(error, ReviseError)
        assert not isinstance(error, OSError)


class TestSetParseError:
    """Tests for SetParseError exception."""

    def test_set_parse_error_carries_diagnostics(self) -> None:
        """Test that SetParseError keeps diagnostics and the partial set."""
        diagnostics = [Diagnostic.no_title(Span(0, 0)), Diagnostic.empty_set()]
        card_set = CardSet(title="")
        error = SetParseError(diagnostics, card_set)
        assert error.diagnostics == diagnostics
        assert error.card_set is card_set
        assert "2 diagnostics" in str(error)

    def test_set_parse_error_singular_message(self) -> None:
        """Test that a single diagnostic is described in the singular."""
        error = SetParseError([Diagnostic.empty_set()], CardSet(title="T"))
        assert str(error) == "Set failed to parse with 1 diagnostic"


class TestTrailingInputError:
    """Tests for TrailingInputError exception."""

    def test_trailing_input_error_keeps_remaining_text(self) -> None:
        """Test that TrailingInputError records the unconsumed input."""
        error = TrailingInputError("rest")
        assert error.remaining == "rest"
        assert "'rest'" in str(error)
        assert isinstance(error, ReviseError)
