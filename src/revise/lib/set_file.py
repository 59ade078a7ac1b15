"""Reading set documents from disk."""

import logging
from pathlib import Path

from revise.lib.errors import FileNotFoundError
from revise.lib.report import SourceMap
from revise.models.card import CardSet
from revise.parser.document import parse_set

logger = logging.getLogger(__name__)


def read_set_source(file_path: str) -> SourceMap:
    """Read a set file without translating its line endings.

    Line endings are kept as written so that diagnostic spans (and any
    ``MissingLineFeed`` reports) refer to the bytes actually on disk.

    Args:
        file_path: Path to the set file

    Returns:
        Source map of the file contents, with the path as its origin

    Raises:
        FileNotFoundError: If the file cannot be read or is not valid UTF-8
    """
    path = Path(file_path)
    try:
        with open(path, encoding="utf-8", newline="") as f:
            text = f.read()
    except OSError as e:
        raise FileNotFoundError(file_path, f"Couldn't read {file_path}: {e}") from e
    except UnicodeDecodeError as e:
        raise FileNotFoundError(
            file_path, f"Couldn't read {file_path}: not valid UTF-8 ({e.reason})"
        ) from e

    logger.debug(f"Read {len(text)} characters from {file_path}")
    return SourceMap(text, origin=str(path))


def load_set(file_path: str) -> CardSet:
    """Read and parse a set file.

    Raises:
        FileNotFoundError: If the file cannot be read
        SetParseError: If the document has any diagnostics
    """
    return parse_set(read_set_source(file_path).text)


def has_expected_extension(file_path: str, extension: str) -> bool:
    """Whether a path ends with the configured set extension."""
    return Path(file_path).suffix == extension
