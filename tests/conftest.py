"""Pytest configuration and shared fixtures for revise tests."""

import logging
import os
import shutil
import tempfile
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest


@pytest.fixture
def temp_dir() -> Generator[Path]:
    """Create a temporary directory for test file operations.

    Yields:
        Path to temporary directory

    Cleanup:
        Automatically removes directory after test
    """
    tmp = Path(tempfile.mkdtemp())
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def isolated_env() -> Generator[dict[str, str]]:
    """Provide isolated environment variables for testing.

    Saves current environment and restores after test.

    Yields:
        Dictionary of original environment variables

    Cleanup:
        Restores original environment after test
    """
    original_env = os.environ.copy()
    yield original_env
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def write_set(temp_dir: Path) -> Callable[..., Path]:
    """Create a factory that writes set documents into the temp directory.

    The text is written byte for byte, so CR and CRLF line endings survive.

    Returns:
        Callable taking the document text and an optional file name
    """

    def _write(text: str, name: str = "deck.set") -> Path:
        path = temp_dir / name
        path.write_bytes(text.encode("utf-8"))
        return path

    return _write


@pytest.fixture(autouse=True)
def reset_revise_logging() -> Generator[None]:
    """Remove handlers installed by setup_logging after each test."""
    yield
    logger = logging.getLogger("revise")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


# Configure pytest
def pytest_configure(config: Any) -> None:
    """Configure pytest with marker options."""
    # Register custom markers
    config.addinivalue_line(
        "markers",
        "slow: marks tests as slow (deselect with '-m \"not slow\"')",
    )
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests",
    )
    config.addinivalue_line(
        "markers",
        "unit: marks tests as unit tests",
    )
