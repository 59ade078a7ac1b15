"""Shared fixtures for CLI command tests."""

from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from revise.config.loader import ENV_VAR_MAP


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_config(temp_dir: Path, monkeypatch: Any) -> Path:
    """Run commands without picking up real user or project configuration.

    Returns:
        The working directory commands run in
    """
    home = temp_dir / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for env_var_name in ENV_VAR_MAP.values():
        monkeypatch.delenv(env_var_name, raising=False)
    monkeypatch.chdir(temp_dir)
    return temp_dir
