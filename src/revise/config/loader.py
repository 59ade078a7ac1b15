"""Configuration loader for revise.

This module provides the ConfigLoader class for loading the settings that
control how set files are checked and reported.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from revise.config.defaults import (
    CONFIG_FILE_NAMES,
    DEFAULT_CHECK_CONFIG,
    PROJECT_CONFIG_FILE_NAMES,
    USER_CONFIG_DIR,
)
from revise.config.validator import flatten_pydantic_errors
from revise.lib.errors import ConfigError, FileNotFoundError
from revise.models.config import CheckConfig

logger = logging.getLogger(__name__)

# Environment variable to field name mapping
ENV_VAR_MAP = {
    "extension": "REVISE_EXTENSION",
    "color": "REVISE_COLOR",
    "verbose": "REVISE_VERBOSE",
    "quiet": "REVISE_QUIET",
    "max_reports": "REVISE_MAX_REPORTS",
}

_TRUE_VALUES = ("true", "1", "yes", "on")
_FALSE_VALUES = ("false", "0", "no", "off")


def _parse_env_value(field_name: str, value: str) -> Any:
    """Parse environment variable value to appropriate type.

    Args:
        field_name: Name of the field (used to determine type)
        value: String value from environment variable

    Returns:
        Parsed value in correct type (int, bool, None or str)

    Raises:
        ValueError: If value cannot be parsed
    """
    if field_name == "max_reports":
        return int(value)
    if field_name == "color":
        lowered = value.strip().lower()
        if lowered == "auto":
            return None
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        raise ValueError(f"Expected true, false or auto, got {value!r}")
    if field_name in ("verbose", "quiet"):
        return value.lower() in _TRUE_VALUES
    return value


def _env_overrides(env_vars: os._Environ[str] | dict[str, str]) -> dict[str, Any]:
    """Collect configuration values set through environment variables.

    Args:
        env_vars: Environment variables mapping

    Returns:
        Mapping of field name to parsed value

    Raises:
        ConfigError: If a variable is set to a value that cannot be parsed
    """
    overrides: dict[str, Any] = {}
    for field_name, env_var_name in ENV_VAR_MAP.items():
        if env_var_name not in env_vars:
            continue
        try:
            overrides[field_name] = _parse_env_value(field_name, env_vars[env_var_name])
        except ValueError as e:
            raise ConfigError(env_var_name, str(e)) from e
    return overrides


def _find_config_file(directory: Path, names: tuple[str, ...]) -> Path | None:
    for name in names:
        candidate = directory / name
        if candidate.is_file():
            return candidate
    return None


class ConfigLoader:
    """Loads and validates revise configuration.

    Settings are merged with the following precedence (highest first):
    1. Explicit overrides (CLI flags)
    2. Environment variables (REVISE_*)
    3. Project config (./revise.yml or ./revise.yaml)
    4. User config (~/.revise/config.yml or ~/.revise/config.yaml)
    5. Built-in defaults
    """

    def parse_yaml(self, file_path: str) -> dict[str, Any]:
        """Parse a YAML file and return its contents as a dictionary.

        Args:
            file_path: Path to the YAML file to parse

        Returns:
            Dictionary containing parsed YAML content (empty for empty files)

        Raises:
            FileNotFoundError: If the file cannot be read
            ConfigError: If YAML parsing fails or the top level is not a mapping
        """
        path = Path(file_path)

        try:
            with open(path, encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except OSError as e:
            raise FileNotFoundError(
                file_path,
                f"Configuration file not found at {file_path}. "
                f"Please ensure the file exists at this path.",
            ) from e
        except yaml.YAMLError as e:
            raise ConfigError(
                "yaml_parse",
                f"Failed to parse YAML file {file_path}: {str(e)}",
            ) from e

        if content is None:
            return {}
        if not isinstance(content, dict):
            raise ConfigError(
                "yaml_parse",
                f"Expected a mapping at the top of {file_path}, "
                f"got {type(content).__name__}",
            )
        return content

    def load_user_config(self) -> dict[str, Any]:
        """Load the user-level configuration, if present.

        Returns:
            Settings from ~/.revise/config.yml|yaml, or an empty dict
        """
        config_path = _find_config_file(
            Path.home() / USER_CONFIG_DIR, CONFIG_FILE_NAMES
        )
        if config_path is None:
            logger.debug("No user configuration found")
            return {}
        logger.debug(f"Loading user configuration from {config_path}")
        return self.parse_yaml(str(config_path))

    def load_project_config(self, directory: str | None = None) -> dict[str, Any]:
        """Load the project-level configuration, if present.

        Args:
            directory: Project directory (defaults to the working directory)

        Returns:
            Settings from revise.yml|yaml in the directory, or an empty dict
        """
        project_dir = Path(directory) if directory else Path.cwd()
        config_path = _find_config_file(project_dir, PROJECT_CONFIG_FILE_NAMES)
        if config_path is None:
            logger.debug(f"No project configuration found in {project_dir}")
            return {}
        logger.debug(f"Loading project configuration from {config_path}")
        return self.parse_yaml(str(config_path))

    def load_config(
        self,
        overrides: dict[str, Any] | None = None,
        directory: str | None = None,
        env_vars: os._Environ[str] | dict[str, str] | None = None,
    ) -> CheckConfig:
        """Load the effective configuration.

        Args:
            overrides: Explicit settings, typically from CLI flags. None values
                are ignored so that unset flags do not mask other sources.
            directory: Project directory to search for revise.yml|yaml
            env_vars: Environment to read REVISE_* variables from
                (defaults to os.environ)

        Returns:
            Validated CheckConfig

        Raises:
            ConfigError: If any source is malformed or the result is invalid
        """
        merged: dict[str, Any] = dict(DEFAULT_CHECK_CONFIG)
        merged.update(self.load_user_config())
        merged.update(self.load_project_config(directory))
        merged.update(_env_overrides(os.environ if env_vars is None else env_vars))
        if overrides:
            merged.update(
                {key: value for key, value in overrides.items() if value is not None}
            )

        try:
            return CheckConfig(**merged)
        except PydanticValidationError as e:
            raise ConfigError("config", "\n".join(flatten_pydantic_errors(e))) from e
