"""Configuration loading and validation for revise.

Main components:
- ConfigLoader: Merge defaults, YAML files, REVISE_* environment variables
  and CLI overrides into a validated CheckConfig
- Default configuration values
"""

from revise.config.loader import ConfigLoader

__all__ = [
    "ConfigLoader",
]
