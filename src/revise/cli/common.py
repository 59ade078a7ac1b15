"""Helpers shared by the revise CLI commands."""

import sys

import click

from revise.config.loader import ConfigLoader
from revise.lib.errors import ConfigError, FileNotFoundError, SetParseError
from revise.lib.logging_config import get_logger, setup_logging
from revise.lib.report import render_diagnostics
from revise.lib.set_file import read_set_source
from revise.lib.ui.colors import ANSIColors, colorize
from revise.lib.ui.terminal import is_tty
from revise.models.card import CardSet
from revise.models.config import CheckConfig
from revise.parser.document import parse_set

logger = get_logger(__name__)


def load_cli_config(
    verbose: bool,
    quiet: bool,
    color: bool | None = None,
    max_reports: int | None = None,
) -> CheckConfig:
    """Load configuration with CLI flags applied on top.

    Exits with status 2 if the configuration is invalid.
    """
    setup_logging(verbose=verbose, quiet=quiet)
    try:
        config = ConfigLoader().load_config(
            overrides={
                "verbose": verbose or None,
                "quiet": quiet or None,
                "color": color,
                "max_reports": max_reports,
            }
        )
    except ConfigError as e:
        logger.error(f"Configuration error: {e}", exc_info=True)
        click.echo(f"Configuration Error: {e}", err=True)
        sys.exit(2)

    if config.verbose != verbose or config.quiet != quiet:
        setup_logging(verbose=config.verbose, quiet=config.quiet)
    return config


def use_color(config: CheckConfig) -> bool:
    """Resolve the color setting against the stderr terminal."""
    return config.color if config.color is not None else is_tty(sys.stderr)


def echo_error(message: str, color: bool) -> None:
    """Print an error line to stderr."""
    label = colorize("error:", ANSIColors.RED + ANSIColors.BOLD, force_tty=color)
    click.echo(f"{label} {message}", err=True, color=color)


def echo_warning(message: str, color: bool) -> None:
    """Print a warning line to stderr."""
    label = colorize("warning:", ANSIColors.YELLOW + ANSIColors.BOLD, force_tty=color)
    click.echo(f"{label} {message}", err=True, color=color)


def load_set_or_report(
    file_path: str, config: CheckConfig, color: bool
) -> CardSet | None:
    """Read and parse a set file, reporting any problem to stderr.

    Args:
        file_path: Path to the set file
        config: Effective configuration
        color: Whether reports are colorized

    Returns:
        The parsed set, or None if it could not be read or had diagnostics
    """
    try:
        source = read_set_source(file_path)
    except FileNotFoundError as e:
        logger.debug(f"Failed to read {file_path}: {e.message}")
        echo_error(e.message, color)
        return None

    try:
        return parse_set(source.text)
    except SetParseError as e:
        logger.info(f"{file_path}: {len(e.diagnostics)} diagnostic(s)")
        click.echo(
            render_diagnostics(
                e.diagnostics, source, color=color, limit=config.max_reports
            ),
            err=True,
            color=color,
        )
        return None
