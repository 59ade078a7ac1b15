"""CLI command for rewriting set files in canonical form."""

import sys
from pathlib import Path

import click

from revise.cli.common import echo_error, load_cli_config, load_set_or_report, use_color
from revise.lib.logging_config import get_logger
from revise.parser.writer import format_set

logger = get_logger(__name__)


@click.command(name="format")
@click.argument("set_path", type=click.Path(dir_okay=False))
@click.option(
    "--write",
    "-w",
    is_flag=True,
    help="Rewrite the file in place instead of printing it",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def format_command(set_path: str, write: bool, verbose: bool) -> None:
    """Print SET_PATH with sorted cards and normalized spacing.

    The set must parse without diagnostics; comments are not preserved.
    """
    config = load_cli_config(verbose, quiet=False)
    colored = use_color(config)

    card_set = load_set_or_report(set_path, config, colored)
    if card_set is None:
        sys.exit(1)

    try:
        text = format_set(card_set)
    except ValueError as e:
        echo_error(str(e), colored)
        sys.exit(1)

    if not write:
        click.echo(text, nl=False)
        return

    try:
        with open(Path(set_path), "w", encoding="utf-8", newline="") as f:
            f.write(text)
    except OSError as e:
        logger.error(f"Failed to write {set_path}: {e}")
        echo_error(f"couldn't write {set_path}: {e}", colored)
        sys.exit(1)
    logger.info(f"Rewrote {set_path} ({len(card_set.cards)} cards)")
