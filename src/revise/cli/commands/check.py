"""CLI command for checking set files.

Implements the 'revise check' command, which parses one or more set files
and reports every problem found in each of them.
"""

import sys
from pathlib import Path

import click

from revise.cli.common import (
    echo_error,
    echo_warning,
    load_cli_config,
    load_set_or_report,
    use_color,
)
from revise.lib.logging_config import get_logger
from revise.lib.set_file import has_expected_extension
from revise.lib.ui.colors import ANSIColors, colorize

logger = get_logger(__name__)


@click.command()
@click.argument("sets", nargs=-1, required=True, type=click.Path(dir_okay=False))
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output with debug information",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    help="Only print diagnostics",
)
@click.option(
    "--color/--no-color",
    default=None,
    help="Force colored reports on or off (default: auto-detect)",
)
@click.option(
    "--max-reports",
    type=click.IntRange(min=1),
    default=None,
    help="Print at most this many diagnostics per file",
)
def check(
    sets: tuple[str, ...],
    verbose: bool,
    quiet: bool,
    color: bool | None,
    max_reports: int | None,
) -> None:
    """Check one or more set files without studying them.

    Every problem in every file is reported. Exits with status 1 if any file
    could not be read or has problems.

    Example:

        revise check animals.set

        revise check *.set --no-color
    """
    config = load_cli_config(verbose, quiet, color, max_reports)
    colored = use_color(config)
    logger.info(f"Check command invoked: {len(sets)} file(s)")

    failed = False
    for file_path in sets:
        if not has_expected_extension(file_path, config.extension):
            suggestion = Path(file_path).with_suffix(config.extension)
            echo_warning(
                f"{file_path} is recommended to have a file extension of "
                f"`{config.extension}`: `{suggestion}`",
                colored,
            )

        card_set = load_set_or_report(file_path, config, colored)
        if card_set is None:
            failed = True
            continue

        if not config.quiet:
            mark = colorize("ok", ANSIColors.GREEN, force_tty=colored)
            click.echo(
                f"{mark} {file_path}: {card_set.title} ({len(card_set.cards)} cards)",
                color=colored,
            )

    if failed:
        logger.info("Exiting with failure status (invalid sets)")
        echo_error("aborting due to previous error", colored)
        sys.exit(1)
