"""CLI command for interpreting typed answers.

Implements the 'revise guess' command, which shows how an answer typed during
study is understood and, given one or more sets and a term, whether it is
correct.
"""

import sys
from functools import reduce

import click

from revise.cli.common import echo_error, load_cli_config, load_set_or_report, use_color
from revise.lib.logging_config import get_logger
from revise.lib.ui.colors import ANSIColors, colorize
from revise.models.card import CardSet
from revise.parser.guess import parse_guess
from revise.parser.writer import format_option

logger = get_logger(__name__)


@click.command()
@click.argument("answer")
@click.option(
    "--set",
    "set_paths",
    type=click.Path(dir_okay=False),
    multiple=True,
    help="Set file to check the answer against (repeat to study several sets)",
)
@click.option(
    "--term",
    default=None,
    help="Term whose definitions the answer should name (requires --set)",
)
@click.option(
    "--invert",
    is_flag=True,
    help="Swap terms and definitions before checking",
)
@click.option(
    "--color/--no-color",
    default=None,
    help="Force colored output on or off (default: auto-detect)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def guess(
    answer: str,
    set_paths: tuple[str, ...],
    term: str | None,
    invert: bool,
    color: bool | None,
    verbose: bool,
) -> None:
    """Show how ANSWER is understood, or check it against a card.

    Without --set, prints each option named by ANSWER on its own line.
    With --set and --term, exits 0 if ANSWER names exactly the definitions of
    a card with that term, 1 if it does not, and 2 if a set or the term
    could not be used. Several --set files are merged into one set.

    Example:

        revise guess 'dog, "hound, big"'

        revise guess dog --set animals.set --set pets.set --term hund
    """
    config = load_cli_config(verbose, quiet=False, color=color)
    colored = use_color(config)
    options = parse_guess(answer)
    logger.debug(f"Parsed answer into {len(options)} option(s)")

    if not set_paths:
        if term is not None:
            raise click.UsageError("--term requires --set")
        for option in sorted(options):
            click.echo(option)
        return

    if term is None:
        raise click.UsageError("--set requires --term")

    card_sets: list[CardSet] = []
    for set_path in set_paths:
        card_set = load_set_or_report(set_path, config, colored)
        if card_set is None:
            sys.exit(2)
        card_sets.append(card_set)

    card_set = reduce(CardSet.merge, card_sets)
    if invert:
        card_set = card_set.inverted()
    logger.debug(f"Checking against {card_set.title!r}")

    cards = [card for card in card_set.sorted_cards() if term in card.terms]
    if not cards:
        echo_error(f"no card in {card_set.title!r} has the term {term!r}", colored)
        sys.exit(2)

    if any(card.matches(options) for card in cards):
        correct = colorize("Correct", ANSIColors.GREEN, force_tty=colored)
        click.echo(correct, color=colored)
        return

    incorrect = colorize("Incorrect", ANSIColors.RED, force_tty=colored)
    click.echo(incorrect, color=colored)
    for card in cards:
        answer_text = ", ".join(
            format_option(definition) for definition in sorted(card.definitions)
        )
        click.echo(f"Answer: {answer_text}")
    sys.exit(1)
