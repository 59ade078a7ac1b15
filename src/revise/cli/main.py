"""Entry point for the revise command line tool."""

import click

from revise import __version__
from revise.cli.commands.check import check
from revise.cli.commands.format import format_command
from revise.cli.commands.guess import guess


@click.group()
@click.version_option(__version__, prog_name="revise")
def main() -> None:
    """revise - check and work with plain-text flashcard sets."""


main.add_command(check)
main.add_command(guess)
main.add_command(format_command)


if __name__ == "__main__":
    main()
