"""Entry point for the ``termite`` command line tool."""

import click

from termite import __version__
from termite.cli.commands.demo import demo
from termite.cli.commands.palette import palette
from termite.cli.commands.say import say


@click.group(name="termite")
@click.version_option(__version__, prog_name="termite")
def main() -> None:
    """Try out terminal escape sequences and progress indicators.

    \b
    EXAMPLES:

        Watch a progress bar fill up:
            termite demo progress_bar --steps 100

        Show the color palette:
            termite palette

        Print a styled message:
            termite say "hello" --bold --color cyan
    """
    pass


main.add_command(demo)
main.add_command(palette)
main.add_command(say)


if __name__ == "__main__":
    main()
