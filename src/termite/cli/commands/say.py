"""CLI command that prints a decorated message."""

import click

from termite.lib.ui.sequences import FOREGROUND_COLORS, SGR
from termite.lib.ui.terminal import say as say_line


@click.command(name="say")
@click.argument("message")
@click.option("--bold", "-b", is_flag=True, help="Print in bold")
@click.option("--underline", "-u", is_flag=True, help="Underline the message")
@click.option(
    "--color",
    "-c",
    type=click.Choice(list(FOREGROUND_COLORS)),
    default=None,
    help="Foreground color",
)
def say(message: str, bold: bool, underline: bool, color: str | None) -> None:
    """Print MESSAGE with the given SGR attributes.

    Example:

        termite say "build passed" --bold --color green
    """
    attributes: list[int] = []
    if bold:
        attributes.append(SGR.BOLD)
    if underline:
        attributes.append(SGR.UNDERLINE)
    if color:
        attributes.append(FOREGROUND_COLORS[color])

    say_line(message, *attributes)
