"""CLI command that prints the 4-bit color palette."""

import click

from termite.lib.ui.colors import decorate
from termite.lib.ui.sequences import FOREGROUND_COLORS, SGR, background


@click.command(name="palette")
@click.option(
    "--sample",
    default=" termite ",
    help="Text printed in each color",
)
def palette(sample: str) -> None:
    """Print every foreground and background color.

    Each row shows the color name, its foreground code on the default
    background, and its background code under inverted text.
    """
    for name, code in FOREGROUND_COLORS.items():
        bg_code = background(code)
        click.echo(
            f"{name:<15}"
            f"{code:>3} {decorate(sample, code)}  "
            f"{bg_code:>3} {decorate(sample, SGR.FG_BLACK, bg_code)}"
        )
