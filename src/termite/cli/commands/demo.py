"""CLI command for driving a progress indicator through a loop.

Implements the 'termite demo' command, which shows what each indicator
looks like in a real terminal.
"""

import sys
import time
from typing import Any

import click

from termite.lib.errors import TermiteError
from termite.lib.logging_config import get_logger, setup_logging
from termite.lib.ui.sequences import SGR
from termite.loaders import LoaderKind, create_loader

logger = get_logger(__name__)


def _loader_options(
    kind: LoaderKind, steps: int, units: int | None, bold: bool
) -> dict[str, Any]:
    """Map CLI options onto the constructor arguments of each kind."""
    options: dict[str, Any] = {}
    if kind.is_definite:
        options["total_steps"] = steps
    if units is not None and kind not in (LoaderKind.PERCENTAGE, LoaderKind.SPINNER):
        options["width_units"] = units
    if bold and kind in (LoaderKind.PERCENTAGE, LoaderKind.PROGRESS_BAR):
        options["attributes"] = [SGR.BOLD]
    return options


@click.command(name="demo")
@click.argument(
    "kind",
    type=click.Choice([k.value for k in LoaderKind]),
)
@click.option(
    "--steps",
    "-n",
    type=click.IntRange(min=1),
    default=50,
    help="Number of iterations to run",
)
@click.option(
    "--units",
    "-u",
    type=int,
    default=None,
    help="Bar width in cells (bars and cyclic loader only)",
)
@click.option(
    "--delay",
    "-d",
    type=click.FloatRange(min=0),
    default=0.05,
    help="Seconds to pause between iterations",
)
@click.option(
    "--wait",
    "-w",
    type=click.FloatRange(min=0),
    default=None,
    help="Seconds to keep the final report visible",
)
@click.option(
    "--message",
    "-m",
    default="working",
    help="Message printed next to the indicator",
)
@click.option("--bold", is_flag=True, help="Print the percentage or bar in bold")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option("--quiet", "-q", is_flag=True, help="Only log warnings and errors")
def demo(
    kind: str,
    steps: int,
    units: int | None,
    delay: float,
    wait: float | None,
    message: str,
    bold: bool,
    verbose: bool,
    quiet: bool,
) -> None:
    """Run a progress indicator for a number of iterations.

    KIND is one of: percentage, progress_bar, spinner, cyclic, ouroboros.

    Example:

        termite demo progress_bar --steps 200 --units 40

        termite demo spinner --delay 0.1 --wait 1
    """
    setup_logging(verbose=verbose, quiet=quiet)
    loader_kind = LoaderKind(kind)

    try:
        loader = create_loader(
            loader_kind, **_loader_options(loader_kind, steps, units, bold)
        )
    except TermiteError as e:
        logger.error(f"Could not create {kind} loader: {e}")
        click.secho(f"Error: {str(e)}", fg="red", err=True)
        sys.exit(1)

    logger.info(f"Running {kind} demo for {steps} steps")
    try:
        for step in range(1, steps + 1):
            loader.advance()
            loader.report(f"{message} ({step}/{steps})")
            if delay:
                time.sleep(delay)
        loader.finish("done", wait_seconds=wait)
    except KeyboardInterrupt:
        logger.info("Demo interrupted by user (Ctrl+C)")
        loader.finish("interrupted")
        sys.exit(130)
