"""Progress bar for definite iteration."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TextIO

from termite.config.validator import build_config
from termite.lib.logging_config import get_logger
from termite.lib.ui.colors import decorate
from termite.loaders.base import Loader, render_bar
from termite.models.loader_config import ProgressBarConfig

logger = get_logger(__name__)


class ProgressBar(Loader):
    """A bar that fills from left to right as steps complete.

    The bar has ``width_units`` cells; each cell is worth
    ``1 / width_units`` of the work. Steps are usually finer or coarser
    than cells, so a step only fills more cells once the share of steps
    done has caught up with the share of cells filled. Filled cells are
    never taken back.
    """

    def __init__(
        self,
        total_steps: int,
        width_units: int | None = None,
        left_marker: str | None = None,
        right_marker: str | None = None,
        filler: str | None = None,
        void: str | None = None,
        attributes: Iterable[int] | None = None,
        *,
        stream: TextIO | None = None,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        """Create a progress bar.

        Args:
            total_steps: Steps until the bar is full. Must be positive.
            width_units: Number of cells (default 30).
            left_marker: Left bound (default ``[``).
            right_marker: Right bound (default ``]``).
            filler: Symbol for completed cells (default ``#``).
            void: Symbol for remaining cells (default space).
            attributes: SGR attributes applied to the filled run.
            stream: Output stream (defaults to stdout).
            sleep: Sleep callable used by ``finish``.

        Raises:
            InvalidArgumentError: If total_steps or width_units is not positive.
        """
        super().__init__(stream=stream, sleep=sleep)
        config = build_config(
            ProgressBarConfig,
            total_steps=total_steps,
            width_units=width_units,
            left_marker=left_marker,
            right_marker=right_marker,
            filler=filler,
            void=void,
            attributes=list(attributes) if attributes is not None else None,
        )
        self.total_steps = config.total_steps
        self.width_units = config.width_units
        self.left_marker = config.left_marker
        self.right_marker = config.right_marker
        self.filler = config.filler
        self.void = config.void
        self.attributes = tuple(config.attributes)
        self.steps_completed = 0
        self.units_completed = 0
        logger.debug(
            f"Created progress bar: total_steps={self.total_steps}, "
            f"width_units={self.width_units}"
        )

    @property
    def is_complete(self) -> bool:
        """Whether every step has been completed."""
        return self.steps_completed == self.total_steps

    def advance(self) -> None:
        """Complete one step and fill the cells it has earned."""
        if self.is_complete:
            return

        self.steps_completed += 1

        # steps/total >= units/width, cross-multiplied to stay exact
        step_share = self.steps_completed * self.width_units
        if step_share >= self.units_completed * self.total_steps:
            self.units_completed = step_share // self.total_steps

    def render(self, message: str = "") -> str:
        """Return the bar followed by message."""
        filled = self.filler * self.units_completed
        if filled:
            filled = decorate(filled, *self.attributes)
        empty = self.void * (self.width_units - self.units_completed)
        return render_bar(self.left_marker, filled, empty, self.right_marker, message)

    def __repr__(self) -> str:
        return (
            f"ProgressBar(steps_completed={self.steps_completed}, "
            f"total_steps={self.total_steps}, "
            f"units_completed={self.units_completed}, "
            f"width_units={self.width_units})"
        )
