"""Oscillating ("ouroboros") bar for indefinite iteration."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TextIO

from termite.config.validator import build_config
from termite.lib.logging_config import get_logger
from termite.lib.ui.colors import decorate
from termite.loaders.base import Loader, render_bar
from termite.models.loader_config import OuroborosConfig

logger = get_logger(__name__)


class OuroborosBar(Loader):
    """A progress bar that keeps filling and emptying.

    Renders like ``ProgressBar`` but needs no total. When the bar is full,
    the filler and void symbols trade places and filling starts over, so
    the second pass "unfills" the bar. Two passes restore the original
    symbols.
    """

    def __init__(
        self,
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
        """Create an oscillating bar.

        Args:
            width_units: Number of cells (default 30).
            left_marker: Left bound (default ``[``).
            right_marker: Right bound (default ``]``).
            filler: Symbol for filled cells (default ``#``).
            void: Symbol for remaining cells (default space).
            attributes: SGR attributes applied to the filled run.
            stream: Output stream (defaults to stdout).
            sleep: Sleep callable used by ``finish``.

        Raises:
            InvalidArgumentError: If width_units is not positive.
        """
        super().__init__(stream=stream, sleep=sleep)
        config = build_config(
            OuroborosConfig,
            width_units=width_units,
            left_marker=left_marker,
            right_marker=right_marker,
            filler=filler,
            void=void,
            attributes=list(attributes) if attributes is not None else None,
        )
        self.width_units = config.width_units
        self.left_marker = config.left_marker
        self.right_marker = config.right_marker
        self.filler = config.filler
        self.void = config.void
        self.attributes = tuple(config.attributes)
        self.units_completed = 0
        logger.debug(f"Created ouroboros bar: width_units={self.width_units}")

    def advance(self) -> None:
        """Fill one more cell; on a full bar, swap symbols and restart."""
        if self.units_completed == self.width_units:
            self.filler, self.void = self.void, self.filler
            self.units_completed = 0

        self.units_completed += 1

    def render(self, message: str = "") -> str:
        """Return the bar followed by message."""
        filled = self.filler * self.units_completed
        if filled:
            filled = decorate(filled, *self.attributes)
        empty = self.void * (self.width_units - self.units_completed)
        return render_bar(self.left_marker, filled, empty, self.right_marker, message)

    def __repr__(self) -> str:
        return (
            f"OuroborosBar(units_completed={self.units_completed}, "
            f"width_units={self.width_units}, filler={self.filler!r}, "
            f"void={self.void!r})"
        )
