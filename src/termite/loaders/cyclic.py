"""Cyclic loader for indefinite iteration."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TextIO

from termite.config.validator import build_config
from termite.lib.logging_config import get_logger
from termite.lib.ui.colors import decorate
from termite.lib.ui.sequences import SGR
from termite.loaders.base import Loader, render_bar
from termite.models.loader_config import CyclicConfig

logger = get_logger(__name__)


class CyclicLoader(Loader):
    """Sweep a single symbol across a bar, left to right, over and over.

    When several symbols are given, the sweeping symbol changes on every
    step, cycling through the list. The symbol is printed bold, plus any
    extra attributes given.

    Attributes:
        units_completed: Cell the symbol occupies (1..width_units); 0 before
            the first advance.
        current_symbol: Symbol shown in that cell.
    """

    def __init__(
        self,
        width_units: int | None = None,
        left_marker: str | None = None,
        right_marker: str | None = None,
        symbols: Iterable[str] | None = None,
        void: str | None = None,
        attributes: Iterable[int] | None = None,
        *,
        stream: TextIO | None = None,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        """Create a cyclic loader.

        Args:
            width_units: Number of cells (default 30).
            left_marker: Left bound (default ``[``).
            right_marker: Right bound (default ``]``).
            symbols: Symbols to cycle through (default ``#``).
            void: Symbol for every other cell (default space).
            attributes: SGR attributes applied in addition to bold.
            stream: Output stream (defaults to stdout).
            sleep: Sleep callable used by ``finish``.

        Raises:
            InvalidArgumentError: If width_units is not positive or symbols
                is empty.
        """
        super().__init__(stream=stream, sleep=sleep)
        config = build_config(
            CyclicConfig,
            width_units=width_units,
            left_marker=left_marker,
            right_marker=right_marker,
            symbols=list(symbols) if symbols is not None else None,
            void=void,
            attributes=list(attributes) if attributes is not None else None,
        )
        self.width_units = config.width_units
        self.left_marker = config.left_marker
        self.right_marker = config.right_marker
        self.symbols = list(config.symbols)
        self.void = config.void
        self.attributes = (SGR.BOLD, *config.attributes)
        self.units_completed = 0
        self.current_symbol = self.symbols[0]
        logger.debug(
            f"Created cyclic loader: width_units={self.width_units}, "
            f"{len(self.symbols)} symbols"
        )

    def advance(self) -> None:
        """Move the symbol one cell right, wrapping to the first cell."""
        if self.units_completed == self.width_units:
            self.units_completed = 0

        self.units_completed += 1
        self.current_symbol = self.symbols[self.units_completed % len(self.symbols)]

    def render(self, message: str = "") -> str:
        """Return the bar with the decorated symbol in its cell."""
        # Before the first advance the symbol sits in the first cell
        position = max(self.units_completed, 1)
        cells = (
            self.void * (position - 1)
            + decorate(self.current_symbol, *self.attributes)
            + self.void * (self.width_units - position)
        )
        return render_bar(self.left_marker, cells, "", self.right_marker, message)

    def __repr__(self) -> str:
        return (
            f"CyclicLoader(units_completed={self.units_completed}, "
            f"width_units={self.width_units}, "
            f"current_symbol={self.current_symbol!r})"
        )
