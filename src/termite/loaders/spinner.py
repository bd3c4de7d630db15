"""Loading spinner for indefinite iteration."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TextIO

from termite.config.validator import build_config
from termite.lib.logging_config import get_logger
from termite.lib.ui.colors import decorate
from termite.lib.ui.sequences import SGR
from termite.loaders.base import Loader
from termite.models.loader_config import SpinnerConfig

logger = get_logger(__name__)


class LoadingSpinner(Loader):
    """Cycle through a sequence of symbols, one per step.

    Every symbol is printed bold, plus any extra attributes given.
    To style symbols individually, decorate them before passing them in.

    Attributes:
        symbols: Symbols in display order (a private copy).
        index: Position of the symbol currently shown (0-based).
    """

    def __init__(
        self,
        symbols: Iterable[str] | None = None,
        attributes: Iterable[int] | None = None,
        *,
        stream: TextIO | None = None,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        """Create a loading spinner.

        Args:
            symbols: Symbols to cycle through (default ``| / - \\``).
            attributes: SGR attributes applied in addition to bold.
            stream: Output stream (defaults to stdout).
            sleep: Sleep callable used by ``finish``.

        Raises:
            InvalidArgumentError: If symbols is empty.
        """
        super().__init__(stream=stream, sleep=sleep)
        config = build_config(
            SpinnerConfig,
            symbols=list(symbols) if symbols is not None else None,
            attributes=list(attributes) if attributes is not None else None,
        )
        self.symbols = list(config.symbols)
        self.attributes = (SGR.BOLD, *config.attributes)
        self.index = 0
        logger.debug(f"Created loading spinner with {len(self.symbols)} symbols")

    @property
    def current_symbol(self) -> str:
        """Symbol currently shown."""
        return self.symbols[self.index]

    def advance(self) -> None:
        """Move to the next symbol, wrapping after the last."""
        self.index = (self.index + 1) % len(self.symbols)

    def render(self, message: str = "") -> str:
        """Return the decorated symbol followed by message."""
        return f"{decorate(self.current_symbol, *self.attributes)} {message}"

    def __repr__(self) -> str:
        return f"LoadingSpinner(index={self.index}, symbols={self.symbols!r})"
