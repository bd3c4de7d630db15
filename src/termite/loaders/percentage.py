"""Percentage loader for definite iteration."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TextIO

from termite.config.validator import build_config
from termite.lib.logging_config import get_logger
from termite.lib.ui.colors import decorate
from termite.loaders.base import Loader
from termite.models.loader_config import PercentageConfig

logger = get_logger(__name__)


class PercentageLoader(Loader):
    """Show progress as a whole-number percentage.

    The total number of steps must be known up front. Once every step is
    completed, further calls to ``advance`` do nothing.
    """

    def __init__(
        self,
        total_steps: int,
        attributes: Iterable[int] | None = None,
        *,
        stream: TextIO | None = None,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        """Create a percentage loader.

        Args:
            total_steps: Steps until 100%. Must be positive.
            attributes: SGR attributes applied to the percentage figure.
            stream: Output stream (defaults to stdout).
            sleep: Sleep callable used by ``finish``.

        Raises:
            InvalidArgumentError: If total_steps is not positive.
        """
        super().__init__(stream=stream, sleep=sleep)
        config = build_config(
            PercentageConfig,
            total_steps=total_steps,
            attributes=list(attributes) if attributes is not None else None,
        )
        self.total_steps = config.total_steps
        self.attributes = tuple(config.attributes)
        self.completed = 0
        logger.debug(f"Created percentage loader: total_steps={self.total_steps}")

    @property
    def percentage(self) -> int:
        """Completed share of the work, rounded down."""
        return self.completed * 100 // self.total_steps

    @property
    def is_complete(self) -> bool:
        """Whether every step has been completed."""
        return self.completed == self.total_steps

    def advance(self) -> None:
        """Complete one step; saturates at 100%."""
        if self.is_complete:
            return
        self.completed += 1

    def render(self, message: str = "") -> str:
        """Return ``<percentage>% <message>`` with the figure decorated."""
        return f"{decorate(f'{self.percentage}%', *self.attributes)} {message}"

    def __repr__(self) -> str:
        return (
            f"PercentageLoader(completed={self.completed}, "
            f"total_steps={self.total_steps})"
        )
