"""Progress indicator interface shared by every loader.

A loader is driven by one loop in one thread::

    loader = PercentageLoader(total_steps=len(items), attributes=[SGR.BOLD])
    for item in items:
        process(item)
        loader.advance()
        loader.report(f"processed {item}")
    loader.finish("done", wait_seconds=1)

Each ``report`` prints one line and then erases it, moving the cursor back
to the start of that line. The next report therefore overwrites the last
one instead of scrolling the terminal. Two loaders writing to the same
stream at once produce garbled output; that is not supported.
"""

from __future__ import annotations

import sys
import time
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Protocol, TextIO, runtime_checkable

from termite.lib.logging_config import get_logger
from termite.lib.ui.cursor import erase_previous_line

logger = get_logger(__name__)


@runtime_checkable
class ProgressIndicator(Protocol):
    """Capabilities every progress indicator provides."""

    def advance(self) -> None:
        """Move the progress state forward by one unit."""
        ...

    def report(self, message: str = "") -> None:
        """Print the current state followed by message, then erase it."""
        ...

    def finish(self, message: str = "", wait_seconds: float | None = None) -> None:
        """Print the final state, optionally wait, then erase it."""
        ...


class Loader(ABC):
    """Base class implementing the report/erase discipline.

    Subclasses implement ``advance`` and ``render``.

    Attributes:
        stream: Output stream; None means ``sys.stdout`` at write time.
        sleep: Callable used by ``finish`` to block for a number of seconds.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        """Initialize the output sink and sleep capability.

        Args:
            stream: Output stream. Defaults to stdout, looked up on each write
                so redirections made after construction are honored.
            sleep: Blocking sleep. Defaults to ``time.sleep``.
        """
        self.stream = stream
        self.sleep = sleep if sleep is not None else time.sleep

    @property
    def output(self) -> TextIO:
        """Stream that reports are written to."""
        return self.stream if self.stream is not None else sys.stdout

    @abstractmethod
    def advance(self) -> None:
        """Move the progress state forward by one unit."""

    @abstractmethod
    def render(self, message: str = "") -> str:
        """Return the report line for the current state.

        Args:
            message: Text printed after the indicator.

        Returns:
            The line, without a trailing newline.
        """

    def _print(self, message: str | None) -> None:
        self.output.write(self.render(message or "") + "\n")

    def report(self, message: str = "") -> None:
        """Print the current state, then erase the printed line.

        Args:
            message: Text printed after the indicator.
        """
        self._print(message)
        erase_previous_line(self.output)

    def finish(self, message: str = "", wait_seconds: float | None = None) -> None:
        """Print the final state and clean it up.

        Args:
            message: Text printed after the indicator.
            wait_seconds: Seconds to leave the final report visible before
                it is erased. None erases immediately.
        """
        self._print(message)
        if wait_seconds is not None:
            output = self.output
            if hasattr(output, "flush"):
                output.flush()
            self.sleep(wait_seconds)
        erase_previous_line(self.output)
        logger.debug(f"{type(self).__name__} finished: {self!r}")


def render_bar(
    left_marker: str,
    filled: str,
    empty: str,
    right_marker: str,
    message: str,
) -> str:
    """Join the parts of a bounded bar and its trailing message."""
    return f"{left_marker}{filled}{empty}{right_marker} {message}"
