"""Cursor movement sequences and the line-erase primitive."""

from typing import TextIO

from termite.lib.errors import InvalidArgumentError
from termite.lib.ui.sequences import CSI, Clear, Cursor


def move(direction: str | None, n: int | None = 1, m: int | None = 1) -> str:
    """Return the CSI sequence that moves the cursor.

    Args:
        direction: One of the ``Cursor`` constants.
        n: Number of cells (or lines) to move. For ``Cursor.CUP`` this is
            the 1-indexed row.
        m: Column for ``Cursor.CUP``; ignored for every other direction.

    Returns:
        The escape sequence as a string.

    Raises:
        InvalidArgumentError: If direction is not given.
    """
    if not direction:
        raise InvalidArgumentError("direction", "mandatory parameter left unspecified")

    n = 1 if n is None else n
    if direction != Cursor.CUP:
        return f"{CSI}{n}{direction}"

    m = 1 if m is None else m
    return f"{CSI}{n};{m}{direction}"


# Moves to the start of the line above and clears it
ERASE_PREVIOUS_LINE = move(Cursor.CPL, 1) + Clear.LINE


def erase_previous_line(stream: TextIO) -> None:
    """Clear the line above the cursor, leaving the cursor at its start.

    Args:
        stream: Text stream to write the sequence to.
    """
    stream.write(ERASE_PREVIOUS_LINE)
    if hasattr(stream, "flush"):
        stream.flush()
