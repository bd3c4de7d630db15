"""Terminal escape sequence catalog and output helpers.

This package provides:
- Named constants for C0 codes, clearing, cursor movement and SGR attributes
- ``move`` and ``decorate`` for assembling sequences
- TTY detection for adaptive output formatting
- ``say`` for printing a decorated line

The progress indicators in ``termite.loaders`` render through these helpers.
"""

from termite.lib.ui.colors import colorize, decorate, format_sgr_sequence
from termite.lib.ui.cursor import ERASE_PREVIOUS_LINE, erase_previous_line, move
from termite.lib.ui.sequences import (
    C0,
    CSI,
    ESC,
    FOREGROUND_COLORS,
    SGR,
    SGR_RESET,
    Clear,
    Cursor,
    background,
)
from termite.lib.ui.terminal import is_tty, say

__all__ = [
    "C0",
    "CSI",
    "ERASE_PREVIOUS_LINE",
    "ESC",
    "FOREGROUND_COLORS",
    "SGR",
    "SGR_RESET",
    "Clear",
    "Cursor",
    "background",
    "colorize",
    "decorate",
    "erase_previous_line",
    "format_sgr_sequence",
    "is_tty",
    "move",
    "say",
]
