"""termite - ANSI terminal control sequences and progress indicators.

Main features:
- Named constants for C0 codes, screen/line clearing, cursor movement and
  SGR text attributes
- ``move`` and ``decorate`` for assembling escape sequences
- Progress indicators that overwrite themselves in place: percentage
  loader, progress bar, loading spinner, cyclic loader and ouroboros bar
"""

from termite.lib.errors import InvalidArgumentError, TermiteError
from termite.lib.ui import (
    C0,
    CSI,
    ESC,
    SGR,
    SGR_RESET,
    Clear,
    Cursor,
    background,
    colorize,
    decorate,
    move,
    say,
)
from termite.loaders import (
    CyclicLoader,
    LoaderKind,
    LoadingSpinner,
    OuroborosBar,
    PercentageLoader,
    ProgressBar,
    ProgressIndicator,
    create_loader,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "C0",
    "CSI",
    "Clear",
    "Cursor",
    "CyclicLoader",
    "ESC",
    "InvalidArgumentError",
    "LoaderKind",
    "LoadingSpinner",
    "OuroborosBar",
    "PercentageLoader",
    "ProgressBar",
    "ProgressIndicator",
    "SGR",
    "SGR_RESET",
    "TermiteError",
    "background",
    "colorize",
    "create_loader",
    "decorate",
    "move",
    "say",
]
