"""Progress indicators.

Definite iteration (total known up front):
- PercentageLoader: ``42% message``
- ProgressBar: ``[######      ] message``

Indefinite iteration:
- LoadingSpinner: ``/ message``
- CyclicLoader: a symbol sweeping across a bar
- OuroborosBar: a bar that fills, then empties, then fills again

All of them implement ``advance()``, ``report(message)`` and
``finish(message, wait_seconds)``.
"""

from termite.loaders.base import Loader, ProgressIndicator
from termite.loaders.cyclic import CyclicLoader
from termite.loaders.factory import LoaderKind, create_loader
from termite.loaders.ouroboros import OuroborosBar
from termite.loaders.percentage import PercentageLoader
from termite.loaders.progress_bar import ProgressBar
from termite.loaders.spinner import LoadingSpinner

__all__ = [
    "CyclicLoader",
    "Loader",
    "LoaderKind",
    "LoadingSpinner",
    "OuroborosBar",
    "PercentageLoader",
    "ProgressBar",
    "ProgressIndicator",
    "create_loader",
]
