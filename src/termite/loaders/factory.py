"""Create progress indicators by kind."""

import inspect
from enum import Enum
from typing import Any

from termite.lib.errors import InvalidArgumentError
from termite.loaders.base import Loader
from termite.loaders.cyclic import CyclicLoader
from termite.loaders.ouroboros import OuroborosBar
from termite.loaders.percentage import PercentageLoader
from termite.loaders.progress_bar import ProgressBar
from termite.loaders.spinner import LoadingSpinner


class LoaderKind(str, Enum):
    """Progress indicator variants."""

    PERCENTAGE = "percentage"
    PROGRESS_BAR = "progress_bar"
    SPINNER = "spinner"
    CYCLIC = "cyclic"
    OUROBOROS = "ouroboros"

    @property
    def is_definite(self) -> bool:
        """Whether this kind needs the total number of steps up front."""
        return self in (LoaderKind.PERCENTAGE, LoaderKind.PROGRESS_BAR)


_LOADER_CLASSES: dict[LoaderKind, type[Loader]] = {
    LoaderKind.PERCENTAGE: PercentageLoader,
    LoaderKind.PROGRESS_BAR: ProgressBar,
    LoaderKind.SPINNER: LoadingSpinner,
    LoaderKind.CYCLIC: CyclicLoader,
    LoaderKind.OUROBOROS: OuroborosBar,
}


def create_loader(kind: LoaderKind | str, **options: Any) -> Loader:
    """Create a progress indicator of the given kind.

    Args:
        kind: A LoaderKind or its string value (e.g. ``"spinner"``).
        **options: Keyword arguments for the indicator's constructor.

    Returns:
        A new indicator.

    Raises:
        InvalidArgumentError: If the kind is unknown, an option is not a
            parameter of the indicator, or a required one is missing.
    """
    try:
        loader_kind = LoaderKind(kind)
    except ValueError as e:
        valid = ", ".join(k.value for k in LoaderKind)
        raise InvalidArgumentError(
            "kind", f"unknown loader kind {kind!r} (expected one of: {valid})"
        ) from e

    loader_class = _LOADER_CLASSES[loader_kind]
    try:
        inspect.signature(loader_class).bind(**options)
    except TypeError as e:
        raise InvalidArgumentError("options", f"{loader_kind.value} loader: {e}") from e

    return loader_class(**options)
