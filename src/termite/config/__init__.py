"""Configuration defaults and validation for termite."""

from termite.config.defaults import (
    DEFAULT_CYCLIC_SYMBOLS,
    DEFAULT_FILLER,
    DEFAULT_LEFT_MARKER,
    DEFAULT_RIGHT_MARKER,
    DEFAULT_SPINNER_SYMBOLS,
    DEFAULT_UNITS,
    DEFAULT_VOID,
)
from termite.config.validator import build_config, describe_validation_errors

__all__ = [
    "DEFAULT_CYCLIC_SYMBOLS",
    "DEFAULT_FILLER",
    "DEFAULT_LEFT_MARKER",
    "DEFAULT_RIGHT_MARKER",
    "DEFAULT_SPINNER_SYMBOLS",
    "DEFAULT_UNITS",
    "DEFAULT_VOID",
    "build_config",
    "describe_validation_errors",
]
