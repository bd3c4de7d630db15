"""Logging setup for termite.

Library modules obtain loggers through ``get_logger``. The library itself
never configures handlers beyond a ``NullHandler``; applications (and the
``termite`` CLI) call ``setup_logging`` to turn output on.

Log records go to stderr so they do not interleave with progress output,
which is written to stdout.
"""

import logging
import os
import sys

ROOT_LOGGER_NAME = "termite"
LOG_LEVEL_ENV_VAR = "TERMITE_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        Logger instance in the termite hierarchy.
    """
    return logging.getLogger(name)


def _resolve_level(verbose: bool, quiet: bool) -> int:
    override = os.environ.get(LOG_LEVEL_ENV_VAR)
    if override:
        level = logging.getLevelName(override.strip().upper())
        if isinstance(level, int):
            return level
        logging.getLogger(ROOT_LOGGER_NAME).warning(
            f"Ignoring unknown {LOG_LEVEL_ENV_VAR} value '{override}'"
        )

    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def setup_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """Configure the termite logger hierarchy.

    Verbose wins over quiet. ``TERMITE_LOG_LEVEL`` (a level name such as
    ``DEBUG``) overrides both flags.

    Args:
        verbose: Log at DEBUG level.
        quiet: Only log warnings and errors.

    Returns:
        The configured ``termite`` root logger.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(_resolve_level(verbose, quiet))

    # Replace any stream handler from an earlier call
    for handler in list(logger.handlers):
        if isinstance(handler, logging.StreamHandler):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
