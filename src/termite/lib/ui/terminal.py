"""Terminal detection and output utilities.

Provides functions for detecting terminal capabilities and writing
decorated messages to an output stream.
"""

import sys
from typing import TextIO


def is_tty(stream: TextIO | None = None) -> bool:
    """Check if a stream is connected to a terminal.

    Used to decide whether to emit escape sequences or plain text suitable
    for logs and file redirects.

    Args:
        stream: Stream to check. Defaults to stdout.

    Returns:
        True if the stream is a TTY (interactive terminal), False otherwise.
    """
    stream = sys.stdout if stream is None else stream
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def say(message: str, *attributes: int, stream: TextIO | None = None) -> None:
    """Decorate a message and print it on its own line.

    Args:
        message: Text to print.
        *attributes: SGR attribute codes applied to the whole message.
        stream: Destination stream. Defaults to stdout.
    """
    # Imported here to avoid a cycle: colors depends on is_tty
    from termite.lib.ui.colors import decorate

    stream = sys.stdout if stream is None else stream
    stream.write(decorate(message, *attributes) + "\n")
    if hasattr(stream, "flush"):
        stream.flush()
