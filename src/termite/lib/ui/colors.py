"""SGR formatting helpers for terminal output.

``decorate`` always emits escape sequences when given attributes.
``colorize`` degrades to plain text when stdout is not a terminal.
"""

from termite.lib.errors import InvalidArgumentError
from termite.lib.ui.sequences import CSI, SGR_RESET
from termite.lib.ui.terminal import is_tty


def format_sgr_sequence(*attributes: int) -> str:
    """Format SGR attributes into a single CSI sequence.

    Args:
        *attributes: SGR attribute codes, applied in the order given.

    Returns:
        A sequence of the form ``CSI a1;a2;...;aN m``.

    Raises:
        InvalidArgumentError: If no attribute is given.
    """
    if not attributes:
        raise InvalidArgumentError(
            "attributes", "list of SGR attributes must be non-empty"
        )
    return f"{CSI}{';'.join(str(attr) for attr in attributes)}m"


def decorate(text: str | None, *attributes: int) -> str:
    """Wrap text in the given SGR attributes followed by a reset.

    If no attribute is given, text is returned unchanged.

    Args:
        text: Text to decorate.
        *attributes: SGR attribute codes.

    Returns:
        The decorated text.

    Raises:
        InvalidArgumentError: If text is None.
    """
    if text is None:
        raise InvalidArgumentError("text", "mandatory parameter left unspecified")
    if not attributes:
        return text
    return f"{format_sgr_sequence(*attributes)}{text}{SGR_RESET}"


def colorize(text: str, *attributes: int, force_tty: bool | None = None) -> str:
    """Apply SGR attributes to text if in TTY mode.

    Args:
        text: Text to colorize.
        *attributes: SGR attribute codes (e.g., ``SGR.FG_GREEN``).
        force_tty: Override TTY detection (for testing). None uses auto-detection.

    Returns:
        Decorated text if in TTY mode, plain text otherwise.
    """
    use_colors = force_tty if force_tty is not None else is_tty()
    if not use_colors:
        return text
    return decorate(text, *attributes)
