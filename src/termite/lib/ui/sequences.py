"""ANSI/VT100 escape sequence catalog.

Constants for C0 control codes, CSI clearing sequences, cursor movement
directions and SGR (Select Graphic Rendition) attribute codes. Everything
here is immutable data; the functions that assemble sequences live in
``termite.lib.ui.cursor`` and ``termite.lib.ui.colors``.

Only the basic 4-bit palette is listed: 16 foreground and 16 background
colors. Each background code is its foreground code plus 10.
"""

from termite.lib.errors import InvalidArgumentError

ESC = "\x1b"
# Control Sequence Introducer; prefixes every CSI sequence
CSI = ESC + "["

# Resets every attribute set by earlier SGR sequences
SGR_RESET = CSI + "0m"

BACKGROUND_OFFSET = 10


class C0:
    """Single-byte C0 control codes.

    Attributes:
        BEL: Bell.
        BS: Backspace.
        HT: Horizontal tab.
        LF: Line feed.
        FF: Form feed.
        CR: Carriage return.
        ESC: Escape; starts every escape sequence.
    """

    BEL = "\x07"
    BS = "\x08"
    HT = "\x09"
    LF = "\x0a"
    FF = "\x0c"
    CR = "\x0d"
    ESC = ESC


class Clear:
    """Sequences that erase part or all of the screen or current line."""

    SCREEN = CSI + "2J"
    SCREEN_TO_CURSOR = CSI + "1J"
    SCREEN_FROM_CURSOR = CSI + "0J"

    LINE = CSI + "2K"
    LINE_TO_CURSOR = CSI + "1K"
    LINE_FROM_CURSOR = CSI + "0K"


class Cursor:
    """Final bytes of the CSI cursor movement sequences.

    Pass one of these to ``move()`` together with a count. ``CUP`` is the
    only direction that takes a second (column) parameter.
    """

    CUU = "A"  # up
    CUD = "B"  # down
    CUF = "C"  # forward (right)
    CUB = "D"  # back (left)
    CNL = "E"  # n lines down, to start of line
    CPL = "F"  # n lines up, to start of line
    SU = "S"  # scroll page up
    SD = "T"  # scroll page down
    CUP = "H"  # row n, column m

    ALL = (CUU, CUD, CUF, CUB, CNL, CPL, SU, SD, CUP)


class SGR:
    """SGR attribute codes for text style and 4-bit color."""

    BOLD = 1
    FAINT = 2
    UNDERLINE = 4
    SLOW_BLINK = 5
    INVERT = 7
    STRIKE = 9
    NORMAL_INTENSITY = 22
    NO_UNDERLINE = 24
    NO_BLINK = 25
    NO_INVERT = 27

    FG_BLACK = 30
    FG_RED = 31
    FG_GREEN = 32
    FG_YELLOW = 33
    FG_BLUE = 34
    FG_MAGENTA = 35
    FG_CYAN = 36
    FG_WHITE = 37
    FG_BRIGHT_BLACK = 90  # gray
    FG_BRIGHT_RED = 91
    FG_BRIGHT_GREEN = 92
    FG_BRIGHT_YELLOW = 93
    FG_BRIGHT_BLUE = 94
    FG_BRIGHT_MAGENTA = 95
    FG_BRIGHT_CYAN = 96
    FG_BRIGHT_WHITE = 97

    BG_BLACK = FG_BLACK + BACKGROUND_OFFSET
    BG_RED = FG_RED + BACKGROUND_OFFSET
    BG_GREEN = FG_GREEN + BACKGROUND_OFFSET
    BG_YELLOW = FG_YELLOW + BACKGROUND_OFFSET
    BG_BLUE = FG_BLUE + BACKGROUND_OFFSET
    BG_MAGENTA = FG_MAGENTA + BACKGROUND_OFFSET
    BG_CYAN = FG_CYAN + BACKGROUND_OFFSET
    BG_WHITE = FG_WHITE + BACKGROUND_OFFSET
    BG_BRIGHT_BLACK = FG_BRIGHT_BLACK + BACKGROUND_OFFSET
    BG_BRIGHT_RED = FG_BRIGHT_RED + BACKGROUND_OFFSET
    BG_BRIGHT_GREEN = FG_BRIGHT_GREEN + BACKGROUND_OFFSET
    BG_BRIGHT_YELLOW = FG_BRIGHT_YELLOW + BACKGROUND_OFFSET
    BG_BRIGHT_BLUE = FG_BRIGHT_BLUE + BACKGROUND_OFFSET
    BG_BRIGHT_MAGENTA = FG_BRIGHT_MAGENTA + BACKGROUND_OFFSET
    BG_BRIGHT_CYAN = FG_BRIGHT_CYAN + BACKGROUND_OFFSET
    BG_BRIGHT_WHITE = FG_BRIGHT_WHITE + BACKGROUND_OFFSET


# Color name -> foreground code, in palette order
FOREGROUND_COLORS: dict[str, int] = {
    name[len("FG_") :].lower(): code
    for name, code in vars(SGR).items()
    if name.startswith("FG_")
}


def background(foreground: int) -> int:
    """Return the background counterpart of a foreground color code.

    Args:
        foreground: One of the ``SGR.FG_*`` codes.

    Returns:
        The matching ``SGR.BG_*`` code.

    Raises:
        InvalidArgumentError: If the code is not a foreground color.
    """
    if foreground not in FOREGROUND_COLORS.values():
        raise InvalidArgumentError(
            "foreground", f"{foreground!r} is not a foreground color code"
        )
    return foreground + BACKGROUND_OFFSET
