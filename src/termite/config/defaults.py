"""Default rendering settings for termite progress indicators."""

# Bar width in character cells
DEFAULT_UNITS = 30

DEFAULT_LEFT_MARKER = "["
DEFAULT_RIGHT_MARKER = "]"
DEFAULT_FILLER = "#"
DEFAULT_VOID = " "

# Tuples so callers cannot mutate the shared defaults; models copy them
DEFAULT_SPINNER_SYMBOLS: tuple[str, ...] = ("|", "/", "-", "\\")
DEFAULT_CYCLIC_SYMBOLS: tuple[str, ...] = ("#",)
