"""Custom exception hierarchy for termite."""


class TermiteError(Exception):
    """Base exception for all termite errors.

    All termite-specific exceptions inherit from this class, enabling
    callers to catch library failures in one place.
    """

    pass


class InvalidArgumentError(TermiteError, ValueError):
    """Exception raised when a caller violates a function's contract.

    Raised for missing mandatory parameters, non-positive totals and widths,
    and empty required lists. These are programming errors: they are raised
    at the offending call and never retried.

    Attributes:
        field: Name of the offending parameter
        message: Human-readable description of the violation
    """

    def __init__(self, field: str, message: str) -> None:
        """Initialize InvalidArgumentError with field and message.

        Args:
            field: Parameter name that was invalid
            message: Descriptive error message
        """
        self.field = field
        self.message = message
        super().__init__(f"Invalid argument '{field}': {message}")
