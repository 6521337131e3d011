"""
Custom exceptions for ADV data quality checking.
"""

__all__ = [
    "CheckExecutionError",
    "CheckInvocationError",
    "CheckParameterError",
    "GDoppConfigurationError",
    "GDoppError",
    "InvalidArgument",
    "InvalidArgumentError",
    "UnknownCheckError",
]


class GDoppError(Exception):
    """Base exception for gdopp errors."""


class GDoppConfigurationError(GDoppError):
    """Raised when configuration or check registry validation fails."""


class InvalidArgumentError(GDoppError, ValueError):
    """Raised when an argument is missing or outside its valid range."""


# Short name used throughout the documentation
InvalidArgument = InvalidArgumentError


class CheckInvocationError(GDoppError):
    """Raised when a requested check cannot be resolved or invoked.

    The message always names the failing check and lists every valid
    check name, one per line.

    Attributes:
        test_name: The requested check name that failed
        valid_names: All registered check names, in registry order
    """

    def __init__(self, test_name: str, valid_names: list[str]) -> None:
        self.test_name = test_name
        self.valid_names = list(valid_names)
        super().__init__(
            f'adv check for test name "{test_name}" not found, try\n'
            + "\n".join(self.valid_names)
        )


class UnknownCheckError(CheckInvocationError):
    """Raised when a check name is not in the registry."""


class CheckExecutionError(CheckInvocationError):
    """Raised when a registered check fails while running.

    The original exception is chained as ``__cause__``.
    """


class CheckParameterError(CheckExecutionError, InvalidArgumentError):
    """Raised when a check rejects a forwarded parameter value."""
