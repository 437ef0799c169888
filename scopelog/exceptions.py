"""Custom exceptions raised by the caller-facing logging APIs."""

from typing import Optional


class ArgumentValidationError(ValueError):
    """A required argument was missing or unusable.

    Raised synchronously by strict entry points (for example
    ``begin_operation``) so that integration mistakes surface during
    development. Context mutation and the null-safe logging wrappers never
    raise this.
    """

    def __init__(self, argument: str, message: Optional[str] = None) -> None:
        """Initialize validation error with the offending argument name.

        Args:
            argument: Name of the argument that failed validation
            message: Optional human-readable explanation
        """
        self.argument = argument
        super().__init__(message or f"Invalid value for argument '{argument}'")
