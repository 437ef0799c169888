"""Argument validation helpers for strict entry points."""

from typing import Any, Optional

from scopelog.exceptions import ArgumentValidationError


def require_not_none(value: Any, name: str) -> Any:
    """Ensure a required argument was supplied.

    Args:
        value: Argument value to check
        name: Argument name reported in the error

    Returns:
        The value, unchanged

    Raises:
        ArgumentValidationError: If value is None
    """
    if value is None:
        raise ArgumentValidationError(name, f"Argument '{name}' must not be None")
    return value


def require_text(value: Optional[str], name: str) -> str:
    """Ensure a required string argument is non-empty and not only whitespace.

    Args:
        value: Argument value to check
        name: Argument name reported in the error

    Returns:
        The value, unchanged

    Raises:
        ArgumentValidationError: If value is None, empty or whitespace-only
    """
    if value is None:
        raise ArgumentValidationError(name, f"Argument '{name}' must not be None")
    if not isinstance(value, str):
        raise ArgumentValidationError(name, f"Argument '{name}' must be a string")
    if not value.strip():
        raise ArgumentValidationError(
            name, f"Argument '{name}' must not be empty or whitespace-only"
        )
    return value


def is_blank(value: Any) -> bool:
    """Check whether a value is None, not a string, or whitespace-only.

    Args:
        value: Value to check

    Returns:
        True if the value cannot be used as a key
    """
    return not isinstance(value, str) or not value.strip()
