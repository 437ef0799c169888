"""Severity levels, including TRACE and the NONE marker."""

import logging
from enum import IntEnum
from typing import Union

TRACE = 5
logging.addLevelName(TRACE, "TRACE")


class Severity(IntEnum):
    """Log severities mapped onto standard library logging levels.

    ``NONE`` is the "disabled" marker: messages at this level are never
    emitted, whatever the sink's configured level.
    """

    TRACE = TRACE
    DEBUG = logging.DEBUG
    INFORMATION = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL
    NONE = 100


LevelLike = Union[Severity, int, str]

_NAMES = {
    "TRACE": Severity.TRACE,
    "DEBUG": Severity.DEBUG,
    "INFO": Severity.INFORMATION,
    "INFORMATION": Severity.INFORMATION,
    "WARN": Severity.WARNING,
    "WARNING": Severity.WARNING,
    "ERROR": Severity.ERROR,
    "CRITICAL": Severity.CRITICAL,
    "FATAL": Severity.CRITICAL,
    "NONE": Severity.NONE,
}


def to_level(level: LevelLike) -> int:
    """Convert a severity, numeric level or level name to a numeric level.

    Args:
        level: Severity member, logging level number, or level name

    Returns:
        Numeric logging level

    Raises:
        ValueError: If a level name is not recognised
    """
    if isinstance(level, str):
        try:
            return int(_NAMES[level.strip().upper()])
        except KeyError:
            raise ValueError(f"Invalid log level: {level}") from None
    return int(level)


def is_none_level(level: LevelLike) -> bool:
    """Check whether a level is the NONE (disabled) marker."""
    return to_level(level) == Severity.NONE
