"""Operation scopes: log the start and end of a unit of work with its duration."""

from datetime import datetime
from typing import Callable, Optional

from scopelog.utils.timestamps import (
    elapsed_milliseconds,
    format_duration_ms,
    monotonic_start,
    utc_now,
)
from scopelog.utils.validation import require_not_none, require_text

from .formatter import Sink, log_message
from .levels import LevelLike, is_none_level


class OperationScope:
    """Writes "Starting" and "Finished" messages around an operation.

    The start message is written as soon as the scope is created; the end
    message, including the elapsed time, when it is released. Releasing more
    than once has no further effect.

    Example:
        >>> with OperationScope(logger, Severity.INFORMATION, Severity.INFORMATION, "importing orders"):
        ...     import_orders()
        # Starting: importing orders.
        # Finished: importing orders.  Duration: 1,204ms.
    """

    def __init__(
        self,
        logger: Sink,
        begin_level: LevelLike,
        end_level: LevelLike,
        message: str,
        get_additional_end_message: Optional[Callable[[], Optional[str]]] = None,
    ):
        """Initialize the scope and write the start message.

        Args:
            logger: Logger to which messages will be written
            begin_level: Level of the start message (Severity.NONE to skip it)
            end_level: Level of the end message (Severity.NONE to skip it)
            message: Fragment fitting "Starting: {message}." phrasing
            get_additional_end_message: Called on release to get extra text for
                the end message
        """
        self.logger = logger
        self.begin_level = begin_level
        self.end_level = end_level
        self.message = message
        self.get_additional_end_message = get_additional_end_message
        self.started_at: datetime = utc_now()
        self._start = monotonic_start()
        self._released = False

        if not is_none_level(begin_level):
            log_message(logger, begin_level, f"Starting: {message}.")

    @property
    def released(self) -> bool:
        """Whether the end of the operation has been recorded."""
        return self._released

    @property
    def elapsed_milliseconds(self) -> float:
        """Milliseconds elapsed since the operation started."""
        return elapsed_milliseconds(self._start)

    def release(self) -> None:
        """Finish the operation, writing the end message on the first call only."""
        if self._released:
            return
        self._released = True

        if is_none_level(self.end_level):
            return

        duration = format_duration_ms(self.elapsed_milliseconds)
        log_message(self.logger, self.end_level, lambda: self._end_message(duration))

    def _end_message(self, duration: str) -> str:
        text = f"Finished: {self.message}.  Duration: {duration}."
        if self.get_additional_end_message is not None:
            additional = self.get_additional_end_message()
            if additional and additional.strip():
                text = f"{text} {additional}"
        return text

    def __enter__(self):
        """Enter the operation scope."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit the operation scope, writing the end message."""
        self.release()
        return False  # Don't suppress exceptions

    async def __aenter__(self):
        """Enter the operation scope from async code."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit the operation scope from async code."""
        self.release()
        return False


def begin_operation(
    logger: Sink,
    level: LevelLike,
    message: str,
    get_additional_end_message: Optional[Callable[[], Optional[str]]] = None,
    end_level: Optional[LevelLike] = None,
) -> OperationScope:
    """Create a new operation scope.

    Args:
        logger: Logger to which messages will be written
        level: Level of the start message, and of the end message unless end_level is given
        message: Fragment fitting "Starting: {message}." phrasing
        get_additional_end_message: Called when the operation finishes to get
            any additional details for the end message
        end_level: Level of the end message (defaults to level)

    Returns:
        Scope to release (or use with ``with``) when the operation completes

    Raises:
        ArgumentValidationError: If logger is None or message is None, empty
            or whitespace-only
    """
    require_not_none(logger, "logger")
    require_text(message, "message")

    return OperationScope(
        logger,
        level,
        level if end_level is None else end_level,
        message,
        get_additional_end_message,
    )
