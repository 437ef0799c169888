"""Root logger configuration with structured output formatters."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Literal, Optional

from scopelog.context.propagation import peek_context
from scopelog.utils.timestamps import format_timestamp

from .formatter import set_append_contextual_information
from .levels import to_level

LogFormat = Literal["json", "key-value"]


class ContextualFilter(logging.Filter):
    """Filter that enriches log records with static metadata and active context.

    This filter merges:
    1. Static fields (service, environment) into every record
    2. Entries of the current flow's context store, when include_context is set
    3. Any additional 'extra' fields passed to the log call (left untouched)

    This is the out-of-band channel for contextual information. When it is
    installed with include_context, appending context to message text can be
    switched off.
    """

    def __init__(
        self,
        service: str = "scopelog",
        environment: str = "local",
        include_context: bool = True,
    ):
        """Initialize contextual filter.

        Args:
            service: Service name (static field)
            environment: Environment label (production, staging, local)
            include_context: Copy context store entries onto each record
        """
        super().__init__()
        self.service = service
        self.environment = environment
        self.include_context = include_context

    def filter(self, record: logging.LogRecord) -> bool:
        """Enrich record with static metadata and active context.

        Args:
            record: Log record to enrich

        Returns:
            True (always allow record to pass)
        """
        record.service = self.service
        record.environment = self.environment

        if self.include_context:
            # Never create a store here; the filter only reads.
            store = peek_context()
            if store is not None:
                for key, value in store.snapshot():
                    if not hasattr(record, key):
                        setattr(record, key, value)

        return True


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Produces single-line JSON objects with stable field names.
    Automatically includes all extra fields and context entries.
    """

    # Standard log record attributes to exclude from extras
    STANDARD_ATTRS = {
        "name", "msg", "args", "created", "filename", "funcName", "levelname",
        "levelno", "lineno", "module", "msecs", "message", "pathname", "process",
        "processName", "relativeCreated", "thread", "threadName", "asctime",
        "exc_info", "exc_text", "stack_info", "taskName"
    }

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON string with all fields
        """
        log_obj: Dict[str, Any] = {
            "timestamp": format_timestamp(datetime.fromtimestamp(record.created, tz=timezone.utc)),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key, value in record.__dict__.items():
            if key not in self.STANDARD_ATTRS and not key.startswith("_"):
                if isinstance(value, datetime):
                    log_obj[key] = value.isoformat()
                elif isinstance(value, (str, int, float, bool, type(None), list, dict)):
                    log_obj[key] = value
                else:
                    log_obj[key] = str(value)

        if record.exc_info:
            log_obj["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(log_obj, ensure_ascii=False, default=str)


class KeyValueFormatter(logging.Formatter):
    """Key-value formatter for human-readable logs.

    Produces logs in format:
    timestamp [level] name: message key1=value1 key2=value2
    """

    # Standard attributes to skip in key-value output
    SKIP_ATTRS = {
        "name", "msg", "args", "created", "filename", "funcName", "levelname",
        "levelno", "lineno", "module", "msecs", "message", "pathname", "process",
        "processName", "relativeCreated", "thread", "threadName", "asctime",
        "exc_info", "exc_text", "stack_info", "taskName", "service", "environment"
    }

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as key-value pairs.

        Args:
            record: Log record to format

        Returns:
            Human-readable log line with key=value pairs
        """
        base = super().format(record)

        extras = []
        for key, value in sorted(record.__dict__.items()):
            if key in self.SKIP_ATTRS or key.startswith("_"):
                continue
            extras.append(f"{key}={self._format_value(value)}")

        if extras:
            return f"{base} {' '.join(extras)}"
        return base

    @staticmethod
    def _format_value(value: Any) -> str:
        if isinstance(value, str):
            # Quote strings with spaces or special chars
            if " " in value or "=" in value or "," in value:
                return f'"{value}"'
            return value
        if isinstance(value, datetime):
            return value.isoformat()
        if isinstance(value, bool):
            return str(value).lower()
        if value is None:
            return "null"
        return str(value)


def configure_logging(
    level: str = "INFO",
    format_type: LogFormat = "key-value",
    environment: str = "local",
    service: str = "scopelog",
    enrich_records: bool = False,
    append_context: Optional[bool] = None,
) -> None:
    """
    Configure the root logger with the specified level and format.

    Args:
        level: Logging level (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_type: Output format - 'json' for JSON logs or 'key-value' for human-readable
        environment: Environment label (production, staging, local)
        service: Service name added to every record
        enrich_records: Copy context store entries onto every record
        append_context: When given, sets whether context is appended to message text

    Raises:
        ValueError: If level or format_type is invalid
    """
    numeric_level = to_level(level)

    if format_type not in ("json", "key-value"):
        raise ValueError(f"Invalid log format: {format_type}. Must be 'json' or 'key-value'")

    handler = logging.StreamHandler(sys.stdout)

    if format_type == "json":
        formatter = JSONFormatter()
    else:
        formatter = KeyValueFormatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    handler.addFilter(
        ContextualFilter(
            service=service,
            environment=environment,
            include_context=enrich_records,
        )
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    if append_context is not None:
        set_append_contextual_information(append_context)

    logger = logging.getLogger(__name__)
    logger.info(
        "Logging configured",
        extra={
            "event": "logging.configured",
            "component": "logging",
            "log_level": logging.getLevelName(numeric_level),
            "log_format": format_type,
        },
    )
