"""Environment variable overrides for logging configuration."""

import os
from typing import Dict, List, Optional

from .exceptions import ConfigurationError
from .models import LogFormat, LogLevel

_TRUE_WORDS = {"1", "true", "yes", "on"}
_FALSE_WORDS = {"0", "false", "no", "off"}


class EnvironmentConfig:
    """Configuration values read from environment variables.

    Every field is optional; None means "not set, keep the file or default value".
    """

    def __init__(
        self,
        log_level: Optional[str] = None,
        log_format: Optional[str] = None,
        environment: Optional[str] = None,
        service: Optional[str] = None,
        append_context: Optional[bool] = None,
        enrich_records: Optional[bool] = None,
    ):
        """Initialize environment configuration."""
        self.log_level = log_level
        self.log_format = log_format
        self.environment = environment
        self.service = service
        self.append_context = append_context
        self.enrich_records = enrich_records

    def as_overrides(self) -> Dict[str, Dict[str, object]]:
        """Get the values that are set, shaped like the AppConfig sections."""
        logging_section = {
            "level": self.log_level,
            "format": self.log_format,
            "environment": self.environment,
            "service": self.service,
        }
        context_section = {
            "append_to_messages": self.append_context,
            "enrich_records": self.enrich_records,
        }
        return {
            "logging": {k: v for k, v in logging_section.items() if v is not None},
            "context": {k: v for k, v in context_section.items() if v is not None},
        }


def _parse_bool(name: str, raw: Optional[str], errors: List[str]) -> Optional[bool]:
    if raw is None or not raw.strip():
        return None
    word = raw.strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    errors.append(f"Invalid {name}: '{raw}'. Must be one of: true, false, yes, no, 1, 0")
    return None


def load_environment_config() -> EnvironmentConfig:
    """
    Load and validate logging-related environment variables.

    Optional environment variables:
    - LOG_LEVEL: TRACE, DEBUG, INFO, WARNING, ERROR or CRITICAL
    - LOG_FORMAT: json or key-value
    - ENVIRONMENT: Environment label added to every record
    - SCOPELOG_SERVICE: Service name added to every record
    - SCOPELOG_APPEND_CONTEXT: Append contextual information to message text
    - SCOPELOG_ENRICH_RECORDS: Copy contextual information onto log records

    Returns:
        EnvironmentConfig object with validated values

    Raises:
        ConfigurationError: If any variable is set to an invalid value
    """
    errors: List[str] = []

    log_level = os.getenv("LOG_LEVEL")
    log_format = os.getenv("LOG_FORMAT")
    environment = os.getenv("ENVIRONMENT")
    service = os.getenv("SCOPELOG_SERVICE")

    if log_level is not None and log_level.strip():
        log_level = log_level.strip().upper()
        valid_levels = [level.value for level in LogLevel]
        if log_level not in valid_levels:
            errors.append(
                f"Invalid LOG_LEVEL: '{log_level}'. Must be one of: {', '.join(valid_levels)}"
            )
    else:
        log_level = None

    if log_format is not None and log_format.strip():
        log_format = log_format.strip().lower()
        valid_formats = [fmt.value for fmt in LogFormat]
        if log_format not in valid_formats:
            errors.append(
                f"Invalid LOG_FORMAT: '{log_format}'. Must be one of: {', '.join(valid_formats)}"
            )
    else:
        log_format = None

    append_context = _parse_bool(
        "SCOPELOG_APPEND_CONTEXT", os.getenv("SCOPELOG_APPEND_CONTEXT"), errors
    )
    enrich_records = _parse_bool(
        "SCOPELOG_ENRICH_RECORDS", os.getenv("SCOPELOG_ENRICH_RECORDS"), errors
    )

    if errors:
        raise ConfigurationError(
            "Environment variable validation failed",
            errors=errors,
            suggestions=[
                "Unset the variable to fall back to the configuration file",
                "Check the spelling of level and format names",
            ],
            source="environment",
        )

    return EnvironmentConfig(
        log_level=log_level,
        log_format=log_format,
        environment=environment.strip() if environment and environment.strip() else None,
        service=service.strip() if service and service.strip() else None,
        append_context=append_context,
        enrich_records=enrich_records,
    )
