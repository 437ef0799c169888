"""Configuration management for contextual logging."""

from .environment import EnvironmentConfig, load_environment_config
from .exceptions import ConfigurationError
from .loader import apply_config, load_config
from .models import AppConfig, ContextConfig, LogFormat, LoggingConfig, LogLevel

__all__ = [
    # Loader functions
    "load_config",
    "apply_config",
    "load_environment_config",
    # Configuration models
    "AppConfig",
    "LoggingConfig",
    "ContextConfig",
    "EnvironmentConfig",
    # Enums
    "LogLevel",
    "LogFormat",
    # Exceptions
    "ConfigurationError",
]
