"""Configuration loader: .env file, YAML file, then environment overrides."""

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from dotenv import load_dotenv
from pydantic import ValidationError

from scopelog.logging.config import configure_logging
from scopelog.logging.formatter import set_append_contextual_information

from .environment import load_environment_config
from .exceptions import ConfigurationError
from .models import AppConfig

DEFAULT_CONFIG_FILES = (Path("scopelog.yaml"), Path("config") / "scopelog.yaml")

PathLike = Union[str, Path]


def load_config(
    config_path: Optional[PathLike] = None,
    env_file: Optional[PathLike] = None,
) -> AppConfig:
    """
    Load and validate logging configuration.

    Sources, lowest precedence first:
    1. Model defaults
    2. YAML file (config_path, or scopelog.yaml / config/scopelog.yaml if present)
    3. Environment variables (after loading env_file, if given)

    Args:
        config_path: Optional path to a YAML configuration file
        env_file: Optional .env file to load into the environment first

    Returns:
        Validated AppConfig

    Raises:
        ConfigurationError: If a file cannot be read or any value is invalid
    """
    if env_file is not None:
        env_path = Path(env_file)
        if not env_path.exists():
            raise ConfigurationError(
                f"Environment file not found: {env_path}",
                suggestions=[f"Ensure {env_path} exists", "Omit env_file to skip it"],
            )
        load_dotenv(env_path, override=False)

    config_file = _find_config_file(config_path)
    config_dict: Dict[str, Any] = _read_yaml(config_file) if config_file else {}

    env_config = load_environment_config()
    for section, values in env_config.as_overrides().items():
        if values:
            merged = dict(config_dict.get(section) or {})
            merged.update(values)
            config_dict[section] = merged

    source = str(config_file) if config_file else None
    try:
        return AppConfig.model_validate(config_dict)
    except ValidationError as e:
        errors = []
        for error in e.errors():
            field_path = " -> ".join(str(loc) for loc in error["loc"])
            if error["type"] == "missing":
                errors.append(f"Missing required field: {field_path}")
            elif "enum" in error["type"]:
                errors.append(f"Invalid value for '{field_path}': {error['msg']}")
            else:
                errors.append(f"{field_path}: {error['msg']}")

        raise ConfigurationError(
            "Configuration validation failed",
            errors=errors,
            suggestions=[
                "Check that level is one of TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL",
                "Check that format is json or key-value",
            ],
            source=source,
        )


def apply_config(config: AppConfig) -> None:
    """
    Configure the root logger and the context append flag from configuration.

    Args:
        config: Validated configuration
    """
    configure_logging(
        level=config.logging.level,
        format_type=config.logging.format,
        environment=config.logging.environment,
        service=config.logging.service,
        enrich_records=config.context.enrich_records,
    )
    set_append_contextual_information(config.context.append_to_messages)


def _read_yaml(config_file: Path) -> Dict[str, Any]:
    try:
        with open(config_file, "r") as f:
            config_dict = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Failed to parse YAML configuration: {e}",
            suggestions=[
                "Check YAML syntax in your config file",
                "Ensure proper indentation (use spaces, not tabs)",
            ],
            source=str(config_file),
        )
    except OSError as e:
        raise ConfigurationError(
            f"Failed to read configuration file: {e}",
            suggestions=[f"Ensure {config_file} is readable", "Check file permissions"],
            source=str(config_file),
        )

    if config_dict is None:
        return {}

    if not isinstance(config_dict, dict):
        raise ConfigurationError(
            "Configuration file must contain a mapping at the top level",
            suggestions=["Use 'logging:' and 'context:' sections"],
            source=str(config_file),
        )

    return config_dict


def _find_config_file(config_path: Optional[PathLike] = None) -> Optional[Path]:
    """
    Find the configuration file, if any.

    Args:
        config_path: Optional explicit path to config file

    Returns:
        Path to the configuration file, or None when no default file exists

    Raises:
        ConfigurationError: If an explicit path does not exist
    """
    if config_path is not None:
        path = Path(config_path)
        if not path.exists():
            raise ConfigurationError(
                f"Specified configuration file not found: {path}",
                suggestions=[f"Ensure {path} exists", "Check the path and try again"],
            )
        return path

    for candidate in DEFAULT_CONFIG_FILES:
        if candidate.exists():
            return candidate

    return None
