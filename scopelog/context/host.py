"""Host environment seeding for root logging contexts.

Root contexts (those created without a parent) start with a fixed set of
entries describing the host process, read from environment variables. The
environment source can be overridden so tests do not depend on the real
process environment.
"""

import os
from contextlib import contextmanager
from typing import Dict, Iterator, Mapping, Optional, Tuple

# Context key -> environment variables to try, first non-blank value wins.
HOST_VARIABLES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("Host.Website.Name", ("APPSETTING_WEBSITE_SITE_NAME", "WEBSITE_SITE_NAME")),
    ("Host.Computer.Name", ("COMPUTERNAME", "HOSTNAME", "USERNAME")),
    ("Host.AppPool", ("APP_POOL_ID", "WEBSITE_IIS_SITE_NAME")),
    ("Host.ResourceGroup", ("WEBSITE_RESOURCE_GROUP",)),
    ("Host.Authority", ("HTTP_AUTHORITY", "HTTP_HOST")),
    ("Host.Slot.Name", ("APPSETTING_WEBSITE_SLOT_NAME",)),
)

HOST_KEYS: Tuple[str, ...] = tuple(key for key, _ in HOST_VARIABLES)

_environment_override: Optional[Mapping[str, str]] = None


def set_host_environment(environ: Optional[Mapping[str, str]]) -> None:
    """Override the environment used when seeding root contexts.

    Args:
        environ: Mapping to read host variables from, or None to use os.environ
    """
    global _environment_override
    _environment_override = environ


def reset_host_environment() -> None:
    """Restore seeding from the real process environment."""
    set_host_environment(None)


def get_host_environment() -> Mapping[str, str]:
    """Get the environment mapping currently used for seeding."""
    if _environment_override is not None:
        return _environment_override
    return os.environ


@contextmanager
def host_environment(environ: Mapping[str, str]) -> Iterator[Mapping[str, str]]:
    """Temporarily seed root contexts from the given mapping.

    Example:
        >>> with host_environment({"WEBSITE_SITE_NAME": "orders-api"}):
        ...     store = ContextStore()
    """
    previous = _environment_override
    set_host_environment(environ)
    try:
        yield environ
    finally:
        set_host_environment(previous)


def read_host_information(environ: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    """Collect host entries from environment variables.

    Missing or whitespace-only variables are omitted. This never raises.

    Args:
        environ: Mapping to read from (defaults to the configured host environment)

    Returns:
        Dictionary of context key to value, in seeding order
    """
    source = environ if environ is not None else get_host_environment()
    information: Dict[str, str] = {}

    for key, variables in HOST_VARIABLES:
        for variable in variables:
            value = source.get(variable)
            if isinstance(value, str) and value.strip():
                information[key] = value
                break

    return information
