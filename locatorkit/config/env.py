"""
Environment variable support for locatorkit configuration.

Options map to upper-cased variables with the ``LOCATORKIT_`` prefix,
e.g. ``prefer_css`` is read from ``LOCATORKIT_PREFER_CSS``.
"""

import os
from typing import Any, Optional

from .defaults import ENV_PREFIX

_TRUE_VALUES = ("true", "1", "yes", "on", "enabled")
_FALSE_VALUES = ("false", "0", "no", "off", "disabled")


def get_env_key(key: str, prefix: str = ENV_PREFIX) -> str:
    """Convert an option name to its environment variable name.

    Args:
        key: Option name (e.g., "prefer_css")
        prefix: Environment variable prefix

    Returns:
        Environment variable name (e.g., "LOCATORKIT_PREFER_CSS")
    """
    return f"{prefix}{key.upper().replace('.', '_').replace('-', '_')}"


def parse_bool(value: str) -> bool:
    """Parse string to boolean.

    Raises:
        ValueError: If the string is not a recognized boolean spelling.
    """
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"not a boolean value: {value!r}")


def get_env_bool(
    key: str, default: Optional[bool] = None, prefix: str = ENV_PREFIX
) -> Optional[bool]:
    """Get boolean value from environment variable.

    Args:
        key: Option name
        default: Value returned when the variable is unset
        prefix: Environment variable prefix

    Returns:
        Parsed boolean or default
    """
    value = os.environ.get(get_env_key(key, prefix))
    if value is None:
        return default
    return parse_bool(value)


# Options that can be overridden from the environment
ENV_MAPPINGS = {
    "prefer_css": bool,
    "convert_regexp_to_contains": bool,
}


def load_env_config(prefix: str = ENV_PREFIX) -> dict[str, Any]:
    """Load option overrides from environment variables.

    Returns:
        Dictionary holding only the options that are set
    """
    result: dict[str, Any] = {}

    for key, target_type in ENV_MAPPINGS.items():
        if target_type is bool:
            value = get_env_bool(key, prefix=prefix)
        else:
            value = os.environ.get(get_env_key(key, prefix))
        if value is not None:
            result[key] = value

    return result
