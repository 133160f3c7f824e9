"""
Configuration module for locatorkit.

Example usage:
    from locatorkit.config import configure, get_options

    configure(prefer_css=True)
    assert get_options().prefer_css

Environment variables:
    LOCATORKIT_PREFER_CSS=true
    LOCATORKIT_CONVERT_REGEXP_TO_CONTAINS=false
"""

from .defaults import (
    DEFAULT_CONVERT_REGEXP_TO_CONTAINS,
    DEFAULT_PREFER_CSS,
    ENV_PREFIX,
)
from .env import get_env_bool, get_env_key, load_env_config, parse_bool
from .options import (
    LocatorOptions,
    configure,
    get_options,
    load_options,
    reset_options,
    set_options,
)

__all__ = [
    "DEFAULT_CONVERT_REGEXP_TO_CONTAINS",
    "DEFAULT_PREFER_CSS",
    "ENV_PREFIX",
    "LocatorOptions",
    "configure",
    "get_env_bool",
    "get_env_key",
    "get_options",
    "load_env_config",
    "load_options",
    "parse_bool",
    "reset_options",
    "set_options",
]
