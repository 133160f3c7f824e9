"""
Locator options for locatorkit.

A single process-wide options object decides how selectors are compiled.
Builders read it once when they are created.
"""

import logging
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from .defaults import DEFAULT_CONVERT_REGEXP_TO_CONTAINS, DEFAULT_PREFER_CSS
from .env import load_env_config

logger = logging.getLogger(__name__)


class LocatorOptions(BaseModel):
    """Query compilation options."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    prefer_css: bool = Field(
        DEFAULT_PREFER_CSS,
        description="Try CSS before XPath when a selector can be expressed in both",
    )
    convert_regexp_to_contains: bool = Field(
        DEFAULT_CONVERT_REGEXP_TO_CONTAINS,
        description="Narrow broad XPath queries with contains() predicates",
    )

    def merge(self, **overrides: Any) -> "LocatorOptions":
        """Return a copy with the given options replaced."""
        return self.model_validate({**self.model_dump(), **overrides})


def load_options(**overrides: Any) -> LocatorOptions:
    """Build options from defaults, environment variables and overrides.

    Explicit overrides win over the environment.
    """
    values = load_env_config()
    values.update(overrides)
    return LocatorOptions(**values)


_current: Optional[LocatorOptions] = None


def get_options() -> LocatorOptions:
    """Get the process-wide options, loading them on first use."""
    global _current
    if _current is None:
        _current = load_options()
    return _current


def set_options(options: LocatorOptions) -> None:
    """Replace the process-wide options."""
    global _current
    logger.debug(f"Locator options set: {options!r}")
    _current = options


def configure(**overrides: Any) -> LocatorOptions:
    """Update selected process-wide options.

    Example:
        configure(prefer_css=True)
    """
    options = get_options().merge(**overrides)
    set_options(options)
    return options


def reset_options() -> None:
    """Forget the process-wide options so the next access reloads them."""
    global _current
    _current = None
