"""
Exceptions for locatorkit.

Selector errors are raised eagerly, before any call reaches the driver.
Driver errors mirror the conditions a remote browser driver reports.
"""

from __future__ import annotations

from typing import Any, Optional


class LocatorError(Exception):
    """Base class for selector compilation errors."""

    pass


class InvalidValueType(LocatorError, TypeError):
    """A selector value has the wrong kind for its key."""

    def __init__(self, key: str, value: Any, expected: str) -> None:
        self.key = key
        self.value = value
        super().__init__(
            f"expected {expected} for {key!r}, got {value!r}:{type(value).__name__}"
        )


class UnsupportedAttribute(LocatorError):
    """A selector key is not a valid attribute for the element kind."""

    def __init__(self, attribute: str) -> None:
        self.attribute = attribute
        super().__init__(f"invalid attribute: {attribute!r}")


class ConflictingStrategy(LocatorError, ValueError):
    """Explicit xpath/css combined with each other or with other criteria."""

    pass


class IndexNotSupportedForAll(LocatorError, ValueError):
    """An index was given while locating all matching elements."""

    def __init__(self, selector: Optional[dict[str, Any]] = None) -> None:
        self.selector = selector
        super().__init__(f"can't locate all elements by index ({selector!r})")


class InternalBuildFailure(LocatorError, RuntimeError):
    """Query synthesis invariants were violated."""

    pass


class DriverError(Exception):
    """Error reported by the browser driver."""

    pass


class NoSuchElementError(DriverError):
    """No element matched a single-element lookup."""

    pass


class StaleElementReferenceError(DriverError):
    """An element handle is no longer attached to the document."""

    pass


class InvalidSelectorError(DriverError):
    """The driver rejected a CSS or XPath expression."""

    pass


class UnknownObjectError(Exception):
    """An element reference could not be resolved to a live element."""

    def __init__(self, selector: dict[str, Any]) -> None:
        self.selector = selector
        super().__init__(f"unable to locate element, using {selector!r}")


__all__ = [
    "LocatorError",
    "InvalidValueType",
    "UnsupportedAttribute",
    "ConflictingStrategy",
    "IndexNotSupportedForAll",
    "InternalBuildFailure",
    "DriverError",
    "NoSuchElementError",
    "StaleElementReferenceError",
    "InvalidSelectorError",
    "UnknownObjectError",
]
