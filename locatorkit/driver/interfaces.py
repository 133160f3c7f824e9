"""
Abstract driver interfaces for locatorkit.

The locator layer talks to a browser driver only through these classes.
A driver answers single and multiple lookups using one of the native
strategies; element handles are themselves search contexts.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional


class Strategy(str, Enum):
    """Native lookup strategies understood by a browser driver."""

    ID = "id"
    NAME = "name"
    CLASS_NAME = "class name"
    CSS = "css selector"
    XPATH = "xpath"
    TAG_NAME = "tag name"
    LINK_TEXT = "link text"
    PARTIAL_LINK_TEXT = "partial link text"


class SearchContext(ABC):
    """Something elements can be searched in: a document or an element."""

    @abstractmethod
    def find_element(self, how: Strategy, what: str) -> "ElementHandle":
        """Find the first element matching the query.

        Raises:
            NoSuchElementError: If nothing matches.
        """
        ...

    @abstractmethod
    def find_elements(self, how: Strategy, what: str) -> list["ElementHandle"]:
        """Find all elements matching the query, in document order.

        Returns an empty list when nothing matches.
        """
        ...


class ElementHandle(SearchContext):
    """Opaque reference to an element living in the remote document."""

    @property
    @abstractmethod
    def tag_name(self) -> str:
        """Get the element's tag name."""
        ...

    @property
    @abstractmethod
    def text(self) -> str:
        """Get the element's rendered text."""
        ...

    @abstractmethod
    def attribute(self, name: str) -> Optional[str]:
        """Get an attribute value, or None if the attribute is absent."""
        ...


__all__ = [
    "Strategy",
    "SearchContext",
    "ElementHandle",
]
