"""
Lazy element references.

An element is a parent container plus a selector. It is located on demand,
every time it is used, so a reference can be created before the element
exists and keeps working after the page changes.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from locatorkit.config import LocatorOptions
from locatorkit.driver.interfaces import ElementHandle
from locatorkit.elements.container import Container
from locatorkit.exceptions import StaleElementReferenceError, UnknownObjectError
from locatorkit.locators.registry import locator_for
from locatorkit.locators.selector import Selector

logger = logging.getLogger(__name__)


class HTMLElement(Container):
    """Reference to an element matching a selector.

    Args:
        parent: Container to search in.
        selector: Criteria describing the element.
        element: Handle already located for this reference, if any.
        options: Compilation options. Defaults to the process-wide options.
    """

    # Tag name added to selectors of this kind, if any
    TAG_NAME: Optional[str] = None
    # Key into the locator registry
    KIND = "element"
    # Attributes valid as selector keys, merged along the class hierarchy
    ATTRIBUTES = frozenset(
        {
            "accesskey",
            "class_name",
            "contenteditable",
            "dir",
            "draggable",
            "hidden",
            "id",
            "lang",
            "role",
            "spellcheck",
            "style",
            "tabindex",
            "title",
            "translate",
        }
    )

    def __init__(
        self,
        parent: Container,
        selector: Optional[Selector] = None,
        *,
        element: Optional[ElementHandle] = None,
        options: Optional[LocatorOptions] = None,
    ) -> None:
        if selector is None and element is None:
            raise ValueError("either a selector or an element is required")
        if selector is not None and not isinstance(selector, dict):
            raise TypeError(f"expected dict, got {selector!r}:{type(selector).__name__}")

        self._parent = parent
        self._selector = self.prepare_selector(selector or {})
        self._element = element
        self._options = options

    @classmethod
    def prepare_selector(cls, selector: Selector) -> Selector:
        """Copy a selector, adding this kind's tag name."""
        selector = dict(selector)
        if cls.TAG_NAME is not None:
            selector.setdefault("tag_name", cls.TAG_NAME)
        return selector

    @classmethod
    def attribute_list(cls) -> frozenset[str]:
        """All attribute names valid in selectors for this kind."""
        attributes: set[str] = set()
        for klass in cls.__mro__:
            attributes.update(getattr(klass, "ATTRIBUTES", ()))
        return frozenset(attributes)

    @property
    def parent(self) -> Container:
        return self._parent

    @property
    def selector(self) -> Selector:
        return dict(self._selector)

    # Locating

    def locate(self) -> Optional[ElementHandle]:
        """Look the element up. Returns None if it can't be found."""
        context = self._parent.assert_exists()
        finder = locator_for(self.KIND).finder_for(
            context, self._selector, self.attribute_list(), self._options
        )
        return finder.find()

    def assert_exists(self) -> ElementHandle:
        """Return the live handle for this element.

        Raises:
            UnknownObjectError: If the element can't be located.
        """
        if self._element is not None:
            try:
                self._element.tag_name
                return self._element
            except StaleElementReferenceError:
                logger.debug(f"Relocating stale element for {self._selector!r}")
                self._element = None
                if not self._selector:
                    raise UnknownObjectError(self._selector)

        element = self.locate()
        if element is None:
            raise UnknownObjectError(self._selector)
        return element

    @property
    def exists(self) -> bool:
        """Whether the element can currently be located."""
        try:
            self.assert_exists()
        except UnknownObjectError:
            return False
        return True

    @property
    def wd(self) -> ElementHandle:
        """The driver handle for this element."""
        return self.assert_exists()

    # Element data

    @property
    def tag_name(self) -> str:
        return self.wd.tag_name.lower()

    @property
    def text(self) -> str:
        return self.wd.text

    def attribute_value(self, name: str) -> Optional[str]:
        """Get an attribute value; underscores in name stand for hyphens."""
        return self.wd.attribute(name.replace("_", "-"))

    @property
    def id(self) -> Optional[str]:
        return self.attribute_value("id")

    @property
    def class_name(self) -> Optional[str]:
        return self.attribute_value("class")

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, HTMLElement):
            return NotImplemented
        try:
            return self.wd == other.wd
        except UnknownObjectError:
            return False

    def __hash__(self) -> int:
        # equal references share a handle; missing ones equal nothing
        try:
            return hash(self.wd)
        except UnknownObjectError:
            return object.__hash__(self)

    def __repr__(self) -> str:
        if self._element is not None and not self._selector:
            return f"<{self.__class__.__name__} located={self._element!r}>"
        return f"<{self.__class__.__name__} {self._selector!r}>"


__all__ = [
    "HTMLElement",
]
