"""
Element collections.

A collection is a parent container plus a selector, like an element. The
matching elements are fetched with one lookup the first time the collection
is counted, iterated or indexed, and kept from then on.
"""

from __future__ import annotations

import logging
from typing import Callable, Generic, Iterator, Optional, TypeVar, Union

from locatorkit.config import LocatorOptions
from locatorkit.driver.interfaces import ElementHandle
from locatorkit.elements.container import Container
from locatorkit.elements.element import HTMLElement
from locatorkit.locators.registry import locator_for
from locatorkit.locators.selector import Selector

logger = logging.getLogger(__name__)

T = TypeVar("T")


class WriteOnce(Generic[T]):
    """Holds a value computed on first access and never replaced.

    Not thread-safe: concurrent first accesses must be serialized by the
    caller.
    """

    def __init__(self) -> None:
        self._assigned = False
        self._value: Optional[T] = None

    @property
    def assigned(self) -> bool:
        return self._assigned

    def get(self, factory: Callable[[], T]) -> T:
        if not self._assigned:
            value = factory()
            self._value = value
            self._assigned = True
        return self._value


class ElementCollection:
    """Lazily fetched, index-addressable sequence of elements.

    Indexing past the end does not fail: it returns an element reference for
    ``selector`` plus ``index``, which is only checked when used.

    Example:
        items = doc.elements(tag_name="li")
        len(items)            # fetches once
        items[0].text
        items[10].exists      # False, the reference is a placeholder
    """

    def __init__(
        self,
        parent: Container,
        selector: Selector,
        element_class: type[HTMLElement] = HTMLElement,
        options: Optional[LocatorOptions] = None,
    ) -> None:
        self._parent = parent
        self._selector = dict(selector)
        self._element_class = element_class
        self._options = options
        self._handles: WriteOnce[list[ElementHandle]] = WriteOnce()
        self._elements: WriteOnce[list[HTMLElement]] = WriteOnce()

    @property
    def selector(self) -> Selector:
        return dict(self._selector)

    @property
    def parent(self) -> Container:
        return self._parent

    @property
    def element_class(self) -> type[HTMLElement]:
        return self._element_class

    @property
    def materialized(self) -> bool:
        """Whether the elements have been fetched."""
        return self._handles.assigned

    def _locate_all(self) -> list[ElementHandle]:
        context = self._parent.assert_exists()
        selector = self._element_class.prepare_selector(self._selector)
        finder = locator_for(self._element_class.KIND).finder_for(
            context, selector, self._element_class.attribute_list(), self._options
        )
        handles = finder.find_all()
        logger.debug(f"Collected {len(handles)} elements for {selector!r}")
        return handles

    def _wrap(self) -> list[HTMLElement]:
        return [
            self._element_class(
                self._parent,
                {**self._selector, "index": index},
                element=handle,
                options=self._options,
            )
            for index, handle in enumerate(self._handles.get(self._locate_all))
        ]

    def to_list(self) -> list[HTMLElement]:
        """The elements of this collection."""
        return list(self._elements.get(self._wrap))

    def at(self, index: int) -> HTMLElement:
        """Element at index, or an unvalidated placeholder past either end."""
        elements = self._elements.get(self._wrap)
        if -len(elements) <= index < len(elements):
            return elements[index]
        return self._element_class(
            self._parent, {**self._selector, "index": index}, options=self._options
        )

    @property
    def first(self) -> HTMLElement:
        return self.at(0)

    @property
    def last(self) -> HTMLElement:
        return self.at(-1)

    def __getitem__(self, index: Union[int, slice]):
        if isinstance(index, slice):
            return self.to_list()[index]
        return self.at(index)

    def __len__(self) -> int:
        return len(self._handles.get(self._locate_all))

    def __iter__(self) -> Iterator[HTMLElement]:
        return iter(self.to_list())

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self._element_class.__name__} {self._selector!r}>"


__all__ = [
    "ElementCollection",
    "WriteOnce",
]
