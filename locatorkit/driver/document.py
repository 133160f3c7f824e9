"""
In-process document driver for locatorkit.

Implements the driver interface over an HTML document parsed with lxml,
which makes the locator layer usable against static markup (and testable
without a browser). Searches are rooted at the document element and never
return the context element itself.
"""

from __future__ import annotations

import logging
from typing import Optional

from lxml import etree, html
from lxml.cssselect import CSSSelector, SelectorError

from locatorkit.driver.interfaces import ElementHandle, SearchContext, Strategy
from locatorkit.exceptions import (
    InvalidSelectorError,
    NoSuchElementError,
    StaleElementReferenceError,
)

logger = logging.getLogger(__name__)

# XPath templates for strategies that take a plain value
_STRATEGY_XPATH = {
    Strategy.ID: ".//*[@id=$value]",
    Strategy.NAME: ".//*[@name=$value]",
    Strategy.CLASS_NAME: (
        ".//*[contains(concat(' ', normalize-space(@class), ' '), "
        "concat(' ', $value, ' '))]"
    ),
    Strategy.TAG_NAME: ".//*[local-name()=$value]",
    Strategy.LINK_TEXT: ".//a[normalize-space()=$value]",
    Strategy.PARTIAL_LINK_TEXT: ".//a[contains(normalize-space(), $value)]",
}


def _query(context: etree._Element, how: Strategy, what: str) -> list[etree._Element]:
    """Run a strategy against an lxml element, excluding the element itself."""
    how = Strategy(how)
    try:
        if how == Strategy.CSS:
            results = CSSSelector(what, translator="html")(context)
        elif how == Strategy.XPATH:
            results = context.xpath(what)
        else:
            results = context.xpath(_STRATEGY_XPATH[how], value=what)
    except (SelectorError, etree.XPathError) as e:
        raise InvalidSelectorError(f"invalid {how.value} {what!r}: {e}") from e

    if not isinstance(results, list):
        raise InvalidSelectorError(
            f"{how.value} {what!r} did not evaluate to a node-set"
        )

    return [
        el
        for el in results
        if isinstance(el, etree._Element)
        and isinstance(el.tag, str)
        and el is not context
    ]


class DocumentElement(ElementHandle):
    """Element handle backed by an lxml element.

    Handles belong to one loaded document; once the driver loads another
    document every access raises StaleElementReferenceError.
    """

    def __init__(
        self, driver: "DocumentDriver", element: etree._Element, generation: int
    ) -> None:
        self._driver = driver
        self._element = element
        self._generation = generation

    def _live(self) -> etree._Element:
        if self._generation != self._driver.generation:
            raise StaleElementReferenceError(
                f"<{self._element.tag}> is not attached to the current document"
            )
        return self._element

    @property
    def tag_name(self) -> str:
        """Get the element's tag name."""
        return str(self._live().tag)

    @property
    def text(self) -> str:
        """Get the element's text with whitespace collapsed."""
        return " ".join(self._live().text_content().split())

    def attribute(self, name: str) -> Optional[str]:
        """Get an attribute value."""
        return self._live().get(name)

    def find_element(self, how: Strategy, what: str) -> "DocumentElement":
        """Find the first descendant matching the query."""
        return self._driver._first(self._live(), how, what)

    def find_elements(self, how: Strategy, what: str) -> list["DocumentElement"]:
        """Find all descendants matching the query."""
        return self._driver._all(self._live(), how, what)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DocumentElement):
            return NotImplemented
        return self._element is other._element and self._generation == other._generation

    def __hash__(self) -> int:
        # lxml proxies come and go; the node path is stable
        path = self._element.getroottree().getpath(self._element)
        return hash((path, self._generation))

    def __repr__(self) -> str:
        attrs = " ".join(
            f'{k}="{v}"' for k, v in list(self._element.attrib.items())[:3]
        )
        if attrs:
            return f"<DocumentElement <{self._element.tag} {attrs}>>"
        return f"<DocumentElement <{self._element.tag}>>"


class DocumentDriver(SearchContext):
    """Driver answering lookups against a parsed HTML document.

    Example:
        driver = DocumentDriver.from_html("<div id='main'>Hi</div>")
        handle = driver.find_element(Strategy.ID, "main")
        assert handle.text == "Hi"
    """

    def __init__(self, content: str = "<html><body></body></html>") -> None:
        self._generation = 0
        self._root: Optional[etree._Element] = None
        self.load(content)

    @classmethod
    def from_html(cls, content: str) -> "DocumentDriver":
        """Create a driver for an HTML string."""
        return cls(content)

    @property
    def generation(self) -> int:
        """Counter bumped every time a document is loaded."""
        return self._generation

    @property
    def root(self) -> DocumentElement:
        """Handle for the document element."""
        return DocumentElement(self, self._root, self._generation)

    def load(self, content: str) -> None:
        """Replace the current document. Existing handles become stale."""
        self._root = html.document_fromstring(content)
        self._generation += 1
        logger.debug(f"Loaded document generation {self._generation}")

    def find_element(self, how: Strategy, what: str) -> DocumentElement:
        """Find the first element matching the query."""
        return self._first(self._root, how, what)

    def find_elements(self, how: Strategy, what: str) -> list[DocumentElement]:
        """Find all elements matching the query."""
        return self._all(self._root, how, what)

    def _all(
        self, context: etree._Element, how: Strategy, what: str
    ) -> list[DocumentElement]:
        return [
            DocumentElement(self, el, self._generation)
            for el in _query(context, how, what)
        ]

    def _first(self, context: etree._Element, how: Strategy, what: str) -> DocumentElement:
        elements = self._all(context, how, what)
        if not elements:
            raise NoSuchElementError(
                f"no element found using {Strategy(how).value} {what!r}"
            )
        return elements[0]


__all__ = [
    "DocumentDriver",
    "DocumentElement",
]
