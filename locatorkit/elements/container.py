"""
Containers: things elements can be looked up in.

Both the document root and every element are containers. Lookups return
lazy references; nothing reaches the driver until the reference is used.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Optional

from locatorkit.driver.interfaces import SearchContext

if TYPE_CHECKING:
    from locatorkit.elements import html
    from locatorkit.elements.collection import ElementCollection
    from locatorkit.elements.element import HTMLElement
    from locatorkit.locators.selector import Selector


def _merge(selector: Optional["Selector"], kwargs: dict[str, Any]) -> "Selector":
    merged = dict(selector or {})
    merged.update(kwargs)
    return merged


class Container(ABC):
    """Mixin providing element lookups.

    Selectors can be passed as a dict, as keyword arguments, or both; a dict
    is needed for keys that are not valid identifiers, such as ``class``.

    Example:
        doc.div(id="main").elements(tag_name="li")
        doc.element({"class": "item", "data_id": "7"})
    """

    @abstractmethod
    def assert_exists(self) -> SearchContext:
        """Return the live search context, raising if there is none."""
        ...

    def element(self, selector: Optional["Selector"] = None, **kwargs: Any) -> "HTMLElement":
        from locatorkit.elements.element import HTMLElement

        return HTMLElement(self, _merge(selector, kwargs))

    def elements(
        self, selector: Optional["Selector"] = None, **kwargs: Any
    ) -> "ElementCollection":
        from locatorkit.elements.collection import ElementCollection
        from locatorkit.elements.element import HTMLElement

        return ElementCollection(self, _merge(selector, kwargs), HTMLElement)

    def _one(self, kind: str, selector: Optional["Selector"], kwargs: dict[str, Any]):
        from locatorkit.elements import html

        return getattr(html, kind)(self, _merge(selector, kwargs))

    def _all(self, kind: str, selector: Optional["Selector"], kwargs: dict[str, Any]):
        from locatorkit.elements import html
        from locatorkit.elements.collection import ElementCollection

        return ElementCollection(self, _merge(selector, kwargs), getattr(html, kind))

    # Element kinds

    def a(self, selector: Optional["Selector"] = None, **kwargs: Any) -> "html.Anchor":
        return self._one("Anchor", selector, kwargs)

    def links(self, selector: Optional["Selector"] = None, **kwargs: Any) -> "ElementCollection":
        return self._all("Anchor", selector, kwargs)

    link = a

    def button(self, selector: Optional["Selector"] = None, **kwargs: Any) -> "html.Button":
        return self._one("Button", selector, kwargs)

    def buttons(self, selector: Optional["Selector"] = None, **kwargs: Any) -> "ElementCollection":
        return self._all("Button", selector, kwargs)

    def div(self, selector: Optional["Selector"] = None, **kwargs: Any) -> "html.Div":
        return self._one("Div", selector, kwargs)

    def divs(self, selector: Optional["Selector"] = None, **kwargs: Any) -> "ElementCollection":
        return self._all("Div", selector, kwargs)

    def form(self, selector: Optional["Selector"] = None, **kwargs: Any) -> "html.Form":
        return self._one("Form", selector, kwargs)

    def forms(self, selector: Optional["Selector"] = None, **kwargs: Any) -> "ElementCollection":
        return self._all("Form", selector, kwargs)

    def image(self, selector: Optional["Selector"] = None, **kwargs: Any) -> "html.Image":
        return self._one("Image", selector, kwargs)

    def images(self, selector: Optional["Selector"] = None, **kwargs: Any) -> "ElementCollection":
        return self._all("Image", selector, kwargs)

    def input(self, selector: Optional["Selector"] = None, **kwargs: Any) -> "html.Input":
        return self._one("Input", selector, kwargs)

    def inputs(self, selector: Optional["Selector"] = None, **kwargs: Any) -> "ElementCollection":
        return self._all("Input", selector, kwargs)

    def label(self, selector: Optional["Selector"] = None, **kwargs: Any) -> "html.Label":
        return self._one("Label", selector, kwargs)

    def labels(self, selector: Optional["Selector"] = None, **kwargs: Any) -> "ElementCollection":
        return self._all("Label", selector, kwargs)

    def li(self, selector: Optional["Selector"] = None, **kwargs: Any) -> "html.ListItem":
        return self._one("ListItem", selector, kwargs)

    def lis(self, selector: Optional["Selector"] = None, **kwargs: Any) -> "ElementCollection":
        return self._all("ListItem", selector, kwargs)

    def option(self, selector: Optional["Selector"] = None, **kwargs: Any) -> "html.Option":
        return self._one("Option", selector, kwargs)

    def options(self, selector: Optional["Selector"] = None, **kwargs: Any) -> "ElementCollection":
        return self._all("Option", selector, kwargs)

    def select(self, selector: Optional["Selector"] = None, **kwargs: Any) -> "html.Select":
        return self._one("Select", selector, kwargs)

    def selects(self, selector: Optional["Selector"] = None, **kwargs: Any) -> "ElementCollection":
        return self._all("Select", selector, kwargs)

    def span(self, selector: Optional["Selector"] = None, **kwargs: Any) -> "html.Span":
        return self._one("Span", selector, kwargs)

    def spans(self, selector: Optional["Selector"] = None, **kwargs: Any) -> "ElementCollection":
        return self._all("Span", selector, kwargs)

    def text_field(self, selector: Optional["Selector"] = None, **kwargs: Any) -> "html.TextField":
        return self._one("TextField", selector, kwargs)

    def text_fields(
        self, selector: Optional["Selector"] = None, **kwargs: Any
    ) -> "ElementCollection":
        return self._all("TextField", selector, kwargs)


class Document(Container):
    """Root container wrapping a driver.

    Example:
        doc = Document(DocumentDriver.from_html(markup))
        doc.button(text="Save").exists
    """

    def __init__(self, driver: SearchContext) -> None:
        self._driver = driver

    @property
    def wd(self) -> SearchContext:
        return self._driver

    @property
    def exists(self) -> bool:
        return True

    def assert_exists(self) -> SearchContext:
        return self._driver

    def __repr__(self) -> str:
        return f"<Document {self._driver!r}>"


__all__ = [
    "Container",
    "Document",
]
