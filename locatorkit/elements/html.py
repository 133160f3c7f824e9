"""
Element kinds.

Each kind narrows the tag it matches and declares the attributes that are
valid selector keys for it.
"""

from __future__ import annotations

from locatorkit.elements.element import HTMLElement
from locatorkit.locators.selector import Selector


class Anchor(HTMLElement):
    TAG_NAME = "a"
    ATTRIBUTES = frozenset(
        {"download", "href", "hreflang", "name", "ping", "rel", "target", "type"}
    )

    @property
    def href(self):
        return self.attribute_value("href")


class Button(HTMLElement):
    TAG_NAME = "button"
    ATTRIBUTES = frozenset({"disabled", "form", "name", "type", "value"})


class Div(HTMLElement):
    TAG_NAME = "div"


class Form(HTMLElement):
    TAG_NAME = "form"
    ATTRIBUTES = frozenset(
        {"action", "autocomplete", "enctype", "method", "name", "novalidate", "target"}
    )


class Image(HTMLElement):
    TAG_NAME = "img"
    ATTRIBUTES = frozenset({"alt", "height", "src", "usemap", "width"})


class Input(HTMLElement):
    """An <input>. Its ``label`` is the associated <label> element."""

    TAG_NAME = "input"
    ATTRIBUTES = frozenset(
        {
            "accept",
            "alt",
            "autocomplete",
            "checked",
            "disabled",
            "form",
            "max",
            "maxlength",
            "min",
            "multiple",
            "name",
            "pattern",
            "placeholder",
            "readonly",
            "required",
            "size",
            "src",
            "step",
            "type",
            "value",
        }
    )

    @property
    def value(self):
        return self.attribute_value("value")


class TextField(Input):
    """An <input> that takes typed text, or a <textarea>."""

    TAG_NAME = None
    KIND = "text_field"
    ATTRIBUTES = frozenset({"cols", "rows", "wrap"})

    @classmethod
    def prepare_selector(cls, selector: Selector) -> Selector:
        # two tags keep lookups off the native single-criterion path
        selector = dict(selector)
        selector.setdefault("tag_name", ["input", "textarea"])
        return selector


class Label(HTMLElement):
    TAG_NAME = "label"
    ATTRIBUTES = frozenset({"for", "form"})


class ListItem(HTMLElement):
    TAG_NAME = "li"
    ATTRIBUTES = frozenset({"value"})


class Option(HTMLElement):
    """An <option>. Its ``label`` is a native attribute."""

    TAG_NAME = "option"
    ATTRIBUTES = frozenset({"disabled", "label", "selected", "value"})

    @property
    def value(self):
        return self.attribute_value("value")


class Select(HTMLElement):
    TAG_NAME = "select"
    ATTRIBUTES = frozenset(
        {"autocomplete", "disabled", "form", "multiple", "name", "required", "size"}
    )


class Span(HTMLElement):
    TAG_NAME = "span"


__all__ = [
    "Anchor",
    "Button",
    "Div",
    "Form",
    "Image",
    "Input",
    "Label",
    "ListItem",
    "Option",
    "Select",
    "Span",
    "TextField",
]
