"""
Locator parts for text fields.

A text field is an ``input`` whose type accepts typed text, or a
``textarea``. Both tags are searched with one XPath union; CSS is never
used.
"""

from __future__ import annotations

from typing import Optional

from locatorkit.driver.interfaces import ElementHandle, Strategy
from locatorkit.locators import xpath as xpath_support
from locatorkit.locators.builder import Query, QueryBuilder
from locatorkit.locators.selector import Selector
from locatorkit.locators.validator import ElementValidator

# Input types that are not text fields
NON_TEXT_FIELD_TYPES = (
    "button",
    "checkbox",
    "color",
    "file",
    "hidden",
    "image",
    "radio",
    "range",
    "reset",
    "submit",
)


class TextFieldQueryBuilder(QueryBuilder):
    def use_css(self, selector: Selector) -> bool:
        return False

    def build_xpath(self, selector: Selector) -> Query:
        selector = dict(selector)
        selector.pop("index", None)
        selector.pop("tag_name", None)
        input_type = selector.pop("type", None)

        attributes = self.attribute_expression(selector) if selector else None

        if input_type is None:
            lhs = self.lhs_for("type")
            excluded = " or ".join(
                f"{lhs}={xpath_support.escape(t)}" for t in NON_TEXT_FIELD_TYPES
            )
            input_predicates = [f"not({excluded})"]
        else:
            input_predicates = [self.attribute_expression({"type": input_type})]
        if attributes:
            input_predicates.append(attributes)

        xpath = f".//input[{' and '.join(input_predicates)}]"

        # a requested type rules out textareas
        if input_type is None:
            xpath += " | .//textarea" + (f"[{attributes}]" if attributes else "")

        return Query(Strategy.XPATH, xpath)


class TextFieldValidator(ElementValidator):
    def validate_element(self) -> Optional[ElementHandle]:
        tag_name = self.element.tag_name.lower()

        if tag_name == "textarea":
            return None if "type" in self.selector else self.element
        if tag_name != "input":
            return None

        if "type" in self.selector:
            return self.element if self.type_matches() else None

        input_type = (self.element.attribute("type") or "text").lower()
        if input_type in NON_TEXT_FIELD_TYPES:
            return None
        return self.element


__all__ = [
    "NON_TEXT_FIELD_TYPES",
    "TextFieldQueryBuilder",
    "TextFieldValidator",
]
