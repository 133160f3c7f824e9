"""
Post-hoc element validation.

Queries given verbatim by the caller (xpath/css) were never checked against
the rest of the selector, so single-element lookups confirm the tag name and,
for inputs, the requested type before returning an element.
"""

from __future__ import annotations

from typing import Any, Optional

from locatorkit.driver.interfaces import ElementHandle
from locatorkit.locators.pattern import Pattern, is_pattern
from locatorkit.locators.selector import Selector


class TagMatcher:
    """Matches an element's tag name against a tag_name criterion."""

    def __init__(self, element_tag_name: str, tag_name: Any) -> None:
        self.element_tag_name = element_tag_name
        self.tag_name = tag_name

    def tag_name_matches(self) -> bool:
        if is_pattern(self.tag_name):
            return Pattern.coerce(self.tag_name).matches(self.element_tag_name)
        if isinstance(self.tag_name, list):
            return self.element_tag_name in self.tag_name
        return self.tag_name == self.element_tag_name


class ElementValidator:
    """Confirms that a located element satisfies tag and type constraints."""

    def __init__(self, element: ElementHandle, selector: Selector) -> None:
        self.element = element
        self.selector = selector

    def validate_element(self) -> Optional[ElementHandle]:
        """Return the element if it satisfies the selector, else None."""
        tag_name = self.selector.get("tag_name")
        element_tag_name = self.element.tag_name.lower()

        if tag_name is not None and not TagMatcher(element_tag_name, tag_name).tag_name_matches():
            return None

        if element_tag_name == "input" and not self.type_matches():
            return None

        return self.element

    def type_matches(self) -> bool:
        expected = self.selector.get("type")
        if expected is None:
            return True

        actual = self.element.attribute("type")
        if is_pattern(expected):
            return Pattern.coerce(expected).matches(actual)
        if actual is None:
            return False
        # compared like the XPath type predicate, ignoring case
        if isinstance(expected, list):
            return actual.lower() in [e.lower() for e in expected]
        return actual.lower() == expected.lower()


__all__ = [
    "ElementValidator",
    "TagMatcher",
]
