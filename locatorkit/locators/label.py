"""
Label resolution for pattern ``label`` criteria.
"""

from __future__ import annotations

import logging
from typing import Optional

from locatorkit.driver.interfaces import ElementHandle, SearchContext, Strategy
from locatorkit.locators.pattern import Pattern
from locatorkit.locators.selector import Selector, SelectorBuilder

logger = logging.getLogger(__name__)


class LabelResolver:
    """Finds the <label> a pattern refers to and rewrites the search around it.

    A label with a ``for`` attribute turns into an ``id`` criterion; a label
    without one wraps its control, so the search continues inside it.
    """

    def __init__(self, context: SearchContext, selector_builder: SelectorBuilder) -> None:
        self.context = context
        self.selector_builder = selector_builder

    def applies(self, patterns: dict[str, Pattern]) -> bool:
        """Whether a label pattern must be resolved through a <label> element."""
        return "label" in patterns and self.selector_builder.should_use_label_element()

    def resolve(self, label: Pattern, selector: Selector) -> Optional[SearchContext]:
        """Resolve the label and update selector in place.

        Returns:
            The context to search in, or None if no label matches.
        """
        element = self.label_from_text(label)
        if element is None:
            logger.debug(f"No label matching {label}")
            return None

        html_for = element.attribute("for")
        if html_for:
            logger.debug(f"Label {label} points at id {html_for!r}")
            selector["id"] = html_for
            return self.context

        logger.debug(f"Label {label} has no for attribute, searching inside it")
        return element

    def label_from_text(self, label: Pattern) -> Optional[ElementHandle]:
        # only labels inside the current search context are considered
        for element in self.context.find_elements(Strategy.TAG_NAME, "label"):
            if label.matches(element.text):
                return element
        return None


__all__ = [
    "LabelResolver",
]
