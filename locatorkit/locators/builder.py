"""
Query synthesis.

Turns a normalized selector into one CSS or XPath query that matches
exactly the elements the selector describes, or reports that no such query
exists because the selector holds pattern criteria.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Optional

from locatorkit.config import LocatorOptions, get_options
from locatorkit.driver.interfaces import Strategy
from locatorkit.exceptions import ConflictingStrategy, InternalBuildFailure
from locatorkit.locators import xpath as xpath_support
from locatorkit.locators.pattern import is_pattern
from locatorkit.locators.selector import Selector, SelectorBuilder

logger = logging.getLogger(__name__)

# Class values that can be written as a CSS class selector
CSS_CLASS_TOKEN = re.compile(r"^-?[^\W\d][\w-]*$")


@dataclass(frozen=True)
class Query:
    """A query the driver can run directly."""

    how: Strategy
    what: str

    @property
    def is_xpath(self) -> bool:
        return self.how == Strategy.XPATH

    @property
    def is_css(self) -> bool:
        return self.how == Strategy.CSS


def attribute_name(key: str) -> str:
    """Translate a selector key to the HTML attribute name."""
    return key.replace("_", "-")


class QueryBuilder:
    """Builds exact CSS/XPath queries for one element kind.

    Args:
        selector_builder: Validator of the selector being compiled; tells
            whether ``label`` is a native attribute of the element kind.
        options: Compilation options. Defaults to the process-wide options.
    """

    def __init__(
        self,
        selector_builder: SelectorBuilder,
        options: Optional[LocatorOptions] = None,
    ) -> None:
        self.selector_builder = selector_builder
        self.options = options if options is not None else get_options()

    def build(self, selector: Selector) -> Optional[Query]:
        """Build the exact query for a normalized selector.

        Args:
            selector: Normalized selector with ``index`` already removed.

        Returns:
            The query, or None when pattern values rule out an exact query.

        Raises:
            ConflictingStrategy: If explicit xpath/css is combined illegally.
            InternalBuildFailure: If ``index`` is still present.
        """
        if "index" in selector:
            raise InternalBuildFailure(
                f"internal error: index must be removed before building ({selector!r})"
            )
        return self.given_xpath_or_css(selector) or self.build_wd_selector(selector)

    def given_xpath_or_css(self, selector: Selector) -> Optional[Query]:
        """Return the caller's own xpath/css query, if the selector has one."""
        xpath = selector.get("xpath")
        css = selector.get("css")
        if xpath is None and css is None:
            return None

        rest = {k: v for k, v in selector.items() if k not in ("xpath", "css")}

        if xpath is not None and css is not None:
            raise ConflictingStrategy(
                f"xpath and css cannot be combined ({selector!r})"
            )

        query = Query(Strategy.XPATH, xpath) if xpath is not None else Query(Strategy.CSS, css)

        if rest and not self.can_be_combined_with_xpath_or_css(rest):
            raise ConflictingStrategy(
                f"{query.how.value} cannot be combined with other selectors ({selector!r})"
            )

        return query

    @staticmethod
    def can_be_combined_with_xpath_or_css(selector: Selector) -> bool:
        keys = sorted(selector)
        if keys == ["tag_name"]:
            return True

        if selector.get("tag_name") == "input":
            return keys == ["tag_name", "type"]

        return False

    def build_wd_selector(self, selector: Selector) -> Optional[Query]:
        """Build a CSS or XPath query, or None if a value is a pattern."""
        if any(is_pattern(v) for v in selector.values()):
            return None

        query = self.build_css(selector) or self.build_xpath(selector)
        logger.debug(f"Built {query.how.value} {query.what!r} from {selector!r}")
        return query

    # CSS

    def use_css(self, selector: Selector) -> bool:
        if not self.options.prefer_css:
            return False

        if "text" in selector or "label" in selector or "index" in selector:
            return False

        if selector.get("tag_name") == "input" and "type" in selector:
            return False

        if any(isinstance(v, list) for v in selector.values()):
            return False

        return "class" not in selector or bool(CSS_CLASS_TOKEN.match(selector["class"]))

    def build_css(self, selector: Selector) -> Optional[Query]:
        if not self.use_css(selector):
            return None

        if not selector:
            return Query(Strategy.CSS, "*")

        selector = dict(selector)
        css = selector.pop("tag_name", "")

        klass = selector.pop("class", None)
        if klass:
            css += f".{klass}"

        href = selector.pop("href", None)
        if href is not None:
            css += f'[href~="{xpath_support.css_escape(href)}"]'

        for key, value in selector.items():
            css += f'[{attribute_name(key)}="{xpath_support.css_escape(value)}"]'

        return Query(Strategy.CSS, css)

    # XPath

    def build_xpath(self, selector: Selector) -> Query:
        selector = dict(selector)
        selector.pop("index", None)

        tag_name = selector.pop("tag_name", None)
        predicates = []
        if isinstance(tag_name, list):
            predicates.append(
                "("
                + " or ".join(f"local-name()={xpath_support.escape(t)}" for t in tag_name)
                + ")"
            )
            tag_name = None

        xpath = ".//" + (tag_name or "*")

        # the remaining entries should be attributes
        if selector:
            predicates.append(self.attribute_expression(selector))
        if predicates:
            xpath += f"[{' and '.join(predicates)}]"

        return Query(Strategy.XPATH, xpath)

    def attribute_expression(self, selector: Selector) -> str:
        predicates = []
        for key, value in selector.items():
            if isinstance(value, list):
                predicates.append(
                    "(" + " or ".join(self.equal_pair(key, v) for v in value) + ")"
                )
            else:
                predicates.append(self.equal_pair(key, value))
        return " and ".join(predicates)

    def equal_pair(self, key: str, value: Any) -> str:
        if key == "class":
            klass = xpath_support.escape(f" {value} ")
            return f"contains(concat(' ', @class, ' '), {klass})"

        if key == "label" and self.selector_builder.should_use_label_element():
            # label means a corresponding <label> element, not the attribute
            text = f"normalize-space()={xpath_support.escape(value)}"
            return f"(@id=//label[{text}]/@for or parent::label[{text}])"

        if key == "type":
            return f"{self.lhs_for(key)}={xpath_support.escape(value.lower())}"

        return f"{self.lhs_for(key)}={xpath_support.escape(value)}"

    def lhs_for(self, key: str) -> str:
        """XPath expression whose value a criterion is compared against."""
        if key == "text":
            return "normalize-space()"
        if key == "href":
            return "normalize-space(@href)"
        if key == "type":
            # browsers may report the type attribute upper-cased
            return xpath_support.downcase("@type")
        return f"@{attribute_name(key)}"


__all__ = [
    "Query",
    "QueryBuilder",
    "attribute_name",
]
