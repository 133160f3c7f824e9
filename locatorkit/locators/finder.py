"""
Element finder.

Dispatches a selector to the cheapest lookup that answers it exactly:

1. ``{id}`` or ``{id, tag_name}`` goes straight to the driver's id lookup.
2. A single criterion the driver supports natively uses that strategy.
3. Anything else is compiled to one CSS/XPath query; selectors holding
   patterns fall back to a broad query filtered client-side.

Single-element lookups return None instead of raising when the driver
reports a missing or stale element.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional, Sequence

from locatorkit.config import LocatorOptions, get_options
from locatorkit.driver.interfaces import ElementHandle, SearchContext, Strategy
from locatorkit.exceptions import (
    IndexNotSupportedForAll,
    InternalBuildFailure,
    NoSuchElementError,
    StaleElementReferenceError,
)
from locatorkit.locators.builder import QueryBuilder, attribute_name
from locatorkit.locators.label import LabelResolver
from locatorkit.locators.optimizer import LiteralOptimizer
from locatorkit.locators.pattern import Pattern, is_pattern
from locatorkit.locators.selector import Selector, SelectorBuilder, normalize_key
from locatorkit.locators.validator import ElementValidator, TagMatcher

logger = logging.getLogger(__name__)

# Single criteria the driver can answer with a native strategy
WD_FINDERS = {
    "class": Strategy.CLASS_NAME,
    "class_name": Strategy.CLASS_NAME,
    "css": Strategy.CSS,
    "id": Strategy.ID,
    "link": Strategy.LINK_TEXT,
    "link_text": Strategy.LINK_TEXT,
    "name": Strategy.NAME,
    "partial_link_text": Strategy.PARTIAL_LINK_TEXT,
    "tag_name": Strategy.TAG_NAME,
    "xpath": Strategy.XPATH,
}

LINK_KEYS = frozenset({"link", "link_text", "partial_link_text"})


def element_at(elements: Sequence[ElementHandle], index: int) -> Optional[ElementHandle]:
    """Return elements[index], or None when the index is out of range."""
    if -len(elements) <= index < len(elements):
        return elements[index]
    return None


class Finder:
    """Locates elements for one selector within a search context.

    Args:
        context: Driver or element handle to search in.
        selector: The caller's selector. It is never modified.
        valid_attributes: Attribute names recognized for the element kind.
        selector_builder_class: Normalizer for the element kind.
        query_builder_class: Query synthesis for the element kind.
        element_validator_class: Post-lookup validation for the element kind.
        options: Compilation options. Defaults to the process-wide options.
    """

    def __init__(
        self,
        context: SearchContext,
        selector: Selector,
        valid_attributes: Optional[Iterable[str]] = None,
        selector_builder_class: type[SelectorBuilder] = SelectorBuilder,
        query_builder_class: type[QueryBuilder] = QueryBuilder,
        element_validator_class: type[ElementValidator] = ElementValidator,
        options: Optional[LocatorOptions] = None,
    ) -> None:
        self.context = context
        self.selector = dict(selector)
        self.options = options if options is not None else get_options()
        self.selector_builder = selector_builder_class(self.selector, valid_attributes)
        self.query_builder = query_builder_class(self.selector_builder, self.options)
        self.literal_optimizer = LiteralOptimizer(self.query_builder, self.options)
        self._element_validator_class = element_validator_class

    # Public API

    def find(self) -> Optional[ElementHandle]:
        """Find the first matching element, or None."""
        try:
            if self._id_fast_path_applies():
                element = self._by_id()
            elif len(self.selector) == 1:
                element = self._find_first_by_one()
            elif self._native_with_index_applies():
                element = self._find_nth_by_one()
            else:
                element = self._find_first_by_multiple()

            # Queries given as raw xpath/css were never checked against the
            # rest of the selector.
            if element is None:
                return None
            return self._element_validator_class(element, self.selector).validate_element()
        except (NoSuchElementError, StaleElementReferenceError) as e:
            logger.debug(f"Element not found for {self.selector!r}: {e}")
            return None

    def find_all(self) -> list[ElementHandle]:
        """Find all matching elements in document order.

        Raises:
            IndexNotSupportedForAll: If the selector holds an index.
        """
        if len(self.selector) == 1:
            how, what = next(iter(self.selector.items()))
            self.selector_builder.check_type(how, what)
            if self._natively_supported(how, what):
                return self._wd_find_all_by(how, what)

        selector = self.selector_builder.normalized_selector()
        if "index" in selector:
            raise IndexNotSupportedForAll(self.selector)

        query = self.query_builder.build(selector)
        if query is not None:
            return list(self.context.find_elements(query.how, query.what))
        return list(self._find_by_regexp_selector(selector))

    # Id fast path

    def _id_fast_path_applies(self) -> bool:
        if not isinstance(self.selector.get("id"), str):
            return False
        return set(self.selector) <= {"id", "tag_name"}

    def _by_id(self) -> Optional[ElementHandle]:
        element = self.context.find_element(Strategy.ID, self.selector["id"])

        tag_name = self.selector.get("tag_name")
        if tag_name is not None and not TagMatcher(
            element.tag_name.lower(), tag_name
        ).tag_name_matches():
            return None
        return element

    # Single criterion

    @staticmethod
    def _natively_supported(how: str, what: object) -> bool:
        return how in WD_FINDERS and not isinstance(what, list)

    def _find_first_by_one(self) -> Optional[ElementHandle]:
        how, what = next(iter(self.selector.items()))
        self.selector_builder.check_type(how, what)

        if self._natively_supported(how, what):
            return self._wd_find_first_by(how, what)
        return self._find_first_by_multiple()

    def _native_with_index_applies(self) -> bool:
        # e.g. {link_text: ..., index: 2} as produced by collection elements
        if len(self.selector) != 2 or "index" not in self.selector:
            return False
        how = next(key for key in self.selector if key != "index")
        return self._natively_supported(how, self.selector[how])

    def _find_nth_by_one(self) -> Optional[ElementHandle]:
        idx = self.selector["index"]
        self.selector_builder.check_type("index", idx)
        how = next(key for key in self.selector if key != "index")
        what = self.selector[how]
        self.selector_builder.check_type(how, what)
        return element_at(self._wd_find_all_by(how, what), idx)

    def _wd_find_first_by(self, how: str, what: object) -> Optional[ElementHandle]:
        if isinstance(what, str):
            return self.context.find_element(WD_FINDERS[how], what)

        pattern = Pattern.coerce(what)
        return next(
            (el for el in self._all_elements(how) if pattern.matches(self.fetch_value(el, how))),
            None,
        )

    def _wd_find_all_by(self, how: str, what: object) -> list[ElementHandle]:
        if isinstance(what, str):
            return list(self.context.find_elements(WD_FINDERS[how], what))

        pattern = Pattern.coerce(what)
        return [
            el for el in self._all_elements(how) if pattern.matches(self.fetch_value(el, how))
        ]

    def _all_elements(self, how: str) -> list[ElementHandle]:
        if how in LINK_KEYS:
            return self.context.find_elements(Strategy.XPATH, ".//a")
        return self.context.find_elements(Strategy.XPATH, ".//*")

    # Multiple criteria

    def _find_first_by_multiple(self) -> Optional[ElementHandle]:
        selector = self.selector_builder.normalized_selector()
        idx = selector.pop("index", None)

        query = self.query_builder.build(selector)
        if query is not None:
            if idx is not None:
                return element_at(self.context.find_elements(query.how, query.what), idx)
            return self.context.find_element(query.how, query.what)

        # no single query for this selector, probably a pattern in there
        matches = self._find_by_regexp_selector(selector)
        if idx is not None:
            return element_at(list(matches), idx)
        return next(matches, None)

    def _find_by_regexp_selector(self, selector: Selector) -> Iterator[ElementHandle]:
        """Yield elements matching a selector that holds pattern values."""
        selector = dict(selector)
        patterns = {
            key: Pattern.coerce(value)
            for key, value in selector.items()
            if is_pattern(value)
        }
        for key in patterns:
            del selector[key]

        context = self.context
        label_resolver = LabelResolver(self.context, self.selector_builder)
        if label_resolver.applies(patterns):
            context = label_resolver.resolve(patterns.pop("label"), selector)
            if context is None:
                return

        query = self.query_builder.build_wd_selector(selector)
        if query is None:
            raise InternalBuildFailure(
                f"internal error: unable to build a query from {selector!r}"
            )

        query = self.literal_optimizer.narrow(query, patterns)
        logger.debug(f"Filtering {query.how.value} {query.what!r} by {patterns!r}")

        for element in context.find_elements(query.how, query.what):
            if self._matches_selector(element, patterns):
                yield element

    def _matches_selector(self, element: ElementHandle, patterns: dict[str, Pattern]) -> bool:
        return all(
            pattern.matches(self.fetch_value(element, how))
            for how, pattern in patterns.items()
        )

    def fetch_value(self, element: ElementHandle, how: str) -> Optional[str]:
        """Value of an element that a criterion is matched against."""
        key = normalize_key(how)
        if key == "text" or how in LINK_KEYS:
            return element.text
        if key == "tag_name":
            return element.tag_name.lower()
        if key == "href":
            href = element.attribute("href")
            return href.strip() if href is not None else None
        return element.attribute(attribute_name(key))


__all__ = [
    "Finder",
    "WD_FINDERS",
    "element_at",
]
