"""
Locator registry.

Maps an element kind to the classes that locate it. Kinds without an entry
use the default bundle.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from locatorkit.config import LocatorOptions
from locatorkit.driver.interfaces import SearchContext
from locatorkit.locators.builder import QueryBuilder
from locatorkit.locators.finder import Finder
from locatorkit.locators.selector import Selector, SelectorBuilder
from locatorkit.locators.text_field import TextFieldQueryBuilder, TextFieldValidator
from locatorkit.locators.validator import ElementValidator


@dataclass(frozen=True)
class LocatorBundle:
    """Classes that locate one element kind."""

    selector_builder: type[SelectorBuilder] = SelectorBuilder
    query_builder: type[QueryBuilder] = QueryBuilder
    validator: type[ElementValidator] = ElementValidator
    finder: type[Finder] = Finder

    def finder_for(
        self,
        context: SearchContext,
        selector: Selector,
        valid_attributes: Optional[Iterable[str]] = None,
        options: Optional[LocatorOptions] = None,
    ) -> Finder:
        return self.finder(
            context,
            selector,
            valid_attributes,
            selector_builder_class=self.selector_builder,
            query_builder_class=self.query_builder,
            element_validator_class=self.validator,
            options=options,
        )


DEFAULT_BUNDLE = LocatorBundle()

_registry: dict[str, LocatorBundle] = {}


def register_locator(kind: str, bundle: LocatorBundle) -> None:
    """Register the locator bundle for an element kind."""
    _registry[kind] = bundle


def locator_for(kind: str) -> LocatorBundle:
    """Get the locator bundle for an element kind."""
    return _registry.get(kind, DEFAULT_BUNDLE)


register_locator(
    "text_field",
    LocatorBundle(query_builder=TextFieldQueryBuilder, validator=TextFieldValidator),
)


__all__ = [
    "DEFAULT_BUNDLE",
    "LocatorBundle",
    "locator_for",
    "register_locator",
]
