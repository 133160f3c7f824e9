"""
Selector compilation for locatorkit.

- **SelectorBuilder**: validates and normalizes selectors
- **QueryBuilder**: compiles selectors to one CSS or XPath query
- **LiteralOptimizer**: narrows broad XPath queries for pattern criteria
- **LabelResolver**: resolves label patterns through <label> elements
- **ElementValidator**: re-checks tag and type of located elements
- **Finder**: puts the above together for single and multiple lookups
"""

from locatorkit.locators.builder import Query, QueryBuilder, attribute_name
from locatorkit.locators.finder import WD_FINDERS, Finder, element_at
from locatorkit.locators.label import LabelResolver
from locatorkit.locators.optimizer import LiteralOptimizer
from locatorkit.locators.pattern import Pattern, is_pattern
from locatorkit.locators.registry import (
    DEFAULT_BUNDLE,
    LocatorBundle,
    locator_for,
    register_locator,
)
from locatorkit.locators.selector import (
    ALIASES,
    RESERVED_KEYS,
    WILDCARD_ATTRIBUTE,
    Selector,
    SelectorBuilder,
    normalize_key,
)
from locatorkit.locators.text_field import TextFieldQueryBuilder, TextFieldValidator
from locatorkit.locators.validator import ElementValidator, TagMatcher

__all__ = [
    # Selector model
    "Pattern",
    "is_pattern",
    "Selector",
    "SelectorBuilder",
    "ALIASES",
    "RESERVED_KEYS",
    "WILDCARD_ATTRIBUTE",
    "normalize_key",
    # Query synthesis
    "Query",
    "QueryBuilder",
    "LiteralOptimizer",
    "attribute_name",
    # Lookup
    "Finder",
    "WD_FINDERS",
    "element_at",
    "LabelResolver",
    "ElementValidator",
    "TagMatcher",
    # Element kinds
    "LocatorBundle",
    "DEFAULT_BUNDLE",
    "locator_for",
    "register_locator",
    "TextFieldQueryBuilder",
    "TextFieldValidator",
]
