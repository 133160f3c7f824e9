"""
Selector normalization and validation.

A selector is a plain mapping of criteria. Keys are either reserved
(``tag_name``, ``text``, ``xpath``, ``css``, ``index``, ``class``,
``label``), aliases of reserved keys, or attribute names written with
underscores (``data_role`` stands for ``data-role``). Values are strings,
patterns, lists of strings, or an integer for ``index``.
"""

from __future__ import annotations

import re
from typing import Any, Iterable, Optional

from locatorkit.exceptions import InvalidValueType, UnsupportedAttribute
from locatorkit.locators.pattern import Pattern, is_pattern

Selector = dict[str, Any]

RESERVED_KEYS = frozenset(
    {"tag_name", "text", "xpath", "index", "class", "label", "css"}
)

ALIASES = {
    "class_name": "class",
    "caption": "text",
}

# Free-form attributes accepted for every element kind
WILDCARD_ATTRIBUTE = re.compile(r"^(aria|data)_(.+)$")


def normalize_key(key: str) -> str:
    """Rewrite a key alias to the key it stands for."""
    return ALIASES.get(key, key)


class SelectorBuilder:
    """Validates and normalizes a selector for one element kind.

    Args:
        selector: The caller's selector. It is never modified.
        valid_attributes: Attribute names recognized for the element kind.
    """

    def __init__(
        self, selector: Selector, valid_attributes: Optional[Iterable[str]] = None
    ) -> None:
        self._selector = dict(selector)
        self._valid_attributes = (
            frozenset(valid_attributes) if valid_attributes is not None else None
        )

    @property
    def selector(self) -> Selector:
        return dict(self._selector)

    @property
    def valid_attributes(self) -> Optional[frozenset[str]]:
        return self._valid_attributes

    def normalized_selector(self) -> Selector:
        """Return a validated copy with aliases rewritten and patterns wrapped.

        Raises:
            InvalidValueType: If a value has the wrong kind for its key.
            UnsupportedAttribute: If a key is not valid for the element kind.
        """
        selector: Selector = {}

        for how, what in self._selector.items():
            self.check_type(how, what)
            how, what = self.normalize_selector(how, what)
            selector[how] = what

        return selector

    def normalize_selector(self, how: str, what: Any) -> tuple[str, Any]:
        if is_pattern(what):
            what = Pattern.coerce(what)
        elif isinstance(what, list):
            what = list(what)

        if how in RESERVED_KEYS:
            return how, what
        if how in ALIASES:
            return ALIASES[how], what

        self.assert_valid_as_attribute(how)
        return how, what

    def check_type(self, how: str, what: Any) -> None:
        """Check that a value has a kind allowed for its key.

        Raises:
            InvalidValueType: If it doesn't.
        """
        if how == "index":
            if not isinstance(what, int) or isinstance(what, bool):
                raise InvalidValueType(how, what, "int")
            return

        if how in ("xpath", "css"):
            if not isinstance(what, str):
                raise InvalidValueType(how, what, "str")
            return

        if isinstance(what, str) or is_pattern(what):
            return

        if isinstance(what, list) and what and all(isinstance(v, str) for v in what):
            return

        raise InvalidValueType(how, what, "one of str, Pattern, list[str]")

    def assert_valid_as_attribute(self, attribute: str) -> None:
        """Raise UnsupportedAttribute unless the attribute is recognized."""
        if self.valid_attribute(attribute) or WILDCARD_ATTRIBUTE.match(attribute):
            return
        raise UnsupportedAttribute(attribute)

    def valid_attribute(self, attribute: str) -> bool:
        return (
            self._valid_attributes is not None
            and attribute in self._valid_attributes
        )

    def should_use_label_element(self) -> bool:
        """Whether ``label`` refers to a <label> element, not an attribute."""
        return not self.valid_attribute("label")


__all__ = [
    "ALIASES",
    "RESERVED_KEYS",
    "WILDCARD_ATTRIBUTE",
    "Selector",
    "SelectorBuilder",
    "normalize_key",
]
