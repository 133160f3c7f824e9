"""
Literal narrowing for broad XPath queries.

When a selector holds patterns, the finder fetches a broad candidate set and
filters it client-side. Literal substrings that every match of a pattern must
contain can be pushed into the query as contains() predicates, so fewer
candidates come back. The narrowed query only ever matches a superset of the
elements the exact filter accepts.
"""

from __future__ import annotations

import logging
from typing import Optional

from locatorkit.config import LocatorOptions, get_options
from locatorkit.locators import xpath as xpath_support
from locatorkit.locators.builder import Query, QueryBuilder
from locatorkit.locators.pattern import Pattern

logger = logging.getLogger(__name__)

# Criteria whose fetched value is not the XPath string value used in lhs_for
SKIPPED_KEYS = frozenset({"tag_name", "text"})


class LiteralOptimizer:
    """Adds contains() predicates for pattern literals to an XPath query."""

    def __init__(
        self, query_builder: QueryBuilder, options: Optional[LocatorOptions] = None
    ) -> None:
        self.query_builder = query_builder
        self.options = options if options is not None else get_options()

    @property
    def enabled(self) -> bool:
        return self.options.convert_regexp_to_contains

    def narrow(self, query: Query, patterns: dict[str, Pattern]) -> Query:
        """Return query narrowed by the literals of the given patterns.

        CSS queries and patterns without safe literals are left unchanged.
        """
        if not self.enabled or not query.is_xpath:
            return query

        what = query.what
        for key, pattern in patterns.items():
            if key in SKIPPED_KEYS:
                continue

            predicates = self.predicates_for(key, pattern)
            if predicates:
                what = f"({what})[{' and '.join(predicates)}]"

        if what != query.what:
            logger.debug(f"Narrowed {query.what!r} to {what!r}")
        return Query(query.how, what)

    def predicates_for(self, key: str, pattern: Pattern) -> list[str]:
        literals = pattern.required_literals()
        if key == "type":
            # lhs_for lower-cases @type with translate()
            literals = [
                lowered
                for lowered in map(xpath_support.downcase_literal, literals)
                if lowered is not None
            ]
        elif key == "href":
            # normalize-space(@href) collapses whitespace runs
            literals = [literal for literal in literals if not _has_space(literal)]

        lhs = self.query_builder.lhs_for(key)
        return [
            f"contains({lhs}, {xpath_support.escape(literal)})" for literal in literals
        ]


def _has_space(text: str) -> bool:
    return any(c.isspace() for c in text)


__all__ = [
    "LiteralOptimizer",
]
