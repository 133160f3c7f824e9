"""
Pattern values for selectors.

A Pattern is a regular expression criterion. It records whether matching is
case-insensitive and whether literal substrings can be pulled out of its
source to narrow a query without excluding any element it would match.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Optional, Union

# Leading literal, alternation-free middle, trailing literal
_LITERAL_SPLIT = re.compile(
    r"""
    \A
    ([^\[\]\\^$.|?*+(){}]*)   # leading literal characters
    [^|]*?                   # no alternates
    ([^\[\]\\^$.|?*+(){}]*)   # trailing literal characters
    \Z
    """,
    re.VERBOSE | re.DOTALL,
)

# Quantifiers that can make the preceding character optional
_OPTIONAL_QUANTIFIERS = ("?", "*", "{")


@dataclass(frozen=True)
class Pattern:
    """Regular expression criterion with an explicit case-sensitivity flag.

    Example:
        Pattern("^Save")                  # case-sensitive
        Pattern("save", ignore_case=True)
        Pattern.from_regex(re.compile("^Save$"))
    """

    source: str
    ignore_case: bool = False
    flags: int = 0
    _compiled: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        flags = self.flags | (re.IGNORECASE if self.ignore_case else 0)
        compiled = re.compile(self.source, flags)
        object.__setattr__(self, "_compiled", compiled)
        # inline flags such as (?i) end up in the compiled flags
        if compiled.flags & re.IGNORECASE and not self.ignore_case:
            object.__setattr__(self, "ignore_case", True)

    @classmethod
    def from_regex(cls, regex: re.Pattern) -> "Pattern":
        """Wrap a compiled regular expression."""
        flags = regex.flags & ~re.UNICODE
        return cls(
            regex.pattern,
            ignore_case=bool(flags & re.IGNORECASE),
            flags=flags & ~re.IGNORECASE,
        )

    @classmethod
    def coerce(cls, value: Union["Pattern", re.Pattern]) -> "Pattern":
        if isinstance(value, cls):
            return value
        return cls.from_regex(value)

    @property
    def regex(self) -> re.Pattern:
        """The compiled regular expression."""
        return self._compiled

    def matches(self, value: Optional[str]) -> bool:
        """Check whether the pattern occurs in value. None never matches."""
        if value is None:
            return False
        return self._compiled.search(value) is not None

    @property
    def literal_extractable(self) -> bool:
        """Whether required literal substrings can be taken from the source."""
        if self.ignore_case or self._compiled.flags & re.VERBOSE:
            return False
        return _LITERAL_SPLIT.match(self._strip_anchors()) is not None

    def required_literals(self) -> list[str]:
        """Substrings every match of this pattern must contain.

        Returns an empty list when nothing can be extracted safely.
        """
        if not self.literal_extractable:
            return []

        source = self._strip_anchors()
        match = _LITERAL_SPLIT.match(source)
        leading, trailing = match.group(1), match.group(2)

        # a quantifier after the leading run may make its last char optional
        rest = source[len(leading):]
        if leading and rest.startswith(_OPTIONAL_QUANTIFIERS):
            leading = leading[:-1]

        # a trailing run right after a backslash belongs to an escape
        start = match.start(2)
        if trailing and start > 0 and source[start - 1] == "\\":
            trailing = ""

        if len(leading) == len(source):
            return [leading] if leading else []
        return [literal for literal in (leading, trailing) if literal]

    def _strip_anchors(self) -> str:
        source = self.source
        if source.startswith("^"):
            source = source[1:]
        if source.endswith("$") and not _escaped_at(source, len(source) - 1):
            source = source[:-1]
        return source

    def __str__(self) -> str:
        suffix = "i" if self.ignore_case else ""
        return f"/{self.source}/{suffix}"


def _escaped_at(source: str, index: int) -> bool:
    """Whether the character at index is preceded by an odd run of backslashes."""
    count = 0
    index -= 1
    while index >= 0 and source[index] == "\\":
        count += 1
        index -= 1
    return count % 2 == 1


def is_pattern(value: object) -> bool:
    """Whether a selector value is a pattern criterion."""
    return isinstance(value, (Pattern, re.Pattern))


__all__ = [
    "Pattern",
    "is_pattern",
]
