"""
XPath string helpers.
"""

from typing import Optional

UPPERCASE_LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZÀÁÂÃÄÅÆÇÈÉÊËÌÍÎÏÐÑÒÓÔÕÖØÙÚÛÜÝÞ"
LOWERCASE_LETTERS = "abcdefghijklmnopqrstuvwxyzàáâãäåæçèéêëìíîïðñòóôõöøùúûüýþ"


def escape(text: str) -> str:
    """Quote text as an XPath string literal.

    XPath 1.0 has no escape sequences, so a string holding both quote kinds
    is assembled with concat().
    """
    if "'" not in text:
        return f"'{text}'"
    if '"' not in text:
        return f'"{text}"'
    parts = text.split("'")
    return "concat('" + "', \"'\", '".join(parts) + "')"


def downcase(expression: str) -> str:
    """Lower-case an XPath expression's string value."""
    return f"translate({expression},'{UPPERCASE_LETTERS}','{LOWERCASE_LETTERS}')"


_DOWNCASE_TABLE = str.maketrans(UPPERCASE_LETTERS, LOWERCASE_LETTERS)


def downcase_literal(text: str) -> Optional[str]:
    """Lower-case text the way downcase() lower-cases an expression.

    Returns None if text holds capitals downcase() leaves alone.
    """
    if any(c.lower() != c and c not in UPPERCASE_LETTERS for c in text):
        return None
    return text.translate(_DOWNCASE_TABLE)


def css_escape(text: str) -> str:
    """Escape text for a double-quoted CSS attribute value."""
    return text.replace("\\", "\\\\").replace('"', '\\"')
