"""Tests for pattern values and literal extraction."""

import re

import pytest

from locatorkit.locators import Pattern, is_pattern


class TestPattern:
    """Tests for Pattern construction and matching."""

    def test_from_regex_keeps_ignore_case(self):
        """Test IGNORECASE on a compiled regex carries over."""
        pattern = Pattern.from_regex(re.compile("save", re.IGNORECASE))
        assert pattern.ignore_case
        assert pattern.matches("SAVE")

    def test_inline_flag_detected(self):
        """Test (?i) marks the pattern case-insensitive."""
        assert Pattern("(?i)save").ignore_case

    def test_matches_is_search(self):
        """Test matching looks anywhere in the value."""
        assert Pattern("ave").matches("Save all")
        assert not Pattern("^ave").matches("Save all")

    def test_none_never_matches(self):
        """Test a missing value matches nothing."""
        assert not Pattern(".*").matches(None)

    def test_coerce(self):
        """Test coerce passes patterns through and wraps regexes."""
        pattern = Pattern("a")
        assert Pattern.coerce(pattern) is pattern
        assert Pattern.coerce(re.compile("a")) == pattern

    def test_str(self):
        """Test display form."""
        assert str(Pattern("^a")) == "/^a/"
        assert str(Pattern("^a", ignore_case=True)) == "/^a/i"

    def test_is_pattern(self):
        """Test both Pattern and re.Pattern count as patterns."""
        assert is_pattern(Pattern("a"))
        assert is_pattern(re.compile("a"))
        assert not is_pattern("a")


class TestRequiredLiterals:
    """Tests for Pattern.required_literals()."""

    @pytest.mark.parametrize(
        "source, expected",
        [
            ("Save", ["Save"]),
            ("^Save$", ["Save"]),
            ("foo.*bar", ["foo", "bar"]),
            ("ab?", ["a"]),
            ("ab*c", ["a", "c"]),
            ("x{2}y", ["y"]),
            (r"\d+px", ["px"]),
            (r"a\nb", ["a"]),
            (r"price\$", ["price"]),
            ("(foo)?bar", ["bar"]),
            ("[abc]", []),
        ],
    )
    def test_literals(self, source, expected):
        """Test literals every match must contain."""
        assert Pattern(source).required_literals() == expected

    def test_every_match_contains_literals(self):
        """Test extracted literals occur in matching strings."""
        samples = ["xxfooyybar", "foobar", "a foo and a bar"]
        pattern = Pattern("foo.*bar")
        for sample in samples:
            assert pattern.matches(sample)
            assert all(literal in sample for literal in pattern.required_literals())

    def test_alternation_not_extractable(self):
        """Test alternatives yield nothing."""
        pattern = Pattern("save|cancel")
        assert not pattern.literal_extractable
        assert pattern.required_literals() == []

    def test_ignore_case_not_extractable(self):
        """Test case-insensitive patterns yield nothing."""
        assert Pattern("Save", ignore_case=True).required_literals() == []
        assert Pattern("(?i)Save").required_literals() == []

    def test_verbose_not_extractable(self):
        """Test verbose patterns yield nothing."""
        assert Pattern("save all", flags=re.VERBOSE).required_literals() == []
