"""Tests for the element finder."""

import pytest

from locatorkit.driver import Strategy
from locatorkit.elements import HTMLElement, Input, Option
from locatorkit.exceptions import (
    ConflictingStrategy,
    IndexNotSupportedForAll,
    InvalidSelectorError,
    InvalidValueType,
    StaleElementReferenceError,
)
from locatorkit.locators import Finder, Pattern, element_at

ATTRS = HTMLElement.attribute_list() | Input.attribute_list()


def ids(elements):
    return [el.attribute("id") for el in elements]


class TestIdFastPath:
    """Tests for lookups by id."""

    def test_single_driver_call(self, recorder):
        """Test {id} issues exactly one id lookup."""
        element = Finder(recorder, {"id": "save"}, ATTRS).find()
        assert element.attribute("id") == "save"
        assert recorder.calls == [("find_element", Strategy.ID, "save")]

    def test_with_matching_tag(self, recorder):
        """Test {id, tag_name} still uses the id lookup."""
        element = Finder(recorder, {"id": "save", "tag_name": "button"}, ATTRS).find()
        assert element.tag_name == "button"
        assert recorder.calls == [("find_element", Strategy.ID, "save")]

    def test_with_other_tag(self, recorder):
        """Test a tag mismatch returns None without a second lookup."""
        assert Finder(recorder, {"id": "save", "tag_name": "div"}, ATTRS).find() is None
        assert len(recorder.calls) == 1

    def test_other_criteria_skip_fast_path(self, recorder):
        """Test {id, class} compiles one query instead."""
        assert Finder(recorder, {"id": "save", "class": "primary"}, ATTRS).find() is None
        assert len(recorder.calls) == 1
        method, how, what = recorder.calls[0]
        assert how == Strategy.XPATH
        assert "@id='save'" in what

    def test_pattern_id_skips_fast_path(self, recorder):
        """Test a pattern id is matched client-side."""
        element = Finder(recorder, {"id": Pattern("^save-")}, ATTRS).find()
        assert element.attribute("id") == "save-all"
        assert recorder.calls[0][1] == Strategy.XPATH

    def test_missing_id(self, driver):
        """Test a missing id returns None."""
        assert Finder(driver, {"id": "nope"}, ATTRS).find() is None


class TestSingleCriterion:
    """Tests for selectors with one native criterion."""

    @pytest.mark.parametrize(
        "selector, how",
        [
            ({"name": "email"}, Strategy.NAME),
            ({"tag_name": "li"}, Strategy.TAG_NAME),
            ({"class": "item"}, Strategy.CLASS_NAME),
            ({"class_name": "item"}, Strategy.CLASS_NAME),
            ({"link_text": "Home page"}, Strategy.LINK_TEXT),
            ({"partial_link_text": "Docu"}, Strategy.PARTIAL_LINK_TEXT),
            ({"css": "ul > li"}, Strategy.CSS),
            ({"xpath": ".//li"}, Strategy.XPATH),
        ],
    )
    def test_native_strategy(self, recorder, selector, how):
        """Test native criteria are passed straight to the driver."""
        assert Finder(recorder, selector, ATTRS).find() is not None
        assert recorder.calls == [("find_element", how, next(iter(selector.values())))]

    def test_find_all_native(self, recorder):
        """Test find_all with one native criterion."""
        found = Finder(recorder, {"class": "item"}, ATTRS).find_all()
        assert [el.text for el in found] == ["One", "Two", "Three"]
        assert recorder.calls == [("find_elements", Strategy.CLASS_NAME, "item")]

    def test_pattern_on_native_key(self, driver):
        """Test a pattern class is matched against the class attribute."""
        element = Finder(driver, {"class_name": Pattern("done")}, ATTRS).find()
        assert element.text == "Two"

    def test_pattern_on_link_key(self, driver):
        """Test a link pattern is matched against the text."""
        found = Finder(driver, {"link_text": Pattern("^Home")}, ATTRS).find_all()
        assert ids(found) == ["home"]

    def test_list_value_is_compiled(self, recorder):
        """Test a list value goes through query synthesis."""
        found = Finder(recorder, {"name": ["save", "email"]}, ATTRS).find_all()
        assert ids(found) == ["save", "email"]
        assert recorder.calls == [
            ("find_elements", Strategy.XPATH, ".//*[(@name='save' or @name='email')]")
        ]


class TestPatternSelectors:
    """Tests for selectors that need client-side filtering."""

    def test_anchored_text(self, recorder):
        """Test {text: /^Save$/} finds only the exact text."""
        element = Finder(recorder, {"text": Pattern("^Save$")}, ATTRS).find()
        assert element.attribute("id") == "save"
        assert recorder.calls == [("find_elements", Strategy.XPATH, ".//*")]

    def test_find_all_text(self, driver):
        """Test all elements whose text matches."""
        found = Finder(driver, {"tag_name": "button", "text": Pattern("^Save")}, ATTRS).find_all()
        assert ids(found) == ["save", "save-all"]

    def test_tag_name_pattern(self, driver):
        """Test a tag name pattern is matched against lower-cased tags."""
        found = Finder(driver, {"tag_name": Pattern("^(ul|select)$")}, ATTRS).find_all()
        assert [el.tag_name for el in found] == ["select", "ul"]

    def test_no_match(self, driver):
        """Test an unmatched pattern returns None."""
        assert Finder(driver, {"text": Pattern("^Nothing$")}, ATTRS).find() is None


class TestIndex:
    """Tests for index handling."""

    @pytest.mark.parametrize("index, text", [(0, "One"), (1, "Two"), (-1, "Three")])
    def test_index(self, driver, index, text):
        """Test the element at an index."""
        assert Finder(driver, {"tag_name": "li", "index": index}, ATTRS).find().text == text

    def test_index_out_of_range(self, driver):
        """Test an index past the end returns None."""
        assert Finder(driver, {"tag_name": "li", "index": 10}, ATTRS).find() is None

    def test_index_with_pattern(self, driver):
        """Test indices count filtered matches."""
        element = Finder(driver, {"tag_name": "li", "text": Pattern("^T"), "index": 1}, ATTRS).find()
        assert element.text == "Three"

    def test_index_on_find_all(self, recorder):
        """Test find_all rejects an index before calling the driver."""
        with pytest.raises(IndexNotSupportedForAll):
            Finder(recorder, {"tag_name": "li", "index": 1}, ATTRS).find_all()
        assert recorder.calls == []

    def test_element_at(self):
        """Test bounds handling of element_at."""
        assert element_at(["a", "b"], -2) == "a"
        assert element_at(["a", "b"], 2) is None
        assert element_at([], 0) is None


class TestGivenQuery:
    """Tests for caller-supplied xpath/css with validation."""

    def test_xpath_with_input_type(self, recorder):
        """Test type is checked on the element the xpath returned."""
        selector = {"xpath": ".//input[@name='answer']", "tag_name": "input", "type": "radio"}
        element = Finder(recorder, selector, ATTRS).find()
        assert element.attribute("id") == "yes"
        assert recorder.calls == [("find_element", Strategy.XPATH, ".//input[@name='answer']")]

    def test_xpath_with_wrong_type(self, driver):
        """Test an element of another type is rejected."""
        selector = {"xpath": ".//input[@name='email']", "tag_name": "input", "type": "radio"}
        assert Finder(driver, selector, ATTRS).find() is None

    def test_xpath_with_wrong_tag(self, driver):
        """Test an element with another tag is rejected."""
        assert Finder(driver, {"xpath": ".//button", "tag_name": "div"}, ATTRS).find() is None

    def test_conflicting_strategy_raised(self, recorder):
        """Test illegal combinations raise before any driver call."""
        with pytest.raises(ConflictingStrategy):
            Finder(recorder, {"xpath": ".//div", "class": "a"}, ATTRS).find()
        assert recorder.calls == []

    def test_invalid_xpath_propagates(self, driver):
        """Test driver selector errors are not swallowed."""
        with pytest.raises(InvalidSelectorError):
            Finder(driver, {"xpath": ".//*["}, ATTRS).find()

    def test_invalid_value_propagates(self, driver):
        """Test invalid selector values raise from find."""
        with pytest.raises(InvalidValueType):
            Finder(driver, {"tag_name": "li", "index": "1"}, ATTRS).find()


class TestLabels:
    """Tests for label criteria."""

    def test_label_text_with_for(self, driver):
        """Test a label string matches through the for attribute."""
        element = Finder(driver, {"tag_name": "input", "label": "Email address"}, ATTRS).find()
        assert element.attribute("id") == "email"

    def test_label_text_wrapping(self, driver):
        """Test a label string matches a control inside the label."""
        element = Finder(driver, {"tag_name": "input", "label": "Password"}, ATTRS).find()
        assert element.attribute("name") == "password"

    def test_label_pattern_with_for(self, recorder):
        """Test a label pattern resolves to an id criterion."""
        element = Finder(recorder, {"tag_name": "input", "label": Pattern("^Email")}, ATTRS).find()
        assert element.attribute("id") == "email"
        assert recorder.calls == [
            ("find_elements", Strategy.TAG_NAME, "label"),
            ("find_elements", Strategy.XPATH, ".//input[@id='email']"),
        ]

    def test_label_pattern_wrapping(self, driver):
        """Test a label pattern searches inside a label without for."""
        element = Finder(driver, {"tag_name": "input", "label": Pattern("^Pass")}, ATTRS).find()
        assert element.attribute("type") == "password"

    def test_label_pattern_no_match(self, recorder):
        """Test an unmatched label pattern finds nothing."""
        assert Finder(recorder, {"tag_name": "input", "label": Pattern("Nope")}, ATTRS).find() is None
        assert len(recorder.calls) == 1

    def test_native_label(self, driver):
        """Test label as an attribute for kinds that have one."""
        attrs = Option.attribute_list()
        element = Finder(driver, {"tag_name": "option", "label": "United States"}, attrs).find()
        assert element.attribute("value") == "us"

    def test_native_label_pattern(self, driver):
        """Test a label pattern is matched against the attribute."""
        attrs = Option.attribute_list()
        found = Finder(driver, {"tag_name": "option", "label": Pattern("States")}, attrs).find_all()
        assert [el.attribute("value") for el in found] == ["us"]


class TestDriverErrors:
    """Tests for missing and stale elements."""

    def test_not_found_returns_none(self, driver):
        """Test NoSuchElementError becomes None."""
        assert Finder(driver, {"tag_name": "table"}, ATTRS).find() is None

    def test_find_all_empty(self, driver):
        """Test find_all with no matches."""
        assert Finder(driver, {"tag_name": "table", "id": "x"}, ATTRS).find_all() == []

    def test_stale_context_returns_none(self, driver, sample_html):
        """Test a stale search context yields None from find."""
        items = driver.find_element(Strategy.ID, "items")
        driver.load(sample_html)
        assert Finder(items, {"tag_name": "li"}, ATTRS).find() is None

    def test_stale_context_raises_from_find_all(self, driver, sample_html):
        """Test find_all lets staleness propagate."""
        items = driver.find_element(Strategy.ID, "items")
        driver.load(sample_html)
        with pytest.raises(StaleElementReferenceError):
            Finder(items, {"tag_name": "li"}, ATTRS).find_all()

    def test_selector_not_modified(self, driver):
        """Test the caller's selector survives lookups unchanged."""
        selector = {"tag_name": "li", "text": Pattern("^T"), "index": 0}
        Finder(driver, selector, ATTRS).find()
        assert selector == {"tag_name": "li", "text": Pattern("^T"), "index": 0}


class TestNativeWithIndex:
    """Tests for one native criterion plus an index."""

    def test_link_text_with_index(self, recorder):
        """Test link keys with an index use the native lookup."""
        element = Finder(recorder, {"link_text": "Documentation", "index": 0}, ATTRS).find()
        assert element.attribute("id") == "docs"
        assert recorder.calls == [("find_elements", Strategy.LINK_TEXT, "Documentation")]

    def test_out_of_range(self, driver):
        """Test an index past the native results is not found."""
        assert Finder(driver, {"link_text": "Home page", "index": 5}, ATTRS).find() is None

    def test_name_on_generic_element(self, driver):
        """Test name needs no attribute list when paired with an index."""
        element = Finder(driver, {"name": "answer", "index": -1}, HTMLElement.attribute_list()).find()
        assert element.attribute("id") == "no"

    def test_pattern_with_index(self, driver):
        """Test a native key pattern counts filtered matches."""
        element = Finder(driver, {"partial_link_text": Pattern("o"), "index": 1}, ATTRS).find()
        assert element.attribute("id") == "docs"

    def test_invalid_index(self, driver):
        """Test the index type is still checked."""
        with pytest.raises(InvalidValueType):
            Finder(driver, {"link_text": "Home page", "index": True}, ATTRS).find()
