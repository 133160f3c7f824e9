"""
locatorkit: selector compilation for browser automation.

Describe the element you want as a mapping of criteria; locatorkit decides
how to ask the browser driver for it. Selectors that a single CSS or XPath
query can express exactly are sent as one query. Selectors holding regular
expressions are answered with a broad query narrowed where it is safe and
filtered client-side.

Basic usage:
    from locatorkit import Document, DocumentDriver, Pattern

    doc = Document(DocumentDriver.from_html(markup))

    doc.div({"class": "a b"}).exists
    doc.element(text=Pattern("^Save$")).tag_name
    doc.text_field(label="Email").attribute_value("name")

    rows = doc.elements(tag_name="tr")
    len(rows), rows.first.text, rows[99].exists

Lower level:
    from locatorkit.locators import Finder

    handle = Finder(driver, {"tag_name": "input", "type": "radio"}).find()
"""

__version__ = "0.1.0"
__license__ = "MIT"

from locatorkit.config import LocatorOptions, configure, get_options, set_options
from locatorkit.driver import (
    DocumentDriver,
    DocumentElement,
    ElementHandle,
    SearchContext,
    Strategy,
)
from locatorkit.elements import (
    Container,
    Document,
    ElementCollection,
    HTMLElement,
)
from locatorkit.exceptions import (
    ConflictingStrategy,
    DriverError,
    IndexNotSupportedForAll,
    InternalBuildFailure,
    InvalidSelectorError,
    InvalidValueType,
    LocatorError,
    NoSuchElementError,
    StaleElementReferenceError,
    UnknownObjectError,
    UnsupportedAttribute,
)
from locatorkit.locators import Finder, Pattern, Query, QueryBuilder

__all__ = [
    # Version
    "__version__",
    # Config
    "LocatorOptions",
    "configure",
    "get_options",
    "set_options",
    # Driver
    "Strategy",
    "SearchContext",
    "ElementHandle",
    "DocumentDriver",
    "DocumentElement",
    # Elements
    "Container",
    "Document",
    "HTMLElement",
    "ElementCollection",
    # Locators
    "Finder",
    "Pattern",
    "Query",
    "QueryBuilder",
    # Exceptions
    "LocatorError",
    "InvalidValueType",
    "UnsupportedAttribute",
    "ConflictingStrategy",
    "IndexNotSupportedForAll",
    "InternalBuildFailure",
    "DriverError",
    "NoSuchElementError",
    "StaleElementReferenceError",
    "InvalidSelectorError",
    "UnknownObjectError",
]
