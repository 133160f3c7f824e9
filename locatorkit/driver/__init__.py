"""
Driver layer for locatorkit.

- **SearchContext / ElementHandle**: the interface a browser driver provides
- **DocumentDriver**: lxml-backed driver for static HTML documents
"""

from locatorkit.driver.document import DocumentDriver, DocumentElement
from locatorkit.driver.interfaces import ElementHandle, SearchContext, Strategy

__all__ = [
    "Strategy",
    "SearchContext",
    "ElementHandle",
    "DocumentDriver",
    "DocumentElement",
]
