"""
Element layer for locatorkit.

- **Document**: root container wrapping a driver
- **HTMLElement** and kinds (Div, Input, TextField, ...): lazy references
- **ElementCollection**: lazily fetched sequences of elements

Example usage:

    from locatorkit import Document, DocumentDriver, Pattern

    doc = Document(DocumentDriver.from_html(markup))
    save = doc.button(text=Pattern("^Save"))
    if save.exists:
        print(save.attribute_value("name"))

    for item in doc.lis({"class": "todo"}):
        print(item.text)
"""

from locatorkit.elements.collection import ElementCollection, WriteOnce
from locatorkit.elements.container import Container, Document
from locatorkit.elements.element import HTMLElement
from locatorkit.elements.html import (
    Anchor,
    Button,
    Div,
    Form,
    Image,
    Input,
    Label,
    ListItem,
    Option,
    Select,
    Span,
    TextField,
)

__all__ = [
    "Container",
    "Document",
    "HTMLElement",
    "ElementCollection",
    "WriteOnce",
    "Anchor",
    "Button",
    "Div",
    "Form",
    "Image",
    "Input",
    "Label",
    "ListItem",
    "Option",
    "Select",
    "Span",
    "TextField",
]
