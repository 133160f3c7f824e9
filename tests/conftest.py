"""Shared fixtures for locatorkit tests."""

import pytest

from locatorkit.config import reset_options
from locatorkit.driver import DocumentDriver, SearchContext, Strategy

SAMPLE_HTML = """
<html>
<head><title>Sample</title></head>
<body>
    <div id="main" class="a b" data-role="container">
        <h1 id="title">Welcome</h1>
        <p class="intro lead">Hello world</p>
        <button id="save" name="save" type="submit">Save</button>
        <button id="save-all" class="primary" type="button">Save all</button>
        <button id="cancel" class="secondary" type="button">Cancel</button>
        <a id="home" href="/home">Home page</a>
        <a id="docs" href=" /docs/index.html ">Documentation</a>
    </div>
    <form id="signup">
        <label for="email">Email address</label>
        <input id="email" name="email" type="text" value="me@example.com"/>
        <label>Password <input name="password" type="password"/></label>
        <input id="agree" name="agree" type="checkbox"/>
        <input id="yes" name="answer" type="RADIO" value="yes"/>
        <input id="no" name="answer" type="radio" value="no"/>
        <textarea id="bio" name="bio">About me</textarea>
        <select name="country">
            <option value="us" label="United States">US</option>
            <option value="uk">United Kingdom</option>
        </select>
    </form>
    <ul id="items">
        <li class="item">One</li>
        <li class="item done">Two</li>
        <li class="item">Three</li>
    </ul>
    <span class="note">Saved</span>
</body>
</html>
"""


class RecordingDriver(SearchContext):
    """Driver wrapper that records every lookup made against the document."""

    def __init__(self, driver: DocumentDriver) -> None:
        self.driver = driver
        self.calls: list[tuple[str, Strategy, str]] = []

    def find_element(self, how, what):
        self.calls.append(("find_element", Strategy(how), what))
        return self.driver.find_element(how, what)

    def find_elements(self, how, what):
        self.calls.append(("find_elements", Strategy(how), what))
        return self.driver.find_elements(how, what)

    def load(self, content: str) -> None:
        self.driver.load(content)


@pytest.fixture(autouse=True)
def clean_options(monkeypatch):
    """Start every test from default options."""
    monkeypatch.delenv("LOCATORKIT_PREFER_CSS", raising=False)
    monkeypatch.delenv("LOCATORKIT_CONVERT_REGEXP_TO_CONTAINS", raising=False)
    reset_options()
    yield
    reset_options()


@pytest.fixture
def sample_html():
    return SAMPLE_HTML


@pytest.fixture
def driver(sample_html):
    """Document driver over the sample page."""
    return DocumentDriver.from_html(sample_html)


@pytest.fixture
def recorder(driver):
    """Recording wrapper around the sample driver."""
    return RecordingDriver(driver)
