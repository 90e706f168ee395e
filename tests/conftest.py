"""Shared fixtures: error page templates and a small static tree."""

from pathlib import Path

import pytest

from perch.responders.error import ErrorResponder
from perch.responders.not_found import NotFoundResponder

DEFAULT_MESSAGE = "Default error message"


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    """Minimal templates with no trailing newline, so bodies compare exactly."""
    templates = tmp_path / "templates"
    templates.mkdir()
    (templates / "notfound.html").write_text("Not Found: {{ path }}")
    (templates / "error.html").write_text("Error: {{ message }}")
    return templates


@pytest.fixture
def testdata(tmp_path: Path) -> Path:
    """Static tree with and without index pages::

        testdata/index.html            "Test"
        testdata/sub1/index.html       "Sub1"
        testdata/sub2/not-index.html   "Sub2"
    """
    root = tmp_path / "testdata"
    root.mkdir()
    (root / "index.html").write_text("Test")
    (root / "sub1").mkdir()
    (root / "sub1" / "index.html").write_text("Sub1")
    (root / "sub2").mkdir()
    (root / "sub2" / "not-index.html").write_text("Sub2")
    return root


@pytest.fixture
def not_found(template_dir: Path) -> NotFoundResponder:
    return NotFoundResponder.load(template_dir / "notfound.html")


@pytest.fixture
def error_template(template_dir: Path) -> Path:
    return template_dir / "error.html"


@pytest.fixture
def shown_errors(error_template: Path) -> ErrorResponder:
    return ErrorResponder.load(error_template, DEFAULT_MESSAGE, True)


@pytest.fixture
def hidden_errors(error_template: Path) -> ErrorResponder:
    return ErrorResponder.load(error_template, DEFAULT_MESSAGE, False)
