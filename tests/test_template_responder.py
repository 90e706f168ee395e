"""Tests for perch.responders.template: buffered rendering and fallback."""

from pathlib import Path
from typing import Any

import pytest

from perch.responders.template import ErrorReport, NotFoundReport, TemplateResponder
from perch.templating.loader import load_template


class _RecordingTemplate:
    """Returns a fixed body and remembers the context it was given."""

    def __init__(self, body: str) -> None:
        self.body = body
        self.contexts: list[dict[str, Any]] = []

    def render(self, context: dict[str, Any]) -> str:
        self.contexts.append(context)
        return self.body


class _BrokenTemplate:
    def render(self, context: dict[str, Any]) -> str:
        raise RuntimeError("template exploded")


class TestSuccessfulRender:
    def test_status_and_body(self) -> None:
        responder = TemplateResponder(_RecordingTemplate("<p>ok</p>"))
        response = responder.render(404, NotFoundReport(path="/x"))
        assert response.status == 404
        assert response.text == "<p>ok</p>"
        assert "text/html" in response.content_type

    def test_report_becomes_context(self) -> None:
        template = _RecordingTemplate("")
        TemplateResponder(template).render(500, ErrorReport(message="bad"))
        assert template.contexts == [{"message": "bad"}]

    def test_mapping_context_passed_through(self) -> None:
        template = _RecordingTemplate("")
        TemplateResponder(template).render(200, {"path": "/a"})
        assert template.contexts == [{"path": "/a"}]

    def test_template_property(self) -> None:
        template = _RecordingTemplate("")
        assert TemplateResponder(template).template is template


class TestRenderFailure:
    def test_falls_back_to_plain_500(self) -> None:
        response = TemplateResponder(_BrokenTemplate()).render(404, NotFoundReport(path="/x"))
        assert response.status == 500
        assert response.content_type == "text/plain; charset=utf-8"
        assert response.text == "template exploded\n"
        assert response.get_header("X-Content-Type-Options") == "nosniff"

    def test_fallback_replaces_requested_status(self) -> None:
        """A 200/404 is never sent with a page that failed to render."""
        for status in (200, 404):
            response = TemplateResponder(_BrokenTemplate()).render(status, {"path": "/"})
            assert response.status == 500

    def test_kida_runtime_error_falls_back(self, tmp_path: Path) -> None:
        (tmp_path / "notfound.html").write_text("Not Found: {{ path // 2 }}")
        template = load_template(tmp_path / "notfound.html")
        response = TemplateResponder(template).render(404, NotFoundReport(path="/x"))
        assert response.status == 500
        assert response.content_type == "text/plain; charset=utf-8"
        assert response.get_header("X-Content-Type-Options") == "nosniff"


class TestReports:
    def test_reports_are_frozen(self) -> None:
        report = NotFoundReport(path="/a")
        with pytest.raises(AttributeError):
            report.path = "/b"  # type: ignore[misc]
