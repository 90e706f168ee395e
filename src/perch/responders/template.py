"""Buffered template rendering shared by the error-page responders.

A template is rendered completely into memory before any response
exists. Only a successful render produces a response carrying the
requested status; a failed render produces a plain-text 500 instead,
so a broken template can never yield a half-written page.
"""

from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Any

from perch.http.response import Response, plain_error
from perch.templating.loader import Renderable, render


@dataclass(frozen=True, slots=True)
class ErrorReport:
    """Context for error templates: ``{{ message }}``."""

    message: str


@dataclass(frozen=True, slots=True)
class NotFoundReport:
    """Context for not-found templates: ``{{ path }}``.

    ``path`` is the request path as received, not the filesystem path.
    """

    path: str


class TemplateResponder:
    """Base for responders that answer with a single rendered template.

    Holds one compiled template for its whole lifetime. Subclasses
    decide the status code and the report passed to the template.
    """

    __slots__ = ("_template",)

    def __init__(self, template: Renderable) -> None:
        self._template = template

    @property
    def template(self) -> Renderable:
        """The compiled template this responder renders."""
        return self._template

    def render(self, status: int, report: ErrorReport | NotFoundReport | Mapping[str, Any]) -> Response:
        """Render *report* into the template and respond with *status*."""
        context = report if isinstance(report, Mapping) else asdict(report)
        try:
            body = render(self._template, context)
        except Exception as exc:
            return plain_error(str(exc), 500)
        return Response(body=body, status=status)
