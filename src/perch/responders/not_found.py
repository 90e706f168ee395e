"""404 pages rendered from a template."""

from __future__ import annotations

from pathlib import Path

from perch.http.request import Request
from perch.http.response import Response
from perch.responders.template import NotFoundReport, TemplateResponder
from perch.templating.loader import load_template


class NotFoundResponder(TemplateResponder):
    """Serves a 404 page naming the requested path.

    The template receives ``{{ path }}``, the request path exactly as
    received. Mounted on its own it answers every request with 404;
    more often it is handed to a ``StaticContentResponder`` or called
    from application code.
    """

    __slots__ = ()

    @classmethod
    def load(cls, template_path: str | Path, *, autoescape: bool = True) -> NotFoundResponder:
        """Build a responder from the template file at *template_path*.

        Raises:
            ConfigurationError: If the template is missing or invalid.
        """
        return cls(load_template(template_path, autoescape=autoescape))

    def serve(self, path: str) -> Response:
        """Render the not-found page for *path*."""
        return self.render(404, NotFoundReport(path=path))

    async def __call__(self, request: Request) -> Response:
        return self.serve(request.path)
