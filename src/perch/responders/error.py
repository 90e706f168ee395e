"""500 pages rendered from a template, with a display policy."""

from __future__ import annotations

from pathlib import Path

from perch.http.request import Request
from perch.http.response import Response
from perch.responders.template import ErrorReport, TemplateResponder
from perch.templating.loader import Renderable, load_template


class ErrorResponder(TemplateResponder):
    """Serves error messages in an error page template.

    The template receives ``{{ message }}``. Whether a caller's message
    reaches the page is decided once, at construction:

    - ``display_errors=True`` shows the caller's message (development).
    - ``display_errors=False`` shows ``default_message`` instead
      (production).

    ``always_serve_error`` bypasses the policy for a single call.

    Usage::

        errors = ErrorResponder.load("templates/error.html", "Something broke", False)

        async def checkout(request: Request) -> Response:
            try:
                ...
            except PaymentError as exc:
                return errors.serve_error(str(exc))
    """

    __slots__ = ("_default_message", "_display_errors")

    def __init__(
        self,
        template: Renderable,
        default_message: str,
        display_errors: bool,
    ) -> None:
        super().__init__(template)
        self._default_message = default_message
        self._display_errors = display_errors

    @classmethod
    def load(
        cls,
        template_path: str | Path,
        default_message: str,
        display_errors: bool,
        *,
        autoescape: bool = True,
    ) -> ErrorResponder:
        """Build a responder from the template file at *template_path*.

        Raises:
            ConfigurationError: If the template is missing or invalid.
        """
        return cls(load_template(template_path, autoescape=autoescape), default_message, display_errors)

    @property
    def default_message(self) -> str:
        return self._default_message

    @property
    def display_errors(self) -> bool:
        return self._display_errors

    def serve_error(self, message: str) -> Response:
        """Serve *message*, or the default message if errors are hidden."""
        shown = message if self._display_errors else self._default_message
        return self.render(500, ErrorReport(message=shown))

    def serve_default(self) -> Response:
        """Serve the default message."""
        return self.render(500, ErrorReport(message=self._default_message))

    def always_serve_error(self, message: str) -> Response:
        """Serve *message* even when errors are hidden."""
        return self.render(500, ErrorReport(message=message))

    async def __call__(self, request: Request) -> Response:
        return self.serve_default()
