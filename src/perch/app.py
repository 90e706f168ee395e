"""Perch site: static files with templated error pages, as one ASGI app.

Everything is built in the constructor. A misconfigured site (missing
template, bad URL prefix) fails there, before the server accepts a
single connection.
"""

from perch._internal.asgi import Receive, Scope, Send
from perch.config import SiteConfig
from perch.http.request import Request
from perch.http.response import Response
from perch.responders.error import ErrorResponder
from perch.responders.not_found import NotFoundResponder
from perch.responders.static import StaticContentResponder
from perch.server.handler import handle_request
from perch.templating.loader import create_environment, get_template


class Site:
    """An ASGI application serving one static directory.

    Requests under ``config.static_url`` go to the static responder;
    every other path gets the not-found page. Exceptions escaping a
    responder are answered with the error page, subject to
    ``config.display_errors``.

    Usage::

        site = Site(SiteConfig(static_dir="./public", static_url="/"))
        # then serve ``site`` with any ASGI server
    """

    __slots__ = ("config", "error", "not_found", "static")

    def __init__(self, config: SiteConfig | None = None) -> None:
        self.config = config or SiteConfig()
        env = create_environment(self.config)
        self.not_found = NotFoundResponder(get_template(env, self.config.not_found_template))
        self.error = ErrorResponder(
            get_template(env, self.config.error_template),
            self.config.default_error_message,
            self.config.display_errors,
        )
        self.static = StaticContentResponder(self.config.static_url, self.config.static_dir, self.not_found)

    async def dispatch(self, request: Request) -> Response:
        """Route *request* to the static responder or the not-found page."""
        if self.static.matches(request.path):
            return await self.static(request)
        return await self.not_found(request)

    def error_page(self, exc: Exception) -> Response:
        """Error page for an exception raised while serving."""
        return self.error.serve_error(str(exc))

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return
        await handle_request(scope, receive, send, responder=self.dispatch, on_error=self.error_page)

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol.

        All setup happened in ``__init__``, so startup and shutdown only
        need acknowledging.
        """
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return
