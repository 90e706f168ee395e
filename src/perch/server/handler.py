"""ASGI handler: translates ASGI scope/messages to perch types.

The only component that touches raw ASGI directly. Converts scope dicts
to typed Request objects, awaits a responder, and sends the Response
back through ASGI send().
"""

import logging
from collections.abc import Callable

from perch._internal.asgi import Receive, Scope, Send
from perch.http.request import Request
from perch.http.response import Response, plain_error
from perch.responders.protocol import Responder
from perch.server.sender import send_response

logger = logging.getLogger("perch.server")

# Turns an exception escaping a responder into the response to send
type ErrorPage = Callable[[Exception], Response]


async def handle_request(
    scope: Scope,
    receive: Receive,  # noqa: ARG001 (responders never read the body)
    send: Send,
    *,
    responder: Responder,
    on_error: ErrorPage | None = None,
) -> None:
    """Process a single HTTP request with *responder*.

    An exception escaping the responder is logged and answered with
    ``on_error(exc)``, or a plain-text 500 when no error page is given.
    """
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope)

    try:
        response = await responder(request)
    except Exception as exc:
        logger.exception("500 %s %s", request.method, request.path)
        response = on_error(exc) if on_error is not None else plain_error("Internal Server Error", 500)

    logger.debug("%d %s %s", response.status, request.method, request.path)
    await send_response(response, send, head=request.is_head)


class ASGIResponder:
    """Expose a single responder as an ASGI application.

    Usage::

        app = ASGIResponder(StaticContentResponder("/", "./public", not_found))
    """

    __slots__ = ("responder",)

    def __init__(self, responder: Responder) -> None:
        self.responder = responder

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        await handle_request(scope, receive, send, responder=self.responder)
