"""Responder protocol.

A responder is any callable matching::

    async def my_responder(request: Request) -> Response: ...

No base class required. Routers, the ASGI adapter and the static
responder's not-found delegate all check the shape, not the lineage.
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

from perch.http.request import Request
from perch.http.response import Response

# Plain-function form of a responder
type Handler = Callable[[Request], Awaitable[Response]]


class Responder(Protocol):
    """Protocol for perch responders.

    Accepts both functions and callable objects::

        async def teapot(request: Request) -> Response:
            return Response("short and stout", status=418)

        class Maintenance:
            async def __call__(self, request: Request) -> Response:
                ...
    """

    async def __call__(self, request: Request) -> Response: ...
