"""Static file responder.

Serves files from a directory mounted under a URL prefix. Never lists
a directory: a directory path without a trailing slash is redirected
to the slashed form, and a slashed path serves that directory's
``index.html`` or nothing at all.
"""

import logging
import os
import stat
from urllib.parse import quote

import anyio

from perch.errors import ConfigurationError
from perch.http.files import serve_file
from perch.http.request import Request
from perch.http.response import Response, redirect
from perch.responders.protocol import Responder

logger = logging.getLogger("perch.static")

INDEX_PAGE = "index.html"

# Reserved and unreserved characters left as-is in a redirect Location
LOCATION_SAFE = "/:@!$&'()*+,;=-._~%"


class StaticContentResponder:
    """Responder that serves files under *url_prefix* from *directory*.

    *url_prefix* must match the path the responder is mounted at and end
    with ``/``. Requests the directory cannot satisfy go to *not_found*,
    which receives the original request and should answer 404.

    Usage::

        not_found = NotFoundResponder.load("templates/notfound.html")
        static = StaticContentResponder("/static/", "./public", not_found)

    Path resolution is plain concatenation of *directory* and the part
    of the request path after the prefix. No containment check is made
    beyond what the filesystem itself enforces.
    """

    __slots__ = ("_directory", "_not_found", "_url_prefix")

    def __init__(self, url_prefix: str, directory: str | os.PathLike[str], not_found: Responder) -> None:
        if not (url_prefix.startswith("/") and url_prefix.endswith("/")):
            msg = f"url_prefix must start and end with '/', got {url_prefix!r}"
            raise ConfigurationError(msg)
        self._url_prefix = url_prefix
        self._directory = os.fspath(directory)
        self._not_found = not_found

    @property
    def url_prefix(self) -> str:
        return self._url_prefix

    @property
    def directory(self) -> str:
        return self._directory

    def matches(self, path: str) -> bool:
        """Whether *path* falls under this responder's mount point."""
        return path.startswith(self._url_prefix) or path == self._url_prefix[:-1]

    def resolve(self, path: str) -> str:
        """Map a request path to the filesystem path it names.

        Keeps exactly one leading ``/`` of the remainder, so
        ``/static/a.css`` under ``/static/`` becomes ``directory + "/a.css"``.
        A trailing slash names the directory's index page.
        """
        relative = path[len(self._url_prefix) - 1 :]
        if path.endswith("/"):
            relative += INDEX_PAGE
        return self._directory + relative.replace("/", os.sep)

    async def __call__(self, request: Request) -> Response:
        """Serve a file, redirect a directory, or delegate a miss."""
        target = self.resolve(request.path)

        try:
            info = await anyio.Path(target).stat()
        except (OSError, ValueError):
            logger.debug("No file for %s (%s)", request.path, target)
            return await self._not_found(request)

        if stat.S_ISDIR(info.st_mode):
            logger.debug("Redirecting directory %s to %s/", request.path, request.path)
            return redirect(quote(request.path + "/", safe=LOCATION_SAFE))

        if stat.S_ISREG(info.st_mode):
            return await serve_file(request, target)

        # Sockets, FIFOs, devices
        logger.debug("Refusing non-regular file %s", target)
        return await self._not_found(request)
