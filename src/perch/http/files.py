"""File serving primitive.

``serve_file`` turns a path already known to be a regular file into a
response: content type by extension, ``Last-Modified`` with
``If-Modified-Since`` revalidation, and single byte ranges. Callers
decide *which* file to serve; this module only decides *how*.
"""

import mimetypes
import os
from email.utils import formatdate, parsedate_to_datetime

import anyio

from perch.http.request import Request
from perch.http.response import Response


class RangeNotSatisfiable(Exception):  # noqa: N818 (named after the HTTP status)
    """The requested byte range lies outside the file."""


def parse_range(header: str | None, size: int) -> tuple[int, int] | None:
    """Parse a ``Range`` header into an inclusive ``(start, end)`` pair.

    Returns None when the whole file should be served: no header, a
    malformed header, or a multi-range request (not supported).

    Raises:
        RangeNotSatisfiable: If the range ends before it starts or
            starts beyond the end of the file.
    """
    if not header or not header.startswith("bytes="):
        return None
    value = header[len("bytes=") :].strip()
    if "," in value:
        return None
    first, sep, last = value.partition("-")
    if not sep:
        return None

    # Suffix range: the final N bytes
    if not first:
        if not last.isdigit():
            return None
        length = int(last)
        if length == 0 or size == 0:
            raise RangeNotSatisfiable(value)
        return max(size - length, 0), size - 1

    if not first.isdigit() or (last and not last.isdigit()):
        return None
    start = int(first)
    end = int(last) if last else size - 1
    if end < start or start >= size:
        raise RangeNotSatisfiable(value)
    return start, min(end, size - 1)


def _not_modified(header: str | None, mtime: int) -> bool:
    """Whether an ``If-Modified-Since`` header covers *mtime*."""
    if not header:
        return False
    try:
        since = parsedate_to_datetime(header)
    except (TypeError, ValueError):
        return False
    return mtime <= since.timestamp()


def guess_content_type(path: str) -> str:
    """Content type for *path* by extension; ``application/octet-stream`` if unknown."""
    content_type, _ = mimetypes.guess_type(path)
    return content_type or "application/octet-stream"


async def serve_file(request: Request, path: str | os.PathLike[str]) -> Response:
    """Serve a regular file at *path*.

    Status is 200 for the full file, 206 for a satisfiable single range,
    304 when a GET or HEAD client's copy is current, and 416 for a range
    the file cannot satisfy.
    """
    file = anyio.Path(path)
    info = await file.stat()
    size = info.st_size
    mtime = int(info.st_mtime)

    content_type = guess_content_type(os.fspath(path))
    headers = {
        "Last-Modified": formatdate(mtime, usegmt=True),
        "Accept-Ranges": "bytes",
    }

    if request.method in ("GET", "HEAD") and _not_modified(request.headers.get("if-modified-since"), mtime):
        return Response(body=b"", status=304, content_type=content_type).with_headers(headers)

    try:
        byte_range = parse_range(request.headers.get("range"), size)
    except RangeNotSatisfiable:
        return (
            Response(body=b"", status=416, content_type=content_type)
            .with_headers(headers)
            .with_header("Content-Range", f"bytes */{size}")
        )

    if byte_range is None:
        body = await file.read_bytes()
        return Response(body=body, content_type=content_type).with_headers(headers)

    start, end = byte_range
    async with await file.open("rb") as handle:
        await handle.seek(start)
        body = await handle.read(end - start + 1)
    return (
        Response(body=body, status=206, content_type=content_type)
        .with_headers(headers)
        .with_header("Content-Range", f"bytes {start}-{end}/{size}")
    )
