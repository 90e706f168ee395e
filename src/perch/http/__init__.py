"""HTTP primitives: immutable request, response, headers, and file serving."""

from perch.http.files import serve_file
from perch.http.headers import Headers
from perch.http.request import Request
from perch.http.response import Response, plain_error, redirect

__all__ = [
    "Headers",
    "Request",
    "Response",
    "plain_error",
    "redirect",
    "serve_file",
]
