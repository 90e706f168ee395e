"""Perch: templated error pages and static files for ASGI servers.

Three responders, each an async ``request -> Response`` callable:

- ``NotFoundResponder`` renders a 404 page for the requested path.
- ``ErrorResponder`` renders a 500 page, hiding caller detail in production.
- ``StaticContentResponder`` serves files from a directory, never listings.

Basic usage::

    from perch import NotFoundResponder, StaticContentResponder

    not_found = NotFoundResponder.load("templates/notfound.html")
    static = StaticContentResponder("/static/", "./static", not_found)

Or as a complete ASGI application::

    from perch import Site, SiteConfig

    site = Site(SiteConfig(static_dir="./public", static_url="/"))
"""

__version__ = "0.1.0-dev"
__all__ = [
    "ConfigurationError",
    "ErrorResponder",
    "NotFoundResponder",
    "PerchError",
    "Request",
    "Response",
    "Site",
    "SiteConfig",
    "StaticContentResponder",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import perch`` fast while providing a clean top-level API.
    """
    if name == "Site":
        from perch.app import Site

        return Site

    if name == "SiteConfig":
        from perch.config import SiteConfig

        return SiteConfig

    if name == "Request":
        from perch.http.request import Request

        return Request

    if name == "Response":
        from perch.http.response import Response

        return Response

    if name in ("ErrorResponder", "NotFoundResponder", "StaticContentResponder"):
        from perch import responders as _responders

        return getattr(_responders, name)

    if name in ("ConfigurationError", "PerchError"):
        from perch import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
