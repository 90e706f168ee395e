"""Responders: async callables that turn a request into a full response.

- ``NotFoundResponder``: templated 404 pages.
- ``ErrorResponder``: templated 500 pages with a display policy.
- ``StaticContentResponder``: files from a directory, never listings.
"""

from perch.responders.error import ErrorResponder
from perch.responders.not_found import NotFoundResponder
from perch.responders.protocol import Handler, Responder
from perch.responders.static import StaticContentResponder
from perch.responders.template import ErrorReport, NotFoundReport, TemplateResponder

__all__ = [
    "ErrorReport",
    "ErrorResponder",
    "Handler",
    "NotFoundReport",
    "NotFoundResponder",
    "Responder",
    "StaticContentResponder",
    "TemplateResponder",
]
