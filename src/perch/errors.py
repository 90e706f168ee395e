"""Perch exception hierarchy.

Render failures never surface as exceptions; they become plain-text
500 responses. What remains here are the errors that stop a site from
starting at all.
"""


class PerchError(Exception):
    """Base for all perch-specific errors."""


class ConfigurationError(PerchError):
    """Raised when a responder cannot be built from its configuration.

    Typically a template that is missing or fails to compile. Raised at
    construction time, never while serving a request.
    """
