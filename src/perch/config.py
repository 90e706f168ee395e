"""Site configuration.

SiteConfig is a frozen dataclass: immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class SiteConfig:
    """Site configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = SiteConfig(static_dir="./public", display_errors=True)
    """

    # Templates
    template_dir: str | Path = "templates"
    not_found_template: str = "notfound.html"
    error_template: str = "error.html"
    autoescape: bool = True

    # Static files
    static_dir: str | Path = "static"
    static_url: str = "/static/"  # Must end with "/" (mount point of a subtree)

    # Error pages
    default_error_message: str = "Internal Server Error"
    display_errors: bool = False  # Show caller messages (development only)
