"""Kida environment setup and template loading.

Templates are compiled once, when a responder is built, and never
touched again. Any failure to find or compile a template is a
``ConfigurationError``: a responder never runs without its template.
"""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Protocol

from kida import ChoiceLoader, Environment, FileSystemLoader, PackageLoader
from kida.exceptions import TemplateError

from perch.config import SiteConfig
from perch.errors import ConfigurationError

logger = logging.getLogger("perch.templating")


class Renderable(Protocol):
    """A compiled template: one context mapping in, one string out.

    Kida templates satisfy this structurally.
    """

    def render(self, *args: Any, **kwargs: Any) -> str: ...


def create_environment(config: SiteConfig) -> Environment:
    """Create a kida Environment from site configuration.

    Looks in ``config.template_dir`` first, then falls back to the
    default pages shipped with perch.
    """
    loader = ChoiceLoader(
        [
            FileSystemLoader(str(config.template_dir)),
            PackageLoader("perch.templating", "defaults"),
        ]
    )
    return Environment(loader=loader, autoescape=config.autoescape)


def get_template(env: Environment, name: str) -> Renderable:
    """Fetch and compile *name* from *env*, or raise ``ConfigurationError``."""
    try:
        template = env.get_template(name)
    except (TemplateError, OSError, UnicodeDecodeError) as exc:
        msg = f"Cannot load template {name!r}: {exc}"
        raise ConfigurationError(msg) from exc
    logger.debug("Loaded template %s", name)
    return template


def load_template(path: str | Path, *, autoescape: bool = True) -> Renderable:
    """Load and compile the single template file at *path*."""
    path = Path(path)
    env = Environment(loader=FileSystemLoader(str(path.parent)), autoescape=autoescape)
    return get_template(env, path.name)


def render(template: Renderable, context: Mapping[str, Any]) -> str:
    """Render *template* fully into a string."""
    return template.render(dict(context))
