"""Kida template loading for perch responders."""

from perch.templating.loader import Renderable, create_environment, load_template

__all__ = ["Renderable", "create_environment", "load_template"]
