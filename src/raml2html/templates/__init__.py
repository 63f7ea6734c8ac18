"""raml2html template rendering.

This module provides the render pipeline (parse, normalize, Jinja2 render,
optional post-processing) and the default configuration that ships the
packaged HTML templates.
"""

from raml2html.templates.defaults import build_default_config
from raml2html.templates.renderer import (
    DocumentRenderer,
    RenderContext,
    render,
    render_with_callbacks,
)

__all__ = [
    "DocumentRenderer",
    "RenderContext",
    "build_default_config",
    "render",
    "render_with_callbacks",
]
