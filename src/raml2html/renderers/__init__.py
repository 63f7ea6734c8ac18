"""raml2html renderers.

- markdown: mistune-based markdown conversion with Bootstrap tables
- helpers: Formatting helpers exposed to templates
- postprocess: Optional output post-processing (minification)
"""

from raml2html.renderers.helpers import default_helpers
from raml2html.renderers.markdown import to_html
from raml2html.renderers.postprocess import unescape_and_minify

__all__ = ["default_helpers", "to_html", "unescape_and_minify"]
