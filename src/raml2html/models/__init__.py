"""raml2html data models.

This module exports the core entities used throughout the application:
- Tree: Parsed API description (mappings, sequences, scalars)
- RenderConfig: Per-call render configuration
- RenderResult: Outcome of one render (RenderSuccess or RenderFailure)
"""

from raml2html.models.render_config import RenderConfig
from raml2html.models.result import RenderFailure, RenderResult, RenderSuccess
from raml2html.models.tree import Mapping, Scalar, Sequence, Tree

__all__ = [
    "Mapping",
    "RenderConfig",
    "RenderFailure",
    "RenderResult",
    "RenderSuccess",
    "Scalar",
    "Sequence",
    "Tree",
]
