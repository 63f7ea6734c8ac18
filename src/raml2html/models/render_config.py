"""Render configuration entity.

Holds everything one render call needs: the main template, partials,
helpers, protocol flag and the optional post-processing step.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

# Names reserved by the pipeline on the root of the document tree
RESERVED_CONFIG_KEY = "config"


@dataclass
class RenderConfig:
    """Configuration for a single render call.

    Attributes:
        template: Jinja2 source of the main template (required to render)
        use_https: Render links with the https: protocol
        helpers: Helper name -> callable, exposed as filters and globals
        partials: Partial name -> Jinja2 source, available to {% include %}
        post_process: Optional transformation applied to the rendered output
        post_process_enabled: Whether post_process actually runs (opt-in)
        parser: Collaborator turning a source into a document tree
            (None uses the packaged RAML loader)
        strict_undefined: Fail the render on missing template fields instead
            of rendering them empty
    """

    template: str | None = None
    use_https: bool = False
    helpers: dict[str, Callable[..., Any]] = field(default_factory=dict)
    partials: dict[str, str] = field(default_factory=dict)
    post_process: Callable[[str], str] | None = None
    post_process_enabled: bool = False
    parser: Callable[[str | Path], Any] | None = None
    strict_undefined: bool = False

    @property
    def protocol(self) -> str:
        """Link protocol derived from use_https."""
        return "https:" if self.use_https else "http:"

    def override(self, **changes: Any) -> "RenderConfig":
        """Return a copy with the given fields replaced.

        Helpers and partials are merged, so callers can replace single
        entries without restating the defaults.
        """
        helpers = dict(self.helpers)
        helpers.update(changes.pop("helpers", None) or {})
        partials = dict(self.partials)
        partials.update(changes.pop("partials", None) or {})

        values = {
            "template": self.template,
            "use_https": self.use_https,
            "post_process": self.post_process,
            "post_process_enabled": self.post_process_enabled,
            "parser": self.parser,
            "strict_undefined": self.strict_undefined,
        }
        unknown = set(changes) - set(values)
        if unknown:
            raise ValueError(f"Unknown config fields: {sorted(unknown)}")
        values.update(changes)

        return RenderConfig(helpers=helpers, partials=partials, **values)

    def to_template_dict(self, version: str) -> dict[str, Any]:
        """Build the mapping attached to the document under the config key.

        Args:
            version: raml2html version marker

        Returns:
            Template-friendly view of this configuration
        """
        return {
            "protocol": self.protocol,
            "https": self.use_https,
            "version": version,
            "raml2html_version": version,
            "helpers": sorted(self.helpers),
            "post_process": self.post_process_enabled and self.post_process is not None,
        }
