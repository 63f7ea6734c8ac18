"""Default render configuration.

Ships the packaged Bootstrap HTML templates (main page plus the "resource"
and "item" partials) together with the default helper set. Any of the three
templates can be replaced by a file on disk.
"""

import logging
from importlib import resources
from pathlib import Path

from raml2html.models.render_config import RenderConfig
from raml2html.renderers.helpers import default_helpers
from raml2html.renderers.postprocess import unescape_and_minify

logger = logging.getLogger(__name__)

MAIN_TEMPLATE = "template.html.j2"
RESOURCE_TEMPLATE = "resource.html.j2"
ITEM_TEMPLATE = "item.html.j2"


def load_packaged_template(name: str) -> str:
    """Read one of the templates shipped with the package."""
    return resources.files("raml2html.templates").joinpath(name).read_text(encoding="utf-8")


def resolve_template_path(path: str | Path) -> Path:
    """Resolve a user-supplied template path.

    Relative paths are taken from the current working directory.
    """
    resolved = Path(path).expanduser()
    if not resolved.is_absolute():
        resolved = Path.cwd() / resolved
    return resolved


def _load_template(override: str | Path | None, default_name: str) -> str:
    if override is None:
        return load_packaged_template(default_name)

    path = resolve_template_path(override)
    if not path.is_file():
        raise FileNotFoundError(f"Template not found: {path}")

    logger.debug("Using custom template %s", path)
    return path.read_text(encoding="utf-8")


def build_default_config(
    use_https: bool = False,
    template_path: str | Path | None = None,
    resource_path: str | Path | None = None,
    item_path: str | Path | None = None,
    *,
    post_process_enabled: bool = False,
    sentence_helpers: bool = True,
) -> RenderConfig:
    """Build the default render configuration.

    Args:
        use_https: Render links with the https: protocol
        template_path: Custom main template (packaged default if None)
        resource_path: Custom "resource" partial (packaged default if None)
        item_path: Custom "item" partial (packaged default if None)
        post_process_enabled: Run the quote-unescape + minify step on output
        sentence_helpers: Include md_first_sentence and md_rest helpers

    Returns:
        RenderConfig ready to pass to render()

    Raises:
        FileNotFoundError: If a custom template path does not exist
    """
    return RenderConfig(
        template=_load_template(template_path, MAIN_TEMPLATE),
        use_https=use_https,
        helpers=default_helpers(sentence_helpers=sentence_helpers),
        partials={
            "resource": _load_template(resource_path, RESOURCE_TEMPLATE),
            "item": _load_template(item_path, ITEM_TEMPLATE),
        },
        post_process=unescape_and_minify,
        post_process_enabled=post_process_enabled,
    )
