"""Render pipeline for RAML documentation.

Runs one document through parse -> normalize -> Jinja2 render -> optional
post-processing and reports exactly one outcome. Every call builds its own
RenderContext, so helpers and partials registered for one render are never
visible to another.
"""

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from jinja2 import (
    ChainableUndefined,
    DictLoader,
    Environment,
    StrictUndefined,
    select_autoescape,
)

from raml2html import __version__
from raml2html.errors import ParseError, PostProcessError, RenderError, TemplateError
from raml2html.models.render_config import RESERVED_CONFIG_KEY, RenderConfig
from raml2html.models.result import RenderFailure, RenderResult, RenderSuccess
from raml2html.models.tree import Mapping, is_mapping
from raml2html.normalizer import normalize
from raml2html.parser import parse_document

logger = logging.getLogger(__name__)


class RenderContext:
    """Template environment scoped to a single render call.

    Holds the helpers and partials registered for that call. Registering a
    name twice replaces the earlier entry. Missing fields render empty unless
    strict_undefined is set, in which case they fail the render.
    """

    def __init__(self, strict_undefined: bool = False) -> None:
        self._partials: dict[str, str] = {}
        self._env = Environment(
            loader=DictLoader(self._partials),
            autoescape=select_autoescape(
                ["html", "xml"], default_for_string=True, default=True
            ),
            undefined=StrictUndefined if strict_undefined else ChainableUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    @property
    def environment(self) -> Environment:
        """Underlying Jinja2 environment."""
        return self._env

    def register_helper(self, name: str, helper: Callable[..., Any]) -> None:
        """Expose a helper as both a filter and a global function."""
        self._env.filters[name] = helper
        self._env.globals[name] = helper

    def register_partial(self, name: str, source: str) -> None:
        """Make a template fragment available to {% include name %}."""
        self._partials[name] = source

    def render(self, template: str | None, data: Mapping) -> str:
        """Render the main template against the document.

        Args:
            template: Jinja2 source of the main template
            data: Annotated document tree

        Returns:
            Rendered text

        Raises:
            TemplateError: If no template is configured, or it fails to
                compile or render
        """
        if template is None:
            raise TemplateError("No template configured")

        try:
            compiled = self._env.from_string(template)
            return compiled.render(data)
        except Exception as e:
            raise TemplateError(f"Template rendering failed: {e}") from e


class DocumentRenderer:
    """Renders RAML documents to HTML.

    Usage:
        renderer = DocumentRenderer(build_default_config())
        result = renderer.render("api.raml")
        if result.ok:
            print(result.output)
    """

    def __init__(self, config: RenderConfig | None = None) -> None:
        """Initialize the document renderer.

        Args:
            config: Render configuration (an empty configuration if None)
        """
        self.config = config or RenderConfig()

    def render(self, source: str | Path) -> RenderResult:
        """Render one source document.

        Args:
            source: RAML file path or RAML text

        Returns:
            RenderSuccess with the final output, or RenderFailure
        """
        try:
            output = self._run(source)
        except RenderError as e:
            logger.error("Render failed during %s: %s", e.stage, e.message)
            return RenderFailure(e)

        logger.info("Rendered documentation (%d characters)", len(output))
        return RenderSuccess(output)

    def render_to_file(self, source: str | Path, output_path: Path) -> RenderResult:
        """Render a document and write it to output_path on success.

        Nothing is written when the render fails.

        Raises:
            OSError: If the output file or its directory cannot be written
        """
        result = self.render(source)
        if isinstance(result, RenderSuccess):
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(result.output, encoding="utf-8")
            logger.info("Wrote documentation to %s", output_path)
        return result

    def _build_context(self) -> RenderContext:
        context = RenderContext(strict_undefined=self.config.strict_undefined)
        for name, helper in self.config.helpers.items():
            context.register_helper(name, helper)
        for name, source in self.config.partials.items():
            context.register_partial(name, source)

        logger.debug(
            "Registered %d helpers and %d partials",
            len(self.config.helpers),
            len(self.config.partials),
        )
        return context

    def _parse(self, source: str | Path) -> Any:
        parser = self.config.parser or parse_document
        try:
            return parser(source)
        except Exception as e:
            raise ParseError(str(e)) from e

    def _post_process(self, output: str) -> str:
        if not self.config.post_process_enabled or self.config.post_process is None:
            return output

        try:
            return self.config.post_process(output)
        except Exception as e:
            raise PostProcessError(str(e)) from e

    def _run(self, source: str | Path) -> str:
        context = self._build_context()

        tree = normalize(self._parse(source))
        if not is_mapping(tree):
            raise TemplateError("Document root must be a mapping")

        document = dict(tree)
        document[RESERVED_CONFIG_KEY] = self.config.to_template_dict(__version__)

        output = context.render(self.config.template, document)
        return self._post_process(output)


def render(source: str | Path, config: RenderConfig | None = None) -> RenderResult:
    """Render a document with the given configuration.

    Args:
        source: RAML file path or RAML text
        config: Render configuration (an empty configuration if None)

    Returns:
        RenderSuccess or RenderFailure
    """
    return DocumentRenderer(config).render(source)


def render_with_callbacks(
    source: str | Path,
    config: RenderConfig | None,
    on_success: Callable[[str], Any],
    on_error: Callable[[RenderError], Any],
) -> None:
    """Render a document and report the outcome through two callbacks.

    Exactly one of on_success or on_error is called, exactly once.
    Exceptions raised by the callbacks themselves propagate to the caller.
    """
    result = render(source, config)
    if isinstance(result, RenderSuccess):
        on_success(result.output)
    else:
        on_error(result.error)
