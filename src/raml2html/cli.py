"""raml2html CLI interface.

Commands:
- render: Render a RAML file to HTML
- validate: Validate a Jinja2 template

Global options:
- --config: Path to settings file
- --verbose: Enable verbose output with timestamps
- --quiet: Suppress info messages
- --ci: JSON log output
- --version: Show version and exit
"""

import logging
from pathlib import Path
from typing import Annotated

import typer

from raml2html import __version__
from raml2html.config import Raml2HtmlSettings, load_settings
from raml2html.utils.logging import configure_from_cli, get_logger

app = typer.Typer(
    name="raml2html",
    help="RAML to HTML documentation generator",
    add_completion=False,
    no_args_is_help=True,
)

# Global state
_settings: Raml2HtmlSettings | None = None
_logger = get_logger()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"raml2html {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to settings file",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output with timestamps",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress info messages (warnings and errors only)",
        ),
    ] = False,
    ci: Annotated[
        bool,
        typer.Option(
            "--ci",
            help="Enable CI mode with JSON log output",
        ),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
) -> None:
    """raml2html - render RAML API descriptions as a single HTML page."""
    global _settings

    configure_from_cli(verbose=verbose, quiet=quiet, ci=ci)

    try:
        _settings = load_settings(config_path=config)
        if _settings.config_path:
            _logger.debug(f"Loaded settings from: {_settings.config_path}")
    except FileNotFoundError as e:
        _logger.error(str(e))
        raise typer.Exit(1)
    except Exception as e:
        _logger.error(f"Failed to load settings: {e}")
        raise typer.Exit(1)


# =============================================================================
# render command
# =============================================================================


@app.command("render")
def render_command(
    source: Annotated[
        Path | None,
        typer.Argument(
            help="RAML input file",
            show_default=False,
        ),
    ] = None,
    input: Annotated[
        Path | None,
        typer.Option(
            "--input",
            "-i",
            help="RAML input file",
        ),
    ] = None,
    https: Annotated[
        bool,
        typer.Option(
            "--https",
            "-s",
            help="Use https links in the generated output",
        ),
    ] = False,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="HTML output file (stdout if omitted)",
        ),
    ] = None,
    template: Annotated[
        Path | None,
        typer.Option(
            "--template",
            "-t",
            help="Path to custom main template",
        ),
    ] = None,
    resource: Annotated[
        Path | None,
        typer.Option(
            "--resource",
            "-r",
            help="Path to custom resource partial",
        ),
    ] = None,
    item: Annotated[
        Path | None,
        typer.Option(
            "--item",
            "-m",
            help="Path to custom item partial",
        ),
    ] = None,
    minify: Annotated[
        bool,
        typer.Option(
            "--minify",
            help="Unescape quotes and minify the generated HTML",
        ),
    ] = False,
    no_sentence_helpers: Annotated[
        bool,
        typer.Option(
            "--no-sentence-helpers",
            help="Do not register md_first_sentence / md_rest",
        ),
    ] = False,
) -> None:
    """Render a RAML file to HTML.

    Exit codes:
        0: Documentation rendered successfully
        1: Missing input, bad template path, render failure or unwritable output
    """
    from raml2html.models import RenderSuccess
    from raml2html.templates import DocumentRenderer, build_default_config

    settings = _settings or Raml2HtmlSettings()

    input_path = input or source
    if input_path is None:
        _logger.error("You need to specify the RAML input file")
        raise typer.Exit(1)

    output_path = output or (
        Path(settings.output.path) if settings.output.path else None
    )

    try:
        config = build_default_config(
            use_https=https or settings.render.https,
            template_path=template or settings.templates.main,
            resource_path=resource or settings.templates.resource,
            item_path=item or settings.templates.item,
            post_process_enabled=minify or settings.render.minify,
            sentence_helpers=settings.render.sentence_helpers and not no_sentence_helpers,
        )
    except FileNotFoundError as e:
        _logger.error(str(e))
        raise typer.Exit(1)

    _logger.info(f"Rendering {input_path}")
    renderer = DocumentRenderer(config)

    try:
        if output_path is not None:
            result = renderer.render_to_file(input_path, output_path)
        else:
            result = renderer.render(input_path)
    except OSError as e:
        _logger.error(f"Error writing: {e}")
        raise typer.Exit(1)

    if not isinstance(result, RenderSuccess):
        prefix = "Error parsing" if result.stage == "parse" else "Error rendering"
        _logger.structured(
            logging.ERROR,
            f"{prefix}: {result.error.message}",
            **result.error.to_dict(),
        )
        raise typer.Exit(1)

    if output_path is None:
        typer.echo(result.output, nl=False)
    else:
        _logger.info(f"Documentation written to: {output_path}")

    raise typer.Exit(0)


# =============================================================================
# validate command
# =============================================================================


@app.command()
def validate(
    template: Annotated[
        Path,
        typer.Argument(
            help="Path to Jinja2 template to validate",
            exists=True,
            dir_okay=False,
        ),
    ],
) -> None:
    """Validate a Jinja2 template.

    Checks syntax only; helpers and partials are resolved at render time.
    """
    from jinja2 import TemplateSyntaxError

    from raml2html.templates import RenderContext

    _logger.info(f"Validating template: {template}")

    try:
        RenderContext().environment.parse(template.read_text(encoding="utf-8"))
    except TemplateSyntaxError as e:
        _logger.error(f"Template syntax error: {e.message}")
        typer.echo(f"❌ Template syntax error at line {e.lineno}: {e.message}")
        raise typer.Exit(1)

    typer.echo(f"✅ Template is valid: {template}")
    raise typer.Exit(0)


if __name__ == "__main__":
    app()
