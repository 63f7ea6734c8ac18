"""raml2html settings file.

Settings are YAML-based with CLI overrides for every field.
Supports environment variable substitution (${VAR}) in settings files.

Settings file discovery (in priority order):
1. CLI --config argument
2. ./.raml2html/config.yaml
3. ./raml2html.yaml
"""

import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

# =============================================================================
# Settings Dataclasses
# =============================================================================


@dataclass
class OutputSettings:
    """Output settings.

    Attributes:
        path: Output file path (None writes to stdout)
    """

    path: str | None = None


@dataclass
class RenderSettings:
    """Render behaviour settings.

    Attributes:
        https: Use https: links in the generated page
        minify: Run the quote-unescape + minify post-processing step
        sentence_helpers: Register md_first_sentence / md_rest helpers
    """

    https: bool = False
    minify: bool = False
    sentence_helpers: bool = True


@dataclass
class TemplateSettings:
    """Custom template paths (packaged templates are used when None).

    Attributes:
        main: Main page template
        resource: "resource" partial
        item: "item" partial
    """

    main: str | None = None
    resource: str | None = None
    item: str | None = None


@dataclass
class Raml2HtmlSettings:
    """Top-level raml2html settings.

    Attributes:
        output: Output destination
        render: Render behaviour
        templates: Template overrides
    """

    output: OutputSettings = field(default_factory=OutputSettings)
    render: RenderSettings = field(default_factory=RenderSettings)
    templates: TemplateSettings = field(default_factory=TemplateSettings)

    # Runtime overrides (set by CLI)
    _config_path: Path | None = field(default=None, repr=False)

    @property
    def config_path(self) -> Path | None:
        """Get the path to the settings file that was loaded."""
        return self._config_path


# =============================================================================
# Environment Variable Substitution
# =============================================================================


def substitute_env_vars(value: Any) -> Any:
    """Substitute environment variables in settings values.

    Supports ${VAR} syntax for environment variable substitution.
    Example: ${DOCS_TEMPLATE} -> value of DOCS_TEMPLATE

    Args:
        value: Settings value (string, dict, list, or other)

    Returns:
        Value with environment variables substituted
    """
    if isinstance(value, str):
        pattern = re.compile(r"\$\{([^}]+)\}")

        def replace_var(match: re.Match[str]) -> str:
            var_name = match.group(1)
            env_value = os.environ.get(var_name)
            if env_value is None:
                raise ValueError(f"Environment variable not set: {var_name}")
            return env_value

        return pattern.sub(replace_var, value)

    elif isinstance(value, dict):
        return {k: substitute_env_vars(v) for k, v in value.items()}

    elif isinstance(value, list):
        return [substitute_env_vars(v) for v in value]

    return value


# =============================================================================
# Settings File Discovery
# =============================================================================


def find_config_file(start_path: Path | None = None) -> Path | None:
    """Find settings file in standard locations.

    Search order:
    1. ./.raml2html/config.yaml
    2. ./raml2html.yaml

    Args:
        start_path: Starting directory for search (defaults to cwd)

    Returns:
        Path to settings file if found, None otherwise
    """
    if start_path is None:
        start_path = Path.cwd()

    start_path = start_path.resolve()

    candidates = [
        start_path / ".raml2html" / "config.yaml",
        start_path / "raml2html.yaml",
    ]

    for candidate in candidates:
        if candidate.exists():
            return candidate

    return None


# =============================================================================
# Settings Loading
# =============================================================================


def load_settings_from_dict(data: dict[str, Any]) -> Raml2HtmlSettings:
    """Load settings from a dictionary.

    Args:
        data: Settings dictionary

    Returns:
        Raml2HtmlSettings instance
    """
    data = substitute_env_vars(data)

    settings = Raml2HtmlSettings()

    if "output" in data:
        output_data = data["output"] or {}
        settings.output = OutputSettings(
            path=output_data.get("path", settings.output.path),
        )

    if "render" in data:
        render_data = data["render"] or {}
        settings.render = RenderSettings(
            https=bool(render_data.get("https", False)),
            minify=bool(render_data.get("minify", False)),
            sentence_helpers=bool(render_data.get("sentence_helpers", True)),
        )

    if "templates" in data:
        templates_data = data["templates"] or {}
        settings.templates = TemplateSettings(
            main=templates_data.get("main"),
            resource=templates_data.get("resource"),
            item=templates_data.get("item"),
        )

    return settings


def load_settings(
    config_path: Path | None = None,
    auto_discover: bool = True,
) -> Raml2HtmlSettings:
    """Load settings from file.

    Args:
        config_path: Explicit path to settings file
        auto_discover: Whether to search for a settings file if not specified

    Returns:
        Raml2HtmlSettings instance

    Raises:
        FileNotFoundError: If config_path specified but doesn't exist
    """
    if config_path is not None:
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        found_path = config_path
    elif auto_discover:
        found_path = find_config_file()
    else:
        found_path = None

    if found_path is not None:
        with open(found_path) as f:
            data = yaml.safe_load(f) or {}
        settings = load_settings_from_dict(data)
        settings._config_path = found_path
    else:
        settings = Raml2HtmlSettings()

    return settings
