"""RAML document loader.

Reads a RAML file with PyYAML and reshapes it into the document tree the
templates expect: top-level keys are kept, and every "/path" key becomes an
entry in a "resources" list with its methods collected under "methods".

This is deliberately not a RAML validator. Traits, resource types and schemas
are passed through as plain data.
"""

import logging
import re
from pathlib import Path
from typing import Any

import yaml

from raml2html.models.tree import Mapping

logger = logging.getLogger(__name__)

# Keys under a resource that describe an HTTP method
HTTP_VERBS = frozenset(
    {"get", "head", "post", "put", "delete", "trace", "connect", "patch", "options"}
)

# Include targets parsed as YAML rather than read as text
_YAML_SUFFIXES = frozenset({".raml", ".yaml", ".yml"})

_VERSION_PLACEHOLDER = "{version}"


class RamlLoadError(ValueError):
    """Raised when a RAML document cannot be read or is not a mapping."""

    def __init__(self, source: str, message: str) -> None:
        self.source = source
        super().__init__(f"{source}: {message}")


# =============================================================================
# YAML loading
# =============================================================================


def _make_loader(base_dir: Path) -> type[yaml.SafeLoader]:
    """Create a SafeLoader class resolving !include relative to base_dir."""

    class IncludeLoader(yaml.SafeLoader):
        pass

    def construct_include(loader: yaml.SafeLoader, node: yaml.Node) -> Any:
        target = base_dir / str(loader.construct_scalar(node))  # type: ignore[arg-type]
        if target.suffix.lower() in _YAML_SUFFIXES:
            return _load_yaml_file(target)
        try:
            return target.read_text(encoding="utf-8")
        except OSError as e:
            raise RamlLoadError(str(target), f"cannot read include: {e}") from e

    IncludeLoader.add_constructor("!include", construct_include)
    return IncludeLoader


def _load_yaml_text(text: str, base_dir: Path, name: str) -> Any:
    try:
        return yaml.load(text, Loader=_make_loader(base_dir))
    except yaml.YAMLError as e:
        raise RamlLoadError(name, f"invalid YAML: {e}") from e


def _load_yaml_file(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise RamlLoadError(str(path), f"cannot read file: {e}") from e

    logger.debug("Loaded %s (%d bytes)", path, len(text))
    return _load_yaml_text(text, path.parent, str(path))


def _looks_like_raml_text(source: str) -> bool:
    return "\n" in source or source.lstrip().startswith("#%RAML")


# =============================================================================
# Tree construction
# =============================================================================


def _is_resource_key(key: Any) -> bool:
    return isinstance(key, str) and key.startswith("/")


def _is_method_key(key: Any) -> bool:
    return isinstance(key, str) and key.lower() in HTTP_VERBS


def _unique_id(url: str) -> str:
    return re.sub(r"\W", "_", url)


def _build_method(verb: str, body: Any, secured_by: Any) -> Mapping:
    method: Mapping = dict(body) if isinstance(body, dict) else {}
    method["method"] = verb.lower()
    if "securedBy" not in method and secured_by is not None:
        method["securedBy"] = list(secured_by)
    return method


def _build_resource(
    relative_uri: str,
    body: Any,
    parent_url: str,
    secured_by: Any,
) -> Mapping:
    body = body if isinstance(body, dict) else {}
    secured_by = body.get("securedBy", secured_by)
    url = parent_url + relative_uri

    resource: Mapping = {
        "relativeUri": relative_uri,
        "parentUrl": parent_url,
        "uniqueId": _unique_id(url),
        "displayName": body.get("displayName", relative_uri),
    }

    methods: list[Mapping] = []
    children: list[Mapping] = []

    for key, value in body.items():
        if _is_resource_key(key):
            children.append(_build_resource(key, value, url, secured_by))
        elif _is_method_key(key):
            methods.append(_build_method(key, value, secured_by))
        elif key != "displayName":
            resource[key] = value

    if methods:
        resource["methods"] = methods
    if children:
        resource["resources"] = children

    return resource


def build_tree(raw: Mapping) -> Mapping:
    """Reshape loaded RAML data into the document tree.

    Args:
        raw: Mapping loaded from the RAML file

    Returns:
        Document tree with resources collected under "resources"
    """
    tree: Mapping = {}
    resources: list[Mapping] = []
    secured_by = raw.get("securedBy")

    for key, value in raw.items():
        if _is_resource_key(key):
            resources.append(_build_resource(key, value, "", secured_by))
        else:
            tree[key] = value

    base_uri = tree.get("baseUri")
    if isinstance(base_uri, str) and "version" in tree:
        tree["baseUri"] = base_uri.replace(_VERSION_PLACEHOLDER, str(tree["version"]))

    tree["resources"] = resources
    return tree


def parse_document(source: str | Path) -> Mapping:
    """Load a RAML document into a document tree.

    Args:
        source: Path to a RAML file, or RAML text (detected by a newline or
            a leading "#%RAML" header)

    Returns:
        Document tree

    Raises:
        RamlLoadError: If the file cannot be read, is not valid YAML, or its
            root is not a mapping
    """
    if isinstance(source, str) and _looks_like_raml_text(source):
        name = "<string>"
        raw = _load_yaml_text(source, Path.cwd(), name)
    else:
        path = Path(source)
        name = str(path)
        if not path.is_file():
            raise RamlLoadError(name, "file not found")
        raw = _load_yaml_file(path)

    if not isinstance(raw, dict):
        raise RamlLoadError(name, "document root must be a mapping")

    tree = build_tree(raw)
    logger.info("Parsed %s (%d top-level resources)", name, len(tree["resources"]))
    return tree
