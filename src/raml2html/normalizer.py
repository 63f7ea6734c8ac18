"""Document tree normalization.

Walks a parsed document and rebuilds it with every method list sorted into
canonical HTTP verb order. Everything else is copied without structural
changes, so normalization is pure and idempotent.
"""

import logging
from typing import Any

from raml2html.models.tree import Mapping, Tree, is_mapping, is_sequence

logger = logging.getLogger(__name__)

# Key holding the method list of a resource
METHODS_KEY = "methods"

# Canonical verb order for method lists
METHOD_ORDER: tuple[str, ...] = (
    "get",
    "head",
    "post",
    "put",
    "delete",
    "trace",
    "connect",
)

_UNKNOWN_RANK = len(METHOD_ORDER)


def method_rank(verb: Any) -> int:
    """Return the canonical rank of an HTTP verb.

    Args:
        verb: Verb name, any case

    Returns:
        Index in METHOD_ORDER, or a rank after all known verbs

    Examples:
        >>> method_rank("GET")
        0
        >>> method_rank("patch")
        7
    """
    if not isinstance(verb, str):
        return _UNKNOWN_RANK
    try:
        return METHOD_ORDER.index(verb.strip().lower())
    except ValueError:
        return _UNKNOWN_RANK


def _element_rank(element: Any) -> int:
    if is_mapping(element):
        return method_rank(element.get("method"))
    return _UNKNOWN_RANK


def sort_methods(methods: list[Any]) -> list[Any]:
    """Return a new method list in canonical order.

    The sort is stable: unknown verbs keep their relative order after the
    known ones.
    """
    return sorted(methods, key=_element_rank)


def _normalize_value(key: str, value: Any) -> Any:
    if key == METHODS_KEY and is_sequence(value):
        return sort_methods(list(value))

    if is_mapping(value):
        return _normalize_mapping(value)

    if is_sequence(value):
        # Only the first element decides whether the list holds mappings
        if value and is_mapping(value[0]):
            return [
                _normalize_mapping(item) if is_mapping(item) else item
                for item in value
            ]
        return list(value)

    return value


def _normalize_mapping(node: Mapping) -> Mapping:
    return {key: _normalize_value(key, value) for key, value in node.items()}


def normalize(tree: Tree) -> Tree:
    """Normalize a document tree.

    Args:
        tree: Parsed document (mapping, sequence or scalar)

    Returns:
        New tree with method lists in canonical order. Non-mapping input is
        returned unchanged.
    """
    if not is_mapping(tree):
        return tree

    result = _normalize_mapping(tree)
    logger.debug("Normalized document tree (%d top-level keys)", len(result))
    return result
