"""Document tree types.

A parsed RAML document is a plain tree of dicts, lists and scalars, as
produced by the YAML loader. These aliases name the three variants so the
normalizer can be written as one case per variant.
"""

from typing import Any, TypeAlias

Scalar: TypeAlias = str | int | float | bool | None
Mapping: TypeAlias = dict[str, Any]
Sequence: TypeAlias = list[Any]
Tree: TypeAlias = Scalar | Sequence | Mapping


def is_mapping(node: Any) -> bool:
    """Return True if node is a mapping variant."""
    return isinstance(node, dict)


def is_sequence(node: Any) -> bool:
    """Return True if node is a sequence variant (strings are scalars)."""
    return isinstance(node, (list, tuple))
