"""Path normalization and resolution for graph node identifiers."""

import re
from typing import Iterable, Optional

from .models import GraphNode


# Property keys tried in order when extracting a node's file path
PATH_PROPERTY_KEYS = ("filePath", "path", "file", "name")

RESOLVE_EXTENSIONS = (".ts", ".tsx", ".js", ".jsx", ".mjs", ".cjs")

_EXTENSION_RE = re.compile(r"\.[^/]+$")


def normalize_path(raw: str) -> str:
    """Convert backslash separators to forward slashes."""
    return raw.replace("\\", "/")


def has_extension(path: str) -> bool:
    """Check if the last path segment carries a file extension."""
    return _EXTENSION_RE.search(path) is not None


def effective_path(node: GraphNode) -> str:
    """Get the first non-empty path candidate of a node, falling back to its id."""
    for key in PATH_PROPERTY_KEYS:
        value = node.properties.get(key)
        if value:
            return str(value)
    return node.id


def resolve_path(candidate: str, known_paths: Iterable[str]) -> Optional[str]:
    """Match a possibly extension-less module reference against known file paths.

    Tries the literal value first, then, for candidates without an extension,
    ``<candidate><ext>`` and ``<candidate>/index<ext>`` for each of
    ``RESOLVE_EXTENSIONS`` in order.

    Args:
        candidate: Raw path or module specifier
        known_paths: Set of canonical file paths

    Returns:
        The matching known path, or None if nothing matches
    """
    if not isinstance(known_paths, (set, frozenset, dict)):
        known_paths = set(known_paths)

    normalized = normalize_path(candidate)
    if normalized in known_paths:
        return normalized

    if has_extension(normalized):
        return None

    for ext in RESOLVE_EXTENSIONS:
        with_ext = f"{normalized}{ext}"
        if with_ext in known_paths:
            return with_ext
        with_index = f"{normalized}/index{ext}"
        if with_index in known_paths:
            return with_index

    return None
