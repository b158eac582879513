"""Dead code detection: functions that no call relationship points to.

This is a conservative heuristic, not a sound reachability analysis. Calls
made through framework dispatch, reflection, dynamic imports or string
lookups never show up as ``calls`` relationships, so a reported function may
still be used. Entry-point files, conventional entry-point names and
exported functions are skipped to keep false positives down.
"""

from typing import Iterable

from ..graph.ignore import glob_match, should_ignore
from ..graph.models import CodeGraph, DeadCodeResult, GraphNode
from ..graph.relationships import is_call_edge
from ..utils.logger import get_logger


ENTRY_POINT_PATTERNS = (
    "**/index.ts",
    "**/index.js",
    "**/main.ts",
    "**/main.js",
    "**/app.ts",
    "**/app.js",
    "**/*.test.*",
    "**/*.spec.*",
    "**/__tests__/**",
)

ENTRY_POINT_FUNCTION_NAMES = (
    "main",
    "run",
    "start",
    "init",
    "setup",
    "bootstrap",
    "default",
    "handler",
    "GET", "POST", "PUT", "DELETE", "PATCH",
)

ANONYMOUS_FUNCTION = "anonymous"

_ENTRY_POINT_NAMES_LOWER = frozenset(name.lower() for name in ENTRY_POINT_FUNCTION_NAMES)

logger = get_logger(__name__)


def is_entry_point_file(file_path: str) -> bool:
    """Check if a file path matches any entry point pattern."""
    return any(glob_match(file_path, pattern) for pattern in ENTRY_POINT_PATTERNS)


def is_entry_point_function(name: str) -> bool:
    """Check if a function name is a conventional entry point (case-insensitive)."""
    return name.lower() in _ENTRY_POINT_NAMES_LOWER


def is_exported(node: GraphNode) -> bool:
    props = node.properties
    return props.get("exported") is True or props.get("isExported") is True


def _line(value):
    # Line numbers are only reported when the graph supplies integers
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def find_dead_code(graph: CodeGraph, ignore_patterns: Iterable[str] = ()) -> list[DeadCodeResult]:
    """Find functions that are never the target of a ``calls`` relationship.

    Args:
        graph: Input code graph
        ignore_patterns: Glob patterns excluded in addition to the defaults

    Returns:
        Potentially unused functions, in graph order
    """
    ignore_patterns = list(ignore_patterns)

    called_ids = {rel.end_node for rel in graph.relationships if is_call_edge(rel)}
    function_nodes = [node for node in graph.nodes if node.is_function]

    dead_code = []
    for node in function_nodes:
        props = node.properties
        file_path = str(props.get("filePath") or props.get("file") or "")
        name = str(props.get("name") or ANONYMOUS_FUNCTION)

        if node.id in called_ids:
            continue

        if should_ignore(file_path, ignore_patterns):
            continue

        if is_entry_point_file(file_path):
            continue

        if is_entry_point_function(name):
            continue

        if is_exported(node):
            continue

        dead_code.append(DeadCodeResult(
            id=node.id,
            name=name,
            file_path=file_path,
            start_line=_line(props.get("startLine")),
            end_line=_line(props.get("endLine"))
        ))

    logger.debug(
        f"Dead code scan: {len(function_nodes)} functions, {len(called_ids)} call targets, "
        f"{len(dead_code)} unreferenced"
    )

    return dead_code
