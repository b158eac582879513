"""Graph model, path handling and dependency graph construction."""

from .graph_builder import GraphBuilder, GraphStatistics
from .ignore import DEFAULT_EXCLUDE_PATTERNS, glob_match, should_ignore
from .models import CodeGraph, CycleResult, DeadCodeResult, GraphEdge, GraphNode, load_graph
from .paths import effective_path, normalize_path, resolve_path
from .relationships import is_call_edge, is_dependency_edge

__all__ = [
    "GraphBuilder",
    "GraphStatistics",
    "DEFAULT_EXCLUDE_PATTERNS",
    "glob_match",
    "should_ignore",
    "CodeGraph",
    "CycleResult",
    "DeadCodeResult",
    "GraphEdge",
    "GraphNode",
    "load_graph",
    "effective_path",
    "normalize_path",
    "resolve_path",
    "is_call_edge",
    "is_dependency_edge"
]
