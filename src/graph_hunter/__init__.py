"""graph-hunter: circular dependency and dead code detection for code graphs."""

from .analyzers import (
    CircularDependencyResult,
    DeadCodeReport,
    DependencyAnalyzer,
    find_cycles,
    find_dead_code,
)
from .exceptions import GraphHunterError, GraphShapeError, InvalidPatternError
from .graph import CodeGraph, CycleResult, DeadCodeResult, GraphBuilder, load_graph

__version__ = "0.1.0"

__all__ = [
    "CircularDependencyResult",
    "CodeGraph",
    "CycleResult",
    "DeadCodeReport",
    "DeadCodeResult",
    "DependencyAnalyzer",
    "GraphBuilder",
    "GraphHunterError",
    "GraphShapeError",
    "InvalidPatternError",
    "find_cycles",
    "find_dead_code",
    "load_graph",
]
