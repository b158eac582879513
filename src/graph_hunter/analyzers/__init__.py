"""Code analysis modules for graph-hunter."""

from .cycle_detector import canonicalize_cycle, find_cycles
from .dead_code import find_dead_code, is_entry_point_file, is_entry_point_function
from .dependency_analyzer import (
    CircularDependencyResult,
    DeadCodeReport,
    DependencyAnalyzer,
    format_cycles_report,
    format_dead_code_report,
)

__all__ = [
    "canonicalize_cycle",
    "find_cycles",
    "find_dead_code",
    "is_entry_point_file",
    "is_entry_point_function",
    "CircularDependencyResult",
    "DeadCodeReport",
    "DependencyAnalyzer",
    "format_cycles_report",
    "format_dead_code_report"
]
