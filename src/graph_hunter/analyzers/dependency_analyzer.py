"""Dependency analysis for circular dependencies and dead code."""

import json
from dataclasses import dataclass, field
from typing import Iterable, Optional

import networkx as nx

from .cycle_detector import find_cycles
from .dead_code import find_dead_code
from ..graph.graph_builder import GraphBuilder
from ..graph.models import CodeGraph, CycleResult, DeadCodeResult
from ..utils.logger import get_logger


DEFAULT_MAX_ROWS = 50

CYCLES_TITLE = "## Circular Dependency Hunter"
DEAD_CODE_TITLE = "## Dead Code Hunter"


def _plural(count: int, singular: str, plural: str) -> str:
    return singular if count == 1 else plural


def _truncation_note(total: int, max_rows: int) -> Optional[str]:
    if total > max_rows:
        return f"_...and {total - max_rows} more. See action output for full list._"
    return None


def format_cycles_report(cycles: list[CycleResult], max_rows: int = DEFAULT_MAX_ROWS) -> str:
    """Format circular dependencies as a markdown report.

    Args:
        cycles: Detected cycles
        max_rows: Maximum number of table rows

    Returns:
        Markdown string
    """
    if not cycles:
        return f"{CYCLES_TITLE}\n\nNo circular dependencies found! Your codebase is clean."

    total = len(cycles)
    lines = [
        CYCLES_TITLE,
        "",
        f"Found **{total}** circular {_plural(total, 'dependency', 'dependencies')}:",
        "",
        "| # | Cycle |",
        "|---|-------|"
    ]

    for i, cycle in enumerate(cycles[:max_rows], 1):
        lines.append(f"| {i} | {' -> '.join(cycle.closed_path)} |")

    note = _truncation_note(total, max_rows)
    if note:
        lines.extend(["", note])

    return "\n".join(lines)


def format_dead_code_report(dead_code: list[DeadCodeResult], max_rows: int = DEFAULT_MAX_ROWS) -> str:
    """Format potentially unused functions as a markdown report."""
    if not dead_code:
        return f"{DEAD_CODE_TITLE}\n\nNo dead code found! Your codebase is clean."

    total = len(dead_code)
    lines = [
        DEAD_CODE_TITLE,
        "",
        f"Found **{total}** potentially unused {_plural(total, 'function', 'functions')}:",
        "",
        "| Function | File | Line |",
        "|----------|------|------|"
    ]

    for dc in dead_code[:max_rows]:
        if dc.start_line:
            line_info = f"L{dc.start_line}"
            file_link = f"{dc.file_path}#L{dc.start_line}"
        else:
            line_info = ""
            file_link = dc.file_path
        lines.append(f"| `{dc.name}` | {file_link} | {line_info} |")

    note = _truncation_note(total, max_rows)
    if note:
        lines.extend(["", note])

    return "\n".join(lines)


@dataclass
class CircularDependencyResult:
    """Result of circular dependency detection."""
    cycles: list[CycleResult] = field(default_factory=list)
    max_rows: int = DEFAULT_MAX_ROWS

    @property
    def total_cycles(self) -> int:
        return len(self.cycles)

    @property
    def by_length(self) -> dict[int, int]:
        counts: dict[int, int] = {}
        for cycle in self.cycles:
            counts[cycle.length] = counts.get(cycle.length, 0) + 1
        return counts

    def format(self) -> str:
        """Format all cycles for display."""
        return format_cycles_report(self.cycles, self.max_rows)

    def to_json(self) -> str:
        return json.dumps([cycle.to_dict() for cycle in self.cycles])


@dataclass
class DeadCodeReport:
    """Result of dead code detection."""
    functions: list[DeadCodeResult] = field(default_factory=list)
    max_rows: int = DEFAULT_MAX_ROWS

    @property
    def total_unreachable(self) -> int:
        return len(self.functions)

    @property
    def affected_files(self) -> set[str]:
        return {dc.file_path for dc in self.functions if dc.file_path}

    def format(self) -> str:
        """Format dead code results for display."""
        return format_dead_code_report(self.functions, self.max_rows)

    def to_json(self) -> str:
        return json.dumps([dc.to_dict() for dc in self.functions])


class DependencyAnalyzer:
    """Analyzes a code graph for circular dependencies and dead code."""

    def __init__(
        self,
        graph: CodeGraph,
        ignore_patterns: Optional[Iterable[str]] = None,
        max_rows: int = DEFAULT_MAX_ROWS
    ):
        self.graph = graph
        self.ignore_patterns = list(ignore_patterns or [])
        self.max_rows = max_rows
        self.builder = GraphBuilder(self.ignore_patterns)
        self.logger = get_logger(__name__)

    def build_dependency_graph(self) -> nx.DiGraph:
        """Build the path-keyed dependency graph (recomputed on every call)."""
        return self.builder.build(self.graph)

    def detect_circular_dependencies(self) -> CircularDependencyResult:
        """Detect circular dependencies between files/modules.

        Returns:
            CircularDependencyResult with all distinct cycles
        """
        adjacency = self.build_dependency_graph()
        cycles = find_cycles(adjacency)

        count = len(cycles)
        self.logger.info(f"Found {count} circular {_plural(count, 'dependency', 'dependencies')}")

        return CircularDependencyResult(cycles=cycles, max_rows=self.max_rows)

    def detect_dead_code(self) -> DeadCodeReport:
        """Detect functions never targeted by a call.

        Returns:
            DeadCodeReport with potentially unused functions
        """
        functions = find_dead_code(self.graph, self.ignore_patterns)

        count = len(functions)
        self.logger.info(f"Found {count} potentially unused {_plural(count, 'function', 'functions')}")

        return DeadCodeReport(functions=functions, max_rows=self.max_rows)
