"""Graph builder for constructing the file-level dependency graph."""

from dataclasses import dataclass, field
from typing import Iterable, Optional

import networkx as nx

from .ignore import should_ignore
from .models import CodeGraph
from .paths import effective_path, normalize_path, resolve_path
from .relationships import is_call_edge, is_dependency_edge
from ..utils.logger import get_logger


@dataclass
class GraphStatistics:
    """Statistics about an input graph and the dependency graph built from it."""
    total_nodes: int = 0
    total_relationships: int = 0

    nodes_by_label: dict[str, int] = field(default_factory=dict)
    relationships_by_type: dict[str, int] = field(default_factory=dict)

    file_nodes: int = 0
    ignored_nodes: int = 0
    dependency_edges: int = 0
    call_edges: int = 0

    dependency_paths: int = 0
    dependency_links: int = 0

    sample_edges: list[dict] = field(default_factory=list)

    @property
    def relationship_types(self) -> list[str]:
        return sorted(t for t in self.relationships_by_type if t)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "graph": {
                "total_nodes": self.total_nodes,
                "total_relationships": self.total_relationships,
                "nodes_by_label": self.nodes_by_label,
                "relationships_by_type": self.relationships_by_type,
            },
            "classification": {
                "file_nodes": self.file_nodes,
                "ignored_nodes": self.ignored_nodes,
                "dependency_edges": self.dependency_edges,
                "call_edges": self.call_edges,
            },
            "dependency_graph": {
                "paths": self.dependency_paths,
                "links": self.dependency_links,
            }
        }

    def __str__(self) -> str:
        """Human-readable summary."""
        lines = [
            "=== Graph Statistics ===",
            f"Nodes: {self.total_nodes} ({self.file_nodes} files/modules, {self.ignored_nodes} ignored)",
            f"Relationships: {self.total_relationships}",
            f"  dependency: {self.dependency_edges}",
            f"  calls: {self.call_edges}",
            f"Dependency graph: {self.dependency_paths} paths, {self.dependency_links} links",
            "",
            "Nodes by label:"
        ]
        for label, count in sorted(self.nodes_by_label.items(), key=lambda x: -x[1]):
            lines.append(f"  {label}: {count}")

        lines.extend([
            "",
            "Relationships by type:"
        ])
        for rel_type, count in sorted(self.relationships_by_type.items(), key=lambda x: -x[1]):
            lines.append(f"  {rel_type or '(untyped)'}: {count}")

        return "\n".join(lines)


class GraphBuilder:
    """Builds the path-keyed dependency graph consumed by cycle detection."""

    def __init__(self, ignore_patterns: Optional[Iterable[str]] = None):
        """Initialize the graph builder.

        Args:
            ignore_patterns: Glob patterns excluded in addition to the defaults
        """
        self.ignore_patterns = list(ignore_patterns or [])
        self.logger = get_logger(__name__)

    def _is_excluded(self, path: str) -> bool:
        return should_ignore(path, self.ignore_patterns)

    def reference_paths(self, graph: CodeGraph) -> set[str]:
        """Collect canonical paths of File/Module nodes.

        Falls back to every node's path when the graph has no usable
        File/Module nodes.
        """
        paths = set()
        for node in graph.nodes:
            if not node.is_file:
                continue
            path = normalize_path(effective_path(node))
            if not path or self._is_excluded(path):
                continue
            paths.add(path)

        if paths:
            return paths

        self.logger.debug("No File/Module nodes found, using all node paths as references")
        for node in graph.nodes:
            path = normalize_path(effective_path(node))
            if not path or self._is_excluded(path):
                continue
            paths.add(path)

        return paths

    def map_node_paths(self, graph: CodeGraph) -> dict[str, str]:
        """Map node ids to resolved file paths, skipping ignored nodes."""
        references = self.reference_paths(graph)

        path_by_id = {}
        for node in graph.nodes:
            raw_path = normalize_path(effective_path(node))
            if not raw_path or self._is_excluded(raw_path):
                continue
            path_by_id[node.id] = resolve_path(raw_path, references) or raw_path

        return path_by_id

    def build(self, graph: CodeGraph) -> nx.DiGraph:
        """Build the dependency graph keyed by file path.

        Every resolved path becomes a node, even without outgoing edges.
        Self-dependencies are dropped and parallel edges collapse.

        Args:
            graph: Input code graph

        Returns:
            Directed graph from dependent path to dependency path
        """
        path_by_id = self.map_node_paths(graph)

        adjacency = nx.DiGraph()
        adjacency.add_nodes_from(path_by_id.values())

        for rel in graph.relationships:
            if not is_dependency_edge(rel):
                continue

            start_path = path_by_id.get(rel.start_node)
            end_path = path_by_id.get(rel.end_node)
            if not start_path or not end_path:
                continue
            if start_path == end_path:
                continue

            adjacency.add_edge(start_path, end_path)

        self.logger.debug(
            f"Dependency graph built: {adjacency.number_of_nodes()} paths, "
            f"{adjacency.number_of_edges()} links"
        )

        return adjacency

    def compute_statistics(self, graph: CodeGraph, sample_size: int = 20) -> GraphStatistics:
        """Compute statistics about the input graph and its dependency graph."""
        stats = GraphStatistics()
        stats.total_nodes = len(graph.nodes)
        stats.total_relationships = len(graph.relationships)

        for node in graph.nodes:
            for label in node.labels:
                stats.nodes_by_label[label] = stats.nodes_by_label.get(label, 0) + 1

            if node.is_file:
                stats.file_nodes += 1

            path = normalize_path(effective_path(node))
            if not path or self._is_excluded(path):
                stats.ignored_nodes += 1

        for rel in graph.relationships:
            stats.relationships_by_type[rel.type] = stats.relationships_by_type.get(rel.type, 0) + 1

            if is_dependency_edge(rel):
                stats.dependency_edges += 1
            elif is_call_edge(rel):
                stats.call_edges += 1

        for rel in graph.relationships[:sample_size]:
            stats.sample_edges.append({
                "type": rel.type,
                "startNode": rel.start_node,
                "endNode": rel.end_node
            })

        adjacency = self.build(graph)
        stats.dependency_paths = adjacency.number_of_nodes()
        stats.dependency_links = adjacency.number_of_edges()

        return stats
