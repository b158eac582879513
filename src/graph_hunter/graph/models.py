"""Data models for the code graph and analysis results."""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

from ..exceptions import GraphShapeError


FILE_LABELS = ("File", "Module")
FUNCTION_LABEL = "Function"


@dataclass(frozen=True)
class GraphNode:
    """A node of the code graph (file, module, function, ...)."""
    id: str
    labels: frozenset = field(default_factory=frozenset)
    properties: dict = field(default_factory=dict)

    def has_label(self, *labels: str) -> bool:
        """Check whether the node carries any of the given labels."""
        return any(label in self.labels for label in labels)

    @property
    def is_file(self) -> bool:
        return self.has_label(*FILE_LABELS)

    @property
    def is_function(self) -> bool:
        return self.has_label(FUNCTION_LABEL)

    @classmethod
    def from_dict(cls, data: Any) -> "GraphNode":
        if not isinstance(data, dict):
            raise GraphShapeError(f"Graph node must be an object, got {type(data).__name__}")

        labels = data.get("labels") or []
        if isinstance(labels, str):
            labels = [labels]
        elif not isinstance(labels, (list, tuple)):
            raise GraphShapeError(f"Graph node labels must be a list, got {type(labels).__name__}")

        properties = data.get("properties")
        if not isinstance(properties, dict):
            properties = {}

        return cls(
            id=str(data.get("id", "")),
            labels=frozenset(str(label) for label in labels),
            properties=dict(properties)
        )


@dataclass(frozen=True)
class GraphEdge:
    """A directed, typed relationship between two nodes."""
    id: str
    type: str
    start_node: Optional[str]
    end_node: Optional[str]

    @classmethod
    def from_dict(cls, data: Any) -> "GraphEdge":
        if not isinstance(data, dict):
            raise GraphShapeError(f"Graph relationship must be an object, got {type(data).__name__}")

        start = data.get("startNode")
        end = data.get("endNode")

        return cls(
            id=str(data.get("id", "")),
            type=str(data.get("type") or ""),
            start_node=str(start) if start is not None else None,
            end_node=str(end) if end is not None else None
        )


@dataclass(frozen=True)
class CodeGraph:
    """Immutable snapshot of a code graph as delivered by the analysis service."""
    nodes: tuple = ()
    relationships: tuple = ()

    @property
    def is_empty(self) -> bool:
        return not self.nodes and not self.relationships

    @classmethod
    def from_dict(cls, data: Any) -> "CodeGraph":
        """Build a graph from ``{nodes, relationships}`` or a ``{graph: {...}}`` envelope.

        Raises:
            GraphShapeError: If ``nodes`` or ``relationships`` is not a list,
                or an entry is not an object.
        """
        if not isinstance(data, dict):
            raise GraphShapeError(f"Graph must be an object, got {type(data).__name__}")

        if isinstance(data.get("graph"), dict):
            data = data["graph"]

        nodes = data.get("nodes")
        relationships = data.get("relationships")
        if nodes is None:
            nodes = []
        if relationships is None:
            relationships = []

        if not isinstance(nodes, list):
            raise GraphShapeError(f"'nodes' must be a list, got {type(nodes).__name__}")
        if not isinstance(relationships, list):
            raise GraphShapeError(
                f"'relationships' must be a list, got {type(relationships).__name__}"
            )

        return cls(
            nodes=tuple(GraphNode.from_dict(node) for node in nodes),
            relationships=tuple(GraphEdge.from_dict(rel) for rel in relationships)
        )


def load_graph(path: Union[str, Path]) -> CodeGraph:
    """Load a code graph from a JSON file."""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except UnicodeDecodeError as e:
        raise GraphShapeError(f"{path.name} is not valid UTF-8: {e}") from e
    except json.JSONDecodeError as e:
        raise GraphShapeError(f"{path.name} is not valid JSON: {e}") from e

    return CodeGraph.from_dict(data)


@dataclass(frozen=True)
class CycleResult:
    """A circular dependency between files.

    ``cycle`` is open: the closing element (``cycle[0]``) is implicit.
    """
    id: str
    cycle: tuple
    length: int

    @property
    def closed_path(self) -> list[str]:
        return list(self.cycle) + [self.cycle[0]]

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "cycle": list(self.cycle),
            "length": self.length
        }


@dataclass(frozen=True)
class DeadCodeResult:
    """A function that no ``calls`` relationship points to."""
    id: str
    name: str
    file_path: str
    start_line: Optional[int] = None
    end_line: Optional[int] = None

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        data = {
            "id": self.id,
            "name": self.name,
            "filePath": self.file_path
        }
        if self.start_line is not None:
            data["startLine"] = self.start_line
        if self.end_line is not None:
            data["endLine"] = self.end_line
        return data
