"""Pytest configuration and fixtures for graph-hunter tests."""

import json
from pathlib import Path

import pytest

from graph_hunter.graph.models import CodeGraph
from graph_hunter.utils.config import config


def file_node(node_id: str, path: str, label: str = "File") -> dict:
    return {"id": node_id, "labels": [label], "properties": {"filePath": path}}


def function_node(node_id: str, name: str, path: str, **props) -> dict:
    properties = {"name": name, "filePath": path}
    properties.update(props)
    return {"id": node_id, "labels": ["Function"], "properties": properties}


def rel(start: str, end: str, rel_type: str = "imports", rel_id: str = None) -> dict:
    return {
        "id": rel_id or f"{start}-{rel_type}-{end}",
        "type": rel_type,
        "startNode": start,
        "endNode": end
    }


@pytest.fixture
def make_graph():
    """Build a CodeGraph from raw node and relationship dicts."""
    def _make(nodes, relationships=()):
        return CodeGraph.from_dict({"nodes": list(nodes), "relationships": list(relationships)})
    return _make


@pytest.fixture
def triangle_graph(make_graph) -> CodeGraph:
    """Three files importing each other in a ring: a -> b -> c -> a."""
    return make_graph(
        [
            file_node("a", "src/a.ts"),
            file_node("b", "src/b.ts"),
            file_node("c", "src/c.ts"),
        ],
        [rel("a", "b"), rel("b", "c"), rel("c", "a")]
    )


@pytest.fixture
def graph_file(tmp_path: Path):
    """Write a graph dict to a JSON file and return its path."""
    def _write(data: dict, name: str = "graph.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path
    return _write


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch):
    """Keep tests away from any graph-hunter.yaml or .env in the working directory."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("GRAPH_HUNTER_IGNORE_PATTERNS", raising=False)
    monkeypatch.delenv("GRAPH_HUNTER_LOG_LEVEL", raising=False)
    config.reset()
    yield
    config.reset()
