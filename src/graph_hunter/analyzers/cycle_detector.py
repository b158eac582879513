"""Circular dependency detection over the path-keyed dependency graph."""

from typing import Sequence

import networkx as nx

from ..graph.models import CycleResult
from ..utils.logger import get_logger


CYCLE_KEY_SEPARATOR = "->"

logger = get_logger(__name__)


def _rotate_to_smallest(values: list[str]) -> list[str]:
    if not values:
        return values
    min_index = min(range(len(values)), key=values.__getitem__)
    return values[min_index:] + values[:min_index]


def cycle_key(cycle: Sequence[str]) -> str:
    return CYCLE_KEY_SEPARATOR.join(cycle)


def canonicalize_cycle(cycle: Sequence[str]) -> list[str]:
    """Pick one representative among all rotations and directions of a cycle.

    A closed cycle (last element repeating the first) is opened first. Both
    the forward and reversed sequences are rotated to start at their smallest
    path; the one with the smaller joined key wins.
    """
    values = list(cycle)
    if len(values) > 1 and values[0] == values[-1]:
        values = values[:-1]

    forward = _rotate_to_smallest(values)
    backward = _rotate_to_smallest(values[::-1])

    return forward if cycle_key(forward) <= cycle_key(backward) else backward


def find_cycles(adjacency: nx.DiGraph) -> list[CycleResult]:
    """Find circular dependencies with a depth-first search.

    Every back edge to a path on the current DFS stack closes a cycle. Cycles
    are canonicalized and reported once, in discovery order. The traversal
    keeps its own frame stack so deep graphs do not hit the recursion limit.

    Args:
        adjacency: Dependency graph from GraphBuilder

    Returns:
        List of distinct cycles
    """
    results: list[CycleResult] = []
    seen_keys: set[str] = set()

    visited: set[str] = set()
    stack: list[str] = []
    on_stack: set[str] = set()

    def enter(path: str, frames: list) -> None:
        visited.add(path)
        stack.append(path)
        on_stack.add(path)
        frames.append((path, iter(adjacency.successors(path))))

    def record(neighbor: str) -> None:
        start_index = stack.index(neighbor)
        canonical = canonicalize_cycle(stack[start_index:] + [neighbor])
        key = cycle_key(canonical)
        if key in seen_keys:
            return
        seen_keys.add(key)
        results.append(CycleResult(id=key, cycle=tuple(canonical), length=len(canonical)))

    for root in adjacency.nodes:
        if root in visited:
            continue

        frames: list = []
        enter(root, frames)

        while frames:
            path, neighbors = frames[-1]
            descended = False

            for neighbor in neighbors:
                if neighbor not in visited:
                    enter(neighbor, frames)
                    descended = True
                    break
                if neighbor in on_stack:
                    record(neighbor)

            if descended:
                continue

            frames.pop()
            stack.pop()
            on_stack.discard(path)

    logger.debug(f"Cycle search visited {len(visited)} paths, found {len(results)} cycles")

    return results
