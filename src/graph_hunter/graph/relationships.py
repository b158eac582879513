"""Classification of relationship types."""

from .models import GraphEdge


# Substring markers, matched against the lower-cased relationship type.
# Deliberately loose: "reuse" qualifies through "use".
DEPENDENCY_MARKERS = (
    "import",
    "depend",
    "require",
    "use",
    "include",
    "reference",
    "module",
)

CALL_MARKER = "call"
CALLS_TYPE = "calls"


def is_dependency_edge(edge: GraphEdge) -> bool:
    """Check whether a relationship is an import-like dependency.

    Anything mentioning "call" is a call edge and never a dependency, even if
    it also contains a dependency marker.
    """
    edge_type = (edge.type or "").lower()
    if CALL_MARKER in edge_type:
        return False
    return any(marker in edge_type for marker in DEPENDENCY_MARKERS)


def is_call_edge(edge: GraphEdge) -> bool:
    """Check whether a relationship is an exact ``calls`` edge."""
    return edge.type == CALLS_TYPE
