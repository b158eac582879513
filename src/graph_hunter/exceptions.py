"""Exceptions raised by graph-hunter."""


class GraphHunterError(Exception):
    """Base class for all graph-hunter errors."""


class InvalidPatternError(GraphHunterError, ValueError):
    """An ignore pattern could not be used as a glob."""

    def __init__(self, pattern, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid glob pattern {pattern!r}: {reason}")


class GraphShapeError(GraphHunterError, TypeError):
    """The input graph does not follow the expected node/relationship schema."""
