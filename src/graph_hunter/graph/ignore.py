"""Glob-based exclusion of paths from analysis."""

from fnmatch import fnmatchcase
from typing import Iterable

from ..exceptions import InvalidPatternError


DEFAULT_EXCLUDE_PATTERNS = (
    "**/node_modules/**",
    "**/dist/**",
    "**/build/**",
    "**/.git/**",
    "**/vendor/**",
    "**/target/**",
    "**/*.test.ts",
    "**/*.test.tsx",
    "**/*.test.js",
    "**/*.test.jsx",
    "**/*.spec.ts",
    "**/*.spec.tsx",
    "**/*.spec.js",
    "**/*.spec.jsx",
    "**/__tests__/**",
    "**/__mocks__/**",
)

GLOBSTAR = "**"


def validate_pattern(pattern) -> None:
    """Raise InvalidPatternError if a pattern cannot be used as a glob."""
    if not isinstance(pattern, str):
        raise InvalidPatternError(pattern, f"expected a string, got {type(pattern).__name__}")
    if not pattern:
        raise InvalidPatternError(pattern, "pattern is empty")

    depth = 0
    for char in pattern:
        if char == "[":
            depth += 1
        elif char == "]" and depth:
            depth -= 1
    if depth:
        raise InvalidPatternError(pattern, "unbalanced '['")


def _split(value: str) -> list[str]:
    return value.replace("\\", "/").split("/")


def _match_segments(parts: list[str], pattern_parts: list[str]) -> bool:
    if not pattern_parts:
        return not parts

    head = pattern_parts[0]
    if head == GLOBSTAR:
        rest = pattern_parts[1:]
        # Consecutive globstars behave like one
        while rest and rest[0] == GLOBSTAR:
            rest = rest[1:]
        return any(_match_segments(parts[i:], rest) for i in range(len(parts) + 1))

    if not parts:
        return False

    return fnmatchcase(parts[0], head) and _match_segments(parts[1:], pattern_parts[1:])


def glob_match(path: str, pattern: str) -> bool:
    """Match a path against a shell glob.

    ``*``, ``?`` and ``[...]`` apply within a single path segment; a ``**``
    segment matches zero or more whole segments.

    Raises:
        InvalidPatternError: If the pattern is malformed
    """
    validate_pattern(pattern)
    return _match_segments(_split(path), _split(pattern))


def should_ignore(path: str, extra_patterns: Iterable[str] = ()) -> bool:
    """Check if a path matches the default exclusions or any extra pattern."""
    for pattern in DEFAULT_EXCLUDE_PATTERNS:
        if glob_match(path, pattern):
            return True

    for pattern in extra_patterns:
        if glob_match(path, pattern):
            return True

    return False
