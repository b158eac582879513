"""Tests for the ignore filter and glob matching."""

import pytest

from graph_hunter.exceptions import InvalidPatternError
from graph_hunter.graph.ignore import glob_match, should_ignore


class TestGlobMatch:
    """Test segment-aware glob semantics."""

    def test_globstar_matches_zero_segments(self):
        assert glob_match("node_modules/lodash/index.js", "**/node_modules/**")

    def test_globstar_matches_many_segments(self):
        assert glob_match("a/b/c/node_modules/x/y.js", "**/node_modules/**")

    def test_star_does_not_cross_separator(self):
        assert glob_match("src/a.ts", "src/*.ts")
        assert not glob_match("src/nested/a.ts", "src/*.ts")

    def test_question_mark_and_brackets(self):
        assert glob_match("src/a1.ts", "src/a?.ts")
        assert glob_match("src/b.ts", "src/[ab].ts")
        assert not glob_match("src/c.ts", "src/[ab].ts")

    def test_case_sensitive(self):
        assert not glob_match("SRC/a.ts", "src/*.ts")

    def test_backslash_paths(self):
        assert glob_match("src\\__tests__\\a.ts", "**/__tests__/**")

    def test_non_string_pattern_raises(self):
        with pytest.raises(InvalidPatternError):
            glob_match("src/a.ts", 42)

    def test_empty_pattern_raises(self):
        with pytest.raises(InvalidPatternError):
            glob_match("src/a.ts", "")

    def test_unbalanced_bracket_raises(self):
        with pytest.raises(InvalidPatternError) as exc_info:
            glob_match("src/a.ts", "src/[a.ts")
        assert isinstance(exc_info.value, ValueError)


class TestShouldIgnore:
    """Test default and custom exclusions."""

    def test_ignores_node_modules(self):
        assert should_ignore("node_modules/lodash/index.js")

    def test_ignores_build_output(self):
        assert should_ignore("dist/index.js")
        assert should_ignore("build/main.js")
        assert should_ignore("packages/core/target/out.js")

    def test_ignores_test_files(self):
        assert should_ignore("src/utils.test.ts")
        assert should_ignore("src/utils.spec.js")
        assert should_ignore("src/__tests__/utils.ts")
        assert should_ignore("src/__mocks__/fs.ts")

    def test_keeps_regular_sources(self):
        assert not should_ignore("src/utils.ts")
        assert not should_ignore("src/distance.ts")

    def test_custom_patterns(self):
        assert should_ignore("src/generated/api.ts", ["**/generated/**"])
        assert not should_ignore("src/utils.ts", ["**/generated/**"])

    def test_invalid_custom_pattern_propagates(self):
        with pytest.raises(InvalidPatternError):
            should_ignore("src/utils.ts", ["src/[oops"])

    def test_default_match_short_circuits_before_custom_patterns(self):
        assert should_ignore("node_modules/x.js", ["src/[oops"])
