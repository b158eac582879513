"""Tests for path normalization and resolution."""

from graph_hunter.graph.models import GraphNode
from graph_hunter.graph.paths import effective_path, has_extension, normalize_path, resolve_path


class TestNormalizePath:
    """Test separator normalization."""

    def test_converts_backslashes(self):
        assert normalize_path("src\\utils\\a.ts") == "src/utils/a.ts"

    def test_leaves_forward_slashes(self):
        assert normalize_path("src/a.ts") == "src/a.ts"

    def test_empty_string(self):
        assert normalize_path("") == ""


class TestResolvePath:
    """Test extension and index resolution against known paths."""

    def test_literal_match(self):
        assert resolve_path("src/a.ts", {"src/a.ts"}) == "src/a.ts"

    def test_literal_match_after_normalizing(self):
        assert resolve_path("src\\a.ts", {"src/a.ts"}) == "src/a.ts"

    def test_appends_extension(self):
        assert resolve_path("src/a", {"src/a.tsx"}) == "src/a.tsx"

    def test_resolves_directory_index(self):
        assert resolve_path("src/utils", {"src/utils/index.js"}) == "src/utils/index.js"

    def test_extension_order(self):
        known = {"src/a.js", "src/a.ts", "src/a/index.ts"}
        assert resolve_path("src/a", known) == "src/a.ts"

    def test_direct_extension_before_index_of_same_ext(self):
        known = {"src/a/index.ts", "src/a.ts"}
        assert resolve_path("src/a", known) == "src/a.ts"

    def test_index_of_earlier_extension_wins_over_later_extension(self):
        known = {"src/a/index.ts", "src/a.js"}
        assert resolve_path("src/a", known) == "src/a/index.ts"

    def test_candidate_with_extension_is_not_expanded(self):
        assert resolve_path("src/a.mjs", {"src/a.mjs.ts"}) is None

    def test_no_match(self):
        assert resolve_path("src/missing", {"src/a.ts"}) is None

    def test_accepts_any_iterable(self):
        assert resolve_path("src/a", ["src/a.cjs"]) == "src/a.cjs"


class TestEffectivePath:
    """Test ordered property lookup."""

    def test_prefers_file_path(self):
        node = GraphNode(id="n1", properties={"filePath": "a.ts", "path": "b.ts", "name": "c"})
        assert effective_path(node) == "a.ts"

    def test_falls_through_empty_values(self):
        node = GraphNode(id="n1", properties={"filePath": "", "path": None, "file": "c.ts"})
        assert effective_path(node) == "c.ts"

    def test_uses_name(self):
        node = GraphNode(id="n1", properties={"name": "src/mod"})
        assert effective_path(node) == "src/mod"

    def test_falls_back_to_id(self):
        node = GraphNode(id="src/fallback.ts")
        assert effective_path(node) == "src/fallback.ts"


def test_has_extension():
    assert has_extension("src/a.ts")
    assert not has_extension("src/a")
    assert not has_extension("src.d/a")
