"""Tests for dead code detection."""

import pytest

from conftest import function_node, rel
from graph_hunter.analyzers.dead_code import find_dead_code, is_entry_point_file, is_entry_point_function
from graph_hunter.exceptions import InvalidPatternError


class TestEntryPoints:
    """Test entry point heuristics."""

    @pytest.mark.parametrize("path", [
        "src/index.ts", "index.js", "src/main.ts", "app.js",
        "src/a.test.tsx", "src/a.spec.py", "src/__tests__/helpers.ts",
    ])
    def test_entry_point_files(self, path):
        assert is_entry_point_file(path)

    @pytest.mark.parametrize("path", ["src/indexer.ts", "src/main.tsx", "src/utils.ts", ""])
    def test_regular_files(self, path):
        assert not is_entry_point_file(path)

    @pytest.mark.parametrize("name", ["main", "Main", "RUN", "handler", "get", "Post", "default"])
    def test_entry_point_names(self, name):
        assert is_entry_point_function(name)

    @pytest.mark.parametrize("name", ["mainLoop", "runner", "helper", "anonymous"])
    def test_regular_names(self, name):
        assert not is_entry_point_function(name)


class TestFindDeadCode:
    """Test find_dead_code."""

    def test_uncalled_function_is_reported(self, make_graph):
        graph = make_graph([
            function_node("f1", "unusedHelper", "src/utils.ts", startLine=10, endLine=20),
        ])
        dead = find_dead_code(graph)

        assert len(dead) == 1
        assert dead[0].id == "f1"
        assert dead[0].name == "unusedHelper"
        assert dead[0].file_path == "src/utils.ts"
        assert dead[0].start_line == 10
        assert dead[0].end_line == 20

    def test_exported_function_is_skipped(self, make_graph):
        graph = make_graph([function_node("f1", "unusedHelper", "src/utils.ts", isExported=True)])
        assert find_dead_code(graph) == []

        graph = make_graph([function_node("f1", "unusedHelper", "src/utils.ts", exported=True)])
        assert find_dead_code(graph) == []

    def test_truthy_but_not_true_export_flag_is_not_exported(self, make_graph):
        graph = make_graph([function_node("f1", "unusedHelper", "src/utils.ts", exported="yes")])
        assert len(find_dead_code(graph)) == 1

    def test_called_function_is_skipped(self, make_graph):
        graph = make_graph(
            [
                function_node("caller", "process", "src/a.ts"),
                function_node("callee", "helper", "src/b.ts"),
            ],
            [rel("caller", "callee", "calls")]
        )
        assert [dc.id for dc in find_dead_code(graph)] == ["caller"]

    def test_only_exact_calls_count(self, make_graph):
        graph = make_graph(
            [
                function_node("caller", "process", "src/a.ts", exported=True),
                function_node("callee", "helper", "src/b.ts"),
            ],
            [rel("caller", "callee", "CALLS"), rel("caller", "callee", "imports")]
        )
        assert [dc.id for dc in find_dead_code(graph)] == ["callee"]

    def test_entry_point_file_and_name_are_skipped(self, make_graph):
        graph = make_graph([
            function_node("f1", "helper", "src/index.ts"),
            function_node("f2", "main", "src/cli.ts"),
            function_node("f3", "GET", "src/routes/users.ts"),
        ])
        assert find_dead_code(graph) == []

    def test_ignored_files_are_skipped(self, make_graph):
        graph = make_graph([
            function_node("f1", "helper", "node_modules/lib/a.js"),
            function_node("f2", "helper", "src/__mocks__/api.ts"),
        ])
        assert find_dead_code(graph) == []

    def test_custom_ignore_patterns(self, make_graph):
        graph = make_graph([function_node("f1", "helper", "src/generated/api.ts")])

        assert len(find_dead_code(graph)) == 1
        assert find_dead_code(graph, ["**/generated/**"]) == []

    def test_non_function_nodes_are_skipped(self, make_graph):
        graph = make_graph([{"id": "c", "labels": ["Class"], "properties": {"name": "Thing"}}])
        assert find_dead_code(graph) == []

    def test_missing_properties_fall_back(self, make_graph):
        graph = make_graph([{"id": "f1", "labels": ["Function"], "properties": {"file": "src/a.ts"}}])
        dead = find_dead_code(graph)

        assert dead[0].name == "anonymous"
        assert dead[0].file_path == "src/a.ts"
        assert dead[0].start_line is None

    def test_invalid_ignore_pattern_raises(self, make_graph):
        graph = make_graph([function_node("f1", "helper", "src/a.ts")])
        with pytest.raises(InvalidPatternError):
            find_dead_code(graph, ["[broken"])

    def test_more_ignore_patterns_never_add_findings(self, make_graph):
        graph = make_graph([
            function_node("f1", "a", "src/a.ts"),
            function_node("f2", "b", "lib/b.ts"),
            function_node("f3", "c", "lib/c.ts"),
        ])
        counts = [len(find_dead_code(graph, p)) for p in ([], ["lib/b.ts"], ["lib/**"], ["**"])]
        assert counts == [3, 2, 1, 0]
