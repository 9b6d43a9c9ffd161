"""Tests for the workspace (repository state, edits, flow requests)."""

import pytest

from codeflow.config import CodeflowConfig
from codeflow.errors import SourceParseError
from codeflow.flow.path_generator import StartType
from codeflow.workspace import Workspace


@pytest.fixture
def workspace(analyzer):
    return Workspace(config=CodeflowConfig(), analyzer=analyzer)


class TestFileRecords:

    def test_add_file(self, workspace):
        source_file = workspace.add_file("src/app.js", "function main() { run(); }\n")
        assert source_file.name == "app.js"
        assert source_file.language == "javascript"
        assert [f.name for f in source_file.analysis.functions] == ["main"]
        assert workspace.get_file("src/app.js") is source_file

    def test_windows_separators_are_normalized(self, workspace):
        source_file = workspace.add_file("src\\app.js", "function main() {}\n")
        assert source_file.path == "src/app.js"
        assert source_file.analysis.path == "src/app.js"

    def test_lookup_and_remove_accept_windows_separators(self, workspace):
        workspace.add_file("src/app.js", "function main() {}\n")
        assert workspace.get_file("src\\app.js").path == "src/app.js"
        assert workspace.remove_file("src\\app.js").path == "src/app.js"
        assert workspace.files == []

    def test_parse_failure_keeps_analysis_less_record(self, analyzer):
        diagnostics = []
        workspace = Workspace(
            config=CodeflowConfig(),
            analyzer=analyzer,
            on_diagnostic=lambda path, error: diagnostics.append((path, error)),
        )
        source_file = workspace.add_file("broken.js", "function broken( {\n")
        assert source_file.analysis is None
        assert source_file.content == "function broken( {\n"
        assert workspace.analyses() == []
        assert len(diagnostics) == 1
        assert diagnostics[0][0] == "broken.js"
        assert isinstance(diagnostics[0][1], SourceParseError)

    def test_parse_failure_is_silent_by_default(self, workspace):
        assert workspace.add_file("notes.txt", "plain words").analysis is None

    def test_update_replaces_analysis(self, workspace):
        workspace.add_file("a.js", "function one() {}\n")
        before = workspace.get_file("a.js").analysis

        workspace.update_file("a.js", "function two() {}\nfunction three() {}\n")
        after = workspace.get_file("a.js").analysis

        assert after is not before
        assert [f.name for f in after.functions] == ["two", "three"]

    def test_update_other_file_untouched(self, workspace):
        workspace.add_file("a.js", "function one() {}\n")
        workspace.add_file("b.js", "function two() {}\n")
        untouched = workspace.get_file("b.js")
        workspace.update_file("a.js", "function uno() {}\n")
        assert workspace.get_file("b.js") is untouched

    def test_update_unknown_file(self, workspace):
        with pytest.raises(KeyError):
            workspace.update_file("missing.js", "")

    def test_remove_file(self, workspace):
        workspace.add_file("a.js", "function one() {}\n")
        assert workspace.remove_file("a.js").path == "a.js"
        assert workspace.files == []
        assert workspace.remove_file("a.js") is None


class TestTrackFlow:

    def test_edit_changes_the_flow(self, workspace):
        workspace.add_file("main.js", "function main() {\n  step();\n}\n")
        workspace.add_file("lib.js", "export function step() {}\nexport function other() {}\n")

        steps = workspace.track_flow("main.js", "main", include_plain_lines=False)
        assert [s.to_func for s in steps if s.type == "animate-edge"] == ["step"]

        workspace.update_file("main.js", "function main() {\n  other();\n}\n")
        steps = workspace.track_flow("main.js", "main", include_plain_lines=False)
        assert [s.to_func for s in steps if s.type == "animate-edge"] == ["other"]

    def test_plain_lines_follow_config(self, analyzer):
        workspace = Workspace(config=CodeflowConfig(trace_plain_lines=False), analyzer=analyzer)
        workspace.add_file("main.js", "function main() {\n  let x = 1;\n}\n")
        steps = workspace.track_flow("main.js", "main")
        assert [s.type for s in steps] == ["highlight-def"]

    def test_endpoint_from_directory(self, express_repo, config):
        workspace = Workspace.from_directory(str(express_repo), config=config)
        steps = workspace.track_flow(
            "src/routes.ts", "/users", StartType.ENDPOINT, include_plain_lines=False
        )
        types = [s.type for s in steps]
        assert types[0] == "highlight-endpoint"
        assert types[-1] == "highlight-endpoint"

        edges = [s for s in steps if s.type == "animate-edge"]
        assert [(e.from_file, e.to_file, e.to_func) for e in edges] == [
            ("src/routes.ts", "src/controllers/userController.ts", "getUsers"),
            ("src/controllers/userController.ts", "src/db.ts", "findAll"),
            ("src/db.ts", "src/db.ts", "query"),
        ]

    def test_nothing_to_animate(self, workspace):
        assert workspace.track_flow("main.js", "main") == []

    def test_deep_call_chain(self, workspace):
        depth = 1100
        source = "".join(f"function f{i}() {{ f{i + 1}(); }}\n" for i in range(depth))
        workspace.add_file("chain.js", source)
        steps = workspace.track_flow("chain.js", "f0", include_plain_lines=False)
        # f{depth} is called but never defined
        assert sum(1 for s in steps if s.type == "animate-edge") == depth - 1
        assert steps[-1].type == "highlight-def"
