"""Tests for language detection, search and call graph utilities."""

from codeflow.flow.resolver import Definition
from codeflow.models.file_analysis import CallInfo, EndpointInfo, FileAnalysis, FunctionInfo
from codeflow.utils import CallGraphBuilder, LanguageDetector, NodeSearch


def sample_analyses():
    return [
        FileAnalysis(path="a.ts", functions=[
            FunctionInfo(name="main", start_line=1, end_line=5,
                         calls=[CallInfo("load", 2), CallInfo("load", 3), CallInfo("log", 4)]),
            FunctionInfo(name="loadAll", start_line=7, end_line=9, calls=[CallInfo("load", 8)]),
        ], endpoints=[EndpointInfo(method="get", path="/items", handler="main", line=11)]),
        FileAnalysis(path="b.ts", functions=[
            FunctionInfo(name="load", start_line=1, end_line=2),
        ], endpoints=[EndpointInfo(method="post", path="/items", handler="create", line=4)]),
    ]


class TestLanguageDetector:

    def test_extensions(self):
        assert LanguageDetector.detect("a/b.js") == "javascript"
        assert LanguageDetector.detect("a/b.JSX") == "javascript"
        assert LanguageDetector.detect("a/b.mjs") == "javascript"
        assert LanguageDetector.detect("a/b.ts") == "typescript"
        assert LanguageDetector.detect("a/b.tsx") == "tsx"
        assert LanguageDetector.detect("a/b.py") is None

    def test_content(self):
        assert LanguageDetector.detect_from_content("interface User { id: number }") == "typescript"
        assert LanguageDetector.detect_from_content("export default app") == "javascript"
        assert LanguageDetector.detect_from_content("hello") is None


class TestNodeSearch:

    def test_search_function(self):
        results = NodeSearch.search_function(sample_analyses(), "load")
        assert [(path, func.name) for path, func in results] == [("b.ts", "load")]

    def test_search_prefix(self):
        results = NodeSearch.search_prefix(sample_analyses(), "LOA")
        assert [(path, func.name) for path, func in results] == [("b.ts", "load"), ("a.ts", "loadAll")]

    def test_search_endpoint(self):
        analyses = sample_analyses()
        assert [path for path, _ in NodeSearch.search_endpoint(analyses, "/items")] == ["a.ts", "b.ts"]
        assert [e.handler for _, e in NodeSearch.search_endpoint(analyses, "/items", method="POST")] == ["create"]


class TestCallGraphBuilder:

    def test_called_by(self):
        graph = CallGraphBuilder.build_call_graph(sample_analyses())
        assert graph == {
            Definition("b.ts", "load"): [Definition("a.ts", "main"), Definition("a.ts", "loadAll")],
        }
