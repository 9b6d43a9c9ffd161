"""
Single-file analysis: source text -> FileAnalysis
"""
from tree_sitter import Language, Parser
import tree_sitter_javascript as tsjavascript
import tree_sitter_typescript as tstypescript

from codeflow.errors import SourceParseError, UnsupportedLanguageError
from codeflow.extractors.javascript_extractor import JavascriptExtractor
from codeflow.utils.language_detector import LanguageDetector


class SourceAnalyzer:
    """Parse JavaScript/TypeScript sources with tree-sitter and extract their structure"""

    def __init__(self, strict=True):
        """
        Args:
            strict: Raise SourceParseError when the tree contains syntax errors
        """
        self.strict = strict
        self.parsers = {
            'javascript': Parser(Language(tsjavascript.language())),
            'typescript': Parser(Language(tstypescript.language_typescript())),
            'tsx': Parser(Language(tstypescript.language_tsx())),
        }
        self.extractor = JavascriptExtractor()

    def detect_language(self, path, content):
        language = LanguageDetector.detect(path)
        if not language:
            language = LanguageDetector.detect_from_content(content)
        return language

    def analyze(self, path, content, language=None):
        """
        Analyze one file

        Strict analyzers (the default) reject a file whose tree has any
        syntax error; construct with strict=False to extract what the
        parser recovered instead.

        Args:
            path: '/'-separated file path, stored on the result
            content: Source text
            language: Grammar override ('javascript', 'typescript', 'tsx')

        Returns:
            FileAnalysis

        Raises:
            UnsupportedLanguageError: No grammar matches the file
            SourceParseError: Strict mode and the source has syntax errors
        """
        language = language or self.detect_language(path, content)
        if language not in self.parsers:
            raise UnsupportedLanguageError(path, "not a JavaScript or TypeScript source")

        source_code = content.encode('utf-8')
        tree = self.parsers[language].parse(source_code)

        if self.strict and tree.root_node.has_error:
            raise SourceParseError(path, _first_error_line(tree.root_node))

        return self.extractor.extract(tree.root_node, source_code, path)


def _first_error_line(node):
    # Follow the error path down; error subtrees can be as deep as the source nests
    while node.type != 'ERROR' and not node.is_missing:
        child = next((c for c in node.children if c.has_error or c.is_missing), None)
        if child is None:
            break
        node = child
    return node.start_point[0] + 1


_default_analyzer = None


def analyze(path, content):
    """Analyze with a shared strict SourceAnalyzer"""
    global _default_analyzer
    if _default_analyzer is None:
        _default_analyzer = SourceAnalyzer()
    return _default_analyzer.analyze(path, content)
