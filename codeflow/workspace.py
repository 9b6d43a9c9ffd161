"""
Repository state: file records, their analyses and flow requests
"""
from codeflow.config import load_config
from codeflow.errors import AnalysisError
from codeflow.flow.path_generator import FlowPathGenerator, StartType
from codeflow.models.file_analysis import SourceFile
from codeflow.parsers.repository_scanner import RepositoryScanner
from codeflow.parsers.source_analyzer import SourceAnalyzer


class Workspace:
    """
    Owns the file records of one repository

    Each edit re-parses the edited file and replaces its record; other
    files are untouched. Flow requests read a snapshot of the analyses
    taken when the request starts.
    """

    def __init__(self, config=None, analyzer=None, on_diagnostic=None):
        self.config = config or load_config()
        self.analyzer = analyzer or SourceAnalyzer(strict=self.config.strict_parse)
        self.on_diagnostic = on_diagnostic
        self._files = {}

    @classmethod
    def from_directory(cls, repo_path, config=None, on_diagnostic=None):
        """Build a workspace from every supported file under repo_path"""
        workspace = cls(config=config, on_diagnostic=on_diagnostic)
        scanner = RepositoryScanner(
            config=workspace.config,
            analyzer=workspace.analyzer,
            on_diagnostic=on_diagnostic,
        )
        for source_file in scanner.scan_repository(repo_path):
            workspace._files[source_file.path] = source_file
        return workspace

    @property
    def files(self):
        return list(self._files.values())

    def get_file(self, path):
        return self._files.get(_normalize(path))

    def add_file(self, path, content):
        """Add (or replace) a file and analyze it"""
        source_file = self._analyze(path, content)
        self._files[source_file.path] = source_file
        return source_file

    def update_file(self, path, content):
        """
        Replace a file's content and its analysis

        Raises:
            KeyError: The file is not part of the workspace
        """
        path = _normalize(path)
        if path not in self._files:
            raise KeyError(path)
        return self.add_file(path, content)

    def remove_file(self, path):
        return self._files.pop(_normalize(path), None)

    def analyses(self):
        """Snapshot of every available FileAnalysis, in file order"""
        return [f.analysis for f in self._files.values() if f.analysis is not None]

    def track_flow(self, start_file, start_symbol, start_type=StartType.FUNCTION,
                   include_plain_lines=None):
        """
        Generate flow steps for a user-requested trace

        Returns:
            List of FlowStep objects (empty when there is nothing to animate)
        """
        if include_plain_lines is None:
            include_plain_lines = self.config.trace_plain_lines
        generator = FlowPathGenerator(self.analyses(), include_plain_lines=include_plain_lines)
        return generator.generate_path(_normalize(start_file), start_symbol, start_type)

    def _analyze(self, path, content):
        path = _normalize(path)
        source_file = SourceFile(
            path=path,
            content=content,
            language=self.analyzer.detect_language(path, content),
        )
        try:
            source_file.analysis = self.analyzer.analyze(path, content, language=source_file.language)
        except AnalysisError as e:
            if self.on_diagnostic:
                self.on_diagnostic(path, e)
        return source_file


def _normalize(path):
    return path.replace('\\', '/')
