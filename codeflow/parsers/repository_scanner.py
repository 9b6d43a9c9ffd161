"""
JavaScript/TypeScript repository scanner
"""
import fnmatch
import os
from collections import defaultdict

from codeflow.config import load_config
from codeflow.errors import AnalysisError
from codeflow.models.file_analysis import SourceFile
from codeflow.parsers.source_analyzer import SourceAnalyzer
from codeflow.utils.language_detector import LanguageDetector


class RepositoryScanner:
    """Walk a repository and analyze every JavaScript/TypeScript file"""

    DEFAULT_IGNORE = {
        '.git', '.svn', 'node_modules', '__pycache__', '.venv', 'venv',
        'build', 'dist', '.idea', '.vscode', 'out', 'coverage',
        '.next', '.nuxt', '.cache', '.turbo', 'bower_components',
    }

    def __init__(self, config=None, analyzer=None, on_diagnostic=None):
        """
        Args:
            config: CodeflowConfig; loaded from the environment when None
            analyzer: SourceAnalyzer to use; built from config when None
            on_diagnostic: Optional callable(path, exception) for skipped files
        """
        self.config = config or load_config()
        self.analyzer = analyzer or SourceAnalyzer(strict=self.config.strict_parse)
        self.on_diagnostic = on_diagnostic
        self.files = []
        self.file_count = 0
        self.error_count = 0

        self.ignore_patterns = self.DEFAULT_IGNORE.copy()
        self.ignore_patterns.update(self.config.extra_ignore)

    def _log(self, message):
        if self.config.verbose:
            print(message)

    def should_ignore(self, path):
        """Check if path should be ignored"""
        basename = os.path.basename(path)

        if any(fnmatch.fnmatch(basename, pattern) for pattern in self.ignore_patterns):
            return True

        if basename.startswith('.') and basename != '.':
            return True

        return False

    def scan_repository(self, repo_path):
        """
        Scan a repository directory

        Args:
            repo_path: Repository root

        Returns:
            List of SourceFile objects in sorted walk order; files that
            failed to parse are included with ``analysis`` set to None
        """
        self._log(f"\nScanning repository: {repo_path}\n")
        self.files = []
        self.file_count = 0
        self.error_count = 0

        for root, dirs, files in os.walk(repo_path):
            dirs[:] = sorted(d for d in dirs if not self.should_ignore(os.path.join(root, d)))

            for filename in sorted(files):
                filepath = os.path.join(root, filename)

                if self.should_ignore(filepath):
                    continue

                language = LanguageDetector.detect(filepath)
                if not language:
                    continue

                if os.path.getsize(filepath) > self.config.max_file_bytes:
                    self._log(f"  [skip  ] Too large: {filepath}")
                    continue

                rel_path = os.path.relpath(filepath, repo_path).replace(os.sep, '/')
                self._log(f"  [{language:10}] Parsing: {rel_path}")
                self.files.append(self.scan_file(filepath, rel_path, language))

        self._print_scan_summary()
        return self.files

    def scan_file(self, filepath, rel_path, language):
        """Read and analyze a single file"""
        with open(filepath, 'r', encoding='utf-8', errors='replace') as f:
            content = f.read()

        source_file = SourceFile(path=rel_path, content=content, language=language)
        try:
            source_file.analysis = self.analyzer.analyze(rel_path, content, language=language)
            self.file_count += 1
        except AnalysisError as e:
            self._log(f"    ✗ Error: {e}")
            self.error_count += 1
            if self.on_diagnostic:
                self.on_diagnostic(rel_path, e)

        return source_file

    def _print_scan_summary(self):
        """Print scan summary"""
        stats = self.get_statistics()
        self._log(f"\n{'='*60}")
        self._log(f"✓ Successfully parsed: {self.file_count} files")
        self._log(f"✗ Errors: {self.error_count} files")
        self._log(f"✓ Total functions: {stats['total_functions']}")
        self._log(f"✓ Total endpoints: {stats['total_endpoints']}")
        self._log(f"{'='*60}\n")

    def get_statistics(self):
        """Get repository statistics"""
        stats = {
            'total_files': len(self.files),
            'parsed_files': self.file_count,
            'failed_files': self.error_count,
            'total_functions': 0,
            'total_endpoints': 0,
            'total_imports': 0,
            'by_language': defaultdict(lambda: {'files': 0, 'functions': 0, 'endpoints': 0}),
            'files': {},
        }

        for source_file in self.files:
            lang_stats = stats['by_language'][source_file.language]
            lang_stats['files'] += 1
            analysis = source_file.analysis
            if analysis is None:
                continue

            stats['total_functions'] += len(analysis.functions)
            stats['total_endpoints'] += len(analysis.endpoints)
            stats['total_imports'] += len(analysis.imports)
            lang_stats['functions'] += len(analysis.functions)
            lang_stats['endpoints'] += len(analysis.endpoints)
            stats['files'][source_file.path] = {
                'functions': len(analysis.functions),
                'endpoints': len(analysis.endpoints),
            }

        return stats
