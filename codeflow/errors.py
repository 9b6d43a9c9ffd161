"""
Exceptions raised while analysing source files
"""


class CodeflowError(Exception):
    """Base class for codeflow errors"""


class AnalysisError(CodeflowError):
    """A file could not be turned into a FileAnalysis"""

    def __init__(self, path, message):
        super().__init__(f"{path}: {message}")
        self.path = path


class UnsupportedLanguageError(AnalysisError):
    """No grammar is available for the file"""


class SourceParseError(AnalysisError):
    """The grammar rejected the source text"""

    def __init__(self, path, line):
        super().__init__(path, f"syntax error near line {line}")
        self.line = line
