"""
Structural model of a single analysed source file
"""
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class CallInfo:
    """A call site (or JSX component usage) inside a function"""
    name: str
    line: int


@dataclass
class FunctionInfo:
    """A module-level function, arrow function or function expression"""
    name: str
    start_line: int
    end_line: int
    calls: List[CallInfo] = field(default_factory=list)
    returns: List[int] = field(default_factory=list)  # 1-based lines

    def calls_at(self, line):
        """Calls recorded on a given line, in source order"""
        return [call for call in self.calls if call.line == line]


@dataclass
class EndpointInfo:
    """An HTTP route registration such as router.get('/users', getUsers)"""
    method: str  # 'get', 'post', 'put', 'delete', 'patch'
    path: str
    handler: str
    line: int


@dataclass
class ImportInfo:
    """One import declaration"""
    module_specifier: str
    default_import: Optional[str] = None
    named_imports: List[str] = field(default_factory=list)

    def binds(self, name):
        return name in self.named_imports or self.default_import == name


@dataclass
class FileAnalysis:
    """Functions, imports and endpoints extracted from one file"""
    path: str
    functions: List[FunctionInfo] = field(default_factory=list)
    imports: List[ImportInfo] = field(default_factory=list)
    endpoints: List[EndpointInfo] = field(default_factory=list)

    def get_function(self, name):
        for func in self.functions:
            if func.name == name:
                return func
        return None

    def has_function(self, name):
        return self.get_function(name) is not None

    def get_endpoint(self, route_path):
        for endpoint in self.endpoints:
            if endpoint.path == route_path:
                return endpoint
        return None


@dataclass
class SourceFile:
    """
    A file record as held by the workspace

    ``analysis`` is None when the content could not be parsed; the
    renderer then shows the raw text only.
    """
    path: str
    content: str
    language: Optional[str] = None
    analysis: Optional[FileAnalysis] = None

    @property
    def name(self):
        return self.path.split('/')[-1]
