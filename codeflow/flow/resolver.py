"""
Cross-file resolution of called or imported symbols
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Definition:
    """Where a function is defined: file path + function name"""
    file: str
    func: str


def file_name(path):
    return path.split('/')[-1]


class CrossFileResolver:
    """
    Map a symbol referenced in one file to the file that defines it

    Matching is by name only: import specifiers are reduced to their last
    path segment and compared as a prefix of file names. Path aliases,
    barrel re-exports and extension disambiguation are not handled.
    """

    def __init__(self, files):
        """
        Args:
            files: FileAnalysis objects, in file-set order
        """
        self.files = list(files)

    def resolve_definition(self, current_analysis, current_path, symbol_name):
        """
        Resolve symbol_name as seen from current_path

        Args:
            current_analysis: FileAnalysis of the referencing file (may be None)
            current_path: Path of the referencing file
            symbol_name: Called or imported identifier

        Returns:
            Definition, or None when nothing matches
        """
        if current_analysis is None:
            return None

        # Local definitions win over imports
        if current_analysis.has_function(symbol_name):
            return Definition(file=current_path, func=symbol_name)

        import_info = next(
            (i for i in current_analysis.imports if i.binds(symbol_name)), None
        )
        if import_info is None:
            return None

        # './controllers/authController' -> 'authController'
        module_name = import_info.module_specifier.split('/')[-1]
        for analysis in self.files:
            if file_name(analysis.path).startswith(module_name):
                return Definition(file=analysis.path, func=symbol_name)

        return None

    def find_defining_file(self, func_name):
        """First file (in file-set order) that defines func_name, or None"""
        for analysis in self.files:
            if analysis.has_function(func_name):
                return analysis
        return None
