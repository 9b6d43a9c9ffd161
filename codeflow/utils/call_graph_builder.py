"""
Call graph builder for building called-by relationships
"""
from collections import defaultdict

from codeflow.flow.resolver import CrossFileResolver, Definition


class CallGraphBuilder:
    """Build called_by relationships between functions"""

    @staticmethod
    def build_call_graph(analyses):
        """
        Build called_by relationships

        Call targets are resolved the way flow traversal resolves them:
        the first file defining a function with the called name.

        Args:
            analyses: FileAnalysis objects, in file-set order

        Returns:
            Dict mapping Definition -> list of calling Definitions
        """
        resolver = CrossFileResolver(analyses)
        called_by = defaultdict(list)

        for analysis in analyses:
            for func in analysis.functions:
                caller = Definition(file=analysis.path, func=func.name)
                for call in func.calls:
                    target = resolver.find_defining_file(call.name)
                    if target is None:
                        continue
                    callee = Definition(file=target.path, func=call.name)
                    if caller not in called_by[callee]:
                        called_by[callee].append(caller)

        return dict(called_by)
