"""
Function and endpoint search utilities
"""


class NodeSearch:
    """Search and query file analyses"""

    @staticmethod
    def search_function(analyses, func_name):
        """
        Search for functions by exact name

        Args:
            analyses: List of FileAnalysis objects
            func_name: Function name to search for

        Returns:
            List of (path, FunctionInfo) tuples
        """
        results = []
        for analysis in analyses:
            for func in analysis.functions:
                if func.name == func_name:
                    results.append((analysis.path, func))
        return results

    @staticmethod
    def search_prefix(analyses, prefix):
        """Case-insensitive function name prefix search, shorter names first"""
        prefix = prefix.lower()
        results = []
        for analysis in analyses:
            for func in analysis.functions:
                if func.name.lower().startswith(prefix):
                    results.append((analysis.path, func))
        return sorted(results, key=lambda r: (len(r[1].name), r[0], r[1].start_line))

    @staticmethod
    def search_endpoint(analyses, route_path, method=None):
        """
        Search for endpoints by route path

        Args:
            analyses: List of FileAnalysis objects
            route_path: Route path such as '/users'
            method: Optional HTTP method filter ('get', 'post', ...)

        Returns:
            List of (path, EndpointInfo) tuples
        """
        results = []
        for analysis in analyses:
            for endpoint in analysis.endpoints:
                if endpoint.path != route_path:
                    continue
                if method and endpoint.method != method.lower():
                    continue
                results.append((analysis.path, endpoint))
        return results
