"""
Flow-path generation: a depth-first, line-by-line walk across functions and files
"""
from codeflow.flow.resolver import CrossFileResolver
from codeflow.models.flow_step import (
    AnimateCallEdge,
    AnimateReturnEdge,
    HighlightCall,
    HighlightDefinition,
    HighlightEndpoint,
    HighlightLine,
    HighlightReturn,
)


class StartType:
    FUNCTION = 'function'
    ENDPOINT = 'endpoint'

    ALL = (FUNCTION, ENDPOINT)


class FlowPathGenerator:
    """
    Build the ordered step list the renderer animates

    Steps follow a simulated single-threaded execution: each function is
    entered once per traversal, its lines are visited in ascending order,
    and every resolved call is followed into the callee before the caller
    continues. Lookup misses end a branch silently.
    """

    def __init__(self, files, include_plain_lines=True):
        """
        Args:
            files: FileAnalysis objects, in file-set order
            include_plain_lines: Emit a highlight-line step for lines without calls
        """
        self.files = list(files)
        self.include_plain_lines = include_plain_lines
        self.resolver = CrossFileResolver(self.files)
        self._by_path = {}
        for analysis in self.files:
            self._by_path.setdefault(analysis.path, analysis)

    def generate_path(self, start_file, start_symbol, start_type=StartType.FUNCTION):
        """
        Generate steps starting from a function or an endpoint

        Args:
            start_file: Path of the file holding the start symbol
            start_symbol: Function name, or route path for endpoints
            start_type: StartType.FUNCTION or StartType.ENDPOINT

        Returns:
            List of FlowStep objects; empty when there is nothing to animate
        """
        steps = []
        visited = set()

        if start_type == StartType.FUNCTION:
            self._traverse(start_file, start_symbol, steps, visited)
        elif start_type == StartType.ENDPOINT:
            self._traverse_endpoint(start_file, start_symbol, steps, visited)
        else:
            raise ValueError(f"Unknown start type: {start_type!r}")

        return steps

    def _traverse(self, start_file, start_func, steps, visited):
        # One generator per active function; a yielded callee is entered
        # before the caller resumes, without growing the Python stack
        stack = [self._visit(start_file, start_func, steps, visited)]
        while stack:
            try:
                callee_file, callee_func = next(stack[-1])
            except StopIteration:
                stack.pop()
                continue
            stack.append(self._visit(callee_file, callee_func, steps, visited))

    def _visit(self, current_file, current_func, steps, visited):
        """Emit one function's steps, yielding (file, func) for each callee to enter"""
        key = (current_file, current_func)
        if key in visited:
            return
        visited.add(key)

        analysis = self._by_path.get(current_file)
        func_info = analysis.get_function(current_func) if analysis else None
        if func_info is None:
            return

        steps.append(HighlightDefinition(file=current_file, func=current_func))

        for line in range(func_info.start_line, func_info.end_line + 1):
            calls = func_info.calls_at(line)
            if not calls:
                if self.include_plain_lines:
                    steps.append(HighlightLine(file=current_file, line=line))
                continue

            for call in calls:
                steps.append(HighlightCall(file=current_file, line=line))

                # First file defining the name wins, even if others do too
                target = self.resolver.find_defining_file(call.name)
                if target is None:
                    continue

                steps.append(AnimateCallEdge(
                    from_file=current_file,
                    to_file=target.path,
                    from_line=call.line,
                    to_func=call.name,
                ))

                yield target.path, call.name

                self._highlight_returns(target, call.name, steps)

                steps.append(AnimateReturnEdge(
                    from_file=target.path,
                    to_file=current_file,
                    from_func=call.name,
                    to_line=call.line,
                ))

                steps.append(HighlightDefinition(file=current_file, func=current_func))

    def _traverse_endpoint(self, start_file, route_path, steps, visited):
        analysis = self._by_path.get(start_file)
        endpoint = analysis.get_endpoint(route_path) if analysis else None
        if endpoint is None:
            return

        steps.append(HighlightEndpoint(file=start_file, line=endpoint.line))

        handler = self.resolver.resolve_definition(analysis, start_file, endpoint.handler)
        if handler is None:
            return

        steps.append(AnimateCallEdge(
            from_file=start_file,
            to_file=handler.file,
            from_line=endpoint.line,
            to_func=handler.func,
        ))

        self._traverse(handler.file, handler.func, steps, visited)

        handler_analysis = self._by_path.get(handler.file)
        if handler_analysis:
            self._highlight_returns(handler_analysis, handler.func, steps)

        steps.append(AnimateReturnEdge(
            from_file=handler.file,
            to_file=start_file,
            from_func=handler.func,
            to_line=endpoint.line,
        ))
        steps.append(HighlightEndpoint(file=start_file, line=endpoint.line))

    def _highlight_returns(self, analysis, func_name, steps):
        func_info = analysis.get_function(func_name)
        if func_info and func_info.returns:
            steps.append(HighlightReturn(file=analysis.path, lines=list(func_info.returns)))


def generate_path(files, start_file, start_symbol, start_type=StartType.FUNCTION,
                  include_plain_lines=True):
    """Convenience wrapper around FlowPathGenerator.generate_path"""
    generator = FlowPathGenerator(files, include_plain_lines=include_plain_lines)
    return generator.generate_path(start_file, start_symbol, start_type)
