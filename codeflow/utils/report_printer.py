"""
Report printing utilities for repository analysis and flow traces
"""


class ReportPrinter:
    """Print various reports and summaries"""

    @staticmethod
    def print_summary(stats):
        """Print a summary of the scan"""
        print("\n" + "="*70)
        print("REPOSITORY SUMMARY")
        print("="*70)
        print(f"Total Files: {stats['total_files']}")
        print(f"Parsed Files: {stats['parsed_files']}")
        print(f"Failed Files: {stats['failed_files']}")
        print(f"Total Functions: {stats['total_functions']}")
        print(f"Total Endpoints: {stats['total_endpoints']}")
        print(f"Total Imports: {stats['total_imports']}")

        print("\nBy Language:")
        for lang, counts in stats['by_language'].items():
            print(f"\n  {lang.upper()}:")
            print(f"    Files: {counts['files']}")
            print(f"    Functions: {counts['functions']}")
            print(f"    Endpoints: {counts['endpoints']}")

        print("\nTop 10 Files by Function Count:")
        sorted_files = sorted(
            stats['files'].items(),
            key=lambda x: x[1]['functions'],
            reverse=True
        )[:10]

        for filepath, counts in sorted_files:
            print(f"  {filepath}: {counts['functions']} functions, {counts['endpoints']} endpoints")

    @staticmethod
    def print_function_details(func_name, results, call_graph):
        """Print details for a specific function"""
        if not results:
            print(f"\nNo function named '{func_name}' found.")
            return

        print(f"\n{'='*70}")
        print(f"FUNCTION DETAILS: {func_name}")
        print(f"{'='*70}")

        for path, func in results:
            callers = [
                caller for callee, callers in call_graph.items()
                if callee.file == path and callee.func == func.name
                for caller in callers
            ]

            print(f"\n{path}::{func.name}")
            print(f"  Lines: {func.start_line}-{func.end_line}")
            print(f"  Returns at: {func.returns}")
            print(f"  Calls: {len(func.calls)}")
            for call in func.calls[:10]:
                print(f"    -> {call.name} (line {call.line})")
            if len(func.calls) > 10:
                print(f"    ... and {len(func.calls) - 10} more")
            print(f"  Called by: {len(callers)} functions")
            for caller in callers[:10]:
                print(f"    <- {caller.file}::{caller.func}")
            if len(callers) > 10:
                print(f"    ... and {len(callers) - 10} more")

    @staticmethod
    def print_endpoints(analyses):
        """Print every detected endpoint grouped by file"""
        print("\n" + "="*70)
        print("ENDPOINTS")
        print("="*70)

        for analysis in sorted(analyses, key=lambda a: a.path):
            if not analysis.endpoints:
                continue
            print(f"\n{analysis.path}:")
            for endpoint in analysis.endpoints:
                print(f"  • {endpoint.method.upper():6} {endpoint.path} -> {endpoint.handler} [{endpoint.line}]")

    @staticmethod
    def print_flow(steps):
        """Print a flow step list, one step per line"""
        if not steps:
            print("\nNothing to animate.")
            return

        print(f"\n{'='*70}")
        print(f"FLOW ({len(steps)} steps)")
        print(f"{'='*70}")

        for index, step in enumerate(steps, 1):
            print(f"{index:4}. {ReportPrinter.describe_step(step)}")

    @staticmethod
    def describe_step(step):
        if step.type == 'highlight-def':
            return f"enter   {step.file}::{step.func}"
        if step.type == 'highlight-call':
            return f"call    {step.file}:{step.line}"
        if step.type == 'highlight-line':
            return f"line    {step.file}:{step.line}"
        if step.type == 'highlight-return':
            return f"returns {step.file} {step.lines}"
        if step.type == 'highlight-endpoint':
            return f"route   {step.file}:{step.line}"
        if step.type == 'animate-edge':
            return f"  ->    {step.from_file}:{step.from_line} => {step.to_file}::{step.to_func}"
        if step.type == 'return-edge':
            return f"  <-    {step.from_file}::{step.from_func} => {step.to_file}:{step.to_line}"
        return step.type
