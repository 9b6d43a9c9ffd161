"""
Command line interface: scan a repository, inspect functions, trace flows
"""
import argparse
import json
import sys
from dataclasses import asdict

from codeflow.config import load_config
from codeflow.errors import AnalysisError
from codeflow.flow.path_generator import StartType
from codeflow.models.flow_step import flow_steps_to_json
from codeflow.parsers.repository_scanner import RepositoryScanner
from codeflow.parsers.source_analyzer import SourceAnalyzer
from codeflow.utils.call_graph_builder import CallGraphBuilder
from codeflow.utils.node_search import NodeSearch
from codeflow.utils.report_printer import ReportPrinter
from codeflow.workspace import Workspace


def cmd_scan(args, config):
    scanner = RepositoryScanner(config=config)
    scanner.scan_repository(args.repo)
    ReportPrinter.print_summary(scanner.get_statistics())
    return 0


def cmd_function(args, config):
    workspace = Workspace.from_directory(args.repo, config=config)
    analyses = workspace.analyses()
    results = NodeSearch.search_function(analyses, args.name)
    if not results and args.prefix:
        results = NodeSearch.search_prefix(analyses, args.name)
    ReportPrinter.print_function_details(args.name, results, CallGraphBuilder.build_call_graph(analyses))
    return 0 if results else 1


def cmd_endpoints(args, config):
    workspace = Workspace.from_directory(args.repo, config=config)
    ReportPrinter.print_endpoints(workspace.analyses())
    return 0


def cmd_trace(args, config):
    workspace = Workspace.from_directory(args.repo, config=config)
    start_type = StartType.ENDPOINT if args.endpoint else StartType.FUNCTION
    include_plain_lines = False if args.no_plain_lines else None
    steps = workspace.track_flow(args.file, args.symbol, start_type, include_plain_lines=include_plain_lines)

    if args.json:
        print(flow_steps_to_json(steps, indent=2))
    else:
        ReportPrinter.print_flow(steps)
    return 0


def cmd_analyze(args, config):
    with open(args.file, 'r', encoding='utf-8') as f:
        content = f.read()

    analyzer = SourceAnalyzer(strict=config.strict_parse)
    try:
        analysis = analyzer.analyze(args.file.replace('\\', '/'), content)
    except AnalysisError as e:
        print(f"❌ Error: {e}")
        return 1

    if args.json:
        print(json.dumps(asdict(analysis), indent=2))
        return 0

    print(f"\n{analysis.path}")
    for func in analysis.functions:
        calls = ', '.join(f"{c.name}@{c.line}" for c in func.calls)
        print(f"  • {func.name} [{func.start_line}-{func.end_line}] calls: {calls or '-'} returns: {func.returns}")
    for imp in analysis.imports:
        names = ([imp.default_import] if imp.default_import else []) + imp.named_imports
        print(f"  ← {imp.module_specifier}: {', '.join(names) or '-'}")
    for endpoint in analysis.endpoints:
        print(f"  ⇢ {endpoint.method.upper()} {endpoint.path} -> {endpoint.handler} [{endpoint.line}]")
    return 0


def build_parser():
    parser = argparse.ArgumentParser(description="Static call-flow analysis for JavaScript/TypeScript repositories")
    parser.add_argument('--verbose', action='store_true', help='Print scan progress')
    parser.add_argument('--lenient', action='store_true', help='Analyze files with syntax errors anyway')
    subparsers = parser.add_subparsers(dest='command', required=True)

    scan = subparsers.add_parser('scan', help='Scan a repository and print a summary')
    scan.add_argument('repo', help='Repository path')
    scan.set_defaults(handler=cmd_scan)

    function = subparsers.add_parser('function', help='Show a function, its calls and callers')
    function.add_argument('repo', help='Repository path')
    function.add_argument('name', help='Function name')
    function.add_argument('--prefix', action='store_true', help='Fall back to prefix search')
    function.set_defaults(handler=cmd_function)

    endpoints = subparsers.add_parser('endpoints', help='List detected HTTP endpoints')
    endpoints.add_argument('repo', help='Repository path')
    endpoints.set_defaults(handler=cmd_endpoints)

    trace = subparsers.add_parser('trace', help='Generate the flow steps for a function or endpoint')
    trace.add_argument('repo', help='Repository path')
    trace.add_argument('file', help="Start file, relative to the repository ('/' separated)")
    trace.add_argument('symbol', help='Function name, or route path with --endpoint')
    trace.add_argument('--endpoint', action='store_true', help='Treat symbol as a route path')
    trace.add_argument('--json', action='store_true', help='Print steps as JSON')
    trace.add_argument('--no-plain-lines', action='store_true', help='Skip steps for lines without calls')
    trace.set_defaults(handler=cmd_trace)

    analyze = subparsers.add_parser('analyze', help='Analyze a single file')
    analyze.add_argument('file', help='Source file')
    analyze.add_argument('--json', action='store_true', help='Print the analysis as JSON')
    analyze.set_defaults(handler=cmd_analyze)

    return parser


def main(argv=None):
    """CLI entry point"""
    args = build_parser().parse_args(argv)

    config = load_config()
    if args.verbose:
        config.verbose = True
    if args.lenient:
        config.strict_parse = False

    return args.handler(args, config)


if __name__ == '__main__':
    sys.exit(main())
