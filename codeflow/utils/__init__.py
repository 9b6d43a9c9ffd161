"""
Utility modules
"""
from .language_detector import LanguageDetector
from .call_graph_builder import CallGraphBuilder
from .node_search import NodeSearch
from .report_printer import ReportPrinter

__all__ = [
    'LanguageDetector',
    'CallGraphBuilder',
    'NodeSearch',
    'ReportPrinter'
]
