"""
Base extractor class for language-specific code extractors
"""
from abc import ABC, abstractmethod


class BaseExtractor(ABC):
    """
    Abstract base class for language-specific extractors

    Extractors hold no per-file state: every call to ``extract`` builds
    and returns a fresh FileAnalysis.
    """

    @abstractmethod
    def extract(self, root_node, source_code, filepath):
        """
        Extract the structural model of one file

        Args:
            root_node: Tree-sitter root node
            source_code: Source code bytes
            filepath: Relative file path

        Returns:
            FileAnalysis
        """
        pass

    @abstractmethod
    def find_calls(self, func_node, source_code):
        """
        Find calls within a function, without entering nested functions

        Args:
            func_node: Tree-sitter function node
            source_code: Source code bytes

        Returns:
            List of CallInfo objects in source order
        """
        pass

    @abstractmethod
    def find_returns(self, func_node, source_code):
        """
        Find return points within a function, without entering nested functions

        Args:
            func_node: Tree-sitter function node
            source_code: Source code bytes

        Returns:
            List of 1-based line numbers
        """
        pass

    @abstractmethod
    def find_endpoints(self, root_node, source_code):
        """
        Find HTTP route registrations anywhere in the file

        Args:
            root_node: Tree-sitter root node
            source_code: Source code bytes

        Returns:
            List of EndpointInfo objects
        """
        pass

    @staticmethod
    def node_text(node, source_code):
        return source_code[node.start_byte:node.end_byte].decode('utf-8')

    @staticmethod
    def start_line(node):
        return node.start_point[0] + 1

    @staticmethod
    def end_line(node):
        return node.end_point[0] + 1
