"""
Language detection utility for source files
"""
import os
import re


class LanguageDetector:
    """Detect the grammar to use from file extension, falling back to content"""

    LANGUAGE_MAP = {
        '.js': 'javascript',
        '.jsx': 'javascript',
        '.mjs': 'javascript',
        '.cjs': 'javascript',
        '.ts': 'typescript',
        '.mts': 'typescript',
        '.cts': 'typescript',
        '.tsx': 'tsx',
    }

    TYPESCRIPT_PATTERNS = [
        re.compile(r':\s*(string|number|boolean|any|void|never|unknown)\b'),
        re.compile(r'\binterface\s+\w+'),
        re.compile(r'\btype\s+\w+\s*='),
        re.compile(r'\benum\s+\w+'),
        re.compile(r'\bimport\s+type\b'),
    ]

    JAVASCRIPT_PATTERNS = [
        re.compile(r'\bfunction\s+\w+'),
        re.compile(r'\bconst\s+\w+\s*='),
        re.compile(r'\blet\s+\w+\s*='),
        re.compile(r'\bimport\s+.*from\s+[\'"]'),
        re.compile(r'\bexport\s+(default\s+)?'),
    ]

    @staticmethod
    def detect(filepath):
        """
        Detect language from file extension

        Args:
            filepath: Path to the source file

        Returns:
            'javascript', 'typescript', 'tsx' or None if not supported
        """
        _, ext = os.path.splitext(filepath)
        return LanguageDetector.LANGUAGE_MAP.get(ext.lower())

    @staticmethod
    def detect_from_content(content):
        """Guess the language of extension-less content, or None"""
        if any(p.search(content) for p in LanguageDetector.TYPESCRIPT_PATTERNS):
            return 'typescript'
        if any(p.search(content) for p in LanguageDetector.JAVASCRIPT_PATTERNS):
            return 'javascript'
        return None

    @staticmethod
    def is_supported(filepath):
        return LanguageDetector.detect(filepath) is not None
