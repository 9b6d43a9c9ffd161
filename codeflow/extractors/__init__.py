"""
Language-specific code extractors
"""
from .base_extractor import BaseExtractor
from .javascript_extractor import JavascriptExtractor

__all__ = [
    'BaseExtractor',
    'JavascriptExtractor'
]
