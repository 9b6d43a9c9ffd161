"""
Cross-file resolution and flow-path generation
"""
from .resolver import CrossFileResolver, Definition
from .path_generator import FlowPathGenerator, StartType, generate_path

__all__ = [
    'CrossFileResolver',
    'Definition',
    'FlowPathGenerator',
    'StartType',
    'generate_path'
]
