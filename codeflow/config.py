"""
Runtime configuration read from the environment (and a local .env)
"""
import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

_TRUE_VALUES = {'1', 'true', 'yes', 'on'}
_FALSE_VALUES = {'0', 'false', 'no', 'off'}


@dataclass
class CodeflowConfig:
    """Codeflow settings"""
    strict_parse: bool = True  # reject trees containing syntax errors
    trace_plain_lines: bool = True  # emit highlight-line steps for lines without calls
    max_file_bytes: int = 1_000_000
    extra_ignore: List[str] = field(default_factory=list)
    verbose: bool = False


def _env_bool(name, default):
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    value = value.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {value!r}")


def _env_int(name, default):
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}")


def load_config(dotenv_path=None):
    """
    Build a CodeflowConfig from CODEFLOW_* environment variables

    Args:
        dotenv_path: Optional .env file; the default search is used when None

    Returns:
        CodeflowConfig
    """
    load_dotenv(dotenv_path)

    extra_ignore = os.getenv('CODEFLOW_EXTRA_IGNORE', '')

    return CodeflowConfig(
        strict_parse=_env_bool('CODEFLOW_STRICT_PARSE', True),
        trace_plain_lines=_env_bool('CODEFLOW_TRACE_PLAIN_LINES', True),
        max_file_bytes=_env_int('CODEFLOW_MAX_FILE_BYTES', 1_000_000),
        extra_ignore=[p.strip() for p in extra_ignore.split(',') if p.strip()],
        verbose=_env_bool('CODEFLOW_VERBOSE', False),
    )
