"""
Configuration management package for filefinder.

This package loads and validates the YAML file holding default search
options for the command-line tool.
"""

from .parser import (
    ConfigParser,
    ConfigParseResult,
    ConfigurationError,
    load_config
)

__all__ = [
    'ConfigParser',
    'ConfigParseResult',
    'ConfigurationError',
    'load_config'
]
