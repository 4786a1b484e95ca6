"""
Data models for filefinder.

This module contains the configuration structures used by the finder and the
command-line tool.
"""

from .search_config import SearchConfig
from .config import FinderConfig

__all__ = ['SearchConfig', 'FinderConfig']
