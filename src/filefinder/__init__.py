"""
filefinder - Core Package

A small file-finding library: walk a directory tree breadth-first up to a
bounded depth and collect the files that satisfy every configured predicate.
"""

from .errors import (
    FinderError,
    RootNotFoundError,
    TraversalIOError,
    InvalidPatternError,
    FinderConsumedError
)
from .finder import Finder

__version__ = "0.1.0"
__author__ = "filefinder Team"

__all__ = [
    'Finder',
    'FinderError',
    'RootNotFoundError',
    'TraversalIOError',
    'InvalidPatternError',
    'FinderConsumedError'
]
