"""
Exception types raised by the file finder.

Fatal conditions (missing root, failed directory enumeration, bad regex,
reuse of a consumed Finder) are raised to the caller. Metadata failures
inside size predicates never surface here; they simply make the predicate
return False.
"""

from typing import Optional


class FinderError(Exception):
    """Base class for all errors raised by filefinder."""
    pass


class RootNotFoundError(FinderError, FileNotFoundError):
    """Raised when the search root does not exist at traversal start."""

    def __init__(self, root: str):
        self.root = root
        super().__init__(f"Root directory {root} does not exist.")


class TraversalIOError(FinderError, OSError):
    """
    Raised when enumerating a directory fails mid-traversal.

    Attributes:
        path: Directory whose enumeration failed
        cause: The underlying OSError
    """

    def __init__(self, path: str, cause: Optional[OSError] = None):
        self.path = path
        self.cause = cause
        reason = cause.strerror if cause is not None and cause.strerror else cause
        super().__init__(f"Cannot read directory {path}: {reason}")


class InvalidPatternError(FinderError, ValueError):
    """Raised when a regex filter fails to compile."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid regex pattern '{pattern}': {reason}")


class FinderConsumedError(FinderError, RuntimeError):
    """Raised when a Finder is used again after a terminal operation."""
    pass
