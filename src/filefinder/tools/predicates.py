"""
Predicate constructors for the file finder.

Every predicate is a plain callable taking a file path string and returning
a bool. Built-in predicates that read filesystem metadata treat a failed
lookup as "does not match" instead of raising.
"""

import os
import re
import logging
from typing import Callable, Optional, Sequence

from ..errors import InvalidPatternError


logger = logging.getLogger(__name__)

Predicate = Callable[[str], bool]


def has_extension(ext: str) -> Predicate:
    """Match paths ending with ``ext`` exactly (case-sensitive)."""
    def predicate(path: str) -> bool:
        return path.endswith(ext)
    return predicate


def has_extension_case_insensitive(ext: str) -> Predicate:
    """Match paths ending with ``ext``, ignoring case on both sides."""
    folded_ext = ext.casefold()

    def predicate(path: str) -> bool:
        return path.casefold().endswith(folded_ext)
    return predicate


def _file_size(path: str) -> Optional[int]:
    try:
        return os.stat(path).st_size
    except OSError as e:
        logger.debug(f"Cannot stat {path}, treating as non-matching: {e}")
        return None


def _check_size_bound(num_bytes: int) -> None:
    if isinstance(num_bytes, bool) or not isinstance(num_bytes, int):
        raise TypeError(f"Size bound must be an integer, got {type(num_bytes).__name__}")
    if num_bytes < 0:
        raise ValueError(f"Size bound must be non-negative, got {num_bytes}")


def size_less_than_or_equal(num_bytes: int) -> Predicate:
    """
    Match files whose size is at most ``num_bytes``.

    Args:
        num_bytes: Inclusive upper bound in bytes

    Returns:
        Predicate that returns False when the file cannot be stat'ed
    """
    _check_size_bound(num_bytes)

    def predicate(path: str) -> bool:
        size = _file_size(path)
        return size is not None and size <= num_bytes
    return predicate


def size_greater_than_or_equal(num_bytes: int) -> Predicate:
    """
    Match files whose size is at least ``num_bytes``.

    Args:
        num_bytes: Inclusive lower bound in bytes

    Returns:
        Predicate that returns False when the file cannot be stat'ed
    """
    _check_size_bound(num_bytes)

    def predicate(path: str) -> bool:
        size = _file_size(path)
        return size is not None and size >= num_bytes
    return predicate


def compile_pattern(pattern: str) -> re.Pattern:
    """
    Compile a regex pattern, converting compile failures to InvalidPatternError.

    Args:
        pattern: Regular expression source

    Returns:
        Compiled pattern

    Raises:
        InvalidPatternError: If the pattern is not a valid regular expression
    """
    try:
        return re.compile(pattern)
    except re.error as e:
        raise InvalidPatternError(pattern, str(e)) from e


def matches_regex(pattern: str) -> Predicate:
    """
    Match files whose base name contains a match for ``pattern``.

    The pattern is compiled immediately so a bad pattern fails before any
    traversal. Matching uses ``search`` on the base name only, so partial
    matches count and directory components of the path are ignored.
    """
    regex = compile_pattern(pattern)

    def predicate(path: str) -> bool:
        return regex.search(os.path.basename(path)) is not None
    return predicate


def all_of(predicates: Sequence[Predicate]) -> Predicate:
    """Combine predicates by conjunction, evaluated in registration order."""
    chain = tuple(predicates)

    def predicate(path: str) -> bool:
        return all(p(path) for p in chain)
    return predicate
