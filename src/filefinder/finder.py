"""
Fluent file finder.

The Finder accumulates a search root and a chain of file predicates through
chainable configuration calls, then runs a single breadth-first search when a
terminal operation (``find`` or ``print_find``) is invoked::

    files = (
        Finder("src")
        .has_extension(".py")
        .size_greater_than_or_equal(400)
        .find(0)
    )

A Finder is a one-shot query object. Once a terminal operation has run, any
further call raises FinderConsumedError.
"""

import os
import sys
import logging
from typing import Callable, Dict, List, Optional, TextIO, Union

from .errors import FinderConsumedError
from .models.search_config import SearchConfig
from .tools import predicates
from .tools.fs_walker import BFSWalker


logger = logging.getLogger(__name__)


class Finder:
    """
    Builder for a depth-bounded file search.

    Configuration methods only record predicates and never touch the
    filesystem. Each returns this Finder so calls can be chained.
    """

    def __init__(self, root: Union[str, os.PathLike]):
        """
        Create a Finder with an empty predicate chain.

        Args:
            root: Directory where the search begins
        """
        self._config = SearchConfig(root=os.fspath(root))
        self._consumed = False
        self.last_stats: Optional[Dict[str, int]] = None

    @property
    def root(self) -> str:
        return self._config.root

    @property
    def consumed(self) -> bool:
        """Whether a terminal operation has already run."""
        return self._consumed

    def _ensure_usable(self) -> None:
        if self._consumed:
            raise FinderConsumedError(
                f"Finder for '{self._config.root}' has already been consumed by a search"
            )

    def filter(self, predicate: Callable[[str], bool]) -> 'Finder':
        """
        Add an arbitrary predicate to the chain.

        The predicate is evaluated lazily, once per file, when a terminal
        operation runs. Exceptions it raises propagate out of the search.
        """
        self._ensure_usable()
        self._config.add_predicate(predicate)
        return self

    def has_extension(self, ext: str) -> 'Finder':
        """Keep files whose path ends with ``ext`` (case-sensitive)."""
        return self.filter(predicates.has_extension(ext))

    def has_extension_case_insensitive(self, ext: str) -> 'Finder':
        """Keep files whose path ends with ``ext``, ignoring case."""
        return self.filter(predicates.has_extension_case_insensitive(ext))

    def size_less_than_or_equal(self, num_bytes: int) -> 'Finder':
        """Keep files of at most ``num_bytes`` bytes."""
        return self.filter(predicates.size_less_than_or_equal(num_bytes))

    def size_greater_than_or_equal(self, num_bytes: int) -> 'Finder':
        """Keep files of at least ``num_bytes`` bytes."""
        return self.filter(predicates.size_greater_than_or_equal(num_bytes))

    def matches_regex(self, pattern: str) -> 'Finder':
        """
        Keep files whose base name contains a match for ``pattern``.

        Raises:
            InvalidPatternError: If ``pattern`` does not compile
        """
        return self.filter(predicates.matches_regex(pattern))

    def _consume(self, max_depth: int) -> BFSWalker:
        self._ensure_usable()
        config = self._config.with_depth(max_depth)
        self._consumed = True
        return BFSWalker(config.max_depth, predicates.all_of(config.predicates))

    def find(self, max_depth: int) -> List[str]:
        """
        Run the search and collect every matching file path.

        Args:
            max_depth: Deepest level whose directories are expanded; 0 means
                only the root's direct children are inspected

        Returns:
            Matching paths in breadth-first order

        Raises:
            RootNotFoundError: If the root does not exist
            TraversalIOError: If a directory cannot be read; nothing is returned
        """
        walker = self._consume(max_depth)
        try:
            results = list(walker.walk(self._config.root))
        finally:
            self._record_stats(walker)
        return results

    def print_find(self, max_depth: int, file: Optional[TextIO] = None) -> None:
        """
        Run the search and print each match as soon as it is found.

        Each match is written as ``matching file: <path>`` to ``file``
        (standard output by default).

        Raises:
            RootNotFoundError: If the root does not exist
            TraversalIOError: If a directory cannot be read
        """
        walker = self._consume(max_depth)
        out = file if file is not None else sys.stdout
        try:
            for path in walker.walk(self._config.root):
                print(f"matching file: {path}", file=out)
        finally:
            self._record_stats(walker)

    def _record_stats(self, walker: BFSWalker) -> None:
        self.last_stats = walker.get_stats()
        logger.debug(f"Search of {self._config.root} finished: {self.last_stats}")

    def __repr__(self) -> str:
        state = "consumed" if self._consumed else "open"
        return f"Finder(root={self._config.root!r}, predicates={len(self._config.predicates)}, {state})"
