"""
Breadth-first filesystem walker for filefinder.

This module traverses a directory tree one depth level at a time, bounded by a
maximum depth, and yields the paths of files accepted by a predicate. Directory
handles are scoped to a single enumeration; the BFS queue is the only state
held for the duration of a walk.
"""

import os
import logging
from collections import deque
from typing import Callable, Deque, Dict, Iterator, List, Optional

from ..errors import RootNotFoundError, TraversalIOError


logger = logging.getLogger(__name__)


def _match_all(path: str) -> bool:
    return True


class BFSWalker:
    """
    Level-by-level filesystem walker.

    The root sits at depth 0. A directory dequeued at depth ``d`` has its
    children enumerated only when ``d <= max_depth``; otherwise it is dropped.
    Files are tested against the predicate at whatever level they are dequeued.
    Symlinks are followed through the normal file/directory classification, and
    entries that are neither (broken symlinks, sockets, ...) are skipped.
    """

    def __init__(self, max_depth: int, predicate: Optional[Callable[[str], bool]] = None):
        """
        Initialize the walker.

        Args:
            max_depth: Deepest level whose directories are still expanded
            predicate: File filter; every file matches when omitted
        """
        if max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {max_depth}")
        self.max_depth = max_depth
        self.predicate = predicate if predicate is not None else _match_all
        self._stats = self._empty_stats()

    @staticmethod
    def _empty_stats() -> Dict[str, int]:
        return {
            'directories_traversed': 0,
            'directories_pruned': 0,
            'files_scanned': 0,
            'files_matched': 0,
            'entries_skipped': 0
        }

    def walk(self, root: str) -> Iterator[str]:
        """
        Walk the tree under ``root`` and yield matching file paths.

        The root is checked when iteration starts, not when this method is
        called. Paths are yielded in BFS order; within a directory the order is
        whatever the filesystem returns.

        Args:
            root: Directory (or file) where the search begins

        Yields:
            Paths of files accepted by the predicate

        Raises:
            RootNotFoundError: If ``root`` does not exist
            TraversalIOError: If a directory cannot be enumerated
        """
        if not os.path.exists(root):
            raise RootNotFoundError(root)

        logger.info(f"Walking directory tree: {root} (max depth {self.max_depth})")

        queue: Deque[str] = deque([root])
        curr_depth = 0

        while queue:
            for _ in range(len(queue)):
                path = queue.popleft()

                if os.path.isdir(path):
                    if curr_depth <= self.max_depth:
                        queue.extend(self._list_children(path))
                    else:
                        self._stats['directories_pruned'] += 1
                elif os.path.isfile(path):
                    self._stats['files_scanned'] += 1
                    if self.predicate(path):
                        self._stats['files_matched'] += 1
                        yield path
                else:
                    logger.debug(f"Skipping entry that is neither file nor directory: {path}")
                    self._stats['entries_skipped'] += 1

            curr_depth += 1

    def _list_children(self, directory: str) -> List[str]:
        """
        Enumerate the immediate children of a directory.

        Args:
            directory: Directory to list

        Returns:
            Child paths joined onto ``directory``

        Raises:
            TraversalIOError: If the directory cannot be read
        """
        try:
            with os.scandir(directory) as entries:
                children = [entry.path for entry in entries]
        except OSError as e:
            logger.error(f"Error reading directory {directory}: {e}")
            raise TraversalIOError(directory, e) from e

        self._stats['directories_traversed'] += 1
        logger.debug(f"Listed {len(children)} entries in {directory}")
        return children

    def get_stats(self) -> Dict[str, int]:
        """
        Get statistics about the last walk.

        Returns:
            Dictionary containing traversal counters
        """
        return self._stats.copy()

    def reset_stats(self) -> None:
        """Reset the statistics counters."""
        self._stats = self._empty_stats()
