"""
Search configuration model for filefinder.

A SearchConfig is the accumulated state of a Finder: the search root, the
maximum traversal depth, and the ordered predicate chain. Building one never
touches the filesystem; the root is only checked when a search runs.
"""

from typing import Callable, List
from pydantic import BaseModel, Field


class SearchConfig(BaseModel):
    """
    Configuration consumed by a single traversal.

    Attributes:
        root: Filesystem location where the traversal begins
        max_depth: Deepest level whose directories are expanded (root is 0)
        predicates: Ordered file filters combined by logical AND
    """

    root: str = Field(..., description="Search root; may name a missing path until a search runs")
    max_depth: int = Field(0, ge=0, description="Maximum traversal depth")
    predicates: List[Callable[[str], bool]] = Field(
        default_factory=list,
        description="Ordered predicates applied to each file path"
    )

    def add_predicate(self, predicate: Callable[[str], bool]) -> None:
        """Append a predicate to the end of the chain."""
        if not callable(predicate):
            raise TypeError(f"Predicate must be callable, got {type(predicate).__name__}")
        self.predicates.append(predicate)

    def with_depth(self, max_depth: int) -> 'SearchConfig':
        """Return a validated copy of this configuration bound to ``max_depth``."""
        return SearchConfig(root=self.root, max_depth=max_depth, predicates=list(self.predicates))

    def __str__(self) -> str:
        """String representation of the search configuration."""
        return f"Root: '{self.root}' | Depth: {self.max_depth} | Predicates: {len(self.predicates)}"
