"""
Disjoint-set (union-find) over the dense ids 0..n-1.

Used by Kruskal's algorithm for cycle detection.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 21 (Data Structures for Disjoint Sets).
"""

from typing import List, Tuple


class DisjointSet:
    """
    Union-find with full path compression.

    Union is unbalanced: the root of the first argument always becomes the
    root of the merged set. Path compression alone keeps repeated finds
    cheap for the small graphs this package steps through.
    """

    def __init__(self, n: int):
        """
        Initialize n singleton sets.

        Args:
            n: Number of elements.
        """
        if n < 0:
            raise ValueError(f"Number of elements must be non-negative, got {n}")
        self._parent: List[int] = list(range(n))

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self._parent):
            raise IndexError(f"Element {x} out of range for {len(self._parent)} elements")

    def find(self, x: int) -> int:
        """
        Find the root of x, repointing every node on the path to that root.

        Args:
            x: Element id.

        Returns:
            Root id of the set containing x.
        """
        self._check(x)
        root = x
        while self._parent[root] != root:
            root = self._parent[root]

        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]

        return root

    def union(self, x: int, y: int) -> bool:
        """
        Merge the sets containing x and y.

        Args:
            x: First element. Its root becomes the merged root.
            y: Second element.

        Returns:
            True if a merge happened, False if x and y were already in the
            same set (merging would close a cycle).
        """
        root_x = self.find(x)
        root_y = self.find(y)

        if root_x == root_y:
            return False

        self._parent[root_y] = root_x
        return True

    def connected(self, x: int, y: int) -> bool:
        """Return whether x and y share a root."""
        return self.find(x) == self.find(y)

    def parents(self) -> Tuple[int, ...]:
        """Return a snapshot of the parent array."""
        return tuple(self._parent)

    def roots(self) -> List[int]:
        """Return the root ids, ascending."""
        return [i for i, p in enumerate(self._parent) if p == i]
