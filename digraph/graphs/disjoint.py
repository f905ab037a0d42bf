"""
Disjoint-set (union-find) data structure.

Path compression on ``find`` and union by size give amortized
near-constant time per operation (inverse Ackermann).

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 21 (Data Structures for Disjoint Sets).
"""

from typing import Dict, Hashable, Iterable, List


class DisjointSet:
    """
    Union-Find (Disjoint Set) with path compression and union by size.

    Used by Kruskal's algorithm for cycle detection, but usable on any
    hashable items.
    """

    def __init__(self, items: Iterable[Hashable] = ()):
        """
        Initialize union-find with each item in its own singleton set.

        Args:
            items: Iterable of hashable items.
        """
        self.parent: Dict[Hashable, Hashable] = {}
        self.size: Dict[Hashable, int] = {}
        self._set_count = 0

        for item in items:
            self.make_set(item)

    def make_set(self, x: Hashable) -> bool:
        """
        Add ``x`` as a singleton set.

        Returns:
            True if x was added, False if it was already present.
        """
        if x in self.parent:
            return False
        self.parent[x] = x
        self.size[x] = 1
        self._set_count += 1
        return True

    def find(self, x: Hashable) -> Hashable:
        """
        Find the representative of x's set, compressing the path to it.

        Args:
            x: Item to find the root for.

        Returns:
            Root item.

        Raises:
            KeyError: If x was never added.
        """
        parent = self.parent
        root = x
        while parent[root] != root:
            root = parent[root]

        while parent[x] != root:
            parent[x], x = root, parent[x]

        return root

    def union(self, x: Hashable, y: Hashable) -> bool:
        """
        Union the sets containing x and y using union by size.

        On equal sizes the root of x's set becomes the new root.

        Args:
            x: First item.
            y: Second item.

        Returns:
            True if union was performed (x and y were in different sets),
            False if they were already in the same set.
        """
        root_x = self.find(x)
        root_y = self.find(y)

        if root_x == root_y:
            return False

        if self.size[root_x] < self.size[root_y]:
            root_x, root_y = root_y, root_x

        self.parent[root_y] = root_x
        self.size[root_x] += self.size.pop(root_y)
        self._set_count -= 1
        return True

    def connected(self, x: Hashable, y: Hashable) -> bool:
        """Return True if x and y are in the same set."""
        return self.find(x) == self.find(y)

    def size_of(self, x: Hashable) -> int:
        """Number of items in x's set."""
        return self.size[self.find(x)]

    @property
    def set_count(self) -> int:
        return self._set_count

    def groups(self) -> List[List[Hashable]]:
        """
        Return the sets as lists.

        Items keep insertion order inside each group, and groups are ordered
        by their first-inserted item.
        """
        by_root: Dict[Hashable, List[Hashable]] = {}
        for item in self.parent:
            by_root.setdefault(self.find(item), []).append(item)
        return list(by_root.values())

    def __contains__(self, x: object) -> bool:
        return x in self.parent

    def __len__(self) -> int:
        return len(self.parent)

    def __repr__(self) -> str:
        return f"DisjointSet(items={len(self.parent)}, sets={self._set_count})"
