"""Union-find structure used by Kruskal's algorithm to reject cycles."""

from __future__ import annotations

from typing import Dict, Generic, Hashable, List, TypeVar

from ..domain.errors import UnknownSetError

K = TypeVar("K", bound=Hashable)


class DisjointSet(Generic[K]):
    """Disjoint sets with iterative path compression.

    No union by rank: at network scale path compression alone keeps the
    chains short, and ``find`` never recurses.
    """

    def __init__(self) -> None:
        self._parent: Dict[K, K] = {}

    def make_set(self, element: K) -> None:
        """Create a singleton set whose representative is ``element``."""
        self._parent[element] = element

    def find(self, element: K) -> K:
        """Return the representative of the set containing ``element``.

        Every element visited on the way is re-pointed directly at the
        root.

        Raises:
            UnknownSetError: If ``make_set`` was never called for ``element``.
        """
        if element not in self._parent:
            raise UnknownSetError(
                f"No set contains element: {element!r}", element=element
            )

        root = element
        visited: List[K] = []
        while self._parent[root] != root:
            visited.append(root)
            root = self._parent[root]

        for node in visited:
            self._parent[node] = root
        return root

    def union(self, a: K, b: K) -> bool:
        """Merge the sets containing ``a`` and ``b``.

        Returns:
            True if two distinct sets were merged, False if ``a`` and
            ``b`` were already in the same set.
        """
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False
        self._parent[root_a] = root_b
        return True

    def connected(self, a: K, b: K) -> bool:
        return self.find(a) == self.find(b)

    def __contains__(self, element: object) -> bool:
        return element in self._parent

    def __len__(self) -> int:
        return len(self._parent)
