"""Disjoint-set union with union by size and path compression."""

from enum import IntEnum


class MergeState(IntEnum):
    """Outcome of a merge: nothing happened, or which side was attached."""

    NOT_MERGED = 0
    LEFT_MERGED = 1
    RIGHT_MERGED = 2


class UnionFind:
    """Disjoint sets over the elements ``0 .. n-1``."""

    def __init__(self, n: int) -> None:
        self._parent = list(range(n))
        self._size = [1] * n

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, a: int) -> None:
        if not 0 <= a < len(self._parent):
            raise IndexError(f"element {a} is out of range for size {len(self)}")

    def merge(self, left: int, right: int) -> MergeState:
        """Join the sets holding ``left`` and ``right``.

        RIGHT_MERGED means the set of ``right`` was attached under that of
        ``left``; LEFT_MERGED the other way round.
        """
        x = self.root(left)
        y = self.root(right)
        if x == y:
            return MergeState.NOT_MERGED
        state = MergeState.RIGHT_MERGED
        if self._size[x] < self._size[y]:
            x, y = y, x
            state = MergeState.LEFT_MERGED
        self._size[x] += self._size[y]
        self._parent[y] = x
        return state

    def root(self, a: int) -> int:
        """Return the representative of the set holding ``a``."""
        self._check(a)
        root = a
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[a] != root:
            self._parent[a], a = root, self._parent[a]
        return root

    def same(self, a: int, b: int) -> bool:
        """Tell whether ``a`` and ``b`` are in the same set."""
        self._check(b)
        return self.root(a) == self.root(b)

    def size(self, a: int) -> int:
        """Return the size of the set holding ``a``."""
        return self._size[self.root(a)]

    def groups(self) -> list[list[int]]:
        """Return the sets, each as an ascending list of its elements."""
        grouped: dict[int, list[int]] = {}
        for v in range(len(self._parent)):
            grouped.setdefault(self.root(v), []).append(v)
        return list(grouped.values())