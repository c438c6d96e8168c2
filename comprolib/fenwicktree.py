"""Fenwick tree (binary indexed tree) over numbers."""

from comprolib.bits import bit_ceil


class FenwickTree:
    """Point updates and range sums over ``n`` numbers, all starting at zero."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"size must be non-negative, got {n}")
        self._n = n
        self._data = [0] * n

    def __len__(self) -> int:
        return self._n

    def add(self, p: int, x) -> None:
        """Add ``x`` to the element at 0-based position ``p``."""
        if not 0 <= p < self._n:
            raise IndexError(f"position {p} is out of range for size {self._n}")
        p += 1
        while p <= self._n:
            self._data[p - 1] += x
            p += p & -p

    def sum(self, left: int, right: int):
        """Return the sum of the half-open range ``[left, right)``."""
        if not 0 <= left <= right <= self._n:
            raise IndexError(
                f"range [{left}, {right}) is out of range for size {self._n}"
            )
        return self._prefix(right) - self._prefix(left)

    def lower_bound(self, w) -> int:
        """Search for the least ``p`` with ``w`` not exceeding the sum of ``[0, p]``.

        Requires every element to be non-negative.
        """
        if w <= 0:
            return 0
        p = 0
        s = 0
        r = bit_ceil(self._n)
        while r > 0:
            i = p + r - 1
            if i < self._n and s + self._data[i] <= w:
                s += self._data[i]
                p += r - 1
            r >>= 1
        return p

    def upper_bound(self, w) -> int:
        """Search for the least ``p`` with ``w`` below the sum of ``[0, p]``."""
        return self.lower_bound(w + 1)

    def _prefix(self, count: int):
        s = 0
        while count > 0:
            s += self._data[count - 1]
            count -= count & -count
        return s