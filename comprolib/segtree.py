"""Segment tree over a monoid: point updates, range folds and binary searches."""

from typing import Callable, Generic, Iterable, TypeVar

from comprolib.algebra import Monoid
from comprolib.bits import bit_ceil, count_trailing_zeros

T = TypeVar("T")


class SegTree(Generic[T]):
    """A fixed-length sequence answering range folds under a monoid in O(log n)."""

    def __init__(self, values: Iterable[T], monoid: Monoid[T]) -> None:
        items = list(values)
        self._monoid = monoid
        self._n = len(items)
        self._size = bit_ceil(self._n)
        self._log = count_trailing_zeros(self._size)
        identity = monoid.e()
        data = [identity] * (2 * self._size)
        data[self._size : self._size + self._n] = items
        for i in range(self._size - 1, 0, -1):
            data[i] = monoid.op(data[2 * i], data[2 * i + 1])
        self._data = data

    @classmethod
    def of_size(cls, n: int, monoid: Monoid[T]) -> "SegTree[T]":
        """Build a tree of ``n`` identity elements."""
        if n < 0:
            raise ValueError(f"size must be non-negative, got {n}")
        return cls((monoid.e() for _ in range(n)), monoid)

    def __len__(self) -> int:
        return self._n

    def _check_position(self, p: int) -> None:
        if not 0 <= p < self._n:
            raise IndexError(f"position {p} is out of range for length {self._n}")

    def set(self, p: int, x: T) -> None:
        """Replace the element at position ``p`` with ``x``."""
        self._check_position(p)
        op = self._monoid.op
        data = self._data
        p += self._size
        data[p] = x
        for i in range(1, self._log + 1):
            k = p >> i
            data[k] = op(data[2 * k], data[2 * k + 1])

    def get(self, p: int) -> T:
        """Return the element at position ``p``."""
        self._check_position(p)
        return self._data[p + self._size]

    def prod(self, left: int, right: int) -> T:
        """Return the fold of the half-open range ``[left, right)``."""
        if not 0 <= left <= right <= self._n:
            raise IndexError(
                f"range [{left}, {right}) is out of range for length {self._n}"
            )
        op = self._monoid.op
        data = self._data
        left += self._size
        right += self._size
        prod_left = self._monoid.e()
        prod_right = self._monoid.e()
        while left < right:
            if left & 1:
                prod_left = op(prod_left, data[left])
                left += 1
            if right & 1:
                right -= 1
                prod_right = op(data[right], prod_right)
            left >>= 1
            right >>= 1
        return op(prod_left, prod_right)

    def all_prod(self) -> T:
        """Return the fold of the whole sequence."""
        return self._data[1]

    def _check_predicate(self, pred: Callable[[T], bool]) -> None:
        if not pred(self._monoid.e()):
            raise ValueError("the predicate must hold for the identity element")

    def max_right(self, left: int, pred: Callable[[T], bool]) -> int:
        """Return the largest ``r >= left`` with ``pred`` true on the fold of ``[left, r)``.

        ``pred`` must hold for the identity and be monotone.
        """
        if not 0 <= left <= self._n:
            raise IndexError(f"position {left} is out of range for length {self._n}")
        self._check_predicate(pred)
        if left == self._n:
            return self._n
        op = self._monoid.op
        data = self._data
        size = self._size
        l = left + size
        acc = self._monoid.e()
        while True:
            while l % 2 == 0:
                l >>= 1
            if not pred(op(acc, data[l])):
                while l < size:
                    l *= 2
                    if pred(op(acc, data[l])):
                        acc = op(acc, data[l])
                        l += 1
                return l - size
            acc = op(acc, data[l])
            l += 1
            if l & -l == l:
                break
        return self._n

    def min_left(self, right: int, pred: Callable[[T], bool]) -> int:
        """Return the smallest ``l <= right`` with ``pred`` true on the fold of ``[l, right)``.

        ``pred`` must hold for the identity and be monotone.
        """
        if not 0 <= right <= self._n:
            raise IndexError(f"position {right} is out of range for length {self._n}")
        self._check_predicate(pred)
        if right == 0:
            return 0
        op = self._monoid.op
        data = self._data
        size = self._size
        r = right + size
        acc = self._monoid.e()
        while True:
            r -= 1
            while r > 1 and r % 2 == 1:
                r >>= 1
            if not pred(op(data[r], acc)):
                while r < size:
                    r = 2 * r + 1
                    if pred(op(data[r], acc)):
                        acc = op(data[r], acc)
                        r -= 1
                return r + 1 - size
            acc = op(data[r], acc)
            if r & -r == r:
                break
        return 0