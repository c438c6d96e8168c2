"""Binary-heap priority queue ordered by a caller-supplied comparison."""

import heapq
import operator
from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class _Entry(Generic[T]):
    __slots__ = ("item", "less")

    def __init__(self, item: T, less: Callable[[T, T], bool]) -> None:
        self.item = item
        self.less = less

    def __lt__(self, other: "_Entry[T]") -> bool:
        return self.less(self.item, other.item)


class PriorityQueue(Generic[T]):
    """Pops the item that ``less`` places first; a min-queue by default."""

    def __init__(self, less: Callable[[T, T], bool] = operator.lt) -> None:
        self._less = less
        self._heap: list[_Entry[T]] = []

    def __len__(self) -> int:
        return len(self._heap)

    def push(self, x: T) -> None:
        """Add ``x`` to the queue."""
        heapq.heappush(self._heap, _Entry(x, self._less))

    def pop(self) -> T:
        """Remove and return the first item; raises IndexError when empty."""
        if not self._heap:
            raise IndexError("pop from an empty priority queue")
        return heapq.heappop(self._heap).item

    def top(self) -> T:
        """Return the first item without removing it; raises IndexError when empty."""
        if not self._heap:
            raise IndexError("top of an empty priority queue")
        return self._heap[0].item