"""Coordinate compression."""

from bisect import bisect_left
from typing import Generic, Iterable, TypeVar

T = TypeVar("T")


class Compressor(Generic[T]):
    """Maps each distinct value to its rank among the sorted distinct values."""

    def __init__(self, values: Iterable[T]) -> None:
        self.values: tuple[T, ...] = tuple(sorted(set(values)))

    def __len__(self) -> int:
        return len(self.values)

    def index(self, x: T) -> int:
        """Return the rank of ``x``; raises ValueError if ``x`` was not given."""
        i = bisect_left(self.values, x)
        if i == len(self.values) or self.values[i] != x:
            raise ValueError(f"{x!r} is not among the compressed values")
        return i