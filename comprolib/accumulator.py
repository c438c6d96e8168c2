"""Prefix folds over an abelian group, answering range queries in O(1)."""

import operator
from itertools import accumulate
from typing import Generic, Iterable, TypeVar

from comprolib.algebra import AbelianGroup

T = TypeVar("T")


class Accumulator(Generic[T]):
    """Prefix sums of a sequence under an abelian group."""

    def __init__(self, values: Iterable[T], group: AbelianGroup[T]) -> None:
        self.group = group
        self.sums: tuple[T, ...] = tuple(
            accumulate(values, group.op, initial=group.e())
        )

    def __len__(self) -> int:
        return len(self.sums) - 1

    def range(self, left: int, right: int) -> T:
        """Return the fold of the half-open range ``[left, right)``."""
        n = len(self)
        if not (0 <= left <= n and 0 <= right <= n):
            raise IndexError(
                f"range [{left}, {right}) is out of bounds for length {n}"
            )
        return self.group.op(self.sums[right], self.group.inv(self.sums[left]))


def sum_accumulator(values: Iterable[int]) -> Accumulator[int]:
    """Return an accumulator of integer sums."""
    return Accumulator(values, AbelianGroup(operator.add, int, operator.neg))