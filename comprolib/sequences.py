"""Helpers on sequences: extremes, permutations, reversal and deduplication."""

import operator
from typing import Callable, Hashable, Iterable, MutableSequence, Sequence, TypeVar

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)


def max_of(values: Iterable[T]) -> T:
    """Return the first largest value; raises ValueError when empty."""
    return max(values)


def min_of(values: Iterable[T]) -> T:
    """Return the first smallest value; raises ValueError when empty."""
    return min(values)


def _step(values: MutableSequence[T], before: Callable[[T, T], bool]) -> bool:
    for i in range(len(values) - 2, -1, -1):
        if before(values[i], values[i + 1]):
            j = len(values) - 1
            while not before(values[i], values[j]):
                j -= 1
            values[i], values[j] = values[j], values[i]
            values[i + 1 :] = values[:i:-1]
            return True
    values.reverse()
    return False


def next_permutation(values: MutableSequence[T]) -> bool:
    """Rearrange ``values`` into the next permutation in lexicographic order.

    Returns False and leaves the first (sorted) permutation when ``values``
    was already the last one.
    """
    return _step(values, operator.lt)


def prev_permutation(values: MutableSequence[T]) -> bool:
    """Rearrange ``values`` into the previous permutation in lexicographic order.

    Returns False and leaves the last (descending) permutation when ``values``
    was already the first one.
    """
    return _step(values, operator.gt)


def reverse_in_place(values: MutableSequence[T]) -> None:
    """Reverse ``values`` in place."""
    values.reverse()


def reversed_copy(values: Sequence[T]) -> list[T]:
    """Return a reversed copy of ``values`` as a list."""
    return list(reversed(values))


def unique(values: Iterable[H]) -> list[H]:
    """Return the values with duplicates dropped, keeping first occurrences in order."""
    return list(dict.fromkeys(values))