import pytest

from comprolib.compressor import Compressor
from comprolib.fenwicktree import FenwickTree


def _inversions(values):
    c = Compressor(values)
    f = FenwickTree(len(values))
    total = 0
    for i, v in enumerate(values):
        cv = c.index(v)
        f.add(cv, 1)
        total += i + 1 - f.sum(0, cv + 1)
    return total


@pytest.mark.parametrize(
    "values, want",
    [
        ([3, 5, 2, 1, 4], 6),
        ([3, 1, 2], 2),
        ([1, 2, 3, 4], 0),
    ],
)
def test_inversion_count(values, want):
    assert _inversions(values) == want


def test_sum_after_adds():
    f = FenwickTree(6)
    for p, x in enumerate([5, 3, 7, 9, 6, 4]):
        f.add(p, x)
    assert f.sum(0, 6) == 34
    assert f.sum(1, 4) == 19
    assert f.sum(3, 3) == 0
    assert f.sum(5, 6) == 4


def test_repeated_adds_accumulate():
    f = FenwickTree(3)
    f.add(1, 2)
    f.add(1, 5)
    f.add(1, -3)
    assert f.sum(1, 2) == 4
    assert f.sum(0, 3) == 4


def test_float_values():
    f = FenwickTree(2)
    f.add(0, 0.5)
    f.add(1, 0.25)
    assert f.sum(0, 2) == 0.75


def test_add_out_of_range():
    f = FenwickTree(3)
    with pytest.raises(IndexError):
        f.add(3, 1)
    with pytest.raises(IndexError):
        f.add(-1, 1)


def test_sum_out_of_range():
    f = FenwickTree(3)
    with pytest.raises(IndexError):
        f.sum(0, 4)
    with pytest.raises(IndexError):
        f.sum(2, 1)


def test_lower_bound_non_positive_weight():
    f = FenwickTree(4)
    for p in range(4):
        f.add(p, 1)
    assert f.lower_bound(0) == 0
    assert f.lower_bound(-5) == 0


def test_lower_bound_small_weight():
    f = FenwickTree(4)
    for p in range(4):
        f.add(p, 1)
    assert f.lower_bound(2) == 1


def test_upper_bound_shifts_weight():
    f = FenwickTree(8)
    for p, x in enumerate([2, 0, 1, 3, 0, 4, 1, 1]):
        f.add(p, x)
    for w in range(-1, 13):
        assert f.upper_bound(w) == f.lower_bound(w + 1)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        FenwickTree(-1)