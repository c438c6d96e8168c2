import pytest

from comprolib.unionfind import MergeState, UnionFind


def _run(n, queries):
    uf = UnionFind(n)
    out = []
    for com, x, y in queries:
        if com == 0:
            uf.merge(x, y)
        else:
            out.append(1 if uf.same(x, y) else 0)
    return out


def test_disjoint_set_sample():
    queries = [
        (0, 1, 4),
        (0, 2, 3),
        (1, 1, 2),
        (1, 3, 4),
        (1, 1, 4),
        (1, 3, 2),
        (0, 1, 3),
        (1, 2, 4),
        (1, 3, 0),
        (0, 0, 4),
        (1, 0, 2),
        (1, 3, 0),
    ]
    assert _run(5, queries) == [0, 0, 1, 1, 1, 0, 1, 1]


def test_merge_states():
    uf = UnionFind(3)
    assert uf.merge(0, 1) is MergeState.RIGHT_MERGED
    assert uf.root(1) == 0
    assert uf.merge(2, 0) is MergeState.LEFT_MERGED
    assert uf.root(2) == 0
    assert uf.merge(0, 2) is MergeState.NOT_MERGED


def test_sizes():
    uf = UnionFind(6)
    uf.merge(0, 1)
    uf.merge(1, 2)
    uf.merge(4, 5)
    assert uf.size(2) == 3
    assert uf.size(3) == 1
    assert uf.size(5) == 2


def test_groups_partition_elements():
    uf = UnionFind(7)
    uf.merge(0, 3)
    uf.merge(3, 6)
    uf.merge(1, 2)
    groups = uf.groups()
    assert sorted(sorted(g) for g in groups) == [[0, 3, 6], [1, 2], [4], [5]]
    for g in groups:
        assert all(uf.same(g[0], v) for v in g)
        assert uf.size(g[0]) == len(g)


def test_long_chain_compresses():
    n = 2000
    uf = UnionFind(n)
    for v in range(1, n):
        uf.merge(v, v - 1)
    assert uf.size(0) == n
    assert all(uf.same(0, v) for v in range(n))


@pytest.mark.parametrize("bad", [-1, 5])
def test_out_of_range(bad):
    uf = UnionFind(5)
    with pytest.raises(IndexError):
        uf.root(bad)
    with pytest.raises(IndexError):
        uf.same(0, bad)
    with pytest.raises(IndexError):
        uf.merge(bad, 0)