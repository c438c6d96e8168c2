# comprolib

A small collection of algorithms and data structures for competitive
programming. Pure Python, no runtime dependencies, Python 3.10 or later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module                    | Contents                                                          |
|---------------------------|-------------------------------------------------------------------|
| `comprolib.bits`          | `bit_ceil`, `count_trailing_zeros`                                |
| `comprolib.numtheory`     | `ext_gcd`, `mod_inv`                                              |
| `comprolib.algebra`       | `Monoid`, `AbelianGroup`                                          |
| `comprolib.sequences`     | `max_of`, `min_of`, `next_permutation`, `prev_permutation`, `reverse_in_place`, `reversed_copy`, `unique` |
| `comprolib.accumulator`   | `Accumulator`, `sum_accumulator`                                  |
| `comprolib.compressor`    | `Compressor` (coordinate compression)                             |
| `comprolib.fenwicktree`   | `FenwickTree`                                                     |
| `comprolib.priorityqueue` | `PriorityQueue` with a custom ordering                            |
| `comprolib.unionfind`     | `UnionFind`, `MergeState`                                         |
| `comprolib.segtree`       | `SegTree` over any monoid                                         |
| `comprolib.graph`         | `Edge`, `AdjacencyList`                                           |
| `comprolib.dijkstra`      | `Dijkstra` shortest paths, path restoration, shortest-path tree   |
| `comprolib.rollinghash`   | `RollingHash` modulo 2^61 - 1                                     |

Indices are 0-based throughout and ranges are half-open, `[left, right)`.
The data structures raise `IndexError` for a position or range outside
their bounds. Other failures raise `ValueError`: `Compressor.index` on a
value that was not compressed, `max_of`/`min_of` on an empty input,
`SegTree.max_right`/`min_left` with a predicate that is false for the
identity, and `Dijkstra.restore_path` for an unreachable vertex.

## Examples

Extended Euclid and modular inverse:

```python
from comprolib.numtheory import ext_gcd, mod_inv

ext_gcd(111, 30)   # (3, 3, -11): 111*3 + 30*(-11) == 3
mod_inv(3, 7)      # 5
```

Permutations, in place, in lexicographic order. When there is no next
permutation, `next_permutation` returns `False` and leaves the sequence
sorted ascending (and `prev_permutation` leaves it descending):

```python
from comprolib.sequences import next_permutation

values = [1, 2, 3]
while True:
    print(values)
    if not next_permutation(values):
        break
```

Range sums with a segment tree. `SegTree(values, monoid)` builds from a
sequence; `SegTree.of_size(n, monoid)` starts from identity elements:

```python
from comprolib.algebra import Monoid
from comprolib.segtree import SegTree

tree = SegTree.of_size(5, Monoid(lambda a, b: a + b, lambda: 0))
tree.set(2, 10)
tree.set(3, 4)
tree.prod(0, 4)                          # 14
tree.max_right(0, lambda s: s <= 10)     # 3
```

Prefix sums over an abelian group:

```python
from comprolib.accumulator import sum_accumulator

acc = sum_accumulator([1, 2, 3, 4])
acc.range(1, 3)   # 5
```

Counting inversions with coordinate compression and a Fenwick tree:

```python
from comprolib.compressor import Compressor
from comprolib.fenwicktree import FenwickTree

values = [3, 5, 2, 1, 4]
comp = Compressor(values)
tree = FenwickTree(len(values))
inversions = 0
for seen, v in enumerate(values, start=1):
    i = comp.index(v)
    tree.add(i, 1)
    inversions += seen - tree.sum(0, i + 1)
```

`FenwickTree.lower_bound` and `upper_bound` search over prefix sums and
require every element to be non-negative.

Connected components:

```python
from comprolib.unionfind import UnionFind

uf = UnionFind(4)
uf.merge(0, 1)  # MergeState.RIGHT_MERGED
uf.same(0, 1)   # True
uf.size(0)      # 2
uf.groups()     # [[0, 1], [2], [3]]
```

Shortest paths. An `Edge` has `source`, `target` and `cost`; vertices that
cannot be reached keep the `inf` value given to `Dijkstra`:

```python
from comprolib.graph import AdjacencyList, Edge
from comprolib.dijkstra import Dijkstra

g = AdjacencyList(3)
g.add_edge(Edge(0, 1, 4))
g.add_edge(Edge(1, 2, 1))
g.add_edge(Edge(0, 2, 7))

d = Dijkstra(g, 0, 1 << 60)
d.distances          # [0, 4, 5]
d.restore_path(2)    # [0, 1, 2]
tree = d.shortest_path_tree()
```

Substring search with rolling hashes. A `str` is hashed by code points and
`bytes` by byte values; the base is chosen at random once per process
unless one is passed as `base`:

```python
from comprolib.rollinghash import RollingHash

text, pattern = RollingHash("aabaaa"), RollingHash("aa")
target = pattern.find(0, 2)
[i for i in range(5) if text.find(i, i + 2) == target]   # [0, 3, 4]
```

A priority queue with a custom ordering (here, a max-heap; the default is
a min-heap):

```python
from comprolib.priorityqueue import PriorityQueue

pq = PriorityQueue(lambda a, b: a > b)
for x in (3, 9, 1):
    pq.push(x)
pq.top()   # 9
pq.pop()   # 9
len(pq)    # 2
```

## What it does not do

This is a library only. It has no command-line program and does not read
problem input or write answers; you import the modules into your own
solution code.