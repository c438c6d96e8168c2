"""Weighted directed graphs stored as adjacency lists."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Edge(Generic[T]):
    """A directed edge from ``source`` to ``target`` with a cost."""

    source: int
    target: int
    cost: T

    def __str__(self) -> str:
        return f"From:{self.source} To:{self.target} Cost:{self.cost}"


class AdjacencyList(Generic[T]):
    """A graph on vertices ``0 .. n-1`` keeping the outgoing edges of each vertex."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"vertex count must be non-negative, got {n}")
        self.neighbor_edges: list[list[Edge[T]]] = [[] for _ in range(n)]

    def size(self) -> int:
        """Return the number of vertices."""
        return len(self.neighbor_edges)

    def _check_vertex(self, v: int) -> None:
        if not 0 <= v < len(self.neighbor_edges):
            raise IndexError(f"vertex {v} is out of range for size {self.size()}")

    def edges(self, v: int) -> list[Edge[T]]:
        """Return the outgoing edges of ``v`` in insertion order."""
        self._check_vertex(v)
        return self.neighbor_edges[v]

    def add_edge(self, edge: Edge[T]) -> None:
        """Add ``edge`` to the outgoing edges of its source."""
        self._check_vertex(edge.source)
        self.neighbor_edges[edge.source].append(edge)