"""Single-source shortest paths with non-negative edge costs."""

import heapq
from typing import Generic, Optional, TypeVar

from comprolib.graph import AdjacencyList, Edge

T = TypeVar("T")


def _shortest_paths(
    graph: AdjacencyList[T], source: int, inf: T
) -> tuple[list[T], list[Optional[Edge[T]]]]:
    n = graph.size()
    if not 0 <= source < n:
        raise IndexError(f"source {source} is out of range for size {n}")
    distances: list[T] = [inf] * n
    previous: list[Optional[Edge[T]]] = [None] * n
    distances[source] = 0
    heap = [(distances[source], source)]
    while heap:
        dist, v = heapq.heappop(heap)
        if distances[v] < dist:
            continue
        for edge in graph.edges(v):
            candidate = distances[v] + edge.cost
            if distances[edge.target] > candidate:
                distances[edge.target] = candidate
                previous[edge.target] = edge
                heapq.heappush(heap, (candidate, edge.target))
    return distances, previous


class Dijkstra(Generic[T]):
    """Shortest distances from ``source``; unreachable vertices keep ``inf``."""

    def __init__(self, graph: AdjacencyList[T], source: int, inf: T) -> None:
        self.graph = graph
        self.source = source
        self.inf = inf
        self.distances, self.previous_edges = _shortest_paths(graph, source, inf)

    def restore_path(self, v: int) -> list[int]:
        """Return the vertices of a shortest path from the source to ``v``."""
        path = [v]
        while v != self.source:
            edge = self.previous_edges[v]
            if edge is None:
                raise ValueError(f"vertex {path[0]} is unreachable from the source")
            v = edge.source
            path.append(v)
        path.reverse()
        return path

    def shortest_path_tree(self) -> AdjacencyList[T]:
        """Return the shortest-path tree rooted at the source, edges pointing away from it."""
        n = self.graph.size()
        tree: AdjacencyList[T] = AdjacencyList(n)
        used = [False] * n
        for start in range(n):
            v = start
            while v != self.source and not used[v]:
                edge = self.previous_edges[v]
                if edge is None:
                    break
                used[v] = True
                tree.add_edge(Edge(edge.source, v, edge.cost))
                v = edge.source
        return tree