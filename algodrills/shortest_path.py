"""Shortest paths in a weighted graph by Dijkstra's algorithm."""

from __future__ import annotations

import heapq
import math
from dataclasses import dataclass
from typing import Mapping, Sequence


@dataclass(frozen=True)
class Edge:
    """A weighted edge leading to ``node``."""

    node: int
    weight: int


Graph = Mapping[int, Sequence[Edge]]

MRT_GRAPH: dict[int, list[Edge]] = {
    0: [Edge(1, 4), Edge(7, 8)],
    1: [Edge(0, 4), Edge(2, 8), Edge(7, 11)],
    2: [Edge(1, 8), Edge(3, 7), Edge(5, 4), Edge(8, 2)],
    3: [Edge(2, 7), Edge(4, 9), Edge(5, 14)],
    4: [Edge(3, 9), Edge(5, 10)],
    5: [Edge(2, 4), Edge(3, 14), Edge(4, 10), Edge(6, 2)],
    6: [Edge(5, 2), Edge(7, 1), Edge(8, 6)],
    7: [Edge(0, 8), Edge(1, 11), Edge(6, 1), Edge(8, 7)],
    8: [Edge(2, 2), Edge(6, 6), Edge(7, 7)],
}
"""A sample undirected network of nine stations."""


def dijkstra(graph: Graph, start: int, target: int) -> tuple[list[int], int]:
    """Return the cheapest path from ``start`` to ``target`` and its total weight.

    Raises ValueError when ``target`` cannot be reached.
    """
    dist: dict[int, float] = {node: math.inf for node in graph}
    prev: dict[int, int] = {}
    dist[start] = 0
    heap: list[tuple[float, int]] = [(0, start)]

    while heap:
        cost, node = heapq.heappop(heap)
        if node == target:
            break
        if cost > dist.get(node, math.inf):
            continue
        for edge in graph.get(node, ()):
            candidate = cost + edge.weight
            if candidate < dist.get(edge.node, math.inf):
                dist[edge.node] = candidate
                prev[edge.node] = node
                heapq.heappush(heap, (candidate, edge.node))

    total = dist.get(target, math.inf)
    if total == math.inf:
        raise ValueError(f"node {target} is not reachable from node {start}")

    path = [target]
    while path[-1] in prev:
        path.append(prev[path[-1]])
    path.reverse()
    return path, int(total)