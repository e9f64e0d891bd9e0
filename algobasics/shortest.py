"""Single-source shortest paths over weighted adjacency lists."""

from __future__ import annotations

import heapq
from collections.abc import Sequence

INFINITY = 10**9
"""Distance reported for nodes that cannot be reached."""

WeightedAdjacency = Sequence[Sequence[Sequence[int]]]


def _initial_distances(adjacency: WeightedAdjacency, source: int) -> list[int]:
    node_count = len(adjacency)
    if not 0 <= source < node_count:
        raise ValueError(f"source node {source} is not in a graph of {node_count} nodes")
    for node, edges in enumerate(adjacency):
        for neighbour, weight in edges:
            if not 0 <= neighbour < node_count:
                raise ValueError(f"edge {node} -> {neighbour} leaves the graph")
            if weight < 0:
                raise ValueError(f"edge {node} -> {neighbour} has negative weight {weight}")
    distances = [INFINITY] * node_count
    distances[source] = 0
    return distances


def dijkstra(adjacency: WeightedAdjacency, source: int = 0) -> list[int]:
    """Shortest distances from ``source`` using a min-heap of ``(distance, node)``.

    ``adjacency[u]`` holds ``(v, weight)`` pairs for directed edges ``u -> v``.
    Unreachable nodes get :data:`INFINITY`.
    """
    distances = _initial_distances(adjacency, source)
    heap = [(0, source)]
    while heap:
        current, node = heapq.heappop(heap)
        for neighbour, weight in adjacency[node]:
            candidate = current + weight
            if candidate < distances[neighbour]:
                distances[neighbour] = candidate
                heapq.heappush(heap, (candidate, neighbour))
    return distances


def dijkstra_set(adjacency: WeightedAdjacency, source: int = 0) -> list[int]:
    """Shortest distances from ``source`` keeping one pending entry per node.

    When a node's distance improves its older pending entry is discarded,
    so every node waits in the frontier at most once.
    """
    distances = _initial_distances(adjacency, source)
    pending = {source: 0}
    heap = [(0, source)]
    while heap:
        current, node = heapq.heappop(heap)
        if pending.get(node) != current:
            continue
        del pending[node]
        for neighbour, weight in adjacency[node]:
            candidate = current + weight
            if candidate < distances[neighbour]:
                distances[neighbour] = candidate
                pending[neighbour] = candidate
                heapq.heappush(heap, (candidate, neighbour))
    return distances