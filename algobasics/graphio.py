"""Building, printing and reading simple graph representations."""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence

WeightedAdjacency = list[list[tuple[int, int]]]


def _check_edge(node_count: int, u: int, v: int) -> None:
    for node in (u, v):
        if not 0 <= node < node_count:
            raise ValueError(f"node {node} is not in a graph of {node_count} nodes")


def adjacency_matrix(node_count: int, edges: Iterable[Sequence[int]]) -> list[list[int]]:
    """Return a 0/1 matrix of an undirected graph."""
    matrix = [[0] * node_count for _ in range(node_count)]
    for u, v in edges:
        _check_edge(node_count, u, v)
        matrix[u][v] = 1
        matrix[v][u] = 1
    return matrix


def adjacency_list(node_count: int, edges: Iterable[Sequence[int]]) -> list[list[int]]:
    """Return neighbour lists of an undirected graph, in edge order."""
    adjacency: list[list[int]] = [[] for _ in range(node_count)]
    for u, v in edges:
        _check_edge(node_count, u, v)
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency


def format_adjacency(adjacency: Sequence[Sequence[int]], first: int = 0) -> str:
    """Render one ``node: neighbours`` line per node from ``first`` on."""
    return "\n".join(
        f"{node}: {' '.join(map(str, adjacency[node]))}".rstrip()
        for node in range(first, len(adjacency))
    )


def _ints(tokens: Sequence[str]) -> list[int]:
    try:
        return [int(token) for token in tokens]
    except ValueError:
        raise ValueError(f"expected integers, got {' '.join(tokens)!r}") from None


def read_graph(path: str | os.PathLike[str]) -> list[list[int]]:
    """Read ``V E`` followed by ``E`` undirected edges ``u v``."""
    with open(path, encoding="utf-8") as handle:
        numbers = _ints(handle.read().split())
    if len(numbers) < 2:
        raise ValueError("missing node and edge counts")
    node_count, edge_count = numbers[0], numbers[1]
    pairs = numbers[2:2 + 2 * edge_count]
    if len(pairs) < 2 * edge_count:
        raise ValueError(f"expected {edge_count} edges")
    return adjacency_list(node_count, zip(pairs[::2], pairs[1::2]))


def read_weighted_graph(path: str | os.PathLike[str]) -> WeightedAdjacency:
    """Read a ``V E`` line, then one directed edge ``u v w`` per line."""
    with open(path, encoding="utf-8") as handle:
        lines = handle.read().splitlines()
    if not lines:
        raise ValueError("missing node and edge counts")
    header = _ints(lines[0].split()[:2])
    if len(header) < 2:
        raise ValueError("missing node and edge counts")
    node_count = header[0]
    adjacency: WeightedAdjacency = [[] for _ in range(node_count)]
    for line in lines[1:]:
        fields = line.split()
        if not fields:
            continue
        if len(fields) < 3:
            raise ValueError(f"edge line needs 'u v w': {line!r}")
        u, v, weight = _ints(fields[:3])
        _check_edge(node_count, u, v)
        adjacency[u].append((v, weight))
    return adjacency


def format_weighted(adjacency: Sequence[Sequence[tuple[int, int]]]) -> str:
    """Render one ``node -> (neighbour, weight) ...`` line per node."""
    return "\n".join(
        f"{node} -> {' '.join(f'({v}, {w})' for v, w in edges)}".rstrip()
        for node, edges in enumerate(adjacency)
    )