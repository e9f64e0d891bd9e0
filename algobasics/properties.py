"""Planarity screening and minimum vertex colouring of small graphs."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import combinations
from typing import Optional

Matrix = Sequence[Sequence[int]]
Adjacency = Sequence[Sequence[int]]

_K33_SIDES = ((0, 1, 2), (3, 4, 5))


def _check_square(matrix: Matrix) -> None:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("adjacency matrix must be square")


def is_k5(matrix: Matrix) -> bool:
    """True when the graph has five nodes, each joined to the other four."""
    _check_square(matrix)
    if len(matrix) != 5:
        return False
    return all(
        sum(1 for j, edge in enumerate(row) if j != i and edge) == 4
        for i, row in enumerate(matrix)
    )


def is_k33(matrix: Matrix) -> bool:
    """True when nodes 0-2 and 3-5 form the complete bipartite graph K3,3."""
    _check_square(matrix)
    if len(matrix) != 6:
        return False
    left, right = _K33_SIDES
    for side in _K33_SIDES:
        if any(matrix[a][b] for a, b in combinations(side, 2)):
            return False
    return all(matrix[a][b] for a in left for b in right)


def is_planar(matrix: Matrix) -> bool:
    """A rough test: the graph is taken as planar unless it is K5 or K3,3."""
    return not (is_k5(matrix) or is_k33(matrix))


def _colour_with(adjacency: Adjacency, limit: int) -> Optional[list[int]]:
    colours = [0] * len(adjacency)

    def place(node: int) -> bool:
        if node == len(adjacency):
            return True
        for colour in range(1, limit + 1):
            if all(colours[other] != colour for other in adjacency[node]):
                colours[node] = colour
                if place(node + 1):
                    return True
                colours[node] = 0
        return False

    return colours if place(0) else None


def minimum_colouring(adjacency: Adjacency) -> list[int]:
    """Colour nodes 1, 2, ... using as few colours as possible.

    Tries one colour, then two, and so on, backtracking over nodes in order.
    """
    for limit in range(1, len(adjacency) + 1):
        colours = _colour_with(adjacency, limit)
        if colours is not None:
            return colours
    return []


def chromatic_number(adjacency: Adjacency) -> int:
    """The fewest colours that give neighbouring nodes different colours."""
    return len(set(minimum_colouring(adjacency)))