import random
from itertools import combinations

import pytest

from algobasics.properties import (
    chromatic_number,
    is_k5,
    is_k33,
    is_planar,
    minimum_colouring,
)


def _matrix(size, edges):
    matrix = [[0] * size for _ in range(size)]
    for u, v in edges:
        matrix[u][v] = matrix[v][u] = 1
    return matrix


def _lists(size, edges):
    adjacency = [[] for _ in range(size)]
    for u, v in edges:
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency


K5_EDGES = list(combinations(range(5), 2))
K33_EDGES = [(a, b) for a in (0, 1, 2) for b in (3, 4, 5)]


def test_k5_detected_and_not_planar():
    matrix = _matrix(5, K5_EDGES)
    assert is_k5(matrix)
    assert not is_planar(matrix)


def test_k5_missing_edge():
    matrix = _matrix(5, K5_EDGES[1:])
    assert not is_k5(matrix)
    assert is_planar(matrix)


def test_k5_needs_five_nodes():
    assert not is_k5(_matrix(4, list(combinations(range(4), 2))))


def test_k33_detected_and_not_planar():
    matrix = _matrix(6, K33_EDGES)
    assert is_k33(matrix)
    assert not is_planar(matrix)


def test_k33_with_internal_edge_rejected():
    assert not is_k33(_matrix(6, K33_EDGES + [(0, 1)]))


def test_k33_missing_cross_edge_rejected():
    assert not is_k33(_matrix(6, K33_EDGES[:-1]))


def test_k33_needs_six_nodes():
    assert not is_k33(_matrix(5, K5_EDGES))


def test_non_square_matrix_rejected():
    with pytest.raises(ValueError):
        is_planar([[0, 1], [1]])


def test_four_cycle_needs_two_colours():
    adjacency = _lists(4, [(0, 1), (1, 2), (2, 3), (3, 0)])
    assert chromatic_number(adjacency) == 2


@pytest.mark.parametrize("size", [1, 2, 3, 4, 5])
def test_complete_graph_needs_every_colour(size):
    adjacency = _lists(size, list(combinations(range(size), 2)))
    assert chromatic_number(adjacency) == size
    assert sorted(minimum_colouring(adjacency)) == list(range(1, size + 1))


def test_edgeless_graph_needs_one_colour():
    assert minimum_colouring(_lists(4, [])) == [1, 1, 1, 1]


def test_empty_graph():
    assert minimum_colouring([]) == []
    assert chromatic_number([]) == 0


@pytest.mark.parametrize("seed", range(20))
def test_colouring_is_proper_and_minimal(seed):
    rng = random.Random(seed)
    size = rng.randint(1, 7)
    edges = [pair for pair in combinations(range(size), 2) if rng.random() < 0.4]
    adjacency = _lists(size, edges)
    colours = minimum_colouring(adjacency)
    count = chromatic_number(adjacency)
    assert len(colours) == size
    assert all(colours[u] != colours[v] for u, v in edges)
    assert set(colours) == set(range(1, count + 1))
    if count > 1:
        assert not _has_colouring(adjacency, count - 1)


def _has_colouring(adjacency, limit):
    size = len(adjacency)

    def assignments(index, chosen):
        if index == size:
            yield chosen
            return
        for colour in range(limit):
            yield from assignments(index + 1, chosen + [colour])

    return any(
        all(chosen[u] != chosen[v] for u in range(size) for v in adjacency[u])
        for chosen in assignments(0, [])
    )