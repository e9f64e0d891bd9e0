"""Breadth-first searches over grids of integers."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence

_EIGHT_WAYS = ((0, 1), (1, 0), (-1, 0), (0, -1), (1, 1), (-1, -1), (-1, 1), (1, -1))
_FOUR_WAYS = ((-1, 0), (0, 1), (1, 0), (0, -1))

FRESH = 1
ROTTEN = 2

Grid = Sequence[Sequence[int]]


def _dimensions(grid: Grid) -> tuple[int, int]:
    if not grid:
        raise ValueError("grid has no rows")
    cols = len(grid[0])
    if any(len(row) != cols for row in grid):
        raise ValueError("grid rows differ in length")
    return len(grid), cols


def _neighbours(
    cell: tuple[int, int], rows: int, cols: int, steps: Sequence[tuple[int, int]]
) -> Iterator[tuple[int, int]]:
    row, col = cell
    for dr, dc in steps:
        r, c = row + dr, col + dc
        if 0 <= r < rows and 0 <= c < cols:
            yield r, c


def shortest_path_binary_matrix(grid: Grid) -> int:
    """Cells on the shortest 8-connected path of zeros from corner to corner.

    Returns -1 when no such path exists. The grid must be square.
    """
    n, cols = _dimensions(grid)
    if cols != n:
        raise ValueError("grid must be square")
    if grid[0][0] != 0 or grid[n - 1][n - 1] != 0:
        return -1
    goal = (n - 1, n - 1)
    length = {(0, 0): 1}
    queue = deque([(0, 0)])
    while queue:
        cell = queue.popleft()
        if cell == goal:
            return length[cell]
        for nxt in _neighbours(cell, n, n, _EIGHT_WAYS):
            if nxt not in length and grid[nxt[0]][nxt[1]] == 0:
                length[nxt] = length[cell] + 1
                queue.append(nxt)
    return -1


def nearest_zero_distances(matrix: Grid) -> list[list[int]]:
    """Distance from each cell to its nearest zero, moving in four directions.

    Cells that cannot reach a zero keep -1.
    """
    rows, cols = _dimensions(matrix)
    result = [[-1] * cols for _ in range(rows)]
    queue: deque[tuple[int, int]] = deque()
    for r, row in enumerate(matrix):
        for c, value in enumerate(row):
            if value == 0:
                result[r][c] = 0
                queue.append((r, c))
    while queue:
        cell = queue.popleft()
        for r, c in _neighbours(cell, rows, cols, _FOUR_WAYS):
            if result[r][c] == -1:
                result[r][c] = result[cell[0]][cell[1]] + 1
                queue.append((r, c))
    return result


def minutes_to_rot(grid: Grid) -> int:
    """Minutes until rot (2) spreads to every fresh orange (1), or -1 if never."""
    rows, cols = _dimensions(grid)
    rotten: set[tuple[int, int]] = set()
    queue: deque[tuple[int, int, int]] = deque()
    fresh = 0
    for r, row in enumerate(grid):
        for c, value in enumerate(row):
            if value == ROTTEN:
                rotten.add((r, c))
                queue.append((r, c, 0))
            elif value == FRESH:
                fresh += 1
    elapsed = 0
    converted = 0
    while queue:
        r, c, minute = queue.popleft()
        elapsed = max(elapsed, minute)
        for nr, nc in _neighbours((r, c), rows, cols, _FOUR_WAYS):
            if (nr, nc) not in rotten and grid[nr][nc] == FRESH:
                rotten.add((nr, nc))
                queue.append((nr, nc, minute + 1))
                converted += 1
    return elapsed if converted == fresh else -1