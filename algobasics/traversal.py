"""Traversals and orderings of graphs stored as adjacency lists."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence

Adjacency = Sequence[Sequence[int]]


def _check_node(adjacency: Adjacency, node: int, what: str = "start") -> None:
    if not 0 <= node < len(adjacency):
        raise ValueError(f"{what} node {node} is not in a graph of {len(adjacency)} nodes")


def bfs(adjacency: Adjacency, start: int = 0) -> list[int]:
    """Return nodes reachable from ``start`` in breadth-first order."""
    _check_node(adjacency, start)
    visited = [False] * len(adjacency)
    visited[start] = True
    queue = deque([start])
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in adjacency[node]:
            if not visited[neighbour]:
                visited[neighbour] = True
                queue.append(neighbour)
    return order


def dfs_recursive(adjacency: Adjacency, start: int = 0) -> list[int]:
    """Return nodes in the order a recursive depth-first search visits them.

    Neighbours are explored in list order. The recursion is kept on an
    explicit stack of iterators, so deep graphs do not hit Python's limit.
    """
    _check_node(adjacency, start)
    visited = [False] * len(adjacency)
    visited[start] = True
    order = [start]
    stack: list[Iterator[int]] = [iter(adjacency[start])]
    while stack:
        for neighbour in stack[-1]:
            if not visited[neighbour]:
                visited[neighbour] = True
                order.append(neighbour)
                stack.append(iter(adjacency[neighbour]))
                break
        else:
            stack.pop()
    return order


def _stack_dfs(adjacency: Adjacency, start: int, reverse: bool) -> list[int]:
    _check_node(adjacency, start)
    visited = [False] * len(adjacency)
    order: list[int] = []
    stack = [start]
    while stack:
        node = stack.pop()
        if visited[node]:
            continue
        visited[node] = True
        order.append(node)
        neighbours: Iterable[int] = (
            reversed(adjacency[node]) if reverse else adjacency[node]
        )
        stack.extend(n for n in neighbours if not visited[n])
    return order


def dfs_stack(adjacency: Adjacency, start: int = 0) -> list[int]:
    """Depth-first search with a stack, pushing neighbours in list order.

    The last neighbour listed is therefore explored first.
    """
    return _stack_dfs(adjacency, start, reverse=False)


def dfs_iterative(adjacency: Adjacency, start: int = 0) -> list[int]:
    """Depth-first search with a stack, pushing neighbours in reverse.

    This explores the first listed neighbour first, like the recursive form.
    """
    return _stack_dfs(adjacency, start, reverse=True)


def shortest_path_lengths(
    edges: Iterable[Sequence[int]], node_count: int, source: int
) -> list[int]:
    """Edge counts of shortest paths from ``source`` in an undirected graph.

    Unreachable nodes get -1.
    """
    adjacency: list[list[int]] = [[] for _ in range(node_count)]
    for u, v in edges:
        _check_node(adjacency, u, "edge")
        _check_node(adjacency, v, "edge")
        adjacency[u].append(v)
        adjacency[v].append(u)
    _check_node(adjacency, source, "source")

    distance: list[int | None] = [None] * node_count
    distance[source] = 0
    queue = deque([source])
    while queue:
        node = queue.popleft()
        step = distance[node] + 1  # type: ignore[operator]
        for neighbour in adjacency[node]:
            if distance[neighbour] is None or step < distance[neighbour]:
                distance[neighbour] = step
                queue.append(neighbour)
    return [-1 if d is None else d for d in distance]


def _indegrees(adjacency: Adjacency) -> list[int]:
    indegree = [0] * len(adjacency)
    for neighbours in adjacency:
        for target in neighbours:
            indegree[target] += 1
    return indegree


def topological_sort(adjacency: Adjacency) -> list[int]:
    """Return one topological order of a directed graph (Kahn's algorithm).

    Raises ValueError when the graph has a cycle.
    """
    indegree = _indegrees(adjacency)
    queue = deque(node for node, degree in enumerate(indegree) if degree == 0)
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for target in adjacency[node]:
            indegree[target] -= 1
            if indegree[target] == 0:
                queue.append(target)
    if len(order) != len(adjacency):
        raise ValueError("The graph contains a cycle. Topological sort not possible.")
    return order


def all_topological_sorts(adjacency: Adjacency) -> Iterator[list[int]]:
    """Yield every topological order of a directed graph, smallest first.

    Repeated edges count once. A graph with a cycle yields nothing.
    """
    successors = [sorted(set(neighbours)) for neighbours in adjacency]
    indegree = _indegrees(successors)
    placed = [False] * len(successors)
    chosen: list[int] = []

    def extend() -> Iterator[list[int]]:
        if len(chosen) == len(successors):
            yield list(chosen)
            return
        for node, degree in enumerate(indegree):
            if placed[node] or degree:
                continue
            placed[node] = True
            chosen.append(node)
            for target in successors[node]:
                indegree[target] -= 1
            yield from extend()
            for target in successors[node]:
                indegree[target] += 1
            chosen.pop()
            placed[node] = False

    return extend()


def is_bipartite(adjacency: Adjacency) -> bool:
    """Check whether the nodes can be split into two sides with no edge inside a side."""
    colour: list[int | None] = [None] * len(adjacency)
    for start in range(len(adjacency)):
        if colour[start] is not None:
            continue
        colour[start] = 0
        queue = deque([start])
        while queue:
            node = queue.popleft()
            for neighbour in adjacency[node]:
                if colour[neighbour] is None:
                    colour[neighbour] = 1 - colour[node]  # type: ignore[operator]
                    queue.append(neighbour)
                elif colour[neighbour] == colour[node]:
                    return False
    return True