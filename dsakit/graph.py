"""Graph utilities over adjacency matrices: properties, traversals and shortest paths."""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Sequence
from pathlib import Path

Matrix = list[list[int]]


def _leading_ints(line: str) -> list[int]:
    """Parse integers from a line, stopping at the first token that is not one."""
    numbers: list[int] = []
    for token in line.split():
        try:
            numbers.append(int(token))
        except ValueError:
            break
    return numbers


def _read_header(path: str | Path) -> tuple[int, list[str]]:
    lines = Path(path).read_text(encoding="utf-8").splitlines()
    if not lines or not lines[0].split():
        raise ValueError(f"{path}: missing vertex count")
    n = int(lines[0].split()[0])
    if n < 0:
        raise ValueError(f"{path}: negative vertex count {n}")
    rows = lines[1 : n + 1]
    rows += [""] * (n - len(rows))
    return n, rows


def read_matrix_as_lists(path: str | Path) -> list[list[int]]:
    """Read an adjacency matrix file and return adjacency lists of its 1 entries."""
    _, rows = _read_header(path)
    return [[j for j, value in enumerate(_leading_ints(row)) if value == 1] for row in rows]


def read_lists_as_matrix(path: str | Path) -> Matrix:
    """Read 1-based adjacency lists and return a symmetric 0/1 adjacency matrix."""
    n, rows = _read_header(path)
    matrix = [[0] * n for _ in range(n)]
    for i, row in enumerate(rows):
        if row.strip() in ("", "0"):
            continue
        for neighbour in _leading_ints(row):
            j = neighbour - 1
            if not 0 <= j < n:
                raise ValueError(f"{path}: vertex {neighbour} out of range 1..{n}")
            matrix[i][j] = matrix[j][i] = 1
    return matrix


def _check_vertex(matrix: Sequence[Sequence[int]], vertex: int) -> None:
    if not 0 <= vertex < len(matrix):
        raise IndexError(f"vertex {vertex} out of range for a graph of {len(matrix)}")


def _require_undirected(matrix: Sequence[Sequence[int]], operation: str) -> None:
    if is_directed(matrix):
        raise ValueError(f"{operation} requires an undirected graph")


def is_directed(matrix: Sequence[Sequence[int]]) -> bool:
    """Return True if the matrix is not symmetric."""
    n = len(matrix)
    return any(matrix[i][j] != matrix[j][i] for i in range(n) for j in range(n))


def count_vertices(matrix: Sequence[Sequence[int]]) -> int:
    """Return the number of vertices."""
    return len(matrix)


def count_edges(matrix: Sequence[Sequence[int]]) -> int:
    """Count positive entries; halved when the graph is undirected."""
    edges = sum(1 for row in matrix for value in row if value > 0)
    return edges if is_directed(matrix) else edges // 2


def isolated_vertices(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the vertices with no incoming or outgoing edge."""
    n = len(matrix)
    return [
        i
        for i in range(n)
        if not any(matrix[i][j] > 0 or matrix[j][i] > 0 for j in range(n))
    ]


def is_complete(matrix: Sequence[Sequence[int]]) -> bool:
    """Return True for an undirected graph with every distinct pair joined and no loops."""
    if is_directed(matrix):
        return False
    n = len(matrix)
    return all(
        matrix[i][j] == (0 if i == j else 1) for i in range(n) for j in range(n)
    )


def _two_colour(matrix: Sequence[Sequence[int]], start: int, colour: list[int]) -> bool:
    colour[start] = 0
    queue = deque([start])
    while queue:
        u = queue.popleft()
        for v, weight in enumerate(matrix[u]):
            if weight > 0:
                if colour[v] == -1:
                    colour[v] = 1 - colour[u]
                    queue.append(v)
                elif colour[v] == colour[u]:
                    return False
    return True


def is_bipartite(matrix: Sequence[Sequence[int]]) -> bool:
    """Return True if the undirected graph's vertices split into two independent sets."""
    if is_directed(matrix):
        return False
    colour = [-1] * len(matrix)
    return all(
        colour[start] != -1 or _two_colour(matrix, start, colour)
        for start in range(len(matrix))
    )


def is_complete_bipartite(matrix: Sequence[Sequence[int]]) -> bool:
    """Return True if the component of vertex 0 joins every vertex of one side to every one of the other."""
    if not matrix or not is_bipartite(matrix):
        return False
    colour = [-1] * len(matrix)
    colour[0] = 0
    queue = deque([0])
    side_a: list[int] = []
    side_b: list[int] = []
    while queue:
        u = queue.popleft()
        (side_a if colour[u] == 0 else side_b).append(u)
        for v, weight in enumerate(matrix[u]):
            if weight > 0 and colour[v] == -1:
                colour[v] = 1 - colour[u]
                queue.append(v)
    if any(matrix[u][v] != 1 for u in side_a for v in side_b):
        return False
    return bool(side_a) and bool(side_b)


def to_undirected(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Return the 0/1 symmetric matrix joining i and j when either direction has an edge."""
    n = len(matrix)
    return [
        [1 if matrix[i][j] > 0 or matrix[j][i] > 0 else 0 for j in range(n)]
        for i in range(n)
    ]


def complement(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Return the complement of an undirected graph, without loops."""
    _require_undirected(matrix, "complement")
    n = len(matrix)
    return [
        [1 if i != j and matrix[i][j] == 0 else 0 for j in range(n)] for i in range(n)
    ]


def euler_cycle(matrix: Sequence[Sequence[int]]) -> list[int] | None:
    """Return an Euler cycle from vertex 0 by Hierholzer's method, or None if a degree is odd."""
    _require_undirected(matrix, "euler_cycle")
    if not matrix:
        return None
    remaining = [list(row) for row in matrix]
    degree = [sum(row) for row in matrix]
    if any(d % 2 for d in degree):
        return None
    cycle: list[int] = []
    path = [0]
    current = 0
    while path:
        following = None
        if degree[current] > 0:
            following = next(
                (v for v, weight in enumerate(remaining[current]) if weight > 0), None
            )
            if following is None:
                degree[current] = 0
        if following is not None:
            path.append(current)
            remaining[current][following] -= 1
            remaining[following][current] -= 1
            degree[current] -= 1
            degree[following] -= 1
            current = following
        else:
            cycle.append(current)
            current = path.pop()
    return cycle


def _spanning_tree(matrix: Sequence[Sequence[int]], start: int, depth_first: bool) -> Matrix:
    n = len(matrix)
    tree = [[0] * n for _ in range(n)]
    visited = [False] * n
    frontier = deque([start])
    visited[start] = True
    while frontier:
        u = frontier.pop() if depth_first else frontier.popleft()
        for v, weight in enumerate(matrix[u]):
            if weight > 0 and not visited[v]:
                tree[u][v] = tree[v][u] = 1
                visited[v] = True
                frontier.append(v)
    return tree


def dfs_spanning_tree(matrix: Sequence[Sequence[int]], start: int) -> Matrix:
    """Return the spanning tree of start's component found by a stack-driven search."""
    _require_undirected(matrix, "dfs_spanning_tree")
    _check_vertex(matrix, start)
    return _spanning_tree(matrix, start, depth_first=True)


def bfs_spanning_tree(matrix: Sequence[Sequence[int]], start: int) -> Matrix:
    """Return the spanning tree of start's component found by breadth-first search."""
    _require_undirected(matrix, "bfs_spanning_tree")
    _check_vertex(matrix, start)
    return _spanning_tree(matrix, start, depth_first=False)


def is_connected(u: int, v: int, matrix: Sequence[Sequence[int]]) -> bool:
    """Return True if v can be reached from u along edges."""
    _check_vertex(matrix, u)
    _check_vertex(matrix, v)
    visited = [False] * len(matrix)
    visited[u] = True
    queue = deque([u])
    while queue:
        current = queue.popleft()
        if current == v:
            return True
        for following, weight in enumerate(matrix[current]):
            if weight > 0 and not visited[following]:
                visited[following] = True
                queue.append(following)
    return False


def _path(previous: list[int | None], end: int) -> list[int]:
    path: list[int] = []
    vertex: int | None = end
    while vertex is not None:
        path.append(vertex)
        vertex = previous[vertex]
    path.reverse()
    return path


def dijkstra(start: int, end: int, matrix: Sequence[Sequence[int]]) -> list[int] | None:
    """Return the cheapest path from start to end over positive weights, or None if unreachable."""
    _check_vertex(matrix, start)
    _check_vertex(matrix, end)
    n = len(matrix)
    dist = [math.inf] * n
    previous: list[int | None] = [None] * n
    visited = [False] * n
    dist[start] = 0
    heap = [(0, start)]
    while heap:
        _, u = heapq.heappop(heap)
        if visited[u]:
            continue
        visited[u] = True
        for v, weight in enumerate(matrix[u]):
            if weight > 0 and not visited[v] and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
                previous[v] = u
                heapq.heappush(heap, (dist[v], v))
    if dist[end] == math.inf:
        return None
    return _path(previous, end)


def bellman_ford(start: int, end: int, matrix: Sequence[Sequence[int]]) -> list[int] | None:
    """Return the cheapest path by Bellman-Ford relaxation, or None if unreachable.

    Only positive entries count as edges; a cycle still improvable after the
    relaxation rounds raises ValueError.
    """
    _check_vertex(matrix, start)
    _check_vertex(matrix, end)
    n = len(matrix)
    dist = [math.inf] * n
    previous: list[int | None] = [None] * n
    dist[start] = 0
    edges = [
        (u, v, weight)
        for u, row in enumerate(matrix)
        for v, weight in enumerate(row)
        if weight > 0
    ]
    for _ in range(n - 1):
        for u, v, weight in edges:
            if dist[u] != math.inf and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
                previous[v] = u
    if any(dist[u] != math.inf and dist[u] + w < dist[v] for u, v, w in edges):
        raise ValueError("graph contains a negative cycle")
    if dist[end] == math.inf:
        return None
    return _path(previous, end)