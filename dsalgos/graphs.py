"""Graph representations and shortest-path algorithms on small dense graphs."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import permutations

INF = 10**9
"""Distance used for "no path" by Bellman-Ford and Floyd-Warshall."""

INT_MAX = 2**31 - 1
"""Distance used for "no path" by Dijkstra."""


def _check_vertex(vertex: int, count: int) -> None:
    if not 0 <= vertex < count:
        raise ValueError(f"vertex {vertex} is outside 0..{count - 1}")


def _check_square(matrix: Sequence[Sequence[int]]) -> int:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    return size


def adjacency_list(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Build a directed adjacency list, keeping edges in insertion order."""
    adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
    for u, v in edges:
        _check_vertex(u, vertex_count)
        _check_vertex(v, vertex_count)
        adjacency[u].append(v)
    return adjacency


def adjacency_matrix(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Build a directed 0/1 adjacency matrix."""
    matrix = [[0] * vertex_count for _ in range(vertex_count)]
    for u, v in edges:
        _check_vertex(u, vertex_count)
        _check_vertex(v, vertex_count)
        matrix[u][v] = 1
    return matrix


def format_adjacency_list(adjacency: Sequence[Sequence[int]]) -> str:
    """Render an adjacency list as ``i -> a -> b`` lines under a heading."""
    lines = ["Adjacency List: "]
    lines.extend(
        str(vertex) + "".join(f" -> {neighbour}" for neighbour in neighbours)
        for vertex, neighbours in enumerate(adjacency)
    )
    return "\n".join(lines) + "\n"


def format_adjacency_matrix(matrix: Sequence[Sequence[int]]) -> str:
    """Render an adjacency matrix, each cell followed by two spaces."""
    lines = ["Adjacency Matrix:"]
    lines.extend("".join(f"{cell}  " for cell in row) for row in matrix)
    return "\n".join(lines) + "\n"


def bellman_ford(
    vertex_count: int, edges: Iterable[tuple[int, int, int]], source: int
) -> list[int]:
    """Relax every edge ``vertex_count - 1`` times; unreachable vertices keep ``INF``."""
    _check_vertex(source, vertex_count)
    edge_list = list(edges)
    for u, v, _ in edge_list:
        _check_vertex(u, vertex_count)
        _check_vertex(v, vertex_count)
    dist = [INF] * vertex_count
    dist[source] = 0
    for _ in range(vertex_count - 1):
        for u, v, weight in edge_list:
            dist[v] = min(dist[v], weight + dist[u])
    return dist


def _closest_pending(dist: list[int], done: list[bool]) -> int:
    best = INT_MAX
    index = -1
    for vertex, (distance, finished) in enumerate(zip(dist, done)):
        if not finished and distance <= best:
            best, index = distance, vertex
    return index


def dijkstra(matrix: Sequence[Sequence[int]], source: int) -> list[int]:
    """Single-source distances over a weight matrix where 0 means no edge.

    Unreachable vertices are reported as ``INT_MAX``.
    """
    size = _check_square(matrix)
    _check_vertex(source, size)
    dist = [INT_MAX] * size
    done = [False] * size
    dist[source] = 0
    for _ in range(size - 1):
        u = _closest_pending(dist, done)
        done[u] = True
        if dist[u] == INT_MAX:
            continue
        for v, weight in enumerate(matrix[u]):
            if not done[v] and weight and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
    return dist


def floyd_warshall(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """All-pairs distances; ``INF`` entries mark missing edges."""
    size = _check_square(matrix)
    dist = [list(row) for row in matrix]
    for k in range(size):
        through = dist[k]
        for row in dist:
            to_k = row[k]
            for j, onward in enumerate(through):
                if to_k + onward < row[j]:
                    row[j] = to_k + onward
    return dist


def format_distance_matrix(matrix: Sequence[Sequence[int]]) -> str:
    """Render a distance matrix, writing ``I`` for ``INF``."""
    return "".join(
        "".join("I " if cell == INF else f"{cell} " for cell in row) + "\n"
        for row in matrix
    )


def shortest_tour(matrix: Sequence[Sequence[int]], start: int) -> int:
    """Cost of the cheapest round trip from ``start`` through every vertex, by brute force."""
    size = _check_square(matrix)
    _check_vertex(start, size)
    others = [vertex for vertex in range(size) if vertex != start]

    def cost(order: tuple[int, ...]) -> int:
        path = (start, *order, start)
        return sum(matrix[a][b] for a, b in zip(path, path[1:]))

    return min(cost(order) for order in permutations(others))