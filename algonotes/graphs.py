"""Graph representations and breadth-first traversal."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence


def _check_vertices(n: int, u: int, v: int) -> None:
    for vertex in (u, v):
        if not 0 <= vertex <= n:
            raise ValueError(f"vertex {vertex} is outside 0..{n}")


def adjacency_list(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Directed adjacency list over vertices ``0..n``; each edge is ``u -> v``."""
    if n < 0:
        raise ValueError("vertex count must not be negative")
    adj: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        _check_vertices(n, u, v)
        adj[u].append(v)
    return adj


def adjacency_matrix(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Undirected 0/1 adjacency matrix over vertices ``0..n``."""
    if n < 0:
        raise ValueError("vertex count must not be negative")
    matrix = [[0] * (n + 1) for _ in range(n + 1)]
    for u, v in edges:
        _check_vertices(n, u, v)
        matrix[u][v] = 1
        matrix[v][u] = 1
    return matrix


def format_adjacency_list(adj: Sequence[Sequence[int]]) -> str:
    """Render an adjacency list one vertex per line as ``u-->{ a,b, }``."""
    return "\n".join(
        f"{vertex}-->{{ {''.join(f'{n},' for n in neighbours)} }}"
        for vertex, neighbours in enumerate(adj)
    )


def bfs(vertex_count: int, adjacency: Sequence[Iterable[int]]) -> list[int]:
    """Breadth-first order of the vertices reachable from vertex 0."""
    if vertex_count < 1:
        raise ValueError("graph must have at least one vertex")
    visited = [False] * vertex_count
    visited[0] = True
    queue = deque([0])
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in adjacency[node]:
            if not 0 <= neighbour < vertex_count:
                raise ValueError(f"vertex {neighbour} is outside 0..{vertex_count - 1}")
            if not visited[neighbour]:
                visited[neighbour] = True
                queue.append(neighbour)
    return order