"""Directed graph stored as adjacency lists."""

from __future__ import annotations

from collections import deque


class AdjacencyListGraph:
    """Directed graph on vertices ``0 .. vertex_count - 1``."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count cannot be negative")
        self.vertex_count = vertex_count
        self._adjacency: list[list[int]] = [[] for _ in range(vertex_count)]

    def _check(self, vertex: int) -> int:
        if not 0 <= vertex < self.vertex_count:
            raise IndexError(f"vertex {vertex} out of range")
        return vertex

    def add_edge(self, source: int, destination: int) -> None:
        """Append an edge; neighbours keep the order they were added in."""
        self._adjacency[self._check(source)].append(self._check(destination))

    def indegree(self, vertex: int) -> int:
        """Number of edges ending at ``vertex``."""
        self._check(vertex)
        return sum(neighbours.count(vertex) for neighbours in self._adjacency)

    def outdegree(self, vertex: int) -> int:
        """Number of edges leaving ``vertex``."""
        return len(self._adjacency[self._check(vertex)])

    def bfs(self, start: int) -> list[int]:
        """Vertices in breadth-first order from ``start``."""
        visited = {self._check(start)}
        order = [start]
        pending = deque([start])
        while pending:
            for neighbour in self._adjacency[pending.popleft()]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    order.append(neighbour)
                    pending.append(neighbour)
        return order

    def dfs(self, start: int) -> list[int]:
        """Vertices in depth-first order from ``start``."""
        self._check(start)
        visited: set[int] = set()
        order: list[int] = []

        def visit(vertex: int) -> None:
            visited.add(vertex)
            order.append(vertex)
            for neighbour in self._adjacency[vertex]:
                if neighbour not in visited:
                    visit(neighbour)

        visit(start)
        return order

    def format(self) -> str:
        """One line per vertex: the vertex then its neighbours, each followed by ``->``."""
        return "".join(
            "".join(f"{item}->" for item in [vertex, *neighbours]) + "\n"
            for vertex, neighbours in enumerate(self._adjacency)
        )