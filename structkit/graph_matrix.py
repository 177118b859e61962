"""Graph algorithms over adjacency matrices of 0 and 1."""

from __future__ import annotations

from collections import deque
from typing import Sequence

Matrix = Sequence[Sequence[int]]


def _size(matrix: Matrix) -> int:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("adjacency matrix must be square")
    return size


def _check_vertex(size: int, vertex: int) -> int:
    if not 0 <= vertex < size:
        raise IndexError(f"vertex {vertex} out of range")
    return vertex


def bfs(matrix: Matrix, start: int = 0) -> list[int]:
    """Vertices in breadth-first order from ``start``."""
    size = _size(matrix)
    visited = {_check_vertex(size, start)}
    order = [start]
    pending = deque([start])
    while pending:
        vertex = pending.popleft()
        for neighbour in range(size):
            if matrix[vertex][neighbour] and neighbour not in visited:
                visited.add(neighbour)
                order.append(neighbour)
                pending.append(neighbour)
    return order


def all_paths(matrix: Matrix, source: int, destination: int) -> list[list[int]]:
    """Every simple path from ``source`` to ``destination``, in depth-first order."""
    size = _size(matrix)
    _check_vertex(size, source)
    _check_vertex(size, destination)
    paths: list[list[int]] = []
    path: list[int] = []
    on_path: set[int] = set()

    def visit(vertex: int) -> None:
        on_path.add(vertex)
        path.append(vertex)
        if vertex == destination:
            paths.append(list(path))
        else:
            for neighbour in range(size):
                if matrix[vertex][neighbour] == 1 and neighbour not in on_path:
                    visit(neighbour)
        path.pop()
        on_path.discard(vertex)

    visit(source)
    return paths


def has_cycle(matrix: Matrix) -> bool:
    """Whether the undirected graph has a cycle reachable from vertex 0."""
    size = _size(matrix)
    if size == 0:
        return False
    visited: set[int] = set()

    def visit(vertex: int, parent: int) -> bool:
        visited.add(vertex)
        for neighbour in range(size):
            if not matrix[vertex][neighbour] or neighbour == parent:
                continue
            if neighbour in visited or visit(neighbour, vertex):
                return True
        return False

    return visit(0, -1)


def find_path(matrix: Matrix, source: int, destination: int) -> list[int] | None:
    """A path found by depth-first search, or None when there is none.

    Vertices explored once are not tried again, and a path back to
    ``source`` itself is never found.
    """
    size = _size(matrix)
    _check_vertex(size, source)
    _check_vertex(size, destination)
    visited: set[int] = set()
    path = [source]

    def visit(vertex: int) -> bool:
        visited.add(vertex)
        for neighbour in range(size):
            if matrix[vertex][neighbour] and neighbour not in visited:
                path.append(neighbour)
                if neighbour == destination or visit(neighbour):
                    return True
                path.pop()
        return False

    return path if visit(source) else None


def connected_components(matrix: Matrix) -> tuple[int, list[int]]:
    """Number of components and each vertex's component label, counted from 1."""
    size = _size(matrix)
    labels = [0] * size
    count = 0

    def visit(vertex: int) -> None:
        labels[vertex] = count
        for neighbour in range(size):
            if matrix[vertex][neighbour] and labels[neighbour] == 0:
                visit(neighbour)

    for vertex in range(size):
        if labels[vertex] == 0:
            count += 1
            visit(vertex)
    return count, labels


def is_weakly_connected(matrix: Matrix) -> bool:
    """Whether the graph is connected once edge directions are ignored."""
    size = _size(matrix)
    if size == 0:
        return True
    undirected = [[0] * size for _ in range(size)]
    for row in range(size):
        for column in range(size):
            if matrix[row][column] == 1:
                undirected[row][column] = undirected[column][row] = 1
    return len(bfs(undirected, 0)) == size


def in_degree(matrix: Matrix, vertex: int) -> int:
    """Number of edges ending at ``vertex``."""
    size = _size(matrix)
    _check_vertex(size, vertex)
    return sum(1 for row in matrix if row[vertex] == 1)


def out_degree(matrix: Matrix, vertex: int) -> int:
    """Number of edges leaving ``vertex``."""
    size = _size(matrix)
    _check_vertex(size, vertex)
    return sum(1 for entry in matrix[vertex] if entry == 1)


def format_matrix(matrix: Matrix) -> str:
    """The matrix as lines of space-separated entries."""
    _size(matrix)
    return "".join(" ".join(str(entry) for entry in row) + "\n" for row in matrix)