"""Directed graph on integer vertices, backed by an adjacency matrix.

Vertices are the integers 0..n-1 and the vertex count is fixed when the
graph is built.  Each row of the matrix is a bytearray, so
``rows[u][v] == 1`` means there is an edge u -> v.  A matrix is wasteful
for sparse graphs but it makes has_edge O(1), keeps neighbour scans in
ascending index order for free, and matches the 0/1 matrix format the
graphs are usually read from.

Self-loops are just the diagonal.  Parallel edges can't be expressed:
adding an edge twice leaves the graph unchanged.
"""
from __future__ import annotations

from typing import Iterable, Iterator, Sequence


class GraphError(ValueError):
    """Base class for malformed graph input."""


class InvalidVertexCount(GraphError):
    """Raised when a graph is built with fewer than one vertex."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"Vertex count must be a positive integer, got {count!r}")


class InvalidVertex(GraphError):
    """Raised when an edge endpoint lies outside [0, vertex_count)."""

    def __init__(self, vertex: int, vertex_count: int) -> None:
        self.vertex = vertex
        self.vertex_count = vertex_count
        super().__init__(
            f"Vertex {vertex!r} out of range for a graph with "
            f"{vertex_count} vertices (valid: 0..{vertex_count - 1})"
        )


class MalformedMatrix(GraphError):
    """Raised when an adjacency matrix is not square or not 0/1."""


class Graph:
    """Fixed-size directed graph with an adjacency matrix.

    Build it, add edges, then hand it to a detector.  The detectors
    only read from it, so one graph can be shared between threads as
    long as nobody is still adding edges.
    """

    __slots__ = ("_n", "_rows")

    def __init__(self, vertex_count: int) -> None:
        if isinstance(vertex_count, bool) or not isinstance(vertex_count, int):
            raise InvalidVertexCount(vertex_count)
        if vertex_count < 1:
            raise InvalidVertexCount(vertex_count)
        self._n = vertex_count
        self._rows: list[bytearray] = [bytearray(vertex_count) for _ in range(vertex_count)]

    # ---- construction ----------------------------------------------------

    @classmethod
    def from_edges(cls, vertex_count: int, edges: Iterable[tuple[int, int]]) -> Graph:
        g = cls(vertex_count)
        for src, dst in edges:
            g.add_edge(src, dst)
        return g

    @classmethod
    def from_matrix(cls, rows: Sequence[Sequence[int]]) -> Graph:
        """Build a graph from a square 0/1 matrix, read row-major.

        ``rows[u][v]`` truthy means an edge u -> v.  Only 0 and 1 (or
        booleans) are accepted.
        """
        n = len(rows)
        if n == 0:
            raise InvalidVertexCount(0)
        g = cls(n)
        for u, row in enumerate(rows):
            if len(row) != n:
                raise MalformedMatrix(
                    f"Row {u} has {len(row)} entries, expected {n} "
                    f"(matrix must be {n}x{n})"
                )
            for v, cell in enumerate(row):
                if cell not in (0, 1):
                    raise MalformedMatrix(
                        f"Entry ({u}, {v}) is {cell!r}; only 0 and 1 are allowed"
                    )
                if cell:
                    g.add_edge(u, v)
        return g

    # ---- mutation --------------------------------------------------------

    def add_edge(self, src: int, dst: int) -> None:
        """Add a directed edge src -> dst.

        Raises InvalidVertex if either endpoint is out of range.
        Adding an edge that already exists is a no-op.
        """
        self._check(src)
        self._check(dst)
        self._rows[src][dst] = 1

    def _check(self, vertex: int) -> None:
        if isinstance(vertex, bool) or not isinstance(vertex, int):
            raise InvalidVertex(vertex, self._n)
        if not 0 <= vertex < self._n:
            raise InvalidVertex(vertex, self._n)

    # ---- queries ---------------------------------------------------------

    @property
    def vertex_count(self) -> int:
        return self._n

    @property
    def edge_count(self) -> int:
        return sum(sum(row) for row in self._rows)

    def has_edge(self, src: int, dst: int) -> bool:
        if not (0 <= src < self._n and 0 <= dst < self._n):
            return False
        return self._rows[src][dst] == 1

    def successors(self, vertex: int) -> list[int]:
        """Targets of edges leaving *vertex*, in ascending order."""
        self._check(vertex)
        row = self._rows[vertex]
        return [v for v in range(self._n) if row[v]]

    def predecessors(self, vertex: int) -> list[int]:
        """Sources of edges entering *vertex*, in ascending order."""
        self._check(vertex)
        return [u for u in range(self._n) if self._rows[u][vertex]]

    def in_degree(self, vertex: int) -> int:
        self._check(vertex)
        return sum(row[vertex] for row in self._rows)

    def out_degree(self, vertex: int) -> int:
        self._check(vertex)
        return sum(self._rows[vertex])

    def in_degrees(self) -> list[int]:
        """Fresh in-degree table, one entry per vertex.

        A new list every call; callers are free to mutate it.
        """
        deg = [0] * self._n
        for row in self._rows:
            for v in range(self._n):
                if row[v]:
                    deg[v] += 1
        return deg

    def vertices(self) -> range:
        return range(self._n)

    def edges(self) -> Iterator[tuple[int, int]]:
        """All edges in row-major order."""
        for src in range(self._n):
            row = self._rows[src]
            for dst in range(self._n):
                if row[dst]:
                    yield src, dst

    def to_matrix(self) -> list[list[int]]:
        return [list(row) for row in self._rows]

    # ---- dunder ----------------------------------------------------------

    def __contains__(self, vertex: object) -> bool:
        if isinstance(vertex, bool) or not isinstance(vertex, int):
            return False
        return 0 <= vertex < self._n

    def __len__(self) -> int:
        return self._n

    def __repr__(self) -> str:
        return f"Graph(vertices={self._n}, edges={self.edge_count})"
