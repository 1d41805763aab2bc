"""Reading graphs from adjacency-matrix text and edge lists.

Matrix text is whitespace-separated 0/1 tokens, one row per line:

    0 1 0
    0 0 1
    1 0 0

When the vertex count is known up front the line breaks don't matter:
exactly n*n tokens are read in row-major order, like typing the matrix
in one entry at a time.
"""
from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO

from cyclescope.graph.adjacency import Graph, InvalidVertexCount, MalformedMatrix


def _parse_token(token: str, row: int, col: int) -> int:
    try:
        value = int(token)
    except ValueError:
        raise MalformedMatrix(
            f"Entry ({row}, {col}) is {token!r}, not an integer"
        ) from None
    if value not in (0, 1):
        raise MalformedMatrix(f"Entry ({row}, {col}) is {value}; only 0 and 1 are allowed")
    return value


def parse_matrix(text: str, vertex_count: int | None = None) -> list[list[int]]:
    """Parse matrix text into a list of 0/1 rows.

    With *vertex_count*, exactly n*n tokens are expected and split into
    rows of n.  Without it, each non-blank line is a row and the number
    of rows sets n.  Squareness is checked either way.
    """
    if vertex_count is not None:
        if vertex_count < 1:
            raise InvalidVertexCount(vertex_count)
        tokens = text.split()
        expected = vertex_count * vertex_count
        if len(tokens) != expected:
            raise MalformedMatrix(
                f"Expected {expected} entries for a {vertex_count}x{vertex_count} "
                f"matrix, got {len(tokens)}"
            )
        return [
            [
                _parse_token(tokens[r * vertex_count + c], r, c)
                for c in range(vertex_count)
            ]
            for r in range(vertex_count)
        ]

    lines = [line.split() for line in text.splitlines() if line.strip()]
    if not lines:
        raise MalformedMatrix("Matrix is empty")
    n = len(lines)
    rows: list[list[int]] = []
    for r, tokens in enumerate(lines):
        if len(tokens) != n:
            raise MalformedMatrix(
                f"Row {r} has {len(tokens)} entries, expected {n} "
                f"(matrix must be {n}x{n})"
            )
        rows.append([_parse_token(tok, r, c) for c, tok in enumerate(tokens)])
    return rows


def read_matrix(
    source: str | Path | TextIO, vertex_count: int | None = None
) -> Graph:
    """Build a Graph from matrix text in a file, a stream, or stdin ("-")."""
    if isinstance(source, (str, Path)):
        if str(source) == "-":
            text = sys.stdin.read()
        else:
            text = Path(source).read_text()
    else:
        text = source.read()
    return Graph.from_matrix(parse_matrix(text, vertex_count))


def parse_edges(spec: str, vertex_count: int) -> Graph:
    """Build a Graph from an edge list like "0-1,1-2,2-0".

    Whitespace around items is ignored, as are empty items, so "0-1, 1-2,"
    is fine.  Endpoints out of range raise InvalidVertex.
    """
    g = Graph(vertex_count)
    for item in spec.split(","):
        item = item.strip()
        if not item:
            continue
        src, sep, dst = item.partition("-")
        if not sep:
            raise MalformedMatrix(f"Edge {item!r} is not of the form u-v")
        try:
            u, v = int(src), int(dst)
        except ValueError:
            raise MalformedMatrix(f"Edge {item!r} has a non-integer endpoint") from None
        g.add_edge(u, v)
    return g
