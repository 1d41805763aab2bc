"""Human-readable rendering of graphs and detection results.

Detectors return plain result objects; everything that ends up on a
terminal is formatted here.
"""
from __future__ import annotations

from typing import Sequence

from cyclescope.graph.adjacency import Graph
from cyclescope.graph.result import Cycle, DetectionResult

ALGORITHM_NOTES: dict[str, list[str]] = {
    "dfs": [
        "Algorithm: Depth-First Search (DFS)",
        "Principle: an edge back to a vertex on the current path closes a cycle",
        "Time Complexity: O(V^2) on an adjacency matrix (O(V + E) on lists)",
        "Space Complexity: O(V) for the stack and per-vertex flags",
    ],
    "kahn": [
        "Algorithm: BFS (Kahn's Algorithm for Topological Sort)",
        "Principle: if topological sort can't process all vertices, a cycle exists",
        "Time Complexity: O(V^2) on an adjacency matrix (O(V + E) on lists)",
        "Space Complexity: O(V) for the queue and in-degree table",
    ],
}

ALGORITHM_TITLES = {
    "dfs": "DFS Cycle Detection",
    "kahn": "BFS (Kahn) Cycle Detection",
}


def format_path(path: Sequence[int]) -> str:
    """Render a vertex sequence as "0 -> 1 -> 2 -> 0"."""
    return " -> ".join(str(v) for v in path)


def format_matrix(graph: Graph) -> str:
    """Render the adjacency matrix with row and column indices."""
    n = graph.vertex_count
    width = len(str(n - 1))
    header = " " * (width + 2) + " ".join(f"{c:>{width}}" for c in range(n))
    lines = ["Adjacency Matrix:", header]
    for r, row in enumerate(graph.to_matrix()):
        cells = " ".join(f"{cell:>{width}}" for cell in row)
        lines.append(f"{r:>{width}}: {cells}")
    return "\n".join(lines)


def format_in_degrees(graph: Graph) -> str:
    degrees = graph.in_degrees()
    return "In-degrees: " + " ".join(f"v{v}({d})" for v, d in enumerate(degrees))


def format_result(
    result: DetectionResult, algorithm: str, graph: Graph | None = None
) -> str:
    """Format one detector's result.

    Passing *graph* adds the Kahn processed count (k/n) to the report.
    """
    lines = [f"=== {ALGORITHM_TITLES.get(algorithm, algorithm)} Results ==="]

    if isinstance(result, Cycle):
        if graph is not None and algorithm == "kahn":
            processed = graph.vertex_count - len(result.unprocessed)
            lines.append(f"Vertices processed: {processed}/{graph.vertex_count}")
        lines.append("Graph is CYCLIC!")
        if result.is_closed:
            lines.append(f"Cycle detected! Vertices in cycle: {format_path(result.path)}")
            lines.append(f"Cycle length: {result.length} edges")
        else:
            members = " ".join(str(v) for v in result.component)
            lines.append(f"Cycle exists among these vertices: {members}")
        if result.unprocessed:
            unprocessed = " ".join(str(v) for v in result.unprocessed)
            lines.append(f"Vertices involved in cycles: {unprocessed}")
        if result.component and result.is_closed:
            members = " ".join(str(v) for v in result.component)
            lines.append(f"Strongly connected component (cycle): {members}")
    else:
        if graph is not None and algorithm == "kahn":
            lines.append(f"Vertices processed: {graph.vertex_count}/{graph.vertex_count}")
        lines.append("Graph is ACYCLIC (No cycle found).")
        if result.topo_order is not None:
            lines.append(f"Topological order: {format_path(result.topo_order)}")

    lines.append("")
    lines.extend(ALGORITHM_NOTES.get(algorithm, []))
    return "\n".join(lines)


def format_comparison(dfs_result: DetectionResult, kahn_result: DetectionResult) -> str:
    """Side-by-side summary of both detectors on the same graph."""

    def _verdict(r: DetectionResult) -> str:
        return "CYCLIC" if r.has_cycle else "ACYCLIC"

    def _witness(r: DetectionResult) -> str:
        if isinstance(r, Cycle):
            if r.is_closed:
                return format_path(r.path)
            return "{" + ", ".join(str(v) for v in r.component) + "}"
        return "-"

    agree = dfs_result.has_cycle == kahn_result.has_cycle
    lines = [
        f"{'Detector':<10} {'Verdict':<8} Witness",
        "-" * 40,
        f"{'DFS':<10} {_verdict(dfs_result):<8} {_witness(dfs_result)}",
        f"{'Kahn':<10} {_verdict(kahn_result):<8} {_witness(kahn_result)}",
        "",
        "Detectors agree." if agree else "Detectors DISAGREE!",
    ]
    return "\n".join(lines)
