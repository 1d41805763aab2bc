"""Cycle detection in directed graphs using DFS with a recursion stack.

Each vertex carries two flags:
  visited   -- DFS has entered the vertex at some point
  on_stack  -- the vertex is on the current root-to-leaf DFS path

An edge v -> u where u is on_stack is a back edge, and a back edge means
the graph has a cycle: u is an ancestor of v, so the tree path u ~> v
plus the edge v -> u closes a loop.  The path is rebuilt by following
parent pointers from v back to u.

Clearing on_stack when a vertex finishes is what keeps this correct.
If on_stack were never cleared it would just be visited, and a DAG with
shared descendants (A -> B, A -> C, B -> D, C -> D) would report the
cross edge C -> D as a cycle.

Two forms with identical results:
  recursive -- the natural version, limited by sys.getrecursionlimit()
  iterative -- explicit stack of (vertex, successor iterator) frames
"""
from __future__ import annotations

import logging
import sys
from typing import Iterator

from cyclescope.graph.adjacency import Graph
from cyclescope.graph.paths import walk_parent_chain
from cyclescope.graph.result import Cycle, DetectionResult, NoCycle

log = logging.getLogger(__name__)

# Frames left free for the caller when deciding whether the recursive
# form can visit every vertex.
_RECURSION_HEADROOM = 100


def detect_cycle(graph: Graph, *, iterative: bool | None = None) -> DetectionResult:
    """Detect whether *graph* contains a directed cycle.

    DFS is started from every unvisited vertex in ascending order and
    successors are scanned in ascending order, so the result is the
    same on every call.  Returns Cycle with the path [v0, ..., vk, v0]
    for the first back edge found, or NoCycle carrying a topological
    order (reverse finishing order).

    *iterative* picks the DFS form.  None chooses the explicit stack
    when the vertex count gets close to the recursion limit.
    """
    n = graph.vertex_count
    if iterative is None:
        iterative = n >= sys.getrecursionlimit() - _RECURSION_HEADROOM
    log.debug("dfs: %d vertices, %s form", n, "iterative" if iterative else "recursive")

    visited = [False] * n
    on_stack = [False] * n
    parent: list[int | None] = [None] * n
    finished: list[int] = []

    search = _search_iterative if iterative else _search_recursive
    for root in range(n):
        if visited[root]:
            continue
        closing = search(graph, root, visited, on_stack, parent, finished)
        if closing is not None:
            cycle_start, cycle_end = closing
            log.debug("dfs: back edge %d -> %d closes a cycle", cycle_end, cycle_start)
            path = walk_parent_chain(parent, cycle_start, cycle_end)
            return Cycle(path=tuple(path))

    finished.reverse()
    return NoCycle(topo_order=tuple(finished))


def _search_recursive(
    graph: Graph,
    root: int,
    visited: list[bool],
    on_stack: list[bool],
    parent: list[int | None],
    finished: list[int],
) -> tuple[int, int] | None:
    """DFS from *root*; returns (cycle_start, cycle_end) on a back edge."""

    def _visit(v: int) -> tuple[int, int] | None:
        visited[v] = True
        on_stack[v] = True
        for u in graph.successors(v):
            if not visited[u]:
                parent[u] = v
                closing = _visit(u)
                if closing is not None:
                    return closing
            elif on_stack[u]:
                return u, v
        on_stack[v] = False
        finished.append(v)
        return None

    return _visit(root)


def _search_iterative(
    graph: Graph,
    root: int,
    visited: list[bool],
    on_stack: list[bool],
    parent: list[int | None],
    finished: list[int],
) -> tuple[int, int] | None:
    """Same walk as _search_recursive with the call stack made explicit.

    Each frame keeps its own successor iterator, so resuming a frame
    picks up exactly where the recursive version would after a child
    returns.
    """
    visited[root] = True
    on_stack[root] = True
    stack: list[tuple[int, Iterator[int]]] = [(root, iter(graph.successors(root)))]
    while stack:
        v, succs = stack[-1]
        for u in succs:
            if not visited[u]:
                parent[u] = v
                visited[u] = True
                on_stack[u] = True
                stack.append((u, iter(graph.successors(u))))
                break
            if on_stack[u]:
                return u, v
        else:
            on_stack[v] = False
            finished.append(v)
            stack.pop()
    return None
