"""Turning "there is a cycle among these vertices" into an explicit path.

Both detectors end up here once they know a cycle exists:

  DFS   -- has a back edge end -> start plus the parent pointers of the
           current DFS path.  walk_parent_chain follows parents from end
           back to start.
  Kahn  -- has only the set of vertices the peel could not consume.
           find_cycle_component narrows that to one strongly connected
           component, and find_closed_walk searches inside it for a walk
           that returns to its lowest vertex.

Every path produced here satisfies the same contract, checked by
is_cycle_witness: at least two entries, first == last, and each
consecutive pair is an edge of the graph.

The searches use explicit stacks, so deep components don't run into the
interpreter's recursion limit.
"""
from __future__ import annotations

from typing import Iterable, Iterator, Sequence

from cyclescope.graph.adjacency import Graph


def walk_parent_chain(
    parent: Sequence[int | None], cycle_start: int, cycle_end: int
) -> list[int]:
    """Rebuild the cycle closed by the back edge cycle_end -> cycle_start.

    Follows parent links from cycle_end until cycle_start, reverses the
    collected vertices and appends cycle_start again to close the loop.
    A self-loop (start == end) gives [v, v].
    """
    chain: list[int] = []
    cur: int | None = cycle_end
    while cur != cycle_start:
        if cur is None:
            raise ValueError(
                f"Parent chain from {cycle_end} never reaches {cycle_start}"
            )
        chain.append(cur)
        cur = parent[cur]
    chain.append(cycle_start)
    chain.reverse()
    chain.append(cycle_start)
    return chain


def restricted_successors(graph: Graph, candidates: Iterable[int]) -> dict[int, list[int]]:
    """Ascending successor lists for *candidates*, keeping only edges inside them.

    Built once per search so the walks below never rescan matrix rows.
    """
    allowed = set(candidates)
    return {
        v: [w for w in graph.successors(v) if w in allowed]
        for v in sorted(allowed)
    }


def strongly_connected_components(succ: dict[int, list[int]]) -> list[list[int]]:
    """Tarjan's algorithm over *succ*, with an explicit stack.

    Each component comes back sorted ascending.  Components are listed
    in the order Tarjan closes them (reverse topological), not by index.
    """
    index: dict[int, int] = {}
    low: dict[int, int] = {}
    on_stack: set[int] = set()
    stack: list[int] = []
    components: list[list[int]] = []
    counter = 0

    for root in succ:
        if root in index:
            continue
        index[root] = low[root] = counter
        counter += 1
        stack.append(root)
        on_stack.add(root)
        work: list[tuple[int, Iterator[int]]] = [(root, iter(succ[root]))]
        while work:
            v, it = work[-1]
            for w in it:
                if w not in index:
                    index[w] = low[w] = counter
                    counter += 1
                    stack.append(w)
                    on_stack.add(w)
                    work.append((w, iter(succ[w])))
                    break
                if w in on_stack:
                    low[v] = min(low[v], index[w])
            else:
                work.pop()
                if work:
                    caller = work[-1][0]
                    low[caller] = min(low[caller], low[v])
                if low[v] == index[v]:
                    component: list[int] = []
                    while True:
                        w = stack.pop()
                        on_stack.discard(w)
                        component.append(w)
                        if w == v:
                            break
                    component.sort()
                    components.append(component)
    return components


def find_cycle_component(graph: Graph, candidates: Iterable[int]) -> list[int] | None:
    """First strongly connected component among *candidates* that holds a cycle.

    Only edges with both endpoints in *candidates* are walked.  The
    components are ranked by their lowest vertex, which is the order an
    ascending scan of seeds would meet them in.  The first component
    with more than one vertex, or a single vertex carrying a self-loop,
    wins.

    Returns the component sorted ascending, or None if the candidates
    are acyclic.
    """
    succ = restricted_successors(graph, candidates)
    for component in sorted(strongly_connected_components(succ)):
        seed = component[0]
        if len(component) > 1 or seed in succ[seed]:
            return component
    return None


def find_closed_walk(graph: Graph, component: Sequence[int]) -> list[int] | None:
    """Search *component* for a walk from its lowest vertex back to itself.

    Depth-first from the lowest vertex, successors ascending, walking
    only edges inside the component.  Each vertex is entered at most once
    per search and the walk never grows past len(component) vertices, so
    the search always terminates.  A step straight from the start to
    itself does not count: the start must be re-entered after at least
    one other vertex.  For a lone self-looped vertex the answer is
    [v, v].

    Returns the closed path, or None when no closing edge was found.
    """
    if not component:
        return None
    members = set(component)
    start = min(members)
    if len(members) == 1:
        return [start, start] if graph.has_edge(start, start) else None

    bound = len(members)

    def _inside(v: int) -> list[int]:
        return [w for w in graph.successors(v) if w in members]

    visited = {start}
    path = [start]
    pending = [iter(_inside(start))]
    while pending:
        depth = len(path) - 1
        advanced = False
        for nxt in pending[-1]:
            if nxt == start:
                if depth > 0:
                    path.append(start)
                    return path
                continue
            if nxt not in visited and depth + 1 < bound:
                visited.add(nxt)
                path.append(nxt)
                pending.append(iter(_inside(nxt)))
                advanced = True
                break
        if not advanced:
            pending.pop()
            path.pop()
    return None


def cycle_edges(path: Sequence[int]) -> list[tuple[int, int]]:
    """The explicit edge sequence of a path: [(v0, v1), (v1, v2), ...]."""
    return [(path[i], path[i + 1]) for i in range(len(path) - 1)]


def is_cycle_witness(graph: Graph, path: Sequence[int]) -> bool:
    """Check the witness contract against *graph*.

    True when *path* has at least two entries, starts and ends on the
    same vertex, and every consecutive pair is an edge of the graph.
    """
    if len(path) < 2 or path[0] != path[-1]:
        return False
    return all(graph.has_edge(src, dst) for src, dst in cycle_edges(path))
