"""Topological sort and cycle detection via Kahn's algorithm.

Kahn's algorithm peels the graph from the outside in:
  1.  Compute a fresh in-degree for every vertex.
  2.  Seed a FIFO queue with every vertex of in-degree 0, ascending.
  3.  Pop a vertex, append it to the order, and decrement the in-degree
      of each successor (ascending).  A successor that drops to 0 joins
      the queue.
  4.  If the order holds every vertex the graph is a DAG and the order
      is a topological sort.  Otherwise the leftover vertices are the
      ones touched by a cycle: none of them ever reached in-degree 0.

Step 4 only says *that* a cycle exists.  detect_cycle_kahn goes on to
name one: it picks a strongly connected component out of the leftovers
and searches it for a closed walk (see cyclescope.graph.paths).

The peel logs every step at DEBUG, which is the classic step-by-step
trace of the algorithm.
"""
from __future__ import annotations

import logging
from collections import deque

from cyclescope.graph.adjacency import Graph
from cyclescope.graph.paths import find_closed_walk, find_cycle_component
from cyclescope.graph.result import Cycle, DetectionResult, NoCycle

log = logging.getLogger(__name__)


class CyclicDependencyError(Exception):
    """Raised when topological sort encounters a cycle."""

    def __init__(self, remaining_nodes: list[int]) -> None:
        self.remaining_nodes = remaining_nodes
        super().__init__(
            f"Cycle detected: {len(remaining_nodes)} vertex(es) involved in "
            f"circular dependencies"
        )


def kahn_peel(graph: Graph) -> tuple[list[int], list[int]]:
    """Run the peel and return (order, residual in-degrees).

    The in-degree table is computed fresh here on every call.  After
    the peel, a vertex is unprocessed exactly when its residual
    in-degree is still above zero.
    """
    in_deg = graph.in_degrees()
    q: deque[int] = deque(v for v in graph.vertices() if in_deg[v] == 0)

    order: list[int] = []
    step = 1
    while q:
        v = q.popleft()
        order.append(v)
        log.debug("kahn: step %d: processing vertex %d", step, v)
        step += 1
        for succ in graph.successors(v):
            in_deg[succ] -= 1
            log.debug("kahn:   reduced in-degree of vertex %d to %d", succ, in_deg[succ])
            if in_deg[succ] == 0:
                q.append(succ)
                log.debug("kahn:   added vertex %d to queue", succ)

    log.debug("kahn: vertices processed: %d/%d", len(order), graph.vertex_count)
    return order, in_deg


def topological_sort(graph: Graph) -> list[int]:
    """Return vertices in dependency order (sources first).

    Raises CyclicDependencyError if the graph contains a cycle.
    """
    order, in_deg = kahn_peel(graph)
    if len(order) != graph.vertex_count:
        remaining = [v for v in graph.vertices() if in_deg[v] > 0]
        raise CyclicDependencyError(remaining)
    return order


def detect_cycle_kahn(graph: Graph) -> DetectionResult:
    """Detect a cycle with Kahn's algorithm and name one witness.

    Returns NoCycle with the topological order when every vertex is
    consumed.  Otherwise returns Cycle whose path is a closed walk
    inside the first cyclic strongly connected component (ascending
    seeds) among the unprocessed vertices.
    """
    order, in_deg = kahn_peel(graph)
    if len(order) == graph.vertex_count:
        return NoCycle(topo_order=tuple(order))

    unprocessed = [v for v in graph.vertices() if in_deg[v] > 0]
    log.debug("kahn: unprocessed vertices %s", unprocessed)

    component = find_cycle_component(graph, unprocessed)
    if component is None:
        log.warning(
            "kahn: no cyclic component among unprocessed vertices %s", unprocessed
        )
        return Cycle(path=(), component=tuple(unprocessed), unprocessed=tuple(unprocessed))
    log.debug("kahn: strongly connected component %s", component)

    path = find_closed_walk(graph, component)
    if path is None:
        log.warning(
            "kahn: no closed walk found in component %s; reporting membership only",
            component,
        )
        return Cycle(path=(), component=tuple(component), unprocessed=tuple(unprocessed))

    return Cycle(
        path=tuple(path),
        component=tuple(component),
        unprocessed=tuple(unprocessed),
    )
