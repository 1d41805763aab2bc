"""Detection results shared by both detectors.

A detector returns either NoCycle or Cycle.  Both are frozen and hold
tuples, so a result handed back to a caller can't be changed under it.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias, Union

from cyclescope.graph.paths import cycle_edges


@dataclass(frozen=True, slots=True)
class NoCycle:
    """The graph is acyclic.

    topo_order is a valid topological order of every vertex, or None
    when the detector doesn't produce one.
    """
    topo_order: tuple[int, ...] | None = None

    @property
    def has_cycle(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Cycle:
    """The graph has at least one cycle.

    path is the closed witness [v0, v1, ..., v0].  Kahn's detector also
    fills in the strongly connected component the witness came from and
    the full set of vertices the peel could not consume.  If Kahn's
    refinement ever fails to trace a closed walk, path is empty and
    component is the only evidence.
    """
    path: tuple[int, ...]
    component: tuple[int, ...] = ()
    unprocessed: tuple[int, ...] = ()

    @property
    def has_cycle(self) -> bool:
        return True

    @property
    def is_closed(self) -> bool:
        return len(self.path) >= 2 and self.path[0] == self.path[-1]

    @property
    def vertices(self) -> tuple[int, ...]:
        """Distinct cycle members in walk order (the path minus its closing repeat)."""
        if self.is_closed:
            return self.path[:-1]
        return self.component

    @property
    def length(self) -> int:
        """Number of edges in the witness, 0 when there is no explicit path."""
        return max(len(self.path) - 1, 0)

    @property
    def edges(self) -> list[tuple[int, int]]:
        return cycle_edges(self.path)


DetectionResult: TypeAlias = Union[NoCycle, Cycle]
