"""Bundled sample graphs for demos and quick checks."""
from __future__ import annotations

from dataclasses import dataclass

from cyclescope.graph.adjacency import Graph


@dataclass(frozen=True, slots=True)
class Sample:
    name: str
    description: str
    vertex_count: int
    edges: tuple[tuple[int, int], ...]


SAMPLES: dict[str, Sample] = {
    s.name: s
    for s in (
        Sample(
            name="triangle",
            description="simple cycle 0->1->2->0",
            vertex_count=3,
            edges=((0, 1), (1, 2), (2, 0)),
        ),
        Sample(
            name="chain",
            description="acyclic chain 0->1->2->3",
            vertex_count=4,
            edges=((0, 1), (1, 2), (2, 3)),
        ),
        Sample(
            name="diamond",
            description="acyclic diamond with a shared descendant",
            vertex_count=4,
            edges=((0, 1), (0, 2), (1, 3), (2, 3)),
        ),
        Sample(
            name="self-loop",
            description="self-loop on vertex 1 behind an acyclic prefix",
            vertex_count=3,
            edges=((0, 1), (1, 1), (1, 2)),
        ),
        Sample(
            name="twin-cycles",
            description="two vertex-disjoint 2-cycles 0<->1 and 2<->3",
            vertex_count=4,
            edges=((0, 1), (1, 0), (2, 3), (3, 2)),
        ),
        Sample(
            name="tail-cycle",
            description="DAG prefix 0->1 feeding cycle 1->2->3->1 with exit 3->4",
            vertex_count=5,
            edges=((0, 1), (1, 2), (2, 3), (3, 1), (3, 4)),
        ),
    )
}


def build_sample(name: str, vertex_count: int | None = None) -> Graph:
    """Build the named sample graph.

    *vertex_count* defaults to the sample's own size.  A larger count
    adds isolated vertices; a smaller one fails with InvalidVertex when
    an edge no longer fits.  Unknown names raise KeyError.
    """
    try:
        sample = SAMPLES[name]
    except KeyError:
        raise KeyError(
            f"Unknown sample {name!r}; choose from {', '.join(sorted(SAMPLES))}"
        ) from None
    if vertex_count is None:
        vertex_count = sample.vertex_count
    return Graph.from_edges(vertex_count, sample.edges)
