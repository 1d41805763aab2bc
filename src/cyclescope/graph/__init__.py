"""Directed graph model and the two cycle detectors."""

from cyclescope.graph.adjacency import (
    Graph,
    GraphError,
    InvalidVertex,
    InvalidVertexCount,
    MalformedMatrix,
)
from cyclescope.graph.cycle_detector import detect_cycle
from cyclescope.graph.paths import (
    cycle_edges,
    find_closed_walk,
    find_cycle_component,
    is_cycle_witness,
    restricted_successors,
    strongly_connected_components,
    walk_parent_chain,
)
from cyclescope.graph.result import Cycle, DetectionResult, NoCycle
from cyclescope.graph.topological import (
    CyclicDependencyError,
    detect_cycle_kahn,
    kahn_peel,
    topological_sort,
)

__all__ = [
    "Cycle",
    "CyclicDependencyError",
    "DetectionResult",
    "Graph",
    "GraphError",
    "InvalidVertex",
    "InvalidVertexCount",
    "MalformedMatrix",
    "NoCycle",
    "cycle_edges",
    "detect_cycle",
    "detect_cycle_kahn",
    "find_closed_walk",
    "find_cycle_component",
    "is_cycle_witness",
    "kahn_peel",
    "restricted_successors",
    "strongly_connected_components",
    "topological_sort",
    "walk_parent_chain",
]
