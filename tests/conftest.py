"""Shared fixtures for the graph and detector tests."""
from __future__ import annotations

import random
from typing import Callable

import pytest

from cyclescope.graph.adjacency import Graph

SEED = 42


@pytest.fixture
def edgeless_graph() -> Graph:
    """Five isolated vertices."""
    return Graph(5)


@pytest.fixture
def linear_graph() -> Graph:
    """0 -> 1 -> 2 -> 3"""
    return Graph.from_edges(4, [(0, 1), (1, 2), (2, 3)])


@pytest.fixture
def diamond_graph() -> Graph:
    """
    0 -> 1 -> 3
    0 -> 2 -> 3
    """
    return Graph.from_edges(4, [(0, 1), (0, 2), (1, 3), (2, 3)])


@pytest.fixture
def triangle_graph() -> Graph:
    """0 -> 1 -> 2 -> 0"""
    return Graph.from_edges(3, [(0, 1), (1, 2), (2, 0)])


@pytest.fixture
def self_loop_graph() -> Graph:
    """0 -> 1, 1 -> 1, 1 -> 2: the self-loop is the only cycle."""
    return Graph.from_edges(3, [(0, 1), (1, 1), (1, 2)])


@pytest.fixture
def twin_cycles_graph() -> Graph:
    """Two vertex-disjoint 2-cycles: 0 <-> 1 and 2 <-> 3."""
    return Graph.from_edges(4, [(0, 1), (1, 0), (2, 3), (3, 2)])


@pytest.fixture
def tail_cycle_graph() -> Graph:
    """
    0 -> 1 -> 2 -> 3 -> 1   (cycle 1, 2, 3)
              3 -> 4        (exit, unprocessed by Kahn but not on the cycle)
    """
    return Graph.from_edges(5, [(0, 1), (1, 2), (2, 3), (3, 1), (3, 4)])


def random_graph(rng: random.Random, n: int, p: float) -> Graph:
    """Any edge u -> v, self-loops included, with probability *p*."""
    g = Graph(n)
    for u in range(n):
        for v in range(n):
            if rng.random() < p:
                g.add_edge(u, v)
    return g


def random_dag(rng: random.Random, n: int, p: float) -> Graph:
    """Edges only go from lower to higher rank under a random relabelling."""
    rank = list(range(n))
    rng.shuffle(rank)
    g = Graph(n)
    for i in range(n):
        for j in range(i + 1, n):
            if rng.random() < p:
                g.add_edge(rank[i], rank[j])
    return g


@pytest.fixture
def make_random_graph() -> Callable[[random.Random, int, float], Graph]:
    return random_graph


@pytest.fixture
def make_random_dag() -> Callable[[random.Random, int, float], Graph]:
    return random_dag
