"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import pytest

from async_astar.graph import AStar, Edge, StaticEdgeSource

SAMPLE_EDGES = [
    ("a", "b", 1),
    ("a", "c", 3),
    ("b", "a", 1),
    ("b", "c", 1),
    ("b", "d", 3),
    ("c", "a", 3),
    ("c", "b", 1),
    ("c", "d", 1),
    ("c", "e", 1),
    ("d", "b", 3),
    ("d", "c", 1),
    ("d", "e", 1),
    ("e", "c", 1),
    ("e", "d", 1),
    ("f", "e", 1),
]


@pytest.fixture
def sample_edges() -> list[Edge]:
    """Return the small directed test graph (node f has no incoming edges)."""
    return [Edge(source, target, cost) for source, target, cost in SAMPLE_EDGES]


@pytest.fixture
def sample_records() -> list[dict]:
    """Return the test graph as graph-file records."""
    return [{"from": s, "to": t, "cost": c} for s, t, c in SAMPLE_EDGES]


@pytest.fixture
def sample_source(sample_edges) -> StaticEdgeSource:
    """Return an edge source over the test graph."""
    return StaticEdgeSource(sample_edges)


@pytest.fixture
def engine(sample_source) -> AStar:
    """Return an engine over the test graph with default heuristic and costs."""
    return AStar(exit_arcs_for_node_id=sample_source)


@pytest.fixture
def shortest_costs(sample_source) -> dict[tuple[str, str], float]:
    """All-pairs shortest path costs of the test graph (Floyd-Warshall)."""
    nodes = sample_source.nodes()
    inf = float("inf")
    dist = {(u, v): (0 if u == v else inf) for u in nodes for v in nodes}
    for source, target, cost in SAMPLE_EDGES:
        dist[source, target] = min(dist[source, target], cost)
    for k in nodes:
        for i in nodes:
            for j in nodes:
                if dist[i, k] + dist[k, j] < dist[i, j]:
                    dist[i, j] = dist[i, k] + dist[k, j]
    return dist
