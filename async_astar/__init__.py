"""
Async A* graph search.

A best-first search engine over caller-supplied graphs whose edges,
costs, heuristic and goal test may all be computed asynchronously.
"""

from async_astar.graph import (
    AStar,
    Edge,
    ExactGoal,
    NoPathToGoal,
    PredicateGoal,
    SearchError,
    SearchResult,
    StaticEdgeSource,
)
from async_astar.heuristics import CostOracle

__version__ = "0.1.0"

__all__ = [
    "AStar",
    "CostOracle",
    "Edge",
    "ExactGoal",
    "NoPathToGoal",
    "PredicateGoal",
    "SearchError",
    "SearchResult",
    "StaticEdgeSource",
]
