"""
Graph search module.

Provides the A* engine and the bookkeeping it runs on:
- AStar: Async best-first search over a caller-supplied graph
- Frontier / ExploredSet: Open and closed sets
- ExactGoal / PredicateGoal: Goal specifications
- StaticEdgeSource: Edge source for graphs known up front
"""

from async_astar.graph.types import Edge, NodeId, SearchResult, node_id
from async_astar.graph.errors import NoPathToGoal, SearchError
from async_astar.graph.goal import ExactGoal, GoalSpec, PredicateGoal, goal_spec
from async_astar.graph.frontier import ExploredSet, Frontier
from async_astar.graph.path import reconstruct_path
from async_astar.graph.engine import AStar
from async_astar.graph.sources import StaticEdgeSource

__all__ = [
    "AStar",
    "Edge",
    "ExactGoal",
    "ExploredSet",
    "Frontier",
    "GoalSpec",
    "NoPathToGoal",
    "NodeId",
    "PredicateGoal",
    "SearchError",
    "SearchResult",
    "StaticEdgeSource",
    "goal_spec",
    "node_id",
    "reconstruct_path",
]
