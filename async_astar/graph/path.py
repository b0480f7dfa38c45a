"""
Path reconstruction from the predecessor map recorded during search.
"""

from __future__ import annotations

from typing import Any, Mapping

from async_astar.graph.types import NodeId, edge_source, node_id


def reconstruct_path(came_from: Mapping[NodeId, Any], goal: NodeId) -> list[Any]:
    """
    Walk predecessor edges back from ``goal`` to the start node.

    Args:
        came_from: Maps node id to the edge it was reached by (None for start)
        goal: Id of the node the search finished on

    Returns:
        Edges from start to goal, in order. Empty if goal is the start node.
    """
    path: list[Any] = []
    edge = came_from.get(goal)
    while edge is not None:
        path.append(edge)
        edge = came_from.get(node_id(edge_source(edge)))
    path.reverse()
    return path
