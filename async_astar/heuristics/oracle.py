"""
Cost oracle: heuristic estimates and edge traversal costs.

Both strategies may be plain functions or return awaitables (e.g. a cost
fetched from a remote service). Neither value is validated; negative, NaN
or infinite results void the optimality guarantee.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from async_astar.graph.types import (
    EdgeCostFunc,
    HeuristicFunc,
    NodeId,
    edge_field,
    resolve,
)

logger = logging.getLogger(__name__)


def zero_heuristic(from_id: NodeId, to_id: NodeId) -> float:
    """Default heuristic. Always 0, which reduces A* to uniform-cost search."""
    return 0


def edge_cost_field(edge: Any) -> float:
    """Default edge cost: the edge's own ``cost`` field."""
    return edge_field(edge, "cost", "cost")


@dataclass
class CostOracle:
    """
    Supplies heuristic estimates and edge costs to the search engine.

    Attributes:
        h: Heuristic ``(from_id, to_id) -> number`` (sync or async)
        edge_cost: Edge cost ``(edge) -> number`` (sync or async)
    """

    h: HeuristicFunc = zero_heuristic
    edge_cost: EdgeCostFunc = edge_cost_field

    @classmethod
    def create(
        cls,
        h: HeuristicFunc | None = None,
        edge_cost: EdgeCostFunc | None = None,
    ) -> CostOracle:
        """Build an oracle, falling back to the defaults for missing strategies."""
        return cls(h=h or zero_heuristic, edge_cost=edge_cost or edge_cost_field)

    async def lookup_h(self, from_id: NodeId, to_id: NodeId) -> float:
        """Heuristic estimate between two nodes, awaited if needed."""
        value = await resolve(self.h(from_id, to_id))
        logger.debug(f"h({from_id}, {to_id}) = {value}")
        return value

    async def lookup_edge_cost(self, edge: Any) -> float:
        """Traversal cost of ``edge``, awaited if needed."""
        return await resolve(self.edge_cost(edge))
