"""
A* search engine over a caller-supplied graph.

The graph is never held by the engine. Outgoing edges, edge costs, the
heuristic and the goal test are all callbacks that may be synchronous or
asynchronous; each one is awaited in turn, so a search is a single sequential
coroutine that suspends whenever a callback is pending (e.g. while a page is
fetched from a remote source).

Usage:
    engine = AStar(exit_arcs_for_node_id=edges_from)
    result = await engine.find_path("a", "d")
    result = await engine.find_path("a", lambda node: node.startswith("d"))
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any

from async_astar.graph.errors import NoPathToGoal
from async_astar.graph.frontier import ExploredSet, Frontier
from async_astar.graph.goal import ExactGoal, GoalSpec, goal_spec
from async_astar.graph.path import reconstruct_path
from async_astar.graph.types import (
    EdgeCostFunc,
    EdgeLookup,
    HeuristicFunc,
    NodeId,
    SearchResult,
    edge_target,
    node_id,
    resolve,
)
from async_astar.heuristics.oracle import CostOracle


def no_exit_arcs(key: NodeId) -> list[Any]:
    """Default edge source: every node is a dead end."""
    return []


@dataclass
class SearchState:
    """
    Bookkeeping for one search. Created per call, never shared.

    Attributes:
        frontier: Discovered nodes awaiting expansion
        explored: Nodes already expanded
        came_from: Node id -> edge it was reached by (None for the start)
        expansions: Number of nodes expanded so far
    """

    frontier: Frontier = field(default_factory=Frontier)
    explored: ExploredSet = field(default_factory=ExploredSet)
    came_from: dict[NodeId, Any] = field(default_factory=dict)
    expansions: int = 0


class AStar:
    """
    Best-first (A*) search with asynchronous callbacks.

    Each strategy is optional and independently replaceable:
    - exit_arcs_for_node_id: node id -> outgoing edges (default: none)
    - h: (from_id, to_id) -> heuristic estimate (default: 0)
    - edge_cost: edge -> traversal cost (default: edge.cost)

    Edges are objects with ``source`` and ``target`` attributes (and
    ``cost``, unless a custom edge_cost is given), or ``{"from", "to",
    "cost"}`` mappings. Paths are returned as the caller's own edge objects.

    Explored nodes are never reopened, so results are only guaranteed
    optimal for non-negative costs and a consistent heuristic.
    """

    def __init__(
        self,
        exit_arcs_for_node_id: EdgeLookup | None = None,
        h: HeuristicFunc | None = None,
        edge_cost: EdgeCostFunc | None = None,
        oracle: CostOracle | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        """
        Initialize the engine.

        Args:
            exit_arcs_for_node_id: Edge enumeration callback
            h: Heuristic callback (ignored when ``oracle`` is given)
            edge_cost: Edge cost callback (ignored when ``oracle`` is given)
            oracle: Prebuilt cost oracle
            logger: Logger for search progress (default: this module's logger)
        """
        if exit_arcs_for_node_id is not None:
            self.exit_arcs_for_node_id = exit_arcs_for_node_id
        self._oracle = oracle or CostOracle.create(h=h, edge_cost=edge_cost)
        self._logger = logger or logging.getLogger(__name__)

    @property
    def oracle(self) -> CostOracle:
        return self._oracle

    def h(self, from_id: NodeId, to_id: NodeId) -> Any:
        """Heuristic cost between two nodes, as returned by the oracle."""
        return self._oracle.h(from_id, to_id)

    async def lookup_h(self, from_id: NodeId, to_id: NodeId) -> float:
        return await self._oracle.lookup_h(from_id, to_id)

    def exit_arcs_for_node_id(self, key: NodeId) -> Any:
        """
        Outgoing edges of a node (or an awaitable list of them).

        Override by passing ``exit_arcs_for_node_id`` to the constructor or
        by subclassing. The default returns no edges.
        """
        return no_exit_arcs(key)

    async def lookup_exit_arcs(self, key: NodeId) -> list[Any]:
        edges = await resolve(self.exit_arcs_for_node_id(key))
        return list(edges or [])

    @staticmethod
    def exact_match_goal(goal: Any) -> ExactGoal:
        """Goal that matches a single node by id."""
        return ExactGoal(node_id(goal))

    @staticmethod
    def clean_goal(goal: Any) -> GoalSpec:
        """Normalize a node value or predicate into a GoalSpec."""
        return goal_spec(goal)

    async def find_path(self, start: Any, goal: Any) -> SearchResult:
        """
        Find the cheapest path from ``start`` to a node satisfying ``goal``.

        Args:
            start: Start node value (identified by ``str(start)``)
            goal: A node value, a predicate over node ids (sync or async),
                or a GoalSpec

        Returns:
            SearchResult with the total cost and the edges along the path

        Raises:
            NoPathToGoal: If no reachable node satisfies the goal
            Exception: Anything raised by a callback, unchanged
        """
        spec = self.clean_goal(goal)
        start_id = node_id(start)
        self._logger.info(f"Finding path between {start_id} and {spec}")

        state = SearchState()
        state.came_from[start_id] = None
        start_f = await self.lookup_h(start_id, start_id)
        state.frontier.insert_or_improve(start_id, start, 0, 0 + start_f)

        while True:
            best_id = state.frontier.select_best()
            if best_id is None:
                self._logger.warning(
                    f"No path from {start_id} to {spec} "
                    f"({state.expansions} nodes explored)"
                )
                raise NoPathToGoal(start_id)

            best = state.frontier.get(best_id)
            if await spec.is_goal(best_id):
                break

            await self._expand(state, start_id, best_id, best.g_cost)

        path = reconstruct_path(state.came_from, best_id)
        self._logger.info(
            f"Found path to {best_id} (cost {best.g_cost}, {len(path)} edges, "
            f"{state.expansions} nodes explored)"
        )
        return SearchResult(cost=best.g_cost, path=path, explored=state.expansions)

    async def _expand(
        self,
        state: SearchState,
        start_id: NodeId,
        best_id: NodeId,
        best_g: float,
    ) -> None:
        """Relax every edge leaving ``best_id``, then close it."""
        edges = await self.lookup_exit_arcs(best_id)
        state.expansions += 1
        self._logger.debug(
            f"Expanding {best_id} (g={best_g}, {len(edges)} edges, "
            f"iteration {state.expansions})"
        )

        for edge in edges:
            target = edge_target(edge)
            to_id = node_id(target)
            if to_id in state.explored:
                continue

            new_g = best_g + await self._oracle.lookup_edge_cost(edge)
            entry = state.frontier.get(to_id)
            if entry is None or new_g < entry.g_cost:
                new_f = new_g + await self.lookup_h(start_id, to_id)
                state.came_from[to_id] = edge
                state.frontier.insert_or_improve(to_id, target, new_g, new_f)

        state.explored.mark(best_id)
        state.frontier.remove(best_id)

    def find_path_sync(self, start: Any, goal: Any) -> SearchResult:
        """Blocking wrapper around find_path() for callers without a loop."""
        return asyncio.run(self.find_path(start, goal))
