"""
Open and closed sets for best-first search.

The Frontier selects by linear scan rather than a heap so that ties are
always broken the same way: among entries sharing the minimum f-cost, the
one inserted first wins. Improving an entry keeps its original position.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

from async_astar.graph.types import NodeId


@dataclass
class FrontierEntry:
    """
    A discovered, not yet finalized node.

    Attributes:
        node: The caller's node value
        g_cost: Best known cost from the start node
        f_cost: g_cost plus the heuristic estimate
    """

    node: Any
    g_cost: float
    f_cost: float


class Frontier:
    """Open set keyed by node id, in first-discovered order."""

    def __init__(self) -> None:
        self._entries: dict[NodeId, FrontierEntry] = {}

    def insert_or_improve(
        self,
        key: NodeId,
        node: Any,
        g_cost: float,
        f_cost: float,
    ) -> bool:
        """
        Insert ``key``, or update it in place if ``g_cost`` is strictly better.

        Returns:
            True if the frontier changed
        """
        entry = self._entries.get(key)
        if entry is None:
            self._entries[key] = FrontierEntry(node, g_cost, f_cost)
            return True
        if g_cost < entry.g_cost:
            entry.node = node
            entry.g_cost = g_cost
            entry.f_cost = f_cost
            return True
        return False

    def select_best(self) -> NodeId | None:
        """Return the id with the smallest f-cost, or None if empty."""
        best_key: NodeId | None = None
        best_f = 0.0
        for key, entry in self._entries.items():
            # Strict comparison keeps the earliest entry on ties
            if best_key is None or entry.f_cost < best_f:
                best_key = key
                best_f = entry.f_cost
        return best_key

    def get(self, key: NodeId) -> FrontierEntry | None:
        return self._entries.get(key)

    def remove(self, key: NodeId) -> None:
        self._entries.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[NodeId]:
        return iter(self._entries)


class ExploredSet:
    """Closed set: node ids that have been expanded and are final."""

    def __init__(self) -> None:
        self._closed: set[NodeId] = set()

    def mark(self, key: NodeId) -> None:
        self._closed.add(key)

    def contains(self, key: NodeId) -> bool:
        return key in self._closed

    def __contains__(self, key: object) -> bool:
        return key in self._closed

    def __len__(self) -> int:
        return len(self._closed)
