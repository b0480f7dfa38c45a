"""
Core data types shared by the search engine and edge sources.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Mapping, Sequence, TypeVar, Union

T = TypeVar("T")

# Canonical identity of a node: the string form of the caller's value
NodeId = str

# A value, or an awaitable resolving to it
MaybeAwaitable = Union[T, Awaitable[T]]

# Callback signatures accepted by the engine
EdgeLookup = Callable[[NodeId], MaybeAwaitable[Sequence[Any]]]
HeuristicFunc = Callable[[NodeId, NodeId], MaybeAwaitable[float]]
EdgeCostFunc = Callable[[Any], MaybeAwaitable[float]]


def node_id(node: Any) -> NodeId:
    """Return the canonical id of a node value."""
    return str(node)


async def resolve(value: MaybeAwaitable[T]) -> T:
    """Await ``value`` if it is awaitable, otherwise return it as-is."""
    if inspect.isawaitable(value):
        return await value
    return value


def edge_field(edge: Any, name: str, key: str) -> Any:
    """
    Read one field of an edge.

    Edges are either objects with attributes (``source``, ``target``, ``cost``)
    or graph-file records keyed ``"from"``, ``"to"`` and ``"cost"``.
    """
    if isinstance(edge, Mapping):
        return edge[key]
    return getattr(edge, name)


def edge_source(edge: Any) -> Any:
    return edge_field(edge, "source", "from")


def edge_target(edge: Any) -> Any:
    return edge_field(edge, "target", "to")


@dataclass(frozen=True)
class Edge:
    """
    A directed, weighted edge between two nodes.

    Attributes:
        source: Id of the node the edge leaves
        target: Id of the node the edge enters
        cost: Traversal cost (assumed finite and non-negative)
    """

    source: NodeId
    target: NodeId
    cost: float

    def __str__(self) -> str:
        return f"{self.source} -> {self.target} ({self.cost:g})"


@dataclass
class SearchResult:
    """
    Outcome of a successful search.

    Attributes:
        cost: Total cost of the path (g-cost of the goal node)
        path: Edges from start to goal, in order. Empty when start is the goal.
        explored: Number of nodes expanded before the goal was selected
    """

    cost: float
    path: list[Any] = field(default_factory=list)
    explored: int = 0

    @property
    def nodes(self) -> list[NodeId]:
        """Node ids along the path, start first. Empty when the path is empty."""
        if not self.path:
            return []
        first = node_id(edge_source(self.path[0]))
        return [first] + [node_id(edge_target(edge)) for edge in self.path]
