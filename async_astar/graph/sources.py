"""
In-memory edge source for graphs known up front.

Usage:
    source = StaticEdgeSource.load("graph.json")
    engine = AStar(exit_arcs_for_node_id=source)

Graph files hold a list of edge records, either as JSON or msgpack:
    [{"from": "a", "to": "b", "cost": 1}, ...]
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Mapping

import msgpack

from async_astar.config import DEFAULT_EDGE_COST, SUPPORTED_GRAPH_SUFFIXES
from async_astar.graph.types import Edge, NodeId, node_id

logger = logging.getLogger(__name__)


class StaticEdgeSource:
    """
    Edge source over a fixed list of edges.

    Calling the source with a node id returns that node's outgoing edges
    in the order they were given.
    """

    def __init__(self, edges: Iterable[Edge]) -> None:
        self._edges: list[Edge] = list(edges)
        self._exits: dict[NodeId, list[Edge]] = {}
        for edge in self._edges:
            self._exits.setdefault(node_id(edge.source), []).append(edge)

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> StaticEdgeSource:
        """Build from ``{"from", "to", "cost"}`` mappings (cost optional)."""
        return cls(
            Edge(
                source=node_id(record["from"]),
                target=node_id(record["to"]),
                cost=record.get("cost", DEFAULT_EDGE_COST),
            )
            for record in records
        )

    @classmethod
    def load(cls, path: str | Path) -> StaticEdgeSource:
        """
        Load a graph file (.json or .msgpack).

        Raises:
            ValueError: If the file suffix is not supported
        """
        path = Path(path)
        suffix = path.suffix.lower()
        if suffix not in SUPPORTED_GRAPH_SUFFIXES:
            supported = ", ".join(SUPPORTED_GRAPH_SUFFIXES)
            raise ValueError(f"Unsupported graph file '{path.name}'. Use: {supported}")

        logger.info(f"Loading graph from {path}...")
        if suffix == ".json":
            with open(path, encoding="utf-8") as f:
                records = json.load(f)
        else:
            with open(path, "rb") as f:
                records = msgpack.load(f)

        source = cls.from_records(records)
        logger.info(f"Loaded {len(source):,} edges")
        return source

    def dump(self, path: str | Path) -> None:
        """Write the edges to a .json or .msgpack file."""
        path = Path(path)
        records = self.to_records()
        if path.suffix.lower() == ".msgpack":
            with open(path, "wb") as f:
                msgpack.dump(records, f)
        else:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(records, f, indent=2)

    def to_records(self) -> list[dict[str, Any]]:
        return [
            {"from": edge.source, "to": edge.target, "cost": edge.cost}
            for edge in self._edges
        ]

    def nodes(self) -> list[NodeId]:
        """Every node id mentioned by an edge, in first-seen order."""
        seen: dict[NodeId, None] = {}
        for edge in self._edges:
            seen.setdefault(node_id(edge.source))
            seen.setdefault(node_id(edge.target))
        return list(seen)

    def exits(self, key: Any) -> list[Edge]:
        return list(self._exits.get(node_id(key), []))

    def __call__(self, key: NodeId) -> list[Edge]:
        return self.exits(key)

    def __len__(self) -> int:
        return len(self._edges)
