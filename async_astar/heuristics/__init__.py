"""
Heuristics module.

Provides the cost oracle used to guide and weigh the search:
- CostOracle: Heuristic estimate + edge cost strategies
- zero_heuristic: Default heuristic (uniform-cost search)
- edge_cost_field: Default edge cost (the edge's own cost)
"""

from async_astar.heuristics.oracle import CostOracle, edge_cost_field, zero_heuristic

__all__ = [
    "CostOracle",
    "edge_cost_field",
    "zero_heuristic",
]
