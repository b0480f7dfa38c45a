"""
Goal specifications.

A search goal is either a literal node (matched by node id) or a predicate
over node ids. Both are resolved once, at the start of a search, into a
GoalSpec with a single async ``is_goal`` test.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Union

from async_astar.graph.types import MaybeAwaitable, NodeId, node_id, resolve

GoalPredicate = Callable[[NodeId], MaybeAwaitable[bool]]


@dataclass(frozen=True)
class ExactGoal:
    """Goal satisfied by exactly one node id."""

    target: NodeId

    async def is_goal(self, candidate: NodeId) -> bool:
        return self.target == node_id(candidate)

    def __str__(self) -> str:
        return self.target


@dataclass(frozen=True)
class PredicateGoal:
    """Goal satisfied by any node the predicate accepts (sync or async)."""

    predicate: GoalPredicate

    async def is_goal(self, candidate: NodeId) -> bool:
        return bool(await resolve(self.predicate(candidate)))

    def __str__(self) -> str:
        name = getattr(self.predicate, "__name__", repr(self.predicate))
        return f"<predicate {name}>"


GoalSpec = Union[ExactGoal, PredicateGoal]


def goal_spec(goal: Any) -> GoalSpec:
    """
    Resolve a caller-supplied goal into a GoalSpec.

    Callables become predicates; any other value is coerced with ``str()``
    and matched exactly. Never raises.
    """
    if isinstance(goal, (ExactGoal, PredicateGoal)):
        return goal
    if callable(goal):
        return PredicateGoal(goal)
    return ExactGoal(node_id(goal))
