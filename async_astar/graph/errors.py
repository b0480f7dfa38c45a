"""
Exceptions raised by the search engine.

Errors raised inside caller callbacks are never wrapped; they reach the
caller exactly as raised.
"""

from __future__ import annotations

from async_astar.config import NO_PATH_REASON


class SearchError(Exception):
    """Base class for failures reported by the engine itself."""


class NoPathToGoal(SearchError):
    """
    The open set was exhausted before any node satisfied the goal.

    ``str(exc)`` and ``exc.reason`` are always ``"No path to goal"``.
    """

    reason = NO_PATH_REASON

    def __init__(self, start: str | None = None) -> None:
        super().__init__(self.reason)
        self.start = start
