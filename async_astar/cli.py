"""
Path finding CLI - search a graph file or live Wikipedia with A*.

Usage:
    astar-find-path --graph graph.json --start a --goal d
    astar-find-path --graph graph.msgpack --start a --goal d --verbose
    astar-find-path --wikipedia --start "Espresso" --goal "Leonardo da Vinci" --timeout 120

Graph files hold a list of edge records:
    [{"from": "a", "to": "b", "cost": 1}, ...]

Exit codes:
    0   path found
    1   no path to goal (or bad input)
    2   search timed out
    130 interrupted
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from async_astar.config import LOG_LEVEL, SEARCH_TIMEOUT
from async_astar.graph import AStar, NoPathToGoal, SearchResult, StaticEdgeSource

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Find the cheapest path between two nodes with A*",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--graph",
        type=str,
        help="Graph file (.json or .msgpack) with edge records",
    )
    source.add_argument(
        "--wikipedia",
        action="store_true",
        help="Search live Wikipedia (articles are nodes, links are edges)",
    )

    parser.add_argument("--start", type=str, required=True, help="Start node")
    parser.add_argument("--goal", type=str, required=True, help="Goal node")
    parser.add_argument(
        "--timeout",
        type=float,
        default=SEARCH_TIMEOUT,
        help="Give up after this many seconds (default: no limit)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def build_engine(args: argparse.Namespace) -> AStar:
    """Create an engine over the graph selected on the command line."""
    if args.wikipedia:
        from async_astar.wikipedia import WikiLinkEdgeSource

        return AStar(exit_arcs_for_node_id=WikiLinkEdgeSource())
    return AStar(exit_arcs_for_node_id=StaticEdgeSource.load(args.graph))


async def run_search(
    engine: AStar,
    start: str,
    goal: str,
    timeout: float | None,
) -> SearchResult:
    """Run one search, bounded by ``timeout`` seconds if given."""
    return await asyncio.wait_for(engine.find_path(start, goal), timeout=timeout)


def print_result(result: SearchResult) -> None:
    print(f"Cost: {result.cost:g}")
    print(f"Explored: {result.explored} nodes")
    if not result.path:
        print("Path: (start is the goal)")
        return
    print("Path:")
    for i, edge in enumerate(result.path, start=1):
        print(f"  {i}. {edge.source} -> {edge.target} ({edge.cost:g})")


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        engine = build_engine(args)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        result = asyncio.run(run_search(engine, args.start, args.goal, args.timeout))
    except NoPathToGoal as e:
        print(f"{e}: '{args.start}' -> '{args.goal}'")
        return 1
    except asyncio.TimeoutError:
        print(f"Search timed out after {args.timeout:g} seconds", file=sys.stderr)
        return 2
    except KeyboardInterrupt:
        print("\n\nSearch interrupted by user")
        return 130

    print_result(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
