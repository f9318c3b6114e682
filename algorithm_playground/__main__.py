"""
Command line demo of the algorithms.

Usage:
    python -m algorithm_playground sort [--algorithm NAME] VALUE...
    python -m algorithm_playground search [--binary] TARGET VALUE...
    python -m algorithm_playground reach [--nodes N] [--edge U V]... [--bfs] START TARGET
"""

import argparse
import logging
import sys
from collections.abc import Sequence

from algorithm_playground.constants import (
    DEFAULT_NODE_COUNT,
    DEFAULT_SORT_ALGORITHM,
    LOG_FORMAT,
)
from algorithm_playground.graph import Graph
from algorithm_playground.ordering import is_sorted
from algorithm_playground.searching import binary_search, linear_search
from algorithm_playground.sorting import SortAlgorithm, sort_with

logger = logging.getLogger(__name__)


def _run_sort(args: argparse.Namespace) -> int:
    values = list(args.values)
    sort_with(values, args.algorithm)
    print(" ".join(str(value) for value in values))
    return 0


def _run_search(args: argparse.Namespace) -> int:
    values = args.values
    if args.binary:
        if not is_sorted(values):
            logger.warning("Input is not sorted, binary search result is unspecified")
        index = binary_search(values, args.target)
    else:
        index = linear_search(values, args.target)

    if index is None:
        print(f"{args.target} not found")
        return 1
    print(index)
    return 0


def _run_reach(args: argparse.Namespace) -> int:
    edges = [tuple(edge) for edge in args.edge]
    node_count = args.nodes
    if node_count is None:
        mentioned = [args.start, args.target, *(node for edge in edges for node in edge)]
        node_count = max(mentioned) + 1

    graph = Graph(node_count)
    for u, v in edges:
        graph.add_edge(u, v)
    logger.debug(f"Built {graph!r}")

    if args.bfs:
        reachable = graph.breadth_first_reachable(args.start, args.target)
    else:
        reachable = graph.depth_first_reachable_iterative(args.start, args.target)

    print("reachable" if reachable else "unreachable")
    return 0 if reachable else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="algorithm_playground",
        description="Run the searching, sorting and graph algorithms on integers",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    sort_parser = commands.add_parser("sort", help="Sort integers")
    sort_parser.add_argument(
        "--algorithm",
        choices=[algorithm.value for algorithm in SortAlgorithm],
        default=DEFAULT_SORT_ALGORITHM,
        help="Sorting algorithm to use",
    )
    sort_parser.add_argument("values", nargs="*", type=int)
    sort_parser.set_defaults(run=_run_sort)

    search_parser = commands.add_parser("search", help="Find the index of an integer")
    search_parser.add_argument(
        "--binary", action="store_true", help="Use binary search (input must be sorted)"
    )
    search_parser.add_argument("target", type=int)
    search_parser.add_argument("values", nargs="*", type=int)
    search_parser.set_defaults(run=_run_search)

    reach_parser = commands.add_parser(
        "reach", help="Check whether two nodes of an undirected graph are connected"
    )
    reach_parser.add_argument(
        "--nodes", type=int, default=DEFAULT_NODE_COUNT, help="Number of nodes"
    )
    reach_parser.add_argument(
        "--edge",
        nargs=2,
        type=int,
        action="append",
        default=[],
        metavar=("U", "V"),
        help="Undirected edge, may be repeated",
    )
    reach_parser.add_argument(
        "--bfs", action="store_true", help="Use breadth-first instead of depth-first search"
    )
    reach_parser.add_argument("start", type=int)
    reach_parser.add_argument("target", type=int)
    reach_parser.set_defaults(run=_run_reach)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        return args.run(args)
    except (IndexError, ValueError) as error:
        logger.error(error)
        return 1


if __name__ == "__main__":
    sys.exit(main())
