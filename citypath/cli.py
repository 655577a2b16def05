"""Command-line interface for citypath."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from time import perf_counter
from typing import List, Optional

from citypath.algorithms import PathFinder, create_path_finder
from citypath.exceptions import PathfindingError
from citypath.generation import generate_cities
from citypath.logging import (
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    set_global_log_level,
)
from citypath.model.graph import City, CityGraph
from citypath.types.base import PathfindingAlgorithm

logger = get_logger(__name__)

MIN_CITIES = 2
MAX_CITIES = 1000
MIN_STREET_LENGTH = 1
MAX_STREET_LENGTH = 100_000


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s"; 75.2 -> "1m 15.2s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    if seconds < 60.0:
        return f"{seconds:.2f} s"
    minutes = int(seconds // 60)
    rem = seconds - minutes * 60
    return f"{minutes}m {rem:.1f}s"


def _bounded_int(low: int, high: int):
    """Return an argparse type accepting integers in ``[low, high]``."""

    def parse(value: str) -> int:
        try:
            number = int(value)
        except ValueError:
            raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
        if not low <= number <= high:
            raise argparse.ArgumentTypeError(
                f"{number} is outside the range {low}-{high}"
            )
        return number

    return parse


def _algorithm(value: str) -> PathfindingAlgorithm:
    try:
        return PathfindingAlgorithm.from_string(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def _build_world(args: argparse.Namespace) -> CityGraph:
    if args.min_length > args.max_length:
        logger.error(
            "Maximum street length must be greater than or equal to minimum street length"
        )
        raise SystemExit(2)
    graph = generate_cities(args.cities, args.min_length, args.max_length, args.seed)
    logger.info(f"Generated {len(graph)} cities and {len(graph.streets)} streets")
    return graph


def _print_world(graph: CityGraph) -> None:
    for city in graph:
        neighbours = ",".join(neighbor.name for neighbor, _ in city.neighbors())
        print(f"City {city.name}  Connections: [{neighbours}]")


def _lookup_city(graph: CityGraph, name: str) -> City:
    city = graph.find(name)
    if city is None:
        logger.error(f"Unknown city: {name}")
        raise SystemExit(1)
    return city


def _prepare(algorithm: PathfindingAlgorithm, graph: CityGraph) -> PathFinder:
    finder = create_path_finder(algorithm)
    if not finder.initialized:
        logger.info(f"Initializing path finder: {algorithm.name}")
        started = perf_counter()
        asyncio.run(finder.initialize(graph.cities))
        logger.info(f"Initialized in {_format_duration(perf_counter() - started)}")
    return finder


def _find_path(
    graph: CityGraph,
    algorithms: List[PathfindingAlgorithm],
    start_name: str,
    end_name: str,
) -> None:
    start = _lookup_city(graph, start_name)
    end = _lookup_city(graph, end_name)

    failed = False
    for algorithm in algorithms:
        finder = _prepare(algorithm, graph)
        started = perf_counter()
        try:
            path = finder.find_path_between(start, end)
        except PathfindingError as e:
            logger.error(f"{algorithm.name}: {e}")
            failed = True
            continue
        elapsed = _format_duration(perf_counter() - started)
        print(f"{algorithm.name:<24} {path}  cost={path.cost()}  ({elapsed})")

    if failed:
        raise SystemExit(1)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``citypath`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="citypath",
        description="Generate a world of cities and find shortest paths between them.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{generate,find}",
        help="Available commands",
    )

    generate_parser = subparsers.add_parser(
        "generate", help="Generate a world and print its cities"
    )
    find_parser = subparsers.add_parser(
        "find", help="Generate a world and find a path between two cities"
    )
    find_parser.add_argument("start", help="Name of the starting city")
    find_parser.add_argument("end", help="Name of the destination city")
    selection = find_parser.add_mutually_exclusive_group()
    selection.add_argument(
        "--algorithm",
        "-a",
        type=_algorithm,
        default=None,
        help="Algorithm to use (default: dijkstra)",
    )
    selection.add_argument(
        "--all", action="store_true", help="Run every algorithm and compare"
    )

    for p in (generate_parser, find_parser):
        p.add_argument(
            "--cities",
            "-n",
            type=_bounded_int(MIN_CITIES, MAX_CITIES),
            default=10,
            help=f"Number of cities ({MIN_CITIES}-{MAX_CITIES}, default: 10)",
        )
        p.add_argument(
            "--min-length",
            type=_bounded_int(MIN_STREET_LENGTH, MAX_STREET_LENGTH),
            default=1,
            help="Minimum street length (default: 1)",
        )
        p.add_argument(
            "--max-length",
            type=_bounded_int(MIN_STREET_LENGTH, MAX_STREET_LENGTH),
            default=1,
            help="Maximum street length (default: 1)",
        )
        p.add_argument(
            "--seed", type=int, default=None, help="Seed for reproducible worlds"
        )

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        enable_debug_logging()
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        disable_debug_logging()

    graph = _build_world(args)

    if args.command == "generate":
        _print_world(graph)
    elif args.command == "find":
        if args.all:
            algorithms = list(PathfindingAlgorithm)
        elif args.algorithm is None:
            algorithms = [PathfindingAlgorithm.DIJKSTRA]
        else:
            algorithms = [args.algorithm]
        _find_path(graph, algorithms, args.start, args.end)


if __name__ == "__main__":
    main()
