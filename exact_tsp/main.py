"""CLI entry point for the exact TSP solvers."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from .errors import ExactTSPError
from .io import (
    DEFAULT_RANDOM_NODES,
    default_export_name,
    format_route,
    generate_random_graph,
    read_graph,
    results_frame,
    write_export,
)
from .models import SolveOutcome
from .oracle import WeightOracle
from .solver import Algorithm, solve
from .utils import configure_logging

DEFAULT_SEED = 42
DEFAULT_TOP = 10
AUTO_EXPORT_NAME = Path("")


def solve_graph(oracle: WeightOracle, algorithm: Algorithm | str = Algorithm.AUTO) -> SolveOutcome:
    """Solve the TSP over every node of ``oracle``."""
    return solve(oracle.node_ids(), oracle, algorithm)


def print_solution_summary(oracle: WeightOracle, outcome: SolveOutcome, top: int = DEFAULT_TOP) -> None:
    """Display the result in a human-friendly format."""
    results, stats = outcome
    best = outcome.best

    print("\n=== Graph ===")
    print(f"Nodes ({len(oracle)}): {', '.join(oracle.labels())}")

    print("\n=== Solution ===")
    print(f"Algorithm       : {stats.algorithm_name}")
    print(f"Routes evaluated: {stats.evaluated_route_count}")
    print(f"Optimal cost    : {best.cost:g}")
    print(f"Optimal route   : {format_route(best.route, oracle)}")
    print(f"Elapsed time    : {stats.elapsed_time_ms:.2f} ms")

    if top > 0 and len(results) > 1:
        print(f"\n=== Top {min(top, len(results))} routes ===")
        for rank, result in enumerate(results[:top], start=1):
            marker = " (optimal)" if rank == 1 else ""
            print(f"{rank:>4}. {format_route(result.route, oracle)} | cost {result.cost:g}{marker}")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Exact TSP solver (brute force / Held-Karp)")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--input", type=Path, help="Graph file (JSON, or an edge list with .txt/.edges suffix)")
    source.add_argument(
        "--random",
        type=int,
        metavar="N",
        help=f"Generate a random complete graph with N nodes (default when no input: {DEFAULT_RANDOM_NODES})",
    )
    parser.add_argument(
        "--algorithm",
        default=Algorithm.AUTO.value,
        help="auto, bruteforce or heldkarp",
    )
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help="Seed for random graph generation")
    parser.add_argument("--top", type=int, default=DEFAULT_TOP, help="Number of ranked routes to print")
    parser.add_argument(
        "--export",
        type=Path,
        nargs="?",
        const=AUTO_EXPORT_NAME,
        help="Write the ranked routes to this JSON file (TSP_<n>nodes_<timestamp>.json when no path is given)",
    )
    parser.add_argument("--csv", type=Path, help="Write the ranked routes to this CSV file")
    parser.add_argument("--plot", action="store_true", help="Show the graph with the optimal cycle")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        if args.input is not None:
            oracle = read_graph(args.input)
        else:
            node_count = args.random if args.random is not None else DEFAULT_RANDOM_NODES
            oracle = generate_random_graph(node_count, seed=args.seed)
        outcome = solve_graph(oracle, args.algorithm)
    except (ExactTSPError, OSError) as exc:
        raise SystemExit(f"error: {exc}") from exc

    print_solution_summary(oracle, outcome, top=args.top)

    if args.export is not None:
        export_path = args.export
        if export_path == AUTO_EXPORT_NAME:
            export_path = Path(default_export_name(len(oracle)))
        write_export(export_path, oracle, outcome.results, outcome.stats)
        print(f"\nExported {len(outcome.results)} route(s) to {export_path}")
    if args.csv is not None:
        results_frame(oracle, outcome.results).to_csv(args.csv, index=False)
        print(f"Wrote CSV table to {args.csv}")
    if args.plot:
        from .visualize import show_solution

        show_solution(oracle, outcome.best.route, outcome.best.cost)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
