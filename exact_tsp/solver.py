"""Single entry point choosing between the exact TSP solvers."""
from __future__ import annotations

from enum import Enum
from typing import Hashable, Sequence

from .brute_force import solve_brute_force
from .cost import WeightFn
from .errors import UnrecognizedAlgorithmError
from .held_karp import solve_held_karp
from .models import SolveOutcome
from .utils import LOGGER

# Largest graph for which ``auto`` still enumerates every route.
AUTO_BRUTE_FORCE_MAX_NODES = 10


class Algorithm(str, Enum):
    AUTO = "auto"
    BRUTE_FORCE = "bruteforce"
    HELD_KARP = "heldkarp"

    @classmethod
    def parse(cls, mode: "Algorithm | str") -> "Algorithm":
        if isinstance(mode, cls):
            return mode
        if isinstance(mode, str):
            try:
                return cls(mode.strip().lower())
            except ValueError:
                pass
        raise UnrecognizedAlgorithmError(mode)


def resolve_algorithm(mode: Algorithm | str, node_count: int) -> Algorithm:
    """Turn ``mode`` into a concrete solver choice for a graph of ``node_count`` nodes."""
    algorithm = Algorithm.parse(mode)
    if algorithm is Algorithm.AUTO:
        if node_count <= AUTO_BRUTE_FORCE_MAX_NODES:
            return Algorithm.BRUTE_FORCE
        return Algorithm.HELD_KARP
    return algorithm


def solve(
    node_ids: Sequence[Hashable],
    weight: WeightFn,
    mode: Algorithm | str = Algorithm.AUTO,
) -> SolveOutcome:
    """Solve the TSP over ``node_ids`` exactly.

    ``auto`` enumerates every route for graphs of up to
    ``AUTO_BRUTE_FORCE_MAX_NODES`` nodes and falls back to Held-Karp beyond
    that. ``bruteforce`` and ``heldkarp`` force the corresponding solver
    whatever the graph size.
    """
    node_ids = list(node_ids)
    algorithm = resolve_algorithm(mode, len(node_ids))
    LOGGER.debug("Dispatching %d nodes to %s (requested %s)", len(node_ids), algorithm.value, mode)
    if algorithm is Algorithm.BRUTE_FORCE:
        return solve_brute_force(node_ids, weight)
    return solve_held_karp(node_ids, weight)
