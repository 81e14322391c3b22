"""Exceptions raised by the exact TSP package."""
from __future__ import annotations


class ExactTSPError(Exception):
    """Base class for every error raised by ``exact_tsp``."""


class InsufficientNodesError(ExactTSPError, ValueError):
    """Raised when a solver receives fewer nodes than a cycle needs."""

    def __init__(self, node_count: int, minimum: int = 3) -> None:
        super().__init__(
            f"At least {minimum} nodes are required to solve the TSP (got {node_count})"
        )
        self.node_count = node_count
        self.minimum = minimum


class UnrecognizedAlgorithmError(ExactTSPError, ValueError):
    """Raised when the dispatcher is asked for an unknown algorithm."""

    def __init__(self, mode: object) -> None:
        super().__init__(
            f"Unrecognized algorithm {mode!r}; expected one of: auto, bruteforce, heldkarp"
        )
        self.mode = mode


class SolverInvariantError(ExactTSPError, RuntimeError):
    """Internal consistency failure inside a solver. Never recovered."""


class GraphFormatError(ExactTSPError, ValueError):
    """Raised when a graph description cannot be turned into a weight oracle."""
