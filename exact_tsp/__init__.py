"""Exact TSP solvers for small complete graphs.

``solve`` is the entry point; it picks brute force or Held-Karp depending on
the requested mode and the graph size.
"""
from __future__ import annotations

from .errors import (
    ExactTSPError,
    GraphFormatError,
    InsufficientNodesError,
    SolverInvariantError,
    UnrecognizedAlgorithmError,
)
from .models import RouteResult, SolveOutcome, SolveStats
from .solver import AUTO_BRUTE_FORCE_MAX_NODES, Algorithm, solve

__all__ = [
    "AUTO_BRUTE_FORCE_MAX_NODES",
    "Algorithm",
    "ExactTSPError",
    "GraphFormatError",
    "InsufficientNodesError",
    "RouteResult",
    "SolveOutcome",
    "SolveStats",
    "SolverInvariantError",
    "UnrecognizedAlgorithmError",
    "solve",
]
