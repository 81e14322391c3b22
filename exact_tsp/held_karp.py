"""Held-Karp subset dynamic programming for the exact TSP.

Node 0 is the anchor of the cycle. The remaining ``m = n - 1`` nodes are
encoded as bits of a subset mask and ``cost[mask, j]`` holds the cheapest
path that leaves the anchor, visits exactly the nodes of ``mask`` and stops at
``j``. The minimising predecessor is stored in ``parent[mask, j]`` during the
forward pass so the optimal cycle can be walked back without re-deriving it.

Masks are processed one popcount layer at a time. Within a layer every state
only depends on the previous layer, which lets each ``(layer, j)`` step run
as a single vectorised numpy reduction.
"""
from __future__ import annotations

from typing import Hashable, List, Sequence, Tuple

import numpy as np

from .cost import WeightFn, route_cost
from .errors import InsufficientNodesError, SolverInvariantError
from .models import RouteResult, SolveOutcome, SolveStats
from .utils import LOGGER, Timer, log_solution

ALGORITHM_NAME = "Held-Karp (DP)"
MIN_NODES = 3

_NO_PARENT = -1


def solve_held_karp(node_ids: Sequence[Hashable], weight: WeightFn) -> SolveOutcome:
    """Return only the optimal cycle, anchored at ``node_ids[0]``."""
    node_ids = list(node_ids)
    n = len(node_ids)
    if n < MIN_NODES:
        raise InsufficientNodesError(n, MIN_NODES)

    LOGGER.debug("%s: %d nodes, %d subset states", ALGORITHM_NAME, n, (1 << (n - 1)) * (n - 1))
    with Timer() as timer:
        weights = _weight_matrix(node_ids, weight)
        cost, parent = _forward_pass(weights)
        order, dp_cost = _reconstruct(weights, cost, parent)
        route = tuple(node_ids[idx] for idx in order)
        # Same matrix and summation order as the DP, so equality is exact.
        matrix_cost = float(route_cost(order, lambda a, b: weights[a, b]))
        optimal_cost = route_cost(route, weight)

    if matrix_cost != dp_cost:
        raise SolverInvariantError(
            f"Reconstructed route costs {matrix_cost}, dynamic programme reported {dp_cost}"
        )

    stats = SolveStats(
        evaluated_route_count=1,
        optimal_cost=optimal_cost,
        optimal_route=route,
        elapsed_time_ms=timer.elapsed_ms,
        algorithm_name=ALGORITHM_NAME,
    )
    log_solution(ALGORITHM_NAME, stats.evaluated_route_count, stats.optimal_cost, stats.elapsed_time_ms)
    return SolveOutcome(results=[RouteResult(route=route, cost=optimal_cost)], stats=stats)


def _weight_matrix(node_ids: Sequence[Hashable], weight: WeightFn) -> np.ndarray:
    """Query every ordered pair once so the DP never calls back into the oracle."""
    n = len(node_ids)
    weights = np.zeros((n, n), dtype=float)
    for i, a in enumerate(node_ids):
        for j, b in enumerate(node_ids):
            if i != j:
                weights[i, j] = weight(a, b)
    return weights


def _forward_pass(weights: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    m = weights.shape[0] - 1
    size = 1 << m
    # Columns/rows of ``inner`` are the non-anchor nodes, index j <-> node j + 1.
    inner = weights[1:, 1:]

    cost = np.full((size, m), np.inf)
    parent = np.full((size, m), _NO_PARENT, dtype=np.int16)
    for j in range(m):
        cost[1 << j, j] = weights[0, j + 1]

    masks = np.arange(size)
    popcount = np.zeros(size, dtype=np.int64)
    for bit in range(m):
        popcount += (masks >> bit) & 1

    for k in range(2, m + 1):
        layer = masks[popcount == k]
        for j in range(m):
            sel = layer[((layer >> j) & 1) == 1]
            prev = sel ^ (1 << j)
            # Non-members of ``prev`` are still inf and never win the argmin.
            candidates = cost[prev] + inner[:, j]
            best = candidates.argmin(axis=1)
            best_cost = candidates[np.arange(len(sel)), best]
            reachable = np.isfinite(best_cost)
            cost[sel, j] = best_cost
            parent[sel[reachable], j] = best[reachable]
    return cost, parent


def _reconstruct(weights: np.ndarray, cost: np.ndarray, parent: np.ndarray) -> Tuple[List[int], float]:
    m = weights.shape[0] - 1
    full = (1 << m) - 1
    closing = cost[full] + weights[1:, 0]
    last = int(closing.argmin())
    total = float(closing[last])
    if not np.isfinite(total):
        raise SolverInvariantError("No finite cycle found over the full node set")

    backwards = [last]
    mask, j = full, last
    while mask != (1 << j):
        prev = int(parent[mask, j])
        if prev == _NO_PARENT:
            raise SolverInvariantError(
                f"Missing predecessor for reachable state (mask={mask:#x}, last={j + 1})"
            )
        mask ^= 1 << j
        j = prev
        backwards.append(j)

    # Shift back to full-graph indices and put the anchor first.
    order = [0] + [idx + 1 for idx in reversed(backwards)]
    return order, total
