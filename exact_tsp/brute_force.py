"""Exhaustive search over every cycle through a fixed start node."""
from __future__ import annotations

from math import factorial
from typing import Hashable, List, Sequence

from .cost import WeightFn, route_cost
from .errors import InsufficientNodesError
from .models import RouteResult, SolveOutcome, SolveStats
from .permutations import permute
from .utils import LOGGER, Timer, log_solution

ALGORITHM_NAME = "Brute Force"
MIN_NODES = 3


def solve_brute_force(node_ids: Sequence[Hashable], weight: WeightFn) -> SolveOutcome:
    """Evaluate all ``(n-1)!`` routes starting at ``node_ids[0]`` and rank them.

    A route and its reverse are both kept. No size cap is applied here, the
    dispatcher decides when this solver is affordable.
    """
    node_ids = list(node_ids)
    if len(node_ids) < MIN_NODES:
        raise InsufficientNodesError(len(node_ids), MIN_NODES)

    LOGGER.debug("%s: enumerating %d routes over %d nodes", ALGORITHM_NAME, factorial(len(node_ids) - 1), len(node_ids))
    start = node_ids[0]
    with Timer() as timer:
        results: List[RouteResult] = []
        for perm in permute(node_ids[1:]):
            route = (start,) + perm
            results.append(RouteResult(route=route, cost=route_cost(route, weight)))
        # list.sort is stable: ties keep enumeration order.
        results.sort(key=lambda result: result.cost)

    best = results[0]
    stats = SolveStats(
        evaluated_route_count=len(results),
        optimal_cost=best.cost,
        optimal_route=best.route,
        elapsed_time_ms=timer.elapsed_ms,
        algorithm_name=ALGORITHM_NAME,
    )
    log_solution(ALGORITHM_NAME, stats.evaluated_route_count, stats.optimal_cost, stats.elapsed_time_ms)
    return SolveOutcome(results=results, stats=stats)
