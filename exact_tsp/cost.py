"""Cycle cost evaluation."""
from __future__ import annotations

from typing import Callable, Hashable, Sequence

from .utils import pairwise

WeightFn = Callable[[Hashable, Hashable], float]


def route_cost(route: Sequence[Hashable], weight: WeightFn) -> float:
    """Sum consecutive edge weights and close the cycle back to the start."""
    if len(route) < 2:
        return 0
    cost = 0
    for a, b in pairwise(route):
        cost += weight(a, b)
    cost += weight(route[-1], route[0])
    return cost
