"""Result records shared by the solvers."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Hashable, List, NamedTuple, Tuple

Route = Tuple[Hashable, ...]


@dataclass(frozen=True)
class RouteResult:
    """A closed route together with its total cycle cost."""

    route: Route
    cost: float


@dataclass(frozen=True)
class SolveStats:
    evaluated_route_count: int
    optimal_cost: float
    optimal_route: Route
    elapsed_time_ms: float
    algorithm_name: str

    def to_dict(self) -> Dict[str, object]:
        payload = asdict(self)
        payload["optimal_route"] = list(self.optimal_route)
        return payload


class SolveOutcome(NamedTuple):
    results: List[RouteResult]
    stats: SolveStats

    @property
    def best(self) -> RouteResult:
        return self.results[0]
