"""Edge-weight lookups for complete undirected graphs."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Sequence

import numpy as np

from .cost import route_cost
from .errors import GraphFormatError


@dataclass(frozen=True)
class Node:
    """A graph vertex. Only ``id`` matters to the solvers."""

    id: str
    label: str


@dataclass(frozen=True)
class Edge:
    source: str
    target: str
    weight: float


@dataclass
class WeightOracle:
    """Weight queries backed by a dense symmetric matrix.

    Pairs that were never given a weight read as ``0``; the solvers take the
    graph as complete and do not second-guess that value.
    """

    nodes: List[Node]
    matrix: np.ndarray
    _index: Dict[str, int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._index = {node.id: idx for idx, node in enumerate(self.nodes)}
        if len(self._index) != len(self.nodes):
            raise GraphFormatError("Node identifiers must be unique")
        size = len(self.nodes)
        if self.matrix.shape != (size, size):
            raise GraphFormatError(
                f"Weight matrix must be {size}x{size}, got {self.matrix.shape}"
            )

    @classmethod
    def from_matrix(cls, nodes: Sequence[Node], matrix: Sequence[Sequence[float]]) -> "WeightOracle":
        array = np.asarray(matrix, dtype=float)
        if array.ndim != 2 or array.shape[0] != array.shape[1]:
            raise GraphFormatError("Weight matrix must be square")
        if not np.isfinite(array).all():
            raise GraphFormatError("Edge weights must be finite")
        if not np.allclose(array, array.T):
            raise GraphFormatError("Weight matrix must be symmetric")
        if (array < 0).any():
            raise GraphFormatError("Edge weights must be non-negative")
        return cls(nodes=list(nodes), matrix=array)

    def __call__(self, a: str, b: str) -> float:
        return self.get(a, b)

    def __len__(self) -> int:
        return len(self.nodes)

    def node_ids(self) -> List[str]:
        return [node.id for node in self.nodes]

    def labels(self) -> List[str]:
        return [node.label for node in self.nodes]

    def label(self, node_id: str) -> str:
        return self.nodes[self._index[node_id]].label

    def get(self, a: str, b: str) -> float:
        if a == b:
            return 0.0
        value = self.matrix[self._index[a], self._index[b]]
        # Keep integral weights integral so route costs print cleanly.
        return int(value) if float(value).is_integer() else float(value)

    def edges(self) -> List[Edge]:
        """Every unordered pair once, in node order."""
        result: List[Edge] = []
        for i, a in enumerate(self.nodes):
            for b in self.nodes[i + 1 :]:
                result.append(Edge(source=a.id, target=b.id, weight=self.get(a.id, b.id)))
        return result

    def route_cost(self, route: Sequence[str]) -> float:
        return route_cost(route, self.get)


def build_weight_oracle(nodes: Sequence[Node], edges: Iterable[Edge]) -> WeightOracle:
    """Create a weight oracle from an undirected edge list.

    Later edges override earlier ones for the same pair.
    """
    index = {node.id: idx for idx, node in enumerate(nodes)}
    size = len(nodes)
    matrix = np.zeros((size, size), dtype=float)
    for edge in edges:
        if edge.source not in index or edge.target not in index:
            raise GraphFormatError(
                f"Edge {edge.source}-{edge.target} references an unknown node"
            )
        if not math.isfinite(edge.weight):
            raise GraphFormatError(
                f"Edge {edge.source}-{edge.target} has a non-finite weight ({edge.weight})"
            )
        if edge.weight < 0:
            raise GraphFormatError(
                f"Edge {edge.source}-{edge.target} has a negative weight ({edge.weight})"
            )
        ia, ib = index[edge.source], index[edge.target]
        if ia == ib:
            continue
        matrix[ia, ib] = matrix[ib, ia] = float(edge.weight)
    return WeightOracle(nodes=list(nodes), matrix=matrix)


def oracle_from_mapping(weights: Mapping[tuple[str, str], float]):
    """Wrap a ``{(a, b): weight}`` mapping as a symmetric weight callable."""

    def weight(a: str, b: str) -> float:
        if (a, b) in weights:
            return weights[(a, b)]
        return weights.get((b, a), 0)

    return weight
