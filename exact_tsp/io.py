"""Input/output helpers: graph loading, random graphs and result export."""
from __future__ import annotations

import json
import random
import re
import string
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Sequence, Tuple

import pandas as pd

from .errors import GraphFormatError
from .models import RouteResult, SolveStats
from .oracle import Edge, Node, WeightOracle, build_weight_oracle

DEFAULT_RANDOM_NODES = 8
MAX_RANDOM_NODES = len(string.ascii_uppercase)
MIN_RANDOM_WEIGHT = 10
MAX_RANDOM_WEIGHT = 59
EDGE_LIST_SUFFIXES = {".txt", ".edges"}

_EDGE_LINE = re.compile(r"[,\s]+")


def generate_random_graph(
    node_count: int = DEFAULT_RANDOM_NODES,
    seed: int | None = None,
    *,
    min_weight: int = MIN_RANDOM_WEIGHT,
    max_weight: int = MAX_RANDOM_WEIGHT,
) -> WeightOracle:
    """Create a complete graph labelled ``A, B, C...`` with random integer weights."""
    if not 1 <= node_count <= MAX_RANDOM_NODES:
        raise GraphFormatError(
            f"node_count must be between 1 and {MAX_RANDOM_NODES} (got {node_count})"
        )
    if min_weight < 0 or max_weight < min_weight:
        raise GraphFormatError("Invalid weight range for random graph generation")
    rng = random.Random(seed)
    nodes = [Node(id=f"n{i}", label=string.ascii_uppercase[i]) for i in range(node_count)]
    edges = []
    for i in range(node_count):
        for j in range(i + 1, node_count):
            edges.append(Edge(nodes[i].id, nodes[j].id, rng.randint(min_weight, max_weight)))
    return build_weight_oracle(nodes, edges)


def parse_edge_list(text: str) -> WeightOracle:
    """Parse manually entered edges, one ``LABEL LABEL WEIGHT`` triple per line.

    Nodes are created in order of first appearance. ``#`` starts a comment.
    """
    nodes: Dict[str, Node] = {}
    edges: List[Edge] = []
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue
        parts = [part for part in _EDGE_LINE.split(line) if part]
        if len(parts) != 3:
            raise GraphFormatError(f"Line {lineno}: expected 'A B weight', got {raw.strip()!r}")
        source, target, raw_weight = parts
        try:
            weight = float(raw_weight)
        except ValueError:
            raise GraphFormatError(f"Line {lineno}: invalid weight {raw_weight!r}") from None
        if weight.is_integer():
            weight = int(weight)
        for label in (source, target):
            if label not in nodes:
                nodes[label] = Node(id=f"n{len(nodes)}", label=label)
        edges.append(Edge(nodes[source].id, nodes[target].id, weight))
    return build_weight_oracle(list(nodes.values()), edges)


def graph_from_payload(payload: Dict[str, object]) -> WeightOracle:
    """Build an oracle from ``{"nodes": [...], "edges": [...]}`` or ``{"nodes": [...], "matrix": [...]}``."""
    raw_nodes = payload.get("nodes")
    if not isinstance(raw_nodes, list) or not raw_nodes:
        raise GraphFormatError("Graph payload requires a non-empty 'nodes' list")
    nodes: List[Node] = []
    for raw in raw_nodes:
        if isinstance(raw, str):
            nodes.append(Node(id=raw, label=raw))
            continue
        if not isinstance(raw, dict) or "id" not in raw:
            raise GraphFormatError(f"Node entry must contain an 'id': {raw!r}")
        node_id = str(raw["id"])
        nodes.append(Node(id=node_id, label=str(raw.get("label", node_id))))

    if "matrix" in payload:
        return WeightOracle.from_matrix(nodes, payload["matrix"])  # type: ignore[arg-type]

    edges: List[Edge] = []
    for raw in payload.get("edges", []):  # type: ignore[union-attr]
        try:
            source, target, weight = str(raw["source"]), str(raw["target"]), raw["weight"]
        except (KeyError, TypeError):
            raise GraphFormatError(f"Edge entry must contain source, target and weight: {raw!r}") from None
        if isinstance(weight, bool) or not isinstance(weight, (int, float)):
            raise GraphFormatError(f"Edge {source}-{target} has a non-numeric weight: {weight!r}")
        edges.append(Edge(source, target, weight))
    return build_weight_oracle(nodes, edges)


def read_graph(path: str | Path) -> WeightOracle:
    """Read a graph from JSON, or from a plain edge list for ``.txt``/``.edges`` files."""
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in EDGE_LIST_SUFFIXES:
        return parse_edge_list(text)
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise GraphFormatError(f"{path}: invalid JSON ({exc})") from exc
    if not isinstance(payload, dict):
        raise GraphFormatError(f"{path}: expected a JSON object")
    return graph_from_payload(payload)


def graph_to_payload(oracle: WeightOracle) -> Dict[str, object]:
    return {
        "nodes": [{"id": node.id, "label": node.label} for node in oracle.nodes],
        "edges": [
            {"source": edge.source, "target": edge.target, "weight": edge.weight}
            for edge in oracle.edges()
        ],
    }


def format_route(route: Sequence[str], oracle: WeightOracle) -> str:
    """Render a cycle with labels, repeating the start node at the end."""
    if not route:
        return ""
    labels = [oracle.label(node_id) for node_id in route]
    return " → ".join(labels + [labels[0]])


def build_export_payload(
    oracle: WeightOracle,
    results: Sequence[RouteResult],
    stats: SolveStats,
) -> Dict[str, object]:
    """Create a serialisable dictionary describing a solve."""
    statistics = stats.to_dict()
    statistics["elapsed_time_ms"] = round(stats.elapsed_time_ms, 2)
    statistics["optimal_route"] = [oracle.label(node_id) for node_id in stats.optimal_route]
    return {
        "metadata": {
            "generated_at": datetime.now().isoformat(timespec="seconds"),
            "algorithm": stats.algorithm_name,
        },
        "configuration": {
            "node_count": len(oracle),
            "nodes": oracle.labels(),
        },
        "statistics": statistics,
        "routes": [
            {
                "rank": rank,
                "route": format_route(result.route, oracle),
                "cost": result.cost,
                "is_optimal": rank == 1,
            }
            for rank, result in enumerate(results, start=1)
        ],
    }


def write_export(
    path: str | Path,
    oracle: WeightOracle,
    results: Sequence[RouteResult],
    stats: SolveStats,
) -> Dict[str, object]:
    """Serialise the solve to JSON and return the payload."""
    payload = build_export_payload(oracle, results, stats)
    Path(path).write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
    return payload


def default_export_name(node_count: int, now: datetime | None = None) -> str:
    stamp = (now or datetime.now()).strftime("%Y%m%d_%H%M%S")
    return f"TSP_{node_count}nodes_{stamp}.json"


def results_frame(oracle: WeightOracle, results: Sequence[RouteResult]) -> pd.DataFrame:
    """Ranked routes as a table, one row per evaluated route."""
    rows: List[Tuple[int, str, float, bool]] = [
        (rank, format_route(result.route, oracle), result.cost, rank == 1)
        for rank, result in enumerate(results, start=1)
    ]
    return pd.DataFrame(rows, columns=["rank", "route", "cost", "is_optimal"])
