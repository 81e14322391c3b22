"""Drawing of a weighted graph and its optimal cycle with matplotlib."""
from __future__ import annotations

import math
from typing import Dict, List, Sequence, Tuple

from .io import format_route
from .oracle import WeightOracle

Coordinate = Tuple[float, float]

NODE_COLOR = "#2563eb"
EDGE_COLOR = "#999999"
OPTIMAL_COLOR = "#10b981"


def compute_node_positions(node_ids: Sequence[str], radius: float = 1.0) -> Dict[str, Coordinate]:
    """Place nodes evenly on a circle, first node at the top."""
    if not node_ids:
        return {}
    positions: Dict[str, Coordinate] = {}
    count = len(node_ids)
    for idx, node in enumerate(node_ids):
        angle = math.pi / 2 - (2 * math.pi * idx) / count
        positions[node] = (radius * math.cos(angle), radius * math.sin(angle))
    return positions


def cycle_edges(route: Sequence[str]) -> List[Tuple[str, str]]:
    """Consecutive pairs of ``route`` including the closing edge."""
    if len(route) < 2:
        return []
    return [(route[i], route[(i + 1) % len(route)]) for i in range(len(route))]


def draw_graph(oracle: WeightOracle, route: Sequence[str] | None = None, ax=None, title: str | None = None):
    """Draw every edge with its weight and highlight ``route`` when given.

    Returns the matplotlib figure holding ``ax``.
    """
    import matplotlib.pyplot as plt

    if ax is None:
        fig, ax = plt.subplots(figsize=(7, 7))
    else:
        fig = ax.figure

    positions = compute_node_positions(oracle.node_ids())
    highlighted = {frozenset(pair) for pair in cycle_edges(route or [])}

    for edge in oracle.edges():
        (x0, y0), (x1, y1) = positions[edge.source], positions[edge.target]
        on_route = frozenset((edge.source, edge.target)) in highlighted
        ax.plot(
            [x0, x1],
            [y0, y1],
            color=OPTIMAL_COLOR if on_route else EDGE_COLOR,
            linewidth=4.0 if on_route else 1.5,
            alpha=1.0 if on_route else 0.5,
            zorder=3 if on_route else 1,
        )
        ax.text(
            (x0 + x1) / 2,
            (y0 + y1) / 2,
            f"{edge.weight:g}",
            fontsize=8,
            ha="center",
            va="center",
            bbox=dict(facecolor="white", edgecolor="none", alpha=0.8, pad=1),
            zorder=4,
        )

    xs = [positions[node][0] for node in oracle.node_ids()]
    ys = [positions[node][1] for node in oracle.node_ids()]
    ax.scatter(xs, ys, s=600, c=NODE_COLOR, edgecolors="#1e40af", linewidths=2, zorder=5)
    for node in oracle.nodes:
        x, y = positions[node.id]
        ax.text(x, y, node.label, color="white", fontweight="bold", ha="center", va="center", zorder=6)

    if title:
        ax.set_title(title)
    ax.set_aspect("equal", adjustable="datalim")
    ax.axis("off")
    return fig


def show_solution(oracle: WeightOracle, route: Sequence[str], cost: float) -> None:
    import matplotlib.pyplot as plt

    label = format_route(route, oracle)
    draw_graph(oracle, route, title=f"Optimal cycle: {label} (cost {cost:g})")
    plt.show()
