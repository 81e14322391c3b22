"""Utility helpers for the exact TSP solvers."""
from __future__ import annotations

import logging
import time
from typing import Iterator, Sequence, Tuple, TypeVar


LOGGER = logging.getLogger("exact_tsp")

T = TypeVar("T")


def configure_logging(level: int = logging.INFO) -> None:
    """Configure the solver logger once."""
    if LOGGER.handlers:
        LOGGER.setLevel(level)
        return
    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        "[%(asctime)s] %(levelname)s %(message)s", "%H:%M:%S"
    )
    handler.setFormatter(formatter)
    LOGGER.addHandler(handler)
    LOGGER.setLevel(level)


class Timer:
    """Context manager for timing code blocks."""

    def __init__(self) -> None:
        self.start_time: float | None = None
        self.elapsed: float = 0.0

    def __enter__(self) -> "Timer":
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # type: ignore[override]
        self.elapsed = time.perf_counter() - (self.start_time or time.perf_counter())

    @property
    def elapsed_ms(self) -> float:
        return self.elapsed * 1000.0


def log_solution(algorithm: str, evaluated: int, cost: float, elapsed_ms: float) -> None:
    """Log the outcome of a finished solve."""
    LOGGER.info(
        "%s: %d route(s) evaluated, optimal cost=%s (%.2f ms)",
        algorithm,
        evaluated,
        cost,
        elapsed_ms,
    )


def pairwise(sequence: Sequence[T]) -> Iterator[Tuple[T, T]]:
    """Yield consecutive pairs from a sequence."""
    for i in range(len(sequence) - 1):
        yield sequence[i], sequence[i + 1]
