"""Lazy permutation enumeration with a fixed, reproducible order."""
from __future__ import annotations

from typing import Iterator, Sequence, Tuple, TypeVar

T = TypeVar("T")


def permute(items: Sequence[T]) -> Iterator[Tuple[T, ...]]:
    """Yield every ordering of ``items``.

    Candidates for the leading position are tried in their original order and
    the remainder is expanded depth-first, so the output order is stable
    across runs. Brute-force tie breaking depends on it.
    """
    items = tuple(items)
    if len(items) <= 1:
        yield items
        return
    for i, current in enumerate(items):
        remaining = items[:i] + items[i + 1 :]
        for perm in permute(remaining):
            yield (current,) + perm
