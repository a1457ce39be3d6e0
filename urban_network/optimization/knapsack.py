"""Generic 0/1 knapsack engine shared by the allocation optimizers.

The engine is written once, over any item type, and reads each item's
weight and value through accessor functions. Fractional costs must be
scaled to integers before they reach it (see ``scale_cost``).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from operator import attrgetter
from typing import Callable, List, Protocol, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class KnapsackItem(Protocol):
    """Anything with an integer weight and a numeric value."""

    @property
    def weight(self) -> int: ...

    @property
    def value(self) -> float: ...


@dataclass(frozen=True, slots=True)
class Item:
    """Plain knapsack item, handy for ad-hoc instances."""

    weight: int
    value: float


def scale_cost(cost: float, scale: int) -> int:
    """Convert a fractional cost to integer units of ``1/scale``.

    Rounds to the nearest unit, so each scaled cost is off by at most
    ``1 / (2 * scale)`` of the unscaled unit.
    """
    if scale <= 0:
        raise ValueError(f"Scale factor must be positive, got {scale}")
    return int(round(cost * scale))


def optimize_knapsack(
    items: Sequence[T],
    capacity: int,
    *,
    weight: Callable[[T], int] = attrgetter("weight"),
    value: Callable[[T], float] = attrgetter("value"),
) -> List[T]:
    """Select the subset of ``items`` with maximum total value.

    ``table[i][c]`` is the best value reachable with the first ``i``
    items and capacity ``c``. The selection is recovered by walking
    back from ``table[n][capacity]`` and taking item ``i`` whenever
    ``table[i][c] != table[i - 1][c]``. When several subsets reach the
    optimum only one of them is returned.

    Args:
        items: Candidate items.
        capacity: Integer capacity, already scaled by the caller.
        weight: Integer weight accessor.
        value: Value accessor.

    Returns:
        The selected items, in input order.

    Raises:
        ValueError: If ``capacity`` or any weight is negative.
    """
    if capacity < 0:
        raise ValueError(f"Capacity must be non-negative, got {capacity}")

    weights = [int(weight(item)) for item in items]
    values = [value(item) for item in items]
    for i, w in enumerate(weights):
        if w < 0:
            raise ValueError(f"Item {i} has negative weight {w}")

    n = len(items)
    table: List[List[float]] = [[0] * (capacity + 1) for _ in range(n + 1)]

    for i in range(1, n + 1):
        w, v = weights[i - 1], values[i - 1]
        previous, row = table[i - 1], table[i]
        for c in range(capacity + 1):
            if w <= c:
                row[c] = max(previous[c], previous[c - w] + v)
            else:
                row[c] = previous[c]

    selected: List[int] = []
    c = capacity
    for i in range(n, 0, -1):
        if table[i][c] != table[i - 1][c]:
            selected.append(i - 1)
            c -= weights[i - 1]

    logger.debug(
        "Knapsack solved",
        extra={
            "items": n,
            "capacity": capacity,
            "selected": len(selected),
            "best_value": table[n][capacity],
        },
    )
    return [items[i] for i in reversed(selected)]
