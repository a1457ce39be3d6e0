"""Road maintenance planning under a fixed budget.

Repair candidates are derived from existing roads whose condition is
below a quality threshold. Selection is a 0/1 knapsack over the repair
costs, scaled to integers: with the default scale of 10 costs are
counted in tenths of a million, and each cost carries a rounding error
of at most 0.05.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from ..domain.models import Edge, RoadRepair
from ..graph.model import Graph
from .knapsack import optimize_knapsack, scale_cost

logger = logging.getLogger(__name__)

DEFAULT_CONDITION_THRESHOLD = 8
DEFAULT_COST_SCALE = 10


def estimate_repair(edge: Edge) -> RoadRepair:
    """Cost and benefit estimate for repairing an existing road.

    Worse roads cost more to fix; busier, longer and better-kept roads
    return more benefit.
    """
    condition = edge.condition
    if condition is None:
        raise ValueError(f"Only existing roads can be repaired, got {edge.key}")
    cost = 10.0 * (10 - condition)
    benefit = edge.distance * edge.capacity * condition
    return RoadRepair(edge=edge, cost=cost, benefit=benefit)


def repair_candidates(
    graph: Graph, condition_threshold: int = DEFAULT_CONDITION_THRESHOLD
) -> List[RoadRepair]:
    """Repair projects for every existing road below ``condition_threshold``."""
    return [
        estimate_repair(edge)
        for edge in graph.edges
        if edge.is_existing and edge.condition < condition_threshold
    ]


def select_repairs(
    repairs: Sequence[RoadRepair],
    budget: float,
    scale: int = DEFAULT_COST_SCALE,
) -> List[RoadRepair]:
    """Pick the repairs with maximum total benefit within ``budget``.

    Costs and budget are scaled by ``scale`` and rounded before the
    knapsack runs.
    """
    if budget < 0:
        raise ValueError(f"Budget must be non-negative, got {budget}")

    selected = optimize_knapsack(
        repairs,
        scale_cost(budget, scale),
        weight=lambda repair: scale_cost(repair.cost, scale),
        value=lambda repair: repair.benefit,
    )
    logger.info(
        "Repairs selected",
        extra={
            "candidates": len(repairs),
            "selected": len(selected),
            "budget_used": sum(repair.cost for repair in selected),
            "budget": budget,
        },
    )
    return selected
