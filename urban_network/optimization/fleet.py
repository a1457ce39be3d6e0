"""Transit fleet allocation.

Routes compete for a fixed pool of vehicles: each route either gets all
the vehicles it requires or none, and the goal is to maximise the total
ridership served.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from ..domain.models import Route
from .knapsack import optimize_knapsack

logger = logging.getLogger(__name__)


def allocate_fleet(routes: Sequence[Route], total_vehicles: int) -> List[Route]:
    """Choose the routes to operate with ``total_vehicles`` vehicles.

    Weight is the route's vehicle requirement, value its ridership. The
    vehicle count is already an integer, so no scaling is applied.
    """
    selected = optimize_knapsack(
        routes,
        total_vehicles,
        weight=lambda route: route.vehicles_required,
        value=lambda route: route.ridership,
    )
    logger.info(
        "Fleet allocated",
        extra={
            "routes": len(routes),
            "selected": [route.id for route in selected],
            "vehicles_used": sum(route.vehicles_required for route in selected),
            "ridership": sum(route.ridership for route in selected),
        },
    )
    return selected
