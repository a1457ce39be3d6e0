"""Route solver adapters.

These adapters wrap the path-finding algorithms behind RouteSolverPort
and add:
- Domain model output (RouteResult)
- A default time bucket for traffic-aware solvers
- Logging

Unknown node ids propagate as UnknownNodeError. An unreachable target
is not an error: the solver returns an empty RouteResult.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ...domain.models import RouteResult, TimeBucket
from ...graph.astar import emergency_route
from ...graph.dijkstra import shortest_route, traffic_aware_route
from ...graph.model import Graph
from ...graph.traffic import TrafficTable


def _log_result(logger: logging.Logger, route: RouteResult, source: int, target: int) -> None:
    if route.is_empty:
        logger.warning(
            "No route found",
            extra={"source": source, "target": target, "algorithm": route.algorithm},
        )
        return
    logger.info(
        "Route found",
        extra={
            "source": source,
            "target": target,
            "algorithm": route.algorithm,
            "stops": route.num_stops,
            "total_cost": route.total_cost,
        },
    )


@dataclass
class DijkstraRouteSolver:
    """Shortest path by raw road length.

    The time bucket is accepted for interface compatibility and ignored.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(
        self,
        graph: Graph,
        source: int,
        target: int,
        bucket: Optional[TimeBucket] = None,
    ) -> RouteResult:
        """Find the shortest path between two nodes.

        Raises:
            UnknownNodeError: If source or target is not in the graph.
        """
        self._logger.debug(
            "Solving route", extra={"source": source, "target": target}
        )
        route = shortest_route(graph, source, target)
        _log_result(self._logger, route, source, target)
        return route


@dataclass
class TrafficRouteSolver:
    """Least-cost path with traffic-adjusted edge weights.

    Attributes:
        traffic: Traffic flows used to weight edges
        default_bucket: Time of day used when the caller gives none
    """

    traffic: TrafficTable
    default_bucket: TimeBucket = TimeBucket.MORNING
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(
        self,
        graph: Graph,
        source: int,
        target: int,
        bucket: Optional[TimeBucket] = None,
    ) -> RouteResult:
        """Find the least congested-cost path between two nodes.

        Raises:
            UnknownNodeError: If source or target is not in the graph.
        """
        bucket = bucket or self.default_bucket
        self._logger.debug(
            "Solving traffic route",
            extra={"source": source, "target": target, "bucket": bucket.name},
        )
        route = traffic_aware_route(graph, self.traffic, source, target, bucket)
        _log_result(self._logger, route, source, target)
        return route


@dataclass
class EmergencyRouteSolver:
    """A* routing for emergency vehicles.

    The straight-line heuristic is only admissible while traffic
    factors stay at or above 1, so results are best-effort on roads
    with flows above 4000.

    Attributes:
        traffic: Traffic flows used to weight edges
        default_bucket: Time of day used when the caller gives none
    """

    traffic: TrafficTable
    default_bucket: TimeBucket = TimeBucket.MORNING
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(
        self,
        graph: Graph,
        source: int,
        target: int,
        bucket: Optional[TimeBucket] = None,
    ) -> RouteResult:
        """Find an emergency route between two nodes.

        Raises:
            UnknownNodeError: If source or target is not in the graph.
        """
        bucket = bucket or self.default_bucket
        self._logger.debug(
            "Solving emergency route",
            extra={"source": source, "target": target, "bucket": bucket.name},
        )
        route = emergency_route(graph, self.traffic, source, target, bucket)
        _log_result(self._logger, route, source, target)
        return route
