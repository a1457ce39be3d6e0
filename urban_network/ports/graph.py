"""Graph ports - Abstractions for network loading and routing.

These protocols define the contracts for loading the road network and
its traffic data, and for computing routes over it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from ..domain.models import RouteResult, TimeBucket
    from ..graph.model import Graph
    from ..graph.traffic import TrafficTable


class GraphRepositoryPort(Protocol):
    """Port for loading network data.

    Implementation: adapters/graph/csv_repository.py

    The repository is responsible for loading and caching the road
    network and the traffic table from persistent storage.
    """

    def load(self) -> Graph:
        """Load the road network.

        Returns:
            A fully built, read-only graph.
        """
        ...

    def load_traffic(self) -> TrafficTable:
        """Load the traffic flows.

        Returns:
            The traffic table; empty if no traffic data is available.
        """
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Implementations: adapters/graph/route_solvers.py

    The solver computes a least-cost path through the road network.
    """

    def solve(
        self,
        graph: Graph,
        source: int,
        target: int,
        bucket: Optional[TimeBucket] = None,
    ) -> RouteResult:
        """Find a route between two nodes.

        Args:
            graph: The road network.
            source: Departure node id.
            target: Arrival node id.
            bucket: Time of day, for solvers that account for traffic.

        Returns:
            RouteResult with path and total cost.
        """
        ...
