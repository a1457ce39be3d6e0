"""Network planner service - Main orchestrator.

This service wires the repository, the route solvers, the optimizers
and the optional renderer together to answer planning questions about
a loaded network.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence

from ..config import AppConfig, PlannerConfig, get_config
from ..domain.errors import RenderingError, UnknownNodeError
from ..domain.models import BackboneResult, RoadRepair, Route, RouteResult, TimeBucket
from ..graph.model import Graph
from ..graph.mst import build_mst, connect_facilities
from ..optimization.fleet import allocate_fleet
from ..optimization.maintenance import repair_candidates, select_repairs
from ..ports.graph import GraphRepositoryPort, RouteSolverPort
from ..ports.rendering import MapRendererPort


@dataclass
class NetworkPlannerService:
    """Main service for planning the transportation network.

    Attributes:
        graph_repository: Loads the road network and traffic
        route_solvers: Solvers by mode name ("dijkstra", "traffic", "emergency")
        config: Planning parameters
        map_renderer: Optional network map renderer
    """

    graph_repository: GraphRepositoryPort
    route_solvers: Mapping[str, RouteSolverPort]
    config: PlannerConfig = field(default_factory=lambda: get_config().planner)
    map_renderer: Optional[MapRendererPort] = None

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> NetworkPlannerService:
        """Create a planner with the CSV repository and all solvers.

        Args:
            config: Optional configuration override.
        """
        from ..adapters.graph import (
            CSVGraphRepository,
            DijkstraRouteSolver,
            EmergencyRouteSolver,
            TrafficRouteSolver,
        )
        from ..adapters.rendering import FoliumNetworkRenderer

        config = config or get_config()
        repository = CSVGraphRepository(config.graph)
        traffic = repository.load_traffic()
        bucket = TimeBucket[config.planner.default_time_bucket]

        return cls(
            graph_repository=repository,
            route_solvers={
                "dijkstra": DijkstraRouteSolver(),
                "traffic": TrafficRouteSolver(traffic, default_bucket=bucket),
                "emergency": EmergencyRouteSolver(traffic, default_bucket=bucket),
            },
            config=config.planner,
            map_renderer=FoliumNetworkRenderer(config.rendering),
        )

    @property
    def graph(self) -> Graph:
        return self.graph_repository.load()

    def backbone(self) -> BackboneResult:
        """Minimum spanning forest plus links to unconnected facilities."""
        graph = self.graph
        forest = build_mst(graph)
        links, unconnected = connect_facilities(graph, forest)
        result = BackboneResult(
            forest=tuple(forest),
            facility_links=tuple(links),
            unconnected_facilities=tuple(unconnected),
        )
        self._logger.info(
            "Backbone built",
            extra={
                "edges": len(result.edges),
                "total_distance_km": result.total_distance,
                "unconnected_facilities": len(unconnected),
            },
        )
        return result

    def route(
        self,
        source: int,
        target: int,
        mode: str = "dijkstra",
        bucket: Optional[TimeBucket] = None,
    ) -> RouteResult:
        """Route between two nodes with the solver registered for ``mode``.

        Raises:
            ValueError: If no solver is registered for ``mode``.
            UnknownNodeError: If source or target is not in the graph.
        """
        solver = self.route_solvers.get(mode)
        if solver is None:
            raise ValueError(f"Unknown routing mode: {mode!r}")
        return solver.solve(self.graph, source, target, bucket)

    def routes_by_time(
        self, source: int, target: int, mode: str = "traffic"
    ) -> Dict[TimeBucket, RouteResult]:
        """The same query repeated for every time bucket."""
        return {bucket: self.route(source, target, mode, bucket) for bucket in TimeBucket}

    def allocate_fleet(
        self, routes: Sequence[Route], total_vehicles: Optional[int] = None
    ) -> List[Route]:
        """Choose which transit routes to operate.

        Raises:
            UnknownNodeError: If a route stops at a node not in the graph.
        """
        graph = self.graph
        for route in routes:
            for stop in route.stops:
                if stop not in graph:
                    raise UnknownNodeError(
                        f"Route {route.id} stops at unknown node {stop}",
                        node_id=stop,
                    )

        vehicles = self.config.total_vehicles if total_vehicles is None else total_vehicles
        return allocate_fleet(routes, vehicles)

    def plan_repairs(self, budget: Optional[float] = None) -> List[RoadRepair]:
        """Select road repairs within ``budget`` (configured budget by default)."""
        candidates = repair_candidates(self.graph, self.config.repair_condition_threshold)
        return select_repairs(
            candidates,
            self.config.repair_budget if budget is None else budget,
            self.config.repair_cost_scale,
        )

    def render_map(
        self, output_path: Path, path: Sequence[int] = ()
    ) -> Optional[Path]:
        """Render the network with its backbone highlighted.

        Returns:
            The map path, or None when no renderer is configured or
            rendering failed for a reason other than a RenderingError.
        """
        if self.map_renderer is None:
            return None

        try:
            return self.map_renderer.render(
                self.graph, output_path, self.backbone().edges, path
            )
        except RenderingError:
            raise
        except Exception as e:
            # Log but don't fail the entire planning run
            self._logger.warning(
                "Map generation failed",
                extra={"error": str(e)},
            )
            return None
