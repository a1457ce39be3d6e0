"""High-level planning run for the urban network.

The run is organized in several stages:

1. Network loading (CSV files to an in-memory graph and traffic table).
2. Backbone construction (minimum spanning forest plus facilities).
3. Route computation without traffic, with traffic and for emergencies.
4. Fleet allocation and road maintenance planning.
5. Optional network map.

This module wires these stages together and formats a plain-text
report. Each step delegates work to the planner service.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Sequence

from .config import AppConfig, ObservabilityConfig, get_config
from .domain.models import BackboneResult, RoadRepair, Route, RouteResult
from .graph.dijkstra import path_cost
from .graph.model import Graph
from .services.network_planner import NetworkPlannerService

DEFAULT_ROUTES: Sequence[Route] = (
    Route("B1", (1, 3, 6, 9), 25, 35000),
    Route("B2", (7, 10, 8, 3), 30, 42000),
    Route("B3", (2, 5, 101), 20, 28000),
    Route("B4", (4, 2, 3), 22, 31000),
    Route("B5", (8, 1), 18, 25000),
    Route("B6", (5, 2), 24, 33000),
)


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Apply the configured log level and format to the root logger."""
    config = config or get_config().observability
    logging.basicConfig(level=config.level.upper(), format=config.format)


def _names(graph: Graph, path: Sequence[int]) -> str:
    return " -> ".join(graph.node(node_id).name for node_id in path)


def format_backbone(graph: Graph, backbone: BackboneResult) -> List[str]:
    lines = ["Backbone edges:"]
    for edge in backbone.forest:
        kind = "existing" if edge.is_existing else "new"
        lines.append(
            f"  {graph.node(edge.from_node).name} - {graph.node(edge.to_node).name}"
            f" ({edge.distance} km, {kind})"
        )
    for edge in backbone.facility_links:
        lines.append(
            f"  facility link {graph.node(edge.from_node).name} - "
            f"{graph.node(edge.to_node).name} ({edge.distance} km)"
        )
    for facility in backbone.unconnected_facilities:
        lines.append(f"  could not connect facility {graph.node(facility).name}")
    lines.append(f"Total backbone distance: {backbone.total_distance:.2f} km")
    return lines


def format_route(graph: Graph, label: str, route: RouteResult) -> str:
    if route.is_empty:
        return f"{label}: no path found"
    distance = path_cost(graph, route.path)
    return (
        f"{label}: {_names(graph, route.path)} "
        f"(cost {route.total_cost:.2f}, {distance:.2f} km)"
    )


def format_fleet(routes: Sequence[Route]) -> List[str]:
    lines = ["Fleet allocation:"]
    for route in routes:
        lines.append(
            f"  route {route.id}: {route.ridership:.0f} passengers, "
            f"{route.vehicles_required} vehicles"
        )
    lines.append(
        f"Total vehicles used: {sum(route.vehicles_required for route in routes)}"
    )
    return lines


def format_repairs(graph: Graph, repairs: Sequence[RoadRepair]) -> List[str]:
    lines = ["Road repairs:"]
    for repair in repairs:
        edge = repair.edge
        lines.append(
            f"  {graph.node(edge.from_node).name} - {graph.node(edge.to_node).name}: "
            f"cost {repair.cost:.1f}M, benefit {repair.benefit:.0f}"
        )
    lines.append(f"Total repair budget used: {sum(r.cost for r in repairs):.2f}M")
    return lines


def run_pipeline(
    source: int = 1,
    target: int = 5,
    emergency_target: int = 101,
    *,
    routes: Sequence[Route] = DEFAULT_ROUTES,
    generate_map: bool = False,
    map_output_html: Optional[Path] = None,
    config: Optional[AppConfig] = None,
    planner: Optional[NetworkPlannerService] = None,
) -> str:
    """Run every planning stage and return the text report.

    This helper is designed to be reused from other front-ends
    (CLI, notebooks, tests, etc.).
    """
    config = config or get_config()
    planner = planner or NetworkPlannerService.create_default(config)
    graph = planner.graph

    lines = [f"Total nodes: {graph.node_count}", f"Total edges: {graph.edge_count}", ""]

    backbone = planner.backbone()
    lines += format_backbone(graph, backbone)
    lines.append("")

    lines.append(format_route(graph, "Shortest path", planner.route(source, target)))
    for bucket, route in planner.routes_by_time(source, target, "traffic").items():
        lines.append(format_route(graph, f"Traffic path ({bucket.name})", route))
    for bucket, route in planner.routes_by_time(source, emergency_target, "emergency").items():
        lines.append(format_route(graph, f"Emergency path ({bucket.name})", route))
    lines.append("")

    lines += format_fleet(planner.allocate_fleet(routes))
    lines.append("")
    lines += format_repairs(graph, planner.plan_repairs())

    if generate_map:
        output = map_output_html or config.map_output_path
        rendered = planner.render_map(output)
        if rendered is not None:
            lines.append(f"\nMap saved to: {rendered}")

    return "\n".join(lines)


if __name__ == "__main__":
    configure_logging()
    print(run_pipeline())
