"""Tests for the network planner service."""

from dataclasses import dataclass, field
from unittest.mock import MagicMock

import pytest

from urban_network.adapters.graph import (
    DijkstraRouteSolver,
    EmergencyRouteSolver,
    TrafficRouteSolver,
)
from urban_network.config import PlannerConfig
from urban_network.domain.errors import RenderingError, UnknownNodeError
from urban_network.domain.models import Edge, Node, Route, TimeBucket
from urban_network.graph.model import Graph, build_graph
from urban_network.graph.traffic import TrafficTable
from urban_network.services import NetworkPlannerService


@dataclass
class FakeGraphRepository:
    graph: Graph
    traffic: TrafficTable = field(default_factory=TrafficTable)
    loads: int = 0

    def load(self) -> Graph:
        self.loads += 1
        return self.graph

    def load_traffic(self) -> TrafficTable:
        return self.traffic


@pytest.fixture
def network():
    nodes = [
        Node(1, "Maadi", "Residential", 0.0, 0.0),
        Node(2, "Downtown", "Business", 2.0, 0.0),
        Node(3, "Heliopolis", "Mixed", 4.0, 0.0),
        Node(101, "Airport", "Airport", 6.0, 0.0, is_facility=True),
    ]
    edges = [
        Edge.existing(1, 2, 2.0, 3000, 5),
        Edge.existing(2, 3, 2.0, 3000, 9),
        Edge.existing(1, 3, 5.0, 3000, 3),
        Edge.potential(3, 101, 2.5, 4000, 120.0),
    ]
    return build_graph(nodes, edges)


@pytest.fixture
def planner(network):
    traffic = TrafficTable()
    return NetworkPlannerService(
        graph_repository=FakeGraphRepository(network, traffic),
        route_solvers={
            "dijkstra": DijkstraRouteSolver(),
            "traffic": TrafficRouteSolver(traffic),
            "emergency": EmergencyRouteSolver(traffic),
        },
        config=PlannerConfig(repair_budget=100.0, total_vehicles=10),
    )


class TestNetworkPlannerService:
    """Test suite for NetworkPlannerService."""

    def test_backbone(self, planner):
        backbone = planner.backbone()

        assert {e.key for e in backbone.forest} == {(1, 2), (2, 3), (3, 101)}
        assert backbone.facility_links == ()
        assert backbone.unconnected_facilities == ()
        assert backbone.total_distance == 6.5

    def test_route_by_mode(self, planner):
        assert planner.route(1, 3).path == (1, 2, 3)
        assert planner.route(1, 101, mode="emergency").algorithm == "astar"

    def test_unknown_mode_raises(self, planner):
        with pytest.raises(ValueError, match="Unknown routing mode"):
            planner.route(1, 3, mode="teleport")

    def test_routes_by_time_covers_every_bucket(self, planner):
        routes = planner.routes_by_time(1, 3)

        assert list(routes) == list(TimeBucket)
        assert all(route.path == (1, 2, 3) for route in routes.values())
        assert routes[TimeBucket.EVENING].time_bucket is TimeBucket.EVENING

    def test_allocate_fleet_uses_configured_vehicles(self, planner):
        routes = [
            Route("B1", (1, 2), 6, 500),
            Route("B2", (2, 3), 5, 450),
            Route("B3", (3, 101), 4, 300),
        ]

        selected = planner.allocate_fleet(routes)

        assert [r.id for r in selected] == ["B1", "B3"]
        assert [r.id for r in planner.allocate_fleet(routes, total_vehicles=5)] == ["B2"]

    def test_allocate_fleet_rejects_unknown_stop(self, planner):
        with pytest.raises(UnknownNodeError) as exc_info:
            planner.allocate_fleet([Route("B9", (1, 42), 3, 100)])
        assert exc_info.value.node_id == 42

    def test_plan_repairs_uses_config(self, planner):
        repairs = planner.plan_repairs()

        # Roads below condition 8: 1-2 (cost 50) and 1-3 (cost 70).
        assert [r.edge.key for r in repairs] == [(1, 3)]
        assert {r.edge.key for r in planner.plan_repairs(budget=120.0)} == {(1, 2), (1, 3)}
        assert planner.plan_repairs(budget=0.0) == []

    def test_render_map_without_renderer(self, planner, tmp_path):
        assert planner.render_map(tmp_path / "map.html") is None

    def test_render_map_highlights_backbone(self, planner, tmp_path):
        renderer = MagicMock()
        renderer.render.return_value = tmp_path / "map.html"
        planner.map_renderer = renderer

        assert planner.render_map(tmp_path / "map.html", path=(1, 2)) == tmp_path / "map.html"
        graph, output, highlighted, path = renderer.render.call_args.args
        assert len(highlighted) == 3
        assert path == (1, 2)

    def test_render_map_swallows_unexpected_errors(self, planner, tmp_path, caplog):
        renderer = MagicMock()
        renderer.render.side_effect = RuntimeError("disk full")
        planner.map_renderer = renderer

        assert planner.render_map(tmp_path / "map.html") is None
        assert "Map generation failed" in caplog.text

    def test_render_map_propagates_rendering_error(self, planner, tmp_path):
        renderer = MagicMock()
        renderer.render.side_effect = RenderingError("no nodes", renderer_type="folium")
        planner.map_renderer = renderer

        with pytest.raises(RenderingError):
            planner.render_map(tmp_path / "map.html")
