"""Integration tests for the full planning run on the bundled Cairo data."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from urban_network.config import AppConfig, GraphConfig
from urban_network.domain.models import Route
from urban_network.pipeline import format_route, run_pipeline
from urban_network.services import NetworkPlannerService

DATA_DIR = Path(__file__).resolve().parents[1] / "data"


@pytest.fixture
def config(tmp_path):
    return AppConfig(graph=GraphConfig(data_dir=DATA_DIR), output_dir=tmp_path)


def test_report_covers_every_stage(config):
    result = run_pipeline(config=config)

    assert result.startswith("Total nodes: 14\nTotal edges: 21"), result
    assert "Backbone edges:" in result, f"Should list the backbone: {result}"
    assert (
        "Shortest path: Maadi -> Downtown Cairo -> Heliopolis" in result
    ), f"Should route through downtown: {result}"
    assert "14.60 km" in result
    for bucket in ("MORNING", "AFTERNOON", "EVENING", "NIGHT"):
        assert f"Traffic path ({bucket})" in result
        assert f"Emergency path ({bucket})" in result
    assert "Fleet allocation:" in result
    assert "Road repairs:" in result
    assert "no path found" not in result


def test_backbone_spans_the_sample_network(config):
    planner = NetworkPlannerService.create_default(config)

    backbone = planner.backbone()

    assert len(backbone.forest) == planner.graph.node_count - 1
    assert backbone.unconnected_facilities == ()


def test_fleet_respects_vehicle_limit(config):
    planner = NetworkPlannerService.create_default(config)

    selected = planner.allocate_fleet(
        [
            Route("B1", (1, 3, 6, 9), 25, 35000),
            Route("B2", (7, 10, 8, 3), 30, 42000),
            Route("B6", (5, 2), 24, 33000),
        ]
    )

    assert sum(r.vehicles_required for r in selected) <= config.planner.total_vehicles
    assert [r.id for r in selected] == ["B1", "B2"]


def test_repairs_stay_within_budget(config):
    planner = NetworkPlannerService.create_default(config)

    repairs = planner.plan_repairs(budget=100.0)

    assert repairs
    assert sum(r.cost for r in repairs) <= 100.0
    assert all(r.edge.condition < 8 for r in repairs)


def test_map_generation_uses_configured_output(config):
    planner = NetworkPlannerService.create_default(config)
    renderer = MagicMock()
    renderer.render.side_effect = lambda graph, output, edges, path: output
    planner.map_renderer = renderer

    result = run_pipeline(config=config, planner=planner, generate_map=True)

    assert f"Map saved to: {config.map_output_path}" in result


def test_single_stop_route_formatting(config):
    planner = NetworkPlannerService.create_default(config)
    graph = planner.graph
    route = planner.route(1, 1)

    assert format_route(graph, "Loop", route) == "Loop: Maadi (cost 0.00, 0.00 km)"
