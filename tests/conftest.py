"""Shared fixtures for the planner test suite."""

import pytest

from urban_network.domain.models import Edge, Node
from urban_network.graph.model import Graph, build_graph
from urban_network.graph.traffic import TrafficTable


def _node(node_id, x=0.0, y=0.0, facility=False):
    return Node(node_id, f"N{node_id}", "Residential", x, y, 0, facility)


@pytest.fixture
def triangle_graph() -> Graph:
    """Nodes 1, 2, 3 with roads 1-2 (2 km), 2-3 (3 km), 1-3 (6 km)."""
    return build_graph(
        [_node(1), _node(2), _node(3)],
        [
            Edge.existing(1, 2, 2.0, 1000, 7),
            Edge.existing(2, 3, 3.0, 1000, 7),
            Edge.existing(1, 3, 6.0, 1000, 7),
        ],
    )


@pytest.fixture
def congested_graph() -> Graph:
    """A direct 10 km road 1-3 and a 4 + 4 km detour through node 2."""
    return build_graph(
        [_node(1, 0.0, 0.0), _node(2, 3.0, 1.0), _node(3, 6.0, 0.0)],
        [
            Edge.existing(1, 3, 10.0, 2000, 6),
            Edge.existing(1, 2, 4.0, 2000, 6),
            Edge.existing(2, 3, 4.0, 2000, 6),
        ],
    )


@pytest.fixture
def congested_traffic() -> TrafficTable:
    """The direct road jams in the morning, the detour jams at night.

    The 2-3 road is only recorded under its reverse key 3-2.
    """
    return TrafficTable(
        {
            (1, 3): (500, 1000, 1000, 4000),
            (1, 2): (4000, 1000, 1000, 500),
            (3, 2): (4000, 1000, 1000, 500),
        }
    )
