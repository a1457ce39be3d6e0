"""Tests for the traffic table and traffic-adjusted edge cost."""

import pytest

from urban_network.domain.models import Edge, TimeBucket
from urban_network.graph.traffic import (
    FALLBACK_FLOW,
    TrafficTable,
    effective_weight,
    traffic_factor,
)


def test_time_bucket_order_is_lookup_index():
    assert [b.name for b in TimeBucket] == ["MORNING", "AFTERNOON", "EVENING", "NIGHT"]
    assert [b.value for b in TimeBucket] == [0, 1, 2, 3]


def test_lookup_prefers_stored_direction():
    table = TrafficTable({(1, 2): (100, 200, 300, 400), (2, 1): (5, 6, 7, 8)})
    edge = Edge.existing(1, 2, 1.0, 100, 5)

    assert table.lookup(edge, TimeBucket.EVENING) == 300
    assert table.lookup(edge.reversed(), TimeBucket.EVENING) == 7


def test_lookup_falls_back_to_reverse_key():
    table = TrafficTable({(2, 1): (100, 200, 300, 400)})
    edge = Edge.existing(1, 2, 1.0, 100, 5)

    assert table.lookup(edge, TimeBucket.NIGHT) == 400


@pytest.mark.parametrize("bucket", list(TimeBucket))
def test_missing_traffic_uses_fallback_factor_of_four(bucket):
    edge = Edge.existing(4, 9, 2.5, 100, 5)
    table = TrafficTable({(1, 2): (100, 200, 300, 400)})

    assert table.lookup(edge, bucket) == FALLBACK_FLOW
    assert traffic_factor(table.lookup(edge, bucket)) == 4.0
    assert effective_weight(edge, table, bucket) == pytest.approx(10.0)


def test_low_flow_is_clamped():
    assert traffic_factor(0) == traffic_factor(500) == 8.0
    assert traffic_factor(8000) == 0.5


def test_from_rows_parses_road_ids():
    table = TrafficTable.from_rows([("1-3", [2800, 1500, 2600, 800]), (" 10-103 ", [1, 2, 3, 4])])

    assert len(table) == 2
    assert (1, 3) in table
    assert table.lookup(Edge.existing(103, 10, 1.0, 100, 5), TimeBucket.AFTERNOON) == 2


def test_from_rows_rejects_malformed_rows():
    with pytest.raises(ValueError):
        TrafficTable.from_rows([("13", [1, 2, 3, 4])])
    with pytest.raises(ValueError):
        TrafficTable.from_rows([("1-3", [1, 2, 3])])
