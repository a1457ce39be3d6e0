"""Time-bucketed traffic flows and the traffic-adjusted edge cost.

``effective_weight`` is the only place where traffic turns into an
edge cost; every traffic-aware search goes through it.
"""

from __future__ import annotations

from typing import Dict, Iterable, Mapping, Optional, Sequence, Tuple

from ..domain.models import Edge, TimeBucket

FALLBACK_FLOW = 1000
MIN_FLOW = 500
REFERENCE_FLOW = 4000.0

Flows = Tuple[int, int, int, int]


class TrafficTable:
    """Traffic flow per directed road key and time bucket.

    Missing keys are a normal condition: ``lookup`` falls back to
    ``FALLBACK_FLOW`` for every bucket.
    """

    def __init__(
        self, flows: Optional[Mapping[Tuple[int, int], Sequence[int]]] = None
    ) -> None:
        self._flows: Dict[Tuple[int, int], Flows] = {}
        for key, values in (flows or {}).items():
            self.set_flows(key[0], key[1], values)

    def set_flows(self, from_node: int, to_node: int, values: Sequence[int]) -> None:
        """Record the four bucket flows for the directed key ``from_node-to_node``."""
        if len(values) != len(TimeBucket):
            raise ValueError(
                f"Expected {len(TimeBucket)} flow values for {from_node}-{to_node}, "
                f"got {len(values)}"
            )
        self._flows[(from_node, to_node)] = tuple(int(v) for v in values)  # type: ignore[assignment]

    @classmethod
    def from_rows(cls, rows: Iterable[Tuple[str, Sequence[int]]]) -> TrafficTable:
        """Build a table from ``("1-3", [morning, afternoon, evening, night])`` rows."""
        table = cls()
        for road_id, values in rows:
            from_part, sep, to_part = road_id.strip().partition("-")
            if not sep:
                raise ValueError(f"Malformed road id: {road_id!r}")
            table.set_flows(int(from_part), int(to_part), values)
        return table

    def flows_for(self, edge: Edge) -> Flows:
        """Flows for ``edge``, trying its stored direction, then the reverse."""
        flows = self._flows.get(edge.key)
        if flows is None:
            flows = self._flows.get((edge.to_node, edge.from_node))
        if flows is None:
            return (FALLBACK_FLOW,) * len(TimeBucket)  # type: ignore[return-value]
        return flows

    def lookup(self, edge: Edge, bucket: TimeBucket) -> int:
        """Traffic flow on ``edge`` during ``bucket``."""
        return self.flows_for(edge)[bucket.value]

    def __contains__(self, key: object) -> bool:
        return key in self._flows

    def __len__(self) -> int:
        return len(self._flows)


def traffic_factor(flow: int) -> float:
    """Congestion multiplier for a given flow.

    Flows below ``MIN_FLOW`` are clamped so the factor stays bounded.
    """
    return REFERENCE_FLOW / max(flow, MIN_FLOW)


def effective_weight(edge: Edge, traffic: TrafficTable, bucket: TimeBucket) -> float:
    """Traffic-adjusted cost of travelling along ``edge``."""
    return edge.distance * traffic_factor(traffic.lookup(edge, bucket))
