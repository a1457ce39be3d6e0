"""A* search for emergency routing under traffic.

The heuristic is the straight-line distance between node coordinates,
while edge costs are traffic-inflated distances. When the traffic
factor drops below 1 (flows above 4000) an edge can cost less than its
length, the heuristic may then overestimate, and the returned path is
best-effort rather than provably optimal.
"""

from __future__ import annotations

import math
from typing import List

from ..domain.models import Node, RouteResult, TimeBucket
from .dijkstra import HeuristicFn, best_first_search, traffic_weight
from .model import Graph
from .traffic import TrafficTable


def euclidean_distance(a: Node, b: Node) -> float:
    return math.hypot(a.x - b.x, a.y - b.y)


def _straight_line_to(graph: Graph, goal: int) -> HeuristicFn:
    goal_node = graph.node(goal)

    def heuristic(position: int) -> float:
        return euclidean_distance(graph.node_at(position), goal_node)

    return heuristic


def emergency_route(
    graph: Graph,
    traffic: TrafficTable,
    source: int,
    goal: int,
    bucket: TimeBucket,
) -> RouteResult:
    """A* path from ``source`` to ``goal`` with its accumulated cost."""
    state = best_first_search(
        graph,
        source,
        goal,
        weight=traffic_weight(traffic, bucket),
        heuristic=_straight_line_to(graph, goal),
    )
    g = graph.index_of(goal)
    return RouteResult(
        path=tuple(state.path_to(graph, g)),
        total_cost=state.distances[g],
        algorithm="astar",
        time_bucket=bucket,
    )


def emergency_path(
    graph: Graph,
    traffic: TrafficTable,
    source: int,
    goal: int,
    bucket: TimeBucket,
) -> List[int]:
    """Node ids of the A* path, empty if ``goal`` is unreachable."""
    return list(emergency_route(graph, traffic, source, goal, bucket).path)
