"""Shortest-path computation using Dijkstra's algorithm.

All path finders in this package (plain Dijkstra, traffic-aware
Dijkstra and A*) share the best-first relaxation core defined here.
They differ only in the edge weight function and in the heuristic
added to the frontier priority.
"""

from __future__ import annotations

import heapq
import logging
import math
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from ..domain.errors import UnknownNodeError
from ..domain.models import Edge, RouteResult, TimeBucket
from .model import Graph
from .traffic import TrafficTable, effective_weight

logger = logging.getLogger(__name__)

WeightFn = Callable[[Edge], float]
HeuristicFn = Callable[[int], float]

NO_PREDECESSOR = -1


def raw_distance(edge: Edge) -> float:
    """Edge weight ignoring traffic."""
    return edge.distance


def traffic_weight(traffic: TrafficTable, bucket: TimeBucket) -> WeightFn:
    """Edge weight function bound to a traffic table and time bucket."""

    def weight(edge: Edge) -> float:
        return effective_weight(edge, traffic, bucket)

    return weight


@dataclass
class SearchState:
    """Tables left behind by a best-first search.

    Both lists are indexed by the graph's dense node positions.

    Attributes:
        distances: Best known cost from the source, ``inf`` if unreached
        predecessors: Previous position on the best path, or -1
        source: Dense position of the source
        expanded: Number of frontier entries acted upon
    """

    distances: List[float]
    predecessors: List[int]
    source: int
    expanded: int = 0

    def path_to(self, graph: Graph, target: int) -> List[int]:
        """Node ids from the source to ``target``, or ``[]`` if unreached."""
        if math.isinf(self.distances[target]):
            return []

        path: List[int] = []
        current = target
        while current != NO_PREDECESSOR:
            path.append(graph.node_at(current).id)
            current = self.predecessors[current]
        path.reverse()
        return path


def best_first_search(
    graph: Graph,
    source_id: int,
    target_id: Optional[int] = None,
    weight: WeightFn = raw_distance,
    heuristic: Optional[HeuristicFn] = None,
) -> SearchState:
    """Run the shared relaxation loop.

    Frontier entries are ``(priority, node_id, g, position)`` where
    ``priority = g + heuristic(position)``. Equal priorities resolve to
    the lower node id. A node may sit in the frontier several times; an
    entry is acted upon only if its ``g`` is still the best known cost
    for that node when it is popped.

    Parameters
    ----------
    graph:
        Network to search. Never mutated.
    source_id:
        Id of the start node.
    target_id:
        Optional id of the goal. The search stops as soon as the goal is
        popped; without a goal it runs until the frontier is empty.
    weight:
        Cost of traversing an adjacency entry.
    heuristic:
        Estimate of the remaining cost from a dense position, ``0`` when
        omitted (plain Dijkstra).

    Raises
    ------
    UnknownNodeError
        If the source or target id is not in the graph.
    """
    source = graph.index_of(source_id)
    target = graph.index_of(target_id) if target_id is not None else None

    distances = [math.inf] * graph.node_count
    predecessors = [NO_PREDECESSOR] * graph.node_count
    distances[source] = 0.0
    state = SearchState(distances, predecessors, source)

    def estimate(position: int) -> float:
        return heuristic(position) if heuristic is not None else 0.0

    frontier: List[Tuple[float, int, float, int]] = [
        (estimate(source), source_id, 0.0, source)
    ]

    while frontier:
        _, _, g, u = heapq.heappop(frontier)

        if g > distances[u]:
            continue

        state.expanded += 1

        if u == target:
            break

        for v, arc in graph.arcs_from(u):
            candidate = g + weight(arc)
            if candidate < distances[v]:
                distances[v] = candidate
                predecessors[v] = u
                heapq.heappush(
                    frontier,
                    (candidate + estimate(v), graph.node_at(v).id, candidate, v),
                )

    logger.debug(
        "Search finished",
        extra={"source": source_id, "target": target_id, "expanded": state.expanded},
    )
    return state


def all_distances(graph: Graph, source: int) -> Dict[int, float]:
    """Shortest raw distance from ``source`` to every node.

    Unreachable nodes map to ``float("inf")``.
    """
    state = best_first_search(graph, source)
    return {node.id: state.distances[i] for i, node in enumerate(graph.nodes)}


def shortest_route(graph: Graph, source: int, target: int) -> RouteResult:
    """Shortest path by raw distance, with its total."""
    state = best_first_search(graph, source, target)
    t = graph.index_of(target)
    return RouteResult(
        path=tuple(state.path_to(graph, t)),
        total_cost=state.distances[t],
        algorithm="dijkstra",
    )


def shortest_path(graph: Graph, source: int, target: int) -> List[int]:
    """Node ids of the shortest path by raw distance.

    Returns an empty list if ``target`` cannot be reached.
    """
    return list(shortest_route(graph, source, target).path)


def traffic_aware_route(
    graph: Graph,
    traffic: TrafficTable,
    source: int,
    target: int,
    bucket: TimeBucket,
) -> RouteResult:
    """Least-cost path under traffic, with the cost from the search table."""
    state = best_first_search(graph, source, target, traffic_weight(traffic, bucket))
    t = graph.index_of(target)
    return RouteResult(
        path=tuple(state.path_to(graph, t)),
        total_cost=state.distances[t],
        algorithm="traffic_dijkstra",
        time_bucket=bucket,
    )


def traffic_aware_path(
    graph: Graph,
    traffic: TrafficTable,
    source: int,
    target: int,
    bucket: TimeBucket,
) -> List[int]:
    """Node ids of the least-cost path under traffic during ``bucket``."""
    return list(traffic_aware_route(graph, traffic, source, target, bucket).path)


def path_cost(
    graph: Graph, path: Sequence[int], weight: WeightFn = raw_distance
) -> float:
    """Re-sum a path over the graph's edges.

    Between consecutive stops the cheapest connecting entry is used,
    which is the one any of the searches would have relaxed.

    Raises:
        UnknownNodeError: If a stop is unknown.
        ValueError: If two consecutive stops are not adjacent.
    """
    total = 0.0
    for a, b in zip(path, path[1:]):
        arcs = graph.edges_between(a, b)
        if not arcs:
            if b not in graph:
                raise UnknownNodeError(f"Node not in graph: {b}", node_id=b)
            raise ValueError(f"No road between {a} and {b}")
        total += min(weight(arc) for arc in arcs)
    return total
