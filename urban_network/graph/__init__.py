"""Graph model and path-finding algorithms for the road network.

This subpackage contains the in-memory graph, the traffic table and
cost function, the shortest-path searches (Dijkstra, traffic-aware
Dijkstra, A*) and the minimum spanning forest builder.
"""

from .astar import emergency_path, emergency_route, euclidean_distance
from .dijkstra import (
    all_distances,
    best_first_search,
    path_cost,
    raw_distance,
    shortest_path,
    shortest_route,
    traffic_aware_path,
    traffic_aware_route,
    traffic_weight,
)
from .disjoint_set import DisjointSet
from .model import Graph, build_graph
from .mst import build_mst, connect_facilities
from .traffic import TrafficTable, effective_weight, traffic_factor

__all__ = [
    "Graph",
    "build_graph",
    "TrafficTable",
    "traffic_factor",
    "effective_weight",
    "DisjointSet",
    "best_first_search",
    "raw_distance",
    "traffic_weight",
    "all_distances",
    "shortest_path",
    "shortest_route",
    "traffic_aware_path",
    "traffic_aware_route",
    "emergency_path",
    "emergency_route",
    "euclidean_distance",
    "path_cost",
    "build_mst",
    "connect_facilities",
]
