"""Minimum-cost backbone network (Kruskal) and facility attachment."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Set, Tuple

from ..domain.models import Edge
from .disjoint_set import DisjointSet
from .model import Graph

logger = logging.getLogger(__name__)


def _kruskal_order(edge: Edge) -> Tuple[float, int, int]:
    return (edge.distance, edge.from_node, edge.to_node)


def build_mst(graph: Graph) -> List[Edge]:
    """Minimum spanning forest of ``graph`` by raw distance.

    Edges are considered by ascending distance, ties broken by endpoint
    ids. On a connected graph the result is a spanning tree with
    ``node_count - 1`` edges; otherwise it holds one tree per connected
    component.
    """
    result: List[Edge] = []
    sets: DisjointSet[int] = DisjointSet()
    for node_id in graph.node_ids:
        sets.make_set(node_id)

    target_size = graph.node_count - 1
    if target_size <= 0:
        return result

    for edge in sorted(graph.edges, key=_kruskal_order):
        if sets.union(edge.from_node, edge.to_node):
            result.append(edge)
            if len(result) == target_size:
                break

    if len(result) < target_size:
        logger.debug(
            "Graph is disconnected, returning spanning forest",
            extra={"edges": len(result), "trees": graph.node_count - len(result)},
        )
    return result


def connect_facilities(
    graph: Graph, network_edges: Iterable[Edge]
) -> Tuple[List[Edge], List[int]]:
    """Attach facilities that ``network_edges`` leave unlinked.

    Facilities are processed in node order. Each one not touched by the
    network gets the shortest graph edge joining it to an already
    connected node, and becomes connected itself.

    Returns:
        The added edges and the ids of facilities no edge could attach.
    """
    connected: Set[int] = set()
    for edge in network_edges:
        connected.update(edge.key)

    added: List[Edge] = []
    unconnected: List[int] = []

    for node in graph.nodes:
        if not node.is_facility or node.id in connected:
            continue

        best: Optional[Edge] = None
        for edge in graph.edges:
            if node.id not in edge.key or edge.from_node == edge.to_node:
                continue
            if edge.other(node.id) not in connected:
                continue
            if best is None or _kruskal_order(edge) < _kruskal_order(best):
                best = edge

        if best is None:
            logger.warning(
                "Could not connect facility",
                extra={"facility": node.id, "facility_name": node.name},
            )
            unconnected.append(node.id)
            continue

        added.append(best)
        connected.add(node.id)
        logger.info(
            "Connected facility",
            extra={"facility": node.id, "via": best.key, "distance_km": best.distance},
        )

    return added, unconnected
