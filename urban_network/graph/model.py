"""In-memory graph of the transportation network.

Nodes live in a contiguous list indexed by a dense integer position;
a single dict maps public node ids to those positions. Every inserted
road produces two oriented entries ("arcs") in an arc list, and each
node's adjacency is a list of arc positions.

The graph is filled once by a loader and treated as read-only
afterwards, so it can be shared between concurrent path queries.
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Tuple

from ..domain.errors import DuplicateIdError, UnknownNodeError
from ..domain.models import Edge, Node


class Graph:
    """Undirected road network with oriented adjacency entries."""

    def __init__(self) -> None:
        self._nodes: List[Node] = []
        self._index: Dict[int, int] = {}
        self._edges: List[Edge] = []
        self._arcs: List[Edge] = []
        self._adjacency: List[List[int]] = []

    def add_node(self, node: Node) -> None:
        """Insert a node with an empty adjacency list.

        Raises:
            DuplicateIdError: If a node with the same id already exists.
        """
        if node.id in self._index:
            raise DuplicateIdError(
                f"Node id already present: {node.id}", node_id=node.id
            )
        self._index[node.id] = len(self._nodes)
        self._nodes.append(node)
        self._adjacency.append([])

    def add_edge(self, edge: Edge) -> None:
        """Insert a road and one adjacency entry for each endpoint.

        The entry stored under ``edge.from_node`` is the edge itself;
        the one under ``edge.to_node`` is its reversed copy.

        Raises:
            UnknownNodeError: If either endpoint is not in the graph.
        """
        for endpoint in (edge.from_node, edge.to_node):
            if endpoint not in self._index:
                raise UnknownNodeError(
                    f"Edge {edge.key} references unknown node {endpoint}",
                    node_id=endpoint,
                )

        self._edges.append(edge)
        for arc in (edge, edge.reversed()):
            self._adjacency[self._index[arc.from_node]].append(len(self._arcs))
            self._arcs.append(arc)

    def index_of(self, node_id: int) -> int:
        """Dense position of ``node_id``.

        Raises:
            UnknownNodeError: If the node is not in the graph.
        """
        try:
            return self._index[node_id]
        except KeyError:
            raise UnknownNodeError(
                f"Node not in graph: {node_id}", node_id=node_id
            ) from None

    def node(self, node_id: int) -> Node:
        """Return the node with ``node_id``."""
        return self._nodes[self.index_of(node_id)]

    def node_at(self, index: int) -> Node:
        """Return the node stored at dense position ``index``."""
        return self._nodes[index]

    def neighbors(self, node_id: int) -> List[Edge]:
        """Adjacency entries oriented away from ``node_id``."""
        return [self._arcs[a] for a in self._adjacency[self.index_of(node_id)]]

    def arcs_from(self, index: int) -> Iterator[Tuple[int, Edge]]:
        """Yield ``(neighbor_index, arc)`` pairs for a dense position."""
        for a in self._adjacency[index]:
            arc = self._arcs[a]
            yield self._index[arc.to_node], arc

    def edges_between(self, a: int, b: int) -> List[Edge]:
        """All adjacency entries leading from ``a`` to ``b``."""
        return [arc for arc in self.neighbors(a) if arc.to_node == b]

    @property
    def nodes(self) -> Tuple[Node, ...]:
        """All nodes in insertion order."""
        return tuple(self._nodes)

    @property
    def node_ids(self) -> Tuple[int, ...]:
        return tuple(node.id for node in self._nodes)

    @property
    def edges(self) -> Tuple[Edge, ...]:
        """All roads as inserted (one entry per road)."""
        return tuple(self._edges)

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._index

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count}, edges={self.edge_count})"


def build_graph(nodes: Iterable[Node], edges: Iterable[Edge]) -> Graph:
    """Build a graph from node and edge collections.

    Nodes are inserted first so that edges can reference any of them.
    """
    graph = Graph()
    for node in nodes:
        graph.add_node(node)
    for edge in edges:
        graph.add_edge(edge)
    return graph
