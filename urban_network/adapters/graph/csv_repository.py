"""CSV Graph Repository adapter.

Loads the road network and traffic flows from CSV files:
- nodes.csv: id, name, category, x, y, population, is_facility
- existing_roads.csv: from, to, distance, capacity, condition
- potential_roads.csv: from, to, distance, capacity, cost
- traffic_data.csv: road_id, morning, afternoon, evening, night

Blank lines and lines starting with ``#`` are ignored. The potential
roads and traffic files are optional.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterator, List, Optional

from ...config import GraphConfig, get_config
from ...domain.errors import GraphLoadError
from ...domain.models import Edge, Node, TimeBucket
from ...graph.model import Graph, build_graph
from ...graph.traffic import TrafficTable

# Node ids from this value up are facilities when the file has no flag.
FACILITY_ID_START = 100

_TRUE_VALUES = {"1", "true", "yes", "y"}
_BUCKET_COLUMNS = [bucket.name.lower() for bucket in TimeBucket]


def _rows(path: Path) -> Iterator[Dict[str, str]]:
    with path.open(newline="", encoding="utf-8") as f:
        lines = (line for line in f if line.strip() and not line.lstrip().startswith("#"))
        for row in csv.DictReader(lines):
            yield {key.strip(): (value or "").strip() for key, value in row.items() if key}


@dataclass
class CSVGraphRepository:
    """Graph repository that loads from CSV files.

    This adapter implements GraphRepositoryPort. Loaded data is cached
    until ``clear_cache`` is called.

    Attributes:
        config: Graph configuration (paths, file names)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _graph: Optional[Graph] = field(default=None, repr=False)
    _traffic: Optional[TrafficTable] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> Graph:
        """Load the road network from CSV files.

        Returns:
            The graph with all nodes, existing roads and potential roads.

        Raises:
            GraphLoadError: If a file cannot be read or parsed.
            DuplicateIdError: If two nodes share an id.
            UnknownNodeError: If a road references a missing node.
        """
        if self._graph is not None:
            return self._graph

        self._logger.debug(
            "Loading graph",
            extra={
                "nodes_path": str(self.config.nodes_path),
                "existing_roads_path": str(self.config.existing_roads_path),
            },
        )

        nodes = self._load_nodes(self.config.nodes_path)
        edges = self._load_edges(self.config.existing_roads_path, existing=True)
        if self.config.potential_roads_path.exists():
            edges += self._load_edges(self.config.potential_roads_path, existing=False)
        else:
            self._logger.info(
                "No potential roads file",
                extra={"path": str(self.config.potential_roads_path)},
            )

        graph = build_graph(nodes, edges)
        self._graph = graph
        self._logger.info(
            "Graph loaded",
            extra={"nodes": graph.node_count, "edges": graph.edge_count},
        )
        return graph

    def load_traffic(self) -> TrafficTable:
        """Load traffic flows, or an empty table if the file is absent.

        Raises:
            GraphLoadError: If the file exists but cannot be parsed.
        """
        if self._traffic is not None:
            return self._traffic

        path = self.config.traffic_path
        if not path.exists():
            self._logger.warning(
                "No traffic data, fallback flows apply",
                extra={"path": str(path)},
            )
            self._traffic = TrafficTable()
            return self._traffic

        try:
            rows = [
                (row["road_id"], [int(row[column]) for column in _BUCKET_COLUMNS])
                for row in _rows(path)
            ]
            self._traffic = TrafficTable.from_rows(rows)
        except (OSError, KeyError, ValueError) as e:
            raise GraphLoadError(
                f"Failed to load traffic data: {e}",
                file_path=str(path),
                cause=e,
            )

        self._logger.info("Traffic loaded", extra={"roads": len(self._traffic)})
        return self._traffic

    def _load_nodes(self, path: Path) -> List[Node]:
        try:
            return [self._parse_node(row) for row in _rows(path)]
        except (OSError, KeyError, ValueError) as e:
            raise GraphLoadError(
                f"Failed to load nodes: {e}",
                file_path=str(path),
                cause=e,
            )

    @staticmethod
    def _parse_node(row: Dict[str, str]) -> Node:
        node_id = int(row["id"])
        flag = row.get("is_facility", "")
        is_facility = (
            flag.lower() in _TRUE_VALUES if flag else node_id >= FACILITY_ID_START
        )
        population = row.get("population", "")
        return Node(
            id=node_id,
            name=row.get("name") or str(node_id),
            category=row.get("category", ""),
            x=float(row["x"]),
            y=float(row["y"]),
            population=int(population) if population else 0,
            is_facility=is_facility,
        )

    def _load_edges(self, path: Path, existing: bool) -> List[Edge]:
        edges: List[Edge] = []
        try:
            for row in _rows(path):
                from_node, to_node = int(row["from"]), int(row["to"])
                distance, capacity = float(row["distance"]), int(row["capacity"])
                if existing:
                    edges.append(
                        Edge.existing(
                            from_node, to_node, distance, capacity, int(row["condition"])
                        )
                    )
                else:
                    edges.append(
                        Edge.potential(
                            from_node, to_node, distance, capacity, float(row["cost"])
                        )
                    )
        except (OSError, KeyError, ValueError) as e:
            raise GraphLoadError(
                f"Failed to load roads: {e}",
                file_path=str(path),
                cause=e,
            )
        return edges

    def clear_cache(self) -> None:
        """Clear cached graph and traffic data."""
        self._graph = None
        self._traffic = None
        self._logger.debug("Graph cache cleared")
