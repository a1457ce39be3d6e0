"""Immutable domain models for the urban network planner.

All models are frozen dataclasses with slots. They have no external
dependencies and represent the core concepts of the network: places,
roads, time of day, and the items fed into the optimizers.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class TimeBucket(Enum):
    """Period of the day used to index traffic flows.

    The value is the column index in the traffic table, so the member
    order must stay MORNING, AFTERNOON, EVENING, NIGHT.
    """

    MORNING = 0
    AFTERNOON = 1
    EVENING = 2
    NIGHT = 3


@dataclass(frozen=True, slots=True)
class Node:
    """A district or facility in the transportation network.

    Attributes:
        id: Unique integer identifier
        name: Display name
        category: Category label (Residential, Mixed, Medical, ...)
        x: Planar x coordinate
        y: Planar y coordinate
        population: Resident count, 0 for non-residential nodes
        is_facility: True for service points such as hospitals or stations
    """

    id: int
    name: str
    category: str
    x: float
    y: float
    population: int = 0
    is_facility: bool = False

    def __post_init__(self) -> None:
        if self.population < 0:
            raise ValueError(
                f"Population must be non-negative, got {self.population}"
            )

    def __str__(self) -> str:
        return f"{self.name} ({self.category})"


@dataclass(frozen=True, slots=True)
class Edge:
    """A road between two nodes.

    Existing roads carry a condition score (1-10) and no construction
    cost; potential roads carry a construction cost and no condition.
    The from/to order is nominal: routing treats every edge as
    bidirectional.

    Attributes:
        from_node: Id of the first endpoint
        to_node: Id of the second endpoint
        distance: Road length in kilometers, strictly positive
        capacity: Throughput in vehicles per hour
        is_existing: True if the road is already built
        condition: Condition score for existing roads
        construction_cost: Build cost for potential roads
    """

    from_node: int
    to_node: int
    distance: float
    capacity: int
    is_existing: bool
    condition: Optional[int] = None
    construction_cost: Optional[float] = None

    def __post_init__(self) -> None:
        if not self.distance > 0:
            raise ValueError(f"Distance must be positive, got {self.distance}")
        if self.capacity < 0:
            raise ValueError(f"Capacity must be non-negative, got {self.capacity}")
        if self.is_existing:
            if self.condition is None or not 1 <= self.condition <= 10:
                raise ValueError(
                    f"Existing road needs a condition between 1 and 10, got {self.condition}"
                )
            if self.construction_cost is not None:
                raise ValueError("Existing road cannot carry a construction cost")
        else:
            if self.construction_cost is None or self.construction_cost < 0:
                raise ValueError(
                    "Potential road needs a non-negative construction cost, "
                    f"got {self.construction_cost}"
                )
            if self.condition is not None:
                raise ValueError("Potential road cannot carry a condition score")

    @classmethod
    def existing(
        cls, from_node: int, to_node: int, distance: float, capacity: int, condition: int
    ) -> Edge:
        """Create an already-built road."""
        return cls(from_node, to_node, distance, capacity, True, condition=condition)

    @classmethod
    def potential(
        cls,
        from_node: int,
        to_node: int,
        distance: float,
        capacity: int,
        construction_cost: float,
    ) -> Edge:
        """Create a candidate road that could be constructed."""
        return cls(
            from_node,
            to_node,
            distance,
            capacity,
            False,
            construction_cost=construction_cost,
        )

    @property
    def key(self) -> Tuple[int, int]:
        """Ordered endpoint pair as stored."""
        return (self.from_node, self.to_node)

    def reversed(self) -> Edge:
        """Return the same road seen from the other endpoint."""
        return dataclasses.replace(
            self, from_node=self.to_node, to_node=self.from_node
        )

    def other(self, node_id: int) -> int:
        """Return the endpoint opposite to ``node_id``."""
        return self.to_node if self.from_node == node_id else self.from_node

    def __str__(self) -> str:
        return f"{self.from_node} -> {self.to_node} ({self.distance} km)"


@dataclass(frozen=True, slots=True)
class RoadRepair:
    """A repair project on an existing road.

    Attributes:
        edge: The road to repair
        cost: Estimated repair cost (millions)
        benefit: Estimated benefit score
    """

    edge: Edge
    cost: float
    benefit: float

    def __post_init__(self) -> None:
        if self.cost < 0:
            raise ValueError(f"Repair cost must be non-negative, got {self.cost}")


@dataclass(frozen=True, slots=True)
class Route:
    """A transit route competing for vehicles.

    Attributes:
        id: Route identifier (e.g. 'B1')
        stops: Ordered node ids served by the route
        vehicles_required: Vehicles needed to operate the route
        ridership: Estimated daily passengers
    """

    id: str
    stops: Tuple[int, ...]
    vehicles_required: int
    ridership: float

    def __post_init__(self) -> None:
        if self.vehicles_required < 0:
            raise ValueError(
                f"Vehicle count must be non-negative, got {self.vehicles_required}"
            )


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Result of a path query.

    Attributes:
        path: Ordered node ids from source to target, empty if unreachable
        total_cost: Cost recorded by the search for the target
        algorithm: Name of the algorithm that produced the path
        time_bucket: Time of day used for traffic-aware searches
    """

    path: Tuple[int, ...]
    total_cost: float
    algorithm: str = "dijkstra"
    time_bucket: Optional[TimeBucket] = None

    @property
    def is_empty(self) -> bool:
        """Check if no route was found."""
        return len(self.path) == 0

    @property
    def num_stops(self) -> int:
        """Return the number of nodes on the route."""
        return len(self.path)


@dataclass(frozen=True, slots=True)
class BackboneResult:
    """Minimum-cost backbone network.

    Attributes:
        forest: Kruskal spanning forest edges
        facility_links: Extra edges attaching otherwise unlinked facilities
        unconnected_facilities: Facility ids no edge could attach
    """

    forest: Tuple[Edge, ...]
    facility_links: Tuple[Edge, ...] = field(default_factory=tuple)
    unconnected_facilities: Tuple[int, ...] = field(default_factory=tuple)

    @property
    def edges(self) -> Tuple[Edge, ...]:
        """All backbone edges."""
        return self.forest + self.facility_links

    @property
    def total_distance(self) -> float:
        """Total length of the backbone in kilometers."""
        return sum(edge.distance for edge in self.edges)
