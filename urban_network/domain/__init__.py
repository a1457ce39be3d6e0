"""Domain layer - Core network models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    DuplicateIdError,
    GraphLoadError,
    RenderingError,
    UnknownNodeError,
    UnknownSetError,
    UrbanNetworkError,
)
from .models import (
    BackboneResult,
    Edge,
    Node,
    RoadRepair,
    Route,
    RouteResult,
    TimeBucket,
)

__all__ = [
    # Models
    "Node",
    "Edge",
    "TimeBucket",
    "RoadRepair",
    "Route",
    "RouteResult",
    "BackboneResult",
    # Errors
    "UrbanNetworkError",
    "UnknownNodeError",
    "UnknownSetError",
    "DuplicateIdError",
    "GraphLoadError",
    "RenderingError",
]
