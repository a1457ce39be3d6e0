"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the planning core and external
adapters. They enable dependency injection and make the system testable.
"""

from .graph import GraphRepositoryPort, RouteSolverPort
from .rendering import MapRendererPort

__all__ = [
    # Graph
    "GraphRepositoryPort",
    "RouteSolverPort",
    # Rendering
    "MapRendererPort",
]
