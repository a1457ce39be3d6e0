"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- CSVGraphRepository: Loads the network and traffic from CSV files
- DijkstraRouteSolver: Shortest paths by road length
- TrafficRouteSolver: Least-cost paths under traffic
- EmergencyRouteSolver: A* routing for emergency vehicles
"""

from .csv_repository import CSVGraphRepository
from .route_solvers import DijkstraRouteSolver, EmergencyRouteSolver, TrafficRouteSolver

__all__ = [
    "CSVGraphRepository",
    "DijkstraRouteSolver",
    "TrafficRouteSolver",
    "EmergencyRouteSolver",
]
