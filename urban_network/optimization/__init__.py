"""Resource-allocation optimizers built on a shared 0/1 knapsack engine.

Available optimizers:
- allocate_fleet: assign a fixed vehicle pool to transit routes
- select_repairs: choose road repairs within a maintenance budget
"""

from .fleet import allocate_fleet
from .knapsack import Item, KnapsackItem, optimize_knapsack, scale_cost
from .maintenance import estimate_repair, repair_candidates, select_repairs

__all__ = [
    "optimize_knapsack",
    "scale_cost",
    "Item",
    "KnapsackItem",
    "allocate_fleet",
    "estimate_repair",
    "repair_candidates",
    "select_repairs",
]
