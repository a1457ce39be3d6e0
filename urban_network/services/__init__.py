"""Services layer - Application orchestration.

Available services:
- NetworkPlannerService: Backbone, routing, fleet and repair planning
"""

from .network_planner import NetworkPlannerService

__all__ = ["NetworkPlannerService"]
