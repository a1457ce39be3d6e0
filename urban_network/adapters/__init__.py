"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the planning core to external systems:
- Network storage (CSV files)
- Route solvers over the in-memory graph
- Rendering engines (Folium)
"""
