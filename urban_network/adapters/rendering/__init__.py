"""Rendering adapters - Implementations of MapRendererPort.

Available implementations:
- FoliumNetworkRenderer: Folium-based HTML network map
"""

from .folium_adapter import FoliumNetworkRenderer

__all__ = ["FoliumNetworkRenderer"]
