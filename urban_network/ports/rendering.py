"""Rendering port - Abstraction for network map generation.

This protocol defines the contract for drawing the road network,
allowing different implementations (Folium, Plotly, etc.) to be used.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import Edge
    from ..graph.model import Graph


class MapRendererPort(Protocol):
    """Port for network map rendering.

    Implementation: adapters/rendering/folium_adapter.py
    """

    def render(
        self,
        graph: Graph,
        output_path: Path,
        highlight_edges: Sequence[Edge] = (),
        path: Sequence[int] = (),
    ) -> Path:
        """Draw the network and save it to a file.

        Args:
            graph: The road network to draw.
            output_path: Where to save the rendered map.
            highlight_edges: Edges to emphasise (e.g. the backbone).
            path: Node ids of a route to overlay.

        Returns:
            Path to the generated map file.
        """
        ...
