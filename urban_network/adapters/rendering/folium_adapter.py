"""Folium network map renderer adapter.

Node coordinates are planar, so the map uses Leaflet's ``Simple`` CRS
with y as latitude and x as longitude instead of a geographic tile
layer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence, Set, Tuple

from ...config import RenderingConfig, get_config
from ...domain.errors import RenderingError
from ...domain.models import Edge
from ...graph.model import Graph


def _undirected(edge: Edge) -> Tuple[int, int]:
    return (min(edge.key), max(edge.key))


@dataclass
class FoliumNetworkRenderer:
    """Folium-based HTML network renderer.

    This adapter implements MapRendererPort. Existing roads are drawn
    solid, potential roads dashed, highlighted edges in red, and an
    optional route in blue on top.
    """

    config: RenderingConfig = field(default_factory=lambda: get_config().rendering)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def render(
        self,
        graph: Graph,
        output_path: Path,
        highlight_edges: Sequence[Edge] = (),
        path: Sequence[int] = (),
    ) -> Path:
        """Draw the network and save it as HTML.

        Args:
            graph: The road network to draw.
            output_path: Where to save the rendered map.
            highlight_edges: Edges to emphasise (e.g. the backbone).
            path: Node ids of a route to overlay.

        Returns:
            Path to the generated map file.

        Raises:
            RenderingError: If rendering fails.
        """
        if graph.node_count == 0:
            raise RenderingError(
                "Cannot render empty network",
                output_path=str(output_path),
                renderer_type="folium",
            )

        self._logger.info(
            "Rendering network map",
            extra={
                "nodes": graph.node_count,
                "highlighted": len(highlight_edges),
                "output_path": str(output_path),
            },
        )

        try:
            import folium

            center_y = sum(node.y for node in graph.nodes) / graph.node_count
            center_x = sum(node.x for node in graph.nodes) / graph.node_count
            m = folium.Map(
                location=[center_y, center_x],
                zoom_start=self.config.zoom_start,
                crs="Simple",
                tiles=None,
            )

            highlighted: Set[Tuple[int, int]] = {_undirected(e) for e in highlight_edges}
            for edge in graph.edges:
                a, b = graph.node(edge.from_node), graph.node(edge.to_node)
                is_highlighted = _undirected(edge) in highlighted
                folium.PolyLine(
                    [[a.y, a.x], [b.y, b.x]],
                    color="red" if is_highlighted else "gray",
                    weight=4 if is_highlighted else 2,
                    dash_array=None if edge.is_existing else "6",
                    tooltip=str(edge),
                ).add_to(m)

            if len(path) >= 2:
                folium.PolyLine(
                    [[graph.node(n).y, graph.node(n).x] for n in path],
                    color="blue",
                    weight=5,
                    opacity=0.8,
                ).add_to(m)

            for node in graph.nodes:
                folium.CircleMarker(
                    location=[node.y, node.x],
                    radius=6 if node.is_facility else 4,
                    color="darkred" if node.is_facility else "black",
                    fill=True,
                    popup=str(node),
                    tooltip=str(node.id),
                ).add_to(m)

            output_path.parent.mkdir(parents=True, exist_ok=True)
            m.save(str(output_path))

            self._logger.info(
                "Map rendered successfully",
                extra={"output_path": str(output_path)},
            )
            return output_path

        except ImportError as e:
            raise RenderingError(
                "Folium not installed",
                output_path=str(output_path),
                renderer_type="folium",
                cause=e,
            )
        except Exception as e:
            self._logger.error(
                "Map rendering failed",
                extra={"error": str(e), "output_path": str(output_path)},
            )
            raise RenderingError(
                f"Map rendering failed: {e}",
                output_path=str(output_path),
                renderer_type="folium",
                cause=e,
            )
