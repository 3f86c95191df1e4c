"""Vector (SVG) export of the settled constellation."""

from __future__ import annotations

import logging

from sigil.engine.graph import SignatureGraph
from sigil.render.scene import (
    EXPORT_FRAME,
    FrameStyle,
    draw_frame,
    edge_strokes,
    paint_graph,
    point_sprites,
)
from sigil.render.surface import SvgSurface
from sigil.render.theme import Palette, hex_to_rgb
from sigil.utils.geometry import as_array, bbox

logger = logging.getLogger(__name__)

# Margin around the tight bounding box when no frame is drawn.
TIGHT_PADDING = 30.0


def export_svg(
    graph: SignatureGraph,
    palette: Palette,
    frame_style: FrameStyle | str = FrameStyle.NONE,
    width: float | None = None,
    height: float | None = None,
) -> str:
    """Edges and dots only, no grid or glow.

    Without a frame the document hugs the points plus TIGHT_PADDING on every
    side; with a frame it spans the whole canvas.
    """
    frame_style = FrameStyle(frame_style)
    width = graph.width if width is None else width
    height = graph.height if height is None else height
    line = hex_to_rgb(palette.svg_line)
    dot = hex_to_rgb(palette.svg_dot)

    if frame_style is FrameStyle.NONE and not graph.is_empty:
        xmin, ymin, xmax, ymax = bbox(as_array([p.position for p in graph.points]))
        surface = SvgSurface(
            xmax - xmin + TIGHT_PADDING * 2,
            ymax - ymin + TIGHT_PADDING * 2,
            origin=(xmin - TIGHT_PADDING, ymin - TIGHT_PADDING),
        )
    else:
        surface = SvgSurface(width, height)
        draw_frame(surface, frame_style, line, width, height, EXPORT_FRAME)

    paint_graph(surface, edge_strokes(graph, line), point_sprites(graph, dot, glow=None))
    svg = surface.to_svg()
    logger.info("SVG export: %d points, %d edges, %d bytes", len(graph.points), len(graph.edges), len(svg))
    return svg
