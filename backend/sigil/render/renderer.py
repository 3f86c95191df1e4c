"""Per-frame renderer for the live, animated canvas."""

from __future__ import annotations

import logging
import math

from PIL import Image

from sigil.engine.graph import SignatureGraph
from sigil.render.scene import (
    LIVE_FRAME,
    AnimationState,
    FrameStyle,
    draw_background,
    draw_frame,
    draw_grid,
    draw_stamp,
    edge_strokes,
    paint_graph,
    point_sprites,
)
from sigil.render.session import GridCache, RenderSession
from sigil.render.surface import PillowSurface
from sigil.render.theme import Palette, Theme

logger = logging.getLogger(__name__)


def physical_size(width: float, height: float, dpr: float) -> tuple[int, int]:
    return (max(1, math.floor(width * dpr)), max(1, math.floor(height * dpr)))


class Renderer:
    """Draws one frame of a RenderSession onto its own live surface."""

    def __init__(self, frame_style: FrameStyle | str = FrameStyle.NONE, font_path: str = "") -> None:
        self.frame_style = FrameStyle(frame_style)
        self.font_path = font_path
        self.surface: PillowSurface | None = None

    def _ensure_surface(self, width: float, height: float, dpr: float) -> PillowSurface:
        target = physical_size(width, height, dpr)
        if self.surface is None or self.surface.pixel_size != target:
            logger.debug("Allocating %dx%d surface (dpr %.2f)", target[0], target[1], dpr)
            self.surface = PillowSurface(width, height, dpr, self.font_path)
        return self.surface

    def _grid(self, session: RenderSession, palette: Palette,
              width: float, height: float, dpr: float) -> PillowSurface:
        """Cached grid; redrawn whenever the size or the displayed palette changes.

        During a theme crossfade the palette differs every frame, so the grid
        is redrawn each frame until the fade settles on the target palette.
        """
        target = physical_size(width, height, dpr)
        cache = session.grid_cache
        if cache is None or cache.pixel_size != target or cache.palette != palette:
            grid = PillowSurface(width, height, dpr, self.font_path)
            draw_background(grid)
            draw_grid(grid, palette, width, height)
            cache = GridCache(surface=grid, pixel_size=target, palette=palette)
            session.grid_cache = cache
            logger.debug("Grid redrawn at %dx%d", target[0], target[1])
        return cache.surface

    def frame_state(self, session: RenderSession, t: float) -> AnimationState:
        reveal_ease, reveal_pulse = session.reveal.update(t)
        return AnimationState(
            time=t,
            reveal_ease=reveal_ease,
            reveal_pulse=reveal_pulse,
            hovered=session.hovered,
        )

    def draw(self, session: RenderSession, t: float, width: float, height: float,
             dpr: float = 1.0) -> PillowSurface:
        surface = self._ensure_surface(width, height, dpr)
        palette = session.palette_at(t)

        surface.blit(self._grid(session, palette, width, height, dpr))
        draw_frame(surface, self.frame_style, palette.line, width, height, LIVE_FRAME)

        graph = session.graph
        if graph.is_empty:
            return surface

        state = self.frame_state(session, t)
        paint_graph(
            surface,
            edge_strokes(graph, palette.line, state),
            point_sprites(graph, palette.dot, palette.dot_glow, state),
            palette.label,
        )

        if session.stamp is not None:
            draw_stamp(surface, session.stamp, palette.dot, width, height)
        return surface


def render_animation_frames(
    graph: SignatureGraph,
    theme: Theme | str = Theme.MONO,
    frame_style: FrameStyle | str = FrameStyle.NONE,
    duration_ms: float = 2000.0,
    fps: float = 30.0,
    dpr: float = 1.0,
    font_path: str = "",
) -> list[Image.Image]:
    """Drive the live renderer with a synthetic clock from the graph's creation time.

    Covers the staggered build-up and, given enough duration, the reveal pulse.
    """
    session = RenderSession(theme=Theme(theme))
    session.install_graph(graph, graph.created_at)
    renderer = Renderer(frame_style, font_path)

    frames: list[Image.Image] = []
    step = 1000.0 / fps
    count = int(duration_ms // step) + 1
    for i in range(count):
        t = graph.created_at + i * step
        surface = renderer.draw(session, t, graph.width, graph.height, dpr)
        frames.append(surface.image.copy())
    return frames
