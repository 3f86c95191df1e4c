"""Scene primitives shared by the live renderer and the exporters.

Graph drawing is split in two: ``edge_strokes``/``point_sprites`` compute
what to draw for a given animation state (pure, testable), and
``paint_graph`` puts it on any Surface. Exports call the same functions
with the settled state.
"""

from __future__ import annotations

import datetime
import enum
import math
from dataclasses import dataclass

from sigil.engine.graph import SignatureGraph
from sigil.render.surface import Surface
from sigil.render.theme import RGB, Palette, Rgba, rgba
from sigil.utils.math_helpers import ease_out_cubic, progress_since

BLACK = Rgba(0, 0, 0, 1.0)

# Grid
GRID_SPACING = 20.0
GRID_LINE_WIDTH = 0.5
GRID_ACCENT_WIDTH = 1.0
GRID_LABEL_SIZE = 12.0
GRID_LABEL_INSET = 8.0

# Animation timing (ms)
EDGE_GROW_MS = 200.0
POINT_APPEAR_MS = 150.0

# Dots
VOWEL_RADIUS = 2.5
CONSONANT_RADIUS = 2.0
GLOW_EXTRA = 3.0
GLOW_ALPHA = 0.3
GLOW_MIN_BRIGHTNESS = 0.3
MIN_RADIUS = 0.1

# Hover emphasis
HOVER_RADIUS_SCALE = 1.5
HOVER_GLOW_EXTRA = 4.0
HOVER_BRIGHTNESS = 0.4
HIGHLIGHT_ALPHA = 0.5
HIGHLIGHT_WIDTH = 0.5
LABEL_SIZE = 11.0
LABEL_GAP = 8.0

# Reveal emphasis
REVEAL_EDGE_ALPHA = 0.4
REVEAL_EDGE_WIDTH = 0.5
REVEAL_RADIUS = 0.3
REVEAL_GLOW_EXTRA = 2.0
REVEAL_PULSE = 0.5

# Stamp
STAMP_SIZE = 8.0
STAMP_ALPHA = 0.6
STAMP_RIGHT = 24.0
STAMP_BOTTOM = 44.0
STAMP_LINE_GAP = 10.0


class FrameStyle(str, enum.Enum):
    NONE = "none"
    THIN = "thin"
    DOUBLE = "double"
    CORNERS = "corners"


@dataclass(frozen=True)
class FrameGeometry:
    padding: float
    corner_length: float
    inset: float = 4.0
    outer_alpha: float = 0.5
    inner_alpha: float = 0.3


# The live overlay hugs the canvas edge; the vector export leaves a margin.
LIVE_FRAME = FrameGeometry(padding=4.0, corner_length=20.0)
EXPORT_FRAME = FrameGeometry(padding=20.0, corner_length=30.0)


@dataclass(frozen=True)
class Stamp:
    date: str
    name: str

    @classmethod
    def capture(cls, name: str, today: datetime.date | None = None) -> Stamp:
        """Date as "OCT 19, 2026", name upper-cased."""
        today = today or datetime.date.today()
        label = f"{today.strftime('%b').upper()} {today.day}, {today.year}"
        return cls(date=label, name=name.upper())


@dataclass(frozen=True)
class AnimationState:
    """Per-frame inputs to graph composition. ``time=None`` means fully settled."""

    time: float | None = None
    reveal_ease: float = 0.0
    reveal_pulse: float = 0.0
    hovered: int | None = None

    @property
    def settled(self) -> bool:
        return self.time is None


SETTLED = AnimationState()


@dataclass(frozen=True)
class EdgeStroke:
    x1: float
    y1: float
    x2: float
    y2: float
    color: Rgba
    width: float


@dataclass(frozen=True)
class PointSprite:
    x: float
    y: float
    radius: float
    color: Rgba
    glow_radius: float = 0.0
    glow: Rgba | None = None
    label: str | None = None


def base_radius(is_vowel: bool) -> float:
    return VOWEL_RADIUS if is_vowel else CONSONANT_RADIUS


def edge_strokes(graph: SignatureGraph, line: RGB,
                 state: AnimationState = SETTLED) -> list[EdgeStroke]:
    strokes: list[EdgeStroke] = []
    for edge in graph.edges:
        ends = graph.endpoints(edge)
        if ends is None:
            continue
        start, end = ends

        if state.settled:
            grow = 1.0
        else:
            age = state.time - edge.birth_time
            if age < 0:
                continue
            grow = ease_out_cubic(progress_since(state.time, edge.birth_time, EDGE_GROW_MS))

        highlighted = state.hovered is not None and state.hovered in (edge.source, edge.target)
        alpha = min(edge.opacity * grow + state.reveal_ease * REVEAL_EDGE_ALPHA, 1.0)
        if highlighted:
            alpha = min(alpha + HIGHLIGHT_ALPHA, 1.0)
        width = 1.0 + state.reveal_ease * REVEAL_EDGE_WIDTH + (HIGHLIGHT_WIDTH if highlighted else 0.0)

        strokes.append(EdgeStroke(
            start.x,
            start.y,
            start.x + (end.x - start.x) * grow,
            start.y + (end.y - start.y) * grow,
            rgba(line, alpha),
            width,
        ))
    return strokes


def point_sprites(graph: SignatureGraph, dot: RGB, glow: RGB | None,
                  state: AnimationState = SETTLED) -> list[PointSprite]:
    """Dots (and optional glow halos). ``glow=None`` draws bare cores."""
    sprites: list[PointSprite] = []
    for p in graph.points:
        hovered = state.hovered == p.index
        if state.settled:
            appear, twinkle = 1.0, 1.0
        else:
            if state.time < p.birth_time:
                continue
            appear = ease_out_cubic(progress_since(state.time, p.birth_time, POINT_APPEAR_MS))
            twinkle = 0.6 + math.sin(state.time * p.twinkle_speed + p.twinkle_phase) * 0.4

        brightness = min(
            appear * twinkle + state.reveal_pulse + (HOVER_BRIGHTNESS if hovered else 0.0), 1.0
        )
        radius = (
            base_radius(p.is_vowel)
            * appear
            * (1 + state.reveal_ease * REVEAL_RADIUS)
            * (HOVER_RADIUS_SCALE if hovered else 1.0)
        )

        halo = None
        halo_radius = 0.0
        if glow is not None and brightness > GLOW_MIN_BRIGHTNESS:
            halo = rgba(glow, GLOW_ALPHA * brightness)
            halo_radius = max(
                MIN_RADIUS,
                radius + GLOW_EXTRA + state.reveal_ease * REVEAL_GLOW_EXTRA
                + (HOVER_GLOW_EXTRA if hovered else 0.0),
            )

        sprites.append(PointSprite(
            x=p.x,
            y=p.y,
            radius=max(MIN_RADIUS, radius),
            color=rgba(dot, brightness),
            glow_radius=halo_radius,
            glow=halo,
            label=p.letter if hovered else None,
        ))
    return sprites


def paint_graph(surface: Surface, strokes: list[EdgeStroke], sprites: list[PointSprite],
                label_color: Rgba | None = None) -> None:
    for s in strokes:
        surface.stroke_line(s.x1, s.y1, s.x2, s.y2, s.color, s.width)
    for sp in sprites:
        if sp.glow is not None:
            surface.fill_circle(sp.x, sp.y, sp.glow_radius, sp.glow)
        surface.fill_circle(sp.x, sp.y, sp.radius, sp.color)
        if sp.label and label_color is not None:
            surface.text(sp.x, sp.y - sp.radius - LABEL_GAP, sp.label, label_color,
                         LABEL_SIZE, anchor="center", bold=True)


def draw_background(surface: Surface) -> None:
    surface.fill_rect(0, 0, surface.width, surface.height, BLACK)


def draw_grid(surface: Surface, palette: Palette, width: float, height: float) -> None:
    """20px grid through the centre, accent crosshair, corner coordinate labels."""
    cx, cy = width / 2, height / 2

    x = cx % GRID_SPACING
    while x < width:
        surface.stroke_line(x, 0, x, height, palette.grid, GRID_LINE_WIDTH)
        x += GRID_SPACING
    y = cy % GRID_SPACING
    while y < height:
        surface.stroke_line(0, y, width, y, palette.grid, GRID_LINE_WIDTH)
        y += GRID_SPACING

    surface.stroke_line(cx, 0, cx, height, palette.grid_accent, GRID_ACCENT_WIDTH)
    surface.stroke_line(0, cy, width, cy, palette.grid_accent, GRID_ACCENT_WIDTH)

    w, h = round(width), round(height)
    pad = GRID_LABEL_INSET
    top = pad + GRID_LABEL_SIZE
    surface.text(pad, top, "0,0", palette.coords, GRID_LABEL_SIZE)
    surface.text(width - pad, top, f"{w},0", palette.coords, GRID_LABEL_SIZE, anchor="right")
    surface.text(pad, height - pad, f"0,{h}", palette.coords, GRID_LABEL_SIZE)
    surface.text(width - pad, height - pad, f"{w},{h}", palette.coords, GRID_LABEL_SIZE,
                 anchor="right")


def frame_paths(style: FrameStyle, width: float, height: float,
                geometry: FrameGeometry) -> list[tuple[list[tuple[float, float]], bool, float]]:
    """(points, closed, alpha) per stroke of the frame decoration."""
    style = FrameStyle(style)
    p, c, inset = geometry.padding, geometry.corner_length, geometry.inset
    x0, y0, x1, y1 = p, p, width - p, height - p

    def rect(a: float, b: float, cc: float, d: float) -> list[tuple[float, float]]:
        return [(a, b), (cc, b), (cc, d), (a, d)]

    if style is FrameStyle.THIN:
        return [(rect(x0, y0, x1, y1), True, geometry.outer_alpha)]
    if style is FrameStyle.DOUBLE:
        return [
            (rect(x0, y0, x1, y1), True, geometry.outer_alpha),
            (rect(x0 + inset, y0 + inset, x1 - inset, y1 - inset), True, geometry.inner_alpha),
        ]
    if style is FrameStyle.CORNERS:
        a = geometry.outer_alpha
        return [
            ([(x0, y0 + c), (x0, y0), (x0 + c, y0)], False, a),
            ([(x1 - c, y0), (x1, y0), (x1, y0 + c)], False, a),
            ([(x1, y1 - c), (x1, y1), (x1 - c, y1)], False, a),
            ([(x0 + c, y1), (x0, y1), (x0, y1 - c)], False, a),
        ]
    return []


def draw_frame(surface: Surface, style: FrameStyle, color: RGB, width: float, height: float,
               geometry: FrameGeometry = LIVE_FRAME) -> None:
    for points, closed, alpha in frame_paths(style, width, height, geometry):
        surface.stroke_polyline(points, rgba(color, alpha), 1.0, closed=closed)


def draw_stamp(surface: Surface, stamp: Stamp, dot: RGB, width: float, height: float) -> None:
    x = width - STAMP_RIGHT
    y = height - STAMP_BOTTOM
    color = rgba(dot, STAMP_ALPHA)
    surface.text(x, y, stamp.date, color, STAMP_SIZE, anchor="right")
    surface.text(x, y + STAMP_LINE_GAP, stamp.name, color, STAMP_SIZE, anchor="right")
