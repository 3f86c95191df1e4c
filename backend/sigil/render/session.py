"""RenderSession — all mutable per-view animation state, passed into each frame.

Each hosted view owns one session; nothing here is module-level.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Callable

from sigil.engine.graph import SignatureGraph
from sigil.render.scene import Stamp
from sigil.render.surface import PillowSurface
from sigil.render.theme import Palette, Theme, get_palette, interpolate_palette
from sigil.utils.math_helpers import ease_out_cubic, ease_out_quad, progress_since

logger = logging.getLogger(__name__)

THEME_TRANSITION_MS = 400.0
IDLE_BEFORE_REVEAL_MS = 800.0
REVEAL_MS = 600.0
HIT_RADIUS = 15.0


@dataclass
class GridCache:
    surface: PillowSurface
    pixel_size: tuple[int, int]
    palette: Palette


@dataclass
class RevealState:
    """One-shot "settle and shine" pulse, re-armed by every regeneration."""

    last_regenerated: float = 0.0
    triggered: bool = False
    started: float = 0.0

    def rearm(self, now: float) -> None:
        self.last_regenerated = now
        self.triggered = False

    def update(self, now: float) -> tuple[float, float]:
        """Advance to ``now``; returns (reveal_ease, reveal_pulse)."""
        if not self.triggered and now - self.last_regenerated > IDLE_BEFORE_REVEAL_MS:
            self.triggered = True
            self.started = now
        if not self.triggered:
            return 0.0, 0.0
        progress = progress_since(now, self.started, REVEAL_MS)
        return ease_out_cubic(progress), math.sin(progress * math.pi) * 0.5


@dataclass
class RenderSession:
    theme: Theme = Theme.MONO
    graph: SignatureGraph = field(default_factory=SignatureGraph)
    hovered: int | None = None
    stamp: Stamp | None = None
    grid_cache: GridCache | None = None
    reveal: RevealState = field(default_factory=RevealState)
    # Theme crossfade: palette at the moment of the switch, and when it began
    transition_from: Palette | None = None
    transition_started: float = -math.inf
    haptics: Callable[[], None] | None = None

    def install_graph(self, graph: SignatureGraph, now: float) -> None:
        """Swap in a freshly generated graph as one unit and re-arm the reveal."""
        self.graph = graph
        self.hovered = None
        self.reveal.rearm(now)

    def set_theme(self, theme: Theme | str, now: float) -> None:
        theme = Theme(theme)
        if theme == self.theme:
            return
        # Start from whatever is on screen so a mid-fade switch never jumps
        self.transition_from = self.palette_at(now)
        self.transition_started = now
        self.theme = theme
        self.grid_cache = None
        logger.debug("Theme -> %s", theme.value)

    def transition_ease(self, now: float) -> float:
        return ease_out_quad(progress_since(now, self.transition_started, THEME_TRANSITION_MS))

    def palette_at(self, now: float) -> Palette:
        target = get_palette(self.theme)
        if self.transition_from is None:
            return target
        ease = self.transition_ease(now)
        if ease >= 1:
            self.transition_from = None
            return target
        return interpolate_palette(self.transition_from, target, ease)

    def is_transitioning(self, now: float) -> bool:
        return self.transition_from is not None and self.transition_ease(now) < 1

    def hit_test(self, x: float, y: float) -> int | None:
        """Index of the nearest point within HIT_RADIUS of (x, y)."""
        best: int | None = None
        best_d2 = HIT_RADIUS * HIT_RADIUS
        for p in self.graph.points:
            d2 = (p.x - x) ** 2 + (p.y - y) ** 2
            if d2 < best_d2:
                best, best_d2 = p.index, d2
        return best

    def pointer_move(self, x: float, y: float) -> int | None:
        self.hovered = self.hit_test(x, y)
        return self.hovered

    def pointer_leave(self) -> None:
        self.hovered = None

    def touch(self, x: float, y: float) -> int | None:
        """Touch hover; fires haptics when a new point comes under the finger."""
        hit = self.hit_test(x, y)
        if hit is not None and hit != self.hovered and self.haptics is not None:
            self.haptics()
        self.hovered = hit
        return hit

    def add_stamp(self, name: str) -> Stamp:
        self.stamp = Stamp.capture(name)
        return self.stamp

    def clear_stamp(self) -> None:
        self.stamp = None
