"""Graph assembly — attach animation metadata to a generator's skeleton."""

from __future__ import annotations

import logging
import math
import random
from typing import Callable

from sigil.engine.config import DEFAULT_CONFIG, GeneratorConfig
from sigil.engine.context import PatternContext
from sigil.engine.graph import Edge, PatternResult, Point, SignatureGraph

logger = logging.getLogger(__name__)

EASTER_EGG = "VERCEL"

# (phase, speed) for one point
TwinkleSource = Callable[[GeneratorConfig], tuple[float, float]]


def platform_twinkle(config: GeneratorConfig) -> tuple[float, float]:
    """Cosmetic flicker parameters.

    The only place the platform RNG is used. Twinkle never affects geometry;
    pass a fixed source to ``SignatureGenerator`` for reproducible output.
    """
    phase = random.random() * math.pi * 2
    speed = random.uniform(config.twinkle_speed_min, config.twinkle_speed_max)
    return phase, speed


def edge_opacity(position: int, total: int, config: GeneratorConfig = DEFAULT_CONFIG) -> float:
    """Earlier edges render brighter; later cross-connections fade toward the floor."""
    if total <= 0:
        return config.edge_opacity_start
    ramp = config.edge_opacity_start - (position / total) * config.edge_opacity_drop
    return max(config.edge_opacity_floor, ramp)


def assemble_graph(
    raw: PatternResult,
    ctx: PatternContext,
    now: float,
    pattern: str,
    config: GeneratorConfig = DEFAULT_CONFIG,
    twinkle: TwinkleSource = platform_twinkle,
) -> SignatureGraph:
    points: list[Point] = []
    for i, rp in enumerate(raw.points):
        phase, speed = twinkle(config)
        points.append(Point(
            index=i,
            letter=rp.letter,
            x=rp.x,
            y=rp.y,
            is_vowel=rp.is_vowel,
            birth_time=now + i * config.birth_step_ms,
            twinkle_phase=phase,
            twinkle_speed=speed,
            normalized_x=rp.x / ctx.width if ctx.width else 0.0,
            normalized_y=rp.y / ctx.height if ctx.height else 0.0,
        ))

    n = len(points)
    valid = [(a, b) for a, b in raw.edges if a != b and 0 <= a < n and 0 <= b < n]
    if len(valid) != len(raw.edges):
        logger.debug("Dropped %d malformed edges from %s", len(raw.edges) - len(valid), pattern)

    edges: list[Edge] = []
    seen: set[tuple[int, int]] = set()
    for a, b in valid:
        key = (min(a, b), max(a, b))
        if key in seen:
            continue
        seen.add(key)
        edges.append(Edge(
            source=a,
            target=b,
            birth_time=max(points[a].birth_time, points[b].birth_time) + config.edge_delay_ms,
            opacity=0.0,
        ))
    total = len(edges)
    edges = [
        Edge(e.source, e.target, e.birth_time, edge_opacity(pos, total, config))
        for pos, e in enumerate(edges)
    ]

    return SignatureGraph(
        points=tuple(points),
        edges=tuple(edges),
        width=ctx.width,
        height=ctx.height,
        pattern=pattern,
        created_at=now,
    )


def easter_egg_graph(ctx: PatternContext, now: float) -> SignatureGraph:
    """Fixed upward triangle V/E/L; ignores the selected pattern."""
    side = ctx.max_radius * 1.2
    tri_h = side * math.sqrt(3) / 2
    cx, cy = ctx.center_x, ctx.center_y
    corners = [
        ("V", cx, cy - tri_h * 0.6, False),
        ("E", cx - side / 2, cy + tri_h * 0.4, True),
        ("L", cx + side / 2, cy + tri_h * 0.4, False),
    ]
    points = tuple(
        Point(
            index=i,
            letter=letter,
            x=x,
            y=y,
            is_vowel=vowel,
            birth_time=now + i * 80,
            twinkle_phase=float(i * 2),
            twinkle_speed=0.003,
            normalized_x=x / ctx.width if ctx.width else 0.0,
            normalized_y=y / ctx.height if ctx.height else 0.0,
        )
        for i, (letter, x, y, vowel) in enumerate(corners)
    )
    edges = tuple(
        Edge(source=i, target=(i + 1) % 3, birth_time=now + 50 + i * 80, opacity=1.0)
        for i in range(3)
    )
    return SignatureGraph(
        points=points,
        edges=edges,
        width=ctx.width,
        height=ctx.height,
        pattern="easter-egg",
        created_at=now,
    )
