"""Geometric: outer polygon around an inner polygon (or a single centre point)."""

from __future__ import annotations

import math

from sigil.engine.config import GeneratorConfig
from sigil.engine.context import PatternContext, is_vowel
from sigil.engine.edges import EdgeBuilder
from sigil.engine.graph import PatternResult, RawPoint
from sigil.engine.registry import PatternStyle, pattern
from sigil.utils.geometry import regular_polygon


def split_counts(n: int, outer_share: float) -> tuple[int, int]:
    """(outer, inner) vertex counts for n letters."""
    if n <= 3:
        return n, 0
    outer = min(n, max(3, math.ceil(n * outer_share)))
    return outer, n - outer


@pattern(PatternStyle.GEOMETRIC, description="Nested regular polygons with star chords")
def geometric(ctx: PatternContext, config: GeneratorConfig) -> PatternResult:
    n = ctx.num_points
    outer_count, inner_count = split_counts(n, config.geometric_outer_share)
    cx, cy = ctx.center_x, ctx.center_y

    coords: list[tuple[float, float]] = []
    if outer_count == 1:
        coords.append((cx, cy))
    elif outer_count:
        coords += regular_polygon(cx, cy, config.geometric_outer_radius * ctx.max_radius, outer_count)
    if inner_count == 1:
        coords.append((cx, cy))
    elif inner_count:
        coords += regular_polygon(
            cx, cy, config.geometric_inner_radius * ctx.max_radius, inner_count,
            start_angle=-math.pi / 2 + math.pi / inner_count,
        )

    points = [
        RawPoint(letter, x, y, is_vowel(letter))
        for letter, (x, y) in zip(ctx.unique_letters, coords)
    ]

    outer = list(range(outer_count))
    inner = list(range(outer_count, n))
    builder = EdgeBuilder(n)
    builder.ring(outer)
    if inner_count > 1:
        builder.ring(inner)
    if inner_count == 1:
        for i in outer:
            builder.add(i, inner[0])
    elif inner_count:
        for i in outer:
            builder.add(i, inner[i % inner_count])
    if outer_count >= config.geometric_star_min_outer:
        builder.skip(outer_count // 2, outer)
    return PatternResult(points=points, edges=builder.edges)
