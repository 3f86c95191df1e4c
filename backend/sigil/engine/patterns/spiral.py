"""Spiral: golden-angle phyllotaxis with even areal density."""

from __future__ import annotations

import math

from sigil.engine.config import GeneratorConfig
from sigil.engine.context import PatternContext, is_vowel
from sigil.engine.edges import EdgeBuilder
from sigil.engine.graph import PatternResult, RawPoint
from sigil.engine.registry import PatternStyle, pattern
from sigil.utils.geometry import polar

PHI = (1 + math.sqrt(5)) / 2
GOLDEN_ANGLE = 2 * math.pi / PHI**2


@pattern(PatternStyle.SPIRAL, description="Golden-angle spiral")
def spiral(ctx: PatternContext, config: GeneratorConfig) -> PatternResult:
    n = ctx.num_points
    rotation = ctx.seed * config.spiral_seed_rotation
    points: list[RawPoint] = []
    for i, letter in enumerate(ctx.unique_letters):
        angle = i * GOLDEN_ANGLE + rotation
        radius = math.sqrt((i + 1) / (n + 1)) * config.spiral_radius * ctx.max_radius
        x, y = polar(ctx.center_x, ctx.center_y, angle, radius)
        points.append(RawPoint(letter, x, y, is_vowel(letter)))

    builder = EdgeBuilder(n)
    builder.chain(list(range(n)))
    if n >= 5:
        builder.skip(3, wrap=False)
    return PatternResult(points=points, edges=builder.edges)
