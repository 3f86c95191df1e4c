"""Wave: letters strung left to right along two superimposed sine waves."""

from __future__ import annotations

import math

from sigil.engine.config import GeneratorConfig
from sigil.engine.context import PatternContext, is_vowel
from sigil.engine.edges import EdgeBuilder
from sigil.engine.graph import PatternResult, RawPoint
from sigil.engine.registry import PatternStyle, pattern


@pattern(PatternStyle.WAVE, description="Horizontal two-frequency sine wave")
def wave(ctx: PatternContext, config: GeneratorConfig) -> PatternResult:
    n = ctx.num_points
    span = config.wave_span * ctx.max_radius
    amplitude = config.wave_amplitude * ctx.max_radius
    w1 = config.wave_primary_weight
    f1 = 1 + ctx.seed % 3

    points: list[RawPoint] = []
    for i, letter in enumerate(ctx.unique_letters):
        code = ord(letter)
        x = ctx.center_x if n == 1 else ctx.center_x - span / 2 + span * i / (n - 1)
        u = i / max(n - 1, 1) * 2 * math.pi
        f2 = 2 + (code % 4) * 0.5
        y = ctx.center_y + amplitude * (
            w1 * math.sin(u * f1 + ctx.seed * 0.01)
            + (1 - w1) * math.sin(u * f2 + code * 0.3)
        )
        points.append(RawPoint(letter, x, y, is_vowel(letter)))

    builder = EdgeBuilder(n)
    builder.chain(list(range(n)))
    if n >= 4:
        builder.skip(2, wrap=False)
    return PatternResult(points=points, edges=builder.edges)
