"""Classic: letters on a circle by alphabet position, chained in typed order."""

from __future__ import annotations

import math

from sigil.engine.config import GeneratorConfig
from sigil.engine.context import PatternContext, is_vowel
from sigil.engine.edges import EdgeBuilder
from sigil.engine.graph import PatternResult, RawPoint
from sigil.engine.registry import PatternStyle, pattern
from sigil.utils.geometry import polar

# Phase stride between letters for the seeded angular jitter.
_JITTER_STRIDE = 137.5
_RADIUS_CODE_STRIDE = 0.7


def letter_polar(letter: str, position: int, total: int, seed: int,
                 config: GeneratorConfig) -> tuple[float, float]:
    """(angle, radius fraction) for a letter first typed at ``position``."""
    code = ord(letter)
    alphabet_pos = code - ord("A")

    base_angle = (alphabet_pos / 26) * math.pi * 2
    spread = config.classic_position_spread
    position_offset = (position / max(total, 1)) * spread - spread / 2
    seed_offset = math.sin(seed + alphabet_pos * _JITTER_STRIDE) * config.classic_seed_jitter
    angle = base_angle + position_offset + seed_offset

    base = config.classic_vowel_radius if is_vowel(letter) else config.classic_consonant_radius
    variation = 1 - config.classic_radius_variation / 2 + abs(
        math.sin(seed + code * _RADIUS_CODE_STRIDE)
    ) * config.classic_radius_variation
    return angle, base * variation


@pattern(PatternStyle.CLASSIC, description="Alphabet circle with typed-order chain")
def classic(ctx: PatternContext, config: GeneratorConfig) -> PatternResult:
    points: list[RawPoint] = []
    total = len(ctx.letters)
    for letter in ctx.unique_letters:
        angle, radius = letter_polar(letter, ctx.first_occurrence(letter), total, ctx.seed, config)
        x, y = polar(ctx.center_x, ctx.center_y, angle, radius * ctx.max_radius)
        points.append(RawPoint(letter, x, y, is_vowel(letter)))

    builder = EdgeBuilder(len(points))
    typed = ctx.typed_indices()
    builder.chain(typed)
    if len(points) >= 3 and typed:
        builder.add(typed[-1], typed[0])
    if len(points) >= 4:
        builder.skip(2)
    return PatternResult(points=points, edges=builder.edges)
