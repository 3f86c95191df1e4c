"""Orbital: three elliptical rings, vowels innermost, joined by proximity."""

from __future__ import annotations

import math

from sigil.engine.config import GeneratorConfig
from sigil.engine.context import PatternContext, is_vowel
from sigil.engine.edges import EdgeBuilder, add_nearest_neighbors, add_proximity_chords
from sigil.engine.graph import PatternResult, RawPoint
from sigil.engine.registry import PatternStyle, pattern
from sigil.engine.seed import SeededRandom
from sigil.utils.geometry import as_array, polar


def ring_of(index: int, letter: str) -> int:
    """0 = inner (vowels), 1/2 = middle/outer by point-index parity."""
    if is_vowel(letter):
        return 0
    return 1 if index % 2 == 0 else 2


@pattern(PatternStyle.ORBITAL, description="Concentric rings with nearest-neighbour links")
def orbital(ctx: PatternContext, config: GeneratorConfig) -> PatternResult:
    rng = SeededRandom(ctx.seed)
    rings: dict[int, list[int]] = {0: [], 1: [], 2: []}
    for i, letter in enumerate(ctx.unique_letters):
        rings[ring_of(i, letter)].append(i)

    sx, sy = config.orbital_ellipse
    positions: dict[int, tuple[float, float]] = {}
    for ring, members in rings.items():
        radius = config.orbital_rings[ring] * ctx.max_radius
        for j, idx in enumerate(members):
            jitter = rng.uniform(-config.orbital_angle_jitter, config.orbital_angle_jitter)
            angle = -math.pi / 2 + j * 2 * math.pi / len(members) + jitter
            positions[idx] = polar(ctx.center_x, ctx.center_y, angle, radius, sx, sy)

    points = [
        RawPoint(letter, *positions[i], is_vowel(letter))
        for i, letter in enumerate(ctx.unique_letters)
    ]
    coords = as_array([(p.x, p.y) for p in points])

    builder = EdgeBuilder(len(points))
    add_nearest_neighbors(
        builder, coords, rng,
        config.neighbors_min, config.neighbors_max, config.neighbors_extra_min_points,
    )
    if len(points) >= 4:
        add_proximity_chords(
            builder, coords, rng,
            config.chord_distance * ctx.max_radius, config.chord_probability,
        )
    return PatternResult(points=points, edges=builder.edges)
