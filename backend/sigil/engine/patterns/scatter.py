"""Scatter: seeded polar scatter relaxed by a short force-directed pass."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from sigil.engine.config import GeneratorConfig
from sigil.engine.context import PatternContext, is_vowel
from sigil.engine.edges import EdgeBuilder, add_nearest_neighbors
from sigil.engine.graph import PatternResult, RawPoint
from sigil.engine.registry import PatternStyle, pattern
from sigil.engine.seed import SeededRandom, hash_unit

# hash_unit salts for the independent draws of one letter
_SALT_ANGLE = 1
_SALT_RADIUS = 2
_SALT_NUDGE = 3

# Below this separation two points count as coincident.
_COINCIDENT_EPS = 1e-6


def initial_positions(ctx: PatternContext, config: GeneratorConfig) -> NDArray[np.float64]:
    """Seeded polar draw; sqrt on the radius keeps areal density uniform."""
    coords = np.empty((ctx.num_points, 2))
    limit = config.scatter_radius * ctx.max_radius
    for i, letter in enumerate(ctx.unique_letters):
        code = ord(letter)
        angle = hash_unit(ctx.seed, code, i, _SALT_ANGLE) * 2 * math.pi
        radius = math.sqrt(hash_unit(ctx.seed, code, i, _SALT_RADIUS)) * limit
        coords[i] = (ctx.center_x + math.cos(angle) * radius,
                     ctx.center_y + math.sin(angle) * radius)
    return coords


def relax(coords: NDArray[np.float64], ctx: PatternContext,
          config: GeneratorConfig) -> NDArray[np.float64]:
    """Fixed-iteration repulsion with a centring leash. Returns a new array."""
    pos = coords.copy()
    n = len(pos)
    if n < 2:
        return pos

    cutoff = config.scatter_cutoff * ctx.max_radius
    max_step = config.scatter_max_step * ctx.max_radius
    leash = config.scatter_leash * ctx.max_radius
    center = np.array([ctx.center_x, ctx.center_y])

    for iteration in range(config.scatter_iterations):
        delta = pos[:, None, :] - pos[None, :, :]  # i - j
        dist = np.linalg.norm(delta, axis=2)
        np.fill_diagonal(dist, np.inf)

        # Coincident points: separate along a seeded direction
        for i, j in zip(*np.nonzero(dist < _COINCIDENT_EPS)):
            if i < j:
                theta = hash_unit(ctx.seed, int(i), int(j), iteration, _SALT_NUDGE) * 2 * math.pi
                delta[i, j] = (math.cos(theta), math.sin(theta))
                delta[j, i] = -delta[i, j]
                dist[i, j] = dist[j, i] = 1.0

        # Inverse-distance push, fading to zero at the cutoff
        active = dist < cutoff
        safe = np.where(active, dist, 1.0)
        magnitude = np.where(active, (cutoff**2 / safe - safe) * config.scatter_strength, 0.0)
        step = np.sum(delta / safe[:, :, None] * magnitude[:, :, None], axis=1)

        norms = np.linalg.norm(step, axis=1)
        too_far = norms > max_step
        step[too_far] *= (max_step / norms[too_far])[:, None]
        pos += step

        # Pull stragglers back toward the centre
        offset = pos - center
        radial = np.linalg.norm(offset, axis=1)
        outside = radial > leash
        if np.any(outside):
            excess = (radial[outside] - leash) * config.scatter_pull
            pos[outside] -= offset[outside] / radial[outside][:, None] * excess[:, None]

    return pos


@pattern(PatternStyle.SCATTER, description="Relaxed seeded scatter with proximity links")
def scatter(ctx: PatternContext, config: GeneratorConfig) -> PatternResult:
    coords = relax(initial_positions(ctx, config), ctx, config)
    points = [
        RawPoint(letter, float(coords[i, 0]), float(coords[i, 1]), is_vowel(letter))
        for i, letter in enumerate(ctx.unique_letters)
    ]
    builder = EdgeBuilder(len(points))
    add_nearest_neighbors(
        builder, coords, SeededRandom(ctx.seed),
        config.neighbors_min, config.neighbors_max, config.neighbors_extra_min_points,
    )
    return PatternResult(points=points, edges=builder.edges)
