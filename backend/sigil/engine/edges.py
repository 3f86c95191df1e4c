"""Edge construction shared by every generator.

One rule for all patterns: an unordered pair is added at most once;
self-loops and out-of-range indices are dropped.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray
from scipy.spatial import KDTree

from sigil.engine.seed import SeededRandom

logger = logging.getLogger(__name__)


class EdgeBuilder:
    """Accumulates deduplicated, undirected index pairs in proposal order."""

    def __init__(self, num_points: int) -> None:
        self.num_points = num_points
        self._seen: set[tuple[int, int]] = set()
        self.edges: list[tuple[int, int]] = []

    def add(self, a: int, b: int) -> bool:
        if a == b:
            return False
        if not (0 <= a < self.num_points and 0 <= b < self.num_points):
            logger.debug("Dropping edge (%d, %d): outside %d points", a, b, self.num_points)
            return False
        key = (min(a, b), max(a, b))
        if key in self._seen:
            return False
        self._seen.add(key)
        self.edges.append((a, b))
        return True

    def chain(self, indices: list[int]) -> None:
        """Connect consecutive indices (a→b→c…)."""
        for a, b in zip(indices, indices[1:]):
            self.add(a, b)

    def ring(self, indices: list[int]) -> None:
        """Chain plus the closing edge back to the first index."""
        self.chain(indices)
        if len(indices) >= 3:
            self.add(indices[-1], indices[0])

    def skip(self, step: int, indices: list[int] | None = None, wrap: bool = True) -> None:
        """Connect each index to the one ``step`` further along."""
        order = list(range(self.num_points)) if indices is None else indices
        n = len(order)
        for i in range(n):
            j = i + step
            if j >= n:
                if not wrap:
                    break
                j %= n
            self.add(order[i], order[j])

    def __len__(self) -> int:
        return len(self.edges)


def neighbor_order(coords: NDArray[np.float64]) -> list[list[int]]:
    """For every point, all other indices sorted by (distance, index)."""
    n = len(coords)
    if n < 2:
        return [[] for _ in range(n)]
    tree = KDTree(coords)
    dists, idxs = tree.query(coords, k=n)
    order: list[list[int]] = []
    for i in range(n):
        ranked = sorted(
            (round(float(d), 9), int(j))
            for d, j in zip(dists[i], idxs[i])
            if int(j) != i
        )
        order.append([j for _, j in ranked])
    return order


def add_nearest_neighbors(
    builder: EdgeBuilder,
    coords: NDArray[np.float64],
    rng: SeededRandom,
    k_min: int = 2,
    k_max: int = 3,
    extra_min_points: int = 5,
) -> None:
    """Connect each point to its k nearest others, k in [k_min, k_max].

    This is a proximity graph, not a Delaunay triangulation: it is neither
    guaranteed planar nor guaranteed connected.
    """
    n = len(coords)
    for i, ranked in enumerate(neighbor_order(coords)):
        k = k_min
        if n >= extra_min_points and rng.chance(0.5):
            k = k_max
        for j in ranked[:k]:
            builder.add(i, j)


def add_proximity_chords(
    builder: EdgeBuilder,
    coords: NDArray[np.float64],
    rng: SeededRandom,
    max_distance: float,
    probability: float,
) -> None:
    """Seeded long-range chords between pairs closer than ``max_distance``."""
    if len(coords) < 2 or max_distance <= 0:
        return
    tree = KDTree(coords)
    for a, b in sorted(tree.query_pairs(max_distance)):
        if rng.chance(probability):
            builder.add(a, b)
