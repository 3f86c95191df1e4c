"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray


def as_array(points: list[tuple[float, float]]) -> NDArray[np.float64]:
    """List of (x, y) to an Nx2 float array (empty input gives shape (0, 2))."""
    if not points:
        return np.empty((0, 2))
    return np.asarray(points, dtype=np.float64)


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def polar(cx: float, cy: float, angle: float, radius: float,
          sx: float = 1.0, sy: float = 1.0) -> tuple[float, float]:
    """Point at ``angle`` (radians, 0 = right, y down) and ``radius`` from the centre.

    ``sx``/``sy`` stretch the circle into an ellipse.
    """
    return (cx + math.cos(angle) * radius * sx, cy + math.sin(angle) * radius * sy)


def regular_polygon(cx: float, cy: float, radius: float, count: int,
                    start_angle: float = -math.pi / 2) -> list[tuple[float, float]]:
    """Vertices of a regular polygon, first vertex at ``start_angle`` (top by default)."""
    return [
        polar(cx, cy, start_angle + k * 2 * math.pi / count, radius)
        for k in range(count)
    ]
