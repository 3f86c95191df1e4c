"""Math helpers — easing curves, interpolation, clamping. No engine imports."""

from __future__ import annotations


def clamp(value: float, lo: float = 0.0, hi: float = 1.0) -> float:
    return max(lo, min(hi, value))


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def ease_out_cubic(progress: float) -> float:
    """1 - (1 - p)^3. Fast start, soft landing; used for growth and reveal."""
    p = clamp(progress)
    return 1 - (1 - p) ** 3


def ease_out_quad(progress: float) -> float:
    """1 - (1 - p)^2. Used for the theme crossfade."""
    p = clamp(progress)
    return 1 - (1 - p) ** 2


def progress_since(now: float, start: float, duration: float) -> float:
    """Linear progress of an animation that began at ``start``, clamped to [0, 1]."""
    if duration <= 0:
        return 1.0
    return clamp((now - start) / duration)
