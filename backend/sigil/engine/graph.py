"""Signature graph data model.

Generators emit a PatternResult (bare positions + index pairs); assembly
turns it into an immutable SignatureGraph with animation metadata.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class RawPoint:
    letter: str
    x: float
    y: float
    is_vowel: bool


@dataclass
class PatternResult:
    """Skeleton produced by a pattern generator."""

    points: list[RawPoint] = field(default_factory=list)
    # Undirected (a, b) index pairs in the order the generator proposed them
    edges: list[tuple[int, int]] = field(default_factory=list)


@dataclass(frozen=True)
class Point:
    """A rendered letter node."""

    index: int
    letter: str
    x: float
    y: float
    is_vowel: bool
    # Milliseconds on the host clock at which the point starts appearing
    birth_time: float
    twinkle_phase: float
    twinkle_speed: float
    normalized_x: float
    normalized_y: float

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Edge:
    source: int
    target: int
    birth_time: float
    # Base alpha in [0, 1]
    opacity: float

    @property
    def key(self) -> tuple[int, int]:
        return (min(self.source, self.target), max(self.source, self.target))


@dataclass(frozen=True)
class SignatureGraph:
    """Complete output of one generation pass. Replaced wholesale, never mutated."""

    points: tuple[Point, ...] = ()
    edges: tuple[Edge, ...] = ()
    width: float = 0.0
    height: float = 0.0
    pattern: str = "classic"
    # Host clock (ms) at which the graph was generated
    created_at: float = 0.0

    @property
    def is_empty(self) -> bool:
        return not self.points

    def endpoints(self, edge: Edge) -> tuple[Point, Point] | None:
        """Both endpoints of an edge, or None when it references a missing point."""
        n = len(self.points)
        if not (0 <= edge.source < n and 0 <= edge.target < n):
            return None
        return self.points[edge.source], self.points[edge.target]

    def to_dict(self) -> dict[str, Any]:
        return {
            "pattern": self.pattern,
            "width": self.width,
            "height": self.height,
            "points": [
                {
                    "letter": p.letter,
                    "x": p.x,
                    "y": p.y,
                    "is_vowel": p.is_vowel,
                    "normalized": [p.normalized_x, p.normalized_y],
                }
                for p in self.points
            ],
            "edges": [
                {"from": e.source, "to": e.target, "opacity": e.opacity}
                for e in self.edges
            ],
        }
