"""Pattern registry — every generator is a standalone function registered via decorator.

Usage:
    @pattern(PatternStyle.SPIRAL, description="Golden-angle spiral")
    def spiral(ctx: PatternContext, config: GeneratorConfig) -> PatternResult:
        ...

Adding a new layout = creating one module with the decorator and importing
it from ``sigil.engine.patterns``.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from sigil.engine.config import GeneratorConfig
    from sigil.engine.context import PatternContext
    from sigil.engine.graph import PatternResult

logger = logging.getLogger(__name__)


class PatternStyle(str, enum.Enum):
    CLASSIC = "classic"
    ORBITAL = "orbital"
    SPIRAL = "spiral"
    GEOMETRIC = "geometric"
    WAVE = "wave"
    SCATTER = "scatter"


GeneratorFn = Callable[["PatternContext", "GeneratorConfig"], "PatternResult"]


@dataclass
class PatternSpec:
    style: PatternStyle
    fn: GeneratorFn
    description: str = ""


class PatternRegistry:
    """Registry of pattern generators keyed by style."""

    def __init__(self) -> None:
        self._patterns: dict[PatternStyle, PatternSpec] = {}

    def register(self, spec: PatternSpec) -> None:
        if spec.style in self._patterns:
            raise ValueError(f"Duplicate pattern: {spec.style.value}")
        self._patterns[spec.style] = spec
        logger.debug("Registered pattern %s", spec.style.value)

    def get(self, style: PatternStyle | str) -> PatternSpec:
        return self._patterns[PatternStyle(style)]

    def all(self) -> list[PatternSpec]:
        order = list(PatternStyle)
        return sorted(self._patterns.values(), key=lambda s: order.index(s.style))

    def __contains__(self, style: object) -> bool:
        try:
            return PatternStyle(style) in self._patterns
        except ValueError:
            return False

    @property
    def count(self) -> int:
        return len(self._patterns)


# Module-level singleton
_registry = PatternRegistry()


def get_registry() -> PatternRegistry:
    return _registry


def pattern(style: PatternStyle, *, description: str = ""):
    """Decorator to register a pattern generator."""

    def decorator(fn: GeneratorFn) -> GeneratorFn:
        _registry.register(PatternSpec(style=style, fn=fn, description=description))
        return fn

    return decorator
