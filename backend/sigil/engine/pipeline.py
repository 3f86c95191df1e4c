"""Generation orchestrator — name in, immutable SignatureGraph out."""

from __future__ import annotations

import logging
import time

import sigil.engine.patterns  # noqa: F401  (registers generators)
from sigil.engine.assembly import EASTER_EGG, TwinkleSource, assemble_graph, easter_egg_graph, platform_twinkle
from sigil.engine.config import DEFAULT_CONFIG, GeneratorConfig
from sigil.engine.context import PatternContext
from sigil.engine.graph import SignatureGraph
from sigil.engine.registry import PatternRegistry, PatternStyle, get_registry

logger = logging.getLogger(__name__)


class SignatureGenerator:
    """Runs one pattern generator and assembles its output."""

    def __init__(
        self,
        registry: PatternRegistry | None = None,
        config: GeneratorConfig | None = None,
        twinkle: TwinkleSource = platform_twinkle,
    ) -> None:
        self.registry = registry or get_registry()
        self.config = config or DEFAULT_CONFIG
        self.twinkle = twinkle

    def run(
        self,
        name: str,
        style: PatternStyle | str,
        width: float,
        height: float,
        now: float = 0.0,
    ) -> SignatureGraph:
        start = time.perf_counter()
        style = PatternStyle(style)
        ctx = PatternContext.from_name(name, width, height)

        if not ctx.letters:
            return SignatureGraph(width=width, height=height, pattern=style.value, created_at=now)

        if ctx.letters == EASTER_EGG:
            logger.debug("Easter egg triangle for %r", name)
            return easter_egg_graph(ctx, now)

        spec = self.registry.get(style)
        raw = spec.fn(ctx, self.config)
        graph = assemble_graph(raw, ctx, now, style.value, self.config, self.twinkle)

        logger.debug(
            "Generated %s: %d points, %d edges in %.1fms",
            style.value,
            len(graph.points),
            len(graph.edges),
            (time.perf_counter() - start) * 1000,
        )
        return graph


def create_generator(config: GeneratorConfig | None = None,
                     twinkle: TwinkleSource = platform_twinkle) -> SignatureGenerator:
    """Factory function for creating a generator instance."""
    return SignatureGenerator(config=config, twinkle=twinkle)


def generate_signature(
    name: str,
    style: PatternStyle | str = PatternStyle.CLASSIC,
    width: float = 800.0,
    height: float = 450.0,
    now: float = 0.0,
) -> SignatureGraph:
    return create_generator().run(name, style, width, height, now)
