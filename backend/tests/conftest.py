"""Shared test fixtures."""

from __future__ import annotations

import pytest

from sigil.engine.config import GeneratorConfig
from sigil.engine.graph import SignatureGraph
from sigil.engine.pipeline import SignatureGenerator
from sigil.engine.registry import PatternStyle

WIDTH = 800.0
HEIGHT = 450.0

# A spread of inputs: repeats, punctuation, mixed case, long names
SAMPLE_NAMES = [
    "A",
    "Jo",
    "Ann",
    "ANNA",
    "Grace Hopper",
    "ada lovelace",
    "O'Neil-Smith",
    "Zygmunt Bauman",
    "THE QUICK BROWN FOX JUMPS OVER THE LAZY DOG",
]

ALL_STYLES = list(PatternStyle)


def fixed_twinkle(config: GeneratorConfig) -> tuple[float, float]:
    """Deterministic stand-in for the platform twinkle source."""
    return 1.0, 0.003


@pytest.fixture
def generator() -> SignatureGenerator:
    return SignatureGenerator(twinkle=fixed_twinkle)


def make_graph(name: str, style: PatternStyle | str = PatternStyle.CLASSIC,
               now: float = 0.0) -> SignatureGraph:
    return SignatureGenerator(twinkle=fixed_twinkle).run(name, style, WIDTH, HEIGHT, now)


@pytest.fixture
def grace_graph() -> SignatureGraph:
    return make_graph("Grace Hopper")


@pytest.fixture
def empty_graph() -> SignatureGraph:
    return make_graph("")


class FakeClock:
    """Manually advanced millisecond clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> float:
        self.now += ms
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
