"""Sigil constellation engine: seed, patterns, graph assembly."""

from sigil.engine.graph import Edge, Point, SignatureGraph
from sigil.engine.pipeline import SignatureGenerator, create_generator, generate_signature
from sigil.engine.registry import PatternStyle, get_registry, pattern
from sigil.engine.seed import clean_name, derive_seed

__all__ = [
    "Edge",
    "Point",
    "SignatureGraph",
    "SignatureGenerator",
    "create_generator",
    "generate_signature",
    "PatternStyle",
    "get_registry",
    "pattern",
    "clean_name",
    "derive_seed",
]
