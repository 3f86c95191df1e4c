"""Tests for the generation pipeline and graph payload."""

import json

import pytest

from sigil.engine import generate_signature
from sigil.engine.pipeline import SignatureGenerator
from sigil.engine.registry import PatternStyle
from tests.conftest import HEIGHT, WIDTH, fixed_twinkle


def test_run_sets_graph_metadata(generator):
    graph = generator.run("Grace", PatternStyle.SPIRAL, WIDTH, HEIGHT, now=42.0)
    assert graph.pattern == "spiral"
    assert (graph.width, graph.height) == (WIDTH, HEIGHT)
    assert graph.created_at == 42.0


def test_accepts_style_strings(generator):
    assert generator.run("Grace", "wave", WIDTH, HEIGHT).pattern == "wave"


def test_unknown_style_rejected(generator):
    with pytest.raises(ValueError):
        generator.run("Grace", "zigzag", WIDTH, HEIGHT)


def test_case_changes_seed_not_letters(generator):
    a = generator.run("Anna", PatternStyle.SPIRAL, WIDTH, HEIGHT)
    b = generator.run("ANNA", PatternStyle.SPIRAL, WIDTH, HEIGHT)
    assert [p.letter for p in a.points] == [p.letter for p in b.points]
    assert [p.position for p in a.points] != [p.position for p in b.points]


def test_scales_with_canvas(generator):
    small = generator.run("Grace", PatternStyle.CLASSIC, 400, 225)
    large = generator.run("Grace", PatternStyle.CLASSIC, 800, 450)
    for s, big in zip(small.points, large.points):
        assert big.x == pytest.approx(s.x * 2)
        assert big.y == pytest.approx(s.y * 2)


def test_generate_signature_default_is_classic():
    graph = generate_signature("Grace")
    assert graph.pattern == "classic"
    assert len(graph.points) == 5


def test_to_dict_is_json_serializable():
    graph = SignatureGenerator(twinkle=fixed_twinkle).run("Grace", "orbital", WIDTH, HEIGHT)
    payload = json.loads(json.dumps(graph.to_dict()))
    assert payload["pattern"] == "orbital"
    assert [p["letter"] for p in payload["points"]] == list("GRACE")
    assert all({"from", "to", "opacity"} <= set(e) for e in payload["edges"])
