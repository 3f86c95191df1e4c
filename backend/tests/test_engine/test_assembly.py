"""Tests for graph assembly: timing, opacity ramp, twinkle isolation."""

import pytest

from sigil.engine.assembly import assemble_graph, edge_opacity, platform_twinkle
from sigil.engine.config import DEFAULT_CONFIG, GeneratorConfig
from sigil.engine.context import PatternContext
from sigil.engine.graph import PatternResult, RawPoint
from tests.conftest import HEIGHT, WIDTH, fixed_twinkle, make_graph


def _ctx():
    return PatternContext.from_name("abc", WIDTH, HEIGHT)


def _raw(edges):
    return PatternResult(
        points=[RawPoint("A", 100, 100, True), RawPoint("B", 200, 100, False), RawPoint("C", 300, 300, False)],
        edges=edges,
    )


def test_point_births_step_by_60ms():
    graph = assemble_graph(_raw([]), _ctx(), 1000.0, "classic", twinkle=fixed_twinkle)
    assert [p.birth_time for p in graph.points] == [1000.0, 1060.0, 1120.0]


def test_edge_birth_follows_later_endpoint():
    graph = assemble_graph(_raw([(2, 0), (0, 1)]), _ctx(), 1000.0, "classic", twinkle=fixed_twinkle)
    assert [e.birth_time for e in graph.edges] == [1150.0, 1090.0]


def test_malformed_and_duplicate_edges_dropped():
    graph = assemble_graph(
        _raw([(0, 1), (1, 0), (1, 1), (0, 7), (-1, 2), (1, 2)]),
        _ctx(), 0.0, "classic", twinkle=fixed_twinkle,
    )
    assert [e.key for e in graph.edges] == [(0, 1), (1, 2)]


def test_normalized_coordinates():
    graph = assemble_graph(_raw([]), _ctx(), 0.0, "classic", twinkle=fixed_twinkle)
    assert graph.points[0].normalized_x == pytest.approx(100 / WIDTH)
    assert graph.points[2].normalized_y == pytest.approx(300 / HEIGHT)


class TestEdgeOpacity:
    def test_ramp(self):
        assert edge_opacity(0, 10) == pytest.approx(0.9)
        assert edge_opacity(5, 10) == pytest.approx(0.65)

    def test_floor(self):
        assert edge_opacity(0, 1) == pytest.approx(0.9)
        # 0.9 - 0.99 * 0.5 = 0.405, still above the floor
        assert edge_opacity(99, 100) == pytest.approx(0.405)
        strict = GeneratorConfig(edge_opacity_drop=1.0)
        assert edge_opacity(9, 10, strict) == pytest.approx(0.3)

    def test_earlier_edges_brighter(self):
        graph = make_graph("THE QUICK BROWN FOX JUMPS OVER THE LAZY DOG")
        opacities = [e.opacity for e in graph.edges]
        assert opacities == sorted(opacities, reverse=True)
        assert all(0.3 <= o <= 0.9 for o in opacities)


def test_platform_twinkle_ranges():
    for _ in range(50):
        phase, speed = platform_twinkle(DEFAULT_CONFIG)
        assert 0 <= phase < 6.2832
        assert 0.002 <= speed <= 0.004


def test_twinkle_source_does_not_touch_geometry():
    ctx = PatternContext.from_name("Grace", WIDTH, HEIGHT)
    raw = _raw([(0, 1)])
    a = assemble_graph(raw, ctx, 0.0, "classic", twinkle=fixed_twinkle)
    b = assemble_graph(raw, ctx, 0.0, "classic", twinkle=lambda cfg: (3.0, 0.004))
    assert [p.position for p in a.points] == [p.position for p in b.points]
    assert {p.twinkle_speed for p in b.points} == {0.004}


def test_easter_egg_fixed_timings():
    graph = make_graph("vercel", now=500.0)
    assert [p.birth_time for p in graph.points] == [500.0, 580.0, 660.0]
    assert [e.birth_time for e in graph.edges] == [550.0, 630.0, 710.0]
    assert all(e.opacity == 1.0 for e in graph.edges)
    assert [p.twinkle_phase for p in graph.points] == [0.0, 2.0, 4.0]
