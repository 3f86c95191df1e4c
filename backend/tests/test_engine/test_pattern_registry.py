"""Tests for the pattern registry."""

import pytest

from sigil.engine.context import PatternContext
from sigil.engine.graph import PatternResult
from sigil.engine.registry import PatternRegistry, PatternSpec, PatternStyle, get_registry


def _noop(ctx: PatternContext, config) -> PatternResult:
    return PatternResult()


def test_register_and_get():
    reg = PatternRegistry()
    spec = PatternSpec(style=PatternStyle.WAVE, fn=_noop)
    reg.register(spec)
    assert reg.get(PatternStyle.WAVE) is spec
    assert reg.get("wave") is spec
    assert reg.count == 1


def test_duplicate_rejected():
    reg = PatternRegistry()
    reg.register(PatternSpec(style=PatternStyle.WAVE, fn=_noop))
    with pytest.raises(ValueError):
        reg.register(PatternSpec(style=PatternStyle.WAVE, fn=_noop))


def test_missing_pattern_raises_key_error():
    with pytest.raises(KeyError):
        PatternRegistry().get(PatternStyle.SPIRAL)


def test_unknown_name_raises_value_error():
    with pytest.raises(ValueError):
        get_registry().get("hexagonal")


def test_contains():
    reg = PatternRegistry()
    reg.register(PatternSpec(style=PatternStyle.CLASSIC, fn=_noop))
    assert "classic" in reg
    assert PatternStyle.ORBITAL not in reg
    assert "nonsense" not in reg


def test_global_registry_has_all_six_in_order():
    import sigil.engine.patterns  # noqa: F401

    reg = get_registry()
    assert reg.count == 6
    assert [s.style for s in reg.all()] == list(PatternStyle)
    assert all(s.description for s in reg.all())
