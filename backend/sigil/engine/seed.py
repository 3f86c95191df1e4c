"""Seed derivation and the deterministic random source for geometry.

Every geometry-affecting "random" value is drawn from here. The platform
RNG is never consulted for positions or edges, so a name always produces
the same constellation.
"""

from __future__ import annotations

import re

_MASK32 = 0xFFFFFFFF
_NON_LETTERS = re.compile(r"[^A-Z]")

# FNV-1a 32-bit offset basis / prime, used to mix integer keys in hash_unit.
_FNV_OFFSET = 0x811C9DC5
_FNV_PRIME = 0x01000193

# mulberry32 increment (Weyl sequence constant).
_MULBERRY_STEP = 0x6D2B79F5


def _to_int32(value: int) -> int:
    value &= _MASK32
    return value - 0x100000000 if value & 0x80000000 else value


def _imul(a: int, b: int) -> int:
    """Low 32 bits of a*b (unsigned)."""
    return (a * b) & _MASK32


def _utf16_units(text: str) -> list[int]:
    data = text.encode("utf-16-le", "surrogatepass")
    return [data[i] | (data[i + 1] << 8) for i in range(0, len(data), 2)]


def clean_name(name: str) -> str:
    """Uppercase and keep only A–Z, in typed order (duplicates retained)."""
    return _NON_LETTERS.sub("", name.upper())


def hash_name(name: str) -> int:
    """Signed 32-bit ``h = h*31 + code`` fold over the UTF-16 code units of ``name``."""
    seed = 0
    for code in _utf16_units(name):
        seed = _to_int32((seed << 5) - seed + code)
    return seed


def derive_seed(name: str) -> int:
    """Non-negative seed for the generators.

    Hashes the raw name as typed (before uppercasing), so "Anna" and "ANNA"
    share letters but not a seed.
    """
    return abs(hash_name(name))


class SeededRandom:
    """mulberry32 stream: small, fast, and identical on every platform."""

    def __init__(self, seed: int) -> None:
        self._state = seed & _MASK32

    def random(self) -> float:
        """Next float in [0, 1)."""
        self._state = (self._state + _MULBERRY_STEP) & _MASK32
        t = self._state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & _MASK32
        return ((t ^ (t >> 14)) & _MASK32) / 4294967296.0

    def uniform(self, lo: float, hi: float) -> float:
        return lo + (hi - lo) * self.random()

    def chance(self, probability: float) -> bool:
        return self.random() < probability


def hash_unit(*parts: int) -> float:
    """Stateless pseudo-random float in [0, 1) keyed by integers."""
    key = _FNV_OFFSET
    for part in parts:
        key = _imul(key ^ (part & _MASK32), _FNV_PRIME)
    return SeededRandom(key).random()
