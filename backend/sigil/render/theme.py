"""Named colour palettes and channel-wise interpolation between them."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from sigil.utils.math_helpers import lerp

RGB = tuple[int, int, int]


class Theme(str, enum.Enum):
    MONO = "mono"
    AMBER = "amber"
    BLUE = "blue"
    EMERALD = "emerald"
    VIOLET = "violet"
    ROSE = "rose"
    CYAN = "cyan"


@dataclass(frozen=True)
class Rgba:
    r: int
    g: int
    b: int
    a: float = 1.0

    @property
    def rgb(self) -> RGB:
        return (self.r, self.g, self.b)

    def to_pil(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, round(max(0.0, min(1.0, self.a)) * 255))

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


def rgba(rgb: RGB, alpha: float = 1.0) -> Rgba:
    return Rgba(rgb[0], rgb[1], rgb[2], alpha)


def hex_to_rgb(value: str) -> RGB:
    """"#b4783c" -> (180, 120, 60)."""
    value = value.lstrip("#")
    return (int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))


@dataclass(frozen=True)
class Palette:
    grid: Rgba
    grid_accent: Rgba
    line: RGB
    dot: RGB
    dot_glow: RGB
    coords: Rgba
    # Solid colours used by the vector export
    svg_line: str
    svg_dot: str
    label: Rgba


THEMES: dict[Theme, Palette] = {
    Theme.MONO: Palette(
        grid=Rgba(40, 40, 40, 0.4),
        grid_accent=Rgba(60, 60, 60, 0.6),
        line=(85, 85, 85),
        dot=(160, 160, 160),
        dot_glow=(100, 100, 100),
        coords=Rgba(50, 50, 50, 0.8),
        svg_line="#555555",
        svg_dot="#a0a0a0",
        label=Rgba(160, 160, 160, 0.9),
    ),
    Theme.AMBER: Palette(
        grid=Rgba(60, 40, 20, 0.4),
        grid_accent=Rgba(80, 50, 20, 0.6),
        line=(180, 120, 60),
        dot=(255, 180, 80),
        dot_glow=(180, 100, 40),
        coords=Rgba(100, 60, 30, 0.8),
        svg_line="#b4783c",
        svg_dot="#ffb450",
        label=Rgba(255, 180, 80, 0.9),
    ),
    Theme.BLUE: Palette(
        grid=Rgba(20, 30, 50, 0.4),
        grid_accent=Rgba(30, 50, 80, 0.6),
        line=(60, 120, 180),
        dot=(100, 180, 255),
        dot_glow=(40, 100, 180),
        coords=Rgba(40, 60, 100, 0.8),
        svg_line="#3c78b4",
        svg_dot="#64b4ff",
        label=Rgba(100, 180, 255, 0.9),
    ),
    Theme.EMERALD: Palette(
        grid=Rgba(20, 50, 40, 0.4),
        grid_accent=Rgba(30, 70, 50, 0.6),
        line=(52, 140, 100),
        dot=(80, 220, 150),
        dot_glow=(40, 160, 100),
        coords=Rgba(40, 80, 60, 0.8),
        svg_line="#348c64",
        svg_dot="#50dc96",
        label=Rgba(80, 220, 150, 0.9),
    ),
    Theme.VIOLET: Palette(
        grid=Rgba(40, 20, 60, 0.4),
        grid_accent=Rgba(60, 30, 90, 0.6),
        line=(140, 80, 200),
        dot=(180, 130, 255),
        dot_glow=(120, 60, 180),
        coords=Rgba(80, 40, 120, 0.8),
        svg_line="#8c50c8",
        svg_dot="#b482ff",
        label=Rgba(180, 130, 255, 0.9),
    ),
    Theme.ROSE: Palette(
        grid=Rgba(60, 20, 35, 0.4),
        grid_accent=Rgba(90, 30, 50, 0.6),
        line=(200, 80, 120),
        dot=(255, 130, 170),
        dot_glow=(180, 60, 100),
        coords=Rgba(120, 40, 60, 0.8),
        svg_line="#c85078",
        svg_dot="#ff82aa",
        label=Rgba(255, 130, 170, 0.9),
    ),
    Theme.CYAN: Palette(
        grid=Rgba(20, 50, 55, 0.4),
        grid_accent=Rgba(30, 70, 80, 0.6),
        line=(50, 160, 180),
        dot=(80, 220, 240),
        dot_glow=(40, 140, 160),
        coords=Rgba(40, 80, 90, 0.8),
        svg_line="#32a0b4",
        svg_dot="#50dcf0",
        label=Rgba(80, 220, 240, 0.9),
    ),
}


def get_palette(theme: Theme | str) -> Palette:
    return THEMES[Theme(theme)]


def next_theme(theme: Theme | str) -> Theme:
    """Cycle order used by the theme button."""
    order = list(Theme)
    return order[(order.index(Theme(theme)) + 1) % len(order)]


def lerp_rgb(a: RGB, b: RGB, t: float) -> RGB:
    return (
        round(lerp(a[0], b[0], t)),
        round(lerp(a[1], b[1], t)),
        round(lerp(a[2], b[2], t)),
    )


def lerp_rgba(a: Rgba, b: Rgba, t: float) -> Rgba:
    r, g, bl = lerp_rgb(a.rgb, b.rgb, t)
    return Rgba(r, g, bl, round(lerp(a.a, b.a, t), 2))


def interpolate_palette(source: Palette, target: Palette, t: float) -> Palette:
    """Crossfade at eased progress ``t``; returns ``target`` itself once t >= 1."""
    if t >= 1:
        return target
    if t <= 0:
        return source
    return Palette(
        grid=lerp_rgba(source.grid, target.grid, t),
        grid_accent=lerp_rgba(source.grid_accent, target.grid_accent, t),
        line=lerp_rgb(source.line, target.line, t),
        dot=lerp_rgb(source.dot, target.dot, t),
        dot_glow=lerp_rgb(source.dot_glow, target.dot_glow, t),
        coords=lerp_rgba(source.coords, target.coords, t),
        svg_line=target.svg_line,
        svg_dot=target.svg_dot,
        label=lerp_rgba(source.label, target.label, t),
    )
