"""Generator configuration — geometry and timing constants for every pattern."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GeneratorConfig:
    """Fractions are relative to the pattern's max radius unless noted."""

    # Classic
    classic_vowel_radius: float = 0.55
    classic_consonant_radius: float = 0.75
    classic_position_spread: float = 0.4  # radians across the typed sequence
    classic_seed_jitter: float = 0.3  # radians
    classic_radius_variation: float = 0.3  # 0.85 .. 1.15

    # Orbital
    orbital_rings: tuple[float, float, float] = (0.35, 0.6, 0.85)
    orbital_angle_jitter: float = 0.15  # radians, ±
    orbital_ellipse: tuple[float, float] = (1.1, 0.9)
    chord_distance: float = 0.6
    chord_probability: float = 0.3

    # Nearest-neighbour graphs (Orbital, Scatter)
    neighbors_min: int = 2
    neighbors_max: int = 3
    neighbors_extra_min_points: int = 5

    # Spiral
    spiral_radius: float = 0.9
    spiral_seed_rotation: float = 0.1

    # Geometric
    geometric_outer_share: float = 0.6
    geometric_outer_radius: float = 0.85
    geometric_inner_radius: float = 0.4
    geometric_star_min_outer: int = 5

    # Wave
    wave_span: float = 1.8
    wave_amplitude: float = 0.6
    wave_primary_weight: float = 0.65

    # Scatter
    scatter_radius: float = 0.85
    scatter_iterations: int = 20
    scatter_cutoff: float = 0.35
    scatter_strength: float = 0.05
    scatter_max_step: float = 0.1
    scatter_leash: float = 0.7
    scatter_pull: float = 0.5

    # Assembly timing (ms) and opacity ramp
    birth_step_ms: float = 60.0
    edge_delay_ms: float = 30.0
    edge_opacity_start: float = 0.9
    edge_opacity_drop: float = 0.5
    edge_opacity_floor: float = 0.3

    # Cosmetic flicker ranges
    twinkle_speed_min: float = 0.002
    twinkle_speed_max: float = 0.004


DEFAULT_CONFIG = GeneratorConfig()
