"""PatternContext — the read-only input every pattern generator receives."""

from __future__ import annotations

from dataclasses import dataclass, field

from sigil.engine.seed import clean_name, derive_seed

VOWELS = frozenset("AEIOU")

# Share of the smaller canvas side a constellation may reach from the centre.
MAX_RADIUS_FRACTION = 0.38


@dataclass(frozen=True)
class PatternContext:
    """Cleaned letters plus canvas geometry and seed for one generation pass."""

    # Cleaned, uppercased A–Z sequence in typed order (duplicates retained)
    letters: str
    center_x: float
    center_y: float
    max_radius: float
    seed: int
    width: float
    height: float
    # First-occurrence order of each distinct letter
    unique_letters: str = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "unique_letters", "".join(dict.fromkeys(self.letters)))

    @classmethod
    def from_name(cls, name: str, width: float, height: float) -> PatternContext:
        return cls(
            letters=clean_name(name),
            center_x=width / 2,
            center_y=height / 2,
            max_radius=min(width, height) * MAX_RADIUS_FRACTION,
            seed=derive_seed(name),
            width=width,
            height=height,
        )

    @property
    def num_points(self) -> int:
        return len(self.unique_letters)

    def index_of(self, letter: str) -> int:
        """Point index of a letter (its first-occurrence rank)."""
        return self.unique_letters.index(letter)

    def first_occurrence(self, letter: str) -> int:
        """Position of the letter's first appearance in the typed sequence."""
        return self.letters.index(letter)

    def typed_indices(self) -> list[int]:
        """Point index for every typed letter, repeats included."""
        return [self.index_of(ch) for ch in self.letters]


def is_vowel(letter: str) -> bool:
    return letter in VOWELS
