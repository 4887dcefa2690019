"""
Scale primitives - ScaleDegree, ScaleType, Key.

Scales are step patterns from a root. A key is a scale type applied to a
root pitch class; it is the explicit musical context every analysis
function receives.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .pitch import Accidental, Interval, PitchClass


@dataclass(frozen=True)
class ScaleDegree:
    """
    A scale degree with optional alteration.

    Degree is 1-7 (tonic to leading tone).
    Alteration is semitones: -1 = flat, +1 = sharp, 0 = natural.

    Examples:
        ScaleDegree(1) = tonic
        ScaleDegree(7, -1) = flat 7
    """

    degree: int  # 1-7
    alteration: int = 0

    def __post_init__(self) -> None:
        if not 1 <= self.degree <= 7:
            raise ValueError(f"Degree must be 1-7, got {self.degree}")

    def __str__(self) -> str:
        if self.alteration > 0:
            return "#" * self.alteration + str(self.degree)
        if self.alteration < 0:
            return "b" * -self.alteration + str(self.degree)
        return str(self.degree)


# Whole/half step patterns, degree to degree (module level to avoid Enum member issues)
_STEPS: dict[str, tuple[int, ...]] = {
    "major": (2, 2, 1, 2, 2, 2, 1),
    "natural_minor": (2, 1, 2, 2, 1, 2, 2),
    "harmonic_minor": (2, 1, 2, 2, 1, 3, 1),
    "melodic_minor": (2, 1, 2, 2, 2, 2, 1),
    "dorian": (2, 1, 2, 2, 2, 1, 2),
    "phrygian": (1, 2, 2, 2, 1, 2, 2),
    "lydian": (2, 2, 2, 1, 2, 2, 1),
    "mixolydian": (2, 2, 1, 2, 2, 1, 2),
    "locrian": (1, 2, 2, 1, 2, 2, 2),
}

# Semitones from the parent major tonic up to the mode's tonic.
# Harmonic and melodic minor borrow the natural minor key signature.
_PARENT_MAJOR_OFFSET: dict[str, int] = {
    "major": 0,
    "natural_minor": 9,
    "harmonic_minor": 9,
    "melodic_minor": 9,
    "dorian": 2,
    "phrygian": 4,
    "lydian": 5,
    "mixolydian": 7,
    "locrian": 11,
}

_DISPLAY_NAMES: dict[str, str] = {
    "major": "major",
    "natural_minor": "minor",
    "harmonic_minor": "harmonic minor",
    "melodic_minor": "melodic minor",
    "dorian": "dorian",
    "phrygian": "phrygian",
    "lydian": "lydian",
    "mixolydian": "mixolydian",
    "locrian": "locrian",
}

_SCALE_ALIASES: dict[str, str] = {
    "minor": "natural_minor",
    "naturalminor": "natural_minor",
    "aeolian": "natural_minor",
    "ionian": "major",
    "harmonicminor": "harmonic_minor",
    "melodicminor": "melodic_minor",
}

# Parent major keys written with flats: F, Bb, Eb, Ab, Db, Gb
FLAT_MAJOR_ROOTS: frozenset[PitchClass] = frozenset(
    {PitchClass.F, PitchClass.As, PitchClass.Ds, PitchClass.Gs, PitchClass.Cs, PitchClass.Fs}
)


class ScaleType(str, Enum):
    """The supported seven-note scales."""

    MAJOR = "major"
    NATURAL_MINOR = "natural_minor"
    HARMONIC_MINOR = "harmonic_minor"
    MELODIC_MINOR = "melodic_minor"
    DORIAN = "dorian"
    PHRYGIAN = "phrygian"
    LYDIAN = "lydian"
    MIXOLYDIAN = "mixolydian"
    LOCRIAN = "locrian"

    @property
    def steps(self) -> tuple[int, ...]:
        """Semitone steps from each degree to the next (sums to 12)."""
        return _STEPS[self.value]

    @property
    def intervals(self) -> tuple[Interval, ...]:
        """Intervals from the tonic to each of the seven degrees."""
        return tuple(Interval(s) for s in self.semitones_from_root)

    @property
    def semitones_from_root(self) -> tuple[int, ...]:
        """Cumulative semitones from the tonic, starting with 0."""
        total = 0
        offsets = [0]
        for step in self.steps[:-1]:
            total += step
            offsets.append(total)
        return tuple(offsets)

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self.value]

    def degree_to_semitones(self, degree: ScaleDegree) -> int:
        """Semitones from the root to a (possibly altered) scale degree."""
        return self.semitones_from_root[degree.degree - 1] + degree.alteration

    def get_pitches(self, root: PitchClass) -> list[PitchClass]:
        """The seven pitch classes of this scale, in degree order from root."""
        return [root.transpose(offset) for offset in self.semitones_from_root]

    def __str__(self) -> str:
        return self.display_name

    @classmethod
    def parse(cls, name: str) -> ScaleType:
        """Parse a scale name like 'major', 'minor', 'harmonic_minor', 'harmonicMinor'."""
        normalized = name.strip().lower().replace(" ", "_").replace("-", "_")
        normalized = _SCALE_ALIASES.get(normalized.replace("_", ""), normalized)
        normalized = _SCALE_ALIASES.get(normalized, normalized)
        try:
            return cls(normalized)
        except ValueError:
            raise ValueError(f"Unknown scale type: {name}") from None


@dataclass(frozen=True)
class Key:
    """
    A key is a root pitch class plus a scale type.

    Keys are plain values: equal keys produce equal results from every
    analysis function, so results may be cached per key by callers.

    Examples:
        Key(PitchClass.C, ScaleType.MAJOR) = C major
        Key(PitchClass.D, ScaleType.NATURAL_MINOR) = D minor
    """

    root: PitchClass
    scale: ScaleType = ScaleType.MAJOR

    def get_pitches(self) -> list[PitchClass]:
        """
        The scale notes of this key.

        Always seven pitch classes in degree order, the first being the root.
        """
        return self.scale.get_pitches(self.root)

    @property
    def parent_major_root(self) -> PitchClass:
        """Tonic of the major key sharing this key's signature."""
        return self.root.transpose(-_PARENT_MAJOR_OFFSET[self.scale.value])

    @property
    def preferred_accidental(self) -> Accidental:
        """Accidental used to spell chromatic notes in this key."""
        if self.parent_major_root in FLAT_MAJOR_ROOTS:
            return Accidental.FLAT
        return Accidental.SHARP

    @property
    def prefers_flats(self) -> bool:
        return self.preferred_accidental is Accidental.FLAT

    def spell(self, pitch: PitchClass) -> str:
        """Spell a pitch class with this key's preferred accidental."""
        return pitch.spell(prefer_flats=self.prefers_flats)

    def note_names(self) -> list[str]:
        """Spelled scale notes, e.g. ['F', 'G', 'A', 'Bb', 'C', 'D', 'E']."""
        return [self.spell(p) for p in self.get_pitches()]

    def contains(self, pitch: PitchClass) -> bool:
        return pitch in self.get_pitches()

    def degree_to_pitch(self, degree: ScaleDegree) -> PitchClass:
        """Resolve a scale degree to a pitch class."""
        return self.root.transpose(self.scale.degree_to_semitones(degree))

    def pitch_to_degree(self, pitch: PitchClass) -> ScaleDegree | None:
        """
        Get the scale degree for a pitch class, if it's in the scale.

        Returns None if the pitch is not in the scale.
        """
        pitches = self.get_pitches()
        if pitch in pitches:
            return ScaleDegree(pitches.index(pitch) + 1)
        return None

    def __str__(self) -> str:
        return f"{self.spell(self.root)} {self.scale.display_name}"

    def __repr__(self) -> str:
        return f"Key({self.root!r}, {self.scale!r})"

    @classmethod
    def parse(cls, name: str) -> Key:
        """
        Parse a key from a string like 'C_major', 'D_minor', 'F#_dorian' or 'Bb minor'.

        A bare root ('G') means the major key.
        """
        name = name.strip()
        parts = name.replace(" ", "_").split("_", 1)
        if not parts[0]:
            raise ValueError(f"Invalid key format: {name}. Expected 'root_scale' like 'C_major'")

        root = PitchClass.parse(parts[0])
        scale = ScaleType.parse(parts[1]) if len(parts) > 1 else ScaleType.MAJOR
        return cls(root, scale)
