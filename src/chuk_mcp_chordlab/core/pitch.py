"""
Pitch primitives - PitchClass, Accidental and Interval.

PitchClass is the 12-value, octave-independent pitch model. Every
music-theoretic comparison in the package is made on its integer value;
spelling (C# vs Db) only matters when something is rendered as text.
"""

from __future__ import annotations

from enum import Enum, IntEnum

# Display name tables (module level to avoid IntEnum member issues)
_SHARP_NAMES: tuple[str, ...] = (
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
)
_FLAT_NAMES: tuple[str, ...] = (
    "C",
    "Db",
    "D",
    "Eb",
    "E",
    "F",
    "Gb",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
)

_LETTER_VALUES: dict[str, int] = {"C": 0, "D": 2, "E": 4, "F": 5, "G": 7, "A": 9, "B": 11}

SHARP_SIGNS = ("#", "♯")
FLAT_SIGNS = ("b", "♭")


class Accidental(str, Enum):
    """Accidental preference used to spell chromatic pitch classes."""

    SHARP = "sharp"
    FLAT = "flat"

    @property
    def glyph(self) -> str:
        """Unicode glyph for the accidental."""
        return "♯" if self is Accidental.SHARP else "♭"


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Enharmonic equivalents share one member (C# == Db == 1), so two
    pitch classes are interval-equal exactly when their values match.
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones (positive or negative)."""
        return PitchClass((self.value + semitones) % 12)

    def interval_to(self, other: PitchClass) -> Interval:
        """Get the ascending interval from this pitch class to another."""
        return Interval((other.value - self.value) % 12)

    def to_midi(self, octave: int = 4) -> int:
        """Convert to MIDI note number. C4 = 60."""
        return self.value + (octave + 1) * 12

    def spell(self, prefer_flats: bool = False) -> str:
        """Get the display name, using flats or sharps for black keys."""
        names = _FLAT_NAMES if prefer_flats else _SHARP_NAMES
        return names[self.value]

    @classmethod
    def from_midi(cls, midi_note: int) -> PitchClass:
        """Extract pitch class from MIDI note number."""
        return cls(midi_note % 12)

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """
        Parse a pitch class from a name like 'C', 'C#', 'Db', 'B♭' or 'Cs'.

        A single accidental is allowed after the letter. Spellings outside
        the usual twelve (Cb, E#, Fb, B#) resolve by pitch class.
        """
        name = name.strip()
        if not name:
            raise ValueError("Empty pitch class name")

        letter = name[0].upper()
        if letter not in _LETTER_VALUES:
            raise ValueError(f"Unknown pitch class: {name}")

        rest = name[1:]
        if rest == "":
            return cls(_LETTER_VALUES[letter])
        if rest in SHARP_SIGNS or rest.lower() == "s":
            return cls((_LETTER_VALUES[letter] + 1) % 12)
        if rest in FLAT_SIGNS:
            return cls((_LETTER_VALUES[letter] - 1) % 12)

        raise ValueError(f"Unknown pitch class: {name}")


def is_flat_sign(char: str) -> bool:
    """True if the character is a flat accidental."""
    return char in FLAT_SIGNS


def is_accidental(char: str) -> bool:
    """True if the character is a sharp or flat accidental."""
    return char in SHARP_SIGNS or char in FLAT_SIGNS


def circular_distance(a: PitchClass, b: PitchClass) -> int:
    """Shortest distance between two pitch classes around the octave (0-6)."""
    distance = abs(a.value - b.value)
    return min(distance, 12 - distance)


_SHORT_NAMES: dict[int, str] = {
    0: "P1",
    1: "m2",
    2: "M2",
    3: "m3",
    4: "M3",
    5: "P4",
    6: "TT",
    7: "P5",
    8: "m6",
    9: "M6",
    10: "m7",
    11: "M7",
    12: "P8",
}

_LONG_NAMES: dict[int, str] = {
    0: "Unison",
    1: "Minor 2nd",
    2: "Major 2nd",
    3: "Minor 3rd",
    4: "Major 3rd",
    5: "Perfect 4th",
    6: "Tritone",
    7: "Perfect 5th",
    8: "Minor 6th",
    9: "Major 6th",
    10: "Minor 7th",
    11: "Major 7th",
    12: "Octave",
}


class Interval:
    """
    Distance between pitches in semitones.

    Scales are interval patterns, chord qualities are interval sets.
    Immutable and hashable; intervals compare by semitone count.
    """

    __slots__ = ("_semitones",)
    _semitones: int

    def __init__(self, semitones: int) -> None:
        object.__setattr__(self, "_semitones", semitones)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Interval is immutable")

    @property
    def semitones(self) -> int:
        """Number of semitones in this interval."""
        return self._semitones

    @property
    def name(self) -> str:
        """Long name, e.g. 'Minor 3rd'."""
        return _LONG_NAMES.get(self._semitones, f"{self._semitones} semitones")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self._semitones == other._semitones

    def __hash__(self) -> int:
        return hash(self._semitones)

    def __repr__(self) -> str:
        return f"Interval({self._semitones})"

    def __str__(self) -> str:
        if 0 <= self._semitones <= 12:
            return _SHORT_NAMES[self._semitones]
        mod = self._semitones % 12
        octaves = self._semitones // 12
        return f"{_SHORT_NAMES[mod]}+{octaves}oct" if octaves > 0 else f"{_SHORT_NAMES[mod]}{octaves}oct"
