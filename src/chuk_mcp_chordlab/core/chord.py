"""
Chord primitives - ChordQuality, Chord, RomanNumeral.

Chords are a root pitch class plus a quality; the quality fixes the
interval set. Roman numerals are key-independent chord references that
resolve to concrete chords once a key is supplied.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .pitch import FLAT_SIGNS, SHARP_SIGNS, Accidental, Interval, PitchClass
from .scale import Key, ScaleDegree

# Interval sets in semitones from the root (module level to avoid Enum member issues)
_QUALITY_INTERVALS: dict[str, tuple[int, ...]] = {
    "major": (0, 4, 7),
    "minor": (0, 3, 7),
    "diminished": (0, 3, 6),
    "augmented": (0, 4, 8),
    "dominant7": (0, 4, 7, 10),
    "major7": (0, 4, 7, 11),
    "minor7": (0, 3, 7, 10),
    "half_diminished7": (0, 3, 6, 10),
    "diminished7": (0, 3, 6, 9),
}

# Canonical symbol suffixes
_QUALITY_SYMBOLS: dict[str, str] = {
    "major": "",
    "minor": "m",
    "diminished": "°",
    "augmented": "+",
    "dominant7": "7",
    "major7": "maj7",
    "minor7": "m7",
    "half_diminished7": "ø7",
    "diminished7": "°7",
}

_QUALITY_NAMES: dict[str, str] = {
    "major": "Major",
    "minor": "Minor",
    "diminished": "Diminished",
    "augmented": "Augmented",
    "dominant7": "Dominant 7th",
    "major7": "Major 7th",
    "minor7": "Minor 7th",
    "half_diminished7": "Half-Diminished 7th",
    "diminished7": "Diminished 7th",
}


class ChordQuality(str, Enum):
    """The closed set of chord qualities."""

    MAJOR = "major"
    MINOR = "minor"
    DIMINISHED = "diminished"
    AUGMENTED = "augmented"
    DOMINANT_7 = "dominant7"
    MAJOR_7 = "major7"
    MINOR_7 = "minor7"
    HALF_DIMINISHED_7 = "half_diminished7"
    DIMINISHED_7 = "diminished7"

    @property
    def semitones(self) -> tuple[int, ...]:
        """Semitones from the root, ascending, starting with 0."""
        return _QUALITY_INTERVALS[self.value]

    @property
    def intervals(self) -> tuple[Interval, ...]:
        return tuple(Interval(s) for s in self.semitones)

    @property
    def symbol(self) -> str:
        """Suffix used in chord symbols ('' for major, 'm7' for minor 7, ...)."""
        return _QUALITY_SYMBOLS[self.value]

    @property
    def display_name(self) -> str:
        return _QUALITY_NAMES[self.value]

    @property
    def is_minor_family(self) -> bool:
        """Minor and minor 7 - written as lower-case Roman numerals."""
        return self in (ChordQuality.MINOR, ChordQuality.MINOR_7)

    @property
    def is_diminished_family(self) -> bool:
        """Qualities written with a degree sign in Roman numerals."""
        return self in (
            ChordQuality.DIMINISHED,
            ChordQuality.DIMINISHED_7,
            ChordQuality.HALF_DIMINISHED_7,
        )

    @property
    def is_seventh(self) -> bool:
        return len(self.semitones) == 4

    def __str__(self) -> str:
        return self.display_name

    @classmethod
    def from_semitones(cls, semitones: tuple[int, ...]) -> ChordQuality | None:
        """Find the quality with exactly these root-relative semitones, if any."""
        for quality in cls:
            if quality.semitones == semitones:
                return quality
        return None


@dataclass(frozen=True)
class Chord:
    """
    A concrete chord: root pitch class plus quality.

    prefer_flats only steers how the root is spelled when the chord is
    rendered; it takes no part in equality or hashing, so 'C#' and 'Db'
    parse to equal chords.
    """

    root: PitchClass
    quality: ChordQuality = ChordQuality.MAJOR
    prefer_flats: bool = field(default=False, compare=False)

    def get_pitches(self) -> list[PitchClass]:
        """Chord tones in chord-tone order (root, third, fifth, seventh)."""
        return [self.root.transpose(s) for s in self.quality.semitones]

    def note_set(self) -> list[PitchClass]:
        """Unique chord tones sorted by pitch-class value."""
        return sorted(set(self.get_pitches()))

    def note_names(self, prefer_flats: bool | None = None) -> list[str]:
        """Spelled chord tones in chord-tone order."""
        flats = self.prefer_flats if prefer_flats is None else prefer_flats
        return [p.spell(prefer_flats=flats) for p in self.get_pitches()]

    def get_midi_notes(self, octave: int = 4) -> list[int]:
        """
        MIDI note numbers of a close root-position voicing.

        Args:
            octave: Octave for the root (default 4)

        Returns:
            List of MIDI note numbers, ascending
        """
        root_midi = self.root.to_midi(octave)
        return [root_midi + s for s in self.quality.semitones]

    def contains(self, pitch: PitchClass) -> bool:
        return pitch in self.get_pitches()

    def transpose(self, semitones: int) -> Chord:
        return Chord(self.root.transpose(semitones), self.quality, self.prefer_flats)

    def __str__(self) -> str:
        return f"{self.root.spell(prefer_flats=self.prefer_flats)}{self.quality.symbol}"


_NUMERALS: tuple[str, ...] = ("I", "II", "III", "IV", "V", "VI", "VII")


@dataclass(frozen=True)
class RomanNumeral:
    """
    A key-independent chord reference.

    Roman numerals describe chords relative to a key:
    - I, ii, iii, IV, V, vi, vii° in major
    - i, ii°, III, iv, v, VI, VII in minor
    - ♭VII, ♭III, ... for chords borrowed from outside the scale

    The alteration is applied to the major-scale degree, so ♭III in any
    key is the chord three semitones above the tonic.
    """

    degree: ScaleDegree
    quality: ChordQuality = ChordQuality.MAJOR

    def semitones_from_tonic(self) -> int:
        major_offsets = (0, 2, 4, 5, 7, 9, 11)
        return major_offsets[self.degree.degree - 1] + self.degree.alteration

    def resolve(self, key: Key) -> Chord:
        """
        Resolve this Roman numeral to a concrete chord in a key.

        Unaltered numerals take their root from the key's own scale, so
        'III' in A minor is C. Altered numerals are measured from the tonic,
        and flattened ones are spelled with flats.
        """
        if self.degree.alteration == 0:
            root = key.degree_to_pitch(self.degree)
        else:
            root = key.root.transpose(self.semitones_from_tonic())
        prefer_flats = key.prefers_flats or self.degree.alteration < 0
        return Chord(root, self.quality, prefer_flats)

    def __str__(self) -> str:
        base = _NUMERALS[self.degree.degree - 1]
        if self.quality.is_minor_family or self.quality.is_diminished_family:
            base = base.lower()

        if self.quality == ChordQuality.DIMINISHED:
            base += "°"
        elif self.quality == ChordQuality.DIMINISHED_7:
            base += "°7"
        elif self.quality == ChordQuality.HALF_DIMINISHED_7:
            base += "ø7"
        elif self.quality == ChordQuality.AUGMENTED:
            base += "+"
        elif self.quality in (ChordQuality.DOMINANT_7, ChordQuality.MINOR_7):
            base += "7"
        elif self.quality == ChordQuality.MAJOR_7:
            base += "maj7"

        if self.degree.alteration < 0:
            base = Accidental.FLAT.glyph * -self.degree.alteration + base
        elif self.degree.alteration > 0:
            base = Accidental.SHARP.glyph * self.degree.alteration + base
        return base

    @classmethod
    def parse(cls, symbol: str) -> RomanNumeral:
        """
        Parse a Roman numeral like 'I', 'ii', 'V7', 'vii°', 'bVII', '♭III', 'Imaj7'.

        Case gives the triad quality; the suffix refines it.
        """
        text = symbol.strip()

        alteration = 0
        while text and (text[0] in FLAT_SIGNS or text[0] in SHARP_SIGNS):
            alteration += -1 if text[0] in FLAT_SIGNS else 1
            text = text[1:]

        numeral_chars = ""
        for char in text:
            if char.upper() in "IV":
                numeral_chars += char
            else:
                break
        suffix = text[len(numeral_chars) :]

        if numeral_chars.upper() not in _NUMERALS:
            raise ValueError(f"Unknown Roman numeral: {symbol}")
        if not (numeral_chars.isupper() or numeral_chars.islower()):
            raise ValueError(f"Mixed-case Roman numeral: {symbol}")

        degree = ScaleDegree(_NUMERALS.index(numeral_chars.upper()) + 1, alteration)
        is_lower = numeral_chars.islower()
        suffix_lower = suffix.lower()

        if suffix in ("ø", "ø7") or suffix_lower == "m7b5":
            quality = ChordQuality.HALF_DIMINISHED_7
        elif suffix == "°7" or suffix_lower in ("o7", "dim7"):
            quality = ChordQuality.DIMINISHED_7
        elif suffix == "°" or suffix_lower in ("o", "dim"):
            quality = ChordQuality.DIMINISHED
        elif suffix == "+" or suffix_lower == "aug":
            quality = ChordQuality.AUGMENTED
        elif suffix_lower in ("maj7", "δ7", "δ"):
            quality = ChordQuality.MAJOR_7
        elif suffix == "7":
            quality = ChordQuality.MINOR_7 if is_lower else ChordQuality.DOMINANT_7
        elif suffix == "":
            quality = ChordQuality.MINOR if is_lower else ChordQuality.MAJOR
        else:
            raise ValueError(f"Unknown Roman numeral suffix: {symbol}")

        return cls(degree, quality)
