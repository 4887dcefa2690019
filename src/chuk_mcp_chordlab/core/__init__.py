"""
Core music primitives.

The value types everything else composes on:
- PitchClass: The 12 chromatic pitch classes (0-11)
- Accidental: Sharp/flat spelling preference
- Interval: Distance between pitches in semitones
- ScaleDegree: Position in a scale (1-7)
- ScaleType: Step pattern defining a scale
- Key: Root + scale type, the context for all analysis
- ChordQuality: Interval sets defining chord types
- Chord: Concrete chord with root and quality
- RomanNumeral: Key-independent chord references
- parse_chord / format_chord: The chord symbol codec
"""

from chuk_mcp_chordlab.core.chord import Chord, ChordQuality, RomanNumeral
from chuk_mcp_chordlab.core.codec import (
    ChordParseError,
    format_chord,
    parse_chord,
    try_parse_chord,
)
from chuk_mcp_chordlab.core.pitch import Accidental, Interval, PitchClass, circular_distance
from chuk_mcp_chordlab.core.scale import Key, ScaleDegree, ScaleType

__all__ = [
    # Pitch
    "PitchClass",
    "Accidental",
    "Interval",
    "circular_distance",
    # Scale
    "ScaleDegree",
    "ScaleType",
    "Key",
    # Chord
    "ChordQuality",
    "Chord",
    "RomanNumeral",
    # Codec
    "ChordParseError",
    "parse_chord",
    "try_parse_chord",
    "format_chord",
]
