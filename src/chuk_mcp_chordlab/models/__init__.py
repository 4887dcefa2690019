"""
Pydantic models for analysis results and the example library.

This module provides:
- RomanNumeralResult: Numeral and function of a chord in a key
- VoiceLeadingOption: Cost of moving to a candidate chord
- ChordAnalysis: Everything known about one chord in a key
- ProgressionAnalysis: Numerals, pattern and cadence of a sequence
- ProgressionChord: A chord annotated for display
- ExampleProgression: A named progression from the library
"""

from chuk_mcp_chordlab.models.analysis import (
    ChordAnalysis,
    ProgressionAnalysis,
    ProgressionChord,
    RomanNumeralResult,
    VoiceLeadingOption,
)
from chuk_mcp_chordlab.models.library import ExampleProgression

__all__ = [
    "ChordAnalysis",
    "ExampleProgression",
    "ProgressionAnalysis",
    "ProgressionChord",
    "RomanNumeralResult",
    "VoiceLeadingOption",
]
