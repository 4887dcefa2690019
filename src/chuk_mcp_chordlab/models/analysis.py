"""
Analysis result models.

Every analysis function returns one of these frozen pydantic models.
They hold plain values only, and `model_dump(mode="json")` renders
chords as their symbols so results can be handed straight to a JSON
encoder.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_serializer

from chuk_mcp_chordlab.constants import (
    CadenceType,
    ChordFunction,
    HarmonicRhythm,
    ProgressionPattern,
)
from chuk_mcp_chordlab.core.chord import Chord
from chuk_mcp_chordlab.core.pitch import PitchClass


class RomanNumeralResult(BaseModel):
    """A chord's Roman numeral and harmonic function within a key."""

    numeral: str = Field(..., description="Roman numeral, e.g. 'V', 'vi', 'vii°', '♭III'")
    function: ChordFunction = Field(..., description="Harmonic function")
    degree: int | None = Field(None, ge=1, le=7, description="Scale degree if diatonic root")
    is_diatonic: bool = Field(False, description="Root belongs to the key's scale")

    model_config = {"frozen": True}


class VoiceLeadingOption(BaseModel):
    """
    Voice-leading cost of moving from a fixed source chord to a target.

    total_movement pairs the i-th lowest pitch class of each chord; it is a
    ranking heuristic, not a minimal-cost assignment.
    """

    target: Chord = Field(..., description="Candidate target chord")
    common_tones: list[PitchClass] = Field(default_factory=list)
    common_tone_count: int = Field(0, ge=0)
    total_movement: int = Field(0, ge=0, description="Summed semitone movement")
    description: str = ""

    model_config = {"frozen": True}

    @field_serializer("target")
    def _serialize_target(self, target: Chord) -> str:
        return str(target)

    @field_serializer("common_tones")
    def _serialize_common_tones(self, tones: list[PitchClass]) -> list[str]:
        return [tone.spell(prefer_flats=self.target.prefer_flats) for tone in tones]


class ChordAnalysis(BaseModel):
    """Full analysis of one chord in a key."""

    chord: Chord
    key: str = Field(..., description="Key name, e.g. 'C major'")
    roman_numeral: str
    function: ChordFunction
    is_in_key: bool = Field(..., description="Chord is one of the key's diatonic chords")
    note_names: list[str] = Field(default_factory=list)
    common_progressions: list[str] = Field(default_factory=list)
    voice_leading: list[VoiceLeadingOption] = Field(default_factory=list)

    model_config = {"frozen": True}

    @field_serializer("chord")
    def _serialize_chord(self, chord: Chord) -> str:
        return str(chord)


class ProgressionAnalysis(BaseModel):
    """Roman numerals, pattern and cadence of an ordered chord sequence."""

    chords: list[Chord] = Field(default_factory=list)
    roman_numerals: list[str] = Field(default_factory=list)
    key: str = Field("C major", description="Key the progression was analyzed in")
    pattern: ProgressionPattern = ProgressionPattern.OTHER
    patterns: list[ProgressionPattern] = Field(
        default_factory=list, description="Every pattern detected, primary first"
    )
    cadence: CadenceType | None = None
    tonal_center: str = "C"
    harmonic_rhythm: HarmonicRhythm = HarmonicRhythm.REGULAR
    chords_per_bar: float = Field(0.0, ge=0.0)
    complexity: float = Field(0.0, ge=0.0, le=1.0)

    model_config = {"frozen": True}

    @field_serializer("chords")
    def _serialize_chords(self, chords: list[Chord]) -> list[str]:
        return [str(chord) for chord in chords]


class ProgressionChord(BaseModel):
    """A chord of a progression annotated for display or hand-off to storage."""

    chord_symbol: str = Field(..., description="e.g. 'Cmaj7'")
    roman_numeral: str = ""
    note_names: list[str] = Field(default_factory=list)
    function: ChordFunction = ChordFunction.CHROMATIC
    duration: float = Field(1.0, gt=0.0, description="Length in beats")

    model_config = {"frozen": True}
