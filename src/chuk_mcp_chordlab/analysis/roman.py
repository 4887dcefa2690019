"""
Roman-numeral and function analyzer - places a chord within a key.

A chord whose root is in the key's scale gets that degree's numeral and
function. Any other root is named by its distance from the tonic
(♭II, ♭III, ♭V, ♭VI, ♭VII, ...) and classed as chromatic. Everything is
decided on pitch-class values, so enharmonic spellings analyze alike.
"""

from __future__ import annotations

from chuk_mcp_chordlab.analysis.diatonic import diatonic_sevenths, diatonic_triads, is_diatonic
from chuk_mcp_chordlab.analysis.voice_leading import voice_leading_options
from chuk_mcp_chordlab.constants import DEGREE_FUNCTIONS, ChordFunction
from chuk_mcp_chordlab.core.chord import Chord, ChordQuality, RomanNumeral
from chuk_mcp_chordlab.core.scale import Key, ScaleDegree
from chuk_mcp_chordlab.models.analysis import ChordAnalysis, RomanNumeralResult

NUMERALS: tuple[str, ...] = ("I", "II", "III", "IV", "V", "VI", "VII")

# Semitones above the tonic -> (accidental, numeral) for roots outside the scale
CHROMATIC_NUMERALS: dict[int, tuple[str, str]] = {
    0: ("", "I"),
    1: ("♭", "II"),
    2: ("", "II"),
    3: ("♭", "III"),
    4: ("", "III"),
    5: ("", "IV"),
    6: ("♭", "V"),
    7: ("", "V"),
    8: ("♭", "VI"),
    9: ("", "VI"),
    10: ("♭", "VII"),
    11: ("", "VII"),
}

# Upper-cased numeral text -> function
_NUMERAL_FUNCTIONS: dict[str, ChordFunction] = {
    "I": ChordFunction.TONIC,
    "IMAJ7": ChordFunction.TONIC,
    "II": ChordFunction.SUPERTONIC,
    "II7": ChordFunction.SUPERTONIC,
    "IIM7": ChordFunction.SUPERTONIC,
    "III": ChordFunction.MEDIANT,
    "III7": ChordFunction.MEDIANT,
    "IIIM7": ChordFunction.MEDIANT,
    "IV": ChordFunction.SUBDOMINANT,
    "IVMAJ7": ChordFunction.SUBDOMINANT,
    "V": ChordFunction.DOMINANT,
    "V7": ChordFunction.DOMINANT,
    "VI": ChordFunction.SUBMEDIANT,
    "VI7": ChordFunction.SUBMEDIANT,
    "VIM7": ChordFunction.SUBMEDIANT,
    "VII": ChordFunction.LEADING_TONE,
    "VII°": ChordFunction.LEADING_TONE,
    "VIIØ7": ChordFunction.LEADING_TONE,
}

_COMMON_PROGRESSIONS: dict[str, tuple[str, ...]] = {
    "I": ("I - IV - V - I", "I - vi - IV - V", "I - V - vi - IV"),
    "II": ("ii - V - I", "I - ii - V", "IV - ii - V - I"),
    "IV": ("IV - V - I", "I - IV - I", "IV - iv - I"),
    "V": ("V - I", "ii - V - I", "IV - V - I"),
    "VI": ("vi - IV - I - V", "I - V - vi - IV", "vi - ii - V - I"),
}


def _apply_quality(numeral: str, quality: ChordQuality) -> str:
    """Lower-case minor and diminished chords; mark diminished ones with °."""
    if quality.is_minor_family:
        return numeral.lower()
    if quality.is_diminished_family:
        return numeral.lower() + "°"
    return numeral


def analyze_chord(chord: Chord, key: Key) -> RomanNumeralResult:
    """
    Roman numeral and harmonic function of a chord in a key.

    Args:
        chord: The chord to place
        key: The key context

    Returns:
        RomanNumeralResult, e.g. ('V', dominant) for G in C major or
        ('♭III', chromatic) for Eb in C major
    """
    degree = key.pitch_to_degree(chord.root)
    if degree is not None:
        index = degree.degree - 1
        return RomanNumeralResult(
            numeral=_apply_quality(NUMERALS[index], chord.quality),
            function=DEGREE_FUNCTIONS[index],
            degree=degree.degree,
            is_diatonic=True,
        )

    accidental, numeral = CHROMATIC_NUMERALS[key.root.interval_to(chord.root).semitones]
    return RomanNumeralResult(
        numeral=accidental + _apply_quality(numeral, chord.quality),
        function=ChordFunction.CHROMATIC,
    )


def function_for_numeral(numeral: str) -> ChordFunction:
    """
    Harmonic function implied by a numeral string such as 'V7' or 'vii°'.

    Numerals with an accidental, or not in the table, are chromatic.
    """
    return _NUMERAL_FUNCTIONS.get(numeral.strip().upper(), ChordFunction.CHROMATIC)


def common_progressions(numeral: str) -> list[str]:
    """Well-known progressions that feature the given numeral."""
    return list(_COMMON_PROGRESSIONS.get(numeral.strip().upper(), ()))


def get_diatonic_chords(key: Key, sevenths: bool = False) -> list[tuple[str, Chord]]:
    """
    All diatonic chords for a key with their Roman numerals.

    Args:
        key: The key
        sevenths: Return seventh chords instead of triads

    Returns:
        List of (roman numeral string, chord) tuples, degree I first
    """
    chords = diatonic_sevenths(key) if sevenths else diatonic_triads(key)
    return [
        (str(RomanNumeral(ScaleDegree(i + 1), chord.quality)), chord)
        for i, chord in enumerate(chords)
    ]


def resolve_numerals(numerals: list[str], key: Key) -> list[Chord]:
    """Resolve numeral strings like ['ii7', 'V7', 'Imaj7'] to chords in a key."""
    return [RomanNumeral.parse(numeral).resolve(key) for numeral in numerals]


def describe_chord(chord: Chord, key: Key) -> ChordAnalysis:
    """
    Everything the analyzer knows about one chord in a key.

    Includes the numeral, function, whether the chord is diatonic, a few
    common progressions through it, and voice leading to each diatonic
    triad of the key.
    """
    result = analyze_chord(chord, key)
    return ChordAnalysis(
        chord=chord,
        key=str(key),
        roman_numeral=result.numeral,
        function=result.function,
        is_in_key=is_diatonic(chord, key),
        note_names=chord.note_names(prefer_flats=chord.prefer_flats or key.prefers_flats),
        common_progressions=common_progressions(result.numeral),
        voice_leading=voice_leading_options(chord, diatonic_triads(key)),
    )
