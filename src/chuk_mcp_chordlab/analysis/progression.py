"""
Progression analyzer - numerals, named patterns and cadences.

Patterns and cadences are found by exact matching on the Roman-numeral
text produced by the function analyzer: a whole-progression lookup table,
a three-chord window scan for an embedded ii-V-I, and a lookup on the
last two numerals for the cadence. Numerals that differ only in
formatting (for example 'V7' against 'V') do not match each other.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from chuk_mcp_chordlab.analysis.diatonic import diatonic_triads, is_diatonic
from chuk_mcp_chordlab.analysis.roman import analyze_chord
from chuk_mcp_chordlab.constants import (
    BEATS_PER_BAR,
    CadenceType,
    HarmonicRhythm,
    ProgressionPattern,
)
from chuk_mcp_chordlab.core.chord import Chord
from chuk_mcp_chordlab.core.codec import try_parse_chord
from chuk_mcp_chordlab.core.scale import Key
from chuk_mcp_chordlab.models.analysis import ProgressionAnalysis, ProgressionChord

logger = logging.getLogger(__name__)

# Whole progressions, numerals joined with "-"
PATTERN_TABLE: dict[str, ProgressionPattern] = {
    "I-vi-IV-V": ProgressionPattern.POP_ROCK,
    "I-V-vi-IV": ProgressionPattern.POP_ROCK,
    "ii-V-I": ProgressionPattern.II_V_I,
    "I-IV-V": ProgressionPattern.BLUES,
}

# Three-chord windows that count as an embedded ii-V-I
II_V_I_WINDOWS: tuple[tuple[str, str, str], ...] = (
    ("ii", "V", "I"),
    ("ii7", "V7", "Imaj7"),
)

CADENCE_TABLE: dict[tuple[str, str], CadenceType] = {
    ("V", "I"): CadenceType.AUTHENTIC,
    ("V7", "I"): CadenceType.AUTHENTIC,
    ("IV", "I"): CadenceType.PLAGAL,
    ("V", "vi"): CadenceType.DECEPTIVE,
}

# Transitions for next-chord suggestions, by upper-cased numeral of the last chord
_NEXT_NUMERALS: dict[str, frozenset[str]] = {
    "I": frozenset({"II", "IV", "V", "VI"}),
    "V": frozenset({"I", "VI"}),
}


def identify_patterns(numerals: Sequence[str]) -> list[ProgressionPattern]:
    """
    Every named pattern found in a numeral sequence, whole-table match first.

    Returns an empty list when nothing matches.
    """
    patterns: list[ProgressionPattern] = []

    exact = PATTERN_TABLE.get("-".join(numerals))
    if exact is not None:
        patterns.append(exact)

    for i in range(len(numerals) - 2):
        window = tuple(numerals[i : i + 3])
        if window in II_V_I_WINDOWS and ProgressionPattern.II_V_I not in patterns:
            patterns.append(ProgressionPattern.II_V_I)

    return patterns


def identify_pattern(numerals: Sequence[str]) -> ProgressionPattern:
    """The primary pattern of a numeral sequence, or OTHER."""
    patterns = identify_patterns(numerals)
    return patterns[0] if patterns else ProgressionPattern.OTHER


def identify_cadence(numerals: Sequence[str]) -> CadenceType | None:
    """
    Cadence formed by the last two numerals.

    (V, I) and (V7, I) are authentic, (IV, I) plagal, (V, vi) deceptive;
    any other pair ending on V is a half cadence. Fewer than two chords,
    or any other ending, gives None.
    """
    if len(numerals) < 2:
        return None

    penultimate, final = numerals[-2], numerals[-1]
    cadence = CADENCE_TABLE.get((penultimate, final))
    if cadence is not None:
        return cadence
    if final == "V":
        return CadenceType.HALF
    return None


def harmonic_rhythm(chord_count: int) -> tuple[float, HarmonicRhythm]:
    """Chords per 4/4 bar and its classification (Dense above one per bar)."""
    per_bar = chord_count / float(BEATS_PER_BAR)
    return per_bar, HarmonicRhythm.DENSE if per_bar > 1.0 else HarmonicRhythm.REGULAR


def progression_complexity(chords: Sequence[Chord], key: Key) -> float:
    """
    Rough 0-1 complexity score.

    0.2 per distinct chord quality, plus 0.3 times the share of seventh
    chords, plus 0.5 times the share of non-diatonic chords, capped at 1.
    """
    if not chords:
        return 0.0

    count = len(chords)
    score = len({chord.quality for chord in chords}) * 0.2
    score += sum(1 for chord in chords if chord.quality.is_seventh) / count * 0.3
    score += sum(1 for chord in chords if not is_diatonic(chord, key)) / count * 0.5
    return min(round(score, 4), 1.0)


def analyze_progression(chords: Sequence[Chord], key: Key) -> ProgressionAnalysis:
    """
    Analyze an ordered chord sequence in a key.

    Args:
        chords: Chords in playing order
        key: The key context

    Returns:
        ProgressionAnalysis with numerals, pattern(s), cadence,
        harmonic rhythm and complexity
    """
    numerals = [analyze_chord(chord, key).numeral for chord in chords]
    patterns = identify_patterns(numerals)
    per_bar, rhythm = harmonic_rhythm(len(chords))

    return ProgressionAnalysis(
        chords=list(chords),
        roman_numerals=numerals,
        key=str(key),
        pattern=patterns[0] if patterns else ProgressionPattern.OTHER,
        patterns=patterns,
        cadence=identify_cadence(numerals),
        tonal_center=key.spell(key.root),
        harmonic_rhythm=rhythm,
        chords_per_bar=per_bar,
        complexity=progression_complexity(chords, key),
    )


def parse_symbols(symbols: Sequence[str]) -> list[Chord]:
    """Parse chord symbols, dropping (and logging) any without a root."""
    chords: list[Chord] = []
    for symbol in symbols:
        chord = try_parse_chord(symbol)
        if chord is None:
            logger.warning(f"Skipping unparseable chord symbol: {symbol!r}")
            continue
        chords.append(chord)
    return chords


def analyze_symbols(symbols: Sequence[str], key: Key) -> ProgressionAnalysis:
    """Analyze a progression given as chord symbols; unparseable symbols are skipped."""
    return analyze_progression(parse_symbols(symbols), key)


def suggest_next_chords(progression: Sequence[Chord], key: Key, limit: int = 6) -> list[Chord]:
    """
    Diatonic chords that commonly follow the end of a progression.

    An empty progression gets the key's first `limit` triads. After I the
    suggestions are ii, IV, V and vi; after V they are I and vi; after
    anything else, every diatonic triad.
    """
    triads = diatonic_triads(key)
    if not progression:
        return triads[:limit]

    last = analyze_chord(progression[-1], key).numeral.upper()
    targets = _NEXT_NUMERALS.get(last)
    if targets is None:
        return triads[:limit]

    suggestions = [c for c in triads if analyze_chord(c, key).numeral.upper() in targets]
    return suggestions[:limit]


def annotate_progression(
    chords: Sequence[Chord],
    key: Key,
    durations: Sequence[float] | None = None,
) -> list[ProgressionChord]:
    """
    Annotate each chord with its symbol, numeral, notes and function.

    Args:
        chords: Chords in playing order
        key: The key context
        durations: Beats per chord (default 1.0 each)

    Returns:
        One ProgressionChord per input chord
    """
    beats = list(durations) if durations is not None else [1.0] * len(chords)
    if len(beats) != len(chords):
        raise ValueError(f"Expected {len(chords)} durations, got {len(beats)}")

    annotated = []
    for chord, duration in zip(chords, beats, strict=True):
        result = analyze_chord(chord, key)
        flats = chord.prefer_flats or key.prefers_flats
        annotated.append(
            ProgressionChord(
                chord_symbol=str(chord),
                roman_numeral=result.numeral,
                note_names=chord.note_names(prefer_flats=flats),
                function=result.function,
                duration=duration,
            )
        )
    return annotated
