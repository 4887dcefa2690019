"""
Harmonic analysis over an explicit key.

All functions are pure: they read only their arguments and return fresh
values, so they are safe to call from any thread.

- diatonic - Diatonic triads and seventh chords of a key
- roman - Roman numerals, harmonic functions, chord descriptions
- voice_leading - Common tones and movement between chords
- progression - Patterns, cadences, suggestions for chord sequences
"""

from chuk_mcp_chordlab.analysis.diatonic import (
    diatonic_sevenths,
    diatonic_triads,
    is_diatonic,
)
from chuk_mcp_chordlab.analysis.progression import (
    analyze_progression,
    analyze_symbols,
    annotate_progression,
    identify_cadence,
    identify_pattern,
    identify_patterns,
    suggest_next_chords,
)
from chuk_mcp_chordlab.analysis.roman import (
    analyze_chord,
    common_progressions,
    describe_chord,
    function_for_numeral,
    get_diatonic_chords,
    resolve_numerals,
)
from chuk_mcp_chordlab.analysis.voice_leading import (
    calculate_voice_leading,
    voice_leading_options,
)

__all__ = [
    # Diatonic
    "diatonic_triads",
    "diatonic_sevenths",
    "is_diatonic",
    # Roman numerals
    "analyze_chord",
    "function_for_numeral",
    "common_progressions",
    "get_diatonic_chords",
    "resolve_numerals",
    "describe_chord",
    # Voice leading
    "calculate_voice_leading",
    "voice_leading_options",
    # Progressions
    "analyze_progression",
    "analyze_symbols",
    "annotate_progression",
    "identify_pattern",
    "identify_patterns",
    "identify_cadence",
    "suggest_next_chords",
]
