#!/usr/bin/env python3
"""
Example: Analyzing chords and progressions.

Walks through the theory core: diatonic chords of a key, Roman numeral
analysis, voice leading between chords, and full progression analysis
of the bundled example library.

Usage:
    python examples/analyze_progressions.py
"""

from pathlib import Path

from chuk_mcp_chordlab.analysis import (
    analyze_chord,
    analyze_progression,
    get_diatonic_chords,
    suggest_next_chords,
    voice_leading_options,
)
from chuk_mcp_chordlab.core import Key, parse_chord
from chuk_mcp_chordlab.progressions import ProgressionLibrary


def main() -> None:
    """Demonstrate chord and progression analysis."""
    print("CHUK Chord Lab Demo")
    print("=" * 40)
    print()

    key = Key.parse("C_major")

    print(f"Diatonic chords in {key}:")
    for numeral, chord in get_diatonic_chords(key):
        print(f"  {numeral:>5}  {chord}")
    print()

    print(f"Chords placed in {key}:")
    for symbol in ["G", "Eb", "B°", "Dm7"]:
        result = analyze_chord(parse_chord(symbol), key)
        print(f"  {symbol:>4} -> {result.numeral} ({result.function.display_name})")
    print()

    print("Voice leading from C:")
    candidates = [parse_chord(s) for s in ["Am", "G", "F"]]
    for option in voice_leading_options(parse_chord("C"), candidates):
        print(
            f"  {option.target}: {option.common_tone_count} common, "
            f"{option.total_movement} semitones - {option.description}"
        )
    print()

    library_path = Path(__file__).parent.parent / "src/chuk_mcp_chordlab/progressions/library"
    library = ProgressionLibrary(library_path=library_path)

    print("Example progressions:")
    for example in library.list_examples():
        example_key = example.get_key()
        chords = example.get_chords()
        analysis = analyze_progression(chords, example_key)
        cadence = analysis.cadence.value if analysis.cadence else "none"
        print(f"  {example.title} in {example_key}")
        print(f"    Chords:   {' '.join(example.chords)}")
        print(f"    Numerals: {' '.join(analysis.roman_numerals)}")
        print(f"    Pattern:  {analysis.pattern.display_name}, cadence: {cadence}")
        next_chords = suggest_next_chords(chords, example_key, limit=3)
        print(f"    Try next: {', '.join(str(c) for c in next_chords)}")
    print()


if __name__ == "__main__":
    main()
