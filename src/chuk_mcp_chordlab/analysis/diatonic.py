"""
Diatonic chord generator - triads and sevenths built from a key's scale.

Chords are built by stacking scale thirds on each degree; the quality is
read off the resulting intervals. Major keys also have a precomputed
table that returns the same chords without the stacking work.
"""

from __future__ import annotations

from chuk_mcp_chordlab.core.chord import Chord, ChordQuality
from chuk_mcp_chordlab.core.pitch import PitchClass
from chuk_mcp_chordlab.core.scale import Key, ScaleType

# Seventh stacks outside the closed quality set (minor-major 7, augmented-major 7)
# fall back to the quality implied by the triad.
_SEVENTH_FALLBACK: dict[ChordQuality, ChordQuality] = {
    ChordQuality.MAJOR: ChordQuality.MAJOR_7,
    ChordQuality.MINOR: ChordQuality.MINOR_7,
    ChordQuality.DIMINISHED: ChordQuality.HALF_DIMINISHED_7,
    ChordQuality.AUGMENTED: ChordQuality.AUGMENTED,
}

# Degree qualities of every major key, I..VII
MAJOR_TRIAD_QUALITIES: tuple[ChordQuality, ...] = (
    ChordQuality.MAJOR,
    ChordQuality.MINOR,
    ChordQuality.MINOR,
    ChordQuality.MAJOR,
    ChordQuality.MAJOR,
    ChordQuality.MINOR,
    ChordQuality.DIMINISHED,
)
MAJOR_SEVENTH_QUALITIES: tuple[ChordQuality, ...] = (
    ChordQuality.MAJOR_7,
    ChordQuality.MINOR_7,
    ChordQuality.MINOR_7,
    ChordQuality.MAJOR_7,
    ChordQuality.DOMINANT_7,
    ChordQuality.MINOR_7,
    ChordQuality.HALF_DIMINISHED_7,
)

_MAJOR_DEGREE_OFFSETS: tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)


def _build_major_table(qualities: tuple[ChordQuality, ...]) -> dict[PitchClass, tuple[Chord, ...]]:
    table: dict[PitchClass, tuple[Chord, ...]] = {}
    for root in PitchClass:
        flats = Key(root, ScaleType.MAJOR).prefers_flats
        table[root] = tuple(
            Chord(root.transpose(offset), quality, flats)
            for offset, quality in zip(_MAJOR_DEGREE_OFFSETS, qualities, strict=True)
        )
    return table


# Read-only lookup tables, built once at import
_MAJOR_TRIADS = _build_major_table(MAJOR_TRIAD_QUALITIES)
_MAJOR_SEVENTHS = _build_major_table(MAJOR_SEVENTH_QUALITIES)


def _stack(key: Key, degree_index: int, size: int) -> tuple[int, ...]:
    """Semitones above the degree's root of a stack of `size` scale thirds."""
    pitches = key.get_pitches()
    root = pitches[degree_index]
    return tuple(
        root.interval_to(pitches[(degree_index + 2 * n) % 7]).semitones for n in range(size)
    )


def triad_quality(key: Key, degree_index: int) -> ChordQuality:
    """
    Quality of the triad on a scale degree (0-based).

    Seven-note scales only produce thirds of 3 or 4 semitones, so every
    stack lands on major, minor, diminished or augmented.
    """
    quality = ChordQuality.from_semitones(_stack(key, degree_index, 3))
    if quality is None:
        raise ValueError(f"No triad quality for degree {degree_index + 1} of {key}")
    return quality


def seventh_quality(key: Key, degree_index: int) -> ChordQuality:
    """Quality of the seventh chord on a scale degree (0-based)."""
    quality = ChordQuality.from_semitones(_stack(key, degree_index, 4))
    if quality is not None:
        return quality
    return _SEVENTH_FALLBACK[triad_quality(key, degree_index)]


def diatonic_triads(key: Key, use_fast_path: bool = True) -> list[Chord]:
    """
    The seven diatonic triads of a key, degree I first.

    Args:
        key: The key
        use_fast_path: Use the precomputed table for major keys

    Returns:
        Seven chords, spelled with the key's preferred accidental
    """
    if use_fast_path and key.scale is ScaleType.MAJOR:
        return list(_MAJOR_TRIADS[key.root])

    flats = key.prefers_flats
    return [
        Chord(root, triad_quality(key, i), flats) for i, root in enumerate(key.get_pitches())
    ]


def diatonic_sevenths(key: Key, use_fast_path: bool = True) -> list[Chord]:
    """
    The seven diatonic seventh chords of a key, degree I first.

    In major this gives Imaj7 ii7 iii7 IVmaj7 V7 vi7 viiø7; harmonic minor
    produces a fully diminished vii°7.
    """
    if use_fast_path and key.scale is ScaleType.MAJOR:
        return list(_MAJOR_SEVENTHS[key.root])

    flats = key.prefers_flats
    return [
        Chord(root, seventh_quality(key, i), flats) for i, root in enumerate(key.get_pitches())
    ]


def is_diatonic(chord: Chord, key: Key) -> bool:
    """True if the chord is one of the key's diatonic triads or seventh chords."""
    return chord in diatonic_triads(key) or chord in diatonic_sevenths(key)
