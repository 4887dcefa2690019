"""
Voice-leading calculator - common tones and movement between two chords.

Movement pairs the chords' pitch classes in ascending order (lowest with
lowest, and so on) and sums the shortest distance of each pair around
the octave. Chord-tone roles are not tracked across the move, so the
figure ranks candidates rather than measuring an optimal voicing. When
the chords differ in size, the extra notes of the larger chord are not
counted.
"""

from __future__ import annotations

from collections.abc import Iterable

from chuk_mcp_chordlab.core.chord import Chord
from chuk_mcp_chordlab.core.pitch import PitchClass, circular_distance
from chuk_mcp_chordlab.models.analysis import VoiceLeadingOption


def common_tones(source: Chord, target: Chord) -> list[PitchClass]:
    """Pitch classes shared by both chords, ascending."""
    return sorted(set(source.note_set()) & set(target.note_set()))


def total_movement(source: Chord, target: Chord) -> int:
    """Summed semitone movement of the sorted pitch-class pairing."""
    return sum(
        circular_distance(a, b) for a, b in zip(source.note_set(), target.note_set(), strict=False)
    )


def describe_movement(common_tone_count: int, movement: int) -> str:
    """Human-readable band for a (common tones, movement) pair."""
    if common_tone_count >= 3:
        return "Same chord - no voice movement needed"
    if common_tone_count == 2:
        return "Very smooth - two common tones"
    if common_tone_count == 1:
        return "Smooth - one common tone"
    if movement <= 4:
        return "Stepwise motion - no common tones but close movement"
    if movement <= 8:
        return "Moderate movement - some leaps required"
    return "Large movement - significant leaps required"


def calculate_voice_leading(source: Chord, target: Chord) -> VoiceLeadingOption:
    """
    Voice-leading option for moving from source to target.

    Args:
        source: The chord being left
        target: The candidate chord

    Returns:
        VoiceLeadingOption with common tones, movement and description
    """
    shared = common_tones(source, target)
    movement = total_movement(source, target)
    return VoiceLeadingOption(
        target=target,
        common_tones=shared,
        common_tone_count=len(shared),
        total_movement=movement,
        description=describe_movement(len(shared), movement),
    )


def voice_leading_options(source: Chord, candidates: Iterable[Chord]) -> list[VoiceLeadingOption]:
    """
    Rank candidate chords by how smoothly they follow the source.

    Sorted by total movement, then by more common tones first; candidates
    that tie on both keep their input order.
    """
    options = [calculate_voice_leading(source, target) for target in candidates]
    return sorted(options, key=lambda o: (o.total_movement, -o.common_tone_count))
