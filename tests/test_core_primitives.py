"""
Tests for core music primitives.

Tests cover:
- PitchClass and Interval (pitch.py)
- ScaleDegree, ScaleType, Key (scale.py)
- ChordQuality, Chord, RomanNumeral (chord.py)
"""

import pytest

from chuk_mcp_chordlab.core import (
    Accidental,
    Chord,
    ChordQuality,
    Interval,
    Key,
    PitchClass,
    RomanNumeral,
    ScaleDegree,
    ScaleType,
    circular_distance,
)


class TestPitchClass:
    """Tests for PitchClass enum."""

    def test_pitch_values(self) -> None:
        """Pitch classes have correct values."""
        assert PitchClass.C == 0
        assert PitchClass.D == 2
        assert PitchClass.E == 4
        assert PitchClass.F == 5
        assert PitchClass.G == 7
        assert PitchClass.A == 9
        assert PitchClass.B == 11

    def test_transpose_wraps(self) -> None:
        """Transposing wraps around the octave in both directions."""
        assert PitchClass.B.transpose(1) == PitchClass.C
        assert PitchClass.G.transpose(7) == PitchClass.D
        assert PitchClass.C.transpose(-1) == PitchClass.B
        assert PitchClass.A.transpose(-21) == PitchClass.C

    def test_midi_conversion(self) -> None:
        """C4 is MIDI 60 and pitch class is recovered from any octave."""
        assert PitchClass.C.to_midi() == 60
        assert PitchClass.A.to_midi(4) == 69
        assert PitchClass.from_midi(61) == PitchClass.Cs
        assert PitchClass.from_midi(23) == PitchClass.B

    def test_parse(self) -> None:
        """Parse pitch class names with either accidental style."""
        assert PitchClass.parse("C") == PitchClass.C
        assert PitchClass.parse("C#") == PitchClass.Cs
        assert PitchClass.parse("C♯") == PitchClass.Cs
        assert PitchClass.parse("Cs") == PitchClass.Cs
        assert PitchClass.parse("Db") == PitchClass.Cs
        assert PitchClass.parse("B♭") == PitchClass.As

    def test_parse_wraps_edge_spellings(self) -> None:
        """Cb and B# resolve by pitch class."""
        assert PitchClass.parse("Cb") == PitchClass.B
        assert PitchClass.parse("B#") == PitchClass.C

    def test_parse_invalid(self) -> None:
        """Unknown names raise ValueError."""
        for name in ("", "H", "C##", "Cx"):
            with pytest.raises(ValueError):
                PitchClass.parse(name)

    def test_spell(self) -> None:
        """Spelling uses sharps by default and flats on request."""
        assert PitchClass.Cs.spell() == "C#"
        assert PitchClass.Cs.spell(prefer_flats=True) == "Db"
        assert PitchClass.As.spell(prefer_flats=True) == "Bb"
        assert PitchClass.E.spell(prefer_flats=True) == "E"

    def test_interval_to(self) -> None:
        """Ascending interval between pitch classes."""
        assert PitchClass.C.interval_to(PitchClass.G) == Interval(7)
        assert PitchClass.G.interval_to(PitchClass.C) == Interval(5)

    def test_circular_distance(self) -> None:
        """Shortest way around the octave, never more than a tritone."""
        assert circular_distance(PitchClass.C, PitchClass.B) == 1
        assert circular_distance(PitchClass.C, PitchClass.Fs) == 6
        assert circular_distance(PitchClass.A, PitchClass.D) == 5
        assert circular_distance(PitchClass.E, PitchClass.E) == 0


class TestInterval:
    """Tests for Interval class."""

    def test_names(self) -> None:
        """Intervals have long and short names."""
        assert Interval(3).name == "Minor 3rd"
        assert Interval(7).name == "Perfect 5th"
        assert str(Interval(4)) == "M3"
        assert str(Interval(6)) == "TT"

    def test_hashable(self) -> None:
        """Intervals can be set members."""
        assert len({Interval(3), Interval(3), Interval(4)}) == 2

    def test_immutable(self) -> None:
        with pytest.raises(AttributeError):
            Interval(3)._semitones = 4  # type: ignore[misc]


class TestScaleDegree:
    """Tests for ScaleDegree."""

    def test_altered_degree(self) -> None:
        assert str(ScaleDegree(7, -1)) == "b7"
        assert str(ScaleDegree(4, 1)) == "#4"
        assert str(ScaleDegree(1)) == "1"

    def test_invalid_degree(self) -> None:
        """Degrees outside 1-7 are rejected."""
        with pytest.raises(ValueError):
            ScaleDegree(0)
        with pytest.raises(ValueError):
            ScaleDegree(8)


class TestScaleType:
    """Tests for ScaleType enum."""

    def test_steps_span_an_octave(self) -> None:
        """Every scale is seven steps summing to 12 semitones."""
        for scale in ScaleType:
            assert len(scale.steps) == 7
            assert sum(scale.steps) == 12

    def test_semitones_from_root(self) -> None:
        assert ScaleType.MAJOR.semitones_from_root == (0, 2, 4, 5, 7, 9, 11)
        assert ScaleType.NATURAL_MINOR.semitones_from_root == (0, 2, 3, 5, 7, 8, 10)
        assert ScaleType.HARMONIC_MINOR.semitones_from_root == (0, 2, 3, 5, 7, 8, 11)
        assert ScaleType.MELODIC_MINOR.semitones_from_root == (0, 2, 3, 5, 7, 9, 11)

    def test_intervals(self) -> None:
        """Scale intervals carry their long names."""
        names = [i.name for i in ScaleType.MAJOR.intervals]
        assert names[:3] == ["Unison", "Major 2nd", "Major 3rd"]
        assert ScaleType.NATURAL_MINOR.intervals[2].name == "Minor 3rd"

    def test_parse_aliases(self) -> None:
        """Common spellings of scale names parse."""
        assert ScaleType.parse("minor") == ScaleType.NATURAL_MINOR
        assert ScaleType.parse("natural_minor") == ScaleType.NATURAL_MINOR
        assert ScaleType.parse("harmonicMinor") == ScaleType.HARMONIC_MINOR
        assert ScaleType.parse("Melodic Minor") == ScaleType.MELODIC_MINOR
        assert ScaleType.parse("ionian") == ScaleType.MAJOR

    def test_parse_unknown(self) -> None:
        with pytest.raises(ValueError):
            ScaleType.parse("bebop")


class TestKey:
    """Tests for Key."""

    def test_scale_notes(self) -> None:
        """Seven pitch classes in degree order, starting with the root."""
        key = Key(PitchClass.D, ScaleType.MAJOR)
        assert key.get_pitches() == [
            PitchClass.D,
            PitchClass.E,
            PitchClass.Fs,
            PitchClass.G,
            PitchClass.A,
            PitchClass.B,
            PitchClass.Cs,
        ]

    def test_every_key_has_seven_distinct_notes(self) -> None:
        for root in PitchClass:
            for scale in ScaleType:
                pitches = Key(root, scale).get_pitches()
                assert len(pitches) == 7
                assert len(set(pitches)) == 7
                assert pitches[0] == root

    def test_note_names_use_key_spelling(self) -> None:
        assert Key(PitchClass.F).note_names() == ["F", "G", "A", "Bb", "C", "D", "E"]
        assert Key(PitchClass.E).note_names() == ["E", "F#", "G#", "A", "B", "C#", "D#"]

    def test_preferred_accidental_majors(self) -> None:
        """Flat-side majors prefer flats, everything else sharps."""
        for name in ("F", "Bb", "Eb", "Ab", "Db", "Gb"):
            assert Key.parse(name).preferred_accidental == Accidental.FLAT
        for name in ("C", "G", "D", "A", "E", "B"):
            assert Key.parse(name).preferred_accidental == Accidental.SHARP

    def test_preferred_accidental_relative_minors(self) -> None:
        """Minor keys follow their relative major."""
        assert Key.parse("D_minor").preferred_accidental == Accidental.FLAT
        assert Key.parse("C_minor").preferred_accidental == Accidental.FLAT
        assert Key.parse("A_minor").preferred_accidental == Accidental.SHARP
        assert Key.parse("E_minor").preferred_accidental == Accidental.SHARP

    def test_preferred_accidental_modes(self) -> None:
        """Modes use the parent major's signature."""
        assert Key.parse("G_dorian").prefers_flats
        assert not Key.parse("D_dorian").prefers_flats
        assert Key.parse("C_mixolydian").prefers_flats

    def test_degree_to_pitch(self) -> None:
        key = Key(PitchClass.C)
        assert key.degree_to_pitch(ScaleDegree(5)) == PitchClass.G
        assert key.degree_to_pitch(ScaleDegree(7, -1)) == PitchClass.As

    def test_pitch_to_degree(self) -> None:
        key = Key(PitchClass.C)
        assert key.pitch_to_degree(PitchClass.G) == ScaleDegree(5)
        assert key.pitch_to_degree(PitchClass.Ds) is None

    def test_parse_key(self) -> None:
        """Parse keys from several string formats."""
        assert Key.parse("C_major") == Key(PitchClass.C, ScaleType.MAJOR)
        assert Key.parse("Bb minor") == Key(PitchClass.As, ScaleType.NATURAL_MINOR)
        assert Key.parse("F#_dorian") == Key(PitchClass.Fs, ScaleType.DORIAN)
        assert Key.parse("A_harmonic_minor") == Key(PitchClass.A, ScaleType.HARMONIC_MINOR)
        assert Key.parse("G") == Key(PitchClass.G)

    def test_parse_invalid_key(self) -> None:
        for name in ("", "H_major", "C_bebop"):
            with pytest.raises(ValueError):
                Key.parse(name)

    def test_str(self) -> None:
        assert str(Key.parse("Eb_major")) == "Eb major"
        assert str(Key.parse("A_minor")) == "A minor"
        assert str(Key.parse("E_harmonic_minor")) == "E harmonic minor"

    def test_keys_are_values(self) -> None:
        """Equal keys hash alike and can key a cache."""
        cache = {Key.parse("C_major"): 1}
        assert cache[Key(PitchClass.C)] == 1


class TestChordQuality:
    """Tests for ChordQuality enum."""

    def test_interval_sets(self) -> None:
        assert ChordQuality.MAJOR.semitones == (0, 4, 7)
        assert ChordQuality.MINOR.semitones == (0, 3, 7)
        assert ChordQuality.DIMINISHED.semitones == (0, 3, 6)
        assert ChordQuality.AUGMENTED.semitones == (0, 4, 8)
        assert ChordQuality.DOMINANT_7.semitones == (0, 4, 7, 10)
        assert ChordQuality.MAJOR_7.semitones == (0, 4, 7, 11)
        assert ChordQuality.MINOR_7.semitones == (0, 3, 7, 10)
        assert ChordQuality.HALF_DIMINISHED_7.semitones == (0, 3, 6, 10)
        assert ChordQuality.DIMINISHED_7.semitones == (0, 3, 6, 9)

    def test_from_semitones(self) -> None:
        assert ChordQuality.from_semitones((0, 3, 6, 10)) == ChordQuality.HALF_DIMINISHED_7
        assert ChordQuality.from_semitones((0, 3, 7, 11)) is None

    def test_families(self) -> None:
        assert ChordQuality.MINOR_7.is_minor_family
        assert ChordQuality.HALF_DIMINISHED_7.is_diminished_family
        assert ChordQuality.DOMINANT_7.is_seventh
        assert not ChordQuality.AUGMENTED.is_seventh


class TestChord:
    """Tests for Chord class."""

    def test_get_pitches(self) -> None:
        """Chord tones in root, third, fifth order."""
        chord = Chord(PitchClass.A, ChordQuality.MINOR)
        assert chord.get_pitches() == [PitchClass.A, PitchClass.C, PitchClass.E]
        assert chord.note_set() == [PitchClass.C, PitchClass.E, PitchClass.A]

    def test_get_midi_notes(self) -> None:
        chord = Chord(PitchClass.C, ChordQuality.MAJOR_7)
        assert chord.get_midi_notes() == [60, 64, 67, 71]
        assert chord.get_midi_notes(octave=3) == [48, 52, 55, 59]

    def test_spelling_not_part_of_equality(self) -> None:
        """C# and Db chords are equal and hash alike."""
        sharp = Chord(PitchClass.Cs, ChordQuality.MINOR)
        flat = Chord(PitchClass.Cs, ChordQuality.MINOR, prefer_flats=True)
        assert sharp == flat
        assert hash(sharp) == hash(flat)
        assert str(sharp) == "C#m"
        assert str(flat) == "Dbm"

    def test_transpose(self) -> None:
        chord = Chord(PitchClass.D, ChordQuality.MINOR_7).transpose(5)
        assert chord == Chord(PitchClass.G, ChordQuality.MINOR_7)

    def test_note_names(self) -> None:
        chord = Chord(PitchClass.As, ChordQuality.MAJOR_7, prefer_flats=True)
        assert chord.note_names() == ["Bb", "D", "F", "A"]
        assert chord.note_names(prefer_flats=False) == ["A#", "D", "F", "A"]


class TestRomanNumeral:
    """Tests for RomanNumeral class."""

    def test_resolve_in_major(self) -> None:
        key = Key(PitchClass.C)
        assert RomanNumeral.parse("V7").resolve(key) == Chord(PitchClass.G, ChordQuality.DOMINANT_7)
        assert RomanNumeral.parse("ii").resolve(key) == Chord(PitchClass.D, ChordQuality.MINOR)

    def test_resolve_uses_key_scale(self) -> None:
        """Unaltered numerals follow the key's own scale."""
        key = Key(PitchClass.A, ScaleType.NATURAL_MINOR)
        assert RomanNumeral.parse("III").resolve(key).root == PitchClass.C
        assert RomanNumeral.parse("VII").resolve(key).root == PitchClass.G

    def test_resolve_altered(self) -> None:
        """Altered numerals measure from the tonic and spell flats."""
        chord = RomanNumeral.parse("bVII").resolve(Key(PitchClass.C))
        assert chord.root == PitchClass.As
        assert str(chord) == "Bb"

    def test_parse_numeral(self) -> None:
        """Case and suffix give the quality."""
        cases = {
            "I": ChordQuality.MAJOR,
            "vi": ChordQuality.MINOR,
            "vii°": ChordQuality.DIMINISHED,
            "viio": ChordQuality.DIMINISHED,
            "III+": ChordQuality.AUGMENTED,
            "V7": ChordQuality.DOMINANT_7,
            "ii7": ChordQuality.MINOR_7,
            "Imaj7": ChordQuality.MAJOR_7,
            "IΔ7": ChordQuality.MAJOR_7,
            "viiø7": ChordQuality.HALF_DIMINISHED_7,
            "viim7b5": ChordQuality.HALF_DIMINISHED_7,
            "vii°7": ChordQuality.DIMINISHED_7,
        }
        for text, quality in cases.items():
            assert RomanNumeral.parse(text).quality == quality, text

    def test_parse_alteration(self) -> None:
        assert RomanNumeral.parse("♭III").degree == ScaleDegree(3, -1)
        assert RomanNumeral.parse("#iv").degree == ScaleDegree(4, 1)

    def test_parse_invalid(self) -> None:
        for text in ("", "X", "Vi", "IIII", "V9"):
            with pytest.raises(ValueError):
                RomanNumeral.parse(text)

    def test_numeral_str(self) -> None:
        assert str(RomanNumeral(ScaleDegree(7), ChordQuality.DIMINISHED)) == "vii°"
        assert str(RomanNumeral(ScaleDegree(2), ChordQuality.MINOR_7)) == "ii7"
        assert str(RomanNumeral(ScaleDegree(7), ChordQuality.HALF_DIMINISHED_7)) == "viiø7"
        assert str(RomanNumeral(ScaleDegree(7, -1))) == "♭VII"
        assert str(RomanNumeral(ScaleDegree(1), ChordQuality.MAJOR_7)) == "Imaj7"
