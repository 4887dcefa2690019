"""
Tests for Roman numeral and function analysis.
"""

import pytest

from chuk_mcp_chordlab.analysis import (
    analyze_chord,
    common_progressions,
    describe_chord,
    function_for_numeral,
    resolve_numerals,
)
from chuk_mcp_chordlab.constants import ChordFunction
from chuk_mcp_chordlab.core import Chord, ChordQuality, Key, PitchClass, parse_chord


class TestAnalyzeChord:
    """Tests for analyze_chord."""

    def test_dominant_in_c(self, c_major: Key) -> None:
        """G in C major is V, dominant."""
        result = analyze_chord(parse_chord("G"), c_major)
        assert result.numeral == "V"
        assert result.function == ChordFunction.DOMINANT
        assert result.degree == 5
        assert result.is_diatonic

    def test_chromatic_in_c(self, c_major: Key) -> None:
        """Eb in C major is bIII, chromatic."""
        result = analyze_chord(parse_chord("Eb"), c_major)
        assert result.numeral == "♭III"
        assert result.function == ChordFunction.CHROMATIC
        assert result.degree is None
        assert not result.is_diatonic

    def test_every_degree_in_c(self, c_major: Key) -> None:
        expected = [
            ("C", "I", ChordFunction.TONIC),
            ("Dm", "ii", ChordFunction.SUPERTONIC),
            ("Em", "iii", ChordFunction.MEDIANT),
            ("F", "IV", ChordFunction.SUBDOMINANT),
            ("G", "V", ChordFunction.DOMINANT),
            ("Am", "vi", ChordFunction.SUBMEDIANT),
            ("B°", "vii°", ChordFunction.LEADING_TONE),
        ]
        for symbol, numeral, function in expected:
            result = analyze_chord(parse_chord(symbol), c_major)
            assert (result.numeral, result.function) == (numeral, function), symbol

    def test_case_follows_quality_not_scale(self, c_major: Key) -> None:
        """A minor chord on a major degree is still lower case."""
        assert analyze_chord(parse_chord("Fm"), c_major).numeral == "iv"
        assert analyze_chord(parse_chord("D"), c_major).numeral == "II"

    def test_sevenths_keep_triad_numeral(self, c_major: Key) -> None:
        assert analyze_chord(parse_chord("G7"), c_major).numeral == "V"
        assert analyze_chord(parse_chord("Dm7"), c_major).numeral == "ii"
        assert analyze_chord(parse_chord("Bø7"), c_major).numeral == "vii°"

    @pytest.mark.parametrize(
        "symbol,numeral",
        [
            ("Db", "♭II"),
            ("Gb", "♭V"),
            ("Ab", "♭VI"),
            ("Bb", "♭VII"),
            ("Bbm", "♭vii"),
            ("C#°", "♭ii°"),
        ],
    )
    def test_chromatic_numerals(self, c_major: Key, symbol: str, numeral: str) -> None:
        result = analyze_chord(parse_chord(symbol), c_major)
        assert result.numeral == numeral
        assert result.function == ChordFunction.CHROMATIC

    def test_enharmonic_spellings_analyze_alike(self, c_major: Key) -> None:
        assert analyze_chord(parse_chord("D#"), c_major) == analyze_chord(
            parse_chord("Eb"), c_major
        )

    def test_minor_key(self, a_minor: Key) -> None:
        assert analyze_chord(parse_chord("Am"), a_minor).numeral == "i"
        assert analyze_chord(parse_chord("G"), a_minor).numeral == "VII"
        assert analyze_chord(parse_chord("E"), a_minor).numeral == "V"

    def test_transposition_invariance(self) -> None:
        """V-I numerals are the same in every major key."""
        for root in PitchClass:
            key = Key(root)
            dominant = Chord(root.transpose(7))
            assert analyze_chord(dominant, key).numeral == "V"


class TestFunctionForNumeral:
    """Tests for function_for_numeral."""

    def test_table(self) -> None:
        assert function_for_numeral("I") == ChordFunction.TONIC
        assert function_for_numeral("V7") == ChordFunction.DOMINANT
        assert function_for_numeral("ii7") == ChordFunction.SUPERTONIC
        assert function_for_numeral("vii°") == ChordFunction.LEADING_TONE
        assert function_for_numeral("Imaj7") == ChordFunction.TONIC

    def test_unknown_is_chromatic(self) -> None:
        assert function_for_numeral("♭VII") == ChordFunction.CHROMATIC
        assert function_for_numeral("xyz") == ChordFunction.CHROMATIC


class TestCommonProgressions:
    """Tests for common_progressions."""

    def test_dominant(self) -> None:
        assert "ii - V - I" in common_progressions("V")

    def test_lower_case_numeral(self) -> None:
        assert common_progressions("ii") == common_progressions("II")

    def test_unknown(self) -> None:
        assert common_progressions("♭III") == []


class TestResolveNumerals:
    """Tests for resolve_numerals."""

    def test_jazz_cadence(self, c_major: Key) -> None:
        chords = resolve_numerals(["ii7", "V7", "Imaj7"], c_major)
        assert [str(c) for c in chords] == ["Dm7", "G7", "Cmaj7"]

    def test_flat_key(self) -> None:
        chords = resolve_numerals(["I", "IV", "V"], Key.parse("Eb_major"))
        assert [str(c) for c in chords] == ["Eb", "Ab", "Bb"]

    def test_invalid(self, c_major: Key) -> None:
        with pytest.raises(ValueError):
            resolve_numerals(["I", "Q"], c_major)


class TestDescribeChord:
    """Tests for describe_chord."""

    def test_diatonic_chord(self, c_major: Key) -> None:
        analysis = describe_chord(parse_chord("G7"), c_major)
        assert analysis.roman_numeral == "V"
        assert analysis.function == ChordFunction.DOMINANT
        assert analysis.is_in_key
        assert analysis.note_names == ["G", "B", "D", "F"]
        assert analysis.key == "C major"
        assert "V - I" in analysis.common_progressions
        assert len(analysis.voice_leading) == 7

    def test_chromatic_chord(self, c_major: Key) -> None:
        analysis = describe_chord(parse_chord("Eb"), c_major)
        assert not analysis.is_in_key
        assert analysis.note_names == ["Eb", "G", "Bb"]
        assert analysis.common_progressions == []

    def test_json_dump(self, c_major: Key) -> None:
        """Chords serialize as symbols."""
        data = describe_chord(parse_chord("Am"), c_major).model_dump(mode="json")
        assert data["chord"] == "Am"
        assert data["function"] == "submediant"
        assert data["voice_leading"][0]["target"] == "Am"
        assert data["voice_leading"][0]["common_tones"] == ["C", "E", "A"]
