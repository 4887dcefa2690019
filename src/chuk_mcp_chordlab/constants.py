"""
Constants and enums for harmonic analysis.

No magic strings - functions, patterns and cadences are closed enums.
"""

from enum import Enum


class ChordFunction(str, Enum):
    """Structural role of a chord within a key."""

    TONIC = "tonic"
    SUPERTONIC = "supertonic"
    MEDIANT = "mediant"
    SUBDOMINANT = "subdominant"
    DOMINANT = "dominant"
    SUBMEDIANT = "submediant"
    LEADING_TONE = "leading_tone"
    SECONDARY_DOMINANT = "secondary_dominant"
    NEAPOLITAN = "neapolitan"
    AUGMENTED_SIXTH = "augmented_sixth"
    BORROWED = "borrowed"
    CHROMATIC = "chromatic"

    @property
    def display_name(self) -> str:
        return _FUNCTION_INFO[self][0]

    @property
    def abbreviation(self) -> str:
        return _FUNCTION_INFO[self][1]

    @property
    def description(self) -> str:
        return _FUNCTION_INFO[self][2]


_FUNCTION_INFO: dict[ChordFunction, tuple[str, str, str]] = {
    ChordFunction.TONIC: ("Tonic", "T", "The home chord, provides stability and resolution"),
    ChordFunction.SUPERTONIC: (
        "Supertonic",
        "ST",
        "Often leads to the dominant, creates forward motion",
    ),
    ChordFunction.MEDIANT: ("Mediant", "M", "Bridges tonic and dominant, adds color"),
    ChordFunction.SUBDOMINANT: (
        "Subdominant",
        "SD",
        "Moves away from tonic, prepares for dominant",
    ),
    ChordFunction.DOMINANT: ("Dominant", "D", "Creates tension that resolves to tonic"),
    ChordFunction.SUBMEDIANT: (
        "Submediant",
        "SM",
        "Deceptive resolution option, adds variety",
    ),
    ChordFunction.LEADING_TONE: (
        "Leading Tone",
        "LT",
        "Strong pull to tonic, usually diminished",
    ),
    ChordFunction.SECONDARY_DOMINANT: (
        "Secondary Dominant",
        "V/",
        "Dominant of another chord, adds chromatic interest",
    ),
    ChordFunction.NEAPOLITAN: (
        "Neapolitan",
        "N",
        "Flat II chord, dramatic subdominant function",
    ),
    ChordFunction.AUGMENTED_SIXTH: (
        "Augmented Sixth",
        "Aug6",
        "Chromatic predominant, strong pull to dominant",
    ),
    ChordFunction.BORROWED: ("Borrowed", "b", "Chord from parallel key, adds modal color"),
    ChordFunction.CHROMATIC: (
        "Chromatic",
        "chr",
        "Non-diatonic chord for color or voice leading",
    ),
}

# Function of each scale degree (index 0 = degree I)
DEGREE_FUNCTIONS: tuple[ChordFunction, ...] = (
    ChordFunction.TONIC,
    ChordFunction.SUPERTONIC,
    ChordFunction.MEDIANT,
    ChordFunction.SUBDOMINANT,
    ChordFunction.DOMINANT,
    ChordFunction.SUBMEDIANT,
    ChordFunction.LEADING_TONE,
)


class ProgressionPattern(str, Enum):
    """Named progression patterns."""

    II_V_I = "ii-V-I"
    I_VI_IV_V = "I-vi-IV-V"
    I_V_VI_IV = "I-V-vi-IV"
    BLUES = "12-bar-blues"
    POP_ROCK = "pop-rock"
    CIRCLE = "circle"
    RAGTIME = "ragtime"
    PACHELBEL = "pachelbel"
    OTHER = "other"

    @property
    def display_name(self) -> str:
        return _PATTERN_INFO[self][0]

    @property
    def description(self) -> str:
        return _PATTERN_INFO[self][1]


_PATTERN_INFO: dict[ProgressionPattern, tuple[str, str]] = {
    ProgressionPattern.II_V_I: ("ii-V-I", "Jazz standard progression"),
    ProgressionPattern.I_VI_IV_V: ("I-vi-IV-V", "50s doo-wop progression"),
    ProgressionPattern.I_V_VI_IV: ("I-V-vi-IV", "Modern pop progression"),
    ProgressionPattern.BLUES: ("12-Bar Blues", "Classic blues progression"),
    ProgressionPattern.POP_ROCK: ("Pop/Rock", "Common pop/rock pattern"),
    ProgressionPattern.CIRCLE: ("Circle Progression", "Circle of fifths based"),
    ProgressionPattern.RAGTIME: ("Ragtime", "Classic ragtime progression"),
    ProgressionPattern.PACHELBEL: ("Pachelbel", "Canon progression"),
    ProgressionPattern.OTHER: ("Other", "Custom progression"),
}


class CadenceType(str, Enum):
    """Cadence formed by the last two chords of a progression."""

    AUTHENTIC = "authentic"
    PLAGAL = "plagal"
    DECEPTIVE = "deceptive"
    HALF = "half"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def description(self) -> str:
        return _CADENCE_DESCRIPTIONS[self]


_CADENCE_DESCRIPTIONS: dict[CadenceType, str] = {
    CadenceType.AUTHENTIC: "V-I: Strong resolution",
    CadenceType.PLAGAL: "IV-I: Amen cadence",
    CadenceType.DECEPTIVE: "V-vi: Unexpected resolution",
    CadenceType.HALF: "Ends on V: Unresolved",
}


class HarmonicRhythm(str, Enum):
    """Chord-change density, assuming 4/4 and one chord slot per input chord."""

    REGULAR = "Regular"
    DENSE = "Dense"


BEATS_PER_BAR = 4


class ErrorMessages:
    """Standardized error messages."""

    INVALID_KEY = "Invalid key: '{key}'. Expected format like 'C_major' or 'Bb_minor'."
    INVALID_CHORD = "Invalid chord symbol: '{symbol}'."
    INVALID_NUMERAL = "Invalid Roman numeral: '{numeral}'."
    EXAMPLE_NOT_FOUND = "Example progression '{name}' not found."
    EMPTY_PROGRESSION = "Progression contains no parseable chords."
