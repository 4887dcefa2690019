"""
Chord symbol codec - text to Chord and back.

Parsing reads a root letter with an optional accidental and treats the
rest of the symbol as the quality suffix. Suffixes that are not
recognised fall back to a major chord rather than failing; only a symbol
with no usable root letter is an error.
"""

from __future__ import annotations

import logging

from .chord import Chord, ChordQuality
from .pitch import PitchClass, is_accidental, is_flat_sign

logger = logging.getLogger(__name__)

# Symbols whose meaning depends on exact case/glyph, matched before the table below
EXACT_SUFFIXES: dict[str, ChordQuality] = {
    "°7": ChordQuality.DIMINISHED_7,
    "°": ChordQuality.DIMINISHED,
    "ø7": ChordQuality.HALF_DIMINISHED_7,
    "ø": ChordQuality.HALF_DIMINISHED_7,
}

# Matched case-insensitively (keys are lower case)
SUFFIXES: dict[str, ChordQuality] = {
    "": ChordQuality.MAJOR,
    "maj": ChordQuality.MAJOR,
    "m": ChordQuality.MINOR,
    "min": ChordQuality.MINOR,
    "dim": ChordQuality.DIMINISHED,
    "dim7": ChordQuality.DIMINISHED_7,
    "aug": ChordQuality.AUGMENTED,
    "+": ChordQuality.AUGMENTED,
    "7": ChordQuality.DOMINANT_7,
    "dom7": ChordQuality.DOMINANT_7,
    "maj7": ChordQuality.MAJOR_7,
    "m7": ChordQuality.MINOR_7,
    "min7": ChordQuality.MINOR_7,
    "hdim7": ChordQuality.HALF_DIMINISHED_7,
    "m7b5": ChordQuality.HALF_DIMINISHED_7,
}


class ChordParseError(ValueError):
    """Raised when a chord symbol has no recognisable root."""

    def __init__(self, symbol: str, reason: str = "no root letter") -> None:
        self.symbol = symbol
        super().__init__(f"Cannot parse chord symbol {symbol!r}: {reason}")


def split_symbol(symbol: str) -> tuple[str, str]:
    """
    Split a chord symbol into (root, suffix).

    The root is the first character plus a following accidental, if any.
    """
    text = symbol.strip()
    if not text:
        return "", ""
    if len(text) > 1 and is_accidental(text[1]):
        return text[:2], text[2:]
    return text[:1], text[1:]


def parse_quality(suffix: str) -> ChordQuality:
    """Map a quality suffix to a ChordQuality, defaulting to major."""
    if suffix in EXACT_SUFFIXES:
        return EXACT_SUFFIXES[suffix]

    quality = SUFFIXES.get(suffix.lower())
    if quality is None:
        logger.debug(f"Unrecognised chord suffix {suffix!r}, treating as major")
        return ChordQuality.MAJOR
    return quality


def parse_chord(symbol: str) -> Chord:
    """
    Parse a chord symbol like 'C', 'F#m7b5', 'Bb°7' or 'Ebmaj7'.

    Args:
        symbol: Chord symbol text

    Returns:
        The parsed Chord; a flat in the root marks it for flat spelling

    Raises:
        ChordParseError: If no root letter can be extracted
    """
    root_text, suffix = split_symbol(symbol)
    if not root_text or not root_text[0].isupper():
        raise ChordParseError(symbol)

    try:
        root = PitchClass.parse(root_text)
    except ValueError:
        raise ChordParseError(symbol) from None

    prefer_flats = len(root_text) == 2 and is_flat_sign(root_text[1])
    return Chord(root, parse_quality(suffix), prefer_flats)


def try_parse_chord(symbol: str) -> Chord | None:
    """Parse a chord symbol, returning None instead of raising."""
    try:
        return parse_chord(symbol)
    except ChordParseError:
        return None


def format_chord(chord: Chord, prefer_flats: bool | None = None) -> str:
    """
    Format a chord as its canonical symbol.

    Args:
        chord: The chord to format
        prefer_flats: Override the chord's own spelling preference

    Returns:
        Root spelling plus quality suffix, e.g. 'Bbmaj7', 'F#ø7', 'C°'
    """
    flats = chord.prefer_flats if prefer_flats is None else prefer_flats
    return f"{chord.root.spell(prefer_flats=flats)}{chord.quality.symbol}"
