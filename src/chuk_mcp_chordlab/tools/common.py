"""
Helpers shared by the MCP tools - argument parsing and JSON shaping.
"""

from __future__ import annotations

from typing import Any

from chuk_mcp_chordlab.constants import (
    CadenceType,
    ChordFunction,
    ErrorMessages,
    ProgressionPattern,
)
from chuk_mcp_chordlab.core import Chord, Key


def parse_key(key: str) -> Key:
    """Parse a key argument, raising ValueError with the standard message."""
    try:
        return Key.parse(key)
    except ValueError:
        raise ValueError(ErrorMessages.INVALID_KEY.format(key=key)) from None


def chord_to_dict(chord: Chord, key: Key | None = None) -> dict[str, Any]:
    """JSON-ready description of a chord, spelled for the key if given."""
    flats = chord.prefer_flats or (key is not None and key.prefers_flats)
    return {
        "symbol": chord.root.spell(prefer_flats=flats) + chord.quality.symbol,
        "root": chord.root.spell(prefer_flats=flats),
        "quality": chord.quality.value,
        "intervals": [str(i) for i in chord.quality.intervals],
        "notes": chord.note_names(prefer_flats=flats),
        "midi": chord.get_midi_notes(),
    }


def function_info(function: ChordFunction) -> dict[str, str]:
    return {
        "name": function.display_name,
        "abbreviation": function.abbreviation,
        "description": function.description,
    }


def pattern_info(pattern: ProgressionPattern) -> dict[str, str]:
    return {"name": pattern.display_name, "description": pattern.description}


def cadence_info(cadence: CadenceType | None) -> dict[str, str] | None:
    if cadence is None:
        return None
    return {"name": cadence.display_name, "description": cadence.description}
