"""
Key tools - MCP tools for scales and diatonic chords.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_chordlab.analysis import analyze_chord, get_diatonic_chords, resolve_numerals
from chuk_mcp_chordlab.constants import ErrorMessages
from chuk_mcp_chordlab.tools.common import chord_to_dict, parse_key

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_key_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register key and scale tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def key_scale_notes(key: str) -> str:
        """
        Get the scale notes of a key.

        Notes are in degree order from the root and spelled with the
        key's preferred accidental.

        Args:
            key: Key (e.g. 'C_major', 'F_minor', 'E_phrygian')

        Returns:
            JSON string with notes and preferred accidental

        Example:
            key_scale_notes(key="Bb_major")
        """
        try:
            key_obj = parse_key(key)
            return json.dumps(
                {
                    "status": "success",
                    "key": str(key_obj),
                    "notes": key_obj.note_names(),
                    "pitch_classes": [p.value for p in key_obj.get_pitches()],
                    "intervals": [i.name for i in key_obj.scale.intervals],
                    "preferred_accidental": key_obj.preferred_accidental.value,
                }
            )
        except Exception as e:
            logger.exception("Failed to get scale notes")
            return json.dumps({"status": "error", "message": str(e)})

    tools["key_scale_notes"] = key_scale_notes

    @mcp.tool  # type: ignore[arg-type]
    async def key_diatonic_chords(key: str, sevenths: bool = False) -> str:
        """
        Get the seven diatonic chords of a key.

        Args:
            key: Key (e.g. 'C_major', 'A_harmonic_minor')
            sevenths: Return seventh chords instead of triads

        Returns:
            JSON string with numeral, chord and function per degree

        Example:
            key_diatonic_chords(key="G_major", sevenths=True)
        """
        try:
            key_obj = parse_key(key)
            chords = []
            for numeral, chord in get_diatonic_chords(key_obj, sevenths=sevenths):
                data = chord_to_dict(chord, key_obj)
                data["numeral"] = numeral
                data["function"] = analyze_chord(chord, key_obj).function.value
                chords.append(data)

            return json.dumps({"status": "success", "key": str(key_obj), "chords": chords})
        except Exception as e:
            logger.exception("Failed to get diatonic chords")
            return json.dumps({"status": "error", "message": str(e)})

    tools["key_diatonic_chords"] = key_diatonic_chords

    @mcp.tool  # type: ignore[arg-type]
    async def key_resolve_numerals(key: str, numerals: list[str]) -> str:
        """
        Resolve Roman numerals to chords in a key.

        Args:
            key: Key (e.g. 'C_major')
            numerals: Roman numerals (e.g. ['ii7', 'V7', 'Imaj7', 'bVII'])

        Returns:
            JSON string with the resolved chords

        Example:
            key_resolve_numerals(key="F_major", numerals=["I", "vi", "IV", "V"])
        """
        try:
            key_obj = parse_key(key)
            chords = []
            for numeral in numerals:
                try:
                    chords.extend(resolve_numerals([numeral], key_obj))
                except ValueError:
                    return json.dumps(
                        {
                            "status": "error",
                            "message": ErrorMessages.INVALID_NUMERAL.format(numeral=numeral),
                        }
                    )

            return json.dumps(
                {
                    "status": "success",
                    "key": str(key_obj),
                    "chords": [
                        {"numeral": numeral, **chord_to_dict(chord, key_obj)}
                        for numeral, chord in zip(numerals, chords, strict=True)
                    ],
                }
            )
        except Exception as e:
            logger.exception("Failed to resolve numerals")
            return json.dumps({"status": "error", "message": str(e)})

    tools["key_resolve_numerals"] = key_resolve_numerals

    return tools
