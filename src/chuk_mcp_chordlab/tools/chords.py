"""
Chord tools - MCP tools for parsing and analyzing single chords.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_chordlab.analysis import describe_chord, diatonic_triads, voice_leading_options
from chuk_mcp_chordlab.constants import ErrorMessages
from chuk_mcp_chordlab.core import ChordParseError, format_chord, parse_chord
from chuk_mcp_chordlab.tools.common import chord_to_dict, function_info, parse_key

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_chord_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register chord tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def chord_parse(symbol: str, prefer_flats: bool | None = None) -> str:
        """
        Parse a chord symbol into its root, quality and notes.

        Unrecognised quality suffixes are read as major.

        Args:
            symbol: Chord symbol (e.g. 'Cmaj7', 'F#m7b5', 'Bb°7')
            prefer_flats: Force flat (True) or sharp (False) spelling

        Returns:
            JSON string with the parsed chord and its canonical symbol

        Example:
            chord_parse(symbol="F#m7b5")
        """
        try:
            chord = parse_chord(symbol)
            data = chord_to_dict(chord)
            data["symbol"] = format_chord(chord, prefer_flats=prefer_flats)
            return json.dumps({"status": "success", "chord": data})
        except ChordParseError:
            return json.dumps(
                {"status": "error", "message": ErrorMessages.INVALID_CHORD.format(symbol=symbol)}
            )
        except Exception as e:
            logger.exception("Failed to parse chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_parse"] = chord_parse

    @mcp.tool  # type: ignore[arg-type]
    async def chord_analyze(symbol: str, key: str = "C_major") -> str:
        """
        Analyze a chord in a key.

        Returns the Roman numeral, harmonic function, whether the chord
        is diatonic, common progressions, and voice leading to each
        diatonic triad.

        Args:
            symbol: Chord symbol
            key: Key (e.g. 'C_major', 'Bb_minor', 'D_dorian')

        Returns:
            JSON string with the chord analysis

        Example:
            chord_analyze(symbol="Eb", key="C_major")
        """
        try:
            key_obj = parse_key(key)
            chord = parse_chord(symbol)
            analysis = describe_chord(chord, key_obj)
            return json.dumps(
                {
                    "status": "success",
                    "analysis": analysis.model_dump(mode="json"),
                    "function_info": function_info(analysis.function),
                }
            )
        except ChordParseError:
            return json.dumps(
                {"status": "error", "message": ErrorMessages.INVALID_CHORD.format(symbol=symbol)}
            )
        except Exception as e:
            logger.exception("Failed to analyze chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_analyze"] = chord_analyze

    @mcp.tool  # type: ignore[arg-type]
    async def chord_voice_leading(
        symbol: str,
        candidates: list[str] | None = None,
        key: str = "C_major",
    ) -> str:
        """
        Rank candidate chords by voice-leading smoothness from a chord.

        Args:
            symbol: The chord being left
            candidates: Candidate chord symbols (default: the key's diatonic triads)
            key: Key used for the default candidates

        Returns:
            JSON string with options sorted smoothest first

        Example:
            chord_voice_leading(symbol="C", candidates=["Am", "G", "F"])
        """
        try:
            source = parse_chord(symbol)
            if candidates is not None:
                targets = [parse_chord(c) for c in candidates]
            else:
                targets = diatonic_triads(parse_key(key))

            options = voice_leading_options(source, targets)
            return json.dumps(
                {
                    "status": "success",
                    "from": str(source),
                    "options": [o.model_dump(mode="json") for o in options],
                }
            )
        except ChordParseError as e:
            return json.dumps(
                {"status": "error", "message": ErrorMessages.INVALID_CHORD.format(symbol=e.symbol)}
            )
        except Exception as e:
            logger.exception("Failed to rank voice leading")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_voice_leading"] = chord_voice_leading

    return tools
