"""
Progression tools - MCP tools for progression analysis and the example library.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_chordlab.analysis import (
    analyze_progression,
    annotate_progression,
    suggest_next_chords,
)
from chuk_mcp_chordlab.analysis.progression import parse_symbols
from chuk_mcp_chordlab.constants import ErrorMessages
from chuk_mcp_chordlab.progressions import ProgressionLibrary
from chuk_mcp_chordlab.tools.common import (
    cadence_info,
    chord_to_dict,
    parse_key,
    pattern_info,
)

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_progression_tools(mcp: ChukMCPServer, library: ProgressionLibrary) -> dict[str, Any]:
    """
    Register progression tools with the MCP server.

    Args:
        mcp: The MCP server instance
        library: The example progression library

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def progression_analyze(chords: list[str], key: str = "C_major") -> str:
        """
        Analyze a chord progression in a key.

        Finds Roman numerals, named patterns (ii-V-I, pop-rock, ...),
        the closing cadence, harmonic rhythm and a complexity score.
        Symbols without a root letter are skipped.

        Args:
            chords: Chord symbols in order (e.g. ['C', 'Am', 'F', 'G'])
            key: Key (e.g. 'C_major')

        Returns:
            JSON string with the progression analysis

        Example:
            progression_analyze(chords=["Dm7", "G7", "Cmaj7"], key="C_major")
        """
        try:
            key_obj = parse_key(key)
            parsed = parse_symbols(chords)
            if chords and not parsed:
                return json.dumps({"status": "error", "message": ErrorMessages.EMPTY_PROGRESSION})

            analysis = analyze_progression(parsed, key_obj)
            return json.dumps(
                {
                    "status": "success",
                    "analysis": analysis.model_dump(mode="json"),
                    "pattern_info": pattern_info(analysis.pattern),
                    "cadence_info": cadence_info(analysis.cadence),
                    "skipped": len(chords) - len(parsed),
                }
            )
        except Exception as e:
            logger.exception("Failed to analyze progression")
            return json.dumps({"status": "error", "message": str(e)})

    tools["progression_analyze"] = progression_analyze

    @mcp.tool  # type: ignore[arg-type]
    async def progression_suggest_next(
        chords: list[str],
        key: str = "C_major",
        limit: int = 6,
    ) -> str:
        """
        Suggest diatonic chords to follow a progression.

        Args:
            chords: Chord symbols so far (may be empty)
            key: Key (e.g. 'G_major')
            limit: Maximum number of suggestions

        Returns:
            JSON string with suggested chords

        Example:
            progression_suggest_next(chords=["C", "G"], key="C_major")
        """
        try:
            key_obj = parse_key(key)
            suggestions = suggest_next_chords(parse_symbols(chords), key_obj, limit=limit)
            return json.dumps(
                {
                    "status": "success",
                    "suggestions": [chord_to_dict(c, key_obj) for c in suggestions],
                    "count": len(suggestions),
                }
            )
        except Exception as e:
            logger.exception("Failed to suggest chords")
            return json.dumps({"status": "error", "message": str(e)})

    tools["progression_suggest_next"] = progression_suggest_next

    @mcp.tool  # type: ignore[arg-type]
    async def progression_list_examples(tag: str | None = None) -> str:
        """
        List example progressions from the library.

        Args:
            tag: Optional tag filter (e.g. 'jazz', 'pop', 'blues')

        Returns:
            JSON string with example summaries

        Example:
            progression_list_examples(tag="jazz")
        """
        try:
            examples = library.list_examples(tag=tag)
            return json.dumps(
                {
                    "status": "success",
                    "examples": [
                        {
                            "name": e.name,
                            "title": e.title,
                            "description": e.description,
                            "key": str(e.get_key()),
                            "chords": e.chords,
                            "tags": e.tags,
                        }
                        for e in examples
                    ],
                    "count": len(examples),
                }
            )
        except Exception as e:
            logger.exception("Failed to list examples")
            return json.dumps({"status": "error", "message": str(e)})

    tools["progression_list_examples"] = progression_list_examples

    @mcp.tool  # type: ignore[arg-type]
    async def progression_describe_example(name: str) -> str:
        """
        Get an example progression with its full analysis.

        Args:
            name: Example name (e.g. 'classic-ii-v-i')

        Returns:
            JSON string with the example, annotated chords and analysis

        Example:
            progression_describe_example(name="blues-in-a")
        """
        try:
            example = library.get_example(name)
            if example is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.EXAMPLE_NOT_FOUND.format(name=name)}
                )

            key_obj = example.get_key()
            chords = example.get_chords()
            annotated = annotate_progression(chords, key_obj, example.get_durations())
            analysis = analyze_progression(chords, key_obj)

            return json.dumps(
                {
                    "status": "success",
                    "example": example.model_dump(mode="json"),
                    "chords": [c.model_dump(mode="json") for c in annotated],
                    "analysis": analysis.model_dump(mode="json"),
                    "pattern_info": pattern_info(analysis.pattern),
                    "cadence_info": cadence_info(analysis.cadence),
                }
            )
        except Exception as e:
            logger.exception("Failed to describe example")
            return json.dumps({"status": "error", "message": str(e)})

    tools["progression_describe_example"] = progression_describe_example

    return tools
