#!/usr/bin/env python3
"""
Async Chord Lab MCP Server using chuk-mcp-server

This server provides MCP tools for learning chords and harmony. Chords,
keys and progressions are parsed from plain symbols and analyzed in a
key context; example progressions ship as YAML you can override.

The server provides tools for:
- Parsing chord symbols and spelling them in a key
- Roman numeral and harmonic function analysis
- Voice-leading comparison between chords
- Scales and diatonic chords for any key and mode
- Progression analysis (patterns, cadences, harmonic rhythm)
- Browsing example progressions
"""

import logging
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_chordlab.progressions import ProgressionLibrary
from chuk_mcp_chordlab.tools import (
    register_chord_tools,
    register_key_tools,
    register_progression_tools,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-chordlab")

# Paths - use standard project structure
BASE_PATH = Path.cwd()
PROGRESSIONS_DIR = BASE_PATH / "progressions"
LIBRARY_PATH = Path(__file__).parent / "progressions" / "library"

progression_library = ProgressionLibrary(
    library_path=LIBRARY_PATH,
    project_path=PROGRESSIONS_DIR,
)

# Register all tools
chord_tools = register_chord_tools(mcp)
key_tools = register_key_tools(mcp)
progression_tools = register_progression_tools(mcp, progression_library)

# Export tool functions for direct access
chord_parse = chord_tools["chord_parse"]
chord_analyze = chord_tools["chord_analyze"]
chord_voice_leading = chord_tools["chord_voice_leading"]

key_scale_notes = key_tools["key_scale_notes"]
key_diatonic_chords = key_tools["key_diatonic_chords"]
key_resolve_numerals = key_tools["key_resolve_numerals"]

progression_analyze = progression_tools["progression_analyze"]
progression_suggest_next = progression_tools["progression_suggest_next"]
progression_list_examples = progression_tools["progression_list_examples"]
progression_describe_example = progression_tools["progression_describe_example"]

logger.info("CHUK Chord Lab MCP Server initialized")
logger.info(f"  Library path: {LIBRARY_PATH}")
logger.info(f"  Project progressions dir: {PROGRESSIONS_DIR}")
