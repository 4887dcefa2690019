"""
MCP tool implementations.

Tools are organized by domain:
- chords - Chord parsing, analysis and voice leading
- keys - Scales, diatonic chords and numeral resolution
- progressions - Progression analysis and the example library
"""

from chuk_mcp_chordlab.tools.chords import register_chord_tools
from chuk_mcp_chordlab.tools.keys import register_key_tools
from chuk_mcp_chordlab.tools.progressions import register_progression_tools

__all__ = [
    "register_chord_tools",
    "register_key_tools",
    "register_progression_tools",
]
