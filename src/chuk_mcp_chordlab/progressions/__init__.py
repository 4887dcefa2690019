"""
Example progression library - named progressions for study and analysis.

Examples ship as YAML files; projects can add or override their own.
"""

from chuk_mcp_chordlab.progressions.loader import ProgressionLibrary

__all__ = ["ProgressionLibrary"]
