"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_mcp_chordlab.core import Key, PitchClass, ScaleType


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def library_path() -> Path:
    """Path to the bundled example progression library."""
    return Path(__file__).parent.parent / "src" / "chuk_mcp_chordlab" / "progressions" / "library"


@pytest.fixture
def c_major() -> Key:
    return Key(PitchClass.C, ScaleType.MAJOR)


@pytest.fixture
def a_minor() -> Key:
    return Key(PitchClass.A, ScaleType.NATURAL_MINOR)
