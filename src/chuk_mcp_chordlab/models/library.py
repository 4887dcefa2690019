"""
Example progression models - the read-only teaching library.

Each example names a progression in a key so it can be analyzed or
shown as a starting point. Chords are stored as symbols and parsed on
demand.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from chuk_mcp_chordlab.core.chord import Chord
from chuk_mcp_chordlab.core.codec import parse_chord
from chuk_mcp_chordlab.core.scale import Key, ScaleType


class ExampleProgression(BaseModel):
    """A named example progression."""

    name: str = Field(..., description="Unique name, e.g. 'pop-progression'")
    title: str = Field("", description="Display title")
    description: str = ""
    key: str = Field("C", description="Tonic, e.g. 'C', 'Bb'; 'A_minor' also sets the scale")
    scale: ScaleType = ScaleType.MAJOR
    chords: list[str] = Field(default_factory=list, description="Chord symbols in order")
    durations: list[float] = Field(
        default_factory=list, description="Beats per chord (defaults to 1.0 each)"
    )
    tempo: int = Field(120, ge=20, le=300)
    tags: list[str] = Field(default_factory=list)

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def split_scale_from_key(cls, data: Any) -> Any:
        """Move a scale written into the key ('A_minor', 'D dorian') into `scale`."""
        if not isinstance(data, dict) or not isinstance(data.get("key"), str):
            return data

        tonic, _, scale_name = data["key"].strip().replace(" ", "_").partition("_")
        if not scale_name:
            return data

        scale = ScaleType.parse(scale_name)
        explicit = data.get("scale")
        if explicit is not None:
            if not isinstance(explicit, ScaleType):
                explicit = ScaleType.parse(str(explicit))
            if explicit is not scale:
                raise ValueError(f"Key '{data['key']}' conflicts with scale '{explicit.value}'")
        return {**data, "key": tonic, "scale": scale}

    @field_validator("chords")
    @classmethod
    def validate_chords(cls, v: list[str]) -> list[str]:
        """Every chord symbol must have a root."""
        for symbol in v:
            parse_chord(symbol)
        return v

    @field_validator("key")
    @classmethod
    def validate_key(cls, v: str) -> str:
        Key.parse(v)
        return v

    def get_key(self) -> Key:
        """The example's key as a Key value."""
        return Key(Key.parse(self.key).root, self.scale)

    def get_chords(self) -> list[Chord]:
        return [parse_chord(symbol) for symbol in self.chords]

    def get_durations(self) -> list[float]:
        """Per-chord durations, padded with 1.0 beats."""
        padded = list(self.durations[: len(self.chords)])
        padded.extend([1.0] * (len(self.chords) - len(padded)))
        return padded
