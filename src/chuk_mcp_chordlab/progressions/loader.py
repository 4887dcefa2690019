"""
Progression library loader - discovers and loads example progressions.

Examples can come from:
1. Built-in library (shipped with package)
2. Project examples (user's project/progressions directory)

The library is read-only; nothing here writes files.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from chuk_mcp_chordlab.core.scale import ScaleType
from chuk_mcp_chordlab.models.library import ExampleProgression

logger = logging.getLogger(__name__)


class ProgressionLibrary:
    """
    Discovers and loads example progressions.

    Examples are loaded from YAML files in the library and project
    directories. Project examples override library examples with the
    same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the library.

        Args:
            library_path: Path to built-in example library
            project_path: Path to project examples directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, ExampleProgression] = {}

    def _search_paths(self) -> list[Path]:
        """Directories to scan, lowest precedence first."""
        paths = [self.library_path]
        if self.project_path is not None:
            paths.append(self.project_path)
        return [p for p in paths if p.exists()]

    def _index(self) -> dict[str, ExampleProgression]:
        """
        All loadable examples keyed by their `name`.

        Directories are read lowest precedence first, so a project example
        replaces a library example with the same name whatever its filename.
        """
        examples: dict[str, ExampleProgression] = {}
        for directory in self._search_paths():
            for path in sorted(directory.glob("*.yaml")):
                example = self._load_example_file(path)
                if example:
                    examples[example.name] = example
        return examples

    def list_examples(self, tag: str | None = None) -> list[ExampleProgression]:
        """
        List all available examples, sorted by name.

        Args:
            tag: Only return examples carrying this tag
        """
        result = sorted(self._index().values(), key=lambda e: e.name)
        if tag is not None:
            result = [e for e in result if tag in e.tags]
        return result

    def get_example(self, name: str) -> ExampleProgression | None:
        """
        Get an example by the name it declares (the file stem if it declares none).

        Project examples take precedence over library examples.

        Returns:
            ExampleProgression if found, None otherwise
        """
        if name not in self._cache:
            self._cache.update(self._index())
        return self._cache.get(name)

    def _load_example_file(self, path: Path) -> ExampleProgression | None:
        """Load an example from a YAML file, skipping files that do not parse."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
            return self._parse_example(data, default_name=path.stem)
        except (OSError, yaml.YAMLError, ValidationError, ValueError, TypeError):
            logger.warning(f"Skipping invalid example progression file: {path}", exc_info=True)
            return None

    def _parse_example(self, data: dict[str, Any], default_name: str) -> ExampleProgression:
        """Parse an example from YAML data."""
        if not isinstance(data, dict):
            raise ValueError("Example file must contain a mapping")

        fields: dict[str, Any] = {}
        if "scale" in data:
            fields["scale"] = ScaleType.parse(str(data["scale"]))

        return ExampleProgression(
            name=data.get("name", default_name),
            title=data.get("title", ""),
            description=data.get("description", ""),
            key=str(data.get("key", "C")),
            chords=[str(c) for c in data.get("chords", [])],
            durations=[float(d) for d in data.get("durations", [])],
            tempo=data.get("tempo", 120),
            tags=[str(t) for t in data.get("tags", [])],
            **fields,
        )

    def clear_cache(self) -> None:
        """Clear the example cache."""
        self._cache.clear()
