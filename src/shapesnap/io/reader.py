"""Stroke reader for loading recorded strokes.

This module provides the StrokeReader class for loading stroke files
and converting them into domain points.

Three JSON layouts are accepted:

- Labelled dataset: ``{"circle": [{"points": [{"x": 1, "y": 2}, ...]}, ...]}``
- A single stroke: ``[{"x": 1, "y": 2}, ...]``
- A list of strokes: ``[[{"x": 1, "y": 2}, ...], {"points": [...]}, ...]``

Points may be ``{"x", "y"}`` objects or ``[x, y]`` pairs.
"""

import json
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from shapesnap.domain import Point
from shapesnap.exceptions import StrokeFormatError, StrokeLoadError


@dataclass(frozen=True)
class RecordedStroke:
    """A stroke loaded from a file.

    Attributes:
        points: Samples in drawing order
        label: Expected shape name, if the file provides one
        index: Position of the stroke within its label group (or file)
    """

    points: tuple[Point, ...]
    label: str | None = None
    index: int = 0

    @property
    def name(self) -> str:
        if self.label is None:
            return f"#{self.index}"
        return f"{self.label}#{self.index}"


class StrokeReader:
    """Loads recorded strokes from JSON files.

    Example:
        reader = StrokeReader(Path("strokes.json"))
        reader.load()
        for stroke in reader.iter_strokes():
            print(stroke.name, len(stroke.points))
    """

    def __init__(self, stroke_path: Path) -> None:
        """Initialize the stroke reader.

        Args:
            stroke_path: Path to the JSON stroke file
        """
        self._stroke_path = stroke_path
        self._strokes: list[RecordedStroke] | None = None

    def load(self) -> list[RecordedStroke]:
        """Load and parse the stroke file.

        Returns:
            All strokes in file order

        Raises:
            StrokeLoadError: If the file is missing, unreadable or not JSON
            StrokeFormatError: If the JSON does not describe strokes
        """
        path = str(self._stroke_path)

        if not self._stroke_path.exists():
            raise StrokeLoadError(path, "file not found")

        try:
            data = json.loads(self._stroke_path.read_text(encoding="utf-8"))
        except OSError as e:
            raise StrokeLoadError(path, str(e)) from e
        except json.JSONDecodeError as e:
            raise StrokeLoadError(path, f"invalid JSON: {e}") from e

        try:
            self._strokes = parse_strokes(data)
        except (TypeError, ValueError, KeyError) as e:
            raise StrokeFormatError(path, str(e)) from e

        return self._strokes

    @property
    def labels(self) -> list[str]:
        """Distinct labels in file order.

        Raises:
            RuntimeError: If strokes have not been loaded yet
        """
        strokes = self._require_loaded()
        seen: dict[str, None] = {}
        for stroke in strokes:
            if stroke.label is not None:
                seen.setdefault(stroke.label, None)
        return list(seen)

    @property
    def stroke_count(self) -> int:
        return len(self._require_loaded())

    def iter_strokes(self) -> Iterator[RecordedStroke]:
        """Iterate over loaded strokes.

        Raises:
            RuntimeError: If strokes have not been loaded yet
        """
        yield from self._require_loaded()

    def _require_loaded(self) -> list[RecordedStroke]:
        if self._strokes is None:
            raise RuntimeError("Strokes not loaded. Call load() first.")
        return self._strokes


def parse_strokes(data: Any) -> list[RecordedStroke]:
    """Convert decoded JSON into recorded strokes.

    Args:
        data: Decoded JSON document

    Returns:
        Strokes in document order

    Raises:
        ValueError: If the document layout is not recognized
        TypeError: If coordinates are not numbers
    """
    if isinstance(data, dict):
        strokes: list[RecordedStroke] = []
        for label, entries in data.items():
            if not isinstance(entries, list):
                raise ValueError(f"label '{label}' must map to a list of strokes")
            for index, entry in enumerate(entries):
                strokes.append(RecordedStroke(_parse_points(entry), str(label), index))
        return strokes

    if isinstance(data, list):
        if not data:
            return []
        if _is_point(data[0]):
            return [RecordedStroke(_parse_points(data))]
        return [
            RecordedStroke(_parse_points(entry), index=index)
            for index, entry in enumerate(data)
        ]

    raise ValueError(f"expected an object or a list, got {type(data).__name__}")


def _is_point(value: Any) -> bool:
    if isinstance(value, dict):
        return "x" in value and "y" in value
    return (
        isinstance(value, (list, tuple))
        and len(value) == 2
        and all(isinstance(v, (int, float)) for v in value)
    )


def _parse_points(entry: Any) -> tuple[Point, ...]:
    if isinstance(entry, dict):
        if "points" not in entry:
            raise ValueError("stroke object has no 'points' key")
        entry = entry["points"]

    if not isinstance(entry, list):
        raise ValueError(f"stroke must be a list of points, got {type(entry).__name__}")

    points: list[Point] = []
    for raw in entry:
        if isinstance(raw, dict):
            points.append(Point.from_dict(raw))
        elif _is_point(raw):
            points.append(Point(float(raw[0]), float(raw[1])))
        else:
            raise ValueError(f"invalid point: {raw!r}")
    return tuple(points)
