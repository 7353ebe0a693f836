"""Result writer for saving recognition results.

This module provides the ResultWriter class for writing the outcome of
replayed strokes as a JSON report.
"""

import json
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path
from typing import Any

from shapesnap import __version__
from shapesnap.core.recognizer import RecognitionResult
from shapesnap.exceptions import ResultSaveError
from shapesnap.io.reader import RecordedStroke


def result_to_dict(stroke: RecordedStroke, result: RecognitionResult | None) -> dict[str, Any]:
    """Serialize one replayed stroke.

    Args:
        stroke: The recorded stroke
        result: Its recognition result, or None if it was discarded

    Returns:
        JSON-ready dictionary
    """
    entry: dict[str, Any] = {
        "name": stroke.name,
        "label": stroke.label,
        "raw_points": len(stroke.points),
    }
    if result is None:
        entry["discarded"] = True
        return entry

    entry.update(
        {
            "discarded": False,
            "algorithm": result.algorithm.value,
            "simplified_points": len(result.simplified),
            "fallback": result.fallback,
            "features": result.features.to_dict(),
            "shape": result.shape.to_dict(),
            "duration_ms": round(result.duration_ms, 3),
        }
    )
    return entry


class ResultWriter:
    """Writes recognition results to a JSON file.

    Example:
        writer = ResultWriter(Path("results.json"))
        writer.add(stroke, result)
        writer.save()
    """

    def __init__(self, output_path: Path) -> None:
        """Initialize the result writer.

        Args:
            output_path: Path where the report will be saved
        """
        self._output_path = output_path
        self._entries: list[dict[str, Any]] = []

    def add(self, stroke: RecordedStroke, result: RecognitionResult | None) -> None:
        self._entries.append(result_to_dict(stroke, result))

    def extend(self, pairs: Sequence[tuple[RecordedStroke, RecognitionResult | None]]) -> None:
        for stroke, result in pairs:
            self.add(stroke, result)

    @property
    def entry_count(self) -> int:
        return len(self._entries)

    def save(self) -> Path:
        """Write the report.

        Returns:
            Path of the written file

        Raises:
            ResultSaveError: If the file cannot be written
        """
        report = {
            "generator": f"shapesnap {__version__}",
            "created": datetime.now().strftime("%Y-%m-%dT%H:%M:%S"),
            "results": self._entries,
        }

        try:
            self._output_path.write_text(json.dumps(report, indent=2), encoding="utf-8")
        except OSError as e:
            raise ResultSaveError(str(self._output_path), str(e)) from e

        return self._output_path

    @staticmethod
    def get_results_path(input_path: Path) -> Path:
        """Derive the default report path from a stroke file path.

        Converts: strokes.json -> strokes-results.json

        Args:
            input_path: Stroke file path

        Returns:
            Path with -results suffix before the extension
        """
        return input_path.parent / f"{input_path.stem}-results.json"
