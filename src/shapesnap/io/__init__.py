"""Stroke file I/O layer for shapesnap.

This module handles reading recorded strokes and writing recognition
reports. Recognition itself never touches files; this layer serves the
developer CLI that replays collected strokes.

Key classes:
- StrokeReader: Load recorded strokes from JSON
- ResultWriter: Save recognition results as JSON
"""

from shapesnap.io.reader import RecordedStroke, StrokeReader, parse_strokes
from shapesnap.io.writer import ResultWriter, result_to_dict

__all__ = [
    "RecordedStroke",
    "ResultWriter",
    "StrokeReader",
    "parse_strokes",
    "result_to_dict",
]
