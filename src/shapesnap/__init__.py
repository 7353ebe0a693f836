"""Shapesnap - Recognize freehand strokes as clean vector shapes.

Shapesnap takes the samples of a single freehand pointer stroke and turns
them into an idealized primitive: a line, a circle or ellipse, a rectangle
or a triangle. Strokes that match none of these become a simplified
polyline.

Example:
    >>> from shapesnap.core import ShapeRecognizer
    >>> from shapesnap.domain import Point
    >>> recognizer = ShapeRecognizer()
    >>> recognizer.recognize([Point(0, 0), Point(50, 50), Point(100, 100)])
    Line(x1=0, y1=0, x2=100, y2=100)
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
