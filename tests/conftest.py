"""Shared fixtures for shapesnap tests."""

import logging
import math

import pytest
import structlog

from shapesnap.domain import Point


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo handlers and structlog configuration added by configure_logging."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
    structlog.reset_defaults()


def _rectangle_trace(x, y, width, height, step=10):
    # Clockwise from the top-left corner, ending back on it
    points = [Point(x, y)]
    cx, cy = x, y
    for dx, dy, length in ((step, 0, width), (0, step, height), (-step, 0, width), (0, -step, height)):
        for _ in range(round(length / step)):
            cx += dx
            cy += dy
            points.append(Point(cx, cy))
    return points


def _circle_trace(cx, cy, radius, count=36):
    points = [
        Point(
            cx + radius * math.cos(2 * math.pi * i / count),
            cy + radius * math.sin(2 * math.pi * i / count),
        )
        for i in range(count)
    ]
    points.append(points[0])
    return points


@pytest.fixture
def make_points():
    """Build a point list from (x, y) pairs."""

    def build(*coords):
        return [Point(x, y) for x, y in coords]

    return build


@pytest.fixture
def make_rectangle():
    return _rectangle_trace


@pytest.fixture
def make_circle():
    return _circle_trace


@pytest.fixture
def diagonal_line():
    return [Point(0, 0), Point(25, 25), Point(50, 50), Point(75, 75), Point(100, 100)]


@pytest.fixture
def rectangle_stroke():
    """Dense 100x50 rectangle trace at (50, 50), 31 samples."""
    return _rectangle_trace(50, 50, 100, 50)


@pytest.fixture
def squiggle():
    return [Point(0, 0), Point(20, 30), Point(40, 10), Point(60, 40), Point(80, 20), Point(100, 50)]


@pytest.fixture
def circle_stroke():
    """36 samples on a radius-50 circle around (100, 100), closed."""
    return _circle_trace(100, 100, 50)
