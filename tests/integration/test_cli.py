"""Tests for the developer CLI."""

import json
import math

import pytest
from typer.testing import CliRunner

from shapesnap import __version__
from shapesnap.cli import app

runner = CliRunner()


def _rectangle(x, y, width, height, step=10):
    points = [[x, y]]
    cx, cy = x, y
    for dx, dy, length in ((step, 0, width), (0, step, height), (-step, 0, width), (0, -step, height)):
        for _ in range(length // step):
            cx += dx
            cy += dy
            points.append([cx, cy])
    return points


def _circle(cx, cy, radius, count=36):
    points = [
        {"x": cx + radius * math.cos(2 * math.pi * i / count), "y": cy + radius * math.sin(2 * math.pi * i / count)}
        for i in range(count)
    ]
    points.append(points[0])
    return points


@pytest.fixture
def stroke_file(tmp_path):
    data = {
        "line": [{"points": [[0, 0], [25, 25], [50, 50], [75, 75], [100, 100]]}],
        "rectangle": [{"points": _rectangle(50, 50, 100, 50)}],
        "circle": [{"points": _circle(100, 100, 50)}],
        "squiggle": [[[0, 0], [20, 30], [40, 10], [60, 40], [80, 20], [100, 50]]],
    }
    path = tmp_path / "strokes.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestRecognizeCommand:
    """Tests for the recognize command."""

    def test_recognize(self, stroke_file):
        result = runner.invoke(app, ["recognize", str(stroke_file)])

        assert result.exit_code == 0, result.output
        assert "Accuracy" in result.output
        assert "4/4" in result.output

    @pytest.mark.parametrize("algorithm", ["threshold", "coverage", "COVERAGE"])
    def test_algorithms(self, stroke_file, algorithm):
        result = runner.invoke(app, ["recognize", str(stroke_file), "--algorithm", algorithm])

        assert result.exit_code == 0, result.output

    def test_invalid_algorithm(self, stroke_file):
        result = runner.invoke(app, ["recognize", str(stroke_file), "-a", "neural"])

        assert result.exit_code == 1
        assert "Invalid algorithm" in result.output

    def test_writes_report(self, stroke_file, tmp_path):
        output = tmp_path / "report.json"

        result = runner.invoke(app, ["recognize", str(stroke_file), "-o", str(output), "-q"])

        assert result.exit_code == 0, result.output
        report = json.loads(output.read_text(encoding="utf-8"))
        shapes = {entry["name"]: entry["shape"]["type"] for entry in report["results"]}
        assert shapes == {
            "line#0": "line",
            "rectangle#0": "rectangle",
            "circle#0": "ellipse",
            "squiggle#0": "polyline",
        }

    def test_save_writes_beside_input(self, stroke_file):
        result = runner.invoke(app, ["recognize", str(stroke_file), "--save", "-q"])

        assert result.exit_code == 0, result.output
        report_path = stroke_file.parent / "strokes-results.json"
        report = json.loads(report_path.read_text(encoding="utf-8"))
        assert len(report["results"]) == 4

    def test_explicit_output_wins_over_save(self, stroke_file, tmp_path):
        output = tmp_path / "custom.json"

        result = runner.invoke(app, ["recognize", str(stroke_file), "-s", "-o", str(output), "-q"])

        assert result.exit_code == 0, result.output
        assert output.exists()
        assert not (tmp_path / "strokes-results.json").exists()

    def test_quiet_prints_nothing(self, stroke_file):
        result = runner.invoke(app, ["recognize", str(stroke_file), "--quiet"])

        assert result.exit_code == 0
        assert "Accuracy" not in result.output

    def test_verbose_and_quiet_conflict(self, stroke_file):
        result = runner.invoke(app, ["recognize", str(stroke_file), "-v", "-q"])

        assert result.exit_code == 1
        assert "--verbose and --quiet" in result.output

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["recognize", str(tmp_path / "nope.json")])

        assert result.exit_code == 1
        assert "not found" in result.output

    def test_directory_rejected(self, tmp_path):
        result = runner.invoke(app, ["recognize", str(tmp_path)])

        assert result.exit_code == 1
        assert "not a file" in result.output

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("[", encoding="utf-8")

        result = runner.invoke(app, ["recognize", str(path)])

        assert result.exit_code == 1
        assert "Could not load strokes" in result.output

    def test_log_file(self, stroke_file, tmp_path):
        log_file = tmp_path / "run.log"

        result = runner.invoke(app, ["recognize", str(stroke_file), "-q", "--log-file", str(log_file)])

        assert result.exit_code == 0
        assert "Shape recognized" in log_file.read_text(encoding="utf-8")


class TestAnalyzeCommand:
    """Tests for the analyze command."""

    def test_analyze(self, stroke_file):
        result = runner.invoke(app, ["analyze", str(stroke_file)])

        assert result.exit_code == 0, result.output
        assert "rectangle#0" in result.output

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["analyze", str(tmp_path / "nope.json")])

        assert result.exit_code == 1


class TestVersion:
    """Tests for the version flag."""

    def test_version(self):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output
