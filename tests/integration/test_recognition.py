"""End-to-end recognition through a full session.

Strokes are replayed on a synthetic clock so throttling, discarding and
the recognition delay behave exactly as they would under a pointer.
"""

import asyncio

import pytest
from structlog.testing import capture_logs

from shapesnap.config import RecognitionAlgorithm, RecognizerSettings, SamplerConfig
from shapesnap.core import InMemoryShapeStore, ManualScheduler, RecognitionSession, StrokeReplayer
from shapesnap.core.replay import expected_kind
from shapesnap.core.sampler import SamplerState
from shapesnap.domain import Ellipse, Line, Point, Polyline, Rectangle, ShapeKind
from shapesnap.utils import RecognitionLogger

ALGORITHMS = [RecognitionAlgorithm.THRESHOLD, RecognitionAlgorithm.COVERAGE]


@pytest.fixture(params=ALGORITHMS, ids=lambda a: a.value)
def replayer(request):
    return StrokeReplayer(RecognizerSettings(algorithm=request.param))


class TestScenarios:
    """Drawing scenarios run under both classifier strategies."""

    def test_straight_line(self, replayer, diagonal_line):
        result = replayer.replay(diagonal_line)

        assert result is not None
        assert result.shape == Line(0, 0, 100, 100)
        assert not result.fallback
        assert replayer.store.shapes[-1].shape == Line(0, 0, 100, 100)

    def test_rectangle_trace(self, replayer, rectangle_stroke):
        result = replayer.replay(rectangle_stroke)

        assert result is not None
        assert result.shape == Rectangle(50, 50, 100, 50)
        assert result.raw_count == 31
        assert len(result.simplified) == 5

    def test_circle_trace(self, replayer, circle_stroke):
        result = replayer.replay(circle_stroke)

        assert result is not None
        assert isinstance(result.shape, Ellipse)
        assert result.shape.is_circle
        assert result.shape.cx == pytest.approx(100, abs=4)
        assert result.shape.cy == pytest.approx(100, abs=4)
        assert result.shape.rx == pytest.approx(50, abs=2)

    def test_squiggle_falls_back(self, replayer, squiggle):
        result = replayer.replay(squiggle)

        assert result is not None
        assert result.fallback
        assert result.shape == Polyline(result.simplified)

    def test_short_stroke_discarded(self, replayer, make_points):
        result = replayer.replay(make_points((0, 0), (10, 10), (20, 20)))

        assert result is None
        assert len(replayer.store) == 0
        assert replayer.session.stats.discarded_count == 1

    def test_one_shape_per_stroke(self, replayer, diagonal_line, rectangle_stroke, squiggle):
        for stroke in (diagonal_line, rectangle_stroke, squiggle):
            replayer.replay(stroke)

        assert [s.kind for s in replayer.store.shapes] == [
            ShapeKind.LINE,
            ShapeKind.RECTANGLE,
            ShapeKind.POLYLINE,
        ]
        assert replayer.session.state is SamplerState.IDLE

    def test_styled_with_defaults(self, replayer, diagonal_line):
        replayer.replay(diagonal_line)

        styled = replayer.session.last_emitted
        assert styled is not None
        assert (styled.stroke, styled.fill, styled.stroke_width) == ("#000000", "none", 2.0)


class TestSession:
    """Tests for the session wiring."""

    @pytest.fixture
    def scheduler(self):
        return ManualScheduler()

    @pytest.fixture
    def store(self):
        return InMemoryShapeStore()

    @pytest.fixture
    def session(self, store, scheduler):
        return RecognitionSession(store=store, scheduler=scheduler, clock=scheduler.time)

    def _draw(self, session, scheduler, points):
        session.begin(points[0])
        for sample in points[1:-1]:
            scheduler.advance(0.02)
            session.add(sample)
        scheduler.advance(0.02)
        return session.end(points[-1])

    def test_nothing_emitted_before_delay(self, session, scheduler, store, diagonal_line):
        assert self._draw(session, scheduler, diagonal_line)

        scheduler.advance(1.0)
        assert len(store) == 0
        assert session.state is SamplerState.PENDING

        scheduler.advance(0.6)
        assert len(store) == 1

    def test_cancel_pending_stroke(self, session, scheduler, store, diagonal_line):
        self._draw(session, scheduler, diagonal_line)

        assert session.cancel()
        scheduler.advance(5)

        assert len(store) == 0
        assert session.stats.cancelled_count == 1

    def test_cancel_when_idle_not_counted(self, session):
        assert not session.cancel()
        assert session.stats.cancelled_count == 0

    def test_new_stroke_during_pending_window(self, session, scheduler, store, diagonal_line, squiggle):
        """Only the second stroke is recognized."""
        self._draw(session, scheduler, diagonal_line)
        scheduler.advance(0.5)

        self._draw(session, scheduler, squiggle)
        scheduler.advance(2)

        assert len(store) == 1
        assert store.shapes[0].kind is ShapeKind.POLYLINE

    def test_preview_points(self, session, scheduler):
        session.begin(Point(0, 0))
        scheduler.advance(0.02)
        session.add(Point(5, 5))

        assert session.points == (Point(0, 0), Point(5, 5))

    def test_stats(self, session, scheduler, diagonal_line, squiggle, make_points):
        for stroke in (diagonal_line, squiggle, make_points((0, 0), (1, 1))):
            self._draw(session, scheduler, stroke)
            scheduler.advance(2)

        stats = session.stats
        assert stats.recognized_count == 2
        assert stats.recognized["line"] == 1
        assert stats.fallback_count == 1
        assert stats.discarded_count == 1
        assert len(stats.durations_ms) == 2

    def test_identical_points_emit_degenerate_line(self, session, scheduler, store):
        self._draw(session, scheduler, [Point(40, 40)] * 6)
        scheduler.advance(2)

        assert store.shapes[0].shape == Line(40, 40, 40, 40)

    def test_synchronous_session_without_loop_resets(self, store):
        settings = RecognizerSettings(sampler=SamplerConfig(capture_interval_ms=0))
        session = RecognitionSession(store=store, settings=settings)
        session.begin(Point(0, 0))
        for x in range(10, 100, 10):
            session.add(Point(x, x))

        with pytest.raises(RuntimeError):
            session.end(Point(100, 100))

        assert session.state is SamplerState.IDLE
        assert session.points == ()
        assert len(store) == 0

    def test_custom_sampler_settings(self, store, scheduler, make_points):
        settings = RecognizerSettings(sampler=SamplerConfig(min_points=3, recognition_delay_ms=100))
        session = RecognitionSession(store=store, settings=settings, scheduler=scheduler, clock=scheduler.time)

        assert self._draw(session, scheduler, make_points((0, 0), (50, 0), (100, 0)))
        scheduler.advance(0.2)

        assert store.shapes[0].shape == Line(0, 0, 100, 0)


class TestLogging:
    """Tests for structured log events."""

    def test_recognition_events(self, diagonal_line):
        with capture_logs() as logs:
            StrokeReplayer(recognition_logger=RecognitionLogger()).replay(diagonal_line)

        events = [entry["event"] for entry in logs]
        assert "Features computed" in events
        recognized = next(entry for entry in logs if entry["event"] == "Shape recognized")
        assert recognized["shape"] == "line"
        assert recognized["algorithm"] == "threshold"
        assert recognized["fallback"] is False

    def test_discard_event(self, make_points):
        with capture_logs() as logs:
            StrokeReplayer(recognition_logger=RecognitionLogger()).replay(make_points((0, 0), (1, 1)))

        discarded = [entry for entry in logs if entry["event"] == "Stroke discarded"]
        assert discarded == [
            {"event": "Stroke discarded", "log_level": "debug", "points": 2, "min_points": 5}
        ]


class TestAsyncSession:
    """Tests for a session on a running event loop."""

    def test_recognizes_after_delay(self):
        store = InMemoryShapeStore()
        settings = RecognizerSettings(sampler=SamplerConfig(recognition_delay_ms=20))

        async def scenario():
            session = RecognitionSession(store=store, settings=settings)
            session.begin(Point(0, 0))
            for x in range(20, 100, 20):
                await asyncio.sleep(0.02)
                session.add(Point(x, x))
            await asyncio.sleep(0.02)
            session.end(Point(100, 100))
            await asyncio.sleep(0.1)

        asyncio.run(scenario())

        assert [s.shape for s in store.shapes] == [Line(0, 0, 100, 100)]


class TestExpectedKind:
    """Tests for dataset label mapping."""

    @pytest.mark.parametrize(
        ("label", "kind"),
        [
            ("circle", ShapeKind.ELLIPSE),
            ("Square", ShapeKind.RECTANGLE),
            (" triangle ", ShapeKind.POLYGON),
            ("squiggle", ShapeKind.POLYLINE),
        ],
    )
    def test_known_labels(self, label, kind):
        assert expected_kind(label) is kind

    def test_unknown_label(self):
        assert expected_kind("heart") is None
        assert expected_kind(None) is None
