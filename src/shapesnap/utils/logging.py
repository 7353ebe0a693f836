"""Logging utilities for Shapesnap."""

import logging
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from shapesnap.domain import FeatureBundle, ShapeKind


@dataclass
class RecognitionStats:
    """Statistics from a recognition session."""

    recognized: Counter[str] = field(default_factory=Counter)
    fallback_count: int = 0
    discarded_count: int = 0
    cancelled_count: int = 0
    durations_ms: list[float] = field(default_factory=list)

    @property
    def recognized_count(self) -> int:
        """Strokes that produced a shape, fallbacks included."""
        return sum(self.recognized.values())

    @property
    def avg_duration_ms(self) -> float | None:
        if not self.durations_ms:
            return None
        return sum(self.durations_ms) / len(self.durations_ms)

    @property
    def max_duration_ms(self) -> float | None:
        return max(self.durations_ms) if self.durations_ms else None


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("shapesnap")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class RecognitionLogger:
    """Logger for tracking stroke outcomes and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger("shapesnap")
        self._stats = RecognitionStats()

    def log_stroke_discarded(self, point_count: int, min_points: int) -> None:
        """Log a stroke dropped for having too few samples."""
        self._logger.debug("Stroke discarded", points=point_count, min_points=min_points)
        self._stats.discarded_count += 1

    def log_stroke_cancelled(self, point_count: int) -> None:
        """Log a stroke cancelled before recognition."""
        self._logger.debug("Stroke cancelled", points=point_count)
        self._stats.cancelled_count += 1

    def log_features(self, features: FeatureBundle, raw_count: int, simplified_count: int) -> None:
        """Log the feature bundle of a stroke."""
        self._logger.debug(
            "Features computed",
            raw_points=raw_count,
            simplified_points=simplified_count,
            closed=features.is_closed,
            circularity=round(features.circularity, 3),
            aspect_ratio=round(features.aspect_ratio, 2),
            corners=len(features.corners),
            corners_raw=(
                [round(c.angle, 1) for c in features.corners_raw]
                if features.corners_raw is not None
                else None
            ),
        )

    def log_recognized(
        self,
        kind: ShapeKind,
        algorithm: str,
        fallback: bool,
        duration_ms: float,
    ) -> None:
        """Log a completed recognition pass."""
        self._logger.info(
            "Shape recognized",
            shape=kind.value,
            algorithm=algorithm,
            fallback=fallback,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.recognized[kind.value] += 1
        if fallback:
            self._stats.fallback_count += 1
        self._stats.durations_ms.append(duration_ms)

    @property
    def stats(self) -> RecognitionStats:
        """Get current recognition statistics."""
        return self._stats
