"""Configuration settings for Shapesnap."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, model_validator


class RecognitionAlgorithm(str, Enum):
    """Classifier strategy used for a recognition pass."""

    THRESHOLD = "threshold"
    COVERAGE = "coverage"


class SamplerConfig(BaseModel):
    """Configuration for stroke capture and the recognition delay."""

    model_config = ConfigDict(frozen=True)

    capture_interval_ms: float = Field(
        default=16.0,
        ge=0.0,
        le=1000.0,
        description="Minimum time between accepted samples (~60 fps)",
    )
    recognition_delay_ms: float = Field(
        default=1500.0,
        ge=0.0,
        le=10000.0,
        description="Delay between stroke end and recognition",
    )
    min_points: int = Field(
        default=5,
        ge=2,
        le=100,
        description="Strokes with fewer samples are discarded",
    )


class GeometryConfig(BaseModel):
    """Configuration for simplification and feature extraction.

    Distances are in canvas units, angles in degrees.
    """

    model_config = ConfigDict(frozen=True)

    simplification_tolerance: float = Field(
        default=2.0,
        ge=0.0,
        le=100.0,
        description="Ramer-Douglas-Peucker tolerance",
    )
    closure_threshold: float = Field(
        default=20.0,
        gt=0.0,
        le=500.0,
        description="Maximum endpoint gap for a stroke to count as closed",
    )
    corner_angle_threshold: float = Field(
        default=130.0,
        gt=0.0,
        le=180.0,
        description="Angles below this mark a corner",
    )
    corner_look_ahead: int = Field(
        default=2,
        ge=1,
        le=20,
        description="Half-width of the corner detection window in points",
    )


class ThresholdConfig(BaseModel):
    """Tuning constants for the threshold rule cascade.

    Values were tuned against hand-drawn trackpad strokes. The rectangle
    and triangle corner ranges overlap on purpose; rule order settles it.
    """

    model_config = ConfigDict(frozen=True)

    line_circularity_max: float = Field(default=0.75, ge=0.0, le=1.0)
    line_aspect_ratio_min: float = Field(
        default=3.0,
        gt=1.0,
        description="Open strokes wider or taller than this ratio are lines",
    )

    circle_circularity_min: float = Field(default=0.93, ge=0.0, le=1.0)
    circle_aspect_min: float = Field(default=0.85, gt=0.0)
    circle_aspect_max: float = Field(default=1.15, gt=0.0)
    circle_corners_max: int = Field(
        default=2,
        ge=0,
        description="Circles may show at most this many corners",
    )

    rect_corners_min: int = Field(default=2, ge=0)
    rect_corners_max: int = Field(default=6, ge=0)
    rect_aspect_min: float = Field(default=0.25, gt=0.0)
    rect_aspect_max: float = Field(default=4.0, gt=0.0)
    rect_two_corner_circularity_max: float = Field(
        default=0.90,
        ge=0.0,
        le=1.0,
        description="Two-corner strokes rounder than this are not rectangles",
    )

    triangle_corners_min: int = Field(default=2, ge=0)
    triangle_corners_max: int = Field(default=5, ge=0)
    triangle_circularity_max: float = Field(default=0.94, ge=0.0, le=1.0)

    extended_shapes: bool = Field(
        default=False,
        description="Also try ellipse, diamond and polygon rules",
    )
    ellipse_circularity_min: float = Field(default=0.82, ge=0.0, le=1.0)
    rect_corner_angle_min: float = Field(default=116.0, ge=0.0, le=180.0)
    rect_corner_angle_max: float = Field(default=180.0, ge=0.0, le=180.0)
    polygon_corners_min: int = Field(default=5, ge=3)
    polygon_corners_max: int = Field(default=8, ge=3)
    polygon_inner_ratio: float = Field(default=0.85, gt=0.0, le=1.0)

    @model_validator(mode="after")
    def _check_ranges(self) -> "ThresholdConfig":
        pairs = [
            ("circle_aspect_min", "circle_aspect_max"),
            ("rect_corners_min", "rect_corners_max"),
            ("rect_aspect_min", "rect_aspect_max"),
            ("triangle_corners_min", "triangle_corners_max"),
            ("rect_corner_angle_min", "rect_corner_angle_max"),
            ("polygon_corners_min", "polygon_corners_max"),
        ]
        for low, high in pairs:
            if getattr(self, low) > getattr(self, high):
                raise ValueError(f"{low} must not exceed {high}")
        return self


class CoverageConfig(BaseModel):
    """Tuning constants for template overlap scoring."""

    model_config = ConfigDict(frozen=True)

    circle_threshold: float = Field(default=0.60, ge=0.0, le=1.0)
    rectangle_threshold: float = Field(default=0.55, ge=0.0, le=1.0)
    triangle_threshold: float = Field(default=0.50, ge=0.0, le=1.0)
    line_distance_threshold: float = Field(
        default=5.0,
        ge=0.0,
        description="Mean distance from the chord below which a stroke is a line",
    )
    grid_size: int = Field(
        default=50,
        ge=4,
        le=1000,
        description="Minimum raster cells per axis",
    )
    padding: float = Field(
        default=5.0,
        ge=0.0,
        description="Margin added around the stroke bounds before rasterizing",
    )


class StyleConfig(BaseModel):
    """Default styling applied to emitted shapes."""

    model_config = ConfigDict(frozen=True)

    stroke: str = Field(default="#000000", description="Stroke colour")
    fill: str = Field(default="none", description="Fill colour")
    stroke_width: float = Field(default=2.0, ge=0.0, le=100.0)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(frozen=True)

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class RecognizerSettings(BaseModel):
    """Main recognizer settings."""

    model_config = ConfigDict(frozen=True)

    algorithm: RecognitionAlgorithm = Field(default=RecognitionAlgorithm.THRESHOLD)
    sampler: SamplerConfig = Field(default_factory=SamplerConfig)
    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    threshold: ThresholdConfig = Field(default_factory=ThresholdConfig)
    coverage: CoverageConfig = Field(default_factory=CoverageConfig)
    style: StyleConfig = Field(default_factory=StyleConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> RecognizerSettings:
    """Get default recognizer settings."""
    return RecognizerSettings()
