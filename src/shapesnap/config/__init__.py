"""Configuration management for shapesnap.

This module provides configuration management using Pydantic models.
Every tuning constant of the recognizer lives here so alternate threshold
sets can be built without touching global state.

Key classes:
- SamplerConfig: Capture throttling, recognition delay and minimum points
- GeometryConfig: Simplification and feature extraction tolerances
- ThresholdConfig: Rule cascade constants
- CoverageConfig: Template overlap constants
- StyleConfig: Default stroke/fill for emitted shapes
- LoggingConfig: Logging settings
- RecognizerSettings: Main settings
"""

from shapesnap.config.settings import (
    CoverageConfig,
    GeometryConfig,
    LoggingConfig,
    RecognitionAlgorithm,
    RecognizerSettings,
    SamplerConfig,
    StyleConfig,
    ThresholdConfig,
    get_default_settings,
)

__all__ = [
    "CoverageConfig",
    "GeometryConfig",
    "LoggingConfig",
    "RecognitionAlgorithm",
    "RecognizerSettings",
    "SamplerConfig",
    "StyleConfig",
    "ThresholdConfig",
    "get_default_settings",
]
