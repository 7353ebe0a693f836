"""Utility functions for shapesnap.

This module provides utility functions including:

- Logging setup and configuration
- Recognition statistics
"""

from shapesnap.utils.logging import (
    RecognitionLogger,
    RecognitionStats,
    configure_logging,
)

__all__ = [
    "RecognitionLogger",
    "RecognitionStats",
    "configure_logging",
]
