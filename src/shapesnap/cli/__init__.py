"""Command-line interface for shapesnap.

This module provides a developer CLI using Typer with rich output. The
recognition engine has no CLI of its own; this one replays recorded
strokes so thresholds can be checked against collected samples.

Key features:
- Replay through the full capture/recognition session
- Threshold or coverage classification
- Per-label accuracy for labelled datasets
- Feature tables for tuning
"""

from shapesnap.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
