"""Rich console output helpers for the CLI.

This module provides console output using the Rich library: headers,
step indicators, result and feature tables, and formatted messages.
"""

from collections.abc import Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from shapesnap.core import RecognitionResult
from shapesnap.domain import FeatureBundle, ShapeKind
from shapesnap.io import RecordedStroke
from shapesnap.utils import RecognitionStats

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Shapesnap[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_file_info(path: str, stroke_count: int, labels: Sequence[str]) -> None:
    """Print stroke file information.

    Args:
        path: Path to the stroke file
        stroke_count: Number of strokes loaded
        labels: Distinct labels in the file
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(path)
    console.print(line)
    label_info = ", ".join(labels) if labels else "unlabelled"
    console.print(f"  {stroke_count:,} strokes {SYM_DOT} {label_info}")


def print_settings(algorithm: str, tolerance: float, extended: bool) -> None:
    extended_info = f" {SYM_DOT} extended shapes" if extended else ""
    console.print(f"  {algorithm} {SYM_DOT} tolerance {tolerance:g}{extended_info}")


def _describe_features(features: FeatureBundle) -> str:
    closed = "closed" if features.is_closed else "open"
    return (
        f"{closed}, circ {features.circularity:.2f}, "
        f"aspect {features.aspect_ratio:.2f}, {features.corner_count} corners"
    )


def print_results_table(
    rows: Sequence[tuple[RecordedStroke, RecognitionResult | None, ShapeKind | None]],
    verbose: bool = False,
) -> None:
    """Print one row per replayed stroke.

    Args:
        rows: Tuples of (stroke, result, expected kind)
        verbose: Whether to include a feature summary column
    """
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Stroke")
    table.add_column("Raw", justify="right")
    table.add_column("Simplified", justify="right")
    table.add_column("Result")
    if verbose:
        table.add_column("Features")

    for stroke, result, expected in rows:
        if result is None:
            cells = [stroke.name, str(len(stroke.points)), "-", "[dim]discarded[/dim]"]
            if verbose:
                cells.append("")
            table.add_row(*cells)
            continue

        kind = result.shape.kind.value
        if result.fallback:
            kind += " (fallback)"
        if expected is not None:
            style = "green" if result.shape.kind is expected else "red"
            kind = f"[{style}]{kind}[/{style}]"

        cells = [stroke.name, str(result.raw_count), str(len(result.simplified)), kind]
        if verbose:
            cells.append(_describe_features(result.features))
        table.add_row(*cells)

    console.print()
    console.print(table)


def print_features_table(
    rows: Sequence[tuple[RecordedStroke, int, FeatureBundle | None]],
) -> None:
    """Print the feature bundle of each stroke.

    Args:
        rows: Tuples of (stroke, simplified point count, features); features
            are None for strokes too short to analyze
    """
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 1))
    table.add_column("Stroke")
    table.add_column("Points", justify="right")
    table.add_column("Closed")
    table.add_column("Circularity", justify="right")
    table.add_column("Aspect", justify="right")
    table.add_column("Corners", justify="right")
    table.add_column("Raw corners", justify="right")

    for stroke, simplified_count, features in rows:
        points = f"{len(stroke.points)}/{simplified_count}"
        if features is None:
            table.add_row(stroke.name, points, "-", "-", "-", "-", "-")
            continue

        raw_corners = (
            ", ".join(f"{c.angle:.0f}°" for c in features.corners_raw)
            if features.corners_raw
            else "-"
        )
        table.add_row(
            stroke.name,
            points,
            "yes" if features.is_closed else "no",
            f"{features.circularity:.3f}",
            f"{features.aspect_ratio:.2f}",
            str(len(features.corners)),
            raw_corners,
        )

    console.print()
    console.print(table)


def print_accuracy(per_label: dict[str, tuple[int, int]]) -> None:
    """Print per-label accuracy.

    Args:
        per_label: Mapping of label to (correct, total)
    """
    if not per_label:
        return

    console.print("\n[bold]Accuracy[/bold]\n")
    correct_sum = 0
    total_sum = 0
    for label, (correct, total) in per_label.items():
        correct_sum += correct
        total_sum += total
        pct = 100 * correct / total if total else 0.0
        style = "green" if correct == total else "yellow"
        console.print(f"  {label:<14}[{style}]{correct}/{total}[/{style}] ({pct:.0f}%)")

    pct = 100 * correct_sum / total_sum if total_sum else 0.0
    console.print(f"  {'overall':<14}{correct_sum}/{total_sum} ({pct:.0f}%)")


def print_summary(stats: RecognitionStats, output_path: str | None = None) -> None:
    """Print a session summary.

    Args:
        stats: Recognition statistics for the run
        output_path: Report path, if one was written
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green]")

    kinds = f" {SYM_DOT} ".join(f"{count} {kind}" for kind, count in sorted(stats.recognized.items()))
    if kinds:
        console.print(f"  {kinds}")
    console.print(
        f"  {stats.recognized_count} recognized {SYM_DOT} {stats.fallback_count} fallback "
        f"{SYM_DOT} {stats.discarded_count} discarded"
    )

    if stats.avg_duration_ms is not None and stats.max_duration_ms is not None:
        console.print(f"  {stats.avg_duration_ms:.2f}ms avg ({stats.max_duration_ms:.2f}ms max)")

    if output_path is not None:
        line = Text("  ")
        line.append(output_path, style="bold")
        console.print(line)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
