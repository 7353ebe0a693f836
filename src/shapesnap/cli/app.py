"""CLI application entry point for shapesnap.

This module provides a developer CLI using Typer. It replays recorded
strokes through the recognizer so thresholds can be tuned against
collected samples.
"""

from pathlib import Path
from typing import Annotated

import typer

from shapesnap import __version__
from shapesnap.cli.output import (
    console,
    print_accuracy,
    print_error,
    print_features_table,
    print_file_info,
    print_header,
    print_results_table,
    print_settings,
    print_step,
    print_summary,
)
from shapesnap.config import (
    GeometryConfig,
    LoggingConfig,
    RecognitionAlgorithm,
    RecognizerSettings,
    ThresholdConfig,
)
from shapesnap.core import ShapeRecognizer, StrokeReplayer, expected_kind
from shapesnap.domain import FeatureBundle
from shapesnap.exceptions import ResultSaveError, ShapesnapError, StrokeFileError
from shapesnap.io import RecordedStroke, ResultWriter, StrokeReader
from shapesnap.utils import RecognitionLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="shapesnap",
    help="Replay recorded freehand strokes through the shape recognizer.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Shapesnap[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Replay recorded freehand strokes through the shape recognizer."""


def _load_strokes(input_file: Path) -> StrokeReader:
    if not input_file.exists():
        print_error(
            f"Input file not found: {input_file}",
            details=f"The file '{input_file}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not input_file.is_file():
        print_error(
            f"Input path is not a file: {input_file}",
            details="Please provide a path to a JSON stroke file.",
        )
        raise typer.Exit(code=1)

    reader = StrokeReader(input_file)
    reader.load()
    return reader


def _build_settings(
    algorithm: str,
    tolerance: float,
    extended: bool,
    log_file: Path | None,
    log_level: str,
) -> RecognizerSettings:
    try:
        algorithm_choice = RecognitionAlgorithm(algorithm.lower())
    except ValueError:
        print_error(
            f"Invalid algorithm: {algorithm}",
            details="Valid values: threshold, coverage",
        )
        raise typer.Exit(code=1)

    return RecognizerSettings(
        algorithm=algorithm_choice,
        geometry=GeometryConfig(simplification_tolerance=tolerance),
        threshold=ThresholdConfig(extended_shapes=extended),
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )


@app.command()
def recognize(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="Path to a JSON file of recorded strokes",
            show_default=False,
        ),
    ],
    algorithm: Annotated[
        str,
        typer.Option(
            "--algorithm",
            "-a",
            help="Classifier strategy (threshold|coverage)",
        ),
    ] = "threshold",
    tolerance: Annotated[
        float,
        typer.Option(
            "--tolerance",
            "-t",
            help="Simplification tolerance in canvas units",
            min=0.0,
            max=100.0,
        ),
    ] = 2.0,
    extended: Annotated[
        bool,
        typer.Option(
            "--extended",
            "-e",
            help="Enable ellipse, diamond and polygon rules",
        ),
    ] = False,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write results as JSON to this path",
        ),
    ] = None,
    save: Annotated[
        bool,
        typer.Option(
            "--save",
            "-s",
            help="Write results next to the input as <name>-results.json",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show feature summaries",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
) -> None:
    """Replay recorded strokes and report what each one is recognized as.

    Each stroke is fed through a full recognition session: samples are
    throttled, short strokes are discarded, and recognition runs after the
    configured delay on a synthetic clock.

    Example:
        shapesnap recognize strokes.json --algorithm coverage
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    settings = _build_settings(algorithm, tolerance, extended, log_file, log_level)

    try:
        configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=quiet,
        )

        if not quiet:
            print_header(__version__)
            print_step("Loading strokes")

        reader = _load_strokes(input_file)

        if not quiet:
            print_file_info(str(input_file), reader.stroke_count, reader.labels)
            print_step("Recognizing")
            print_settings(settings.algorithm.value, tolerance, extended)

        recognition_logger = RecognitionLogger()
        replayer = StrokeReplayer(settings, recognition_logger=recognition_logger)

        rows = []
        per_label: dict[str, tuple[int, int]] = {}
        for stroke in reader.iter_strokes():
            result = replayer.replay(stroke.points)
            expected = expected_kind(stroke.label)
            rows.append((stroke, result, expected))

            if expected is not None and stroke.label is not None:
                correct, total = per_label.get(stroke.label, (0, 0))
                hit = result is not None and result.shape.kind is expected
                per_label[stroke.label] = (correct + int(hit), total + 1)

        if output is None and save:
            output = ResultWriter.get_results_path(input_file)

        output_path = None
        if output is not None:
            writer = ResultWriter(output)
            writer.extend([(stroke, result) for stroke, result, _ in rows])
            output_path = str(writer.save())

        if not quiet:
            print_results_table(rows, verbose=verbose)
            print_accuracy(per_label)
            print_summary(recognition_logger.stats, output_path)

    except StrokeFileError as e:
        print_error(f"Could not load strokes: {e}")
        raise typer.Exit(code=1)
    except ResultSaveError as e:
        print_error(f"Could not save results: {e.reason}")
        raise typer.Exit(code=1)
    except ShapesnapError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command()
def analyze(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="Path to a JSON file of recorded strokes",
            show_default=False,
        ),
    ],
    tolerance: Annotated[
        float,
        typer.Option(
            "--tolerance",
            "-t",
            help="Simplification tolerance in canvas units",
            min=0.0,
            max=100.0,
        ),
    ] = 2.0,
) -> None:
    """Print the features the classifiers see for each stroke.

    Example:
        shapesnap analyze strokes.json
    """
    settings = RecognizerSettings(
        geometry=GeometryConfig(simplification_tolerance=tolerance),
    )
    recognizer = ShapeRecognizer(settings)

    try:
        reader = _load_strokes(input_file)
    except StrokeFileError as e:
        print_error(f"Could not load strokes: {e}")
        raise typer.Exit(code=1)

    print_header(__version__)
    print_file_info(str(input_file), reader.stroke_count, reader.labels)

    rows = []
    for stroke in reader.iter_strokes():
        rows.append(_analyze_stroke(recognizer, stroke))

    print_features_table(rows)


def _analyze_stroke(
    recognizer: ShapeRecognizer, stroke: RecordedStroke
) -> tuple[RecordedStroke, int, FeatureBundle | None]:
    if not stroke.points:
        return (stroke, 0, None)

    simplified, features = recognizer.analyze(stroke.points)
    if len(simplified) < 2:
        return (stroke, len(simplified), None)
    return (stroke, len(simplified), features)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
