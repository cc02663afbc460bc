"""CLI application entry point for strokematch.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from strokematch import __version__
from strokematch.cli.output import (
    console,
    print_error,
    print_gate_table,
    print_glyph_info,
    print_header,
    print_step,
    print_stroke_outline,
    print_verdict,
)
from strokematch.config import (
    BuildConfig,
    CoordinateConvention,
    LoggingConfig,
    MatchConfig,
    StrokeMatchSettings,
    get_default_settings,
)
from strokematch.core import GlyphModelBuilder, StrokeMatcher, format_outline, resolve_outline_arcs
from strokematch.domain import GlyphModel
from strokematch.exceptions import StrokeMatchError
from strokematch.io import read_glyph_record, read_points
from strokematch.utils import MatchLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="strokematch",
    help="Inspect glyph stroke data and check handwritten strokes against it.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]strokematch[/bold blue] v{__version__}")
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
    """Inspect glyph stroke data and check handwritten strokes against it."""


def _convention(legacy: bool) -> CoordinateConvention:
    return CoordinateConvention.LEGACY_INVERTED if legacy else CoordinateConvention.STANDARD


def _load_glyph(record_path: Path, build: BuildConfig) -> GlyphModel:
    record = read_glyph_record(record_path)
    return GlyphModelBuilder(build).build(record)


@app.command()
def outline(
    record_path: Annotated[
        Path,
        typer.Argument(
            help="JSON file holding one glyph record",
            show_default=False,
        ),
    ],
    legacy: Annotated[
        bool,
        typer.Option(
            "--legacy",
            help="Use the legacy inverted-axis coordinate convention",
        ),
    ] = False,
    drop_unsupported: Annotated[
        bool,
        typer.Option(
            "--drop-unsupported",
            help="Keep strokes whose outline has unsupported arcs, without the outline",
        ),
    ] = False,
) -> None:
    """Print the parsed outline of every stroke of a glyph.

    Example:
        strokematch outline 永.json
    """
    build = get_default_settings().build.model_copy(
        update={
            "convention": _convention(legacy),
            "drop_unsupported_outlines": drop_unsupported,
        }
    )

    try:
        glyph = _load_glyph(record_path, build)
    except FileNotFoundError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except StrokeMatchError as e:
        print_error(f"Could not build glyph: {e}")
        raise typer.Exit(code=1)

    print_glyph_info(glyph.character, len(glyph.strokes), glyph.logical_stroke_count())
    for stroke, logical_id in zip(glyph.strokes, glyph.stroke_map):
        print_stroke_outline(
            index=stroke.id,
            logical_id=logical_id,
            median_count=len(stroke.medians),
            outline_text=format_outline(stroke.outline),
            arcs=resolve_outline_arcs(stroke.outline),
        )


@app.command()
def match(
    record_path: Annotated[
        Path,
        typer.Argument(
            help="JSON file holding one glyph record",
            show_default=False,
        ),
    ],
    points_path: Annotated[
        Path,
        typer.Argument(
            help="JSON file holding the user stroke as [x, y] pairs in unit space",
            show_default=False,
        ),
    ],
    stroke: Annotated[
        int,
        typer.Option(
            "--stroke",
            "-s",
            help="Graphical stroke index; its whole logical stroke is matched",
            min=0,
        ),
    ] = 0,
    legacy: Annotated[
        bool,
        typer.Option(
            "--legacy",
            help="Use the legacy inverted-axis coordinate convention",
        ),
    ] = False,
    frechet_threshold: Annotated[
        float,
        typer.Option(
            "--frechet-threshold",
            help="Shape-fit distance at or above which the stroke is rejected",
        ),
    ] = 0.4,
    min_length_ratio: Annotated[
        float,
        typer.Option(
            "--min-length-ratio",
            help="Minimum user/canonical length ratio",
        ),
    ] = 0.55,
    avg_distance_threshold: Annotated[
        float,
        typer.Option(
            "--avg-distance-threshold",
            help="Average nearest-point distance at or above which the stroke is rejected",
        ),
    ] = 0.1,
    endpoint_threshold: Annotated[
        float,
        typer.Option(
            "--endpoint-threshold",
            help="Maximum start/end point distance",
        ),
    ] = 0.15,
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
            help="Log to the console as well",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only set the exit code",
        ),
    ] = False,
) -> None:
    """Check a user stroke against one logical stroke of a glyph.

    Exits with 0 when the stroke is accepted and 1 when it is rejected.

    Example:
        strokematch match 永.json stroke.json --stroke 2
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    try:
        settings = StrokeMatchSettings(
            match=MatchConfig(
                frechet_threshold=frechet_threshold,
                min_length_ratio=min_length_ratio,
                avg_distance_threshold=avg_distance_threshold,
                endpoint_threshold=endpoint_threshold,
            ),
            build=BuildConfig(convention=_convention(legacy)),
            logging=LoggingConfig(log_file=log_file, log_level=log_level),
        )
    except ValueError as e:
        print_error("Invalid threshold", details=str(e))
        raise typer.Exit(code=1)

    match_logger = MatchLogger(
        configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=not verbose,
        )
    )

    if not quiet:
        print_header(__version__)
        print_step("Loading glyph")

    try:
        glyph = _load_glyph(record_path, settings.build)
        match_logger.log_glyph_built(glyph)
        user_stroke = read_points(points_path)
    except FileNotFoundError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except StrokeMatchError as e:
        match_logger.log_glyph_error(str(record_path), e)
        print_error(f"Could not load input: {e}")
        raise typer.Exit(code=1)

    if stroke >= len(glyph.strokes):
        print_error(
            f"Stroke {stroke} does not exist",
            details=f"'{glyph.character}' has {len(glyph.strokes)} strokes",
        )
        raise typer.Exit(code=1)

    logical_id = glyph.logical_id_at(stroke)
    canonical = glyph.merged_medians(logical_id)

    if not quiet:
        print_glyph_info(glyph.character, len(glyph.strokes), glyph.logical_stroke_count())
        print_step(f"Matching logical stroke {logical_id}")

    matcher = StrokeMatcher(settings.match, settings.normalization)
    result = matcher.match(user_stroke, canonical)
    match_logger.log_match(glyph.character, logical_id, result)

    if not quiet:
        print_gate_table(result)
        print_verdict(result)

    if not result.accepted:
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
