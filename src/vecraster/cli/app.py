"""CLI application entry point for vecraster.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from vecraster import __version__
from vecraster.cli.output import (
    console,
    print_cancellation_notice,
    print_error,
    print_grid,
    print_header,
    print_path_info,
    print_step,
    print_success,
)
from vecraster.config import (
    LoggingConfig,
    OutputConfig,
    RasterConfig,
    StrokeConfig,
    VecrasterSettings,
)
from vecraster.core import RenderProcessor
from vecraster.domain import FillRule, Grid
from vecraster.domain import Path as VectorPath
from vecraster.exceptions import PathLoadError, VecrasterError
from vecraster.io import GridWriter, PathReader
from vecraster.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="vecraster",
    help="Rasterize vector paths into binary coverage grids.",
    add_completion=False,
    no_args_is_help=True,
)

PathFileArgument = Annotated[
    Path,
    typer.Argument(
        help="Path to a JSON path file",
        show_default=False,
    ),
]
WidthOption = Annotated[
    int,
    typer.Option("--width", help="Grid width in pixels", min=0),
]
HeightOption = Annotated[
    int,
    typer.Option("--height", help="Grid height in pixels", min=0),
]
OutputOption = Annotated[
    Path | None,
    typer.Option(
        "--output",
        "-o",
        help="Write the grid to a file (.pbm for PBM, anything else for text)",
    ),
]
PreviewOption = Annotated[
    bool,
    typer.Option("--preview", help="Also print the grid when writing to --output"),
]
EpsilonOption = Annotated[
    float,
    typer.Option(
        "--epsilon",
        help="Treat determinants with magnitude <= epsilon as parallel (0 = exact)",
        min=0.0,
        max=1.0,
    ),
]
ParallelOption = Annotated[
    bool,
    typer.Option("--parallel", help="Render rows in worker processes"),
]
WorkersOption = Annotated[
    int | None,
    typer.Option(
        "--workers",
        "-j",
        help="Number of parallel workers (default: auto)",
        min=1,
    ),
]
FilledCharOption = Annotated[
    str,
    typer.Option("--filled-char", help="Character for filled cells"),
]
EmptyCharOption = Annotated[
    str,
    typer.Option("--empty-char", help="Character for empty cells"),
]
LogFileOption = Annotated[
    Path | None,
    typer.Option("--log-file", help="Write detailed logs to file"),
]
LogLevelOption = Annotated[
    str,
    typer.Option("--log-level", help="Logging level (DEBUG|INFO|WARNING|ERROR)"),
]
QuietOption = Annotated[
    bool,
    typer.Option("--quiet", "-q", help="Minimal console output"),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]vecraster[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_options(
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
    """Rasterize vector paths into binary coverage grids."""


@app.command()
def fill(
    path_file: PathFileArgument,
    width: WidthOption = 30,
    height: HeightOption = 10,
    rule: Annotated[
        str,
        typer.Option(
            "--rule",
            "-r",
            help="Fill rule (nonzero|evenodd)",
        ),
    ] = "nonzero",
    output: OutputOption = None,
    preview: PreviewOption = False,
    epsilon: EpsilonOption = 0.0,
    parallel: ParallelOption = False,
    workers: WorkersOption = None,
    filled_char: FilledCharOption = "#",
    empty_char: EmptyCharOption = ".",
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Fill the contours of a path file under a fill rule.

    Example:
        vecraster fill samples/figure_eight.json --width 20 --height 16 --rule evenodd
    """
    try:
        fill_rule = FillRule(rule.lower())
    except ValueError:
        print_error(
            f"Invalid fill rule: {rule}",
            details="Valid values: nonzero, evenodd",
        )
        raise typer.Exit(code=1)

    settings = _build_settings(
        fill_rule=fill_rule,
        epsilon=epsilon,
        parallel=parallel,
        workers=workers,
        filled_char=filled_char,
        empty_char=empty_char,
        log_file=log_file,
        log_level=log_level,
        quiet=quiet,
    )

    _run(
        operation="fill",
        path_file=path_file,
        width=width,
        height=height,
        settings=settings,
        output=output,
        preview=preview,
        quiet=quiet,
    )


@app.command()
def stroke(
    path_file: PathFileArgument,
    width: WidthOption = 30,
    height: HeightOption = 10,
    stroke_width: Annotated[
        float,
        typer.Option(
            "--stroke-width",
            "-s",
            help="Full width of each stroked segment",
            min=0.0,
        ),
    ] = 1.0,
    output: OutputOption = None,
    preview: PreviewOption = False,
    epsilon: EpsilonOption = 0.0,
    parallel: ParallelOption = False,
    workers: WorkersOption = None,
    filled_char: FilledCharOption = "#",
    empty_char: EmptyCharOption = ".",
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Stroke every segment of a path file with a rectangular pen.

    Example:
        vecraster stroke samples/hi.json --width 15 --height 9 --stroke-width 1
    """
    settings = _build_settings(
        stroke_width=stroke_width,
        epsilon=epsilon,
        parallel=parallel,
        workers=workers,
        filled_char=filled_char,
        empty_char=empty_char,
        log_file=log_file,
        log_level=log_level,
        quiet=quiet,
    )

    _run(
        operation="stroke",
        path_file=path_file,
        width=width,
        height=height,
        settings=settings,
        output=output,
        preview=preview,
        quiet=quiet,
    )


def _build_settings(
    epsilon: float,
    parallel: bool,
    workers: int | None,
    filled_char: str,
    empty_char: str,
    log_file: Path | None,
    log_level: str,
    quiet: bool,
    fill_rule: FillRule = FillRule.NONZERO,
    stroke_width: float = 1.0,
) -> VecrasterSettings:
    """Create settings from CLI arguments.

    Raises:
        typer.Exit: If an option value is rejected by the settings models
    """
    try:
        return VecrasterSettings(
            raster=RasterConfig(
                fill_rule=fill_rule,
                intersection_epsilon=epsilon,
                parallel=parallel,
                max_workers=workers,
            ),
            stroke=StrokeConfig(width=stroke_width),
            output=OutputConfig(filled_char=filled_char, empty_char=empty_char),
            logging=LoggingConfig(
                log_file=log_file,
                log_level=log_level if not quiet else "WARNING",
            ),
        )
    except ValueError as e:
        print_error("Invalid option", details=str(e))
        raise typer.Exit(code=1)


def _run(
    operation: str,
    path_file: Path,
    width: int,
    height: int,
    settings: VecrasterSettings,
    output: Path | None,
    preview: bool,
    quiet: bool,
) -> None:
    """Load, render and emit a grid.

    Args:
        operation: "fill" or "stroke"
        path_file: JSON path file
        width: Grid width in pixels
        height: Grid height in pixels
        settings: Resolved settings
        output: Optional output file
        preview: Print the grid even when writing a file
        quiet: Minimal console output
    """
    if not path_file.is_file():
        print_error(
            f"Input file not found: {path_file}",
            details=f"The file '{path_file}' does not exist or is not a file.",
        )
        raise typer.Exit(code=1)

    try:
        logger = configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=quiet,
        )
    except (OSError, AttributeError) as e:
        print_error(f"Could not configure logging: {e}")
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)
        print_step("Loading path")

    try:
        path = PathReader(path_file).load()

        if not quiet:
            print_path_info(str(path_file), len(path), path.bounding_box())
            print_step(f"Rendering ({operation})")

        processor = RenderProcessor(settings, logger=logger)
        try:
            grid = _render(processor, operation, path, width, height)
        except KeyboardInterrupt:
            if not quiet:
                print_cancellation_notice()
            raise typer.Exit(code=130) from None  # Standard Unix SIGINT exit code

        if output is None or preview:
            print_grid(grid, settings.output.filled_char, settings.output.empty_char)

        written: str | None = None
        if output is not None:
            writer = GridWriter(
                grid,
                output,
                filled_char=settings.output.filled_char,
                empty_char=settings.output.empty_char,
            )
            written = str(writer.save())

        if not quiet:
            print_success(processor.stats, output_path=written)

    except PathLoadError as e:
        print_error(f"Could not load path file: {e.reason}")
        raise typer.Exit(code=1)
    except VecrasterError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def _render(
    processor: RenderProcessor,
    operation: str,
    path: VectorPath,
    width: int,
    height: int,
) -> Grid:
    if operation == "stroke":
        return processor.stroke(path, width, height)
    return processor.fill(path, width, height)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
