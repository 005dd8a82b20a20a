"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with formatted messages and grid previews.
"""


from rich.console import Console
from rich.text import Text

from vecraster.domain import Grid
from vecraster.io import grid_to_text
from vecraster.utils import RenderStats

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
    console.print(f"\n[bold]vecraster[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_path_info(path_file: str, segment_count: int, bbox: tuple[float, float, float, float]) -> None:
    """Print information about a loaded path.

    Args:
        path_file: Path to the path file
        segment_count: Number of segments
        bbox: Bounding box (min_x, min_y, max_x, max_y)
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(path_file)
    console.print(line)
    min_x, min_y, max_x, max_y = bbox
    console.print(
        f"  {segment_count:,} segments {SYM_DOT} "
        f"bounds ({min_x:g}, {min_y:g})–({max_x:g}, {max_y:g})"
    )


def print_grid(grid: Grid, filled_char: str = "#", empty_char: str = ".") -> None:
    """Print a grid as ASCII art.

    Args:
        grid: Grid to print
        filled_char: Character for filled cells
        empty_char: Character for empty cells
    """
    text = grid_to_text(grid, filled_char, empty_char)
    # Text keeps characters like "[" from being read as markup
    console.print(Text(text.rstrip("\n")), soft_wrap=True)


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(stats: RenderStats, output_path: str | None = None) -> None:
    """Print success message with summary.

    Args:
        stats: Statistics of the finished render
        output_path: File the grid was written to, if any
    """
    time_str = _format_time(stats.duration_seconds)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    if output_path is not None:
        line = Text("  ")
        line.append(output_path, style="bold")
        console.print(line)

    console.print(
        f"  {stats.width}x{stats.height} {SYM_DOT} {stats.filled_count} filled "
        f"{SYM_DOT} {stats.coverage:.1%} coverage {SYM_DOT} {stats.workers} workers"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    line = Text.from_markup(f"\n[bold red]{SYM_ERR} Error:[/bold red] ")
    line.append(message)
    console.print(line)
    if details:
        console.print(Text(f"  {details}"))


def print_cancellation_notice() -> None:
    """Print cancellation acknowledgment."""
    console.print(f"\n{SYM_DOT} [bold]Cancelled[/bold]")
    console.print("  No output file created")
