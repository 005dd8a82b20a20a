"""Grid writer for text and PBM output.

This module provides the GridWriter class for turning coverage grids into
ASCII art or plain PBM (P1) images.
"""

from pathlib import Path

from vecraster.domain import Grid
from vecraster.exceptions import GridSaveError

PBM_SUFFIX = ".pbm"


def grid_to_text(grid: Grid, filled_char: str = "#", empty_char: str = ".") -> str:
    """Render a grid as lines of characters, one line per row.

    Args:
        grid: Grid to render
        filled_char: Character for filled cells
        empty_char: Character for empty cells

    Returns:
        Text with a trailing newline after each row ("" for an empty grid)
    """
    lines = [
        "".join(filled_char if cell else empty_char for cell in row)
        for row in grid.rows()
    ]
    return "".join(line + "\n" for line in lines)


def grid_to_pbm(grid: Grid) -> str:
    """Render a grid as a plain PBM image (1 = filled/black)."""
    header = f"P1\n{grid.width} {grid.height}\n"
    body = "".join(
        " ".join("1" if cell else "0" for cell in row) + "\n"
        for row in grid.rows()
    )
    return header + body


class GridWriter:
    """Saves rendered grids.

    The format follows the output suffix: ``.pbm`` writes a plain PBM
    image, anything else writes ASCII art.

    Example:
        writer = GridWriter(grid, Path("out.txt"))
        writer.save()
    """

    def __init__(
        self,
        grid: Grid,
        output_path: Path,
        filled_char: str = "#",
        empty_char: str = ".",
    ) -> None:
        """Initialize the grid writer.

        Args:
            grid: Grid to save
            output_path: Destination file
            filled_char: Character for filled cells in text output
            empty_char: Character for empty cells in text output
        """
        self._grid = grid
        self._output_path = output_path
        self._filled_char = filled_char
        self._empty_char = empty_char

    @property
    def format(self) -> str:
        """Return output format, 'PBM' or 'Text'."""
        if self._output_path.suffix.lower() == PBM_SUFFIX:
            return "PBM"
        return "Text"

    def render(self) -> str:
        """Render the grid in the output format."""
        if self.format == "PBM":
            return grid_to_pbm(self._grid)
        return grid_to_text(self._grid, self._filled_char, self._empty_char)

    def save(self) -> Path:
        """Write the grid to the output path.

        Returns:
            The path written to

        Raises:
            GridSaveError: If the file cannot be written
        """
        try:
            self._output_path.parent.mkdir(parents=True, exist_ok=True)
            self._output_path.write_text(self.render(), encoding="utf-8")
        except OSError as e:
            raise GridSaveError(str(self._output_path), str(e)) from e
        return self._output_path
