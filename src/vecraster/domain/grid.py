"""Binary coverage grid produced by the rasterizer."""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any

from vecraster.exceptions import InvalidGridSizeError


@dataclass(frozen=True, slots=True)
class Grid:
    """A width x height matrix of filled/unfilled cells.

    Cells are stored row-major in a flat tuple with the origin at the
    top-left, so cell (x, y) lives at index ``y * width + x``.

    Attributes:
        width: Number of columns
        height: Number of rows
        cells: Flat row-major tuple of ``width * height`` booleans
    """

    width: int
    height: int
    cells: tuple[bool, ...]

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise InvalidGridSizeError(self.width, self.height)
        if len(self.cells) != self.width * self.height:
            raise InvalidGridSizeError(
                self.width,
                self.height,
                f"expected {self.width * self.height} cells, got {len(self.cells)}",
            )
        if not isinstance(self.cells, tuple):
            object.__setattr__(self, "cells", tuple(self.cells))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[bool]], width: int | None = None) -> "Grid":
        """Build a grid from a list of rows.

        Args:
            rows: Rows from top to bottom, each ``width`` cells long
            width: Column count, needed only when ``rows`` is empty

        Returns:
            Grid instance
        """
        if width is None:
            width = len(rows[0]) if rows else 0
        for row in rows:
            if len(row) != width:
                raise InvalidGridSizeError(width, len(rows), "rows have different lengths")
        cells = tuple(bool(cell) for row in rows for cell in row)
        return cls(width=width, height=len(rows), cells=cells)

    @classmethod
    def empty(cls, width: int, height: int) -> "Grid":
        """Create a grid with every cell unfilled."""
        if width < 0 or height < 0:
            raise InvalidGridSizeError(width, height)
        return cls(width=width, height=height, cells=(False,) * (width * height))

    def get(self, x: int, y: int) -> bool:
        """Return the cell at column ``x`` and row ``y``.

        Raises:
            IndexError: If (x, y) lies outside the grid
        """
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Cell ({x}, {y}) outside {self.width}x{self.height} grid")
        return self.cells[y * self.width + x]

    def __getitem__(self, key: tuple[int, int]) -> bool:
        x, y = key
        return self.get(x, y)

    def rows(self) -> Iterator[tuple[bool, ...]]:
        """Iterate rows from top to bottom."""
        for y in range(self.height):
            start = y * self.width
            yield self.cells[start : start + self.width]

    def filled_count(self) -> int:
        """Number of filled cells."""
        return sum(self.cells)

    def filled_cells(self) -> list[tuple[int, int]]:
        """Coordinates (x, y) of every filled cell in row-major order."""
        return [
            (i % self.width, i // self.width)
            for i, cell in enumerate(self.cells)
            if cell
        ]

    def is_empty(self) -> bool:
        """True when the grid has no cells at all (zero width or height)."""
        return not self.cells

    def difference(self, other: "Grid") -> list[tuple[int, int]]:
        """Coordinates where this grid and ``other`` disagree.

        Raises:
            InvalidGridSizeError: If the grids have different dimensions
        """
        if (self.width, self.height) != (other.width, other.height):
            raise InvalidGridSizeError(
                other.width,
                other.height,
                f"cannot compare with a {self.width}x{self.height} grid",
            )
        return [
            (i % self.width, i // self.width)
            for i, (a, b) in enumerate(zip(self.cells, other.cells, strict=True))
            if a != b
        ]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with width, height and nested row lists
        """
        return {
            "width": self.width,
            "height": self.height,
            "rows": [list(row) for row in self.rows()],
        }
