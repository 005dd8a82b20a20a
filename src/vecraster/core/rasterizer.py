"""Pixel-grid rasterization of a path under a fill rule."""

from vecraster.core.winding import compute_winding
from vecraster.domain import FillRule, Grid, Path, Vector2
from vecraster.exceptions import InvalidGridSizeError


def sample_point(x: int, y: int) -> Vector2:
    """Center of pixel (x, y)."""
    return Vector2(x + 0.5, y + 0.5)


def rasterize_row(
    path: Path,
    y: int,
    width: int,
    fill_rule: FillRule,
    epsilon: float = 0.0,
) -> list[bool]:
    """Rasterize a single row of pixels.

    Rows only depend on the path and their own index, so they can be
    computed in any order or in separate processes.
    """
    return [
        fill_rule.evaluate(compute_winding(path, sample_point(x, y), epsilon))
        for x in range(width)
    ]


def rasterize(
    path: Path,
    width: int,
    height: int,
    fill_rule: FillRule,
    epsilon: float = 0.0,
) -> Grid:
    """Sample every pixel center of a width x height grid.

    Args:
        path: Segments to rasterize
        width: Grid width in pixels (>= 0)
        height: Grid height in pixels (>= 0)
        fill_rule: Rule turning winding numbers into coverage
        epsilon: Parallel tolerance forwarded to the intersection test

    Returns:
        Row-major grid; empty when width or height is zero

    Raises:
        InvalidGridSizeError: If width or height is negative
    """
    if width < 0 or height < 0:
        raise InvalidGridSizeError(width, height)

    rows = [rasterize_row(path, y, width, fill_rule, epsilon) for y in range(height)]
    return Grid.from_rows(rows, width=width)
