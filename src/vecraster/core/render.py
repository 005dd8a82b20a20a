"""Fill and stroke entry points."""

from vecraster.core.rasterizer import rasterize
from vecraster.core.stroke import expand_path
from vecraster.domain import FillRule, Grid, Path


def fill(
    path: Path,
    width: int,
    height: int,
    fill_rule: FillRule = FillRule.NONZERO,
    epsilon: float = 0.0,
) -> Grid:
    """Fill a path into a width x height coverage grid.

    Args:
        path: Closed contour(s) to fill
        width: Grid width in pixels
        height: Grid height in pixels
        fill_rule: NONZERO or EVENODD
        epsilon: Parallel tolerance for the intersection test

    Returns:
        Coverage grid
    """
    return rasterize(path, width, height, fill_rule, epsilon)


def stroke(
    path: Path,
    width: int,
    height: int,
    stroke_width: float,
    epsilon: float = 0.0,
) -> Grid:
    """Stroke every segment of a path with a rectangular pen.

    The per-segment rectangles are filled with the NONZERO rule so that
    overlapping rectangles merge instead of cancelling out.

    Args:
        path: Centerline segments
        width: Grid width in pixels
        height: Grid height in pixels
        stroke_width: Full width of each stroked segment
        epsilon: Parallel tolerance for the intersection test

    Returns:
        Coverage grid

    Raises:
        InvalidSegmentError: If the path contains a zero-length segment
        InvalidStrokeWidthError: If stroke_width is negative or not finite
    """
    return fill(expand_path(path, stroke_width), width, height, FillRule.NONZERO, epsilon)
