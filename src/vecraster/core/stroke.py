"""Stroke-to-fill conversion.

Each centerline segment becomes a rectangle of the stroke width, so strokes
are rendered by the regular fill machinery. No join or cap geometry is
added; corners of a stroked polyline can show notches.
"""

import math

from vecraster.domain import Path, Segment
from vecraster.exceptions import InvalidSegmentError, InvalidStrokeWidthError


def expand_segment(segment: Segment, width: float) -> list[Segment]:
    """Expand a segment into the four edges of a rectangle.

    The corners are the segment endpoints offset by half the width along the
    left normal, in both directions. Edges are emitted as
    ``p0 -> p1 -> p2 -> p3 -> p0`` so the outline is one simple closed
    contour.

    Args:
        segment: Centerline segment
        width: Full stroke width

    Returns:
        Four segments forming a closed quadrilateral

    Raises:
        InvalidSegmentError: If the segment has zero length
        InvalidStrokeWidthError: If width is negative or not finite

    Examples:
        >>> from vecraster.domain import Segment, Vector2
        >>> quad = expand_segment(Segment(Vector2(0, 0), Vector2(10, 0)), 2.0)
        >>> [(s.start.x, s.start.y) for s in quad]
        [(0.0, 1.0), (10.0, 1.0), (10.0, -1.0), (0.0, -1.0)]
    """
    if not math.isfinite(width) or width < 0:
        raise InvalidStrokeWidthError(width)

    if segment.is_degenerate():
        raise InvalidSegmentError(segment, "zero-length segment has no normal")

    # Left perpendicular by swap-and-negate
    normal = segment.direction.perpendicular().normalized()
    offset = normal * (width / 2.0)

    p0 = segment.start + offset
    p1 = segment.end + offset
    p2 = segment.end - offset
    p3 = segment.start - offset

    return [
        Segment(p0, p1),
        Segment(p1, p2),
        Segment(p2, p3),
        Segment(p3, p0),
    ]


def expand_path(path: Path, width: float) -> Path:
    """Expand every segment of a path and concatenate the outlines in order."""
    outline: list[Segment] = []
    for segment in path:
        outline.extend(expand_segment(segment, width))
    return Path.from_segments(outline)
