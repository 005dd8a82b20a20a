"""Unit tests for stroke-to-fill conversion.

Tests cover:
- Rectangle geometry of a single expanded segment
- Band width of stroked segments on the pixel grid
- Merging of overlapping rectangles under NonZero
- Rejection of zero-length segments and invalid widths
"""

import math

import pytest

from vecraster.core.render import stroke
from vecraster.core.stroke import expand_path, expand_segment
from vecraster.core.winding import compute_winding
from vecraster.domain import Path, Segment, Vector2
from vecraster.exceptions import InvalidSegmentError, InvalidStrokeWidthError


def seg(x0: float, y0: float, x1: float, y1: float) -> Segment:
    return Segment(Vector2(x0, y0), Vector2(x1, y1))


class TestExpandSegment:
    """Tests for expand_segment()."""

    def test_horizontal_segment_corners(self):
        """Corners are offset by half the width along the left normal."""
        quad = expand_segment(seg(0, 5, 10, 5), 2.0)
        corners = [s.start.to_tuple() for s in quad]
        assert corners == [(0.0, 6.0), (10.0, 6.0), (10.0, 4.0), (0.0, 4.0)]

    def test_vertical_segment_corners(self):
        """The left normal of a downward segment points to -x."""
        quad = expand_segment(seg(5, 0, 5, 10), 2.0)
        corners = [s.start.to_tuple() for s in quad]
        assert corners == [(4.0, 0.0), (4.0, 10.0), (6.0, 10.0), (6.0, 0.0)]

    def test_outline_is_closed(self):
        """Each edge starts where the previous one ended."""
        quad = expand_segment(seg(1, 2, 7, 9), 3.0)
        assert len(quad) == 4
        for current, following in zip(quad, quad[1:] + quad[:1], strict=True):
            assert current.end == following.start

    def test_diagonal_width(self):
        """Side edges have the stroke width, long edges the segment length."""
        centerline = seg(1, 1, 7, 9)
        quad = expand_segment(centerline, 3.0)
        assert math.isclose(quad[0].length(), centerline.length())
        assert math.isclose(quad[1].length(), 3.0)
        assert math.isclose(quad[3].length(), 3.0)

    def test_center_has_nonzero_winding(self):
        """The segment midpoint lies inside its own rectangle."""
        quad = Path.from_segments(expand_segment(seg(1, 1, 7, 9), 3.0))
        assert compute_winding(quad, Vector2(4.0, 5.0)) != 0
        assert compute_winding(quad, Vector2(20.0, 5.0)) == 0

    def test_zero_length_segment_rejected(self):
        """A zero-length segment has no normal."""
        with pytest.raises(InvalidSegmentError) as exc_info:
            expand_segment(seg(3, 3, 3, 3), 1.0)
        assert exc_info.value.segment == seg(3, 3, 3, 3)

    @pytest.mark.parametrize("width", [-1.0, math.nan, math.inf])
    def test_invalid_width_rejected(self, width: float):
        """Negative and non-finite widths are rejected."""
        with pytest.raises(InvalidStrokeWidthError):
            expand_segment(seg(0, 0, 10, 0), width)

    def test_zero_width_gives_flat_outline(self):
        """A zero width collapses the rectangle onto the centerline."""
        quad = expand_segment(seg(0, 5, 10, 5), 0.0)
        assert quad[0].start == Vector2(0.0, 5.0)
        assert quad[1].length() == 0.0


class TestExpandPath:
    """Tests for expand_path()."""

    def test_four_edges_per_segment_in_order(self):
        """Outlines are concatenated in path order."""
        path = Path((seg(0, 0, 10, 0), seg(10, 0, 10, 10)))
        outline = expand_path(path, 2.0)
        assert len(outline) == 8
        assert list(outline)[:4] == expand_segment(path[0], 2.0)
        assert list(outline)[4:] == expand_segment(path[1], 2.0)

    def test_zero_length_anywhere_rejected(self):
        """One degenerate segment rejects the whole path."""
        path = Path((seg(0, 0, 10, 0), seg(10, 0, 10, 0)))
        with pytest.raises(InvalidSegmentError):
            expand_path(path, 1.0)


class TestStroke:
    """Tests for stroke() on the pixel grid."""

    def test_vertical_band(self):
        """A width-2 stroke at x=5 fills columns 4 and 5 only."""
        grid = stroke(Path((seg(5, 0, 5, 10),)), 10, 10, 2.0)
        assert grid.filled_count() == 20
        for y in range(10):
            assert [x for x in range(10) if grid[x, y]] == [4, 5]

    def test_horizontal_band(self):
        """A width-2 stroke at y=5 fills rows 4 and 5 only."""
        grid = stroke(Path((seg(0, 5, 10, 5),)), 10, 10, 2.0)
        for y in range(10):
            assert all(grid[x, y] for x in range(10)) == (y in (4, 5))
            assert any(grid[x, y] for x in range(10)) == (y in (4, 5))

    @pytest.mark.parametrize("stroke_width", [2.0, 4.0, 6.0])
    def test_band_width_matches_stroke_width(self, stroke_width: float):
        """Perpendicular offsets below W/2 are filled, above W/2 are not."""
        centerline_x = 10.0
        grid = stroke(Path((seg(centerline_x, 0, centerline_x, 20),)), 20, 20, stroke_width)
        half = stroke_width / 2
        for x in range(20):
            offset = abs(x + 0.5 - centerline_x)
            if offset < half:
                assert grid[x, 10], x
            elif offset > half:
                assert not grid[x, 10], x

    def test_overlapping_strokes_merge(self):
        """Crossing strokes stay filled where they overlap."""
        path = Path((seg(5, 0, 5, 10), seg(0, 5, 10, 5)))
        grid = stroke(path, 10, 10, 2.0)
        for x, y in [(4, 4), (4, 5), (5, 4), (5, 5)]:
            assert grid[x, y]
        assert grid.filled_count() == 20 + 20 - 4

    def test_reversed_segment_gives_same_band(self):
        """Stroke coverage does not depend on segment direction."""
        forward = stroke(Path((seg(2, 3, 17, 11),)), 20, 15, 3.0)
        backward = stroke(Path((seg(17, 11, 2, 3),)), 20, 15, 3.0)
        assert forward == backward

    def test_hi_glyph(self):
        """The stroked "H I" demo covers its bars and leaves gaps empty."""
        path = Path(
            (
                seg(3.5, 2.0, 3.5, 7.0),
                seg(3.5, 4.5, 7.5, 4.5),
                seg(7.5, 2.0, 7.5, 7.0),
                seg(11.5, 2.0, 11.5, 7.0),
            )
        )
        grid = stroke(path, 15, 9, 1.0)
        for y in range(2, 7):
            assert grid[3, y]
            assert grid[7, y]
            assert grid[11, y]
        for x in range(3, 8):
            assert grid[x, 4]
        assert not grid[5, 2]
        assert not grid[9, 4]
        assert not any(grid[x, 0] for x in range(15))
        assert not any(grid[x, 8] for x in range(15))

    def test_zero_length_segment_rejected(self):
        """Stroking a path with a zero-length segment raises."""
        with pytest.raises(InvalidSegmentError):
            stroke(Path((seg(1, 1, 1, 1),)), 5, 5, 1.0)
