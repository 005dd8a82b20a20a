"""Fill rule behavior on the bundled sample shapes.

The figure eight winds its middle twice, so NonZero and EvenOdd disagree
exactly there. The triangle's inner contour runs the other way and cuts a
hole under both rules.
"""

from pathlib import Path

import pytest

from vecraster.core.rasterizer import sample_point
from vecraster.core.render import fill
from vecraster.core.winding import compute_winding
from vecraster.domain import FillRule
from vecraster.domain import Path as VectorPath
from vecraster.io import PathReader

SAMPLES_DIR = Path(__file__).parent.parent.parent / "samples"


@pytest.fixture
def figure_eight() -> VectorPath:
    """Load the figure eight sample."""
    return PathReader(SAMPLES_DIR / "figure_eight.json").load()


@pytest.fixture
def triangle_with_hole() -> VectorPath:
    """Load the triangle with an inner contour."""
    return PathReader(SAMPLES_DIR / "triangle_with_hole.json").load()


def winding_map(path: VectorPath, width: int, height: int) -> dict[tuple[int, int], int]:
    """Winding number at every pixel center."""
    return {
        (x, y): compute_winding(path, sample_point(x, y))
        for y in range(height)
        for x in range(width)
    }


class TestFigureEight:
    """Self-overlapping contour."""

    def test_rules_differ_exactly_at_double_winding(self, figure_eight: VectorPath):
        """Cells where the rules disagree are the ones wound twice."""
        nonzero = fill(figure_eight, 20, 16, FillRule.NONZERO)
        evenodd = fill(figure_eight, 20, 16, FillRule.EVENODD)
        windings = winding_map(figure_eight, 20, 16)

        doubly_wound = sorted(cell for cell, w in windings.items() if abs(w) == 2)
        assert doubly_wound
        assert sorted(nonzero.difference(evenodd)) == doubly_wound

        for x, y in doubly_wound:
            assert nonzero[x, y]
            assert not evenodd[x, y]

    def test_middle_is_wound_twice(self, figure_eight: VectorPath):
        """The crossing in the middle of the eight has winding -2."""
        assert compute_winding(figure_eight, sample_point(10, 7)) == -2
        assert fill(figure_eight, 20, 16, FillRule.NONZERO)[10, 7]
        assert not fill(figure_eight, 20, 16, FillRule.EVENODD)[10, 7]

    def test_windings_stay_small(self, figure_eight: VectorPath):
        """Two contours never wind more than twice."""
        assert all(abs(w) <= 2 for w in winding_map(figure_eight, 20, 16).values())

    def test_outside_is_empty(self, figure_eight: VectorPath):
        """Columns left of the shape are empty under both rules."""
        for rule in FillRule:
            grid = fill(figure_eight, 20, 16, rule)
            assert not any(grid[x, y] for y in range(16) for x in range(4))


class TestTriangleWithHole:
    """Outer triangle with an opposite-direction inner contour."""

    @pytest.mark.parametrize("rule", list(FillRule))
    def test_hole_is_empty(self, triangle_with_hole: VectorPath, rule: FillRule):
        """The inner contour cancels the outer one."""
        grid = fill(triangle_with_hole, 30, 10, rule)
        assert not grid[15, 4]
        assert grid[15, 6]
        assert grid[5, 8]
        assert not grid[15, 0]

    def test_rules_agree(self, triangle_with_hole: VectorPath):
        """Windings are only 0 or -1, so both rules agree."""
        windings = winding_map(triangle_with_hole, 30, 10)
        assert set(windings.values()) <= {0, -1}
        assert fill(triangle_with_hole, 30, 10, FillRule.NONZERO) == fill(
            triangle_with_hole, 30, 10, FillRule.EVENODD
        )
