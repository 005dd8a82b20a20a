"""Core rendering algorithms for vecraster.

This module contains the algorithms for:

- Line intersection (parametric 2x2 solve)
- Winding numbers (horizontal ray casting)
- Pixel rasterization (pixel-center sampling under a fill rule)
- Stroke-to-fill conversion (rectangle per segment)

Everything except RenderProcessor is:
- Stateless (safe for use in worker processes)
- Pure (no side effects, no logging)

Key functions:
- intersect: Solve for the parameters where two lines meet
- compute_winding: Signed crossing count of a path around a point
- rasterize: Sample a width x height grid
- expand_segment: Turn a segment into a rectangle outline
- fill: Fill a path under a fill rule
- stroke: Stroke a path with a rectangular pen

Key classes:
- RenderProcessor: Configured, logged and optionally parallel rendering
"""

from vecraster.core.geometry import determinant, intersect
from vecraster.core.processor import RenderProcessor, render_row
from vecraster.core.rasterizer import rasterize, rasterize_row, sample_point
from vecraster.core.render import fill, stroke
from vecraster.core.stroke import expand_path, expand_segment
from vecraster.core.winding import compute_winding, make_test_ray

__all__ = [
    # Processor classes
    "RenderProcessor",
    # Geometry functions
    "compute_winding",
    "determinant",
    "expand_path",
    "expand_segment",
    "fill",
    "intersect",
    "make_test_ray",
    "rasterize",
    "rasterize_row",
    "render_row",
    "sample_point",
    "stroke",
]
