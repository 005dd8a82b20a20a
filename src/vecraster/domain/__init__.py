"""Domain models for vecraster.

This module contains the value types the rasterizer works on. All models
are:

- Immutable (frozen dataclasses)
- Serializable for inter-process communication (parallel row rendering)
- Free of any rendering logic beyond trivial derived values

Key classes:
- Vector2: A 2D point or direction
- Segment: A directed pair of points
- Path: An ordered sequence of segments
- FillRule: NonZero / EvenOdd coverage convention
- Grid: Row-major boolean coverage matrix
"""

from vecraster.domain.fill_rule import FillRule
from vecraster.domain.grid import Grid
from vecraster.domain.segment import Path, Segment
from vecraster.domain.vector import Vector2

__all__: list[str] = [
    # Enums
    "FillRule",
    # Core types
    "Vector2",
    "Segment",
    "Path",
    "Grid",
]
