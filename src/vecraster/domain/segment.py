"""Directed segments and the paths built from them.

This module defines:
- Segment: A directed pair of points
- Path: An ordered sequence of segments describing one or more contours
"""

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any

from vecraster.domain.vector import Vector2


@dataclass(frozen=True, slots=True)
class Segment:
    """A directed straight segment from ``start`` to ``end``.

    Zero-length segments are legal values. Their direction is the zero
    vector, so they never intersect anything.

    Attributes:
        start: First endpoint
        end: Second endpoint
    """

    start: Vector2
    end: Vector2

    @property
    def direction(self) -> Vector2:
        """Direction vector ``end - start``."""
        return self.end - self.start

    def length(self) -> float:
        """Euclidean length of the segment."""
        return self.direction.length()

    def is_degenerate(self) -> bool:
        """True when start and end coincide."""
        return self.start == self.end

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {"start": self.start.to_dict(), "end": self.end.to_dict()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Segment":
        """Deserialize from dictionary."""
        return cls(
            start=Vector2.from_dict(data["start"]),
            end=Vector2.from_dict(data["end"]),
        )


@dataclass(frozen=True, slots=True)
class Path:
    """An ordered sequence of segments.

    Order matters: consecutive segments trace a contour. A path is never
    closed automatically; the winding computation just sums whatever
    segments are present, so an open contour gives an inconsistent (but
    well-defined) coverage.

    Attributes:
        segments: Segments in traversal order
    """

    segments: tuple[Segment, ...] = ()

    def __post_init__(self) -> None:
        # Accept any sequence but store a tuple so the path stays hashable
        if not isinstance(self.segments, tuple):
            object.__setattr__(self, "segments", tuple(self.segments))

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def __len__(self) -> int:
        return len(self.segments)

    def __getitem__(self, index: int) -> Segment:
        return self.segments[index]

    @classmethod
    def from_segments(cls, segments: Iterable[Segment]) -> "Path":
        """Build a path from segments, keeping their order."""
        return cls(tuple(segments))

    @classmethod
    def from_points(cls, points: Sequence[Vector2 | tuple[float, float]]) -> "Path":
        """Build a polyline from consecutive points.

        ``n`` points give ``n - 1`` segments. Repeat the first point at the
        end to describe a closed contour.

        Args:
            points: Vector2 instances or (x, y) tuples

        Returns:
            Path with one segment per consecutive pair of points
        """
        vectors = [p if isinstance(p, Vector2) else Vector2(float(p[0]), float(p[1])) for p in points]
        return cls(tuple(Segment(a, b) for a, b in zip(vectors, vectors[1:], strict=False)))

    def concat(self, other: "Path") -> "Path":
        """Return a new path with ``other``'s segments appended."""
        return Path(self.segments + other.segments)

    def is_empty(self) -> bool:
        """True when the path has no segments."""
        return not self.segments

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Calculate bounding box of all segment endpoints.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y), all zero for an empty path
        """
        if not self.segments:
            return (0.0, 0.0, 0.0, 0.0)

        xs = [v for s in self.segments for v in (s.start.x, s.end.x)]
        ys = [v for s in self.segments for v in (s.start.y, s.end.y)]
        return (min(xs), min(ys), max(xs), max(ys))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary representation of the path
        """
        return {"segments": [s.to_dict() for s in self.segments]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Path":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a path

        Returns:
            Path instance
        """
        return cls(tuple(Segment.from_dict(s) for s in data["segments"]))
