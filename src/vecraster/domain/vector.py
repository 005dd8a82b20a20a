"""Two-dimensional point/vector value type."""

import math
from dataclasses import dataclass
from typing import Any

from vecraster.exceptions import GeometryError


@dataclass(frozen=True, slots=True)
class Vector2:
    """A point or direction in 2D space.

    Immutable and hashable. Coordinates are plain floats; NaN and infinity
    are representable and simply flow through the arithmetic.

    Attributes:
        x: X coordinate (grows to the right)
        y: Y coordinate (grows downwards on the pixel grid)
    """

    x: float
    y: float

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2":
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def perpendicular(self) -> "Vector2":
        """Rotate 90 degrees to the left: (x, y) -> (-y, x)."""
        return Vector2(-self.y, self.x)

    def normalized(self) -> "Vector2":
        """Return the unit vector pointing the same way.

        Raises:
            GeometryError: If the vector has zero length
        """
        length = self.length()
        if length == 0.0:
            raise GeometryError("Cannot normalize a zero-length vector")
        return Vector2(self.x / length, self.y / length)

    def is_finite(self) -> bool:
        """Check that neither component is NaN or infinite."""
        return math.isfinite(self.x) and math.isfinite(self.y)

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Vector2":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Vector2 instance
        """
        return cls(x=float(data["x"]), y=float(data["y"]))
