"""Exception hierarchy for vecraster."""

from typing import Any


class VecrasterError(Exception):
    """Base exception for all vecraster errors."""

    pass


class GeometryError(VecrasterError):
    """Errors in geometric calculations."""

    pass


class InvalidSegmentError(GeometryError):
    """Segment cannot be used for the requested operation."""

    def __init__(self, segment: Any, reason: str) -> None:
        self.segment = segment
        self.reason = reason
        super().__init__(f"Invalid segment {segment}: {reason}")


class InvalidStrokeWidthError(GeometryError):
    """Stroke width is negative or not finite."""

    def __init__(self, width: float) -> None:
        self.width = width
        super().__init__(f"Stroke width must be a finite, non-negative number, got {width}")


class RasterError(VecrasterError):
    """Errors related to rasterization."""

    pass


class InvalidGridSizeError(RasterError):
    """Grid dimensions are negative or do not match the cell data."""

    def __init__(self, width: int, height: int, reason: str = "dimensions must be >= 0") -> None:
        self.width = width
        self.height = height
        self.reason = reason
        super().__init__(f"Invalid grid size {width}x{height}: {reason}")


class PathFileError(VecrasterError):
    """Errors related to reading or writing files."""

    pass


class PathLoadError(PathFileError):
    """Error loading a path file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load path file '{path}': {reason}")


class GridSaveError(PathFileError):
    """Error saving a rendered grid."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save grid '{path}': {reason}")
