"""Path reader for loading JSON path files.

This module provides the PathReader class for loading path files and
converting them into domain models.

File layout (either key may be omitted)::

    {
        "segments": [{"start": {"x": 0, "y": 0}, "end": {"x": 10, "y": 0}}],
        "polylines": [[[0, 0], [10, 0], [10, 10], [0, 10], [0, 0]]]
    }
"""

import json
from pathlib import Path as FilePath

from pydantic import BaseModel, Field, ValidationError

from vecraster.domain import Path, Segment, Vector2
from vecraster.exceptions import PathLoadError


class PointModel(BaseModel):
    """A point as stored in a path file."""

    x: float
    y: float


class SegmentModel(BaseModel):
    """A segment as stored in a path file."""

    start: PointModel
    end: PointModel


class PathDocument(BaseModel):
    """Top-level structure of a path file."""

    segments: list[SegmentModel] = Field(default_factory=list)
    polylines: list[list[tuple[float, float]]] = Field(default_factory=list)

    def to_path(self) -> Path:
        """Convert to a domain path: explicit segments first, then polylines."""
        segments = [
            Segment(Vector2(s.start.x, s.start.y), Vector2(s.end.x, s.end.y))
            for s in self.segments
        ]
        path = Path.from_segments(segments)
        for polyline in self.polylines:
            path = path.concat(Path.from_points(polyline))
        return path


class PathReader:
    """Loads path files and converts them to domain paths.

    Example:
        reader = PathReader(Path("triangle.json"))
        path = reader.load()
        print(len(path))
    """

    def __init__(self, file_path: FilePath) -> None:
        """Initialize the path reader.

        Args:
            file_path: Path to the JSON path file
        """
        self._file_path = file_path
        self._document: PathDocument | None = None

    def load(self) -> Path:
        """Load and validate the path file.

        Returns:
            The described path

        Raises:
            PathLoadError: If the file is missing, not JSON, or malformed
        """
        if not self._file_path.exists():
            raise PathLoadError(str(self._file_path), "file not found")

        try:
            text = self._file_path.read_text(encoding="utf-8")
        except OSError as e:
            raise PathLoadError(str(self._file_path), str(e)) from e

        self._document = parse_path_document(text, source=str(self._file_path))
        return self._document.to_path()

    @property
    def polyline_count(self) -> int:
        """Number of polylines in the loaded file.

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        if self._document is None:
            raise RuntimeError("Path file not loaded. Call load() first.")
        return len(self._document.polylines)


def parse_path_document(text: str, source: str = "<string>") -> PathDocument:
    """Parse and validate the JSON text of a path file.

    Args:
        text: JSON document
        source: Name used in error messages

    Returns:
        Validated document

    Raises:
        PathLoadError: If the text is not valid JSON or does not match the layout
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise PathLoadError(source, f"invalid JSON: {e}") from e

    try:
        return PathDocument.model_validate(data)
    except ValidationError as e:
        raise PathLoadError(source, f"invalid path data: {e}") from e
