"""Unit tests for the file I/O layer.

Tests for PathReader, GridWriter, and the text/PBM renderers.
"""

import json
from pathlib import Path

import pytest

from vecraster.domain import Grid, Segment, Vector2
from vecraster.exceptions import GridSaveError, PathLoadError
from vecraster.io import GridWriter, PathReader, grid_to_pbm, grid_to_text, parse_path_document

SAMPLES_DIR = Path(__file__).parent.parent.parent / "samples"


@pytest.fixture
def small_grid() -> Grid:
    """A 3x2 grid with a diagonal."""
    return Grid.from_rows([[True, False, False], [False, True, False]])


def write_json(tmp_path: Path, data: object, name: str = "path.json") -> Path:
    file_path = tmp_path / name
    file_path.write_text(json.dumps(data), encoding="utf-8")
    return file_path


class TestPathReader:
    """Tests for PathReader class."""

    def test_load_nonexistent_file(self, tmp_path: Path):
        """Loading a missing file raises PathLoadError."""
        reader = PathReader(tmp_path / "missing.json")
        with pytest.raises(PathLoadError, match="file not found"):
            reader.load()

    def test_polyline_count_before_load(self):
        """Accessing polyline_count before loading raises RuntimeError."""
        reader = PathReader(Path("test.json"))
        with pytest.raises(RuntimeError, match="not loaded"):
            _ = reader.polyline_count

    def test_load_segments(self, tmp_path: Path):
        """Explicit segments are read in order."""
        file_path = write_json(
            tmp_path,
            {
                "segments": [
                    {"start": {"x": 0, "y": 0}, "end": {"x": 10, "y": 0}},
                    {"start": {"x": 10, "y": 0}, "end": {"x": 10, "y": 5.5}},
                ]
            },
        )
        path = PathReader(file_path).load()
        assert list(path) == [
            Segment(Vector2(0.0, 0.0), Vector2(10.0, 0.0)),
            Segment(Vector2(10.0, 0.0), Vector2(10.0, 5.5)),
        ]

    def test_load_polylines(self, tmp_path: Path):
        """Polylines become consecutive segments after explicit segments."""
        file_path = write_json(
            tmp_path,
            {
                "segments": [{"start": {"x": 1, "y": 1}, "end": {"x": 2, "y": 2}}],
                "polylines": [[[0, 0], [4, 0], [4, 4]], [[8, 8], [9, 9]]],
            },
        )
        reader = PathReader(file_path)
        path = reader.load()

        assert len(path) == 4
        assert path[0] == Segment(Vector2(1.0, 1.0), Vector2(2.0, 2.0))
        assert path[1] == Segment(Vector2(0.0, 0.0), Vector2(4.0, 0.0))
        assert path[3] == Segment(Vector2(8.0, 8.0), Vector2(9.0, 9.0))
        assert reader.polyline_count == 2

    def test_empty_document(self, tmp_path: Path):
        """An empty object is an empty path."""
        assert PathReader(write_json(tmp_path, {})).load().is_empty()

    def test_invalid_json(self, tmp_path: Path):
        """Non-JSON content raises PathLoadError."""
        file_path = tmp_path / "broken.json"
        file_path.write_text("{not json", encoding="utf-8")
        with pytest.raises(PathLoadError, match="invalid JSON"):
            PathReader(file_path).load()

    @pytest.mark.parametrize(
        "data",
        [
            {"segments": [{"start": {"x": 0, "y": 0}}]},
            {"segments": [{"start": {"x": "a", "y": 0}, "end": {"x": 1, "y": 1}}]},
            {"polylines": [[[0, 0, 0]]]},
            {"polylines": "nope"},
            [1, 2, 3],
        ],
    )
    def test_invalid_layout(self, tmp_path: Path, data: object):
        """Data that does not match the layout raises PathLoadError."""
        with pytest.raises(PathLoadError, match="invalid path data"):
            PathReader(write_json(tmp_path, data)).load()

    def test_parse_path_document_source_in_error(self):
        """The source name appears in the error message."""
        with pytest.raises(PathLoadError, match="inline"):
            parse_path_document("[", source="inline")

    @pytest.mark.parametrize(
        ("name", "segment_count"),
        [("triangle_with_hole.json", 7), ("figure_eight.json", 16), ("hi.json", 4)],
    )
    def test_sample_files(self, name: str, segment_count: int):
        """Bundled samples load."""
        assert len(PathReader(SAMPLES_DIR / name).load()) == segment_count


class TestGridRendering:
    """Tests for text and PBM rendering."""

    def test_grid_to_text(self, small_grid: Grid):
        """One line per row, filled as '#', empty as '.'."""
        assert grid_to_text(small_grid) == "#..\n.#.\n"

    def test_grid_to_text_custom_chars(self, small_grid: Grid):
        """Characters are configurable."""
        assert grid_to_text(small_grid, "X", " ") == "X  \n X \n"

    def test_grid_to_text_empty(self):
        """An empty grid renders as an empty string."""
        assert grid_to_text(Grid.empty(0, 0)) == ""

    def test_grid_to_pbm(self, small_grid: Grid):
        """Plain PBM has a P1 header and 1 for filled cells."""
        assert grid_to_pbm(small_grid) == "P1\n3 2\n1 0 0\n0 1 0\n"


class TestGridWriter:
    """Tests for GridWriter class."""

    def test_format_from_suffix(self, small_grid: Grid):
        """The output suffix selects the format."""
        assert GridWriter(small_grid, Path("out.pbm")).format == "PBM"
        assert GridWriter(small_grid, Path("out.PBM")).format == "PBM"
        assert GridWriter(small_grid, Path("out.txt")).format == "Text"
        assert GridWriter(small_grid, Path("out")).format == "Text"

    def test_save_text(self, tmp_path: Path, small_grid: Grid):
        """Text output uses the configured characters."""
        output = tmp_path / "grid.txt"
        written = GridWriter(small_grid, output, filled_char="@", empty_char="-").save()
        assert written == output
        assert output.read_text(encoding="utf-8") == "@--\n-@-\n"

    def test_save_pbm(self, tmp_path: Path, small_grid: Grid):
        """PBM output is written for a .pbm suffix."""
        output = tmp_path / "nested" / "grid.pbm"
        GridWriter(small_grid, output).save()
        assert output.read_text(encoding="utf-8").startswith("P1\n3 2\n")

    def test_save_failure(self, tmp_path: Path, small_grid: Grid):
        """Unwritable destinations raise GridSaveError."""
        blocker = tmp_path / "file"
        blocker.write_text("x", encoding="utf-8")
        with pytest.raises(GridSaveError):
            GridWriter(small_grid, blocker / "grid.txt").save()
