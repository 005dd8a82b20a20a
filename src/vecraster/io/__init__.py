"""File I/O layer for vecraster.

This module handles reading path files and writing rendered grids. It
keeps file formats out of the domain models and the core algorithms.

Key responsibilities:
- Load JSON path files into domain paths
- Render grids as ASCII art or plain PBM
- Format detection from the output suffix

Key classes:
- PathReader: Load path files
- GridWriter: Save rendered grids
"""

from vecraster.io.reader import PathReader, parse_path_document
from vecraster.io.writer import GridWriter, grid_to_pbm, grid_to_text

__all__ = [
    "GridWriter",
    "PathReader",
    "grid_to_pbm",
    "grid_to_text",
    "parse_path_document",
]
