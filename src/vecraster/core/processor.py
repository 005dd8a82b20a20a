"""Configured rendering with optional row-parallel execution.

This module wraps the pure fill/stroke functions with configuration,
logging and statistics, and can spread rows over worker processes using
ProcessPoolExecutor.

Key components:
- render_row: Top-level picklable function for parallel execution
- RenderProcessor: Main orchestrator class for rendering
"""

import os
import time
import traceback
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import Any

import structlog

from vecraster.config import VecrasterSettings
from vecraster.core.rasterizer import rasterize_row
from vecraster.core.stroke import expand_path
from vecraster.domain import FillRule, Grid, Path
from vecraster.exceptions import InvalidGridSizeError, RasterError
from vecraster.utils import RenderLogger, RenderStats


def render_row(
    path_dict: dict[str, Any],
    y: int,
    width: int,
    rule_value: str,
    epsilon: float = 0.0,
) -> dict[str, Any]:
    """Render one row of a grid.

    Top-level function designed to be picklable for use with
    ProcessPoolExecutor. Deserializes the path and rule, rasterizes the row
    and returns plain data.

    Args:
        path_dict: Serialized path (from Path.to_dict())
        y: Row index
        width: Row length in pixels
        rule_value: FillRule value ("nonzero" or "evenodd")
        epsilon: Parallel tolerance for the intersection test

    Returns:
        Dictionary containing either:
        - Success: {"row": y, "cells": list[bool], "duration_ms": float}
        - Error: {"row": y, "error": str, "traceback": str, "duration_ms": float}
    """
    start_time = time.time()

    try:
        path = Path.from_dict(path_dict)
        fill_rule = FillRule(rule_value)
        cells = rasterize_row(path, y, width, fill_rule, epsilon)

        duration_ms = (time.time() - start_time) * 1000
        return {"row": y, "cells": cells, "duration_ms": duration_ms}

    except Exception as e:
        duration_ms = (time.time() - start_time) * 1000
        return {
            "row": y,
            "error": str(e),
            "traceback": traceback.format_exc(),
            "duration_ms": duration_ms,
        }


class RenderProcessor:
    """Orchestrates fill and stroke rendering.

    Manages the complete workflow:
    1. Resolve defaults (fill rule, stroke width, tolerance) from settings
    2. Expand strokes into outlines
    3. Render rows serially or in worker processes
    4. Collect rows into a grid and update statistics

    Example:
        settings = VecrasterSettings()
        processor = RenderProcessor(settings)
        grid = processor.fill(path, width=30, height=10)
        print(processor.stats.filled_count)
    """

    def __init__(
        self,
        config: VecrasterSettings,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize render processor with configuration.

        Args:
            config: vecraster settings
            logger: Bound logger; defaults to the "vecraster" logger
        """
        self.config = config
        self.logger = logger if logger is not None else structlog.get_logger("vecraster")
        self.render_logger = RenderLogger(self.logger)

    @property
    def stats(self) -> RenderStats:
        """Statistics of the most recent render."""
        return self.render_logger.stats

    def fill(
        self,
        path: Path,
        width: int,
        height: int,
        fill_rule: FillRule | None = None,
    ) -> Grid:
        """Fill a path using the configured defaults.

        Args:
            path: Contours to fill
            width: Grid width in pixels
            height: Grid height in pixels
            fill_rule: Overrides the configured fill rule

        Returns:
            Coverage grid
        """
        rule = fill_rule if fill_rule is not None else self.config.raster.fill_rule
        return self._render("fill", path, width, height, rule)

    def stroke(
        self,
        path: Path,
        width: int,
        height: int,
        stroke_width: float | None = None,
    ) -> Grid:
        """Stroke a path using the configured defaults.

        Args:
            path: Centerline segments
            width: Grid width in pixels
            height: Grid height in pixels
            stroke_width: Overrides the configured stroke width

        Returns:
            Coverage grid

        Raises:
            InvalidSegmentError: If the path contains a zero-length segment
            InvalidStrokeWidthError: If the stroke width is invalid
        """
        pen = stroke_width if stroke_width is not None else self.config.stroke.width
        outline = expand_path(path, pen)
        self.render_logger.log_stroke_expanded(len(path), len(outline))
        return self._render("stroke", outline, width, height, FillRule.NONZERO)

    def _render(
        self,
        operation: str,
        path: Path,
        width: int,
        height: int,
        fill_rule: FillRule,
    ) -> Grid:
        if width < 0 or height < 0:
            raise InvalidGridSizeError(width, height)

        raster = self.config.raster
        workers = raster.max_workers if raster.parallel else 1

        self.render_logger.log_render_start(
            operation=operation,
            width=width,
            height=height,
            segment_count=len(path),
            workers=workers if workers is not None else os.cpu_count() or 1,
        )
        stats = self.render_logger.stats
        stats.start_time = time.time()

        if raster.parallel and height > 0 and width > 0:
            rows = self._render_rows_parallel(path, width, height, fill_rule, workers)
        else:
            rows = self._render_rows_serial(path, width, height, fill_rule)

        stats.end_time = time.time()
        self.render_logger.log_render_complete()

        return Grid.from_rows(rows, width=width)

    def _render_rows_serial(
        self,
        path: Path,
        width: int,
        height: int,
        fill_rule: FillRule,
    ) -> list[list[bool]]:
        epsilon = self.config.raster.intersection_epsilon
        rows: list[list[bool]] = []
        for y in range(height):
            start = time.time()
            cells = rasterize_row(path, y, width, fill_rule, epsilon)
            self.render_logger.log_row_complete(y, sum(cells), (time.time() - start) * 1000)
            rows.append(cells)
        return rows

    def _render_rows_parallel(
        self,
        path: Path,
        width: int,
        height: int,
        fill_rule: FillRule,
        max_workers: int | None,
    ) -> list[list[bool]]:
        """Render rows in parallel using ProcessPoolExecutor.

        Args:
            path: Segments to rasterize
            width: Row length in pixels
            height: Number of rows
            fill_rule: Rule turning winding numbers into coverage
            max_workers: Maximum worker processes (None = auto)

        Returns:
            Rows in top-to-bottom order

        Raises:
            RasterError: If any row fails in a worker
            KeyboardInterrupt: If rendering is cancelled by user
        """
        path_dict = path.to_dict()
        epsilon = self.config.raster.intersection_epsilon
        rows: dict[int, list[bool]] = {}
        failed: list[int] = []
        pending_futures: dict = {}

        self.logger.info(
            "Starting parallel rendering",
            rows=height,
            max_workers=max_workers,
        )

        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            for y in range(height):
                future = executor.submit(
                    render_row,
                    path_dict,
                    y,
                    width,
                    fill_rule.value,
                    epsilon,
                )
                pending_futures[future] = y

            try:
                for future in as_completed(pending_futures):
                    y = pending_futures.pop(future)

                    try:
                        result = future.result()
                    except Exception as e:
                        self.render_logger.log_row_error(y, e, traceback.format_exc())
                        failed.append(y)
                        continue

                    if "error" in result:
                        self.render_logger.log_row_error(
                            y,
                            Exception(result["error"]),
                            traceback=result.get("traceback"),
                        )
                        failed.append(y)
                        continue

                    cells = result["cells"]
                    rows[y] = cells
                    self.render_logger.log_row_complete(
                        y, sum(cells), result.get("duration_ms", 0.0)
                    )

            except KeyboardInterrupt:
                self.logger.info("Cancellation requested by user")
                for f in pending_futures:
                    f.cancel()
                self.render_logger.stats.was_cancelled = True
                executor.shutdown(wait=True, cancel_futures=True)
                raise

        if failed:
            raise RasterError(f"Failed to render rows: {sorted(failed)}")

        return [rows[y] for y in range(height)]
