"""Logging utilities for vecraster."""

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path

import structlog

# Marks handlers installed by configure_logging so repeated calls replace them
_HANDLER_TAG = "_vecraster_handler"


@dataclass
class RenderStats:
    """Statistics from one render."""

    operation: str = "fill"
    width: int = 0
    height: int = 0
    segment_count: int = 0
    pixels_sampled: int = 0
    filled_count: int = 0
    rows_completed: int = 0
    workers: int = 1
    was_cancelled: bool = False
    row_timings_ms: list[float] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate render duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def coverage(self) -> float:
        """Fraction of sampled pixels that ended up filled."""
        if self.pixels_sampled == 0:
            return 0.0
        return self.filled_count / self.pixels_sampled


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Console output goes to stderr so that rendered grids on stdout stay
    clean.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        setattr(file_handler, _HANDLER_TAG, True)
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    setattr(console_handler, _HANDLER_TAG, True)
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("vecraster")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class RenderLogger:
    """Logger for tracking render progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = RenderStats()

    def log_render_start(
        self,
        operation: str,
        width: int,
        height: int,
        segment_count: int,
        workers: int,
    ) -> None:
        """Log start of a render and reset statistics."""
        self._stats = RenderStats(
            operation=operation,
            width=width,
            height=height,
            segment_count=segment_count,
            workers=workers,
        )
        self._logger.info(
            "Render started",
            operation=operation,
            width=width,
            height=height,
            segments=segment_count,
            workers=workers,
        )

    def log_stroke_expanded(self, centerline_segments: int, outline_segments: int) -> None:
        """Log stroke-to-fill expansion."""
        self._logger.debug(
            "Stroke expanded",
            centerline_segments=centerline_segments,
            outline_segments=outline_segments,
        )

    def log_row_complete(self, y: int, filled: int, duration_ms: float) -> None:
        """Log a finished row."""
        self._logger.debug(
            "Row rendered",
            row=y,
            filled=filled,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.rows_completed += 1
        self._stats.pixels_sampled += self._stats.width
        self._stats.filled_count += filled
        self._stats.row_timings_ms.append(duration_ms)

    def log_row_error(self, y: int, error: Exception, traceback: str | None = None) -> None:
        """Log a row that failed in a worker."""
        self._logger.error(
            "Row rendering failed",
            row=y,
            error=str(error),
            error_type=type(error).__name__,
            traceback=traceback,
        )

    def log_render_complete(self) -> None:
        """Log render summary."""
        self._logger.info(
            "Render complete",
            operation=self._stats.operation,
            pixels=self._stats.pixels_sampled,
            filled=self._stats.filled_count,
            coverage=round(self._stats.coverage, 4),
            duration_seconds=round(self._stats.duration_seconds, 4),
        )

    @property
    def stats(self) -> RenderStats:
        """Get current render statistics."""
        return self._stats
