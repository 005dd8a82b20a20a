"""Configuration settings for vecraster."""

from pathlib import Path

from pydantic import BaseModel, Field

from vecraster.domain import FillRule


class RasterConfig(BaseModel):
    """Configuration for rasterization."""

    fill_rule: FillRule = Field(
        default=FillRule.NONZERO,
        description="Fill rule used when none is given explicitly",
    )
    intersection_epsilon: float = Field(
        default=0.0,
        ge=0.0,
        le=1.0,
        description="Determinants at or below this magnitude count as parallel (0 = exact)",
    )
    parallel: bool = Field(
        default=False,
        description="Render rows in worker processes",
    )
    max_workers: int | None = Field(
        default=None,
        ge=1,
        description="Max worker processes (None = auto)",
    )


class StrokeConfig(BaseModel):
    """Configuration for stroke-to-fill conversion."""

    width: float = Field(
        default=1.0,
        ge=0.0,
        description="Stroke width used when none is given explicitly",
    )


class OutputConfig(BaseModel):
    """Configuration for grid rendering."""

    filled_char: str = Field(
        default="#",
        min_length=1,
        max_length=1,
        description="Character for filled cells in text output",
    )
    empty_char: str = Field(
        default=".",
        min_length=1,
        max_length=1,
        description="Character for empty cells in text output",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class VecrasterSettings(BaseModel):
    """Main application settings."""

    raster: RasterConfig = Field(default_factory=RasterConfig)
    stroke: StrokeConfig = Field(default_factory=StrokeConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> VecrasterSettings:
    """Get default application settings."""
    return VecrasterSettings()
