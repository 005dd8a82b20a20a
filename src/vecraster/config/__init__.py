"""Configuration management for vecraster.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- RasterConfig: Fill rule, intersection tolerance and parallelism
- StrokeConfig: Stroke-to-fill settings
- OutputConfig: Text rendering settings
- LoggingConfig: Logging settings
- VecrasterSettings: Main application settings
"""

from vecraster.config.settings import (
    LoggingConfig,
    OutputConfig,
    RasterConfig,
    StrokeConfig,
    VecrasterSettings,
    get_default_settings,
)

__all__ = [
    "LoggingConfig",
    "OutputConfig",
    "RasterConfig",
    "StrokeConfig",
    "VecrasterSettings",
    "get_default_settings",
]
