"""Utility functions for vecraster.

This module provides:

- Logging setup and configuration
- Render statistics tracking
"""

from vecraster.utils.logging import (
    RenderLogger,
    RenderStats,
    configure_logging,
)

__all__ = [
    "RenderLogger",
    "RenderStats",
    "configure_logging",
]
