"""Utility functions for strokematch.

This module provides utility functions including:

- Logging setup and configuration
- Match statistics collection
"""

from strokematch.utils.logging import (
    MatchLogger,
    MatchStats,
    configure_logging,
)

__all__ = [
    "MatchLogger",
    "MatchStats",
    "configure_logging",
]
