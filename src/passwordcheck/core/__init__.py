"""Core passwordcheck utilities.

This module exports core utilities for use throughout the package.
"""

from passwordcheck.core.config import PasswordCheckSettings, get_settings
from passwordcheck.core.logging import (
    LoggingContext,
    configure_logging,
    get_logger,
)

__all__ = [
    "PasswordCheckSettings",
    "get_settings",
    "configure_logging",
    "get_logger",
    "LoggingContext",
]
