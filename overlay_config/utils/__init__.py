"""
Utility functions and classes.

Shared exceptions and logging helpers used across the loader.
"""

from overlay_config.utils.exceptions import (
    OverlayConfigError, ConfigurationError, ConfigParseError, ParserNotFoundError
)
from overlay_config.utils.logging import configure_logging, get_logger

__all__ = [
    'OverlayConfigError',
    'ConfigurationError',
    'ConfigParseError',
    'ParserNotFoundError',
    'configure_logging',
    'get_logger',
]
