"""
overlay_config.utils.exceptions
===============================

Custom exceptions for the overlay configuration loader.
"""

class OverlayConfigError(Exception):
    """Base exception for all overlay_config errors."""
    pass

class ConfigurationError(OverlayConfigError):
    """Invalid loader options (scope, filenames, directories, parser)."""
    pass

class ConfigParseError(OverlayConfigError, ValueError):
    """A selected config file could not be parsed into a mapping."""

    def __init__(self, path: str, message: str):
        super().__init__(f"{path}: {message}")
        self.path = path

class ParserNotFoundError(OverlayConfigError, KeyError):
    """No parser registered under the requested name."""
    pass
