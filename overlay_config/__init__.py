"""
Layered configuration loading.

This package re-exports the loader, the nested lookup helper and the
exception types. Log messages go to the ``overlay_config`` logger, which
stays silent until the host application configures logging.
"""
import logging

from overlay_config.overlay import OverlayConfig
from overlay_config.models import Source, LoaderOptions
from overlay_config.nested import nested_get, has_nested
from overlay_config.parsers import register_parser, get_parser, available_parsers
from overlay_config.defaults import DEFAULT_SCOPE, DEFAULT_FILENAMES, DEFAULTS_LABEL
from overlay_config.utils.exceptions import (
    OverlayConfigError,
    ConfigurationError,
    ConfigParseError,
    ParserNotFoundError,
)

__version__ = "0.1.0"

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

__all__ = [
    'OverlayConfig',
    'Source',
    'LoaderOptions',
    'nested_get',
    'has_nested',
    'register_parser',
    'get_parser',
    'available_parsers',
    'DEFAULT_SCOPE',
    'DEFAULT_FILENAMES',
    'DEFAULTS_LABEL',
    'OverlayConfigError',
    'ConfigurationError',
    'ConfigParseError',
    'ParserNotFoundError',
]
