"""
overlay_config.parsers
======================

Single registry of config file parsers.

* Register:   ``@register_parser("yaml", (".yml", ".yaml"))``
* Discover:   ``parse = get_parser("yaml")``
* Enumerate:  ``available_parsers()  ->  ("json", "yaml")``
* Dispatch:   ``parser_for("/etc/app/config.cfg", default_parser="yaml")``

Every parser takes a path and returns the top-level mapping of the document.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Callable, Dict, Optional, Tuple

import yaml

from overlay_config.utils.exceptions import ConfigParseError, ParserNotFoundError

logger = logging.getLogger(__name__)

Parser = Callable[[str], Dict[str, Any]]

# {name: parser}, in registration order
_PARSERS: Dict[str, Parser] = {}
# {name: extensions}
_EXTENSIONS: Dict[str, Tuple[str, ...]] = {}


# --------------------------------------------------------------------------- #
# Public API                                                                  #
# --------------------------------------------------------------------------- #
def register_parser(name: str, extensions: Tuple[str, ...] = ()):
    """
    Decorator for registering a parser under *name* for *extensions*.

    A registered name is also accepted as ``default_parser`` by
    ``OverlayConfig``; register before constructing the loader.

    Example
    -------
    ```python
    @register_parser("toml", (".toml",))
    def parse_toml(path):
        ...
    ```
    """

    def decorator(parser: Parser) -> Parser:
        _PARSERS[name] = parser
        _EXTENSIONS[name] = tuple(ext.lower() for ext in extensions)
        logger.debug("Registered parser %s for %s", name, extensions)
        return parser

    return decorator


def get_parser(name: str) -> Parser:
    """Return the parser registered as *name*."""
    if name not in _PARSERS:
        raise ParserNotFoundError(
            f"No parser named {name!r} available. Available: {available_parsers()}"
        )
    return _PARSERS[name]


def available_parsers() -> Tuple[str, ...]:
    """Return the sorted, frozen list of registered parser names."""
    return tuple(sorted(_PARSERS))


def parser_for(path: str, default_parser: Optional[str] = None) -> Optional[Parser]:
    """
    Pick the parser for *path*.

    Parsers are tried in registration order; a parser is chosen when *path*
    ends with one of its extensions or when it is the *default_parser*.
    Returns ``None`` when neither applies.
    """
    lowered = path.lower()
    for name, parser in _PARSERS.items():
        if lowered.endswith(_EXTENSIONS[name]) or default_parser == name:
            return parser
    return None


# --------------------------------------------------------------------------- #
# Built-in parsers                                                            #
# --------------------------------------------------------------------------- #
def _ensure_mapping(path: str, data: Any) -> Dict[str, Any]:
    """Empty documents become ``{}``; any other non-mapping is rejected."""
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ConfigParseError(
            path, f"top level must be a mapping, got {type(data).__name__}"
        )
    return data


@register_parser("yaml", (".yml", ".yaml"))
def parse_yaml(path: str) -> Dict[str, Any]:
    """Load a YAML file; return an empty dict if the file is empty."""
    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except yaml.YAMLError as exc:
        raise ConfigParseError(path, f"invalid YAML: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise ConfigParseError(path, f"not valid UTF-8: {exc}") from exc
    return _ensure_mapping(path, data)


@register_parser("json", (".json",))
def parse_json(path: str) -> Dict[str, Any]:
    """Load a JSON file; return an empty dict if the file is empty."""
    try:
        with open(path, "r", encoding="utf-8") as fh:
            text = fh.read()
    except UnicodeDecodeError as exc:
        raise ConfigParseError(path, f"not valid UTF-8: {exc}") from exc
    if not text.strip():
        return {}
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigParseError(path, f"invalid JSON: {exc}") from exc
    return _ensure_mapping(path, data)
