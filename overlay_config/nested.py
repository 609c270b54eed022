"""
overlay_config.nested
=====================

Key lookup inside nested mappings.

* Flat:  ``nested_get(cfg, "name")``
* Path:  ``nested_get(cfg, ["database", "pool", "size"], default=5)``

At every level the string form of a key segment is tried first, then the
segment exactly as given, so ``nested_get({1: "a"}, 1)`` still finds the
integer key a YAML document produced.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Tuple

MISSING = object()


def _key_forms(segment: Any) -> Tuple[Any, ...]:
    """Return the candidate keys for *segment*, string form first."""
    as_str = str(segment)
    if isinstance(segment, str):
        return (as_str,)
    return (as_str, segment)


def _lookup_one(container: Any, segment: Any) -> Any:
    """Return the value under *segment* in *container*, or ``MISSING``."""
    if not isinstance(container, Mapping):
        return MISSING
    for candidate in _key_forms(segment):
        try:
            if candidate in container:
                return container[candidate]
        except TypeError:
            # unhashable segment
            continue
    return MISSING


def _is_path(key: Any) -> bool:
    return isinstance(key, (list, tuple))


def resolve(container: Any, key: Any) -> Any:
    """Return the value for *key* in *container*, or the ``MISSING`` sentinel."""
    if not _is_path(key):
        return _lookup_one(container, key)
    if not key:
        return MISSING

    current = container
    for segment in key:
        current = _lookup_one(current, segment)
        if current is MISSING:
            return MISSING
    return current


def nested_get(container: Any, key: Any, default: Any = None) -> Any:
    """
    Return the value for *key* in *container*, or *default* if it doesn't exist.

    *key* is either a single key or a list/tuple of keys describing a path
    through nested mappings. A path fails closed: if any segment is missing,
    or an intermediate value is not a mapping, *default* is returned. The
    caller's path sequence is never modified.
    """
    value = resolve(container, key)
    return default if value is MISSING else value


def has_nested(container: Any, key: Any) -> bool:
    """Return whether :func:`nested_get` would find *key* in *container*."""
    return resolve(container, key) is not MISSING
