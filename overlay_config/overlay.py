"""
overlay_config.overlay
======================

Layered configuration loader. Config files are discovered in strict order:

1. every base directory, in the order given
2. inside each, every filename pattern (glob-capable), in the order given

Each file found becomes one source on the overlay stack; defaults passed in
programmatically are appended last. Lookups scan the stack front to back and
the first source defining a key wins.

"""

from __future__ import annotations

import copy
import glob
import logging
import os
from collections.abc import Mapping
from typing import Any, Callable, Dict, Iterator, List, Optional, Sequence, Tuple, Union

from overlay_config.defaults import DEFAULTS_LABEL
from overlay_config.models import LoaderOptions, Source, build_options
from overlay_config.nested import MISSING, resolve
from overlay_config.parsers import parser_for

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


class OverlayConfig:
    """
    Ordered stack of configuration sources with first-match lookups.

    Instantiate once per scope. All I/O happens in the constructor (or an
    explicit :py:meth:`load_config_files` / :py:meth:`reload`); lookups only
    read the in-memory stack.

    Values are read and written with subscripts, ``config["test"]`` and
    ``config["test"] = value``, which are the same as :py:meth:`get` and
    :py:meth:`set`.
    """

    # ------------------------------------------------------------------ #
    # Construction                                                       #
    # ------------------------------------------------------------------ #
    def __init__(
        self,
        scope: Optional[str] = None,
        filenames: Optional[Sequence[str]] = None,
        base_directories: Optional[Sequence[PathLike]] = None,
        default_parser: Optional[str] = None,
        defaults: Optional[Dict[str, Any]] = None,
        log: Optional[logging.Logger] = None,
    ) -> None:
        """
        Args:
            scope: Subdirectory inserted between base directory and filename
            filenames: Filename patterns, glob wildcards allowed
            base_directories: Directory prefixes to search
            default_parser: ``"yaml"`` or ``"json"``, used for unknown extensions
            defaults: Lowest-priority settings, appended as ``<defaults>``
            log: Logger receiving discovery messages (package logger if omitted)

        Raises:
            ConfigurationError: If the options are invalid
            ConfigParseError: If a selected file is malformed
        """
        self._options: LoaderOptions = build_options(
            scope=scope,
            filenames=filenames,
            base_directories=base_directories,
            default_parser=default_parser,
        )
        # an empty mapping is treated as absent; set() creates one on demand
        self._defaults: Optional[Dict[str, Any]] = None
        if isinstance(defaults, Mapping) and defaults:
            # set() writes into it, so read-only mappings are copied
            self._defaults = defaults if isinstance(defaults, dict) else dict(defaults)
        self._log = log or logger
        self._sources: List[Source] = []

        self.load_config_files()
        if self._defaults is not None:
            self.append(DEFAULTS_LABEL, self._defaults)

    # ------------------------------------------------------------------ #
    # Options                                                            #
    # ------------------------------------------------------------------ #
    @property
    def scope(self) -> str:
        return self._options.scope

    @property
    def filenames(self) -> List[str]:
        return list(self._options.filenames)

    @property
    def base_directories(self) -> List[str]:
        return list(self._options.base_directories)

    @property
    def default_parser(self) -> Optional[str]:
        return self._options.default_parser

    @property
    def defaults(self) -> Optional[Dict[str, Any]]:
        """The mapping written by :py:meth:`set`, or ``None`` if none exists yet."""
        return self._defaults

    @property
    def sources(self) -> Tuple[Source, ...]:
        """Read-only view of the stack, highest priority first."""
        return tuple(self._sources)

    # ------------------------------------------------------------------ #
    # Loading                                                            #
    # ------------------------------------------------------------------ #
    def candidate_paths(self) -> List[str]:
        """Return the expanded candidate paths in search order."""
        return [
            os.path.abspath(os.path.expanduser(os.path.join(base, self.scope, filename)))
            for base in self._options.base_directories
            for filename in self._options.filenames
        ]

    def load_config_files(self) -> None:
        """
        Reset the stack and load every config file found.

        A candidate that exists as a file is loaded directly; otherwise it is
        expanded as a glob and the matching files are loaded in sorted order.
        ``**`` matches zero or more directories. Brace alternatives such as
        ``{a,b}.yml`` are not supported; list each pattern in ``filenames``.
        Candidates matching nothing are logged and skipped. The stack is only
        replaced once every file parsed.

        Raises:
            ConfigParseError: If a selected file is malformed
        """
        loaded: List[Source] = []
        for path in self.candidate_paths():
            for file in self._expand(path):
                source = self._read_source(file)
                if source is not None:
                    loaded.append(source)
        self._sources = loaded

    def load_config_file(self, path: str) -> Optional[Source]:
        """
        Parse *path* and append it to the stack.

        Returns the new source, or ``None`` if the file extension is not known
        and no default parser is set.

        Raises:
            ConfigParseError: If the file is malformed
        """
        source = self._read_source(path)
        if source is not None:
            self._sources.append(source)
        return source

    def _expand(self, path: str) -> List[str]:
        if os.path.isfile(path):
            return [path]
        matches = [match for match in sorted(glob.glob(path, recursive=True)) if os.path.isfile(match)]
        if not matches:
            self._log.debug("%s not found, ignoring it.", path)
        return matches

    def _read_source(self, path: str) -> Optional[Source]:
        parser = parser_for(path, self.default_parser)
        if parser is None:
            self._log.warning("ignoring %s, file extension not known.", path)
            return None
        return Source(path, parser(path))

    def reload(self) -> None:
        """Reload all config files and put the defaults source back at the end."""
        self.load_config_files()
        if self._defaults is not None:
            self.append(DEFAULTS_LABEL, self._defaults)

    # ------------------------------------------------------------------ #
    # Stack manipulation                                                 #
    # ------------------------------------------------------------------ #
    def append(self, label: str, content: Dict[str, Any]) -> Source:
        """Add *content* at the end of the stack (lowest priority)."""
        source = Source(label, content)
        self._sources.append(source)
        return source

    def insert(self, index: int, label: str, content: Dict[str, Any]) -> Source:
        """Add *content* at *index*; index 0 gives it the highest priority."""
        source = Source(label, content)
        self._sources.insert(index, source)
        return source

    def delete_at(self, index: int) -> Optional[Source]:
        """Remove and return the source at *index*, or ``None`` if out of range."""
        try:
            return self._sources.pop(index)
        except IndexError:
            return None

    def length(self) -> int:
        return len(self._sources)

    # ------------------------------------------------------------------ #
    # Lookups                                                            #
    # ------------------------------------------------------------------ #
    def _find(self, name: Any) -> Any:
        for source in self._sources:
            value = resolve(source.content, name)
            if value is not MISSING:
                return value
        return MISSING

    def get(self, name: Any, default: Any = None) -> Any:
        """
        Return the first value of *name* found on the stack.

        *name* may also be a list or tuple path into nested mappings; the
        first source resolving the whole path wins. A key that is present
        wins even when its value is falsy. Returns *default* when no source
        has the key.
        """
        value = self._find(name)
        return default if value is MISSING else value

    def has_key(self, name: Any) -> bool:
        """Return whether any source defines *name*."""
        return self._find(name) is not MISSING

    def set(self, name: Any, value: Any) -> None:
        """
        Store *value* in the defaults mapping.

        The defaults source is created and appended on first use. Sources
        earlier on the stack still shadow it; use :py:meth:`insert` at 0 to
        override them. Only flat keys are accepted.

        Raises:
            TypeError: If *name* is a list or tuple path
        """
        if isinstance(name, (list, tuple)):
            raise TypeError(f"set() takes a flat key, not a path: {name!r}")
        if self._defaults is None:
            self._defaults = {}
            self.append(DEFAULTS_LABEL, self._defaults)
        self._defaults[str(name)] = value

    # ------------------------------------------------------------------ #
    # Enumeration                                                        #
    # ------------------------------------------------------------------ #
    def each(self, visitor: Callable[[str, Dict[str, Any]], Any]) -> None:
        """Call ``visitor(label, content)`` for every source in order."""
        for source in list(self._sources):
            visitor(source.label, source.content)

    def get_filenames(self) -> List[str]:
        """Return the labels of all sources in order."""
        return [source.label for source in self._sources]

    # ------------------------------------------------------------------ #
    # Cloning                                                            #
    # ------------------------------------------------------------------ #
    def clone(self) -> "OverlayConfig":
        """
        Return a copy with its own stack.

        Stack changes on either copy do not affect the other. The mappings
        themselves, including the defaults mapping, are shared.
        """
        return copy.copy(self)

    def __copy__(self) -> "OverlayConfig":
        duplicate = self.__class__.__new__(self.__class__)
        duplicate.__dict__.update(self.__dict__)
        duplicate._sources = list(self._sources)
        return duplicate

    # ------------------------------------------------------------------ #
    # dict-like helpers                                                  #
    # ------------------------------------------------------------------ #
    def __getitem__(self, name: Any) -> Any:
        return self.get(name)

    def __setitem__(self, name: Any, value: Any) -> None:
        self.set(name, value)

    def __contains__(self, name: object) -> bool:
        return self.has_key(name)

    def __len__(self) -> int:
        return self.length()

    def __iter__(self) -> Iterator[Source]:
        return iter(list(self._sources))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(scope={self.scope!r}, sources={self.get_filenames()!r})"
