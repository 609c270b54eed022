# overlay_config/models.py
"""Domain models for the overlay configuration loader.

Defines the ``Source`` record kept on the overlay stack and the pydantic
``LoaderOptions`` model that validates how files are discovered.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from overlay_config.defaults import DEFAULT_FILENAMES, DEFAULT_SCOPE, default_base_directories
from overlay_config.parsers import available_parsers
from overlay_config.utils.exceptions import ConfigurationError


@dataclass
class Source:
    """One configuration layer: a file path or bracketed marker plus its mapping."""
    label: str
    content: Dict[str, Any]


class LoaderOptions(BaseModel):
    """Where to look for config files and how to parse unknown extensions."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    scope: str = Field(default=DEFAULT_SCOPE, description="Subdirectory between base directory and filename")
    filenames: List[str] = Field(
        default_factory=lambda: list(DEFAULT_FILENAMES),
        description="Filename patterns (glob-capable), tried in order",
    )
    base_directories: List[str] = Field(
        default_factory=default_base_directories,
        description="Directory prefixes, tried in order",
    )
    default_parser: Optional[str] = Field(
        default=None, description="Registered parser for files whose extension is not known"
    )

    @field_validator("scope", mode="before")
    @classmethod
    def _coerce_scope(cls, value: Any) -> Any:
        if isinstance(value, os.PathLike):
            return os.fspath(value)
        return value

    @field_validator("default_parser")
    @classmethod
    def _known_parser(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and value not in available_parsers():
            raise ValueError(f"unknown parser {value!r}, available: {available_parsers()}")
        return value

    @field_validator("filenames", "base_directories", mode="before")
    @classmethod
    def _coerce_path_list(cls, value: Any) -> Any:
        # a lone string or path means a single entry, not a sequence of characters
        if isinstance(value, (str, os.PathLike)):
            value = [value]
        if isinstance(value, (list, tuple)):
            return [os.fspath(v) if isinstance(v, os.PathLike) else v for v in value]
        return value


def build_options(**kwargs: Any) -> LoaderOptions:
    """
    Build ``LoaderOptions`` from keyword arguments, skipping ``None`` values so
    the model defaults apply.

    Raises:
        ConfigurationError: If any option fails validation
    """
    supplied = {key: value for key, value in kwargs.items() if value is not None}
    try:
        return LoaderOptions(**supplied)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid loader options: {exc}") from exc
