"""Conventional defaults for the overlay configuration loader.

Defines the scope, filenames and base directories used when a caller does not
supply its own. Base directories are computed on call, so nothing about the
invoking user's environment is read at import time.
"""
from __future__ import annotations

from pathlib import Path
from typing import List

# Namespace subdirectory placed between each base directory and filename
DEFAULT_SCOPE = "overlay_config"

# Tried in order inside every base directory
DEFAULT_FILENAMES = ["config.json", "credentials.json"]

# System-wide base directory, consulted after the user's config home
SYSTEM_CONFIG_DIR = "/etc"

# Labels for synthetic (non file-backed) sources
DEFAULTS_LABEL = "<defaults>"


def user_config_dir() -> str:
    """Return the invoking user's config home (``~/.config``)."""
    return str(Path.home() / ".config")


def default_base_directories() -> List[str]:
    """Return the default base directory list, highest priority first."""
    return [user_config_dir(), SYSTEM_CONFIG_DIR]
