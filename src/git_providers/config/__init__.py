"""YAML configuration loading."""

from __future__ import annotations

from typing import TYPE_CHECKING

from git_providers.config.loader import ConfigError, load_config
from git_providers.config.schema import Config, ProviderSettings, RepositoryEntry

if TYPE_CHECKING:
    from pathlib import Path

__all__ = [
    "Config",
    "ConfigError",
    "ProviderSettings",
    "RepositoryEntry",
    "load",
    "load_config",
]


def load(path: Path | str) -> Config:
    """Load, default and validate a YAML configuration file."""
    return load_config(path)
