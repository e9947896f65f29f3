"""Shared fixtures for unit tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from git_providers.config import load

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from git_providers.config.schema import Config

_GITPROVIDER_ENV_VARS = ("GITPROVIDER_DOMAIN", "GITPROVIDER_ORGANIZATION", "GITPROVIDER_LOG")


@pytest.fixture(autouse=True)
def _clean_gitprovider_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove GITPROVIDER_* env vars so unit tests don't leak host config."""
    for var in _GITPROVIDER_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def make_config(tmp_path: Path) -> Callable[..., Config]:
    """Factory fixture: write YAML + optional .env, return loaded Config."""

    def _make(yaml_str: str, *, dotenv: str | None = None) -> Config:
        (tmp_path / "config.yaml").write_text(yaml_str)
        if dotenv is not None:
            (tmp_path / ".env").write_text(dotenv)
        return load(tmp_path / "config.yaml")

    return _make
