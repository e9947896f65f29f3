"""YAML configuration file loader."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dotenv import dotenv_values
from pydantic import ValidationError
from ruamel.yaml import YAML

from git_providers.config.schema import Config, ProviderSettings, RepositoryEntry
from git_providers.resources.markers import collect_field_errors
from git_providers.validation.errors import GitProviderError
from git_providers.validation.validator import Validator, join_field_path

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Iterable


class ConfigError(GitProviderError):
    """Raised for configuration loading / validation errors."""

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors = errors if errors is not None else [message]


# Field name → environment variable.
_PROVIDER_ENV_MAP: dict[str, str] = {
    "domain": "GITPROVIDER_DOMAIN",
    "organization": "GITPROVIDER_ORGANIZATION",
}


def _resolve_provider(raw_provider: dict[str, Any], config_dir: Path) -> dict[str, Any]:
    """Resolve provider fields from YAML, env vars, and ``.env`` file.

    Priority (highest wins): YAML value > env var > ``.env`` file.
    Keys without an environment variable pass through untouched so that
    unknown ones are rejected by ``ProviderSettings``.
    """
    env_file = config_dir / ".env"
    dotenv_vals = dotenv_values(env_file, encoding="utf-8-sig") if env_file.is_file() else {}

    resolved = {k: v for k, v in raw_provider.items() if k not in _PROVIDER_ENV_MAP}
    for field, env_key in _PROVIDER_ENV_MAP.items():
        val = raw_provider.get(field)
        if val is None:
            val = os.environ.get(env_key)
        if val is None:
            val = dotenv_vals.get(env_key)
        if val is not None:
            resolved[field] = val

    return resolved


def _format_validation_error(exc: ValidationError, *prefix: str | int) -> list[str]:
    """One ``path: message`` line per error, with paths rooted at *prefix*."""
    return [f"{join_field_path(*prefix, *err['loc'])}: {err['msg']}" for err in exc.errors()]


def _validate_unique_names(repositories: Iterable[tuple[int, RepositoryEntry]]) -> list[str]:
    """Check that no two repositories share a name.

    *repositories* yields ``(index, entry)`` pairs, the index being the
    entry's position in the file.
    """
    seen: dict[str, int] = {}
    errors: list[str] = []
    for i, repo in repositories:
        if not repo.name:
            continue
        if repo.name in seen:
            errors.append(
                f"Duplicate repository name '{repo.name}': "
                f"found in both repositories[{seen[repo.name]}] and repositories[{i}]"
            )
        else:
            seen[repo.name] = i
    return errors


def load_config(path: Path | str) -> Config:
    """Load a YAML configuration file, apply defaults and validate it.

    Every violation in the file is collected before raising, so the error
    lists all invalid fields at once. An entry that fails to parse does not
    hide the problems of the other entries.

    Raises:
        ConfigError: On YAML parse errors, structural errors, or invalid fields.
    """
    path = Path(path)

    try:
        raw = YAML(typ="safe").load(path)
    except Exception as exc:
        raise ConfigError(f"Failed to read {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"{path}: top level must be a mapping")
    raw_provider = raw.get("provider") or {}
    if not isinstance(raw_provider, dict):
        raise ConfigError(f"{path}: 'provider' must be a mapping")

    errors = [
        f"{key}: Extra inputs are not permitted" for key in raw if key not in Config.model_fields
    ]

    provider: ProviderSettings | None = None
    try:
        provider = ProviderSettings.model_validate(_resolve_provider(raw_provider, path.parent))
    except ValidationError as exc:
        errors.extend(_format_validation_error(exc, "provider"))

    raw_repositories = raw.get("repositories")
    if raw_repositories is None:
        raw_repositories = []
    if not isinstance(raw_repositories, list):
        errors.append("repositories: Input should be a valid list")
        raw_repositories = []

    parsed: list[tuple[int, RepositoryEntry]] = []
    v = Validator(str(path))
    for i, raw_entry in enumerate(raw_repositories):
        try:
            repo = RepositoryEntry.model_validate(raw_entry)
        except ValidationError as exc:
            errors.extend(_format_validation_error(exc, "repositories", i))
            continue
        logger.debug("Defaulting repositories[%d] (%s)", i, repo.name or "unnamed")
        repo.default()
        collect_field_errors(repo, v, "repositories", i)
        parsed.append((i, repo))

    errors.extend(_validate_unique_names(parsed))
    errors.extend(violation.message for violation in v.violations)
    if errors or provider is None:
        raise ConfigError("\n".join(errors), errors)

    config = Config(provider=provider, repositories=[repo for _, repo in parsed])
    logger.info("Loaded config from %s (%d repositories)", path, len(config.repositories))
    return config
