"""Output rendering for CLI commands."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

import typer

from git_providers.resources.enums import REGISTRIES, TransportType

if TYPE_CHECKING:
    from collections.abc import Callable

    from git_providers.config.schema import RepositoryEntry


def styler(color: bool) -> Callable[..., str]:
    """Return ``typer.style`` when *color* is True, otherwise a passthrough."""
    if color:
        return typer.style
    return lambda text, **_kw: text


def _align_values(items: dict[str, str]) -> list[tuple[str, str]]:
    """Right-pad keys so ``=`` signs align."""
    if not items:
        return []
    max_key = max(len(k) for k in items)
    return [(k.ljust(max_key), v) for k, v in items.items()]


def _format_value(value: Any) -> str:
    if isinstance(value, Enum):
        value = value.value
    if value is None:
        return "(unset)"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return f'"{value}"'
    return str(value)


def format_repository(repo: RepositoryEntry, *, color: bool = True) -> str:
    """Render one repository with its effective settings, keys and teams."""
    s = styler(color)
    lines = [s(f"repository.{repo.name}", bold=True)]
    attrs = {
        "visibility": _format_value(repo.visibility),
        "default_branch": _format_value(repo.default_branch),
    }
    if repo.description is not None:
        attrs["description"] = _format_value(repo.description)
    if repo.options.license_template is not None:
        attrs["license_template"] = _format_value(repo.options.license_template)
    if repo.options.auto_init is not None:
        attrs["auto_init"] = _format_value(repo.options.auto_init)
    lines.extend(f"    {k} = {v}" for k, v in _align_values(attrs))

    for key in repo.deploy_keys:
        mode = "read-only" if key.read_only else "read-write"
        lines.append(f"    deploy_key.{key.name} ({mode})")
    for team in repo.teams:
        lines.append(f"    team.{team.name} ({_format_value(team.permission)})")
    return "\n".join(lines)


def format_summary(count: int, *, color: bool = True) -> str:
    s = styler(color)
    noun = "repository" if count == 1 else "repositories"
    return s(f"Configuration is valid: {count} {noun}.", fg="green", bold=True)


def format_enums(*, color: bool = True) -> str:
    """List every enum type with its allowed values in declared order."""
    s = styler(color)
    rows = {r.name: ", ".join(r.values) for r in REGISTRIES}
    rows[TransportType.__name__] = ", ".join(t.value for t in TransportType) + s(
        "  (not validated)", fg="bright_black"
    )
    return "\n".join(f"{s(k, bold=True)}  {v}" for k, v in _align_values(rows))
