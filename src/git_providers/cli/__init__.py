"""CLI application for git-providers."""

from __future__ import annotations

import typer

app = typer.Typer(
    name="git-providers",
    no_args_is_help=True,
    add_completion=False,
)

# Register commands after app is created to avoid circular imports.
from git_providers.cli import commands as _commands  # noqa: E402, F401
