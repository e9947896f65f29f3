"""CLI command implementations."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Annotated

import typer

from git_providers import __version__
from git_providers.cli import app
from git_providers.cli.errors import handle_error
from git_providers.cli.logs import configure_logging
from git_providers.resources.enums import TransportType

ConfigPath = Annotated[
    Path,
    typer.Option("--config", "-c", help="Path to the configuration file."),
]

NoColor = Annotated[
    bool,
    typer.Option("--no-color", help="Disable colored output."),
]


def _use_color(no_color: bool) -> bool:
    """Determine whether to use color output."""
    return not (no_color or os.environ.get("NO_COLOR"))


def _print_version(value: bool) -> None:
    if value:
        typer.echo(f"git-providers {__version__}")
        raise typer.Exit


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=_print_version,
            is_eager=True,
        ),
    ] = None,
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            count=True,
            help="Log to stderr (-v info, -vv debug). GITPROVIDER_LOG overrides.",
        ),
    ] = 0,
) -> None:
    """Validate and default git hosting resources declared in YAML."""
    _ = version
    configure_logging(verbose)


@app.command()
def validate(
    config: ConfigPath = Path("git-providers.yaml"),
    no_color: NoColor = False,
) -> None:
    """Apply defaults to the configuration and report every invalid field."""
    from git_providers.cli.formatting import format_repository, format_summary
    from git_providers.config import load

    color = _use_color(no_color)
    try:
        cfg = load(config)
    except Exception as exc:
        raise typer.Exit(handle_error(exc, color=color)) from exc

    for repo in cfg.repositories:
        typer.echo(format_repository(repo, color=color))
        typer.echo()
    typer.echo(format_summary(len(cfg.repositories), color=color))


@app.command()
def enums(no_color: NoColor = False) -> None:
    """List the allowed values of every enumerated field."""
    from git_providers.cli.formatting import format_enums

    typer.echo(format_enums(color=_use_color(no_color)))


@app.command("clone-urls")
def clone_urls(
    config: ConfigPath = Path("git-providers.yaml"),
    transport: Annotated[
        TransportType,
        typer.Option("--transport", "-t", help="Clone URL transport."),
    ] = TransportType.HTTPS,
    no_color: NoColor = False,
) -> None:
    """Print the clone URL of every declared repository."""
    from git_providers.config import load

    color = _use_color(no_color)
    try:
        cfg = load(config)
        refs = cfg.refs()
    except Exception as exc:
        raise typer.Exit(handle_error(exc, color=color)) from exc

    for ref in refs:
        typer.echo(f"{ref.repository_name}\t{ref.get_clone_url(transport)}")
