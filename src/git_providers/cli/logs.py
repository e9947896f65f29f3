"""Log setup for the command line.

Library modules only log to the ``git_providers`` hierarchy. The CLI attaches
a single stderr handler to that logger when ``-v`` or ``GITPROVIDER_LOG``
asks for output.
"""

from __future__ import annotations

import logging
import sys

import typer
from pydantic_settings import BaseSettings, SettingsConfigDict

LOGGER_NAME = "git_providers"
HANDLER_NAME = "git-providers-cli"
_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LogSettings(BaseSettings):
    """``GITPROVIDER_LOG`` takes precedence over the ``-v`` flags."""

    model_config = SettingsConfigDict(env_prefix="GITPROVIDER_")

    log: str | None = None


def level_for(verbose: int, env_level: str | None) -> int | None:
    """Level for the ``git_providers`` logger, or ``None`` to leave logging untouched."""
    if env_level:
        name = env_level.upper()
        if name not in _LEVELS:
            typer.echo(
                f"WARNING: invalid GITPROVIDER_LOG level '{env_level}', "
                f"expected one of {', '.join(_LEVELS)}; defaulting to INFO",
                err=True,
            )
            return logging.INFO
        return getattr(logging, name)
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return None


def configure_logging(verbose: int) -> None:
    """Route ``git_providers`` records to stderr.

    Calling it again replaces the handler installed by a previous call.
    """
    level = level_for(verbose, LogSettings().log)
    if level is None:
        return

    logger = logging.getLogger(LOGGER_NAME)
    for old in [h for h in logger.handlers if h.get_name() == HANDLER_NAME]:
        logger.removeHandler(old)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
