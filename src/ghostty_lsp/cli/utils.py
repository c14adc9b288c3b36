import logging
import os
import sys
import traceback
from typing import Optional

import click

ENV_DEBUG = "GHOSTTY_LSP_DEBUG"
ENV_SCHEMA = "GHOSTTY_LSP_SCHEMA"

LOG_FORMAT = "%(levelname)s:%(name)s:%(message)s"

TRUTHY_VALUES = ("1", "true", "yes")


def get_env_flag(env_var: str, default: bool = False) -> bool:
    """Read a boolean flag; unset or blank variables give `default`."""
    value = os.environ.get(env_var, "").strip().lower()
    if not value:
        return default
    return value in TRUTHY_VALUES


def resolve_debug(debug: bool) -> bool:
    """The --debug flag, falling back to GHOSTTY_LSP_DEBUG."""
    return debug or get_env_flag(ENV_DEBUG)


def resolve_schema_path(schema_path: Optional[str]) -> Optional[str]:
    """The --schema path, falling back to GHOSTTY_LSP_SCHEMA."""
    return schema_path or os.environ.get(ENV_SCHEMA) or None


def configure_logging(debug: bool = False) -> None:
    """Send all log records to stderr.

    stdout carries the protocol stream when the server runs over stdio, so
    nothing may log there. Any handlers installed earlier are replaced.

    Args:
        debug: DEBUG level when set, WARNING otherwise
    """
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr, force=True)

    for name in ("ghostty_lsp", "pygls"):
        logging.getLogger(name).setLevel(level)


def output_error(error: Exception, debug: bool = False) -> None:
    """Print an error to stderr and abort the command with a non-zero exit code.

    With `debug` the exception type and traceback are printed as well.
    """
    click.echo(f"Error: {error}", err=True)
    if debug:
        click.echo(f"\nTraceback ({type(error).__name__}):", err=True)
        click.echo("".join(traceback.format_exception(type(error), error, error.__traceback__)), err=True)

    raise click.Abort()
