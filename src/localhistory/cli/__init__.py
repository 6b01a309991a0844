"""CLI module for localhistory."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from localhistory.cli.exit_codes import ExitCode
from localhistory.config import ConfigError, ConfigSource, get_config
from localhistory.logging import configure_logging

_logging_configured: bool = False

logger = logging.getLogger(__name__)


def _configure_logging(ctx: click.Context) -> None:
    """Configure logging once per process from the effective config."""
    global _logging_configured
    if _logging_configured:
        return
    configure_logging(ctx.obj["config"].logging)
    _logging_configured = True


@click.group()
@click.version_option(package_name="localhistory")
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default=None,
    help="Override log level (default: info).",
)
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Override log file path.",
)
@click.option(
    "--log-json",
    is_flag=True,
    default=False,
    help="Use JSON log format.",
)
@click.pass_context
def main(
    ctx: click.Context,
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
) -> None:
    """Local history string tools - compare, extend and match path strings."""
    ctx.ensure_object(dict)

    # Preserve a config passed in by tests
    if "config" not in ctx.obj:
        cli_source = ConfigSource(
            logging_level=log_level,
            logging_file=log_file,
            logging_format="json" if log_json else None,
        )
        try:
            ctx.obj["config"] = get_config(cli_source)
        except ConfigError as e:
            click.echo(f"Error: {e}", err=True)
            ctx.exit(ExitCode.CONFIG_ERROR)

    _configure_logging(ctx)
    logger.debug(
        "Running %s",
        ctx.invoked_subcommand,
        extra={"command": ctx.invoked_subcommand},
    )


# Defer import to avoid circular dependency
def _register_commands():
    from localhistory.cli.config import config_command
    from localhistory.cli.strings import (
        is_subpath_command,
        replace_command,
        right_command,
        with_ending_command,
    )

    main.add_command(right_command)
    main.add_command(with_ending_command)
    main.add_command(replace_command)
    main.add_command(is_subpath_command)
    main.add_command(config_command)


_register_commands()
