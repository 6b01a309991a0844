"""CLI commands wrapping the core string and path operations."""

from __future__ import annotations

import logging

import click

from localhistory.cli.exit_codes import ExitCode
from localhistory.core import (
    ArgumentError,
    StringComparison,
    is_sub_path_of,
    replace_with_comparison,
    right,
    with_ending,
)

logger = logging.getLogger(__name__)

_COMPARISON_CHOICES = [c.value for c in StringComparison]


def _fail(ctx: click.Context, error: ArgumentError) -> None:
    logger.debug(
        "Rejected arguments for %s: %s",
        ctx.info_name,
        error,
        extra={"command": ctx.info_name, "error": type(error).__name__},
    )
    click.echo(f"Error: {error}", err=True)
    ctx.exit(ExitCode.INVALID_ARGUMENT)


@click.command("right")
@click.argument("value")
@click.argument("length", type=int)
@click.pass_context
def right_command(ctx: click.Context, value: str, length: int) -> None:
    """Print the last LENGTH characters of VALUE."""
    try:
        click.echo(right(value, length))
    except ArgumentError as e:
        _fail(ctx, e)


@click.command("with-ending")
@click.argument("value")
@click.argument("ending")
@click.pass_context
def with_ending_command(ctx: click.Context, value: str, ending: str) -> None:
    """Print VALUE extended by the minimal tail of ENDING.

    \b
    Example:
        localhistory with-ending hel llo    # prints "hello"
    """
    try:
        click.echo(with_ending(value, ending))
    except ArgumentError as e:
        _fail(ctx, e)


@click.command("replace")
@click.argument("text")
@click.argument("old")
@click.argument("new")
@click.option(
    "--comparison",
    type=click.Choice(_COMPARISON_CHOICES),
    default=None,
    help="Comparison mode (default: from config, usually ordinal).",
)
@click.option(
    "--ignore-case",
    "-i",
    is_flag=True,
    default=False,
    help="Shorthand for --comparison ordinal_ignore_case.",
)
@click.pass_context
def replace_command(
    ctx: click.Context,
    text: str,
    old: str,
    new: str,
    comparison: str | None,
    ignore_case: bool,
) -> None:
    """Replace every occurrence of OLD in TEXT with NEW."""
    if ignore_case and comparison is not None:
        raise click.UsageError("--ignore-case and --comparison are mutually exclusive")
    if ignore_case:
        mode = StringComparison.ORDINAL_IGNORE_CASE
    elif comparison is not None:
        mode = StringComparison(comparison)
    else:
        mode = ctx.obj["config"].strings.default_comparison

    logger.debug(
        "Replacing %r with %r",
        old,
        new,
        extra={"command": "replace", "comparison": mode.value},
    )
    try:
        click.echo(replace_with_comparison(text, old, new, mode))
    except ArgumentError as e:
        _fail(ctx, e)


@click.command("is-subpath")
@click.argument("path")
@click.argument("base")
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Require a folder boundary after BASE.",
)
@click.option(
    "--prefix-only",
    is_flag=True,
    default=False,
    help="Accept any path starting with BASE.",
)
@click.pass_context
def is_subpath_command(
    ctx: click.Context,
    path: str,
    base: str,
    strict: bool,
    prefix_only: bool,
) -> None:
    """Check whether PATH lies within BASE.

    Prints "true" or "false". Exits non-zero when PATH is not a sub-path.
    Without --strict or --prefix-only the configured mode is used.
    """
    if strict and prefix_only:
        raise click.UsageError("--strict and --prefix-only are mutually exclusive")
    if not (strict or prefix_only):
        strict = ctx.obj["config"].paths.strict_sub_path

    logger.debug(
        "Checking %s against %s",
        path,
        base,
        extra={"command": "is-subpath", "strict_boundary": strict},
    )
    try:
        result = is_sub_path_of(path, base, strict_boundary=strict)
    except ArgumentError as e:
        _fail(ctx, e)
        return

    click.echo("true" if result else "false")
    if not result:
        ctx.exit(ExitCode.NOT_SUB_PATH)
