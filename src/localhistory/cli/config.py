"""CLI command showing the effective configuration."""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any

import click

from localhistory.config import LocalHistoryConfig, get_default_config_path


def config_to_dict(config: LocalHistoryConfig) -> dict[str, Any]:
    """Convert a config into JSON-serializable primitives."""
    data = asdict(config)
    data["strings"]["default_comparison"] = config.strings.default_comparison.value
    if config.logging.file is not None:
        data["logging"]["file"] = str(config.logging.file)
    return data


@click.command("config")
@click.pass_context
def config_command(ctx: click.Context) -> None:
    """Print the effective configuration as JSON."""
    data = config_to_dict(ctx.obj["config"])
    data["config_file"] = str(get_default_config_path())
    click.echo(json.dumps(data, indent=2, sort_keys=True))
