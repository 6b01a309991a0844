"""Configuration loader with precedence handling.

Configuration is loaded with the following precedence (highest to lowest):
1. CLI arguments (passed as a ConfigSource)
2. Environment variables (LOCALHISTORY_*)
3. Config file (~/.localhistory/config.toml)
4. Default values

Environment variables:
- LOCALHISTORY_CONFIG_PATH: Path to config file (overrides default location)
- LOCALHISTORY_STRICT_SUB_PATH: Require folder boundaries in sub-path checks
- LOCALHISTORY_DEFAULT_COMPARISON: ordinal or ordinal_ignore_case
- LOCALHISTORY_LOG_LEVEL: debug, info, warning or error
- LOCALHISTORY_LOG_FILE: Path to log file
- LOCALHISTORY_LOG_FORMAT: text or json
"""

from __future__ import annotations

import logging
import threading
import tomllib
from pathlib import Path
from typing import Any

from localhistory.config.builder import (
    ConfigBuilder,
    ConfigSource,
    source_from_env,
    source_from_file,
)
from localhistory.config.env import EnvReader
from localhistory.config.models import LocalHistoryConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = Path.home() / ".localhistory"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.toml"

# Cache for loaded config files (path -> (parsed dict, mtime))
_config_cache: dict[Path, tuple[dict[str, Any], float]] = {}
_config_cache_lock = threading.Lock()


class ConfigError(Exception):
    """Configuration file or value is invalid."""


def get_default_config_path(reader: EnvReader | None = None) -> Path:
    """Get the config file path.

    Can be overridden by the LOCALHISTORY_CONFIG_PATH environment variable.
    """
    reader = reader or EnvReader()
    return (
        reader.get_path("LOCALHISTORY_CONFIG_PATH", must_exist=False)
        or DEFAULT_CONFIG_FILE
    )


def load_config_file(path: Path | None = None) -> dict[str, Any]:
    """Load and parse a TOML config file.

    Parsed files are cached and reloaded when their mtime changes.

    Args:
        path: Config file path. Defaults to get_default_config_path().

    Returns:
        Parsed configuration, or an empty dict if the file does not exist.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    if path is None:
        path = get_default_config_path()

    try:
        mtime = path.stat().st_mtime
    except FileNotFoundError:
        return {}
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e

    with _config_cache_lock:
        cached = _config_cache.get(path)
        if cached is not None and cached[1] == mtime:
            return cached[0]

    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in config file {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e

    logger.debug("Loaded config file %s", path)
    with _config_cache_lock:
        _config_cache[path] = (data, mtime)
    return data


def clear_config_cache() -> None:
    """Clear the config file cache."""
    with _config_cache_lock:
        _config_cache.clear()


def get_config(
    cli_source: ConfigSource | None = None,
    reader: EnvReader | None = None,
    config_path: Path | None = None,
) -> LocalHistoryConfig:
    """Build the effective configuration.

    Args:
        cli_source: Values from CLI options (highest precedence).
        reader: EnvReader for environment variables. Defaults to os.environ.
        config_path: Config file path. Defaults to get_default_config_path().

    Returns:
        The resolved LocalHistoryConfig.

    Raises:
        ConfigError: If the config file or any value is invalid.
    """
    reader = reader or EnvReader()
    if config_path is None:
        config_path = get_default_config_path(reader)

    file_config = load_config_file(config_path)

    try:
        builder = ConfigBuilder()
        builder.apply(source_from_file(file_config))
        builder.apply(source_from_env(reader))
        if cli_source is not None:
            builder.apply(cli_source)
        return builder.build()
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
