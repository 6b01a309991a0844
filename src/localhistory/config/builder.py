"""Configuration builder with explicit layering.

This module provides ConfigBuilder for building LocalHistoryConfig by
composing multiple configuration sources with explicit precedence handling.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from localhistory.config.env import EnvReader
from localhistory.config.models import (
    LocalHistoryConfig,
    LoggingConfig,
    PathsConfig,
    StringsConfig,
)


@dataclass
class ConfigSource:
    """Configuration values from a single source.

    None values indicate "not specified in this source" and will not
    override values from lower-precedence sources.
    """

    # Paths config
    strict_sub_path: bool | None = None

    # Strings config
    default_comparison: str | None = None

    # Logging config
    logging_level: str | None = None
    logging_file: Path | None = None
    logging_format: str | None = None
    logging_include_stderr: bool | None = None
    logging_max_bytes: int | None = None
    logging_backup_count: int | None = None


class ConfigBuilder:
    """Builds LocalHistoryConfig by layering ConfigSources with precedence.

    Later sources override earlier ones (for non-None values).

    Example:
        builder = ConfigBuilder()
        builder.apply(source_from_file(file_config))
        builder.apply(source_from_env(reader))
        builder.apply(cli_source)
        config = builder.build()
    """

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}

    def apply(self, source: ConfigSource) -> None:
        """Apply configuration source, overriding existing values.

        Args:
            source: Configuration source to apply.
        """
        for field_obj in fields(source):
            value = getattr(source, field_obj.name)
            if value is not None:
                self._values[field_obj.name] = value

    def _get(self, key: str, default: Any) -> Any:
        return self._values.get(key, default)

    def build(self) -> LocalHistoryConfig:
        """Build the final LocalHistoryConfig with defaults for unset values.

        Returns:
            Complete LocalHistoryConfig with all values resolved.

        Raises:
            ValueError: If a layered value fails model validation.
        """
        paths_defaults = PathsConfig()
        paths = PathsConfig(
            strict_sub_path=self._get(
                "strict_sub_path", paths_defaults.strict_sub_path
            ),
        )

        strings_defaults = StringsConfig()
        strings = StringsConfig(
            default_comparison=self._get(
                "default_comparison", strings_defaults.default_comparison
            ),
        )

        logging_defaults = LoggingConfig()
        logging_config = LoggingConfig(
            level=self._get("logging_level", logging_defaults.level),
            file=self._get("logging_file", logging_defaults.file),
            format=self._get("logging_format", logging_defaults.format),
            include_stderr=self._get(
                "logging_include_stderr", logging_defaults.include_stderr
            ),
            max_bytes=self._get("logging_max_bytes", logging_defaults.max_bytes),
            backup_count=self._get(
                "logging_backup_count", logging_defaults.backup_count
            ),
        )

        return LocalHistoryConfig(
            paths=paths,
            strings=strings,
            logging=logging_config,
        )


def source_from_env(reader: EnvReader) -> ConfigSource:
    """Create ConfigSource from environment variables.

    Args:
        reader: EnvReader instance for reading environment variables.

    Returns:
        ConfigSource with values from environment variables.
    """
    return ConfigSource(
        strict_sub_path=reader.get_bool("LOCALHISTORY_STRICT_SUB_PATH"),
        default_comparison=reader.get_str("LOCALHISTORY_DEFAULT_COMPARISON") or None,
        logging_level=reader.get_str("LOCALHISTORY_LOG_LEVEL") or None,
        logging_file=reader.get_path("LOCALHISTORY_LOG_FILE", must_exist=False),
        logging_format=reader.get_str("LOCALHISTORY_LOG_FORMAT") or None,
        logging_include_stderr=None,
        logging_max_bytes=None,
        logging_backup_count=None,
    )


def _section(file_config: dict[str, Any], name: str) -> dict[str, Any]:
    section = file_config.get(name, {})
    if not isinstance(section, dict):
        raise ValueError(f"[{name}] must be a table (got {type(section).__name__})")
    return section


def source_from_file(file_config: dict[str, Any]) -> ConfigSource:
    """Create ConfigSource from a parsed config file.

    Args:
        file_config: Parsed TOML configuration as a dictionary.

    Returns:
        ConfigSource with values from the config file.

    Raises:
        ValueError: If a known section is not a table.
    """
    paths = _section(file_config, "paths")
    strings = _section(file_config, "strings")
    logging_section = _section(file_config, "logging")

    log_file = logging_section.get("file")

    return ConfigSource(
        strict_sub_path=paths.get("strict_sub_path"),
        default_comparison=strings.get("default_comparison"),
        logging_level=logging_section.get("level"),
        logging_file=Path(log_file).expanduser() if log_file else None,
        logging_format=logging_section.get("format"),
        logging_include_stderr=logging_section.get("include_stderr"),
        logging_max_bytes=logging_section.get("max_bytes"),
        logging_backup_count=logging_section.get("backup_count"),
    )
