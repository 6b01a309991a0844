"""Configuration data models.

Plain dataclasses with validation in __post_init__. Values are filled in
by ConfigBuilder from the layered configuration sources.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from localhistory.core.string_utils import StringComparison

VALID_LOG_LEVELS = ("debug", "info", "warning", "error")
VALID_LOG_FORMATS = ("text", "json")


@dataclass
class PathsConfig:
    """Sub-path comparison settings."""

    # Require a folder boundary after the base path prefix
    strict_sub_path: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.strict_sub_path, bool):
            raise ValueError(
                "strict_sub_path must be true or false "
                f"(got {self.strict_sub_path!r})"
            )


@dataclass
class StringsConfig:
    """String operation settings."""

    default_comparison: StringComparison = StringComparison.ORDINAL

    def __post_init__(self) -> None:
        try:
            self.default_comparison = StringComparison(self.default_comparison)
        except ValueError:
            valid = ", ".join(c.value for c in StringComparison)
            raise ValueError(
                f"default_comparison must be one of: {valid} "
                f"(got {self.default_comparison!r})"
            ) from None


@dataclass
class LoggingConfig:
    """Logging settings.

    Attributes:
        level: Minimum log level (debug, info, warning, error).
        file: Optional log file path; logs rotate when max_bytes is exceeded.
        format: "text" or "json".
        include_stderr: Also log to stderr when a file is configured.
        max_bytes: Rotate the log file at this size (0 disables rotation).
        backup_count: Number of rotated files to keep.
    """

    level: str = "info"
    file: Path | None = None
    format: str = "text"
    include_stderr: bool = True
    max_bytes: int = 10 * 1024 * 1024
    backup_count: int = 5

    def __post_init__(self) -> None:
        self.level = str(self.level).lower()
        self.format = str(self.format).lower()
        if self.level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"level must be one of: {', '.join(VALID_LOG_LEVELS)} "
                f"(got {self.level!r})"
            )
        if self.format not in VALID_LOG_FORMATS:
            raise ValueError(
                f"format must be one of: {', '.join(VALID_LOG_FORMATS)} "
                f"(got {self.format!r})"
            )
        if not isinstance(self.include_stderr, bool):
            raise ValueError("include_stderr must be true or false")
        for name in ("max_bytes", "backup_count"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer (got {value!r})")
        if self.max_bytes < 0:
            raise ValueError("max_bytes must be non-negative")
        if self.backup_count < 0:
            raise ValueError("backup_count must be non-negative")


@dataclass
class LocalHistoryConfig:
    """Top-level configuration."""

    paths: PathsConfig = field(default_factory=PathsConfig)
    strings: StringsConfig = field(default_factory=StringsConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
