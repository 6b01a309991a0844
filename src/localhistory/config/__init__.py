"""Configuration management for localhistory.

Configuration is loaded with precedence handling:
1. CLI flags (highest priority)
2. Environment variables (LOCALHISTORY_*)
3. Config file (~/.localhistory/config.toml)
4. Default values (lowest priority)
"""

from localhistory.config.builder import (
    ConfigBuilder,
    ConfigSource,
    source_from_env,
    source_from_file,
)
from localhistory.config.env import EnvReader
from localhistory.config.loader import (
    ConfigError,
    clear_config_cache,
    get_config,
    get_default_config_path,
    load_config_file,
)
from localhistory.config.models import (
    LocalHistoryConfig,
    LoggingConfig,
    PathsConfig,
    StringsConfig,
)

__all__ = [
    # Models
    "LocalHistoryConfig",
    "LoggingConfig",
    "PathsConfig",
    "StringsConfig",
    # Builder
    "ConfigBuilder",
    "ConfigSource",
    "source_from_env",
    "source_from_file",
    # Environment
    "EnvReader",
    # Loader
    "ConfigError",
    "clear_config_cache",
    "get_config",
    "get_default_config_path",
    "load_config_file",
]
