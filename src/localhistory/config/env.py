"""Environment variable reading with typed accessors.

EnvReader wraps a mapping (os.environ by default) so tests can inject a
plain dict instead of patching the process environment.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

logger = logging.getLogger(__name__)

_TRUE_VALUES = frozenset({"true", "1", "yes", "on"})


class EnvReader:
    """Typed reader for environment variables."""

    def __init__(self, env: Mapping[str, str] | None = None) -> None:
        """Initialize the reader.

        Args:
            env: Mapping to read from. Defaults to os.environ.
        """
        self._env = env if env is not None else os.environ

    def get_str(self, key: str, default: str | None = None) -> str | None:
        """Get a string value.

        Args:
            key: Environment variable name.
            default: Value returned when the variable is not set.

        Returns:
            The variable value (possibly empty) or default.
        """
        value = self._env.get(key)
        if value is None:
            return default
        return value

    def get_int(
        self, key: str, default: int | None = None, *, strict: bool = False
    ) -> int | None:
        """Get an integer value.

        Args:
            key: Environment variable name.
            default: Value returned when unset or invalid.
            strict: Raise ValueError on invalid values instead of warning.

        Returns:
            Parsed integer or default.

        Raises:
            ValueError: If strict and the value is not an integer.
        """
        value = self._env.get(key)
        if not value:
            return default
        try:
            return int(value)
        except ValueError:
            if strict:
                raise ValueError(
                    f"Invalid integer value for {key}: {value}"
                ) from None
            logger.warning("Invalid integer value for %s: %s", key, value)
            return default

    def get_bool(self, key: str, default: bool | None = None) -> bool | None:
        """Get a boolean value.

        "true", "1", "yes" and "on" (any case) are true; any other
        non-empty value is false. An empty value is treated as unset.

        Args:
            key: Environment variable name.
            default: Value returned when unset or empty.

        Returns:
            Parsed boolean or default.
        """
        value = self._env.get(key)
        if not value:
            return default
        return value.strip().lower() in _TRUE_VALUES

    def get_path(
        self,
        key: str,
        default: Path | None = None,
        *,
        must_exist: bool = True,
    ) -> Path | None:
        """Get a filesystem path value with tilde expansion.

        Args:
            key: Environment variable name.
            default: Value returned when unset or missing.
            must_exist: Return default (with a warning) if the path
                does not exist.

        Returns:
            Expanded Path or default.
        """
        value = self._env.get(key)
        if not value:
            return default
        path = Path(value).expanduser()
        if must_exist and not path.exists():
            logger.warning(
                "Environment variable %s points to non-existent path: %s",
                key,
                path,
            )
            return default
        return path
