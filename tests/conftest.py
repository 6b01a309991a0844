"""Shared test fixtures for localhistory."""

from pathlib import Path

import pytest

from localhistory.config.loader import clear_config_cache


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Keep tests away from the user's config file and environment.

    Points LOCALHISTORY_CONFIG_PATH at a file that does not exist yet and
    removes any LOCALHISTORY_* variables inherited from the shell.
    """
    for name in (
        "LOCALHISTORY_STRICT_SUB_PATH",
        "LOCALHISTORY_DEFAULT_COMPARISON",
        "LOCALHISTORY_LOG_LEVEL",
        "LOCALHISTORY_LOG_FILE",
        "LOCALHISTORY_LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)

    config_path = tmp_path / ".localhistory" / "config.toml"
    monkeypatch.setenv("LOCALHISTORY_CONFIG_PATH", str(config_path))
    clear_config_cache()
    yield config_path
    clear_config_cache()
