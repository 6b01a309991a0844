"""Fixtures for CLI tests."""

import pytest
from click.testing import CliRunner

from localhistory.config.models import LocalHistoryConfig


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner."""
    return CliRunner()


@pytest.fixture
def config() -> LocalHistoryConfig:
    """Default configuration passed to commands instead of loading one."""
    return LocalHistoryConfig()


@pytest.fixture(autouse=True)
def _skip_logging_setup(monkeypatch):
    """Keep CLI invocations from installing root logging handlers."""
    monkeypatch.setattr("localhistory.cli._logging_configured", True)
