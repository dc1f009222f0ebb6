"""Shared pytest fixtures for mylang tests."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from mylang.core.config import LOG_LEVEL_ENV_VAR
from mylang.core.ir import Environment


@pytest.fixture
def env() -> Environment:
    """Return a fresh, empty evaluation environment."""
    return Environment()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a CLI test runner."""
    return CliRunner()


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run in an empty directory with no mylang configuration in effect."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
    return tmp_path
