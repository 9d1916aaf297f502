"""Shared pytest fixtures and test helpers for faucetctl tests."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from click.testing import CliRunner

from faucetctl.config.discovery import CONFIG_FILENAME


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop any FAUCETCTL_* variables from the developer's shell."""
    for key in list(os.environ):
        if key.startswith("FAUCETCTL_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def config_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Empty working directory; the CLI and walk-up discovery start here."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


def write_config(root: Path, body: str) -> Path:
    """Write ``faucet-config.toml`` under *root* and return its path."""
    path = root / CONFIG_FILENAME
    path.write_text(body, encoding="utf-8")
    return path
