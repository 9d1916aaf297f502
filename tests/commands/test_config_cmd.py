"""Tests for the config command group."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from faucetctl.cli import cli
from faucetctl.config.discovery import CONFIG_FILENAME
from tests.conftest import write_config


class TestConfigInit:
    def test_init_default_path(self, cli_runner: CliRunner, config_root: Path) -> None:
        result = cli_runner.invoke(cli, ["config", "init"])
        assert result.exit_code == 0
        assert (config_root / CONFIG_FILENAME).is_file()

    def test_init_refuses_existing(self, cli_runner: CliRunner, config_root: Path) -> None:
        write_config(config_root, "port = 1\n")
        result = cli_runner.invoke(cli, ["config", "init"])
        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_init_force_over_broken_config(
        self, cli_runner: CliRunner, config_root: Path
    ) -> None:
        write_config(config_root, 'amount_per_claim = "oops"\n')
        result = cli_runner.invoke(cli, ["config", "init", "--force"])
        assert result.exit_code == 0
        assert cli_runner.invoke(cli, ["config", "validate"]).exit_code == 0

    def test_init_uses_global_config_path(self, cli_runner: CliRunner, config_root: Path) -> None:
        target = config_root / "alt.toml"
        result = cli_runner.invoke(cli, ["-c", str(target), "config", "init"])
        assert result.exit_code == 0
        assert target.is_file()

    def test_init_uses_env_config_path(
        self, cli_runner: CliRunner, config_root: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        target = config_root / "etc" / "faucet.toml"
        monkeypatch.setenv("FAUCETCTL_CONFIG", str(target))
        result = cli_runner.invoke(cli, ["config", "init"])
        assert result.exit_code == 0
        assert target.is_file()
        assert not (config_root / CONFIG_FILENAME).exists()

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["config", "--examples"])
        assert result.exit_code == 0
        assert "faucetctl config init" in result.output


class TestConfigShow:
    def test_show_missing_creates_default(self, cli_runner: CliRunner, config_root: Path) -> None:
        result = cli_runner.invoke(cli, ["config", "show"])
        assert result.exit_code == 1
        assert "Created default config" in result.output
        assert (config_root / CONFIG_FILENAME).is_file()

    def test_show_json(self, cli_runner: CliRunner, config_root: Path) -> None:
        write_config(config_root, "amount_per_claim = 0.25\n")
        result = cli_runner.invoke(cli, ["--json", "config", "show"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["data"]["amount_per_claim"] == 25_000_000
        assert data["data"]["amount_per_claim_kas"] == "0.25"

    def test_show_human(self, cli_runner: CliRunner, config_root: Path) -> None:
        write_config(config_root, 'faucet_private_key = "k"\namount_per_claim = "3"\n')
        result = cli_runner.invoke(cli, ["config", "show"])
        assert result.exit_code == 0
        assert "amount_per_claim: 3 sompi (0.00000003 KAS)" in result.output

    def test_show_env_override(
        self, cli_runner: CliRunner, config_root: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        write_config(config_root, "")
        monkeypatch.setenv("FAUCETCTL_AMOUNT_PER_CLAIM", "2.5")
        result = cli_runner.invoke(cli, ["--json", "config", "show"])
        assert json.loads(result.output)["data"]["amount_per_claim"] == 250_000_000


class TestConfigValidate:
    def test_valid(self, cli_runner: CliRunner, config_root: Path) -> None:
        write_config(config_root, "amount_per_claim = 100000000\n")
        result = cli_runner.invoke(cli, ["config", "validate"])
        assert result.exit_code == 0
        assert "OK" in result.output

    def test_invalid(self, cli_runner: CliRunner, config_root: Path) -> None:
        write_config(config_root, "amount_per_claim = -1.0\n")
        result = cli_runner.invoke(cli, ["config", "validate"])
        assert result.exit_code == 1
        assert "finite number >= 0" in result.output

    def test_explicit_path(self, cli_runner: CliRunner, config_root: Path) -> None:
        other = config_root / "other.toml"
        other.write_text('amount_per_claim = "1.5"\n')
        result = cli_runner.invoke(cli, ["--json", "-c", str(other), "config", "validate"])
        assert result.exit_code == 0
        assert json.loads(result.output)["data"]["amount_per_claim"] == 150_000_000
