"""Tests for FaucetSettings — unified settings with TOML source."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from faucetctl.config.discovery import ConfigError
from faucetctl.config.models import FaucetConfig
from faucetctl.config.settings import FaucetSettings
from tests.conftest import write_config


class TestFaucetSettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        """With no TOML and no env vars, all fields use code defaults."""
        settings = FaucetSettings.from_cli(config_root=tmp_path)
        assert settings.config_root == tmp_path
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.amount_per_claim == 100_000_000
        assert settings.faucet_config() == FaucetConfig()

    def test_frozen(self, tmp_path: Path) -> None:
        settings = FaucetSettings.from_cli(config_root=tmp_path)
        with pytest.raises(ValidationError):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        write_config(tmp_path, 'kaspad_url = "node:16110"\namount_per_claim = 2.5\n')
        settings = FaucetSettings.from_cli(config_root=tmp_path)
        assert settings.kaspad_url == "node:16110"
        assert settings.amount_per_claim == 250_000_000
        assert settings.port == 3010  # default preserved

    def test_config_root_from_discovered_file(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        path = write_config(tmp_path, "port = 1\n")
        child = tmp_path / "nested"
        child.mkdir()
        monkeypatch.chdir(child)
        settings = FaucetSettings.from_cli()
        assert settings.config_path == path
        assert settings.config_root == tmp_path

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "faucet.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text('amount_per_claim = "42"\n')
        settings = FaucetSettings.from_cli(config_path=str(custom), config_root=tmp_path)
        assert settings.amount_per_claim == 42
        assert settings.config_path == custom

    def test_invalid_toml_raises_config_error(self, tmp_path: Path) -> None:
        write_config(tmp_path, "port = \n")
        with pytest.raises(ConfigError):
            FaucetSettings.from_cli(config_root=tmp_path)

    def test_invalid_amount_raises(self, tmp_path: Path) -> None:
        write_config(tmp_path, 'amount_per_claim = "1.2.3"\n')
        with pytest.raises(ValidationError, match="too many decimal points"):
            FaucetSettings.from_cli(config_root=tmp_path)


class TestEnvOverrides:
    def test_env_beats_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        write_config(tmp_path, "port = 4000\n")
        monkeypatch.setenv("FAUCETCTL_PORT", "5000")
        settings = FaucetSettings.from_cli(config_root=tmp_path)
        assert settings.port == 5000

    def test_env_amount_with_point_is_kas(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("FAUCETCTL_AMOUNT_PER_CLAIM", "1.5")
        settings = FaucetSettings.from_cli(config_root=tmp_path)
        assert settings.amount_per_claim == 150_000_000

    def test_env_amount_digits_are_sompi(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("FAUCETCTL_AMOUNT_PER_CLAIM", "1500")
        settings = FaucetSettings.from_cli(config_root=tmp_path)
        assert settings.amount_per_claim == 1500

    def test_env_private_key(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FAUCETCTL_FAUCET_PRIVATE_KEY", "abc123")
        settings = FaucetSettings.from_cli(config_root=tmp_path)
        assert settings.faucet_config().faucet_private_key == "abc123"
        assert "abc123" not in repr(settings)


class TestCliFlags:
    def test_cli_flags_override_toml(self, tmp_path: Path) -> None:
        write_config(tmp_path, "quiet = true\n")
        settings = FaucetSettings.from_cli(config_root=tmp_path, quiet=False)
        assert settings.quiet is False

    def test_init_kwargs_beat_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FAUCETCTL_AMOUNT_PER_CLAIM", "1.0")
        settings = FaucetSettings.from_cli(config_root=tmp_path, amount_per_claim=7)
        assert settings.amount_per_claim == 7
