"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``FAUCETCTL_*`` prefix
  3. TOML file    — ``faucet-config.toml`` discovered via walk-up
  4. Code defaults — baked into :class:`FaucetConfig`

Env vars always arrive as strings, so ``FAUCETCTL_AMOUNT_PER_CLAIM=1.5``
is read as KAS and ``FAUCETCTL_AMOUNT_PER_CLAIM=150000000`` as sompi, the
same way a quoted TOML value would be.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from faucetctl.config.discovery import find_config, read_toml
from faucetctl.config.models import (
    DEFAULT_AMOUNT_PER_CLAIM,
    DEFAULT_CLAIM_INTERVAL_SECONDS,
    DEFAULT_KASPAD_URL,
    DEFAULT_PORT,
    FaucetConfig,
)
from faucetctl.domain.amount_field import resolve_amount_value
from faucetctl.domain.fixed_point import U64_MAX


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``faucet-config.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            self._data = read_toml(toml_path)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class FaucetSettings(BaseSettings):
    """Unified settings for the faucetctl CLI.

    Merges CLI flags, environment variables, the TOML config file, and
    code-baked defaults into a single frozen object.

    Attributes:
        config_root: Directory holding ``faucet-config.toml`` (or CWD if no
            config was found).
        config_path: The config file actually read, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "FAUCETCTL_",
        "extra": "ignore",
    }

    # --- Resolved path (not in TOML — derived from config location) ---
    config_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- faucet-config.toml keys ---
    kaspad_url: str = DEFAULT_KASPAD_URL
    port: int = Field(default=DEFAULT_PORT, ge=0, le=65535)
    faucet_private_key: str = Field(default="", repr=False)
    amount_per_claim: int = Field(default=DEFAULT_AMOUNT_PER_CLAIM, ge=0, le=U64_MAX)
    claim_interval_seconds: int = Field(default=DEFAULT_CLAIM_INTERVAL_SECONDS, ge=0, le=U64_MAX)

    @field_validator("amount_per_claim", mode="before")
    @classmethod
    def _resolve_amount_per_claim(cls, value: Any) -> int:
        return resolve_amount_value(value)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        config_root: Path | None = None,
        **cli_flags: Any,
    ) -> FaucetSettings:
        """Construct settings from CLI invocation.

        Discovers ``faucet-config.toml`` via walk-up (or explicit
        *config_path*), resolves *config_root* from the config file's parent
        directory, and merges CLI flags as highest-priority overrides.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(config_root)

        resolved_root = config_root
        if resolved_root is None:
            resolved_root = toml_path.parent if toml_path else Path.cwd()

        _tls.toml_path = toml_path
        try:
            return cls(
                config_root=resolved_root,
                config_path=toml_path,
                **cli_flags,
            )
        finally:
            _tls.toml_path = None

    def faucet_config(self) -> FaucetConfig:
        """The faucet keys alone, as a :class:`FaucetConfig`."""
        return FaucetConfig(
            kaspad_url=self.kaspad_url,
            port=self.port,
            faucet_private_key=self.faucet_private_key,
            amount_per_claim=self.amount_per_claim,
            claim_interval_seconds=self.claim_interval_seconds,
        )
