"""ConfigService — initialise, inspect, and validate faucet-config.toml."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from faucetctl.config.discovery import (
    ConfigBootstrapped,
    ConfigError,
    require_config,
    summarize_validation_error,
    write_default_config,
)
from faucetctl.config.settings import FaucetSettings
from faucetctl.domain.fixed_point import format_sompi_as_kas
from faucetctl.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


def _error(op: str, code: str, message: str, **detail: Any) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=detail),
    )


def _load_settings(config_path: str | None, cwd: Path | None) -> FaucetSettings:
    """Resolve the config file (bootstrapping if missing) and build settings.

    Raises:
        ConfigError: bad TOML, failed validation, or a freshly written default.
    """
    path = require_config(Path(config_path) if config_path else None, cwd)
    try:
        return FaucetSettings.from_cli(config_path=str(path))
    except ValidationError as exc:
        msg = f"Invalid config in {path}: {summarize_validation_error(exc)}"
        raise ConfigError(msg) from exc


def _config_error(op: str, exc: ConfigError) -> ServiceResult:
    code = "CONFIG_CREATED" if isinstance(exc, ConfigBootstrapped) else "INVALID_CONFIG"
    return _error(op, code, exc.message)


class ConfigService:
    """Stateless config operations."""

    @staticmethod
    def init(path: Path, *, force: bool = False) -> ServiceResult:
        """Write the default config to *path*."""
        op = "init_config"
        try:
            written = write_default_config(path, overwrite=force)
        except ConfigError as exc:
            return _error(op, "CONFIG_EXISTS", exc.message, path=str(path))
        return ServiceResult(
            ok=True,
            op=op,
            data={"path": str(written)},
            warnings=["faucet_private_key is empty; set it before starting the faucet"],
        )

    @staticmethod
    def show(config_path: str | None = None, *, cwd: Path | None = None) -> ServiceResult:
        """Effective config after env var overrides, with the amount in both units."""
        op = "show_config"
        try:
            settings = _load_settings(config_path, cwd)
        except ConfigError as exc:
            return _config_error(op, exc)

        config = settings.faucet_config()
        warnings: list[str] = []
        if not config.faucet_private_key:
            warnings.append("faucet_private_key is empty")
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "path": str(settings.config_path),
                "kaspad_url": config.kaspad_url,
                "port": config.port,
                "faucet_private_key": "<set>" if config.faucet_private_key else "<unset>",
                "amount_per_claim": config.amount_per_claim,
                "amount_per_claim_kas": format_sompi_as_kas(config.amount_per_claim),
                "claim_interval_seconds": config.claim_interval_seconds,
            },
            warnings=warnings,
        )

    @staticmethod
    def validate(config_path: str | None = None, *, cwd: Path | None = None) -> ServiceResult:
        """Load the config and report whether it is usable."""
        op = "validate_config"
        try:
            settings = _load_settings(config_path, cwd)
        except ConfigError as exc:
            logger.debug("Config validation failed: %s", exc.message)
            return _config_error(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "path": str(settings.config_path),
                "amount_per_claim": settings.amount_per_claim,
            },
        )
