"""Config file discovery, bootstrap, and loading.

Walk-up finder locates faucet-config.toml, similar to how git finds .git/.
Supports FAUCETCTL_CONFIG env var and --config CLI flag overrides.

A missing config is not silently defaulted: :func:`load_config` writes the
default file and raises :class:`ConfigBootstrapped` so the operator edits it
(at least ``faucet_private_key``) before the faucet starts.
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import ValidationError

from faucetctl.config.models import FaucetConfig
from faucetctl.infrastructure.templates import build_template_environment

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "faucet-config.toml"
CONFIG_ENV_VAR = "FAUCETCTL_CONFIG"
_TEMPLATE_NAME = "faucet-config.toml.j2"


class ConfigError(click.ClickException):
    """Config file could not be read or failed validation."""


class ConfigBootstrapped(ConfigError):
    """No config existed; a default one was written and must be edited."""


def env_config_path() -> Path | None:
    """The path named by FAUCETCTL_CONFIG, whether or not it exists."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    return Path(env_path) if env_path else None


def bootstrap_target(cwd: Path | None = None) -> Path:
    """Where a default config is written when none is found.

    FAUCETCTL_CONFIG wins over ``CONFIG_FILENAME`` under *cwd* (default: cwd).
    """
    return env_config_path() or (cwd or Path.cwd()) / CONFIG_FILENAME


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for faucet-config.toml.

    Returns the path to the config file, or None if not found.
    Checks FAUCETCTL_CONFIG env var first; when it is set, no walk-up happens.
    """
    env_path = env_config_path()
    if env_path is not None:
        return env_path if env_path.is_file() else None

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML, raising :class:`ConfigError` on bad syntax."""
    raw = path.read_text(encoding="utf-8")
    try:
        return tomllib.loads(raw)
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise ConfigError(msg) from exc


def render_config(config: FaucetConfig | None = None) -> str:
    """Render *config* (default: all defaults) as faucet-config.toml text."""
    cfg = config or FaucetConfig()
    template = build_template_environment("config").get_template(_TEMPLATE_NAME)
    return template.render(**cfg.model_dump())


def write_default_config(path: Path, *, overwrite: bool = False) -> Path:
    """Write a default faucet-config.toml to *path*.

    Refuses to clobber an existing file unless *overwrite* is set.
    """
    if path.exists() and not overwrite:
        msg = f"Config already exists at {path}. Use --force to overwrite."
        raise ConfigError(msg)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_config(), encoding="utf-8")
    logger.info("Wrote default config to %s", path)
    return path


def validate_config(data: dict[str, Any], *, source: Path | None = None) -> FaucetConfig:
    """Validate a decoded TOML mapping, wrapping errors in :class:`ConfigError`."""
    try:
        return FaucetConfig.model_validate(data)
    except ValidationError as exc:
        where = f" in {source}" if source else ""
        msg = f"Invalid config{where}: {summarize_validation_error(exc)}"
        raise ConfigError(msg) from exc


def require_config(path: Path | None = None, cwd: Path | None = None) -> Path:
    """Return the config file to load, bootstrapping one if none exists.

    If *path* is None, uses find_config(*cwd*) to discover the file.  When no
    file exists, the default config is written (to *path*, or to
    :func:`bootstrap_target`) and :class:`ConfigBootstrapped` is raised.
    """
    if path is None:
        path = find_config(cwd)

    if path is None or not path.is_file():
        target = path or bootstrap_target(cwd)
        write_default_config(target)
        msg = f"Created default config at {target}. Please edit and restart."
        raise ConfigBootstrapped(msg)
    return path


def load_config(path: Path | None = None, cwd: Path | None = None) -> FaucetConfig:
    """Load and validate config from a TOML file (see :func:`require_config`)."""
    path = require_config(path, cwd)
    config = validate_config(read_toml(path), source=path)
    logger.debug("Loaded config from %s", path)
    return config


def summarize_validation_error(exc: ValidationError) -> str:
    """Join one ``field: message`` entry per failing field."""
    parts: list[str] = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "config"
        ctx_error = err.get("ctx", {}).get("error")
        message = str(ctx_error) if ctx_error is not None else err["msg"]
        parts.append(f"{loc}: {message}")
    return "; ".join(parts)
