"""Command group: config file management (config_cmd avoids clashing with faucetctl.config)."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from faucetctl.commands._base import examples_option

if TYPE_CHECKING:
    from faucetctl.commands._context import AppContext

_CONFIG_EXAMPLES = """\
  faucetctl config init
  faucetctl config init /etc/faucet/faucet-config.toml --force
  faucetctl config show
  faucetctl --json config show
  FAUCETCTL_AMOUNT_PER_CLAIM=2.5 faucetctl config show
  faucetctl -c ./faucet-config.toml config validate"""


@click.group()
@examples_option(_CONFIG_EXAMPLES)
def config() -> None:
    """Create, inspect, and validate faucet-config.toml."""


@config.command("init")
@click.argument("path", required=False, default=None)
@click.option("--force", is_flag=True, help="Overwrite an existing config file.")
@click.pass_obj
def init_cmd(app: AppContext, path: str | None, force: bool) -> None:
    """Write a default faucet-config.toml."""
    from faucetctl.config.discovery import bootstrap_target
    from faucetctl.services.config import ConfigService

    explicit = path or app.config_path
    target = Path(explicit) if explicit else bootstrap_target()
    app.emit(ConfigService.init(target, force=force))


@config.command("show")
@click.pass_obj
def show(app: AppContext) -> None:
    """Show the effective config, including env var overrides."""
    from faucetctl.services.config import ConfigService

    app.emit(ConfigService.show(app.config_path))


@config.command("validate")
@click.pass_obj
def validate(app: AppContext) -> None:
    """Load the config and exit non-zero if it is invalid."""
    from faucetctl.services.config import ConfigService

    app.emit(ConfigService.validate(app.config_path))
