"""Subcommand modules for faucetctl.

Provides register_commands() which uses deferred imports to keep
``faucetctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups on the root CLI group."""
    from faucetctl.commands.amount import amount
    from faucetctl.commands.config_cmd import config

    cli.add_command(config)
    cli.add_command(amount)
