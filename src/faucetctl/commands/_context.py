"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Config loading is left to the commands that need it,
so ``config init`` still works when the existing file is broken.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from faucetctl.config.logging import configure_logging
from faucetctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from faucetctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(
        self,
        output: OutputSettings,
        *,
        config_path: str | None = None,
        log_json: bool = False,
    ) -> None:
        self.output = output
        self.config_path = config_path
        configure_logging(verbose=output.verbose, log_json=log_json)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        output = format_result(result, settings=self.output)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not self.output.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
