"""Command group: resolve and render KAS/sompi amounts."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from faucetctl.commands._base import examples_option
from faucetctl.services.amount import InputShape

if TYPE_CHECKING:
    from faucetctl.commands._context import AppContext

_AMOUNT_EXAMPLES = """\
  faucetctl amount convert 1.5              # KAS decimal -> 150000000
  faucetctl amount convert 12345            # bare digits are already sompi
  faucetctl amount convert --as float 0.001 # read as a TOML float
  faucetctl -q amount convert 2.25
  faucetctl amount format 150000000"""


@click.group()
@examples_option(_AMOUNT_EXAMPLES)
def amount() -> None:
    """Convert amounts the way amount_per_claim is read."""


@amount.command("convert")
@click.argument("value")
@click.option(
    "--as",
    "shape",
    type=click.Choice([s.value for s in InputShape], case_sensitive=False),
    default=InputShape.TEXT.value,
    show_default=True,
    help="Read VALUE as a TOML string, float, or integer.",
)
@click.pass_obj
def convert(app: AppContext, value: str, shape: str) -> None:
    """Resolve VALUE to sompi."""
    from faucetctl.services.amount import AmountService

    app.emit(AmountService.convert(value, InputShape(shape.lower())))


@amount.command("format")
@click.argument("sompi")
@click.pass_obj
def format_cmd(app: AppContext, sompi: str) -> None:
    """Render a sompi count as KAS."""
    from faucetctl.services.amount import AmountService

    app.emit(AmountService.format(sompi))
