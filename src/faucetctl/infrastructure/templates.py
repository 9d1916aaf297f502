"""Shared Jinja2 template loading for packaged file templates."""

from __future__ import annotations

from jinja2 import Environment, PackageLoader, StrictUndefined


def build_template_environment(group: str) -> Environment:
    """Build a Jinja2 environment over ``faucetctl/templates/<group>``.

    Undefined variables raise instead of rendering as empty strings.
    """
    return Environment(
        loader=PackageLoader("faucetctl", f"templates/{group}"),
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )
