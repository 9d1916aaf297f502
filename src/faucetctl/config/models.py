"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, faucet-config.toml only contains
overrides.  A fresh faucet needs only ``faucet_private_key``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from faucetctl.domain.amount_field import resolve_amount_value
from faucetctl.domain.fixed_point import SOMPI_PER_KAS, U64_MAX

DEFAULT_KASPAD_URL = "127.0.0.1:16210"
DEFAULT_PORT = 3010
DEFAULT_AMOUNT_PER_CLAIM = SOMPI_PER_KAS
DEFAULT_CLAIM_INTERVAL_SECONDS = 3600


class FaucetConfig(BaseModel):
    """Root configuration, one field per top-level key of faucet-config.toml.

    ``amount_per_claim`` accepts an integer (sompi), a float (KAS), or a
    string (KAS when it contains ``"."``, sompi otherwise) and is always
    stored as an integer sompi count.
    """

    model_config = {"frozen": True}

    kaspad_url: str = DEFAULT_KASPAD_URL
    port: int = Field(default=DEFAULT_PORT, ge=0, le=65535)
    faucet_private_key: str = Field(default="", repr=False)
    amount_per_claim: int = Field(default=DEFAULT_AMOUNT_PER_CLAIM, ge=0, le=U64_MAX)
    claim_interval_seconds: int = Field(default=DEFAULT_CLAIM_INTERVAL_SECONDS, ge=0, le=U64_MAX)

    @field_validator("amount_per_claim", mode="before")
    @classmethod
    def _resolve_amount_per_claim(cls, value: Any) -> int:
        return resolve_amount_value(value)
