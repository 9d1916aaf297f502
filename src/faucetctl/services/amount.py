"""AmountService — resolve and render single amounts outside a config file.

Uses exactly the same rules as the ``amount_per_claim`` config field, so an
operator can check what a value will mean before writing it.
"""

from __future__ import annotations

import logging
from enum import StrEnum

from faucetctl.domain.amount_field import (
    FloatAmount,
    IntegerAmount,
    RawAmountInput,
    TextAmount,
    resolve_amount,
)
from faucetctl.domain.errors import AmountError, AmountErrorKind
from faucetctl.domain.fixed_point import format_sompi_as_kas, parse_u64
from faucetctl.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


class InputShape(StrEnum):
    """How a command-line value should be read before resolution."""

    TEXT = "text"
    FLOAT = "float"
    INT = "int"


def _amount_error(op: str, exc: AmountError, value: str) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(
            code=exc.kind.name,
            message=exc.message,
            detail={"input": value},
        ),
    )


def _tag(value: str, shape: InputShape) -> RawAmountInput:
    """Build the variant the caller declared, as a TOML decoder would."""
    if shape is InputShape.INT:
        sompi = parse_u64(value.strip())
        if sompi is None:
            raise AmountError(AmountErrorKind.INVALID_INTEGER_AMOUNT)
        return IntegerAmount(sompi)
    if shape is InputShape.FLOAT:
        try:
            return FloatAmount(float(value))
        except ValueError as exc:
            raise AmountError(
                AmountErrorKind.INVALID_FLOAT_AMOUNT, f"not a float: {value!r}"
            ) from exc
    return TextAmount(value)


class AmountService:
    """Stateless amount operations."""

    @staticmethod
    def convert(value: str, shape: InputShape = InputShape.TEXT) -> ServiceResult:
        """Resolve *value* (read as *shape*) to sompi."""
        op = "convert_amount"
        try:
            raw = _tag(value, shape)
            sompi = resolve_amount(raw)
        except AmountError as exc:
            logger.debug("Rejected amount %r as %s: %s", value, shape, exc.kind)
            return _amount_error(op, exc, value)

        warnings: list[str] = []
        if isinstance(raw, TextAmount) and "." not in raw.value:
            warnings.append(
                f"{raw.value.strip()!r} has no decimal point and is read as sompi, not KAS"
            )
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "input": value,
                "shape": shape.value,
                "sompi": sompi,
                "kas": format_sompi_as_kas(sompi),
            },
            warnings=warnings,
        )

    @staticmethod
    def format(value: str) -> ServiceResult:
        """Render a sompi count given as digits as KAS."""
        op = "format_amount"
        sompi = parse_u64(value.strip())
        if sompi is None:
            return _amount_error(op, AmountError(AmountErrorKind.INVALID_INTEGER_AMOUNT), value)
        return ServiceResult(
            ok=True,
            op=op,
            data={"sompi": sompi, "kas": format_sompi_as_kas(sompi)},
        )
