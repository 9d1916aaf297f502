"""Resolve the ``amount_per_claim`` field from any of its three encodings.

The field is written by humans in whatever shape is convenient:

- ``IntegerAmount``: an integer, already in sompi.
- ``FloatAmount``: a float, in KAS.
- ``TextAmount``: a string.  With a ``"."`` it is a KAS decimal; without
  one it is a sompi integer.

The variant is picked from the *declared* type of the decoded value
(:func:`raw_amount_from_value`), never by trying each shape until one
parses.

INVARIANT (kept on purpose): text ``"100"`` resolves to 100 sompi while
text ``"100.0"`` resolves to 100 KAS (10_000_000_000 sompi).  Existing
configs rely on bare-digit strings being sompi, so the two readings must
not be unified.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from faucetctl.domain.errors import AmountError, AmountErrorKind
from faucetctl.domain.fixed_point import FRACTION_DIGITS, U64_MAX, parse_kas_to_sompi, parse_u64


@dataclass(frozen=True)
class IntegerAmount:
    """Sompi count, passed through unchanged."""

    value: int

    def __post_init__(self) -> None:
        if (
            isinstance(self.value, bool)
            or not isinstance(self.value, int)
            or not 0 <= self.value <= U64_MAX
        ):
            raise AmountError(AmountErrorKind.INVALID_INTEGER_AMOUNT)


@dataclass(frozen=True)
class FloatAmount:
    """KAS amount as a binary float."""

    value: float


@dataclass(frozen=True)
class TextAmount:
    """KAS decimal string, or bare sompi digits."""

    value: str


RawAmountInput = IntegerAmount | FloatAmount | TextAmount


def raw_amount_from_value(value: Any) -> RawAmountInput:
    """Tag a decoded config value with its amount shape.

    ``bool`` is checked before ``int`` because it is an ``int`` subclass and
    ``amount_per_claim = true`` is an authoring error, not 1 sompi.  A
    negative integer is reported like a negative float: both are numbers
    that must be >= 0.
    """
    if isinstance(value, bool):
        raise AmountError(AmountErrorKind.UNSUPPORTED_AMOUNT_TYPE)
    if isinstance(value, int):
        if value < 0:
            raise AmountError(AmountErrorKind.INVALID_FLOAT_AMOUNT)
        return IntegerAmount(value)
    if isinstance(value, float):
        return FloatAmount(value)
    if isinstance(value, str):
        return TextAmount(value)
    raise AmountError(AmountErrorKind.UNSUPPORTED_AMOUNT_TYPE)


def resolve_amount(raw: RawAmountInput) -> int:
    """Normalize *raw* to a sompi count.

    Raises:
        AmountError: when the input is malformed for its shape.
    """
    if isinstance(raw, IntegerAmount):
        return raw.value

    if isinstance(raw, FloatAmount):
        f = raw.value
        if not math.isfinite(f) or f < 0.0:
            raise AmountError(AmountErrorKind.INVALID_FLOAT_AMOUNT)
        return parse_kas_to_sompi(f"{f:.{FRACTION_DIGITS}f}")

    if isinstance(raw, TextAmount):
        text = raw.value.strip()
        if not text:
            raise AmountError(AmountErrorKind.EMPTY_TEXT_AMOUNT)
        if "." in text:
            return parse_kas_to_sompi(text)
        sompi = parse_u64(text)
        if sompi is None:
            raise AmountError(AmountErrorKind.INVALID_INTEGER_TEXT)
        return sompi

    raise AmountError(AmountErrorKind.UNSUPPORTED_AMOUNT_TYPE)


def resolve_amount_value(value: Any) -> int:
    """Classify and resolve a decoded value in one step."""
    return resolve_amount(raw_amount_from_value(value))
