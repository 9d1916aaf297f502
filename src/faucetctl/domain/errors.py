"""Amount error taxonomy.

Every failure in the domain layer is an :class:`AmountError` tagged with an
:class:`AmountErrorKind`.  ``AmountError`` subclasses ``ValueError`` so that
Pydantic turns it into a ``ValidationError`` when it escapes a field
validator, which is what aborts config loading.
"""

from __future__ import annotations

from enum import StrEnum


class AmountErrorKind(StrEnum):
    """Why an amount was rejected."""

    EMPTY_AMOUNT = "empty_amount"
    TOO_MANY_DECIMAL_POINTS = "too_many_decimal_points"
    INVALID_WHOLE_PART = "invalid_whole_part"
    TOO_MANY_DECIMALS = "too_many_decimals"
    INVALID_FRACTIONAL_PART = "invalid_fractional_part"
    AMOUNT_OVERFLOW = "amount_overflow"
    INVALID_FLOAT_AMOUNT = "invalid_float_amount"
    EMPTY_TEXT_AMOUNT = "empty_text_amount"
    INVALID_INTEGER_TEXT = "invalid_integer_text"
    INVALID_INTEGER_AMOUNT = "invalid_integer_amount"
    UNSUPPORTED_AMOUNT_TYPE = "unsupported_amount_type"


_MESSAGES: dict[AmountErrorKind, str] = {
    AmountErrorKind.EMPTY_AMOUNT: "amount is empty",
    AmountErrorKind.TOO_MANY_DECIMAL_POINTS: "invalid amount: too many decimal points",
    AmountErrorKind.INVALID_WHOLE_PART: "invalid amount: whole part is not a number",
    AmountErrorKind.TOO_MANY_DECIMALS: "invalid amount: max 8 decimal places",
    AmountErrorKind.INVALID_FRACTIONAL_PART: "invalid amount: fractional part is not a number",
    AmountErrorKind.AMOUNT_OVERFLOW: "amount overflows u64",
    AmountErrorKind.INVALID_FLOAT_AMOUNT: "amount_per_claim must be a finite number >= 0",
    AmountErrorKind.EMPTY_TEXT_AMOUNT: "amount_per_claim is empty",
    AmountErrorKind.INVALID_INTEGER_TEXT: (
        "amount_per_claim must be a u64 sompi integer or a KAS decimal string"
    ),
    AmountErrorKind.INVALID_INTEGER_AMOUNT: "sompi amount must be an integer in the u64 range",
    AmountErrorKind.UNSUPPORTED_AMOUNT_TYPE: (
        "amount_per_claim must be an integer, a float, or a string"
    ),
}


class AmountError(ValueError):
    """A rejected amount, carrying its :class:`AmountErrorKind`."""

    def __init__(self, kind: AmountErrorKind, message: str | None = None) -> None:
        self.kind = kind
        self.message = message or _MESSAGES[kind]
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"AmountError({self.kind.value!r}, {self.message!r})"
