"""Decimal KAS strings to integer sompi.

Fixed-point contract:
- 1 KAS = 10^8 sompi (``SOMPI_PER_KAS``).
- Input grammar is ``WHOLE`` or ``WHOLE.FRAC`` with ASCII digits only and at
  most 8 fractional digits.  No sign characters.
- Results are unsigned 64-bit.  Every product and sum is checked against
  ``U64_MAX``; overflow raises, it never wraps or truncates.

Python ints are unbounded, so the u64 ceiling is enforced explicitly here.
"""

from __future__ import annotations

import re

from faucetctl.domain.errors import AmountError, AmountErrorKind

SOMPI_PER_KAS = 100_000_000
FRACTION_DIGITS = 8
U64_MAX = 2**64 - 1

_DIGITS = re.compile(r"[0-9]+", re.ASCII)


def parse_u64(text: str) -> int | None:
    """Parse *text* as an unsigned 64-bit integer literal.

    Accepts ASCII digits only (no sign, underscores, or inner whitespace,
    all of which ``int()`` would tolerate).  Returns None when *text* is
    not a literal or does not fit in 64 bits.
    """
    if _DIGITS.fullmatch(text) is None:
        return None
    value = int(text)
    if value > U64_MAX:
        return None
    return value


def checked_mul(a: int, b: int) -> int | None:
    product = a * b
    return product if product <= U64_MAX else None


def checked_add(a: int, b: int) -> int | None:
    total = a + b
    return total if total <= U64_MAX else None


def parse_kas_to_sompi(text: str) -> int:
    """Convert a decimal KAS string into an exact sompi count.

    ``"1.5"`` -> ``150_000_000``; ``"100"`` -> ``10_000_000_000``;
    ``"0.00000001"`` -> ``1``.  A trailing ``"."`` is the same as no
    fraction.  The whole part is required, so ``".5"`` is rejected.

    Raises:
        AmountError: with the kind describing the first rule violated.
    """
    raw = text.strip()
    if not raw:
        raise AmountError(AmountErrorKind.EMPTY_AMOUNT)

    parts = raw.split(".")
    if len(parts) > 2:
        raise AmountError(AmountErrorKind.TOO_MANY_DECIMAL_POINTS)

    whole = parse_u64(parts[0].strip())
    if whole is None:
        raise AmountError(AmountErrorKind.INVALID_WHOLE_PART)

    frac_str = parts[1].strip() if len(parts) == 2 else ""
    if len(frac_str) > FRACTION_DIGITS:
        raise AmountError(AmountErrorKind.TOO_MANY_DECIMALS)

    frac = parse_u64(frac_str.ljust(FRACTION_DIGITS, "0"))
    if frac is None:
        raise AmountError(AmountErrorKind.INVALID_FRACTIONAL_PART)

    scaled = checked_mul(whole, SOMPI_PER_KAS)
    if scaled is None:
        raise AmountError(AmountErrorKind.AMOUNT_OVERFLOW)
    total = checked_add(scaled, frac)
    if total is None:
        raise AmountError(AmountErrorKind.AMOUNT_OVERFLOW)
    return total


def format_sompi_as_kas(sompi: int) -> str:
    """Render a sompi count as a KAS decimal string for display.

    Trailing fractional zeros are dropped: ``150_000_000`` -> ``"1.5"``,
    ``100_000_000`` -> ``"1"``.  The output always parses back to *sompi*
    through :func:`parse_kas_to_sompi`.
    """
    if isinstance(sompi, bool) or not isinstance(sompi, int) or not 0 <= sompi <= U64_MAX:
        raise AmountError(AmountErrorKind.INVALID_INTEGER_AMOUNT)
    whole, frac = divmod(sompi, SOMPI_PER_KAS)
    if frac == 0:
        return str(whole)
    return f"{whole}.{frac:0{FRACTION_DIGITS}d}".rstrip("0")
