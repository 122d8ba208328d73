"""Yen rounding.

Yen has no subunit, so every fee is rounded to a whole yen the moment it
is computed.  Halves round away from zero (``ROUND_HALF_UP`` in
``decimal`` terms), never to even.  The multiplication is done in
``Decimal`` so a rate such as 0.036 is taken at face value rather than
as its nearest binary float.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

_WHOLE_YEN = Decimal("1")


def to_decimal(value: float | int | Decimal) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_half_up(amount: int, rate: float | Decimal) -> int:
    """Return ``amount × rate`` rounded to whole yen, halves away from zero."""
    product = Decimal(amount) * to_decimal(rate)
    return int(product.quantize(_WHOLE_YEN, rounding=ROUND_HALF_UP))
