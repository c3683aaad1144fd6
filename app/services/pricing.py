"""Money conversion between decimal prices and integer cents"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Union

CENT = Decimal("0.01")

# Largest amount that fits the 32-bit INTEGER cents columns
MAX_CENTS = 2**31 - 1


def to_cents(value: Union[str, int, float, Decimal, None]) -> int:
    """
    Convert a user-supplied price to integer cents.

    Raises ValueError for missing, non-numeric, non-finite, negative or
    out-of-range values.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValueError("Invalid price")
    try:
        amount = Decimal(str(value).strip())
        if not amount.is_finite() or amount < 0:
            raise ValueError("Invalid price")
        cents = int((amount / CENT).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    except InvalidOperation:
        raise ValueError("Invalid price")
    if cents > MAX_CENTS:
        raise ValueError("Invalid price")
    return cents


def from_cents(cents: int) -> Decimal:
    return (Decimal(cents or 0) * CENT).quantize(CENT)
