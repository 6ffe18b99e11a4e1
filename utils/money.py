"""
utils/money.py
--------------
Conversions between dollar amounts and the integer cents stored in the database.
Every monetary column (cost_per_night, total_cost) holds cents.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

Number = Union[int, float, str, Decimal]

_ONE_CENT = Decimal("1")


def dollars_to_cents(amount: Number) -> int:
    """
    Convert a dollar amount to integer cents, rounding half up.

    Floats go through ``str`` first so that 19.99 becomes 1999, not 1998.

    Raises:
        ValueError: If the amount is not a finite number.
    """
    try:
        value = Decimal(str(amount)) * 100
    except ArithmeticError as e:
        raise ValueError(f"Invalid money amount: {amount!r}") from e
    if not value.is_finite():
        raise ValueError(f"Invalid money amount: {amount!r}")
    return int(value.quantize(_ONE_CENT, rounding=ROUND_HALF_UP))


def cents_to_dollars(cents: int) -> Decimal:
    """Convert integer cents to a two-place Decimal dollar amount."""
    return (Decimal(cents) / 100).quantize(Decimal("0.01"))


def format_cents(cents: int) -> str:
    """Render cents as a dollar string, e.g. 12550 -> '$125.50'."""
    return f"${cents_to_dollars(cents):,.2f}"
