"""
Utility functions for the application.
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union
from evensplit.core.config import settings

CENT = Decimal("0.01")

Number = Union[int, float, Decimal]


def to_decimal(value: Number) -> Decimal:
    """Convert a number to Decimal through its string form to avoid binary noise."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_half_up(value: Number) -> Decimal:
    """Round to 2 decimal places, halves away from zero."""
    return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def to_cents(value: Number) -> int:
    """Convert an amount in major units to integer cents."""
    return int(round_half_up(value) * 100)


def cents_to_amount(cents: Union[int, Decimal]) -> float:
    """Convert cents (integer or exact Decimal) to a major-unit float rounded to 2 dp."""
    return float(round_half_up(Decimal(cents) / 100))


def format_amount(amount: Number, symbol: Optional[str] = None) -> str:
    """Render an amount with exactly two decimals and a trailing currency symbol."""
    if symbol is None:
        symbol = settings.CURRENCY_SYMBOL
    return f"{round_half_up(amount)}{symbol}"


def format_cents_short(cents: Optional[int], symbol: Optional[str] = None) -> str:
    """Render cents as a compact amount: 9000 -> '90€', 1250 -> '12.5€'."""
    if symbol is None:
        symbol = settings.CURRENCY_SYMBOL
    amount = Decimal(cents or 0) / 100
    text = format(amount.normalize(), "f") if amount else "0"
    return f"{text}{symbol}"
