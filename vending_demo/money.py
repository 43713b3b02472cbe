from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

PENNY = Decimal("0.01")
DEFAULT_CURRENCY = "£"


def to_pence(amount: Decimal) -> int:
    """Convert a pounds amount to whole pence, rounding half up."""
    return int((amount.quantize(PENNY, rounding=ROUND_HALF_UP) * 100).to_integral_value())


def to_pounds(pence: int) -> Decimal:
    return (Decimal(pence) / 100).quantize(PENNY)


def format_money(pence: int, currency: str = DEFAULT_CURRENCY) -> str:
    return f"{currency}{to_pounds(pence)}"
