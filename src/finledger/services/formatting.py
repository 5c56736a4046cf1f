"""Display formatting for currency and percentages."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def format_currency(value: float, *, currency: str = "NT$", places: int = 0) -> str:
    """Round half-up to ``places`` decimals and group thousands.

    TWD amounts display without decimals: ``22478.4 -> "NT$22,478"``.
    """

    quantum = Decimal(1).scaleb(-places)
    rounded = Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{currency}{abs(rounded):,.{places}f}"


def format_percent(value: float, *, places: int = 1) -> str:
    quantum = Decimal(1).scaleb(-places)
    rounded = Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP)
    return f"{rounded:.{places}f}%"


def format_amount(value) -> str:
    """Two-decimal string used for stored amounts in API payloads."""

    return f"{Decimal(str(value)).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP):.2f}"
