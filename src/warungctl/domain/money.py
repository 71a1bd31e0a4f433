"""Integer currency formatting (no minor units)."""

from __future__ import annotations

from pydantic import BaseModel


class CurrencyFormat(BaseModel):
    """How amounts are written: ``Rp 25.000`` by default."""

    model_config = {"frozen": True}

    symbol: str = "Rp"
    symbol_separator: str = " "
    group_separator: str = "."


def format_amount(amount: int, fmt: CurrencyFormat | None = None) -> str:
    """Group digits in threes with no fraction digits: ``25000 -> "25.000"``."""
    fmt = fmt or CurrencyFormat()
    sign = "-" if amount < 0 else ""
    return sign + f"{abs(amount):,}".replace(",", fmt.group_separator)


def format_currency(amount: int, fmt: CurrencyFormat | None = None) -> str:
    """Grouped amount with the currency symbol: ``25000 -> "Rp 25.000"``."""
    fmt = fmt or CurrencyFormat()
    return f"{fmt.symbol}{fmt.symbol_separator}{format_amount(amount, fmt)}"
