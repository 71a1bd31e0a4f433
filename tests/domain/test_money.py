"""Tests for integer currency formatting."""

from __future__ import annotations

from warungctl.domain.money import CurrencyFormat, format_amount, format_currency


class TestFormatCurrency:
    def test_default_rupiah(self) -> None:
        assert format_currency(25000) == "Rp 25.000"

    def test_zero(self) -> None:
        assert format_currency(0) == "Rp 0"

    def test_below_one_thousand_has_no_separator(self) -> None:
        assert format_currency(999) == "Rp 999"

    def test_millions(self) -> None:
        assert format_currency(1234567) == "Rp 1.234.567"

    def test_custom_format(self) -> None:
        fmt = CurrencyFormat(symbol="IDR", symbol_separator=" ", group_separator=",")
        assert format_currency(30000, fmt) == "IDR 30,000"

    def test_symbol_without_separator(self) -> None:
        fmt = CurrencyFormat(symbol_separator="")
        assert format_currency(5000, fmt) == "Rp5.000"


class TestFormatAmount:
    def test_groups_only(self) -> None:
        assert format_amount(30000) == "30.000"

    def test_negative(self) -> None:
        assert format_amount(-1500) == "-1.500"
