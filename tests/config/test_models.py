"""Tests for the warungctl.toml section models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from warungctl.config.models import CheckoutConfig, RenderConfig, SiteConfig
from warungctl.domain.money import CurrencyFormat


class TestSectionDefaults:
    def test_site(self) -> None:
        cfg = SiteConfig()
        assert cfg.document == "site.yaml"
        assert cfg.skin == "warung"
        assert cfg.output_dir == "dist"
        assert cfg.handle_prefix == "628"

    def test_render(self) -> None:
        cfg = RenderConfig()
        assert cfg.darken_percent == 10
        assert cfg.default_success_color == "#27AE60"

    def test_frozen(self) -> None:
        with pytest.raises(ValidationError):
            SiteConfig().skin = "modern"  # type: ignore[misc]


class TestCheckoutConfig:
    def test_default_domain(self) -> None:
        assert CheckoutConfig().messaging_domain == "wa.me"

    def test_style_carries_currency(self) -> None:
        cfg = CheckoutConfig(currency=CurrencyFormat(symbol="IDR", group_separator=","))
        style = cfg.style()
        assert style.currency.symbol == "IDR"
        assert style.currency.group_separator == ","
        assert style.total_label == cfg.message.total_label

    def test_nested_from_dict(self) -> None:
        cfg = CheckoutConfig.model_validate({"message": {"total_label": "Jumlah"}})
        assert cfg.style().total_label == "Jumlah"
