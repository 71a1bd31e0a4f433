"""Tests for the site document schema."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from tests.conftest import site_data
from warungctl.domain.document import Address, ColorPalette, ConfigurationDocument


class TestNormalization:
    def test_blank_strings_become_none(self) -> None:
        doc = ConfigurationDocument.model_validate(
            {"identity": {"tagline": "", "story": "   "}, "contact": {"email": ""}}
        )
        assert doc.identity.tagline is None
        assert doc.identity.story is None
        assert doc.contact.email is None

    def test_numeric_handle_and_year_become_strings(self) -> None:
        doc = ConfigurationDocument.model_validate(
            {"identity": {"year_established": 2015}, "contact": {"messaging_handle": 628123}}
        )
        assert doc.identity.year_established == "2015"
        assert doc.contact.messaging_handle == "628123"

    def test_unknown_keys_ignored(self) -> None:
        doc = ConfigurationDocument.model_validate({"gallery": [1, 2], "identity": {"x": 1}})
        assert doc.identity.name is None

    def test_defaults(self) -> None:
        doc = ConfigurationDocument()
        assert doc.ordering.minimum_order == 25000
        assert doc.features.enable_cart is True
        assert doc.website.language == "id"
        assert doc.categories == []

    def test_negative_minimum_order_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ConfigurationDocument.model_validate({"ordering": {"minimum_order": -1}})

    def test_incomplete_entries_still_load(self) -> None:
        doc = ConfigurationDocument.model_validate(
            {"categories": [{"id": "makanan"}], "promotions": [{"badge": "HOT"}]}
        )
        assert doc.categories[0].label is None
        assert doc.promotions[0].title is None

    def test_palette_remembers_blank_keys(self) -> None:
        doc = ConfigurationDocument.model_validate(
            {"branding": {"colors": {"primary": None, "accent": "#F39C12"}}}
        )
        assert doc.branding.colors.blank_entries() == ["primary"]
        assert doc.branding.colors.entries() == [("accent", "#F39C12")]


class TestLookup:
    def test_dotted_path(self, sample_doc: ConfigurationDocument) -> None:
        assert sample_doc.lookup("contact.hours.open") == "08:00"
        assert sample_doc.lookup("branding.colors.primary") == "#FF6B35"

    def test_absent_value_is_none(self, sample_doc: ConfigurationDocument) -> None:
        assert sample_doc.lookup("branding.images.owner_photo") is None


class TestHelpers:
    def test_address_one_line(self) -> None:
        address = ConfigurationDocument.model_validate(site_data()).contact.address
        assert address.one_line() == "Jl. Merdeka No. 12, Menteng, Jakarta 10310"

    def test_empty_address(self) -> None:
        assert Address().one_line() is None

    def test_palette_entries_skip_absent(self) -> None:
        palette = ColorPalette(primary="#FF6B35", accent="#F39C12")
        assert palette.entries() == [("primary", "#FF6B35"), ("accent", "#F39C12")]
