"""Site document schema — the single source for everything the page shows.

Every optional field is typed ``X | None`` and blank strings collapse to
``None`` during validation, so "absent" is exactly one case for the
binding layer to handle.  Business name, messaging handle and phone are
optional at the type level too: their absence is a validation *finding*
(see :mod:`warungctl.domain.validation`), not a load failure.

Models are mutable on purpose: the document is loaded once and patched
in place by the named mutators in :mod:`warungctl.domain.mutators`.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

DEFAULT_MINIMUM_ORDER = 25000


class _Section(BaseModel):
    """Base for document sections: blank strings are treated as absent."""

    model_config = {"extra": "ignore"}

    @field_validator("*", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value


def _number_to_str(value: Any) -> Any:
    # YAML reads unquoted 628123456789 or 2015 as an int.
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


# --- identity ---


class Identity(_Section):
    """Business identity shown in header, hero, about and footer."""

    name: str | None = None
    tagline: str | None = None
    description: str | None = None
    owner_name: str | None = None
    owner_title: str | None = None
    year_established: str | None = None
    story: str | None = None

    @field_validator("year_established", mode="before")
    @classmethod
    def _coerce_year(cls, value: Any) -> Any:
        return _number_to_str(value)


# --- contact ---


class Address(_Section):
    street: str | None = None
    area: str | None = None
    city: str | None = None
    postal_code: str | None = None
    notes: str | None = None

    def one_line(self) -> str | None:
        """``street, [area, ]city postal_code`` or None when nothing is set."""
        locality = " ".join(p for p in (self.city, self.postal_code) if p)
        parts = [p for p in (self.street, self.area, locality) if p]
        return ", ".join(parts) or None


class OperatingHours(_Section):
    open: str | None = None
    close: str | None = None
    delivery_start: str | None = None
    delivery_end: str | None = None
    days: str | None = None


class SocialHandles(_Section):
    instagram: str | None = None
    facebook: str | None = None
    tiktok: str | None = None
    youtube: str | None = None


class Contact(_Section):
    """Contact channels.  ``messaging_handle`` is digits-only, country-prefixed."""

    phone: str | None = None
    messaging_handle: str | None = None
    email: str | None = None
    website: str | None = None
    address: Address = Field(default_factory=Address)
    hours: OperatingHours = Field(default_factory=OperatingHours)
    social: SocialHandles = Field(default_factory=SocialHandles)

    @field_validator("phone", "messaging_handle", mode="before")
    @classmethod
    def _coerce_number(cls, value: Any) -> Any:
        return _number_to_str(value)


# --- branding ---


class ColorPalette(_Section):
    """Hex color triples.  Format is checked by the validator, not here."""

    primary: str | None = None
    secondary: str | None = None
    accent: str | None = None
    success: str | None = None

    def entries(self) -> list[tuple[str, str]]:
        """Present ``(field, value)`` pairs in declaration order."""
        return [
            (name, value)
            for name in type(self).model_fields
            if (value := getattr(self, name)) is not None
        ]

    def blank_entries(self) -> list[str]:
        """Fields the document sets but leaves empty.

        An unquoted ``primary: #FF6B35`` is a YAML comment, so the key loads
        as null and would otherwise vanish without a trace.
        """
        return [
            name
            for name in type(self).model_fields
            if name in self.model_fields_set and getattr(self, name) is None
        ]


class Imagery(_Section):
    logo: str | None = None
    hero_background: str | None = None
    owner_photo: str | None = None
    favicon: str | None = None


class Branding(_Section):
    colors: ColorPalette = Field(default_factory=ColorPalette)
    images: Imagery = Field(default_factory=Imagery)


# --- catalog ---


class Category(_Section):
    """One menu tab.  Entries without an id or label are skipped on the page."""

    id: str | None = None
    label: str | None = None
    icon: str | None = None


# --- ordering policy ---


class DeliveryZone(_Section):
    distance: str | None = None
    fee: int = Field(default=0, ge=0)
    description: str | None = None


class DeliveryTime(_Section):
    min: int | None = None
    max: int | None = None


class OrderingPolicy(_Section):
    minimum_order: int = Field(default=DEFAULT_MINIMUM_ORDER, ge=0)
    delivery_zones: list[DeliveryZone] = Field(default_factory=list)
    delivery_time: DeliveryTime = Field(default_factory=DeliveryTime)
    payment_methods: list[str] = Field(default_factory=list)


# --- feature flags ---


class FeatureFlags(_Section):
    show_about: bool = True
    show_gallery: bool = True
    show_testimonials: bool = True
    show_promo: bool = True
    show_delivery_info: bool = True
    show_contact_form: bool = True
    enable_cart: bool = True
    enable_whatsapp_order: bool = True
    show_prices: bool = True


# --- website / SEO ---


class WebsiteMeta(_Section):
    title: str | None = None
    description: str | None = None
    keywords: str | None = None
    language: str | None = "id"
    og_image: str | None = None
    maps_embed_url: str | None = None


# --- marketing blocks ---


class Promotion(_Section):
    title: str | None = None
    description: str | None = None
    code: str | None = None
    badge: str | None = None
    active: bool = True


class Highlight(_Section):
    title: str | None = None
    icon: str | None = None
    description: str | None = None


# --- root ---


class ConfigurationDocument(BaseModel):
    """Root site document composing all sections."""

    model_config = {"extra": "ignore"}

    identity: Identity = Field(default_factory=Identity)
    contact: Contact = Field(default_factory=Contact)
    branding: Branding = Field(default_factory=Branding)
    categories: list[Category] = Field(default_factory=list)
    ordering: OrderingPolicy = Field(default_factory=OrderingPolicy)
    features: FeatureFlags = Field(default_factory=FeatureFlags)
    website: WebsiteMeta = Field(default_factory=WebsiteMeta)
    promotions: list[Promotion] = Field(default_factory=list)
    highlights: list[Highlight] = Field(default_factory=list)

    def lookup(self, path: str) -> Any:
        """Resolve a dotted field path such as ``"contact.hours.open"``.

        Returns None as soon as a segment is absent.
        """
        node: Any = self
        for segment in path.split("."):
            if node is None:
                return None
            node = getattr(node, segment)
        return node
