"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, warungctl.toml only contains
overrides.  A fresh workspace needs nothing but ``[site] document``.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from warungctl.config.discovery import DEFAULT_DOCUMENT
from warungctl.domain.checkout import DEFAULT_MESSAGING_DOMAIN, MessageStyle
from warungctl.domain.money import CurrencyFormat
from warungctl.domain.validation import DEFAULT_HANDLE_PREFIX

# --- warungctl.toml sections ---


class SiteConfig(BaseModel):
    """[site] section."""

    model_config = {"frozen": True}

    document: str = DEFAULT_DOCUMENT
    skin: str = "warung"
    output_dir: str = "dist"
    handle_prefix: str = DEFAULT_HANDLE_PREFIX


class RenderConfig(BaseModel):
    """[render] section."""

    model_config = {"frozen": True}

    darken_percent: float = 10
    default_success_color: str = "#27AE60"


class CheckoutConfig(BaseModel):
    """[checkout] section, with [checkout.currency] and [checkout.message]."""

    model_config = {"frozen": True}

    messaging_domain: str = DEFAULT_MESSAGING_DOMAIN
    currency: CurrencyFormat = Field(default_factory=CurrencyFormat)
    message: MessageStyle = Field(default_factory=MessageStyle)

    def style(self) -> MessageStyle:
        """Message style carrying this section's currency format."""
        return self.message.model_copy(update={"currency": self.currency})

