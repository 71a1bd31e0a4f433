"""Checkout composer — cart + site document to an outbound message.

``compose()`` is pure: it never touches the cart or the document.
Clearing the cart after a successful handoff belongs to the caller,
because the handoff (opening the messaging app) can be dismissed outside
our view.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal
from urllib.parse import quote

from pydantic import BaseModel, Field

from warungctl.domain.cart import Cart, LineItem
from warungctl.domain.document import ConfigurationDocument
from warungctl.domain.money import CurrencyFormat, format_currency

DEFAULT_MESSAGING_DOMAIN = "wa.me"

# Characters encodeURIComponent leaves alone beyond quote()'s always-safe set.
_URI_COMPONENT_SAFE = "!*'()"


class MessageStyle(BaseModel):
    """Wording of the outbound messages.

    ``{business}`` is substituted with the business name in ``header``
    and ``greeting``.
    """

    model_config = {"frozen": True}

    header: str = "*PESANAN BARU - {business}*"
    details_heading: str = "*Detail Pesanan:*"
    total_label: str = "Total"
    closing: str = "Mohon konfirmasi pesanan dan info pengiriman. Terima kasih! 🙏"
    greeting: str = "Halo {business}, saya ingin bertanya tentang menu"
    direct_order_intro: str = "Halo {business}, saya ingin pesan:"
    direct_order_closing: str = "Mohon info untuk pengiriman. Terima kasih!"
    fallback_business_name: str = "Warung"
    currency: CurrencyFormat = Field(default_factory=CurrencyFormat)


# --- outcome ---


class RejectionReason(StrEnum):
    EMPTY_CART = "empty_cart"
    BELOW_MINIMUM_ORDER = "below_minimum_order"


class Rejected(BaseModel):
    """Checkout refused; the cart stays as it was."""

    model_config = {"frozen": True}

    kind: Literal["rejected"] = "rejected"
    reason: RejectionReason
    minimum_order: int
    total: int


class Composed(BaseModel):
    """Message ready for the external messaging channel."""

    model_config = {"frozen": True}

    kind: Literal["composed"] = "composed"
    message: str
    external_url: str


CheckoutOutcome = Annotated[Rejected | Composed, Field(discriminator="kind")]


# --- helpers ---


def business_name(doc: ConfigurationDocument, style: MessageStyle | None = None) -> str:
    style = style or MessageStyle()
    return doc.identity.name or style.fallback_business_name


def build_deep_link(
    handle: str | None,
    message: str,
    *,
    domain: str = DEFAULT_MESSAGING_DOMAIN,
) -> str:
    """``https://{domain}/{handle}?text={message}`` with the message percent-encoded.

    A missing handle produces ``https://{domain}/?text=...``, which lets
    the messaging app ask the visitor to pick a contact.
    """
    encoded = quote(message, safe=_URI_COMPONENT_SAFE)
    return f"https://{domain}/{handle or ''}?text={encoded}"


def greeting_message(doc: ConfigurationDocument, style: MessageStyle | None = None) -> str:
    style = style or MessageStyle()
    return style.greeting.format(business=business_name(doc, style))


def format_line(item: LineItem, currency: CurrencyFormat | None = None) -> str:
    """``• Nasi Goreng × 2 = Rp 50.000``"""
    return f"• {item.label} × {item.quantity} = {format_currency(item.subtotal, currency)}"


def build_order_message(
    items: tuple[LineItem, ...] | list[LineItem],
    total: int,
    business: str,
    style: MessageStyle | None = None,
) -> str:
    """Assemble the order message from already-computed cart values."""
    style = style or MessageStyle()
    lines = [
        style.header.format(business=business),
        "",
        style.details_heading,
        *(format_line(item, style.currency) for item in items),
        "",
        f"*{style.total_label}: {format_currency(total, style.currency)}*",
        "",
        style.closing,
    ]
    return "\n".join(lines)


# --- composers ---


def compose(
    cart: Cart,
    doc: ConfigurationDocument,
    *,
    style: MessageStyle | None = None,
    domain: str = DEFAULT_MESSAGING_DOMAIN,
) -> Rejected | Composed:
    """Turn the cart into an outbound message or a rejection."""
    style = style or MessageStyle()
    minimum = doc.ordering.minimum_order
    if cart.is_empty():
        return Rejected(reason=RejectionReason.EMPTY_CART, minimum_order=minimum, total=0)

    total = cart.total()
    if total < minimum:
        return Rejected(
            reason=RejectionReason.BELOW_MINIMUM_ORDER,
            minimum_order=minimum,
            total=total,
        )

    message = build_order_message(cart.items(), total, business_name(doc, style), style)
    return Composed(
        message=message,
        external_url=build_deep_link(doc.contact.messaging_handle, message, domain=domain),
    )


def compose_direct_order(
    label: str,
    unit_price: int,
    doc: ConfigurationDocument,
    *,
    style: MessageStyle | None = None,
    domain: str = DEFAULT_MESSAGING_DOMAIN,
) -> Composed:
    """Single-item message used when the cart is disabled.

    No minimum-order check applies; the business confirms by message.
    """
    style = style or MessageStyle()
    message = "\n".join(
        [
            style.direct_order_intro.format(business=business_name(doc, style)),
            "",
            f"• {label} - {format_currency(unit_price, style.currency)}",
            "",
            style.direct_order_closing,
        ]
    )
    return Composed(
        message=message,
        external_url=build_deep_link(doc.contact.messaging_handle, message, domain=domain),
    )
