"""OrderService — replay interaction events and compose the outbound order.

Events are parsed up front so a typo fails before anything is bound.
When the document disables the cart, each ``add`` event becomes its own
direct order and no checkout runs.

Every checkout that composes a message is reported under ``orders``, so a
``checkout`` event in the middle of the stream is not lost when more
events follow it.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from warungctl.domain.cart import LineItem
from warungctl.domain.checkout import Composed, Rejected, RejectionReason
from warungctl.domain.money import CurrencyFormat, format_currency
from warungctl.infrastructure.documents import DocumentError
from warungctl.infrastructure.skins import UnknownSkinError
from warungctl.services.base import BaseService
from warungctl.services.result import ServiceError, ServiceResult, failure
from warungctl.services.storefront import (
    Checkout,
    Command,
    DispatchResult,
    EventError,
    Handoff,
    Storefront,
    parse_event,
)

logger = logging.getLogger(__name__)

_REJECTION_MESSAGES = {
    RejectionReason.EMPTY_CART: "Cart is empty",
    RejectionReason.BELOW_MINIMUM_ORDER: "Minimum order is {minimum}; cart total is {total}",
}


def _item_data(items: Sequence[LineItem]) -> list[dict[str, Any]]:
    return [
        {
            "label": item.label,
            "unit_price": item.unit_price,
            "quantity": item.quantity,
            "subtotal": item.subtotal,
        }
        for item in items
    ]


def _order_data(
    outcome: Composed, result: DispatchResult, currency: CurrencyFormat
) -> dict[str, Any]:
    """One composed order as reported in the result."""
    return {
        "message": outcome.message,
        "url": outcome.external_url,
        "handed_off": result.handed_off,
        "total": result.total,
        "total_display": format_currency(result.total, currency),
    }


class OrderService(BaseService):
    """Drives a Storefront from a list of event strings."""

    def place(
        self,
        events: Sequence[str],
        *,
        handoff: Handoff | None = None,
        checkout: bool = True,
        skin: str | None = None,
    ) -> ServiceResult:
        op = "order"
        warnings: list[str] = []

        commands: list[Command] = []
        for text in events:
            try:
                commands.append(parse_event(text))
            except EventError as exc:
                return failure(op, "BAD_EVENT", str(exc), event=text)

        try:
            self._check_document(self._workspace.document, warnings)
            storefront = Storefront.open(self._workspace, skin=skin, handoff=handoff)
        except UnknownSkinError as exc:
            return failure(op, "UNKNOWN_SKIN", str(exc), skin=skin)
        except DocumentError as exc:
            return failure(op, "DOCUMENT_ERROR", str(exc))

        currency = storefront.checkout.currency
        direct_orders: list[dict[str, Any]] = []
        placed: list[dict[str, Any]] = []
        last = None
        for command in commands:
            last = storefront.dispatch(command)
            if isinstance(last.outcome, Composed):
                target = placed if isinstance(command, Checkout) else direct_orders
                target.append(_order_data(last.outcome, last, currency))

        if not storefront.document.features.enable_cart:
            if commands and not direct_orders:
                warnings.append("Cart is disabled; only add events place orders")
            return ServiceResult(
                ok=True,
                op=op,
                data={"cart_enabled": False, "orders": direct_orders},
                warnings=warnings,
            )

        if checkout and not (last is not None and isinstance(commands[-1], Checkout)):
            last = storefront.dispatch(Checkout())
            if isinstance(last.outcome, Composed):
                placed.append(_order_data(last.outcome, last, currency))

        if last is None or last.outcome is None:
            items = storefront.cart.items()
            return ServiceResult(
                ok=True,
                op=op,
                data={
                    "cart_enabled": True,
                    "state": storefront.state.value,
                    "items": _item_data(items),
                    "total": storefront.cart.total(),
                    "total_display": format_currency(storefront.cart.total(), currency),
                    "orders": placed,
                },
                warnings=warnings,
            )

        outcome = last.outcome
        cart_data: dict[str, Any] = {
            "cart_enabled": True,
            "state": last.state.value,
            "items": _item_data(last.items),
            "total": last.total,
            "total_display": format_currency(last.total, currency),
            "orders": placed,
        }

        if isinstance(outcome, Rejected):
            code = outcome.reason.value.upper()
            message = _REJECTION_MESSAGES[outcome.reason].format(
                minimum=format_currency(outcome.minimum_order, currency),
                total=format_currency(outcome.total, currency),
            )
            logger.info("Order rejected: %s", code)
            return ServiceResult(
                ok=False,
                op=op,
                data=cart_data,
                warnings=warnings,
                error=ServiceError(
                    code=code,
                    message=message,
                    detail={"minimum_order": outcome.minimum_order, "total": outcome.total},
                ),
            )

        return ServiceResult(
            ok=True,
            op=op,
            data={
                **cart_data,
                "message": outcome.message,
                "url": outcome.external_url,
                "handed_off": last.handed_off,
            },
            warnings=warnings,
        )
