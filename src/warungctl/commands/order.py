"""Command: build a cart from events and compose the order message."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from warungctl.commands._base import WarungCommand

if TYPE_CHECKING:
    from warungctl.commands._context import AppContext
    from warungctl.domain.checkout import Composed

_ORDER_EXAMPLES = """\
  warungctl order "add:Nasi Goreng:25000" "add:Es Teh:5000"
  warungctl order "add:Nasi Goreng:25000" "inc:Nasi Goreng" "remove:Es Teh"
  warungctl order "add:Ayam Bakar:30000" "qty:Ayam Bakar:3" --open
  warungctl -q order "add:Soto:20000" "add:Kerupuk:10000"
  warungctl order "add:Rendang:35000" --no-checkout"""


def _launch(composed: Composed) -> bool:
    """Open the deep-link; a launcher failure counts as a dismissed handoff."""
    return click.launch(composed.external_url) == 0


@click.command("order", cls=WarungCommand, examples=_ORDER_EXAMPLES)
@click.argument("events", nargs=-1)
@click.option("--open", "open_link", is_flag=True, help="Open the messaging link.")
@click.option("--no-checkout", is_flag=True, help="Only build the cart; skip checkout.")
@click.pass_obj
def order(app: AppContext, events: tuple[str, ...], open_link: bool, no_checkout: bool) -> None:
    """Replay EVENTS against a cart and compose the order.

    \b
    Events:
      add:<label>:<price>   inc:<label>   dec:<label>
      qty:<label>:<n>       remove:<label>   clear
    """
    from warungctl.services.order import OrderService

    app.emit(
        OrderService(app.workspace).place(
            list(events),
            handoff=_launch if open_link else None,
            checkout=not no_checkout,
        )
    )
