"""Storefront — the single-actor orchestrator behind an ordering session.

Interaction events become command objects here; the Storefront applies
them to its Cart, keeps the cart display regions current, and walks the
checkout lifecycle::

    IDLE -> POPULATING -> REVIEWING -> Rejected  (stay REVIEWING)
                                    -> Composed -> handoff accepted  -> IDLE
                                                -> handoff dismissed -> REVIEWING

INVARIANT: the cart is cleared only after the handoff reports success.

INVARIANT: the Storefront owns the site document.  Mutators patch it in
place and refresh exactly the sub-bindings they report dirty.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from warungctl.config.models import CheckoutConfig
from warungctl.domain import mutators
from warungctl.domain.cart import Cart, LineItem
from warungctl.domain.checkout import Composed, Rejected, compose, compose_direct_order
from warungctl.domain.mutators import DirtySet, SubBinding
from warungctl.infrastructure.binding import RenderBinding

if TYPE_CHECKING:
    from warungctl.domain.document import ConfigurationDocument
    from warungctl.infrastructure.presentation import PresentationTree
    from warungctl.infrastructure.workspace import Workspace

logger = logging.getLogger(__name__)


class CheckoutState(StrEnum):
    IDLE = "idle"
    POPULATING = "populating"
    REVIEWING = "reviewing"


# --- commands ---


@dataclass(frozen=True)
class AddItem:
    label: str
    unit_price: int


@dataclass(frozen=True)
class SetQuantity:
    label: str
    quantity: int


@dataclass(frozen=True)
class Increment:
    label: str


@dataclass(frozen=True)
class Decrement:
    label: str


@dataclass(frozen=True)
class RemoveItem:
    label: str


@dataclass(frozen=True)
class ClearCart:
    pass


@dataclass(frozen=True)
class OpenCheckout:
    pass


@dataclass(frozen=True)
class CloseCheckout:
    pass


@dataclass(frozen=True)
class Checkout:
    pass


Command = (
    AddItem
    | SetQuantity
    | Increment
    | Decrement
    | RemoveItem
    | ClearCart
    | OpenCheckout
    | CloseCheckout
    | Checkout
)

_CART_COMMANDS = (AddItem, SetQuantity, Increment, Decrement, RemoveItem, ClearCart)


class EventError(ValueError):
    """An interaction event string could not be parsed."""


def _parse_int(raw: str, what: str, text: str) -> int:
    try:
        return int(raw)
    except ValueError:
        msg = f"Invalid {what} {raw!r} in event {text!r}"
        raise EventError(msg) from None


def _split_trailing(rest: str, what: str, text: str) -> tuple[str, int]:
    """Split ``<label>:<n>`` at the last colon so labels may contain colons."""
    label, sep, raw = rest.rpartition(":")
    if not sep or not label:
        msg = f"Event {text!r} needs a label and a {what}"
        raise EventError(msg)
    return label, _parse_int(raw, what, text)


def parse_event(text: str) -> Command:
    """Turn an event string into a command.

    Accepted forms::

        add:<label>:<price>   inc:<label>   dec:<label>
        qty:<label>:<n>       remove:<label>
        clear   open   close   checkout
    """
    kind, sep, rest = text.strip().partition(":")
    kind = kind.lower()

    if not sep:
        simple: dict[str, Command] = {
            "clear": ClearCart(),
            "open": OpenCheckout(),
            "close": CloseCheckout(),
            "checkout": Checkout(),
        }
        if kind in simple:
            return simple[kind]
        msg = f"Unknown event {text!r}"
        raise EventError(msg)

    if kind == "add":
        label, price = _split_trailing(rest, "price", text)
        if price < 0:
            msg = f"Price must be non-negative in event {text!r}"
            raise EventError(msg)
        return AddItem(label, price)
    if kind == "qty":
        label, quantity = _split_trailing(rest, "quantity", text)
        return SetQuantity(label, quantity)

    if not rest:
        msg = f"Event {text!r} needs a label"
        raise EventError(msg)
    if kind == "inc":
        return Increment(rest)
    if kind == "dec":
        return Decrement(rest)
    if kind == "remove":
        return RemoveItem(rest)

    msg = f"Unknown event {text!r}"
    raise EventError(msg)


# --- handoff ---

Handoff = Callable[[Composed], bool]
"""Delivers a composed message to the messaging channel.

Returns True when the visitor went through with it.  A False return
means the handoff was dismissed and the cart must be kept.
"""


def accept_handoff(composed: Composed) -> bool:
    """Handoff that always succeeds (the message is simply reported)."""
    return True


@dataclass(frozen=True)
class DispatchResult:
    """State after one command, plus any checkout outcome it produced."""

    state: CheckoutState
    items: tuple[LineItem, ...]
    total: int
    outcome: Rejected | Composed | None = None
    handed_off: bool = False


class Storefront:
    """Owns one site document, one cart and the regions they are bound to."""

    def __init__(
        self,
        document: ConfigurationDocument,
        tree: PresentationTree,
        binding: RenderBinding,
        *,
        checkout: CheckoutConfig | None = None,
        handoff: Handoff | None = None,
    ) -> None:
        self.document = document
        self.tree = tree
        self.binding = binding
        self.checkout = checkout or binding.checkout
        self.handoff = handoff or accept_handoff
        self.cart = Cart()
        self.state = CheckoutState.IDLE

    @classmethod
    def open(
        cls,
        workspace: Workspace,
        *,
        skin: str | None = None,
        handoff: Handoff | None = None,
    ) -> Storefront:
        """Build a fully bound Storefront for *workspace*.

        Raises:
            DocumentError: the site document cannot be loaded.
            UnknownSkinError: *skin* is not registered.
        """
        page = workspace.skin(skin)
        document = workspace.document
        tree = page.new_tree()
        settings = workspace.settings
        binding = RenderBinding(
            tree,
            render=settings.render,
            checkout=settings.checkout,
            fragments=workspace.environment("fragments"),
        )
        storefront = cls(document, tree, binding, checkout=settings.checkout, handoff=handoff)
        binding.bind(document, storefront.cart)
        logger.debug("Opened storefront with skin %s", page.name)
        return storefront

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def handle_event(self, text: str) -> DispatchResult:
        return self.dispatch(parse_event(text))

    def dispatch(self, command: Command) -> DispatchResult:
        """Apply *command* and return the resulting state."""
        if isinstance(command, AddItem) and not self.document.features.enable_cart:
            return self._direct_order(command)
        if isinstance(command, _CART_COMMANDS):
            self._apply_cart_command(command)
            self._after_cart_change()
            return self._result()
        if isinstance(command, OpenCheckout):
            self.state = CheckoutState.REVIEWING
            return self._result()
        if isinstance(command, CloseCheckout):
            self.state = CheckoutState.IDLE if self.cart.is_empty() else CheckoutState.POPULATING
            return self._result()
        if isinstance(command, Checkout):
            return self._checkout()
        msg = f"Unsupported command {command!r}"
        raise TypeError(msg)

    def _apply_cart_command(self, command: Command) -> None:
        cart = self.cart
        match command:
            case AddItem(label, unit_price):
                cart.add(label, unit_price)
            case SetQuantity(label, quantity):
                cart.set_quantity(label, quantity)
            case Increment(label):
                cart.increment(label)
            case Decrement(label):
                cart.decrement(label)
            case RemoveItem(label):
                cart.remove(label)
            case ClearCart():
                cart.clear()

    def _after_cart_change(self) -> None:
        self.binding.bind_cart(self.cart, self.document)
        if self.cart.is_empty():
            self.state = CheckoutState.IDLE
        elif self.state is CheckoutState.IDLE:
            self.state = CheckoutState.POPULATING

    def _checkout(self) -> DispatchResult:
        self.state = CheckoutState.REVIEWING
        outcome = compose(
            self.cart,
            self.document,
            style=self.checkout.style(),
            domain=self.checkout.messaging_domain,
        )
        if isinstance(outcome, Rejected):
            logger.info("Checkout rejected: %s", outcome.reason.value)
            return self._result(outcome)

        if self.handoff(outcome):
            # items reported are the ones that were ordered, not the cleared cart
            ordered, total = self.cart.items(), self.cart.total()
            self.cart.clear()
            self.state = CheckoutState.IDLE
            self.binding.refresh(self.document, {SubBinding.CART}, cart=self.cart)
            return DispatchResult(
                state=self.state,
                items=ordered,
                total=total,
                outcome=outcome,
                handed_off=True,
            )
        logger.info("Handoff dismissed; keeping cart")
        return self._result(outcome)

    def _direct_order(self, command: AddItem) -> DispatchResult:
        composed = compose_direct_order(
            command.label,
            command.unit_price,
            self.document,
            style=self.checkout.style(),
            domain=self.checkout.messaging_domain,
        )
        handed_off = self.handoff(composed)
        return self._result(composed, handed_off=handed_off)

    def _result(
        self,
        outcome: Rejected | Composed | None = None,
        *,
        handed_off: bool = False,
    ) -> DispatchResult:
        return DispatchResult(
            state=self.state,
            items=self.cart.items(),
            total=self.cart.total(),
            outcome=outcome,
            handed_off=handed_off,
        )

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def _refresh(self, dirty: DirtySet) -> DirtySet:
        self.binding.refresh(self.document, dirty, cart=self.cart)
        return dirty

    def rename_business(self, name: str) -> DirtySet:
        return self._refresh(mutators.rename_business(self.document, name))

    def recolor(self, primary: str, secondary: str, accent: str) -> DirtySet:
        return self._refresh(mutators.recolor(self.document, primary, secondary, accent))

    def change_messaging_handle(self, handle: str) -> DirtySet:
        return self._refresh(mutators.change_messaging_handle(self.document, handle))
