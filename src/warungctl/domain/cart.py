"""Cart and line items.

INVARIANT: every LineItem in a Cart has quantity >= 1.  Anything that
would take a quantity to zero or below removes the item instead.

INVARIANT: ``Cart.total()`` is recomputed from the items on every call.
There is no cached total to go stale.

Operations on labels that are not in the cart are no-ops, never errors,
so stale UI references (a "-" clicked after the item was removed) are
harmless.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class LineItem:
    """A labeled, priced, quantified cart entry."""

    label: str
    unit_price: int
    quantity: int = 1

    def __post_init__(self) -> None:
        if not isinstance(self.unit_price, int) or isinstance(self.unit_price, bool):
            raise ValueError(f"unit_price must be an int, got {self.unit_price!r}")
        if self.unit_price < 0:
            raise ValueError(f"unit_price must be non-negative, got {self.unit_price}")
        if self.quantity < 1:
            raise ValueError(f"quantity must be positive, got {self.quantity}")

    @property
    def subtotal(self) -> int:
        return self.unit_price * self.quantity


class Cart:
    """Ordered collection of LineItems keyed by label.

    Insertion order is display order.  Mutators return the current items
    so callers can refresh the cart display in one step.
    """

    def __init__(self) -> None:
        self._items: dict[str, LineItem] = {}

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def items(self) -> tuple[LineItem, ...]:
        return tuple(self._items.values())

    def get(self, label: str) -> LineItem | None:
        return self._items.get(label)

    def total(self) -> int:
        return sum(item.unit_price * item.quantity for item in self._items.values())

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[LineItem]:
        return iter(self.items())

    def __contains__(self, label: object) -> bool:
        return label in self._items

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add(self, label: str, unit_price: int) -> tuple[LineItem, ...]:
        """Add one unit of *label*.

        An existing item keeps its original price and gains one unit;
        otherwise a new item is appended with quantity 1.
        """
        existing = self._items.get(label)
        if existing is None:
            self._items[label] = LineItem(label=label, unit_price=unit_price)
        else:
            self._items[label] = dataclasses.replace(existing, quantity=existing.quantity + 1)
        return self.items()

    def set_quantity(self, label: str, quantity: int) -> tuple[LineItem, ...]:
        """Set the quantity of an existing item; ``quantity <= 0`` removes it."""
        existing = self._items.get(label)
        if existing is None:
            return self.items()
        if quantity <= 0:
            del self._items[label]
        else:
            self._items[label] = dataclasses.replace(existing, quantity=quantity)
        return self.items()

    def increment(self, label: str) -> tuple[LineItem, ...]:
        existing = self._items.get(label)
        if existing is None:
            return self.items()
        return self.set_quantity(label, existing.quantity + 1)

    def decrement(self, label: str) -> tuple[LineItem, ...]:
        existing = self._items.get(label)
        if existing is None:
            return self.items()
        return self.set_quantity(label, existing.quantity - 1)

    def remove(self, label: str) -> tuple[LineItem, ...]:
        self._items.pop(label, None)
        return self.items()

    def clear(self) -> None:
        self._items.clear()
