"""Cart aggregate: the pure line-collection behind the CartStore.

The Cart knows nothing about storage or observers; it only enforces
the line invariants:

- at most one ``CartLine`` per ``item_id``
- ``quantity`` is always >= 1 (dropping to zero removes the line)
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class CartLine:
    """One distinct product inside the cart.

    Frozen: quantity changes replace the line, so a line handed out to a
    caller or observer is never mutated behind its back.
    """

    item_id: str
    name: str
    unit_price: Money
    quantity: int
    catalog_id: str
    catalog_name: str | None = None
    image_ref: str | None = None

    def __post_init__(self) -> None:
        if not self.item_id:
            raise ValidationError("Cart line requires an item id")
        Quantity(self.quantity)

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity

    def with_quantity(self, quantity: int) -> CartLine:
        return CartLine(
            item_id=self.item_id,
            name=self.name,
            unit_price=self.unit_price,
            quantity=quantity,
            catalog_id=self.catalog_id,
            catalog_name=self.catalog_name,
            image_ref=self.image_ref,
        )


class Cart:
    """Ordered collection of cart lines keyed by item id."""

    def __init__(self, lines: list[CartLine] | None = None) -> None:
        self._lines: dict[str, CartLine] = {}
        for line in lines or []:
            self.add(line)

    # --- Mutations ------------------------------------------------------------

    def add(self, line: CartLine) -> CartLine:
        """Insert *line*, or merge its quantity into the existing line.

        The existing line keeps its original price snapshot.
        """
        existing = self._lines.get(line.item_id)
        if existing is None:
            self._lines[line.item_id] = line
            return line
        merged = existing.with_quantity(existing.quantity + line.quantity)
        self._lines[line.item_id] = merged
        return merged

    def set_quantity(self, item_id: str, quantity: int) -> bool:
        """Set a line's quantity; ``quantity <= 0`` removes the line.

        Returns False if no line exists for *item_id*.
        """
        existing = self._lines.get(item_id)
        if existing is None:
            return False
        if quantity <= 0:
            del self._lines[item_id]
        else:
            self._lines[item_id] = existing.with_quantity(quantity)
        return True

    def remove(self, item_id: str) -> bool:
        return self._lines.pop(item_id, None) is not None

    def clear(self) -> None:
        self._lines.clear()

    # --- Queries --------------------------------------------------------------

    def get(self, item_id: str) -> CartLine | None:
        return self._lines.get(item_id)

    @property
    def lines(self) -> tuple[CartLine, ...]:
        return tuple(self._lines.values())

    @property
    def is_empty(self) -> bool:
        return not self._lines

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self._lines.values())

    def subtotal(self, currency: str = "USD") -> Money:
        result = Money.zero(currency)
        for line in self._lines.values():
            result = result + line.line_total
        return result
