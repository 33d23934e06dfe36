"""Application service: the Cart Store.

Sole authority over the active cart for one session.  Constructed once
at startup and handed to every consumer; the line collection can only
be changed through the operations below.

Every successful mutation:
  1. updates the in-memory Cart aggregate,
  2. persists the full line list through the CartRepository,
  3. notifies subscribers synchronously with a CartSnapshot.

Persistence is best-effort.  A failed write is logged and the in-memory
mutation stands; a missing or corrupt payload at start-up yields an
empty cart.  Two stores over the same storage do not see each other's
writes: the last one to persist wins.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from storefront.domain.exceptions import StorageError, ValidationError
from storefront.domain.model.cart import Cart, CartLine
from storefront.domain.model.catalog import Catalog, CatalogItem
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.cart_repository import CartRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CartSnapshot:
    """Immutable view of the cart right after a mutation."""

    lines: tuple[CartLine, ...]
    subtotal: Money
    shipping_cost: Money
    total: Money
    item_count: int

    @property
    def is_empty(self) -> bool:
        return not self.lines


CartListener = Callable[[CartSnapshot], None]


class CartStore:

    def __init__(
        self,
        cart_repo: CartRepository,
        shipping_cost: Money | None = None,
    ) -> None:
        self._cart_repo = cart_repo
        self._shipping_cost = shipping_cost or Money.zero()
        self._listeners: list[CartListener] = []
        self._cart = Cart(self._restore())

    # --- Mutations ------------------------------------------------------------

    def add_item(
        self,
        item: CatalogItem | Mapping[str, Any],
        quantity: int = 1,
        catalog: Catalog | None = None,
    ) -> CartLine | None:
        """Add *quantity* units of *item*, merging with an existing line.

        A raw record only needs an id and a price; it is placed in
        *catalog* when it names no catalog of its own.  Records missing
        either, and non-positive quantities, are rejected: the call is a
        logged no-op returning None and never raises.
        """
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
            logger.warning("Rejected add to cart: invalid quantity %r", quantity)
            return None

        if not isinstance(item, CatalogItem):
            try:
                item = CatalogItem.from_cart_record(
                    item, catalog_id=catalog.id if catalog is not None else ""
                )
            except ValidationError as exc:
                logger.warning("Rejected add to cart: %s", exc)
                return None

        catalog_name = None
        if catalog is not None and catalog.id == item.catalog_id:
            catalog_name = catalog.name

        line = self._cart.add(
            CartLine(
                item_id=item.id,
                name=item.name,
                unit_price=item.unit_price,
                quantity=quantity,
                catalog_id=item.catalog_id,
                catalog_name=catalog_name,
                image_ref=item.image_ref,
            )
        )
        self._commit()
        return line

    def update_quantity(self, item_id: str, new_quantity: int) -> None:
        """Set a line's quantity; ``new_quantity <= 0`` removes the line."""
        if isinstance(new_quantity, bool) or not isinstance(new_quantity, int):
            logger.warning("Rejected quantity update: invalid quantity %r", new_quantity)
            return
        if self._cart.set_quantity(item_id, new_quantity):
            self._commit()

    def remove_item(self, item_id: str) -> None:
        if self._cart.remove(item_id):
            self._commit()

    def clear(self) -> None:
        self._cart.clear()
        self._commit()

    # --- Queries --------------------------------------------------------------

    def lines(self) -> tuple[CartLine, ...]:
        return self._cart.lines

    def get_line(self, item_id: str) -> CartLine | None:
        return self._cart.get(item_id)

    def is_empty(self) -> bool:
        return self._cart.is_empty

    def subtotal(self) -> Money:
        return self._cart.subtotal(self._shipping_cost.currency)

    def shipping_cost(self) -> Money:
        """Shipping is only charged on a non-empty cart."""
        if self._cart.is_empty:
            return Money.zero(self._shipping_cost.currency)
        return self._shipping_cost

    def total(self) -> Money:
        return self.subtotal() + self.shipping_cost()

    def item_count(self) -> int:
        return self._cart.item_count

    def line_count(self) -> int:
        return len(self._cart.lines)

    def snapshot(self) -> CartSnapshot:
        return CartSnapshot(
            lines=self._cart.lines,
            subtotal=self.subtotal(),
            shipping_cost=self.shipping_cost(),
            total=self.total(),
            item_count=self.item_count(),
        )

    # --- Subscriptions --------------------------------------------------------

    def subscribe(self, listener: CartListener) -> Callable[[], None]:
        """Register *listener*; returns a callable that unsubscribes it."""
        self._listeners.append(listener)
        return lambda: self.unsubscribe(listener)

    def unsubscribe(self, listener: CartListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # --- Internal helpers -----------------------------------------------------

    def _commit(self) -> None:
        self._persist()
        self._notify()

    def _persist(self) -> None:
        try:
            self._cart_repo.save(self._cart.lines)
        except StorageError as exc:
            logger.warning("Cart not persisted, keeping in-memory state: %s", exc)

    def _notify(self) -> None:
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("Cart listener %r failed", listener)

    def _restore(self) -> list[CartLine]:
        try:
            return self._cart_repo.load()
        except StorageError as exc:
            logger.warning("Could not restore saved cart, starting empty: %s", exc)
            return []
