"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from storefront.application.cart_store import CartStore
from storefront.application.dto import CartDTO, CartLineDTO


class ShowCartHandler:

    def __init__(self, cart_store: CartStore) -> None:
        self._cart_store = cart_store

    def handle(self) -> CartDTO:
        return CartDTO(
            lines=[
                CartLineDTO(
                    item_id=line.item_id,
                    name=line.name,
                    quantity=line.quantity,
                    unit_price=str(line.unit_price),
                    line_total=str(line.line_total),
                    catalog_name=line.catalog_name,
                )
                for line in self._cart_store.lines()
            ],
            item_count=self._cart_store.item_count(),
            subtotal=str(self._cart_store.subtotal()),
            shipping_cost=str(self._cart_store.shipping_cost()),
            total=str(self._cart_store.total()),
        )
