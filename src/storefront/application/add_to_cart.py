"""Application service: Add To Cart use case.

Resolves a catalog item through the catalog repository, so the price
placed in the cart always comes from the catalog record.
"""

from __future__ import annotations

from storefront.application.cart_store import CartStore
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.cart import CartLine
from storefront.domain.repository.catalog_repository import CatalogRepository


class AddToCartHandler:

    def __init__(self, catalog_repo: CatalogRepository, cart_store: CartStore) -> None:
        self._catalog_repo = catalog_repo
        self._cart_store = cart_store

    def handle(self, catalog_id: str, item_id: str, quantity: int = 1) -> CartLine:
        catalog = self._catalog_repo.get_catalog(catalog_id)
        if catalog is None:
            raise EntityNotFoundError(f"Catalog '{catalog_id}' not found")

        item = self._catalog_repo.get_item(catalog_id, item_id)
        if item is None or not item.is_visible:
            raise EntityNotFoundError(
                f"Item '{item_id}' not found in catalog '{catalog.name}'"
            )

        line = self._cart_store.add_item(item, quantity, catalog)
        if line is None:
            raise ValidationError(f"Cannot add {quantity} x '{item.name}' to the cart")
        return line
