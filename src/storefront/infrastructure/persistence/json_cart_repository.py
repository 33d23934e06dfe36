"""CartRepository that stores the lines as JSON under one storage key."""

from __future__ import annotations

import json
from decimal import Decimal

from storefront.domain.exceptions import StorageError, ValidationError
from storefront.domain.model.cart import CartLine
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.key_value_storage import KeyValueStorage

CART_KEY = "shoppingCart"


class JsonCartRepository(CartRepository):

    def __init__(self, storage: KeyValueStorage, key: str = CART_KEY) -> None:
        self._storage = storage
        self._key = key

    # --- CartRepository interface ---------------------------------------------

    def load(self) -> list[CartLine]:
        payload = self._storage.get(self._key)
        if payload is None:
            return []
        try:
            return [self._to_domain(raw) for raw in json.loads(payload)]
        except (
            ValueError, TypeError, KeyError, ArithmeticError, ValidationError
        ) as exc:
            raise StorageError(f"Corrupt cart payload under '{self._key}'") from exc

    def save(self, lines: tuple[CartLine, ...]) -> None:
        self._storage.set(self._key, json.dumps([self._to_raw(line) for line in lines]))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(line: CartLine) -> dict:
        return {
            "item_id": line.item_id,
            "name": line.name,
            "unit_price": str(line.unit_price.amount),
            "currency": line.unit_price.currency,
            "quantity": line.quantity,
            "catalog_id": line.catalog_id,
            "catalog_name": line.catalog_name,
            "image_ref": line.image_ref,
        }

    @staticmethod
    def _to_domain(raw: dict) -> CartLine:
        return CartLine(
            item_id=raw["item_id"],
            name=raw["name"],
            unit_price=Money(Decimal(raw["unit_price"]), raw.get("currency", "USD")),
            quantity=raw["quantity"],
            catalog_id=raw["catalog_id"],
            catalog_name=raw.get("catalog_name"),
            image_ref=raw.get("image_ref"),
        )
