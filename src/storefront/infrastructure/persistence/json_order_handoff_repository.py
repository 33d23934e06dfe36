"""OrderHandoffRepository that stores the order as JSON in session storage."""

from __future__ import annotations

import json
from datetime import datetime
from decimal import Decimal

from storefront.domain.exceptions import StorageError, ValidationError
from storefront.domain.model.order import (
    Order,
    OrderLineItem,
    PaymentMethod,
    ShippingInfo,
)
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.key_value_storage import KeyValueStorage
from storefront.domain.repository.order_handoff_repository import (
    OrderHandoffRepository,
)

ORDER_KEY = "orderDetails"


class JsonOrderHandoffRepository(OrderHandoffRepository):

    def __init__(self, storage: KeyValueStorage, key: str = ORDER_KEY) -> None:
        self._storage = storage
        self._key = key

    # --- OrderHandoffRepository interface -------------------------------------

    def save(self, order: Order) -> None:
        self._storage.set(self._key, json.dumps(self._to_raw(order)))

    def load(self) -> Order | None:
        payload = self._storage.get(self._key)
        if payload is None:
            return None
        try:
            return self._to_domain(json.loads(payload))
        except (
            ValueError, TypeError, KeyError, ArithmeticError, ValidationError
        ) as exc:
            raise StorageError(f"Corrupt order payload under '{self._key}'") from exc

    def discard(self) -> None:
        self._storage.remove(self._key)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        shipping = order.shipping_info
        return {
            "shipping": {
                "name": shipping.name,
                "address": shipping.address,
                "phone": shipping.phone,
                "email": shipping.email,
            },
            "payment_method": order.payment_method.value,
            "items": [
                {
                    "item_id": item.item_id,
                    "name": item.name,
                    "quantity": item.quantity,
                    "unit_price": str(item.unit_price.amount),
                    "line_total": str(item.line_total.amount),
                    "currency": item.unit_price.currency,
                }
                for item in order.line_items
            ],
            "total": str(order.total.amount),
            "currency": order.total.currency,
            "created_at": order.created_at.isoformat(),
            "catalog_label": order.catalog_label,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        items = tuple(
            OrderLineItem(
                item_id=i["item_id"],
                name=i["name"],
                quantity=i["quantity"],
                unit_price=Money(Decimal(i["unit_price"]), i.get("currency", "USD")),
                line_total=Money(Decimal(i["line_total"]), i.get("currency", "USD")),
            )
            for i in raw["items"]
        )
        # Reconstitute without re-validating the form: it was valid when placed.
        return Order(
            shipping_info=ShippingInfo(**raw["shipping"]),
            payment_method=PaymentMethod(raw["payment_method"]),
            line_items=items,
            total=Money(Decimal(raw["total"]), raw.get("currency", "USD")),
            created_at=datetime.fromisoformat(raw["created_at"]),
            catalog_label=raw.get("catalog_label"),
        )
