"""ShippingPreferenceRepository backed by durable key-value storage."""

from __future__ import annotations

import json

from storefront.domain.exceptions import StorageError
from storefront.domain.model.order import ShippingInfo
from storefront.domain.repository.key_value_storage import KeyValueStorage
from storefront.domain.repository.shipping_preference_repository import (
    ShippingPreferenceRepository,
)

SHIPPING_INFO_KEY = "savedShippingInfo"
_FIELDS = ("name", "address", "phone", "email")


class JsonShippingPreferenceRepository(ShippingPreferenceRepository):

    def __init__(self, storage: KeyValueStorage, key: str = SHIPPING_INFO_KEY) -> None:
        self._storage = storage
        self._key = key

    def load(self) -> ShippingInfo | None:
        payload = self._storage.get(self._key)
        if payload is None:
            return None
        try:
            raw = json.loads(payload)
            return ShippingInfo(**{f: str(raw.get(f) or "") for f in _FIELDS})
        except (ValueError, TypeError, AttributeError) as exc:
            raise StorageError(f"Corrupt shipping preference under '{self._key}'") from exc

    def save(self, info: ShippingInfo) -> None:
        # Payment method is never part of the saved preference.
        raw = {f: getattr(info, f) for f in _FIELDS}
        self._storage.set(self._key, json.dumps(raw))

    def erase(self) -> None:
        self._storage.remove(self._key)
