"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

Settings come from the environment:

- ``STOREFRONT_DATA_DIR``: where storage and catalog files live
  (default: ``<repo>/data``)
- ``STOREFRONT_SHIPPING_COST``: flat shipping cost (default: ``0``)
- ``STOREFRONT_SHARE_BASE_URL``: messaging deep-link base
  (default: ``https://wa.me/``)
"""

from __future__ import annotations

import os
from pathlib import Path

from storefront.application.cart_store import CartStore
from storefront.domain.model.value_objects import Money
from storefront.domain.service.order_summary import DEFAULT_SHARE_BASE_URL
from storefront.infrastructure.persistence.file_key_value_storage import (
    FileKeyValueStorage,
)
from storefront.infrastructure.persistence.json_cart_repository import (
    JsonCartRepository,
)
from storefront.infrastructure.persistence.json_catalog_repository import (
    JsonCatalogRepository,
)
from storefront.infrastructure.persistence.json_order_handoff_repository import (
    JsonOrderHandoffRepository,
)
from storefront.infrastructure.persistence.json_shipping_preference_repository import (
    JsonShippingPreferenceRepository,
)
from storefront.infrastructure.rendering.pdf_receipt_renderer import (
    PdfReceiptRenderer,
)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    return Path(os.environ.get("STOREFRONT_DATA_DIR") or _DEFAULT_DATA_DIR)


def shipping_cost() -> Money:
    return Money.of(os.environ.get("STOREFRONT_SHIPPING_COST") or "0")


def share_base_url() -> str:
    return os.environ.get("STOREFRONT_SHARE_BASE_URL") or DEFAULT_SHARE_BASE_URL


def local_storage() -> FileKeyValueStorage:
    return FileKeyValueStorage(data_dir() / "local_storage.json")


def session_storage() -> FileKeyValueStorage:
    return FileKeyValueStorage(data_dir() / "session_storage.json")


def catalog_repository() -> JsonCatalogRepository:
    return JsonCatalogRepository(
        data_dir() / "catalogs.json",
        data_dir() / "items.json",
    )


def cart_store() -> CartStore:
    return CartStore(JsonCartRepository(local_storage()), shipping_cost=shipping_cost())


def order_handoff_repository() -> JsonOrderHandoffRepository:
    return JsonOrderHandoffRepository(session_storage())


def shipping_preference_repository() -> JsonShippingPreferenceRepository:
    return JsonShippingPreferenceRepository(local_storage())


def receipt_renderer() -> PdfReceiptRenderer:
    return PdfReceiptRenderer()
