"""Catalog records, as read from the managed backend.

Backend documents are loosely typed.  ``CatalogItem.from_record`` is the
read boundary: it either produces a fully-shaped item or raises, so the
cart never operates on partially-shaped data.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money

_PRICE_KEYS = ("unitPrice", "unit_price", "price")


@dataclass(frozen=True)
class Catalog:
    id: str
    name: str
    description: str = ""
    image_ref: str | None = None

    @staticmethod
    def from_record(raw: Mapping[str, Any]) -> Catalog:
        return Catalog(
            id=_required_str(raw, "id"),
            name=_required_str(raw, "name"),
            description=str(raw.get("description") or ""),
            image_ref=_optional_str(raw, "imageRef", "image_ref", "imageUrl"),
        )


@dataclass(frozen=True)
class CatalogItem:
    """A sellable item belonging to one catalog.

    The price is required: an item without a resolvable price can never
    be added to a cart.
    """

    id: str
    catalog_id: str
    name: str
    unit_price: Money
    description: str = ""
    image_ref: str | None = None
    tags: tuple[str, ...] = field(default_factory=tuple)
    is_featured: bool = False
    is_visible: bool = True

    @staticmethod
    def from_record(raw: Mapping[str, Any]) -> CatalogItem:
        """Validate a backend item record and build a CatalogItem.

        Raises ValidationError if identity, owning catalog, name or price
        is missing or malformed.
        """
        _require_mapping(raw)
        return CatalogItem._build(
            raw,
            item_id=_required_str(raw, "id"),
            catalog_id=_required_str(raw, "catalogId", "catalog_id"),
            name=_required_str(raw, "name"),
        )

    @staticmethod
    def from_cart_record(raw: Mapping[str, Any], catalog_id: str = "") -> CatalogItem:
        """Build an item handed straight to the cart.

        Only identity and price are required here.  The owning catalog
        defaults to *catalog_id* and the display name to the item id.
        """
        _require_mapping(raw)
        item_id = _required_str(raw, "id")
        return CatalogItem._build(
            raw,
            item_id=item_id,
            catalog_id=_optional_str(raw, "catalogId", "catalog_id") or catalog_id,
            name=_optional_str(raw, "name") or item_id,
        )

    @staticmethod
    def _build(
        raw: Mapping[str, Any], item_id: str, catalog_id: str, name: str
    ) -> CatalogItem:
        tags = raw.get("tags") or ()
        if isinstance(tags, str) or not all(isinstance(t, str) for t in tags):
            raise ValidationError("Item tags must be a list of strings")

        return CatalogItem(
            id=item_id,
            catalog_id=catalog_id,
            name=name,
            unit_price=_required_price(raw),
            description=str(raw.get("description") or ""),
            image_ref=_optional_str(raw, "imageRef", "image_ref", "imageUrl"),
            tags=tuple(tags),
            is_featured=bool(raw.get("isFeatured", raw.get("is_featured", False))),
            is_visible=bool(raw.get("isVisible", raw.get("is_visible", True))),
        )


# --- Record helpers -----------------------------------------------------------


def _require_mapping(raw: Any) -> None:
    if not isinstance(raw, Mapping):
        raise ValidationError(f"Item record must be a mapping, got {type(raw).__name__}")


def _lookup(raw: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if raw.get(key) is not None:
            return raw[key]
    return None


def _required_str(raw: Mapping[str, Any], *keys: str) -> str:
    value = _lookup(raw, *keys)
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"Record field '{keys[0]}' is required")
    return value.strip()


def _optional_str(raw: Mapping[str, Any], *keys: str) -> str | None:
    value = _lookup(raw, *keys)
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def _required_price(raw: Mapping[str, Any]) -> Money:
    value = _lookup(raw, *_PRICE_KEYS)
    if value is None or isinstance(value, bool):
        raise ValidationError("Record field 'unitPrice' is required")
    if not isinstance(value, (int, float, str, Decimal)):
        raise ValidationError(f"Invalid price: {value!r}")
    return Money.of(value)
