"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CheckoutForm:
    """Input: what the shopper typed into the checkout form."""

    name: str
    address: str
    phone: str
    email: str
    payment_method: str
    save_info: bool = False


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a single cart line as displayed to the user."""

    item_id: str
    name: str
    quantity: int
    unit_price: str  # formatted, e.g. "$15.00"
    line_total: str
    catalog_name: str | None


@dataclass(frozen=True)
class CartDTO:
    lines: list[CartLineDTO]
    item_count: int
    subtotal: str
    shipping_cost: str
    total: str


@dataclass(frozen=True)
class OrderLineItemDTO:
    name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a placed order as displayed on the confirmation page."""

    customer_name: str
    address: str
    phone: str
    email: str
    payment_method: str
    items: list[OrderLineItemDTO]
    total: str
    created_at: str


@dataclass(frozen=True)
class CatalogItemDTO:
    id: str
    name: str
    description: str
    unit_price: str
    tags: list[str]
    is_featured: bool


@dataclass(frozen=True)
class CatalogViewDTO:
    """Output: the shopper-facing view of one catalog."""

    id: str
    name: str
    description: str
    items: list[CatalogItemDTO]
