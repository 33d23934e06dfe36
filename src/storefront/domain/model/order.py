"""Order aggregate: the immutable checkout snapshot.

An Order is created once per completed checkout and never changes
afterwards.  Its line items are copied by value from the cart, so later
cart mutations cannot reach it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from storefront.domain.exceptions import (
    CheckoutValidationError,
    EmptyCartError,
    ValidationError,
)
from storefront.domain.model.cart import CartLine
from storefront.domain.model.value_objects import Money, Quantity

# ---------------------------------------------------------------------------
# Constants for checkout rules
# ---------------------------------------------------------------------------
MIN_NAME_LENGTH = 3
MIN_ADDRESS_LENGTH = 5
PHONE_PATTERN = re.compile(r"^[0-9+ ]{8,15}$")
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class PaymentMethod(Enum):
    TRANSFER = "transfer"
    CASH = "cash"

    @property
    def label(self) -> str:
        return _PAYMENT_LABELS[self]

    @staticmethod
    def parse(value: str | None) -> PaymentMethod:
        try:
            return PaymentMethod((value or "").strip().lower())
        except ValueError as exc:
            choices = ", ".join(m.value for m in PaymentMethod)
            raise ValidationError(
                f"Payment method must be one of: {choices}"
            ) from exc


_PAYMENT_LABELS = {
    PaymentMethod.TRANSFER: "Bank transfer",
    PaymentMethod.CASH: "Cash on delivery",
}


@dataclass(frozen=True)
class ShippingInfo:
    name: str
    address: str
    phone: str
    email: str

    @staticmethod
    def create(name: str, address: str, phone: str, email: str) -> ShippingInfo:
        """Validate every field and build ShippingInfo.

        All fields are checked before failing so the caller can report
        every problem at once.
        """
        info = ShippingInfo(
            name=(name or "").strip(),
            address=(address or "").strip(),
            phone=(phone or "").strip(),
            email=(email or "").strip(),
        )
        errors = info.field_errors()
        if errors:
            raise CheckoutValidationError(errors)
        return info

    def field_errors(self) -> dict[str, str]:
        errors: dict[str, str] = {}
        if len(self.name) < MIN_NAME_LENGTH:
            errors["name"] = f"Name must be at least {MIN_NAME_LENGTH} characters"
        if len(self.address) < MIN_ADDRESS_LENGTH:
            errors["address"] = (
                f"Address must be at least {MIN_ADDRESS_LENGTH} characters"
            )
        if not PHONE_PATTERN.match(self.phone):
            errors["phone"] = "Phone must be 8-15 digits, '+' or spaces"
        if not EMAIL_PATTERN.match(self.email):
            errors["email"] = "Invalid email address"
        return errors


@dataclass(frozen=True)
class OrderLineItem:
    """Value copy of a cart line at checkout time."""

    item_id: str
    name: str
    quantity: int
    unit_price: Money
    line_total: Money

    def __post_init__(self) -> None:
        Quantity(self.quantity)
        if self.line_total != self.unit_price * self.quantity:
            raise ValidationError(
                f"Line total for {self.name} does not equal quantity x unit price"
            )

    @staticmethod
    def from_cart_line(line: CartLine) -> OrderLineItem:
        return OrderLineItem(
            item_id=line.item_id,
            name=line.name,
            quantity=line.quantity,
            unit_price=line.unit_price,
            line_total=line.unit_price * line.quantity,
        )


@dataclass(frozen=True)
class Order:
    """Immutable snapshot of a completed checkout.

    Use the ``Order.create()`` factory for new orders; it copies the
    cart lines and computes ``total``.  The constructor checks that the
    stored total still equals the exact sum of the line totals, so a
    tampered snapshot cannot be reconstituted from storage.
    """

    shipping_info: ShippingInfo
    payment_method: PaymentMethod
    line_items: tuple[OrderLineItem, ...]
    total: Money
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    catalog_label: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.line_items, tuple):
            object.__setattr__(self, "line_items", tuple(self.line_items))
        if not self.line_items:
            raise EmptyCartError("Order must contain at least one item")
        if self.total != _sum_line_totals(self.line_items):
            raise ValidationError(
                f"Order total {self.total} does not match its line items"
            )

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        shipping_info: ShippingInfo,
        payment_method: PaymentMethod,
        lines: tuple[CartLine, ...] | list[CartLine],
        created_at: datetime | None = None,
    ) -> Order:
        if not lines:
            raise EmptyCartError("Cannot place an order with an empty cart")

        items = tuple(OrderLineItem.from_cart_line(line) for line in lines)
        return Order(
            shipping_info=shipping_info,
            payment_method=payment_method,
            line_items=items,
            total=_sum_line_totals(items),
            created_at=created_at or datetime.now(timezone.utc),
            catalog_label=_single_catalog_name(lines),
        )

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.line_items)


def _sum_line_totals(items: tuple[OrderLineItem, ...]) -> Money:
    result = Money.zero(items[0].line_total.currency)
    for item in items:
        result = result + item.line_total
    return result


def _single_catalog_name(lines) -> str | None:
    names = {line.catalog_name for line in lines}
    if len(names) == 1:
        return names.pop()
    return None
