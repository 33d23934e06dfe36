"""Application service: Checkout (the Order Assembler).

Checkout is a single "submit and empty" action:

1. Refuse an empty cart.
2. Validate the form; every invalid field is reported at once.
3. Snapshot the cart into an immutable Order.
4. Save or erase the shopper's shipping preference.
5. Hand the Order to session storage for the confirmation step.
6. Clear the cart.

Steps 4 and 5 are best-effort: storage failures are logged and never
undo an order that was already assembled.  The cart is only cleared
once the Order exists.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from storefront.application.cart_store import CartStore
from storefront.application.dto import CheckoutForm
from storefront.domain.exceptions import (
    CheckoutValidationError,
    EmptyCartError,
    StorageError,
    ValidationError,
)
from storefront.domain.model.order import Order, PaymentMethod, ShippingInfo
from storefront.domain.repository.order_handoff_repository import (
    OrderHandoffRepository,
)
from storefront.domain.repository.shipping_preference_repository import (
    ShippingPreferenceRepository,
)

logger = logging.getLogger(__name__)


class CheckoutHandler:

    def __init__(
        self,
        cart_store: CartStore,
        handoff_repo: OrderHandoffRepository,
        preference_repo: ShippingPreferenceRepository,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._cart_store = cart_store
        self._handoff_repo = handoff_repo
        self._preference_repo = preference_repo
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def handle(self, form: CheckoutForm) -> Order:
        """Place an order from the current cart.

        Raises EmptyCartError if the cart is empty and
        CheckoutValidationError (with per-field messages) if the form is
        invalid.  Neither leaves any trace: the cart is untouched.
        """
        if self._cart_store.is_empty():
            raise EmptyCartError("Your cart is empty")

        shipping, payment_method = self._validate(form)

        order = Order.create(
            shipping_info=shipping,
            payment_method=payment_method,
            lines=self._cart_store.lines(),
            created_at=self._clock(),
        )

        self._remember_shipping(shipping, form.save_info)
        self._hand_off(order)
        self._cart_store.clear()

        logger.info(
            "Order placed: %d line(s), total %s, payment %s",
            len(order.line_items),
            order.total,
            payment_method.value,
        )
        return order

    def saved_shipping_info(self) -> ShippingInfo | None:
        """Shipping details saved by a previous checkout, for prefill."""
        try:
            return self._preference_repo.load()
        except StorageError as exc:
            logger.warning("Could not read saved shipping details: %s", exc)
            return None

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _validate(form: CheckoutForm) -> tuple[ShippingInfo, PaymentMethod]:
        errors: dict[str, str] = {}
        shipping = None
        payment_method = None

        try:
            shipping = ShippingInfo.create(
                name=form.name,
                address=form.address,
                phone=form.phone,
                email=form.email,
            )
        except CheckoutValidationError as exc:
            errors.update(exc.field_errors)

        try:
            payment_method = PaymentMethod.parse(form.payment_method)
        except ValidationError as exc:
            errors["payment_method"] = str(exc)

        if errors:
            raise CheckoutValidationError(errors)
        return shipping, payment_method

    def _remember_shipping(self, shipping: ShippingInfo, save_info: bool) -> None:
        try:
            if save_info:
                self._preference_repo.save(shipping)
            else:
                self._preference_repo.erase()
        except StorageError as exc:
            logger.warning("Shipping preference not updated: %s", exc)

    def _hand_off(self, order: Order) -> None:
        try:
            self._handoff_repo.save(order)
        except StorageError as exc:
            logger.warning("Order not handed off to session storage: %s", exc)
