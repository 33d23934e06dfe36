"""Integration tests for the Checkout use case (order assembly).

Uses in-memory fakes, except where a real storage file is the point.
"""

import json
import logging

import pytest

from storefront.application.cart_store import CartStore
from storefront.application.checkout import CheckoutHandler
from storefront.application.dto import CheckoutForm
from storefront.domain.exceptions import CheckoutValidationError, EmptyCartError
from storefront.domain.model.order import PaymentMethod, ShippingInfo
from storefront.domain.model.value_objects import Money
from storefront.infrastructure.persistence.file_key_value_storage import (
    FileKeyValueStorage,
)
from storefront.infrastructure.persistence.json_cart_repository import JsonCartRepository
from storefront.infrastructure.persistence.json_order_handoff_repository import (
    ORDER_KEY,
    JsonOrderHandoffRepository,
)
from storefront.infrastructure.persistence.json_shipping_preference_repository import (
    SHIPPING_INFO_KEY,
    JsonShippingPreferenceRepository,
)
from tests.builders import PLACED_AT, make_catalog, make_item
from tests.fakes import FakeStorage


class _World:
    """A cart store plus checkout handler over fake local/session storage."""

    def __init__(self) -> None:
        self.local = FakeStorage()
        self.session = FakeStorage()
        self.store = CartStore(JsonCartRepository(self.local))
        self.handoff = JsonOrderHandoffRepository(self.session)
        self.handler = CheckoutHandler(
            cart_store=self.store,
            handoff_repo=self.handoff,
            preference_repo=JsonShippingPreferenceRepository(self.local),
            clock=lambda: PLACED_AT,
        )


def _form(**overrides) -> CheckoutForm:
    values = dict(
        name="Ana Perez",
        address="Calle Falsa 123, Springfield",
        phone="+54 9 1112345",
        email="ana@example.com",
        payment_method="cash",
        save_info=False,
    )
    values.update(overrides)
    return CheckoutForm(**values)


@pytest.fixture
def world() -> _World:
    w = _World()
    w.store.add_item(make_item("B", "5.00", name="Linen Scarf"), 4, make_catalog())
    return w


class TestCheckoutHappyPath:

    def test_order_snapshot(self, world):
        order = world.handler.handle(_form())
        assert order.total == Money.of("20.00")
        assert order.payment_method is PaymentMethod.CASH
        assert order.shipping_info.name == "Ana Perez"
        assert order.created_at == PLACED_AT
        assert [(i.name, i.quantity, str(i.unit_price), str(i.line_total))
                for i in order.line_items] == [("Linen Scarf", 4, "$5.00", "$20.00")]

    def test_cart_is_cleared(self, world):
        world.handler.handle(_form())
        assert world.store.is_empty()

    def test_total_excludes_shipping(self):
        w = _World()
        w.store = CartStore(JsonCartRepository(w.local), shipping_cost=Money.of("5"))
        w.handler = CheckoutHandler(
            w.store,
            w.handoff,
            JsonShippingPreferenceRepository(w.local),
            clock=lambda: PLACED_AT,
        )
        w.store.add_item(make_item("A", "10"), 1)
        assert w.handler.handle(_form()).total == Money.of("10")

    def test_order_handed_off_to_session_storage(self, world):
        order = world.handler.handle(_form())
        assert world.handoff.load() == order

    def test_later_cart_mutations_do_not_touch_order(self, world):
        order = world.handler.handle(_form())
        items_before = order.line_items
        world.store.add_item(make_item("B", "5.00"), 10)
        world.store.clear()
        assert order.line_items == items_before
        assert order.total == Money.of("20.00")


class TestCheckoutGating:

    def test_empty_cart_rejected(self):
        w = _World()
        with pytest.raises(EmptyCartError):
            w.handler.handle(_form())
        assert ORDER_KEY not in w.session.data

    def test_invalid_fields_reported_together(self, world):
        with pytest.raises(CheckoutValidationError) as exc_info:
            world.handler.handle(_form(name="Al", email="bad", payment_method="card"))
        assert set(exc_info.value.field_errors) == {"name", "email", "payment_method"}

    def test_invalid_form_leaves_cart_untouched(self, world):
        with pytest.raises(CheckoutValidationError):
            world.handler.handle(_form(phone="12"))
        assert world.store.get_line("B").quantity == 4
        assert ORDER_KEY not in world.session.data


class TestShippingPreference:

    def test_save_info_stores_shipping_without_payment(self, world):
        world.handler.handle(_form(save_info=True, payment_method="transfer"))
        saved = json.loads(world.local.data[SHIPPING_INFO_KEY])
        assert saved == {
            "name": "Ana Perez",
            "address": "Calle Falsa 123, Springfield",
            "phone": "+54 9 1112345",
            "email": "ana@example.com",
        }

    def test_saved_info_used_for_prefill(self, world):
        world.handler.handle(_form(save_info=True))
        assert world.handler.saved_shipping_info() == ShippingInfo(
            name="Ana Perez",
            address="Calle Falsa 123, Springfield",
            phone="+54 9 1112345",
            email="ana@example.com",
        )

    def test_opting_out_erases_saved_info(self, world):
        world.local.data[SHIPPING_INFO_KEY] = json.dumps({"name": "Old"})
        world.handler.handle(_form(save_info=False))
        assert SHIPPING_INFO_KEY not in world.local.data
        assert world.handler.saved_shipping_info() is None

    def test_corrupt_saved_info_ignored(self, world, caplog):
        world.local.data[SHIPPING_INFO_KEY] = "{oops"
        with caplog.at_level(logging.WARNING):
            assert world.handler.saved_shipping_info() is None
        assert "saved shipping details" in caplog.text

    def test_non_string_saved_info_ignored(self, world):
        world.local.data[SHIPPING_INFO_KEY] = 5
        assert world.handler.saved_shipping_info() is None

    def test_non_string_value_in_storage_file_ignored(self, tmp_path):
        path = tmp_path / "local_storage.json"
        path.write_text(json.dumps({SHIPPING_INFO_KEY: 5}), encoding="utf-8")
        handler = CheckoutHandler(
            cart_store=CartStore(JsonCartRepository(FileKeyValueStorage(path))),
            handoff_repo=JsonOrderHandoffRepository(FakeStorage()),
            preference_repo=JsonShippingPreferenceRepository(FileKeyValueStorage(path)),
        )
        assert handler.saved_shipping_info() is None


class TestCheckoutStorageFailures:

    def test_local_storage_failure_still_places_order(self, world, caplog):
        world.local.fail_writes = True
        with caplog.at_level(logging.WARNING):
            order = world.handler.handle(_form(save_info=True))
        assert order.total == Money.of("20.00")
        assert world.store.is_empty()
        assert "Shipping preference not updated" in caplog.text

    def test_session_storage_failure_still_returns_order(self, world, caplog):
        world.session.fail_writes = True
        with caplog.at_level(logging.WARNING):
            order = world.handler.handle(_form())
        assert order.total == Money.of("20.00")
        assert world.store.is_empty()
        assert "not handed off" in caplog.text
