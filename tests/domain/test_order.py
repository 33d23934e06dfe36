"""Unit tests for the Order aggregate and checkout validation rules."""

from dataclasses import FrozenInstanceError

import pytest

from storefront.domain.exceptions import (
    CheckoutValidationError,
    EmptyCartError,
    ValidationError,
)
from storefront.domain.model.order import (
    Order,
    OrderLineItem,
    PaymentMethod,
    ShippingInfo,
)
from storefront.domain.model.value_objects import Money
from tests.builders import PLACED_AT, make_line, make_order, make_shipping


class TestShippingInfo:

    def test_valid_fields_are_trimmed(self):
        info = ShippingInfo.create(
            name="  Ana Perez ",
            address="Calle Falsa 123",
            phone="+54 9 11 1234",
            email="ana@example.com",
        )
        assert info.name == "Ana Perez"

    def test_every_invalid_field_reported(self):
        with pytest.raises(CheckoutValidationError) as exc_info:
            ShippingInfo.create(name="Al", address="abc", phone="12ab", email="nope")
        assert set(exc_info.value.field_errors) == {"name", "address", "phone", "email"}

    def test_only_offending_field_reported(self):
        with pytest.raises(CheckoutValidationError) as exc_info:
            ShippingInfo.create(
                name="Ana Perez",
                address="Calle Falsa 123",
                phone="1234567",
                email="ana@example.com",
            )
        assert list(exc_info.value.field_errors) == ["phone"]

    @pytest.mark.parametrize("phone", ["12345678", "+5491112345678", "+54 9 11 12 34"])
    def test_phone_accepted(self, phone):
        ShippingInfo.create("Ana Perez", "Calle Falsa 123", phone, "ana@example.com")

    @pytest.mark.parametrize("phone", ["1234567", "1234567890123456", "555-123-4567"])
    def test_phone_rejected(self, phone):
        with pytest.raises(CheckoutValidationError):
            ShippingInfo.create("Ana Perez", "Calle Falsa 123", phone, "ana@example.com")


class TestPaymentMethod:

    def test_parse(self):
        assert PaymentMethod.parse("cash") is PaymentMethod.CASH
        assert PaymentMethod.parse(" Transfer ") is PaymentMethod.TRANSFER

    def test_unknown_rejected(self):
        with pytest.raises(ValidationError, match="transfer, cash"):
            PaymentMethod.parse("card")

    def test_labels(self):
        assert PaymentMethod.TRANSFER.label == "Bank transfer"
        assert PaymentMethod.CASH.label == "Cash on delivery"


class TestOrderCreation:

    def test_total_is_sum_of_line_totals(self):
        order = make_order(make_line("A", qty=2, price="10.00"), make_line("B", qty=1, price="5.00"))
        assert order.total == Money.of("25.00")
        assert [i.line_total for i in order.line_items] == [Money.of("20.00"), Money.of("5.00")]

    def test_stamps_created_at(self):
        assert make_order().created_at == PLACED_AT

    def test_empty_lines_rejected(self):
        with pytest.raises(EmptyCartError):
            Order.create(make_shipping(), PaymentMethod.CASH, [])

    def test_line_items_are_a_tuple_copy(self):
        lines = [make_line("A", qty=2)]
        order = make_order(*lines)
        lines.append(make_line("B"))
        assert len(order.line_items) == 1

    def test_order_is_frozen(self):
        order = make_order()
        with pytest.raises(FrozenInstanceError):
            order.total = Money.of("1")

    def test_catalog_label_from_single_catalog(self):
        assert make_order(make_line("A"), make_line("B")).catalog_label == "Summer Sale"

    def test_no_catalog_label_for_mixed_catalogs(self):
        order = make_order(make_line("A"), make_line("B", catalog_name="Winter"))
        assert order.catalog_label is None


class TestOrderReconstitution:

    def test_mismatched_total_rejected(self):
        order = make_order(make_line("A", qty=2, price="10.00"))
        with pytest.raises(ValidationError, match="does not match"):
            Order(
                shipping_info=order.shipping_info,
                payment_method=order.payment_method,
                line_items=order.line_items,
                total=Money.of("19.99"),
            )

    def test_mismatched_line_total_rejected(self):
        with pytest.raises(ValidationError, match="quantity x unit price"):
            OrderLineItem(
                item_id="A",
                name="Item A",
                quantity=2,
                unit_price=Money.of("10"),
                line_total=Money.of("15"),
            )
