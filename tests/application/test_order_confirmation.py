"""Integration tests for the order confirmation step (rendering on demand)."""

import json
import logging

from storefront.application.order_confirmation import OrderConfirmationHandler
from storefront.domain.service.order_summary import build_share_link
from storefront.infrastructure.persistence.json_order_handoff_repository import (
    ORDER_KEY,
    JsonOrderHandoffRepository,
)
from tests.builders import make_line, make_order
from tests.fakes import FakeReceiptRenderer, FakeStorage


def _setup(order=None):
    storage = FakeStorage()
    repo = JsonOrderHandoffRepository(storage)
    if order is not None:
        repo.save(order)
    renderer = FakeReceiptRenderer()
    return OrderConfirmationHandler(repo, renderer), storage, renderer


class TestWithOrder:

    def test_current_order_dto(self):
        order = make_order(make_line("B", qty=4, price="5.00"))
        handler, _, _ = _setup(order)
        dto = handler.current()
        assert dto.customer_name == "Ana Perez"
        assert dto.payment_method == "Cash on delivery"
        assert dto.total == "$20.00"
        assert [(i.name, i.quantity, i.unit_price, i.line_total) for i in dto.items] == [
            ("Item B", 4, "$5.00", "$20.00")
        ]
        assert dto.created_at == "2026-10-19 14:25 UTC"

    def test_export_pdf_writes_named_file(self, tmp_path):
        order = make_order(make_line("B", qty=4, price="5.00"))
        handler, _, renderer = _setup(order)
        path = handler.export_pdf(tmp_path / "receipts")
        assert path.name == "order-summer-sale-20261019-142501.pdf"
        assert path.read_bytes() == b"receipt $20.00"
        assert renderer.rendered == [order]

    def test_unwritable_output_dir_is_a_logged_noop(self, tmp_path, caplog):
        blocker = tmp_path / "afile"
        blocker.write_text("", encoding="utf-8")
        handler, _, _ = _setup(make_order())
        with caplog.at_level(logging.WARNING):
            assert handler.export_pdf(blocker) is None
        assert "Could not write receipt" in caplog.text
        assert handler.current() is not None

    def test_rendering_is_repeatable(self, tmp_path):
        handler, _, _ = _setup(make_order())
        first = handler.export_pdf(tmp_path).read_bytes()
        second = handler.export_pdf(tmp_path).read_bytes()
        assert first == second
        assert handler.share_link() == handler.share_link()

    def test_share_link_matches_stored_order(self):
        order = make_order(make_line("A", qty=2))
        handler, _, _ = _setup(order)
        assert handler.share_link() == build_share_link(order)

    def test_custom_share_base_url(self):
        storage = FakeStorage()
        repo = JsonOrderHandoffRepository(storage)
        repo.save(make_order())
        handler = OrderConfirmationHandler(
            repo, FakeReceiptRenderer(), share_base_url="https://example.test/"
        )
        assert handler.share_link().startswith("https://example.test/?text=")

    def test_dismiss_discards_order(self):
        handler, storage, _ = _setup(make_order())
        handler.dismiss()
        assert ORDER_KEY not in storage.data
        assert handler.current() is None


class TestWithoutOrder:

    def test_everything_is_a_noop(self, tmp_path):
        handler, _, renderer = _setup()
        assert handler.current() is None
        assert handler.export_pdf(tmp_path) is None
        assert handler.share_link() is None
        assert renderer.rendered == []
        assert list(tmp_path.iterdir()) == []

    def test_corrupt_handoff_is_a_noop(self, tmp_path):
        handler, storage, _ = _setup()
        storage.data[ORDER_KEY] = "{broken"
        assert handler.current() is None
        assert handler.export_pdf(tmp_path) is None

    def test_tampered_total_is_rejected(self):
        handler, storage, _ = _setup(make_order(make_line("A", qty=2, price="10.00")))
        raw = json.loads(storage.data[ORDER_KEY])
        raw["total"] = "1.00"
        storage.data[ORDER_KEY] = json.dumps(raw)
        assert handler.share_link() is None

    def test_unreadable_session_storage_is_a_noop(self):
        handler, storage, _ = _setup(make_order())
        storage.fail_reads = True
        assert handler.current() is None
