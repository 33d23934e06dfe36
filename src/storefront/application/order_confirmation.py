"""Application service: Order confirmation (the Order Renderer entry point).

Reads the order handed off by checkout and renders it on demand.  With
no order present every operation is a no-op returning None, since the
shopper can always trigger rendering again.
"""

from __future__ import annotations

import logging
from pathlib import Path

from storefront.application.dto import OrderDTO, OrderLineItemDTO
from storefront.domain.exceptions import StorageError
from storefront.domain.model.order import Order
from storefront.domain.repository.order_handoff_repository import (
    OrderHandoffRepository,
)
from storefront.domain.service.order_summary import (
    DEFAULT_SHARE_BASE_URL,
    build_share_link,
    receipt_filename,
)
from storefront.domain.service.receipt_renderer import ReceiptRenderer

logger = logging.getLogger(__name__)


class OrderConfirmationHandler:

    def __init__(
        self,
        handoff_repo: OrderHandoffRepository,
        renderer: ReceiptRenderer,
        share_base_url: str = DEFAULT_SHARE_BASE_URL,
    ) -> None:
        self._handoff_repo = handoff_repo
        self._renderer = renderer
        self._share_base_url = share_base_url

    def current(self) -> OrderDTO | None:
        order = self._load()
        return self._to_dto(order) if order is not None else None

    def export_pdf(self, output_dir: Path) -> Path | None:
        """Write the receipt PDF into *output_dir* and return its path.

        Returns None when there is no order or the file cannot be written.
        """
        order = self._load()
        if order is None:
            return None
        path = output_dir / receipt_filename(order)
        content = self._renderer.render(order)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(content)
        except OSError as exc:
            logger.warning("Could not write receipt to %s: %s", path, exc)
            return None
        logger.info("Receipt written to %s", path)
        return path

    def share_link(self) -> str | None:
        order = self._load()
        if order is None:
            return None
        return build_share_link(order, self._share_base_url)

    def dismiss(self) -> None:
        """Discard the handed-off order once the shopper leaves the page."""
        try:
            self._handoff_repo.discard()
        except StorageError as exc:
            logger.warning("Could not discard handed-off order: %s", exc)

    # --- Internal helpers -----------------------------------------------------

    def _load(self) -> Order | None:
        try:
            return self._handoff_repo.load()
        except StorageError as exc:
            logger.warning("No usable order to confirm: %s", exc)
            return None

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(order: Order) -> OrderDTO:
        shipping = order.shipping_info
        return OrderDTO(
            customer_name=shipping.name,
            address=shipping.address,
            phone=shipping.phone,
            email=shipping.email,
            payment_method=order.payment_method.label,
            items=[
                OrderLineItemDTO(
                    name=item.name,
                    quantity=item.quantity,
                    unit_price=str(item.unit_price),
                    line_total=str(item.line_total),
                )
                for item in order.line_items
            ],
            total=str(order.total),
            created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        )
