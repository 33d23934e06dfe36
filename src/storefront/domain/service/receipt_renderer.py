"""Abstract receipt renderer.

Turns a placed Order into a downloadable document.  Implementations
must be read-only with respect to the Order and produce identical
output for the same Order.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import Order


class ReceiptRenderer(ABC):

    @abstractmethod
    def render(self, order: Order) -> bytes:
        """Return the rendered document."""
