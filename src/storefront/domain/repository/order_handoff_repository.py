"""Abstract repository for handing a placed Order to the confirmation step.

Backed by session-scoped storage: the order survives the redirect to
the confirmation page but not the end of the browsing session.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import Order


class OrderHandoffRepository(ABC):

    @abstractmethod
    def save(self, order: Order) -> None:
        """Store *order* as the most recently placed order."""

    @abstractmethod
    def load(self) -> Order | None:
        """Return the handed-off order, or None if there is none."""

    @abstractmethod
    def discard(self) -> None:
        """Forget the handed-off order."""
