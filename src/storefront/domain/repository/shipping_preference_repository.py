"""Abstract repository for the shopper's saved shipping details."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import ShippingInfo


class ShippingPreferenceRepository(ABC):

    @abstractmethod
    def load(self) -> ShippingInfo | None:
        """Return the saved shipping details, or None."""

    @abstractmethod
    def save(self, info: ShippingInfo) -> None:
        """Remember *info* for prefilling a future checkout."""

    @abstractmethod
    def erase(self) -> None:
        """Forget any saved shipping details."""
