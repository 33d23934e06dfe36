"""Abstract repository for the persisted cart lines."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.cart import CartLine


class CartRepository(ABC):

    @abstractmethod
    def load(self) -> list[CartLine]:
        """Return the persisted lines, or an empty list if none were saved.

        Raises StorageError if the stored payload cannot be read or decoded.
        """

    @abstractmethod
    def save(self, lines: tuple[CartLine, ...]) -> None:
        """Replace the persisted lines with *lines*."""
