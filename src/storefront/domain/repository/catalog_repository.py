"""Abstract read-only repository for catalogs and their items.

Defined in the domain layer so the domain never depends on the managed
backend.  Implementations validate raw documents at this boundary and
only ever return fully-shaped records.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.catalog import Catalog, CatalogItem


class CatalogRepository(ABC):

    @abstractmethod
    def get_catalog(self, catalog_id: str) -> Catalog | None:
        """Return a catalog by its ID, or None if not found."""

    @abstractmethod
    def list_items(self, catalog_id: str) -> list[CatalogItem]:
        """Return every item of a catalog, visible or not."""

    def get_item(self, catalog_id: str, item_id: str) -> CatalogItem | None:
        for item in self.list_items(catalog_id):
            if item.id == item_id:
                return item
        return None
