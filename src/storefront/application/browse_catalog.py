"""Application service: Browse Catalog use case (query)."""

from __future__ import annotations

from storefront.application.dto import CatalogItemDTO, CatalogViewDTO
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.catalog_repository import CatalogRepository


class BrowseCatalogHandler:

    def __init__(self, catalog_repo: CatalogRepository) -> None:
        self._catalog_repo = catalog_repo

    def handle(self, catalog_id: str) -> CatalogViewDTO:
        """Return the shopper-facing view of a catalog.

        Hidden items are left out; featured items come first, the rest
        keep the backend's order.
        """
        catalog = self._catalog_repo.get_catalog(catalog_id)
        if catalog is None:
            raise EntityNotFoundError(f"Catalog '{catalog_id}' not found")

        visible = [i for i in self._catalog_repo.list_items(catalog_id) if i.is_visible]
        visible.sort(key=lambda i: not i.is_featured)

        return CatalogViewDTO(
            id=catalog.id,
            name=catalog.name,
            description=catalog.description,
            items=[
                CatalogItemDTO(
                    id=item.id,
                    name=item.name,
                    description=item.description,
                    unit_price=str(item.unit_price),
                    tags=list(item.tags),
                    is_featured=item.is_featured,
                )
                for item in visible
            ],
        )
