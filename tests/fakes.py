"""In-memory fakes for testing.

These implement the same abstract interfaces as the real adapters but
keep everything in a dict. No file I/O, no side effects.
"""

from __future__ import annotations

from storefront.domain.exceptions import CollaboratorError, StorageError
from storefront.domain.model.catalog import Catalog, CatalogItem
from storefront.domain.model.order import Order
from storefront.domain.repository.catalog_repository import CatalogRepository
from storefront.domain.repository.key_value_storage import KeyValueStorage
from storefront.domain.service.assistants import (
    ImageGenerationService,
    TagSuggestionService,
)
from storefront.domain.service.receipt_renderer import ReceiptRenderer


class FakeStorage(KeyValueStorage):
    """Dict-backed storage that can be told to fail like a full quota."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(initial or {})
        self.fail_reads = False
        self.fail_writes = False
        self.writes = 0

    def get(self, key: str) -> str | None:
        if self.fail_reads:
            raise StorageError("storage unavailable")
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise StorageError("quota exceeded")
        self.writes += 1
        self.data[key] = value

    def remove(self, key: str) -> None:
        if self.fail_writes:
            raise StorageError("quota exceeded")
        self.data.pop(key, None)


class FakeCatalogRepository(CatalogRepository):

    def __init__(
        self,
        catalogs: list[Catalog] | None = None,
        items: list[CatalogItem] | None = None,
    ) -> None:
        self._catalogs = {c.id: c for c in catalogs or []}
        self._items = list(items or [])

    def get_catalog(self, catalog_id: str) -> Catalog | None:
        return self._catalogs.get(catalog_id)

    def list_items(self, catalog_id: str) -> list[CatalogItem]:
        return [i for i in self._items if i.catalog_id == catalog_id]


class FakeReceiptRenderer(ReceiptRenderer):

    def __init__(self) -> None:
        self.rendered: list[Order] = []

    def render(self, order: Order) -> bytes:
        self.rendered.append(order)
        return f"receipt {order.total}".encode()


class FakeTagSuggestionService(TagSuggestionService):

    def __init__(self, tags: list[str] | None = None, fail: bool = False) -> None:
        self._tags = tags or []
        self._fail = fail
        self.calls: list[str] = []

    def suggest(self, description: str) -> list[str]:
        self.calls.append(description)
        if self._fail:
            raise CollaboratorError("model unavailable")
        return list(self._tags)


class FakeImageGenerationService(ImageGenerationService):

    def __init__(self, image_ref: str = "", fail: bool = False) -> None:
        self._image_ref = image_ref
        self._fail = fail

    def generate(self, name: str, description: str) -> str:
        if self._fail:
            raise CollaboratorError("generation failed")
        return self._image_ref
